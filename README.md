# sfaregex

A compact regular expression engine. A pattern goes through a lexer, a
recursive descent parser, a Thompson-style NFA, epsilon removal and the
subset construction, and comes out as a deterministic finite automaton
(DFA). That DFA can then be turned into a *simultaneous finite automaton*
(SFA).

An SFA state records, for every DFA state, where the DFA would end up after
reading some piece of input. A long input can therefore be split into chunks
that are scanned independently, and the chunk results are composed
afterwards to get the DFA's verdict for the whole input.

## Pattern syntax

| Syntax   | Meaning                                   |
|----------|-------------------------------------------|
| `a`      | the literal character `a`                 |
| `ab`     | concatenation                             |
| `a\|b`   | alternation                               |
| `a*`     | zero or more repetitions                  |
| `a+`     | one or more repetitions                   |
| `( … )`  | grouping                                  |
| `\x`     | the character `x` taken literally         |

An empty alternative, as in `(a|)`, matches the empty string. Matching is
always against the whole input.

Grammar errors raise `sfaregex.parser.RegexSyntaxError` (a `ValueError`
carrying the `expected` and `actual` token types). A pattern that ends in a
lone backslash raises `ValueError` from the lexer.

## Using the library

```python
from sfaregex.regex import compile

pattern = compile("(ab|abab)*X")
pattern.match("ababX")   # True
pattern.match("abaX")    # False
pattern.dfa              # the underlying sfaregex.dfa.DFA
```

Working with the automata directly:

```python
from sfaregex.node import Context
from sfaregex.nfa import nfa_to_dfa
from sfaregex.parser import parse
from sfaregex.sfa import build_sfa

ast = parse("(ab|abab)*X")             # a tree of Character/Union/Concat/Star/Plus
nfa = ast.assemble(Context()).build()  # sfaregex.nfa.NFA
dfa = nfa_to_dfa(nfa)                  # removes epsilon moves, then subset construction
sfa = build_sfa(dfa)

dfa.match("ababX")             # True
sfa.match("ababababX", 4)      # split into 4 chunks, scanned on 4 threads
```

`SFA.match` raises `ValueError` when the number of chunks is below 1.
`DFA` also offers `all_states()`, `all_symbols()` and an in-place
`minimize()`; `str(dfa)` lists its transition rules one per line.

A character that never occurs in the pattern has no transition; the
automaton then falls back to state `q0`, which for a compiled pattern is its
start state.

### Graphviz output

`sfaregex.dot.dfa_to_dot(dfa)` returns a DOT description of a DFA, and
`sfaregex.dot.write_dot(dfa, name)` writes it to `<name>.dot` and returns
the path. `SFA.to_dfa()` gives the SFA's own transition graph as a DFA, so
both kinds of automaton can be drawn.

## Command line

```
sfaregex
```

compiles a pattern (by default `(ab|abab)*X`), writes `dfa.dot` and
`sfa.dot`, reads a UTF-8 text file (by default `./testdata/abab.txt`) and
prints, for each matcher, the time taken in microseconds and the result:
Python's `re` (using `search`), the DFA, and the SFA at each chunk count
(by default 1 and 20).

Options:

| Option                | Meaning                                           |
|-----------------------|---------------------------------------------------|
| `-e`, `--regex`       | pattern to compile                                |
| `-i`, `--input`       | file holding the target text                      |
| `-p`, `--parallel N`  | chunk count for SFA matching; may be repeated     |
| `--dot-dir DIR`       | directory for `dfa.dot` and `sfa.dot` (default `.`) |

The package ships no input file; the default path must exist, or another
file must be given with `--input`.

## What it does not do

- Only whole-input matching: there is no searching, no match positions and
  no capture groups.
- No character classes, `.`, `?`, counted repetition or anchors.
- It draws automata only as DOT text; rendering them to images needs a
  separate Graphviz installation.

## Running the tests

```
pip install -e ".[test]"
pytest
```