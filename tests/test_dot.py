from sfaregex.common import RuleArg, State
from sfaregex.dfa import DFA
from sfaregex.dot import dfa_to_dot, write_dot


def _sample() -> DFA:
    q0, q1 = State(0), State(1)
    return DFA(
        initial=q0,
        accepts={q1},
        rules={RuleArg(q0, "a"): q1, RuleArg(q1, "a"): q1, RuleArg(q1, '"'): q0},
    )


def test_graph_header_and_footer():
    text = dfa_to_dot(_sample())
    lines = text.splitlines()
    assert lines[0] == "digraph DFA {"
    assert lines[1] == "\trankdir=LR;"
    assert lines[-1] == "}"


def test_accepting_state_is_double_circle():
    lines = dfa_to_dot(_sample()).splitlines()
    q1_line = next(line for line in lines if line.startswith('\t"q1" ['))
    q0_line = next(line for line in lines if line.startswith('\t"q0" ['))
    assert 'shape="doublecircle"' in q1_line
    assert "shape" not in q0_line


def test_start_point_and_initial_edge():
    text = dfa_to_dot(_sample())
    assert 'shape="point"' in text
    initial_edge = next(line for line in text.splitlines() if line.startswith('\t"" -> '))
    assert '"q0"' in initial_edge
    assert 'len="2"' in initial_edge


def test_one_labelled_edge_per_rule():
    dfa = _sample()
    labelled = [line for line in dfa_to_dot(dfa).splitlines() if "label=" in line]
    assert len(labelled) == len(dfa.rules)
    assert any("label=\"'a'\"" in line for line in labelled)


def test_quote_symbol_is_escaped():
    assert "label=\"'\\\"'\"" in dfa_to_dot(_sample())


def test_write_dot_creates_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    dfa = _sample()
    path = write_dot(dfa, "graph")
    assert path.name == "graph.dot"
    assert (tmp_path / "graph.dot").read_text(encoding="utf-8") == dfa_to_dot(dfa)