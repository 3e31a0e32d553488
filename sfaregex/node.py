"""Syntax tree nodes of a regular expression and their NFA fragments."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from .common import State
from .nfa import EPSILON, Fragment


@dataclass
class Context:
    """Hands out increasing state numbers, starting at 0."""

    n: int = -1

    def increment(self) -> int:
        """Advance the counter and return the new number."""
        self.n += 1
        return self.n


class Node(ABC):
    """A node of the regular expression syntax tree."""

    @abstractmethod
    def assemble(self, ctx: Context) -> Fragment:
        """Build the NFA fragment for the subtree rooted at this node."""

    @abstractmethod
    def subtree_string(self) -> str:
        """Render the subtree rooted at this node, with terminal colours."""

    @property
    def kind(self) -> str:
        """Name of the node type."""
        return type(self).__name__

    def __str__(self) -> str:
        return self.subtree_string()


@dataclass(frozen=True)
class Character(Node):
    """A single literal symbol."""

    value: str

    def assemble(self, ctx: Context) -> Fragment:
        """``q1 --value--> q2`` with q1 initial and q2 accepting."""
        fragment = Fragment()
        q1 = State(ctx.increment())
        q2 = State(ctx.increment())
        fragment.add_rule(q1, self.value, q2)
        fragment.initial = q1
        fragment.accepts.add(q2)
        return fragment

    def subtree_string(self) -> str:
        return f"\x1b[32m{self.kind}('{self.value}')\x1b[32m"


@dataclass(frozen=True)
class Union(Node):
    """Alternation of two subexpressions."""

    left: Node
    right: Node

    def assemble(self, ctx: Context) -> Fragment:
        """A new initial state with epsilon moves into both operands."""
        first = self.left.assemble(ctx)
        second = self.right.assemble(ctx)
        start = State(ctx.increment())

        fragment = first.merge_rule(second)
        fragment.add_rule(start, EPSILON, first.initial)
        fragment.add_rule(start, EPSILON, second.initial)

        fragment.initial = start
        fragment.accepts = fragment.accepts | first.accepts | second.accepts
        return fragment

    def subtree_string(self) -> str:
        return (
            f"\x1b[36m{self.kind}({self.left.subtree_string()}, "
            f"{self.right.subtree_string()}\x1b[36m)\x1b[0m"
        )


@dataclass(frozen=True)
class Concat(Node):
    """Concatenation of two subexpressions."""

    left: Node
    right: Node

    def assemble(self, ctx: Context) -> Fragment:
        """Epsilon moves from the first operand's accept states to the second's start."""
        first = self.left.assemble(ctx)
        second = self.right.assemble(ctx)

        fragment = first.merge_rule(second)
        for state in first.accepts:
            fragment.add_rule(state, EPSILON, second.initial)

        fragment.initial = first.initial
        fragment.accepts = fragment.accepts | second.accepts
        return fragment

    def subtree_string(self) -> str:
        return (
            f"\x1b[31m{self.kind}({self.left.subtree_string()}, "
            f"{self.right.subtree_string()}\x1b[31m)\x1b[0m"
        )


@dataclass(frozen=True)
class Star(Node):
    """Zero or more repetitions of a subexpression."""

    operand: Node

    def assemble(self, ctx: Context) -> Fragment:
        """Loop the operand with epsilon moves; its start and a new end state accept."""
        inner = self.operand.assemble(ctx)
        fragment = inner.create_skeleton()

        start = State(ctx.increment())
        end = State(ctx.increment())

        fragment.add_rule(start, EPSILON, end)
        fragment.add_rule(start, EPSILON, inner.initial)
        for state in inner.accepts:
            fragment.add_rule(state, EPSILON, end)
            fragment.add_rule(state, EPSILON, inner.initial)

        fragment.initial = start
        fragment.accepts.add(inner.initial)
        fragment.accepts.add(end)
        return fragment

    def subtree_string(self) -> str:
        return f"\x1b[33m{self.kind}({self.operand.subtree_string()}\x1b[33m)\x1b[0m"


@dataclass(frozen=True)
class Plus(Node):
    """One or more repetitions of a subexpression."""

    operand: Node

    def assemble(self, ctx: Context) -> Fragment:
        """One copy of the operand followed by a starred copy."""
        first = self.operand.assemble(ctx)
        inner = self.operand.assemble(ctx)
        loop = inner.create_skeleton()

        start = State(ctx.increment())
        end = State(ctx.increment())

        loop.add_rule(start, EPSILON, end)
        loop.add_rule(start, EPSILON, inner.initial)
        for state in inner.accepts:
            loop.add_rule(state, EPSILON, end)
            loop.add_rule(state, EPSILON, inner.initial)

        fragment = first.merge_rule(loop)
        for state in first.accepts:
            fragment.add_rule(state, EPSILON, loop.initial)

        fragment.initial = first.initial
        fragment.accepts = fragment.accepts | first.accepts
        fragment.accepts.add(inner.initial)
        fragment.accepts.add(end)
        return fragment

    def subtree_string(self) -> str:
        return f"\x1b[33m{self.kind}({self.operand.subtree_string()}\x1b[33m)\x1b[0m"