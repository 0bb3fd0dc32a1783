"""Expression tree nodes.

This module provides:
- Exp: the protocol every node implements (evaluate(params) -> bool)
- Expression: optional base class adding &, | and ~ composition
- And, Or, Not: the structural combinators
- Predicate: adapter turning a plain function into a leaf
- walk: depth-first traversal of a tree

Leaves (equality checks, regex matches, ...) are supplied by the caller.
Nodes are immutable once built, hold no evaluation state, and may be
evaluated any number of times, from any number of threads.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

from exptree.errors import ExpressionError
from exptree.params import Params


@runtime_checkable
class Exp(Protocol):
    """Interface every expression node must implement.

    evaluate() must be a pure function of the node's structure and the
    values returned by params.get(). Combinators rely on this to skip
    children once the result is known.
    """

    def evaluate(self, params: Params) -> bool: ...


def is_expression(obj: object) -> bool:
    """Check whether obj can be used as a node in a tree."""
    return isinstance(obj, Exp) and not isinstance(obj, type)


def _check_children(combinator: str, nodes: Iterable[object]) -> tuple[Exp, ...]:
    children = tuple(nodes)
    for position, child in enumerate(children):
        if not is_expression(child):
            raise ExpressionError(combinator, child, position)
    return children


# -----------------------------------------------------------------------------
# Base classes
# -----------------------------------------------------------------------------


class Expression(ABC):
    """Base class for nodes that want operator composition.

    Inheriting is optional; any object with an evaluate() method is a
    valid node. Subclasses get:
        a & b  ->  And(a, b)
        a | b  ->  Or(a, b)
        ~a     ->  Not(a)

    Composition builds exactly the nodes written; nothing is flattened.
    """

    @abstractmethod
    def evaluate(self, params: Params) -> bool:
        """Evaluate this node against a parameter source."""

    def __and__(self, other: object) -> "And":
        if not is_expression(other):
            return NotImplemented
        return And(self, other)

    def __rand__(self, other: object) -> "And":
        if not is_expression(other):
            return NotImplemented
        return And(other, self)

    def __or__(self, other: object) -> "Or":
        if not is_expression(other):
            return NotImplemented
        return Or(self, other)

    def __ror__(self, other: object) -> "Or":
        if not is_expression(other):
            return NotImplemented
        return Or(other, self)

    def __invert__(self) -> "Not":
        return Not(self)


class Combinator(Expression):
    """An expression whose result derives purely from its children."""

    @property
    @abstractmethod
    def children(self) -> tuple[Exp, ...]:
        """Child nodes in evaluation order."""


# -----------------------------------------------------------------------------
# Combinators
# -----------------------------------------------------------------------------


@dataclass(frozen=True, init=False, repr=False)
class And(Combinator):
    """True if every child is true.

    Children are evaluated in order and evaluation stops at the first
    false child. And() with no children is true.
    """

    nodes: tuple[Exp, ...]

    def __init__(self, *nodes: Exp):
        object.__setattr__(self, "nodes", _check_children("And", nodes))

    @property
    def children(self) -> tuple[Exp, ...]:
        return self.nodes

    def evaluate(self, params: Params) -> bool:
        for node in self.nodes:
            if not node.evaluate(params):
                return False
        return True

    def __repr__(self) -> str:
        return f"And({', '.join(map(repr, self.nodes))})"


@dataclass(frozen=True, init=False, repr=False)
class Or(Combinator):
    """True if any child is true.

    Children are evaluated in order and evaluation stops at the first
    true child. Or() with no children is false.
    """

    nodes: tuple[Exp, ...]

    def __init__(self, *nodes: Exp):
        object.__setattr__(self, "nodes", _check_children("Or", nodes))

    @property
    def children(self) -> tuple[Exp, ...]:
        return self.nodes

    def evaluate(self, params: Params) -> bool:
        for node in self.nodes:
            if node.evaluate(params):
                return True
        return False

    def __repr__(self) -> str:
        return f"Or({', '.join(map(repr, self.nodes))})"


@dataclass(frozen=True, init=False, repr=False)
class Not(Combinator):
    """Negation of a single child. The child is always evaluated."""

    node: Exp

    def __init__(self, node: Exp):
        (checked,) = _check_children("Not", (node,))
        object.__setattr__(self, "node", checked)

    @property
    def children(self) -> tuple[Exp, ...]:
        return (self.node,)

    def evaluate(self, params: Params) -> bool:
        return not self.node.evaluate(params)

    def __repr__(self) -> str:
        return f"Not({self.node!r})"


# -----------------------------------------------------------------------------
# Leaves
# -----------------------------------------------------------------------------


@dataclass(frozen=True, repr=False)
class Predicate(Expression):
    """Leaf backed by a plain function of the parameter source.

    Usage:
        is_admin = Predicate(lambda p: p.get("role") == "admin", name="is_admin")
        rule = is_admin & ~Predicate(lambda p: p.get("suspended") == "true")

    The function must honour the same purity contract as any node.
    """

    fn: Callable[[Params], object]
    name: str = field(default="", compare=False)

    def __post_init__(self) -> None:
        if not callable(self.fn):
            raise TypeError(
                f"Predicate() expects a callable, got {type(self.fn).__name__}"
            )
        if not self.name:
            object.__setattr__(
                self, "name", getattr(self.fn, "__name__", type(self.fn).__name__)
            )

    def evaluate(self, params: Params) -> bool:
        return bool(self.fn(params))

    def __repr__(self) -> str:
        return f"Predicate({self.name})"


# -----------------------------------------------------------------------------
# Traversal
# -----------------------------------------------------------------------------


def walk(node: Exp) -> Iterator[Exp]:
    """Yield every node of a tree, depth-first and pre-order.

    Leaves are yielded but not descended into; only combinators from
    this module expose children.
    """
    yield node
    if isinstance(node, Combinator):
        for child in node.children:
            yield from walk(child)
