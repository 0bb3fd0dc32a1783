"""Exception types for exptree.

Evaluation itself never raises: a well-formed tree always produces a bool.
These errors cover tree construction and the tooling around it.
"""


class ExptreeError(Exception):
    """Base class for all exptree errors."""
    pass


class ExpressionError(ExptreeError, TypeError):
    """A combinator was given a child that is not an expression node."""

    def __init__(self, combinator: str, child: object, position: int | None = None):
        self.combinator = combinator
        self.child = child
        self.position = position
        where = f" at position {position}" if position is not None else ""
        super().__init__(
            f"{combinator}() expects expression nodes, "
            f"got {type(child).__name__}{where}"
        )


class LoadError(ExptreeError):
    """A module:attribute reference could not be resolved to an expression."""

    def __init__(self, reference: str, reason: str):
        self.reference = reference
        self.reason = reason
        super().__init__(f"Cannot load '{reference}': {reason}")


class ParamsFileError(ExptreeError):
    """A parameter file is missing, unreadable, or malformed."""
    pass
