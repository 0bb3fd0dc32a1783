"""Boolean expression trees over string parameters.

Build a tree from combinators and your own leaves, then evaluate it
against any object with a get(key) -> str method:

    from exptree import And, Map, Not, Or, Predicate

    def equals(key, value):
        return Predicate(lambda p: p.get(key) == value, name=f"{key}=={value}")

    rule = And(
        Or(equals("role", "admin"), equals("role", "owner")),
        Not(equals("suspended", "true")),
    )
    rule.evaluate(Map({"role": "admin", "suspended": "false"}))  # True
"""

from exptree.config import Settings, configure_logging
from exptree.errors import ExpressionError, ExptreeError, LoadError, ParamsFileError
from exptree.loader import load_expression
from exptree.nodes import (
    And,
    Combinator,
    Exp,
    Expression,
    Not,
    Or,
    Predicate,
    is_expression,
    walk,
)
from exptree.params import Map, Params
from exptree.params_file import load_params_file

__version__ = "0.1.0"

__all__ = [
    # Params
    "Map",
    "Params",
    # Nodes
    "And",
    "Combinator",
    "Exp",
    "Expression",
    "Not",
    "Or",
    "Predicate",
    "is_expression",
    "walk",
    # Errors
    "ExpressionError",
    "ExptreeError",
    "LoadError",
    "ParamsFileError",
    # Tooling
    "Settings",
    "configure_logging",
    "load_expression",
    "load_params_file",
]
