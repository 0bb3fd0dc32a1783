"""Resolve module:attribute references to expression trees.

Rules are written in Python, so the command-line tool names them the way
ASGI servers name applications:

    myapp.rules:admin_access

The attribute may be a node, or a zero-argument callable returning one.
"""

from __future__ import annotations

import importlib
import logging
import sys
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from pathlib import Path

from exptree.errors import LoadError
from exptree.nodes import Exp, is_expression

logger = logging.getLogger(__name__)


def parse_reference(reference: str) -> tuple[str, str]:
    """Split a reference into module path and attribute path.

    Raises:
        LoadError: If the reference is not of the form module:attribute
    """
    module_name, sep, attr_path = reference.partition(":")
    module_name = module_name.strip()
    attr_path = attr_path.strip()
    if not sep or not module_name or not attr_path:
        raise LoadError(reference, "expected 'module:attribute'")
    return module_name, attr_path


@contextmanager
def _search_paths(paths: Sequence[Path]) -> Iterator[None]:
    """Temporarily prepend directories to sys.path."""
    added = [str(p) for p in paths if str(p) not in sys.path]
    for entry in reversed(added):
        sys.path.insert(0, entry)
        logger.debug("Added %s to import path", entry)
    try:
        yield
    finally:
        for entry in added:
            if entry in sys.path:
                sys.path.remove(entry)


def load_expression(
    reference: str,
    search_paths: Sequence[Path] = (),
) -> Exp:
    """Import the object named by reference and return it as a tree.

    Args:
        reference: String of the form "package.module:attribute". The
            attribute part may be dotted ("module:Rules.admin").
        search_paths: Extra directories to import from

    Returns:
        The expression node

    Raises:
        LoadError: If the module cannot be imported or raises while
            importing, the attribute does not exist, a factory raises, or
            the result is not an expression node
    """
    module_name, attr_path = parse_reference(reference)

    with _search_paths(search_paths):
        try:
            module = importlib.import_module(module_name)
        except ImportError as e:
            raise LoadError(reference, f"cannot import module '{module_name}' ({e})") from e
        except Exception as e:
            raise LoadError(
                reference,
                f"error importing module '{module_name}' ({type(e).__name__}: {e})",
            ) from e

        obj: object = module
        for part in attr_path.split("."):
            try:
                obj = getattr(obj, part)
            except AttributeError as e:
                raise LoadError(reference, f"no attribute '{part}'") from e

        # Factories run while the search paths are still on sys.path.
        if not is_expression(obj) and callable(obj):
            logger.debug("Calling factory %s", reference)
            try:
                obj = obj()
            except Exception as e:
                raise LoadError(
                    reference, f"factory raised {type(e).__name__}: {e}"
                ) from e

    if not is_expression(obj):
        raise LoadError(
            reference, f"expected an expression node, got {type(obj).__name__}"
        )

    logger.debug("Loaded %s -> %r", reference, obj)
    return obj
