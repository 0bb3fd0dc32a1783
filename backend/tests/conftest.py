"""Shared fixtures for exptree tests."""

import importlib
import sys
import textwrap
import uuid

import pytest

RULES_SOURCE = textwrap.dedent(
    """
    from exptree import And, Not, Or, Predicate


    def equals(key, value):
        return Predicate(lambda p: p.get(key) == value, name=f"{key}=={value}")


    admin_access = And(
        Or(equals("role", "admin"), equals("role", "owner")),
        Not(equals("suspended", "true")),
    )


    def build_rule():
        return equals("role", "admin")


    class Rules:
        guest = equals("role", "guest")


    not_a_rule = 42


    def broken_factory():
        return "nope"
    """
)


@pytest.fixture
def rules_module(tmp_path):
    """Write a rules module to a temp directory.

    Yields (directory, module_name). The module name is unique per test so
    the import cache never leaks between tests.
    """
    name = f"rules_{uuid.uuid4().hex}"
    (tmp_path / f"{name}.py").write_text(RULES_SOURCE)
    importlib.invalidate_caches()
    yield tmp_path, name
    sys.modules.pop(name, None)


@pytest.fixture
def write_module(tmp_path):
    """Factory fixture writing uniquely named modules to a temp directory.

    Returns a callable taking module source (with a "{prefix}" placeholder
    for sibling module names) and a stem, returning the module name.
    """
    written = []
    prefix = f"m{uuid.uuid4().hex}_"

    def write(source: str, stem: str = "rules") -> str:
        name = f"{prefix}{stem}"
        (tmp_path / f"{name}.py").write_text(
            textwrap.dedent(source).replace("{prefix}", prefix)
        )
        importlib.invalidate_caches()
        written.append(name)
        return name

    yield write
    for name in written:
        sys.modules.pop(name, None)
