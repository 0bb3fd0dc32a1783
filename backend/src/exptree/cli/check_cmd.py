"""Check command: evaluate a rule against a parameter set."""

import logging
from pathlib import Path

import click

from exptree.config import Settings
from exptree.errors import ExptreeError
from exptree.loader import load_expression
from exptree.params import Map
from exptree.params_file import load_params_file

logger = logging.getLogger(__name__)


def _parse_pairs(ctx, param, values: tuple[str, ...]) -> dict[str, str]:
    """Turn repeated KEY=VALUE options into a dict."""
    pairs: dict[str, str] = {}
    for item in values:
        key, sep, value = item.partition("=")
        if not sep or not key:
            raise click.BadParameter(f"expected KEY=VALUE, got '{item}'")
        pairs[key] = value
    return pairs


@click.command()
@click.argument("reference")
@click.option(
    "--param", "-p", "pairs",
    multiple=True,
    callback=_parse_pairs,
    metavar="KEY=VALUE",
    help="Set a parameter. May be repeated; overrides --params-file.",
)
@click.option(
    "--params-file",
    default=None,
    type=click.Path(path_type=Path),
    help="YAML file mapping parameter names to values.",
)
@click.option(
    "--path",
    "search_paths",
    multiple=True,
    type=click.Path(file_okay=False, path_type=Path),
    help="Directory to import rules from. May be repeated.",
)
@click.option(
    "--quiet", "-q",
    is_flag=True,
    default=False,
    help="Print nothing; report the result through the exit status only.",
)
@click.pass_obj
def check(
    settings: Settings | None,
    reference: str,
    pairs: dict[str, str],
    params_file: Path | None,
    search_paths: tuple[Path, ...],
    quiet: bool,
):
    """Evaluate the rule at REFERENCE (module:attribute).

    Prints "true" or "false". Exits 0 when the rule holds, 1 when it
    does not, and 2 when the rule or parameters cannot be loaded.

        exptree check myapp.rules:admin_access -p role=admin -p suspended=false
    """
    settings = (settings or Settings.from_env()).with_overrides(
        search_paths=list(search_paths)
    )

    try:
        expression = load_expression(reference, settings.search_paths)
        params = load_params_file(params_file) if params_file else Map()
    except ExptreeError as e:
        click.echo(click.style(f"Error: {e}", fg="red"), err=True)
        raise SystemExit(2)

    params.update(pairs)

    result = expression.evaluate(params)
    logger.info("%s evaluated to %s", reference, result)

    if not quiet:
        click.echo("true" if result else "false")

    raise SystemExit(0 if result else 1)
