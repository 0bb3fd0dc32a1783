"""exptree CLI entry point."""

import click

from exptree.config import Settings, configure_logging


@click.group()
@click.option(
    "--log-level",
    default=None,
    help="Logging level (overrides EXPTREE_LOG_LEVEL).",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None):
    """Evaluate boolean expression trees defined in Python."""
    settings = Settings.from_env().with_overrides(log_level=log_level)
    configure_logging(settings.log_level)
    ctx.obj = settings


# Register subcommands
from exptree.cli.check_cmd import check  # noqa: E402

cli.add_command(check)


def main():
    cli(prog_name="exptree")


if __name__ == "__main__":
    main()
