import logging
from pathlib import Path

import click

from nexus_retriever.cli.commands.resolve import resolve_cmd
from nexus_retriever.cli.commands.retrieve import retrieve_cmd
from nexus_retriever.cli.commands.which import which_cmd
from nexus_retriever.config import DEFAULT_CONFIG_PATH, load_config
from nexus_retriever.context import create_context
from nexus_retriever.errors import ConfigurationError
from nexus_retriever.output import user_error

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="nexus-retriever")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=DEFAULT_CONFIG_PATH,
    show_default=True,
    envvar="NEXUS_RETRIEVER_CONFIG",
    help="Path to config.toml",
)
@click.pass_context
def cli(ctx: click.Context, debug: bool, config_path: Path) -> None:
    """Retrieve shared libraries published as archives in a Maven repository."""
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s - %(levelname)s - %(message)s")

    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        try:
            config = load_config(config_path)
        except ConfigurationError as e:
            user_error(str(e))
            raise SystemExit(1) from None
        ctx.obj = create_context(config)


cli.add_command(retrieve_cmd)
cli.add_command(resolve_cmd)
cli.add_command(which_cmd)


def main() -> None:
    """CLI entry point used by the `nexus-retriever` console script."""
    cli()
