"""Show which Maven executable retrievals would use."""

import click

from nexus_retriever.context import RetrieverContext
from nexus_retriever.core.executable import ExecutableNotFound, locate_executable
from nexus_retriever.core.retriever import not_found_message
from nexus_retriever.errors import RetrievalError
from nexus_retriever.output import user_error


@click.command("which")
@click.option(
    "--maven-home",
    envvar="MAVEN_HOME",
    help="Maven installation directory (defaults to $MAVEN_HOME, then the PATH)",
)
@click.pass_obj
def which_cmd(ctx: RetrieverContext, maven_home: str | None) -> None:
    """Print the path of the Maven executable."""
    try:
        result = locate_executable(
            maven_home if maven_home is not None else ctx.config.maven_home,
            tool_name=ctx.config.tool,
            process_runner=ctx.process_runner,
            feedback=ctx.feedback,
        )
    except RetrievalError as e:
        user_error(str(e))
        raise SystemExit(1) from None
    if isinstance(result, ExecutableNotFound):
        user_error(not_found_message(result))
        raise SystemExit(1)

    click.echo(str(result))
