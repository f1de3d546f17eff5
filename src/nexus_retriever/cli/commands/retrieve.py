"""Download a library with Maven and unpack it into a directory."""

from pathlib import Path

import click

from nexus_retriever.context import RetrieverContext
from nexus_retriever.core.request import LibraryRef, RetrievalRequest
from nexus_retriever.core.retriever import LibraryRetriever
from nexus_retriever.errors import RetrievalError
from nexus_retriever.gateway.feedback.real import SuppressedFeedback
from nexus_retriever.output import user_error


@click.command("retrieve")
@click.argument("name")
@click.argument("version")
@click.option("--artifact", help="Artifact coordinate; may contain ${library.<name>.version}")
@click.option(
    "--maven-home",
    envvar="MAVEN_HOME",
    help="Maven installation directory (defaults to $MAVEN_HOME, then the PATH)",
)
@click.option(
    "--dest",
    type=click.Path(file_okay=False, path_type=Path),
    help="Destination directory (defaults to a per-library directory under the workspace root)",
)
@click.option("--quiet", "-q", is_flag=True, help="Suppress progress output")
@click.pass_obj
def retrieve_cmd(
    ctx: RetrieverContext,
    name: str,
    version: str,
    artifact: str | None,
    maven_home: str | None,
    dest: Path | None,
    quiet: bool,
) -> None:
    """Retrieve library NAME at VERSION.

    Prints the destination directory on stdout when the library was unpacked.
    """
    destination = dest
    if destination is None:
        destination = ctx.workspace.resolve_directory(LibraryRef(name=name, version=version))

    retriever = LibraryRetriever(
        artifact if artifact is not None else ctx.config.artifact,
        maven_home if maven_home is not None else ctx.config.maven_home,
        process_runner=ctx.process_runner,
        archive_extractor=ctx.archive_extractor,
        feedback=SuppressedFeedback() if quiet else ctx.feedback,
        tool_name=ctx.config.tool,
        archive_suffix=ctx.config.archive_suffix,
    )
    request = RetrievalRequest(
        library_name=name, library_version=version, destination_dir=destination
    )

    try:
        result = retriever.retrieve(request)
    except RetrievalError as e:
        user_error(str(e))
        raise SystemExit(1) from None

    click.echo(str(result.destination_dir))
