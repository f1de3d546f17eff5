"""Show the coordinate a retrieval would fetch."""

import click

from nexus_retriever.context import RetrieverContext
from nexus_retriever.coordinate import ArtifactCoordinate, resolve_version
from nexus_retriever.errors import ConfigurationError
from nexus_retriever.output import user_error


@click.command("resolve")
@click.argument("name")
@click.argument("version")
@click.option("--artifact", help="Artifact coordinate; may contain ${library.<name>.version}")
@click.pass_obj
def resolve_cmd(ctx: RetrieverContext, name: str, version: str, artifact: str | None) -> None:
    """Print the artifact coordinate for library NAME at VERSION."""
    details = artifact if artifact is not None else ctx.config.artifact
    if not details:
        user_error(f"No artifact details specified for shared library: {name}:{version}")
        raise SystemExit(1)

    resolved = resolve_version(details.strip(), name, version)
    try:
        ArtifactCoordinate.parse(resolved)
    except ConfigurationError as e:
        user_error(str(e))
        raise SystemExit(1) from None

    click.echo(resolved)
