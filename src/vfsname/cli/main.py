import typer
from pathlib import Path
from typing import Optional

from vfsname.cli.formatter import OutputFormatter
from vfsname.config.loader import load_config
from vfsname.core.models import FileNameInfo, VfsContext
from vfsname.core.name import FileName
from vfsname.core.providers import parse_uri
from vfsname.core.scope import NameScope
from vfsname.utils.errors import FileSystemException
from vfsname.utils.logging import configure_logging

app = typer.Typer(name="vfsname", help="Resolve and compare virtual file names.", rich_markup_mode=None)

DEFAULT_CONFIG_PATH = Path("vfsname.yaml")


def _parse_scope(value: Optional[str], default: NameScope) -> NameScope:
    if value is None:
        return default
    try:
        return NameScope.parse(value)
    except ValueError:
        choices = ", ".join(member.value for member in NameScope)
        raise typer.BadParameter(f"Scope must be one of: {choices}")


def _parse_name(uri: str) -> FileName:
    try:
        return parse_uri(uri)
    except FileSystemException as e:
        OutputFormatter.log(f"Invalid URI: {e}", severity="error")
        raise typer.Exit(code=1)


def _describe(name: FileName) -> FileNameInfo:
    parent = name.parent
    return FileNameInfo(
        scheme=name.scheme,
        path=name.path,
        uri=name.uri,
        root_uri=name.root_uri,
        base_name=name.base_name,
        extension=name.extension,
        depth=name.depth,
        parent=parent.uri if parent is not None else None,
    )


@app.callback()
def main(
    ctx: typer.Context,
    config: Path = typer.Option(DEFAULT_CONFIG_PATH, "--config", help="Path to vfsname.yaml"),
):
    """Load configuration shared by every command."""
    state = VfsContext(config_dict=load_config(config))
    configure_logging(state.settings.log_level)
    ctx.obj = state


@app.command()
def resolve(
    ctx: typer.Context,
    uri: str = typer.Argument(..., help="Base URI, e.g. file:///usr/local"),
    name: str = typer.Argument(..., help="Relative or absolute path to resolve"),
    scope: Optional[str] = typer.Option(None, "--scope", help="file_system, child, descendent or descendent_or_self"),
):
    """Resolve NAME against URI and print the resulting URI."""
    requested_scope = _parse_scope(scope, ctx.obj.settings.default_scope)
    base = _parse_name(uri)
    try:
        resolved = base.resolve_name(name, requested_scope)
    except FileSystemException as e:
        OutputFormatter.log(f"Cannot resolve '{name}': {e}", severity="error")
        raise typer.Exit(code=1)
    OutputFormatter.print_data(resolved.uri)


@app.command()
def relative(
    base_uri: str = typer.Argument(..., help="URI to compute the path from"),
    target_uri: str = typer.Argument(..., help="URI to compute the path to"),
):
    """Print the path of TARGET_URI relative to BASE_URI."""
    base = _parse_name(base_uri)
    target = _parse_name(target_uri)
    if base.root_uri != target.root_uri:
        OutputFormatter.log(
            f"Names belong to different file systems: {base.root_uri} and {target.root_uri}",
            severity="error",
        )
        raise typer.Exit(code=1)
    OutputFormatter.print_data(base.relative_name(target))


@app.command()
def info(uri: str = typer.Argument(..., help="URI to describe")):
    """Print the derived attributes of URI as JSON."""
    OutputFormatter.print_data(_describe(_parse_name(uri)))


@app.command()
def check(
    base_uri: str = typer.Argument(..., help="Base URI"),
    uri: str = typer.Argument(..., help="URI to classify"),
    scope: Optional[str] = typer.Option(None, "--scope", help="file_system, child, descendent or descendent_or_self (default: descendent; vfs.default_scope is not used)"),
):
    """Print whether URI lies within SCOPE of BASE_URI."""
    requested_scope = _parse_scope(scope, NameScope.DESCENDENT)
    base = _parse_name(base_uri)
    OutputFormatter.print_data(base.is_descendent(_parse_name(uri), requested_scope))


if __name__ == "__main__":
    app()
