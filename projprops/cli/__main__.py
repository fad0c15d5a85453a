from __future__ import annotations

import json
import logging
import re
from enum import Enum
from pathlib import Path
from typing import List, Optional

import typer
import yaml

from .. import apk_config
from ..core.errors import ProjectPropertiesError
from ..core.filters import Filter, filter_items
from ..core.properties import ProjectProperties
from ..core.types import PropertyType

app = typer.Typer(help="Project properties CLI")


class FileKind(str, Enum):
    build = "build"
    default = "default"
    local = "local"

    def to_property_type(self) -> PropertyType:
        return PropertyType[self.name.upper()]


class OutputFormat(str, Enum):
    text = "text"
    json = "json"
    yaml = "yaml"


def _fail(message: str) -> typer.Exit:
    typer.secho(message, fg=typer.colors.RED, err=True)
    return typer.Exit(code=1)


def _load(project: Path, kind: FileKind) -> ProjectProperties:
    props = ProjectProperties.load(project, kind.to_property_type())
    if props is None:
        raise _fail(f"No readable {kind.to_property_type().filename} in {project}")
    return props


def _load_or_create(project: Path, kind: FileKind) -> ProjectProperties:
    property_type = kind.to_property_type()
    props = ProjectProperties.load(project, property_type)
    if props is None:
        if (project / property_type.filename).exists():
            raise _fail(f"Cannot parse {project / property_type.filename}")
        props = ProjectProperties.create(project, property_type)
    return props


def _save(props: ProjectProperties) -> None:
    try:
        props.save()
    except (ProjectPropertiesError, OSError) as e:
        raise _fail(f"Could not save {props.path}: {e}")


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v")):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command()
def show(
    kind: FileKind = typer.Option(FileKind.default, "--type"),
    merge: Optional[List[FileKind]] = typer.Option(None, "--merge", help="File to merge in, in order"),
    include: Optional[str] = typer.Option(None, "--include", help="Only keys matching this regex"),
    prefix: Optional[str] = typer.Option(None, "--prefix", help="Only keys starting with this string"),
    output: OutputFormat = typer.Option(OutputFormat.text, "--format"),
    project: Path = typer.Option(Path("."), "--project"),
):
    props = _load(project, kind)
    for other in merge or []:
        props.merge(other.to_property_type())

    try:
        include_regex = re.compile(include) if include else None
    except re.error as e:
        raise _fail(f"Invalid --include pattern {include!r}: {e}")
    flt = Filter(include_regex=include_regex, prefix=prefix) if include or prefix else None
    values = filter_items(props.values(), flt)
    if output is OutputFormat.json:
        typer.echo(json.dumps(values, indent=2))
    elif output is OutputFormat.yaml:
        typer.echo(yaml.safe_dump(values, sort_keys=False), nl=False)
    else:
        for key, value in values.items():
            typer.echo(f"{key}={value}")


@app.command()
def get(
    key: str,
    kind: FileKind = typer.Option(FileKind.default, "--type"),
    project: Path = typer.Option(Path("."), "--project"),
):
    value = _load(project, kind).get_property(key)
    if value is None:
        raise _fail(f"{key} is not set")
    typer.echo(value)


@app.command()
def set(
    key: str,
    value: str,
    kind: FileKind = typer.Option(FileKind.default, "--type"),
    project: Path = typer.Option(Path("."), "--project"),
):
    props = _load_or_create(project, kind)
    props.set_property(key, value)
    _save(props)
    typer.echo("OK")


@app.command()
def unset(
    key: str,
    kind: FileKind = typer.Option(FileKind.default, "--type"),
    project: Path = typer.Option(Path("."), "--project"),
):
    props = _load(project, kind)
    if props.remove_property(key) is None:
        raise _fail(f"{key} is not set")
    _save(props)
    typer.echo("OK")


@app.command()
def init(
    kind: FileKind = typer.Option(FileKind.local, "--type"),
    project: Path = typer.Option(Path("."), "--project"),
    force: bool = typer.Option(False, "--force", help="Overwrite an existing file"),
):
    property_type = kind.to_property_type()
    if not project.is_dir():
        raise _fail(f"{project} is not a directory")
    if (project / property_type.filename).exists() and not force:
        raise _fail(f"{project / property_type.filename} already exists, use --force to overwrite")
    _save(ProjectProperties.create(project, property_type))
    typer.echo(f"Created {project / property_type.filename}")


@app.command("apk-configs")
def apk_configs(
    kind: FileKind = typer.Option(FileKind.default, "--type"),
    project: Path = typer.Option(Path("."), "--project"),
):
    configs = apk_config.get_configs(_load(project, kind))
    typer.echo(json.dumps(configs, indent=2))


if __name__ == "__main__":
    app()
