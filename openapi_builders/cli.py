"""
Copyright (c) 2025 Eric C. Mumford (@heymumford)
This file is part of openapi-builders, licensed under the MIT License.
See LICENSE file for details.
"""

"""
Command line front end.

Renders documents assembled in Python code. A TARGET is "module:attribute"
and may name an ApplicationDescriptor (class or instance), an OpenAPIBuilder
of either family, a finalized OpenAPI node, or a zero-argument callable that
returns one of those.
"""

import importlib
import logging
import os
import sys
from enum import Enum
from pathlib import Path
from typing import Any

import typer
from rich.console import Console
from rich.table import Table

from openapi_builders import __version__, serializer
from openapi_builders.builder import NodeBuilder
from openapi_builders.core.config import init_app_config
from openapi_builders.core.logging import get_logger, log_operation
from openapi_builders.errors import BuilderError
from openapi_builders.scaffold import ApplicationDescriptor
from openapi_builders.v3_0.models import OpenAPI

# Initialize console for rich output
console = Console()
err_console = Console(stderr=True)

# Initialize the CLI app
app = typer.Typer(help="openapi-builders - render OpenAPI documents built in Python")

logger = get_logger("openapi_builders.cli")


class OutputFormat(str, Enum):
    JSON = "json"
    YAML = "yaml"


class TargetError(Exception):
    """The TARGET argument could not be resolved to a document."""


def configure_app(debug: bool = False):
    """
    Configure the application with the specified settings.

    Args:
    ----
        debug: Whether to enable debug mode

    """
    config = init_app_config(debug=debug)
    config.configure_logging()
    return config


def version_callback(value: bool):
    """Print the version and stop before any command runs."""
    if value:
        console.print(f"openapi-builders version: {__version__}")
        raise typer.Exit()


@app.callback()
def callback(
    debug: bool = typer.Option(False, "--debug", help="Enable debug mode with verbose logging"),
    version: bool = typer.Option(
        False,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show the application version and exit",
    ),
):
    """
    openapi-builders - fluent, invariant-checked OpenAPI document builders.

    Use --debug to enable verbose logging.
    """
    configure_app(debug=debug)


def _import_target(target: str) -> Any:
    module_name, _, attribute = target.partition(":")
    if not module_name or not attribute:
        raise TargetError(f"Target '{target}' must have the form module:attribute")

    # Targets are usually modules of the project being documented
    if os.getcwd() not in sys.path:
        sys.path.insert(0, os.getcwd())

    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise TargetError(f"Cannot import module '{module_name}': {e}") from e

    value: Any = module
    for part in attribute.split("."):
        try:
            value = getattr(value, part)
        except AttributeError as e:
            raise TargetError(f"Module '{module_name}' has no attribute '{attribute}'") from e
    return value


def resolve_document(value: Any, allow_call: bool = True) -> OpenAPI:
    """
    Turn a resolved TARGET value into a finalized document root.

    Raises
    ------
        TargetError: If the value is not something a document can be built from
        BuilderError: If assembling the document violates a builder invariant

    """
    if isinstance(value, type) and issubclass(value, ApplicationDescriptor):
        value = value()
    if isinstance(value, ApplicationDescriptor):
        return value.document().build()
    if isinstance(value, NodeBuilder) and issubclass(value.node_type, OpenAPI):
        return value.build()
    if isinstance(value, OpenAPI):
        return value
    if allow_call and callable(value) and not isinstance(value, type):
        return resolve_document(value(), allow_call=False)
    raise TargetError(f"Cannot build a document from {type(value).__name__}")


def load_document(target: str) -> OpenAPI:
    return resolve_document(_import_target(target))


@app.command("render")
def render(
    target: str = typer.Argument(..., help="module:attribute naming the document source"),
    output_format: OutputFormat | None = typer.Option(
        None, "--format", "-f", case_sensitive=False, help="Output format (default from configuration)"
    ),
    output: Path | None = typer.Option(None, "--output", "-o", help="Write the document to this file"),
    debug: bool = typer.Option(False, "--debug", help="Enable debug mode with verbose logging"),
):
    """
    Render a document as YAML or JSON.
    """
    if debug:
        configure_app(debug=True)

    fmt = output_format.value if output_format else None
    try:
        with log_operation(logger, "render", level=logging.DEBUG, context={"target": target}):
            document = load_document(target)
            if output is not None:
                path = serializer.write_document(document, output, fmt)
                err_console.print(f"Wrote {document.openapi} document to {path}", style="green")
            else:
                typer.echo(serializer.serialize(document, fmt), nl=False)
    except TargetError as e:
        err_console.print(f"Error: {e}", style="red")
        raise typer.Exit(code=2)
    except BuilderError as e:
        err_console.print(f"Builder error: {e}", style="red")
        raise typer.Exit(code=1)


@app.command("summary")
def summary(
    target: str = typer.Argument(..., help="module:attribute naming the document source"),
):
    """
    Show the paths and operations of a document.
    """
    try:
        with log_operation(logger, "summary", level=logging.DEBUG, context={"target": target}):
            document = load_document(target)
    except TargetError as e:
        err_console.print(f"Error: {e}", style="red")
        raise typer.Exit(code=2)
    except BuilderError as e:
        err_console.print(f"Builder error: {e}", style="red")
        raise typer.Exit(code=1)

    table = Table(title=f"{document.info.title} {document.info.version} (OpenAPI {document.openapi})")
    table.add_column("Method")
    table.add_column("Path")
    table.add_column("Operation ID")
    table.add_column("Summary")

    paths = document.paths if document.has("paths") else {}
    for path, item in paths.items():
        for method, operation in item.operations().items():
            table.add_row(
                method.upper(),
                path,
                operation.operation_id if operation.has("operation_id") else "",
                operation.summary if operation.has("summary") else "",
            )

    console.print(table)
    console.print(f"{len(paths)} paths")


@app.command("version")
def version():
    """
    Show the package version.
    """
    console.print(f"openapi-builders version: {__version__}")


def main():
    """Entry point for the console script."""
    app()


if __name__ == "__main__":
    main()
