"""
Copyright (c) 2025 Eric C. Mumford (@heymumford)
This file is part of openapi-builders, licensed under the MIT License.
See LICENSE file for details.
"""

"""
Serializer for finalized documents.

Renders a finalized node (normally the document root) to plain data, JSON
text or YAML text. Absent fields are omitted, keyed collections become
mappings, ordered collections keep insertion order, and References render as
their "$ref" plus optional summary and description only.
"""

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from openapi_builders.core.config import OutputConfig, get_app_config
from openapi_builders.core.logging import log_operation
from openapi_builders.nodes import BaseNode, to_plain

logger = logging.getLogger(__name__)

FORMATS = ("json", "yaml")


class _DocumentDumper(yaml.SafeDumper):
    """SafeDumper that never emits anchors and aliases for shared nodes."""

    def ignore_aliases(self, data: Any) -> bool:
        return True


def to_dict(document: BaseNode | dict[str, Any]) -> dict[str, Any]:
    """Render a finalized node as plain dicts, lists and scalars."""
    return to_plain(document)


def _output_config(config: OutputConfig | None) -> OutputConfig:
    return config if config is not None else get_app_config().output


def to_json(document: BaseNode | dict[str, Any], config: OutputConfig | None = None) -> str:
    """Serialize a finalized node to JSON text."""
    config = _output_config(config)
    data = to_dict(document)
    logger.debug(f"Serializing {type(document).__name__} to JSON")
    return json.dumps(
        data,
        indent=config.json_indent or None,
        sort_keys=config.sort_keys,
        ensure_ascii=False,
    )


def to_yaml(document: BaseNode | dict[str, Any], config: OutputConfig | None = None) -> str:
    """Serialize a finalized node to YAML text."""
    config = _output_config(config)
    data = to_dict(document)
    logger.debug(f"Serializing {type(document).__name__} to YAML")
    return yaml.dump(
        data,
        Dumper=_DocumentDumper,
        sort_keys=config.sort_keys,
        allow_unicode=True,
        default_flow_style=False,
        width=config.yaml_width,
    )


def serialize(
    document: BaseNode | dict[str, Any],
    output_format: str | None = None,
    config: OutputConfig | None = None,
) -> str:
    """
    Serialize a finalized node in the requested format.

    Args:
    ----
        document: Finalized node or plain mapping
        output_format: "json" or "yaml"; defaults to the configured format
        config: Output settings; defaults to the global configuration

    Raises:
    ------
        ValueError: If the format is not supported

    """
    config = _output_config(config)
    output_format = (output_format or config.format).lower()
    if output_format == "json":
        return to_json(document, config)
    if output_format == "yaml":
        return to_yaml(document, config)
    raise ValueError(f"Unsupported output format: {output_format}")


def write_document(
    document: BaseNode | dict[str, Any],
    path: str | Path,
    output_format: str | None = None,
    config: OutputConfig | None = None,
) -> Path:
    """
    Serialize a finalized node and write it to a file.

    When no format is given it is taken from the file suffix (.json, .yaml,
    .yml) and otherwise from the configuration.

    Returns
    -------
        The path that was written

    """
    path = Path(path)
    if output_format is None and path.suffix.lower() in (".json", ".yaml", ".yml"):
        output_format = "json" if path.suffix.lower() == ".json" else "yaml"

    with log_operation(logger, "document write", context={"path": str(path)}) as context:
        text = serialize(document, output_format, config)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        context["bytes"] = len(text.encode("utf-8"))
    return path
