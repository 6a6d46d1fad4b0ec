"""Render build settings for the Truffle build tool.

Two outputs are supported: a plain JSON settings document (which ``parse``
reads back unchanged) and a ``truffle-config.js`` CommonJS module.
"""

import json
import re

from pathlib import Path
from typing import Any, Dict, List, Union

import structlog

from truffle_config.exceptions import ExportError
from truffle_config.utils.constants import JS_INDENT, TEST_NETWORK_NAME

from .loader import disabled_test_network
from .settings import BuildSettings


logger = structlog.get_logger()

_JS_IDENTIFIER = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


def to_document(settings: BuildSettings) -> Dict[str, Any]:
    """Get the plain nested settings structure."""
    document = settings.model_dump(exclude_none=True)
    if not document.get("networks"):
        document.pop("networks", None)
    return document


def dump_json(settings: BuildSettings, indent: int = 2) -> str:
    return json.dumps(to_document(settings), indent=indent) + "\n"


def _js_key(key: str) -> str:
    if _JS_IDENTIFIER.match(key):
        return key
    return _js_literal(key)


def _js_literal(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return repr(value)
    if isinstance(value, str):
        # JSON string literals are valid JavaScript; non-ASCII is escaped
        return json.dumps(value)
    raise ExportError(f"Cannot render {type(value).__name__} as JavaScript")


def _js_object_lines(key: str, value: Dict[str, Any], depth: int) -> List[str]:
    pad = JS_INDENT * depth
    lines = [f"{pad}{_js_key(key)}: {{"]
    for child_key, child in value.items():
        if isinstance(child, dict):
            lines.extend(_js_object_lines(child_key, child, depth + 1))
        else:
            lines.append(
                f"{pad}{JS_INDENT}{_js_key(child_key)}: {_js_literal(child)},"
            )
    lines.append(f"{pad}}},")
    return lines


def _commented(line: str) -> str:
    return f"{JS_INDENT}// {line[len(JS_INDENT):]}"


def render_truffle_config(
    settings: BuildSettings, include_disabled_networks: bool = True
) -> str:
    """Render settings as a ``truffle-config.js`` module.

    When no network is configured and ``include_disabled_networks`` is set,
    the development ``test`` network is written commented out.
    """
    document = to_document(settings)
    lines = ["module.exports = {"]

    if "networks" not in document and include_disabled_networks:
        disabled = {TEST_NETWORK_NAME: disabled_test_network().model_dump()}
        lines.extend(
            _commented(line) for line in _js_object_lines("networks", disabled, 1)
        )

    for key, value in document.items():
        lines.extend(_js_object_lines(key, value, 1))

    lines.append("};")
    return "\n".join(lines) + "\n"


def write_output(content: str, path: Union[str, Path]) -> Path:
    """Write rendered settings to ``path``.

    Raises:
        ExportError: If the file cannot be written
    """
    out_path = Path(path)
    try:
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(content, encoding="utf-8")
    except OSError as e:
        logger.error("Failed to write settings", path=str(out_path), error=str(e))
        raise ExportError(f"Cannot write {out_path}: {e}") from e

    logger.info("Settings written", path=str(out_path), bytes=len(content))
    return out_path
