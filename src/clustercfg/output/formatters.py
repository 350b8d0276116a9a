"""Rich/JSON output helpers.

The CLI renders ServiceResult for humans (Rich output) or machines
(--json). The formatter layer adapts ServiceResult to the requested mode.
"""

from __future__ import annotations

import json as _json
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.text import Text

from clustercfg.domain.models import ClusterMap
from clustercfg.output.console import create_console, get_output

if TYPE_CHECKING:
    from clustercfg.services.result import ServiceResult


def _data_lines(data: dict[str, Any]) -> list[Text]:
    lines: list[Text] = []
    for key, value in data.items():
        if isinstance(value, (dict, list)):
            value = _json.dumps(value, separators=(",", ":"))
        line = Text("  ")
        line.append(f"{key}:", style="cc.key")
        line.append(f" {value}")
        lines.append(line)
    return lines


def _cluster_info_lines(data: dict[str, Any]) -> list[Text]:
    """Debug form of the record, then where it came from."""
    record = ClusterMap.model_validate(data)
    lines = [Text(repr(record))]
    if "path" in data:
        lines.extend(_data_lines({"path": data["path"]}))
    return lines


# op -> success body renderer; other ops get key/value lines.
_SUCCESS_RENDERERS: dict[str, Callable[[dict[str, Any]], list[Text]]] = {
    "cluster_info": _cluster_info_lines,
}


def format_result(
    result: ServiceResult,
    *,
    json_output: bool = False,
    no_color: bool = False,
) -> str:
    """Format a ServiceResult for display.

    Args:
        result: The service result to format.
        json_output: If True, return JSON; otherwise return human-readable text.
        no_color: Strip ANSI styling from human output.
    """
    if json_output:
        return result.model_dump_json(indent=2)

    # Text objects, not markup strings: messages may contain "[...]".
    console = create_console(no_color=no_color)
    if result.ok:
        header = Text()
        header.append("OK", style="cc.ok")
        header.append(": ")
        header.append(result.op, style="cc.op")
        console.print(header, soft_wrap=True)
        render = _SUCCESS_RENDERERS.get(result.op, _data_lines)
        for line in render(result.data):
            console.print(line, soft_wrap=True)
    else:
        header = Text()
        header.append("ERROR", style="cc.error")
        header.append(": ")
        header.append(result.op, style="cc.op")
        if result.error is not None:
            header.append(f" [{result.error.code}]", style="cc.code")
            header.append(f" {result.error.message}")
        else:
            header.append(" Unknown error")
        console.print(header, soft_wrap=True)
        if result.error is not None:
            for line in _data_lines(result.error.detail):
                console.print(line, soft_wrap=True)
    return get_output(console).rstrip("\n")
