"""Render query results for stdout: pretty JSON, or a rich table for row results."""
import datetime
import decimal
import io
import json
import shutil
import uuid
from typing import Any, Dict, List, Mapping

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

OUTPUT_FORMATS = ("json", "table")


def _json_default(value: Any) -> Any:
    if isinstance(value, (datetime.datetime, datetime.date, datetime.time)):
        return value.isoformat()
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value).hex()
    if isinstance(value, (decimal.Decimal, uuid.UUID, datetime.timedelta)):
        return str(value)
    if isinstance(value, (set, frozenset)):
        return list(value)
    return str(value)


def to_json(result: Any) -> str:
    return json.dumps(result, ensure_ascii=False, indent=2, default=_json_default)


def _cell(value: Any) -> Text:
    # Text() keeps square brackets in data from being read as rich markup
    if value is None:
        return Text("NULL", style="dim")
    if isinstance(value, (dict, list)):
        return Text(json.dumps(value, ensure_ascii=False, default=_json_default))
    if isinstance(value, (bytes, bytearray, memoryview)):
        return Text(bytes(value).hex())
    return Text(str(value))


def render_table(rows: List[Any], width: int = 0) -> str:
    if not rows:
        return "(0 rows)"

    mapped: List[Mapping[str, Any]] = [
        row if isinstance(row, Mapping) else {"value": row} for row in rows
    ]
    # Column order follows first appearance across all rows
    columns: Dict[str, None] = {}
    for row in mapped:
        for key in row:
            columns.setdefault(str(key), None)

    table = Table(box=box.SIMPLE_HEAD, caption=f"({len(rows)} row{'s' if len(rows) != 1 else ''})")
    for name in columns:
        table.add_column(name, overflow="fold")
    for row in mapped:
        values = {str(k): v for k, v in row.items()}
        table.add_row(*(_cell(values.get(name)) if name in values else Text("") for name in columns))

    buffer = io.StringIO()
    console = Console(
        file=buffer,
        width=width or shutil.get_terminal_size((120, 24)).columns,
        color_system=None,
        highlight=False,
    )
    console.print(table)
    return buffer.getvalue().rstrip("\n")


def format_result(result: Any, output_format: str = "json") -> str:
    """Table only makes sense for a list of rows; everything else prints as JSON."""
    if output_format == "table" and isinstance(result, list):
        return render_table(result)
    return to_json(result)
