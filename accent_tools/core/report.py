"""Report builder — text and JSON output for accent-tool results.

Colour values in a report are stored as (r, g, b) triples; both formats
render them with their hex form and perceived brightness.
"""

import json
from typing import Any

from accent_tools.core.colour_math import brightness, rgb_to_hex
from accent_tools.core.types import Report


def _is_colour(value: Any) -> bool:
    return (
        isinstance(value, (tuple, list))
        and len(value) == 3
        and all(isinstance(v, int) and not isinstance(v, bool) and 0 <= v <= 255 for v in value)
    )


def _colour_text(colour) -> str:
    r, g, b = colour
    return f'{rgb_to_hex(colour)}  rgb({r}, {g}, {b})  brightness={brightness(colour):.1f}'


def _colour_json(colour) -> dict[str, Any]:
    r, g, b = colour
    return {'hex': rgb_to_hex(colour), 'r': r, 'g': g, 'b': b, 'brightness': round(brightness(colour), 1)}


def format_text(report: Report) -> str:
    """Format report as human-readable text."""
    lines = []
    if report.image_path:
        dim = f'{report.image_width}×{report.image_height}'
        fmt = f', {report.image_format}' if report.image_format else ''
        lines.append(f'accent-tool {report.command}: {report.image_path} ({dim}{fmt})')
        lines.append('')

    for key, value in report.data.items():
        if _is_colour(value):
            lines.append(f'{key}: {_colour_text(value)}')
        elif isinstance(value, list) and value and all(_is_colour(v) for v in value):
            lines.append(f'{key}:')
            for i, colour in enumerate(value, 1):
                lines.append(f'  {i}. {_colour_text(colour)}')
        elif isinstance(value, list) and not value:
            lines.append(f'{key}: (none)')
        elif isinstance(value, dict):
            lines.append(f'── {key}')
            for k, v in value.items():
                lines.append(f'  {k}: {v}')
        else:
            lines.append(f'{key}: {value}')
    return '\n'.join(lines)


def _jsonable(value: Any) -> Any:
    if _is_colour(value):
        return _colour_json(value)
    if isinstance(value, dict):
        return {k: _jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_jsonable(v) for v in value]
    return value


def format_json(report: Report) -> str:
    """Format report as JSON."""
    obj: dict[str, Any] = {'command': report.command}
    if report.image_path:
        obj['image'] = report.image_path
        obj['dimensions'] = {'width': report.image_width, 'height': report.image_height}
        obj['format'] = report.image_format
    obj['results'] = _jsonable(report.data)
    return json.dumps(obj, indent=2)
