"""Pretty JSON rendering of sample values."""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from decimal import Decimal

from class_json_sampler.sample_resolution.sample_models import SampleValue


def render_sample_json(value: SampleValue, *, indent: int = 2) -> str:
    """Render a sample value as indented JSON text.

    Decimals keep their scale (``0.00``) instead of going through ``float``.
    """
    if indent <= 0:
        raise ValueError("indent must be greater than zero.")
    return _render(value, level=0, indent=indent)


def _render(value: SampleValue, *, level: int, indent: int) -> str:
    # Plain loops keep one frame per nesting level for deep samples.
    if isinstance(value, Mapping):
        members = []
        for key, item in value.items():
            rendered = _render(item, level=level + 1, indent=indent)
            members.append(f"{json.dumps(str(key))}: {rendered}")
        return _render_block("{", "}", members, level=level, indent=indent)
    if isinstance(value, Sequence) and not isinstance(value, str):
        items = []
        for item in value:
            items.append(_render(item, level=level + 1, indent=indent))
        return _render_block("[", "]", items, level=level, indent=indent)
    if isinstance(value, Decimal):
        return str(value)
    return json.dumps(value)


def _render_block(opening: str, closing: str, lines: list[str], *, level: int, indent: int) -> str:
    if not lines:
        return opening + closing
    inner = " " * (indent * (level + 1))
    outer = " " * (indent * level)
    body = ",\n".join(inner + line for line in lines)
    return f"{opening}\n{body}\n{outer}{closing}"
