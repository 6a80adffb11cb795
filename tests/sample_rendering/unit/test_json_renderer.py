"""JSON renderer tests."""

from __future__ import annotations

import json
from decimal import Decimal

import pytest
from class_json_sampler.sample_rendering.json_renderer import render_sample_json


def test_renders_nested_samples_with_two_space_indent() -> None:
    sample = {
        "id": 0,
        "price": Decimal("0.00"),
        "active": False,
        "note": "\x00",
        "tags": [""],
        "owner": {"name": "", "roles": [{}]},
        "nothing": None,
    }

    assert render_sample_json(sample) == (
        "{\n"
        '  "id": 0,\n'
        '  "price": 0.00,\n'
        '  "active": false,\n'
        '  "note": "\\u0000",\n'
        '  "tags": [\n'
        '    ""\n'
        "  ],\n"
        '  "owner": {\n'
        '    "name": "",\n'
        '    "roles": [\n'
        "      {}\n"
        "    ]\n"
        "  },\n"
        '  "nothing": null\n'
        "}"
    )


def test_rendered_text_is_valid_json() -> None:
    sample = {"lines": [{"price": Decimal("0.00"), "sku": "a\"b"}], "when": "2024-01-01 00:00:00"}

    parsed = json.loads(render_sample_json(sample, indent=4))

    assert parsed == {"lines": [{"price": 0.0, "sku": 'a"b'}], "when": "2024-01-01 00:00:00"}


def test_renders_empty_containers_and_scalars() -> None:
    assert render_sample_json({}) == "{}"
    assert render_sample_json([]) == "[]"
    assert render_sample_json("") == '""'
    assert render_sample_json(1700000000000) == "1700000000000"


def test_custom_indent() -> None:
    assert render_sample_json({"a": [0]}, indent=4) == '{\n    "a": [\n        0\n    ]\n}'


def test_rejects_non_positive_indent() -> None:
    with pytest.raises(ValueError):
        render_sample_json({}, indent=0)
