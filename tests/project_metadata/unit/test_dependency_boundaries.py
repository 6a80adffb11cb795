"""Boundary tests for sample_resolution internal dependencies."""

from __future__ import annotations

from pathlib import Path


def _project_root() -> Path:
    return Path(__file__).resolve().parents[3]


def test_sample_resolution_does_not_import_outer_layers() -> None:
    resolution_dir = _project_root() / "src" / "class_json_sampler" / "sample_resolution"
    forbidden_import_fragments = (
        "import yaml",
        "import click",
        "class_json_sampler.configuration",
        "class_json_sampler.conversion",
        "class_json_sampler.sample_rendering",
        "class_json_sampler.type_catalog.catalog_reader",
    )

    for module_path in sorted(resolution_dir.glob("*.py")):
        text = module_path.read_text(encoding="utf-8")
        for fragment in forbidden_import_fragments:
            assert fragment not in text, f"Forbidden core dependency in {module_path}: {fragment}"
