"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "class-json-sampler.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Configuration template for class-json-sampler.
# Replace every <REQUIRED> placeholder before running convert or list-types.

catalog:
  # Type catalog documents (YAML or JSON), relative to this file.
  paths:
    - "<REQUIRED>"
  # Set to false to skip the built-in String/Number/Date/List/... declarations.
  include_builtin_types: true

output:
  # Spaces per nesting level in the generated JSON.
  indent: 2
"""


def build_placeholder_configuration() -> str:
    """Build a YAML configuration template with placeholders and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the placeholder configuration template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
