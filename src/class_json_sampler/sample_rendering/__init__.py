"""Sample rendering exports."""

from .json_renderer import render_sample_json

__all__ = ["render_sample_json"]
