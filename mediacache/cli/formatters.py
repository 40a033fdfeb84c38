"""CLI formatting functions."""

import json
from typing import Any

import yaml


def format_output(data: Any, format_type: str) -> str:
    """Format data according to the specified format type."""
    if format_type == "yaml":
        return yaml.safe_dump(data, default_flow_style=False, sort_keys=False).rstrip()
    return json.dumps(data, indent=2, default=str)
