"""CLI formatters"""

from hosei.cli.formatters.report import (
    format_inputs,
    format_json,
    format_result_line,
    format_result_lines,
)

__all__ = [
    "format_inputs",
    "format_json",
    "format_result_line",
    "format_result_lines",
]
