"""Output formatting utilities."""

from .formatters import (
    format_error,
    format_key_value,
    format_reply,
    format_success,
    format_table,
)
from .json_output import json_output, record_to_dict, reply_to_dict

__all__ = [
    "format_error",
    "format_key_value",
    "format_reply",
    "format_success",
    "format_table",
    "json_output",
    "record_to_dict",
    "reply_to_dict",
]
