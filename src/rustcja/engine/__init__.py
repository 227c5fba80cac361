"""Translation engine for rustc JSON diagnostics."""

from rustcja.engine.diagnostic import (
    SubstitutionLog,
    apply_rendered,
    reconcile_rendered,
    translate_diagnostic,
    translate_record,
)
from rustcja.engine.message import translate_message
from rustcja.engine.stream import (
    convert_json_error_format,
    convert_line,
    convert_record,
    convert_stream,
    is_diagnostic,
)

__all__ = [
    "SubstitutionLog",
    "apply_rendered",
    "reconcile_rendered",
    "translate_diagnostic",
    "translate_record",
    "translate_message",
    "convert_json_error_format",
    "convert_line",
    "convert_record",
    "convert_stream",
    "is_diagnostic",
]
