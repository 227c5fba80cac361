"""JSON-lines boundary between rustc's stderr and the translator.

Each line is handled independently. A line that is not UTF-8, not JSON,
not a diagnostic, or that produced no translation is emitted exactly as
received, so a translation problem never hides a diagnostic.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Iterable, Iterator

from rustcja.config import DIAGNOSTIC_MESSAGE_TYPE
from rustcja.engine.diagnostic import SubstitutionLog, translate_record
from rustcja.phrases.table import PhraseTable

logger = logging.getLogger(__name__)

MESSAGE_TYPE_KEY = "$message_type"


def is_diagnostic(value: Any) -> bool:
    """True for JSON objects tagged ``"$message_type": "diagnostic"``."""
    return (
        isinstance(value, dict)
        and value.get(MESSAGE_TYPE_KEY) == DIAGNOSTIC_MESSAGE_TYPE
    )


def convert_record(value: Any, table: PhraseTable) -> tuple[Any, SubstitutionLog]:
    """Translate a parsed record if it is a diagnostic.

    Anything else (artifact notifications, future-incompat reports, plain
    JSON values) is returned unchanged with an empty log.
    """
    if not is_diagnostic(value):
        return value, []
    return translate_record(value, table)


def _split_terminator(line: bytes) -> tuple[bytes, bytes]:
    """Split a raw line into (body, line terminator)."""
    if line.endswith(b"\r\n"):
        return line[:-2], b"\r\n"
    if line.endswith(b"\n"):
        return line[:-1], b"\n"
    return line, b""


def convert_line(line: bytes, table: PhraseTable) -> bytes:
    """Translate one raw JSON line, preserving its line terminator."""
    body, terminator = _split_terminator(line)

    try:
        text = body.decode("utf-8")
        value = json.loads(text)
    except (UnicodeDecodeError, json.JSONDecodeError):
        return line

    converted, log = convert_record(value, table)
    if not log:
        return line

    try:
        encoded = json.dumps(converted, ensure_ascii=False, separators=(",", ":"))
    except (TypeError, ValueError) as e:
        logger.debug(f"Re-encoding translated record failed: {e}")
        return line

    logger.debug(f"Translated {len(log)} field(s) in diagnostic")
    return encoded.encode("utf-8") + terminator


def convert_stream(lines: Iterable[bytes], table: PhraseTable) -> Iterator[bytes]:
    """Translate an iterable of raw lines (e.g. a pipe) lazily."""
    for line in lines:
        yield convert_line(line, table)


def convert_json_error_format(data: bytes, table: PhraseTable) -> bytes:
    """Translate a whole stderr buffer of JSON lines."""
    return b"".join(convert_stream(data.splitlines(keepends=True), table))
