"""Diagnostic tree translation and rendered-text reconciliation.

Translated fields (see https://doc.rust-lang.org/rustc/json.html):
- message
- spans[].label
- children[].message
- children[].spans[].label

Null or non-string values are left alone. Every change is recorded as an
(original, translated) pair, and those pairs are then replayed as literal
replacements over the top-level ``rendered`` text.
"""

from __future__ import annotations

import copy
from typing import Any

from rustcja.engine.message import translate_message
from rustcja.phrases.table import PhraseTable

# Ordered (original, translated) pairs for one record
SubstitutionLog = list[tuple[str, str]]


def _translate_field(
    obj: dict, key: str, table: PhraseTable, log: SubstitutionLog
) -> None:
    """Translate ``obj[key]`` in place if it is a string; log changes."""
    value = obj.get(key)
    if not isinstance(value, str):
        return

    translated = translate_message(value, table)
    if translated != value:
        obj[key] = translated
        log.append((value, translated))


def _translate_spans(obj: dict, table: PhraseTable, log: SubstitutionLog) -> None:
    spans = obj.get("spans")
    if not isinstance(spans, list):
        return

    for span in spans:
        if isinstance(span, dict):
            _translate_field(span, "label", table, log)


def translate_diagnostic(
    record: dict[str, Any], table: PhraseTable
) -> tuple[dict[str, Any], SubstitutionLog]:
    """Translate the text fields of one diagnostic record.

    The input is not modified; a deep copy with the same keys, key order
    and list lengths is returned along with the substitution log.
    ``rendered`` is not touched here (see apply_rendered).
    """
    new_record = copy.deepcopy(record)
    log: SubstitutionLog = []

    _translate_field(new_record, "message", table, log)
    _translate_spans(new_record, table, log)

    children = new_record.get("children")
    if isinstance(children, list):
        for child in children:
            if not isinstance(child, dict):
                continue
            _translate_field(child, "message", table, log)
            _translate_spans(child, table, log)

    return new_record, log


def reconcile_rendered(rendered: str, log: SubstitutionLog) -> str:
    """Replay substitutions over rendered text.

    Each pair replaces every occurrence of the original, in log order.
    Later pairs see the output of earlier ones. Empty originals and no-op
    pairs are skipped.
    """
    for original, translated in log:
        if not original or original == translated:
            continue
        rendered = rendered.replace(original, translated)
    return rendered


def apply_rendered(record: dict[str, Any], log: SubstitutionLog) -> dict[str, Any]:
    """Reconcile ``record["rendered"]`` in place and return the record."""
    rendered = record.get("rendered")
    if isinstance(rendered, str) and log:
        record["rendered"] = reconcile_rendered(rendered, log)
    return record


def translate_record(
    record: dict[str, Any], table: PhraseTable
) -> tuple[dict[str, Any], SubstitutionLog]:
    """Tree translation followed by rendered reconciliation."""
    new_record, log = translate_diagnostic(record, table)
    apply_rendered(new_record, log)
    return new_record, log
