"""Message translator: one diagnostic string at a time."""

from __future__ import annotations

from rustcja.phrases.table import PhraseTable
from rustcja.phrases.template import fill_template


def translate_message(message: str, table: PhraseTable) -> str:
    """Translate a single message using the first matching phrase.

    Entries are tried longest source template first. The matched entry's
    target template gets the captured placeholder values, and any text the
    template did not cover is appended unchanged. Unmatched messages are
    returned as-is.

    Example:
        >>> table = PhraseTable.from_pairs([("error: {$name}", "エラー: {$name}")])
        >>> translate_message("error: foo, more text", table)
        'エラー: foo, more text'
    """
    for entry, matcher in table.matchers():
        match = matcher.match(message)
        if match is None:
            continue

        result = fill_template(entry.target_template, match.captures)
        if match.remainder:
            result += match.remainder
        return result

    return message
