"""Phrase table and template compilation."""

from rustcja.phrases.table import (
    PhraseEntry,
    PhraseTable,
    get_default_table,
    load_phrase_table,
)
from rustcja.phrases.template import (
    TemplateMatch,
    TemplateMatcher,
    compile_template,
    fill_template,
)

__all__ = [
    "PhraseEntry",
    "PhraseTable",
    "get_default_table",
    "load_phrase_table",
    "TemplateMatch",
    "TemplateMatcher",
    "compile_template",
    "fill_template",
]
