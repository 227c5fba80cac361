"""Phrase table: ordered English/Japanese template pairs.

Data file format (JSON array, or the same structure in YAML)::

    [
      {"en": "borrow of moved value", "ja": "移動された値の借用"},
      {"en": "cannot find value `{$name}` in this scope", "ja": "..."}
    ]

Entries are sorted longest source template first. Matching scans in that
order and the first hit wins, so the order decides which phrase is used
when several could match.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Iterable, Iterator

import yaml

from rustcja.config import Settings
from rustcja.phrases.template import TemplateMatcher, compile_template

logger = logging.getLogger(__name__)

YAML_SUFFIXES = {".yaml", ".yml"}


@dataclass(frozen=True)
class PhraseEntry:
    """One known phrase pair."""

    source_template: str
    target_template: str

    @classmethod
    def from_dict(cls, data: dict) -> "PhraseEntry | None":
        """Create from a data-file record.

        Accepts ``en``/``ja`` keys (bundled format) or ``source``/``target``.
        Returns None for records without two non-empty strings.
        """
        source = data.get("en", data.get("source"))
        target = data.get("ja", data.get("target"))
        if not isinstance(source, str) or not isinstance(target, str):
            return None
        if not source or not target:
            return None
        return cls(source_template=source, target_template=target)

    def to_dict(self) -> dict:
        return {"en": self.source_template, "ja": self.target_template}


class PhraseTable:
    """Immutable, ordered collection of phrase entries.

    Compiled matchers are built once here and shared by every lookup.
    Entries whose template does not compile have no matcher and are
    skipped during matching.
    """

    def __init__(self, entries: Iterable[PhraseEntry] = ()):
        # Stable sort: equal lengths keep their data-file order
        self._entries: tuple[PhraseEntry, ...] = tuple(
            sorted(entries, key=lambda e: len(e.source_template), reverse=True)
        )

        self._matchers: dict[str, TemplateMatcher | None] = {}
        for entry in self._entries:
            template = entry.source_template
            if template not in self._matchers:
                self._matchers[template] = compile_template(template)

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[str, str]]) -> "PhraseTable":
        """Build from (source, target) tuples."""
        return cls(PhraseEntry(source, target) for source, target in pairs)

    @classmethod
    def from_records(cls, records: Iterable[dict]) -> "PhraseTable":
        """Build from data-file records, dropping malformed ones."""
        entries = []
        for record in records:
            entry = PhraseEntry.from_dict(record) if isinstance(record, dict) else None
            if entry is None:
                logger.debug(f"Skipping malformed phrase record: {record!r}")
                continue
            entries.append(entry)
        return cls(entries)

    @property
    def entries(self) -> tuple[PhraseEntry, ...]:
        """Entries in match order."""
        return self._entries

    def matchers(self) -> Iterator[tuple[PhraseEntry, TemplateMatcher]]:
        """Yield (entry, matcher) in match order, skipping bad templates."""
        for entry in self._entries:
            matcher = self._matchers[entry.source_template]
            if matcher is not None:
                yield entry, matcher

    def __iter__(self) -> Iterator[PhraseEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)

    def __repr__(self) -> str:
        return f"PhraseTable({len(self._entries)} entries)"


def read_phrase_records(path: Path) -> list[dict]:
    """Read raw phrase records from a JSON or YAML file.

    Returns an empty list if the file is missing or not a list of records.
    """
    path = Path(path)
    if not path.exists():
        logger.warning(f"Phrase data not found: {path}")
        return []

    try:
        with open(path, "r", encoding="utf-8") as f:
            if path.suffix.lower() in YAML_SUFFIXES:
                raw_data = yaml.safe_load(f)
            else:
                raw_data = json.load(f)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError, yaml.YAMLError) as e:
        logger.warning(f"Could not read phrase data {path}: {e}")
        return []

    if not isinstance(raw_data, list):
        logger.warning(f"Phrase data must be a list of records: {path}")
        return []

    return raw_data


def load_phrase_table(*paths: Path) -> PhraseTable:
    """Load and merge phrase files into one table.

    A missing or malformed file contributes no entries; with no usable
    data the result is an empty table (translation becomes a no-op).
    """
    records: list[dict] = []
    for path in paths:
        records.extend(read_phrase_records(path))

    table = PhraseTable.from_records(records)
    logger.debug(f"Loaded {len(table)} phrase entries from {len(paths)} file(s)")
    return table


@lru_cache(maxsize=None)
def _cached_table(paths: tuple[Path, ...]) -> PhraseTable:
    return load_phrase_table(*paths)


def get_default_table(settings: Settings | None = None) -> PhraseTable:
    """Process-wide phrase table for the configured data files.

    Built on first use and cached per path list; the table is read-only.
    """
    settings = settings or Settings.from_env()
    return _cached_table(tuple(settings.all_phrase_paths))
