"""Template compiler for phrase matching.

A source template is literal text with ``{$name}`` placeholders, e.g.::

    move occurs because `{$name}` has type `{$ty}`, which does not implement the `Copy` trait

It compiles to an anchored regex that matches a *prefix* of the input:
literal runs are escaped, each placeholder becomes a lazy ``.+?`` group, and
a final group swallows whatever text follows the template (the trailing
remainder). Neither placeholders nor the remainder match across a newline,
so a multi-line message is left alone.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)

# {$name} placeholder token
PLACEHOLDER_RE = re.compile(r"\{\$(\w+)\}")

# Group name for the unmatched suffix
_REMAINDER_GROUP = "_rest"


def placeholder_names(template: str) -> list[str]:
    """Placeholder names in order of appearance (duplicates kept)."""
    return PLACEHOLDER_RE.findall(template)


@dataclass
class TemplateMatch:
    """Result of a successful prefix match."""

    captures: dict[str, str] = field(default_factory=dict)
    """Captured text by placeholder name."""

    remainder: str = ""
    """Input text left after the template."""


@dataclass(frozen=True)
class TemplateMatcher:
    """Compiled form of one source template."""

    template: str
    pattern: re.Pattern
    names: tuple[str, ...]
    """Placeholder name for each positional group (p0, p1, ...)."""

    def match(self, text: str) -> TemplateMatch | None:
        """Match the template against the start of ``text``.

        Returns None when the template does not match. When a placeholder
        name appears more than once, the last capture wins.
        """
        m = self.pattern.fullmatch(text)
        if m is None:
            return None

        captures: dict[str, str] = {}
        for index, name in enumerate(self.names):
            captures[name] = m.group(f"p{index}")

        return TemplateMatch(captures=captures, remainder=m.group(_REMAINDER_GROUP))


def template_to_regex(template: str) -> tuple[str, tuple[str, ...]]:
    """Build the regex source for a template.

    Groups are named positionally so that repeated placeholder names
    compile; the returned tuple maps group index back to placeholder name.
    """
    parts: list[str] = []
    names: list[str] = []
    last = 0

    for m in PLACEHOLDER_RE.finditer(template):
        parts.append(re.escape(template[last : m.start()]))
        parts.append(f"(?P<p{len(names)}>.+?)")
        names.append(m.group(1))
        last = m.end()

    parts.append(re.escape(template[last:]))
    parts.append(f"(?P<{_REMAINDER_GROUP}>.*)")

    return "".join(parts), tuple(names)


def compile_template(template: str) -> TemplateMatcher | None:
    """Compile a source template into a matcher.

    Returns None if the template cannot be compiled; callers skip such
    entries and keep going.
    """
    source, names = template_to_regex(template)
    try:
        pattern = re.compile(source)
    except re.error as e:
        logger.debug(f"Skipping uncompilable template {template!r}: {e}")
        return None

    return TemplateMatcher(template=template, pattern=pattern, names=names)


def fill_template(template: str, captures: dict[str, str]) -> str:
    """Substitute captured values into a target template.

    Placeholders without a capture stay as literal ``{$name}`` text.
    Substitution is single-pass, so captured text is never re-expanded.
    """

    def _replace(m: re.Match) -> str:
        name = m.group(1)
        if name in captures:
            return captures[name]
        return m.group(0)

    return PLACEHOLDER_RE.sub(_replace, template)
