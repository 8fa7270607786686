"""
Matching rules for SQL segmentation.

Each rule scans the whole input on its own and produces candidate
matches for one category:
- Keywords (boundary-delimited, case-insensitive)
- Single-character operators
- Function names (identifier followed by '(')
- Numbers (preceded by a boundary character)
- Quoted string literals
- Brackets
- Line breaks

Rules never look at each other's output; overlaps are resolved by
the segment builder.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Pattern, Sequence

from sqlcolor.core.keywords import keywords_by_length
from sqlcolor.core.models import Category, Match


# Characters that may not border a keyword
SPLIT_CHARS = r'[^a-zA-Z_]'

# Characters allowed directly before a number
NUMBER_PREFIX_CHARS = frozenset('+-*/=<>[(, \t\r\n')


@dataclass
class Rule:
    """A matching rule with pattern and span adjustments."""
    category: Category
    pattern: str
    flags: int = 0
    group: int = 0  # Capture group whose span is the match
    trim_end: int = 0  # Characters dropped from the end of the span
    prefix: Optional[frozenset[str]] = None  # Required leading character, excluded from the span

    _compiled: Optional[Pattern] = field(default=None, repr=False)

    def compile(self) -> Pattern:
        """Compile the pattern."""
        if self._compiled is None:
            self._compiled = re.compile(self.pattern, self.flags)
        return self._compiled

    def iter_matches(self, text: str) -> Iterator[Match]:
        """
        Scan text from start to end and yield candidate matches.

        The scan position is a local variable; each call starts over
        at offset 0.
        """
        pattern = self.compile()
        pos = 0

        while pos <= len(text):
            found = pattern.search(text, pos)
            if found is None:
                break

            # Resume after the raw match, whether or not it is kept
            pos = found.end() if found.end() > found.start() else found.start() + 1

            candidate = self._to_match(found)
            if candidate is not None:
                yield candidate

    def find_matches(self, text: str) -> List[Match]:
        """Get all candidate matches for text."""
        return list(self.iter_matches(text))

    def _to_match(self, found: re.Match) -> Optional[Match]:
        """Turn a raw regex match into a candidate, or None if rejected."""
        if self.prefix is not None:
            raw = found.group(0)
            if not raw or raw[0] not in self.prefix:
                return None

        start = found.start(self.group)
        length = found.end(self.group) - start - self.trim_end
        if length <= 0:
            return None

        return Match(self.category, start, length)


def _keyword_pattern() -> str:
    words = '|'.join(re.escape(word) for word in keywords_by_length())
    return rf'(\A|{SPLIT_CHARS})({words})(?={SPLIT_CHARS}|\Z)'


DEFAULT_RULES: tuple[Rule, ...] = (
    Rule(
        Category.KEYWORD,
        _keyword_pattern(),
        flags=re.IGNORECASE | re.ASCII,
        group=2,
    ),
    Rule(Category.SPECIAL, r'[=!%/*\-,;:+<>]'),
    Rule(Category.FUNCTION, r'\w+\(', flags=re.ASCII, trim_end=1),
    Rule(
        Category.NUMBER,
        r'\D(\d+(?:\.\d+)?)',
        flags=re.ASCII,
        group=1,
        prefix=NUMBER_PREFIX_CHARS,
    ),
    Rule(
        Category.STRING,
        r"'(?:\\'|.)*?'|\"(?:\\\"|.)*?\"|`(?:\\`|.)*?`",
    ),
    Rule(Category.BRACKET, r'[()]'),
    Rule(Category.WHITESPACE, r'\n'),
)

# Compile once at import; the rule table is never modified afterwards
for _rule in DEFAULT_RULES:
    _rule.compile()


def collect_matches(text: str, rules: Optional[Sequence[Rule]] = None) -> List[Match]:
    """
    Run every rule over text and gather their candidates.

    Candidates are appended rule by rule, so rule order is preserved
    for candidates that start at the same offset.
    """
    if rules is None:
        rules = DEFAULT_RULES

    matches: List[Match] = []
    for rule in rules:
        matches.extend(rule.iter_matches(text))
    return matches
