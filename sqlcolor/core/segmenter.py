"""
Segment builder for SQL text.

Resolves the overlapping candidates produced by the rules into an
ordered, non-overlapping list of segments that covers the input.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from sqlcolor.core.models import Category, Match, Segment
from sqlcolor.core.rules import Rule, collect_matches


def build_segments(text: str, matches: Sequence[Match]) -> List[Segment]:
    """
    Build segments from candidate matches.

    Candidates are visited in start order (ties keep rule order). A
    candidate starting inside an already accepted span is discarded;
    gaps between accepted spans become default segments.

    Args:
        text: The input the matches were taken from
        matches: Candidates from all rules, in rule order

    Returns:
        Segments whose contents concatenate to text
    """
    ordered = sorted(matches, key=lambda m: m.start)

    segments: List[Segment] = []
    cursor = 0
    discarded = 0

    for match in ordered:
        if match.start < cursor:
            discarded += 1
            continue

        if match.start > cursor:
            segments.append(Segment(Category.DEFAULT, text[cursor:match.start]))

        segments.append(Segment(match.category, text[match.start:match.end]))
        cursor = match.end

    # Remaining suffix, clamped to the end of the input
    if cursor < len(text):
        segments.append(Segment(Category.DEFAULT, text[cursor:]))

    logging.debug(
        f"SegmentBuilder - {len(segments)} segments from {len(ordered)} candidates "
        f"({discarded} overlapping discarded)"
    )
    return segments


def get_segments(text: str, rules: Optional[Sequence[Rule]] = None) -> List[Segment]:
    """
    Split SQL text into categorized segments.

    Works for any string; the empty string gives an empty list.

    Raises:
        TypeError: If text is not a string
    """
    if not isinstance(text, str):
        raise TypeError(f"SQL text must be str, not {type(text).__name__}")

    if not text:
        return []

    return build_segments(text, collect_matches(text, rules))
