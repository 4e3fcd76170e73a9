"""
Bill citation detection.

Finds bill and Republic Act citations in free text (typically LLM-generated
analysis) so they can be turned into document links.

Detection strategy:
1. Scan: run every catalog pattern over the whole text independently and
   collect all raw matches with offset and length
2. Resolve: stable-sort by offset, then keep a match only if it starts at or
   after the end of the last accepted match

Overlap resolution is a separate interval pass rather than something done
during the scan. A citation such as "House Bill No. 12" can also contain a
shorter match from another pattern; the earliest-starting citation always
wins, and a same-offset tie goes to the pattern listed first in the catalog.

Usage:
    detector = CitationDetector()
    for match in detector.detect(text):
        print(match.kind, match.number, match.matched_text)
"""
from dataclasses import dataclass
from typing import Iterable, List, Sequence

from legislate_core.citations.patterns import (
    CITATION_PATTERNS,
    CitationKind,
    CitationPattern,
)


@dataclass(frozen=True)
class CitationMatch:
    """
    One citation occurrence in the scanned text.

    Attributes:
        start: Offset of the first matched character
        length: Number of matched characters (always > 0)
        matched_text: Matched substring, original casing and spacing preserved
        number: Digit string pulled from the citation
        kind: Citation kind of the pattern that produced the match
    """
    start: int
    length: int
    matched_text: str
    number: str
    kind: CitationKind

    @property
    def end(self) -> int:
        return self.start + self.length


class CitationDetector:
    """
    Detect bill citations with the pattern catalog.

    The detector is stateless apart from its (immutable) pattern table, so a
    single instance can be shared freely.
    """

    def __init__(self, patterns: Sequence[CitationPattern] = CITATION_PATTERNS):
        self.patterns = tuple(patterns)

    def scan(self, text: str) -> List[CitationMatch]:
        """
        Collect every raw match of every pattern.

        Each pattern runs to exhaustion over the full text; results are
        concatenated in catalog order and may overlap across patterns.

        Args:
            text: Text to scan

        Returns:
            Raw matches, unsorted across patterns
        """
        matches: List[CitationMatch] = []
        for pattern in self.patterns:
            for match in pattern.matcher.finditer(text):
                matches.append(CitationMatch(
                    start=match.start(),
                    length=len(match.group(0)),
                    matched_text=match.group(0),
                    number=match.group(pattern.number_group),
                    kind=pattern.kind,
                ))
        return matches

    @staticmethod
    def resolve(matches: Iterable[CitationMatch]) -> List[CitationMatch]:
        """
        Drop matches that overlap an earlier accepted match.

        Python's sort is stable, so matches starting at the same offset keep
        their scan (catalog) order.

        Args:
            matches: Raw matches from scan()

        Returns:
            Non-overlapping matches in ascending offset order
        """
        resolved: List[CitationMatch] = []
        last_end = -1
        for match in sorted(matches, key=lambda m: m.start):
            if match.start >= last_end:
                resolved.append(match)
                last_end = match.end
        return resolved

    def detect(self, text: str) -> List[CitationMatch]:
        """Scan then resolve."""
        return self.resolve(self.scan(text))


_default_detector = CitationDetector()


def scan_citations(text: str) -> List[CitationMatch]:
    return _default_detector.scan(text)


def resolve_overlaps(matches: Iterable[CitationMatch]) -> List[CitationMatch]:
    return CitationDetector.resolve(matches)
