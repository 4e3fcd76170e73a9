"""
Citation pattern catalog.

Philippine legislative documents cite bills and enacted laws with a small,
stable set of prefixes ("House Bill No. 1234", "SBN 567", "R.A. 11232").
Each citation kind is declared once here as data: a kind tag, the phrase
alternation that introduces the number, and the regex group holding the
number. The scanner iterates this table uniformly, so a new citation kind
is a new catalog entry rather than new branching code.

Catalog order matters only when two kinds match at the same offset: the
earlier entry wins the tie (see CitationDetector.resolve).
"""
import re
from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class CitationKind(str, Enum):
    """Kinds of citations the scanner recognizes."""
    HOUSE = "house"
    SENATE = "senate"
    REPUBLIC_ACT = "ra"


@dataclass(frozen=True)
class CitationPattern:
    """
    Declarative rule for one citation kind.

    Attributes:
        kind: Citation kind attributed to every match of this pattern
        matcher: Compiled case-insensitive regex, phrase then number
        number_group: Regex group that holds the digit string
    """
    kind: CitationKind
    matcher: re.Pattern
    number_group: int = 2


# Trailing "No." / "No" accepted after the long-form phrases
_NO_SUFFIX = r"(?:\s*No\.?)?"


def _compile(*phrases: str) -> re.Pattern:
    """Build `(phrase|phrase|...)\\s*([0-9]+)` from phrase fragments; digits are ASCII only."""
    return re.compile(r"(" + "|".join(phrases) + r")\s*([0-9]+)", re.IGNORECASE)


# Ordered: RepublicAct, House, Senate
CITATION_PATTERNS: Tuple[CitationPattern, ...] = (
    CitationPattern(
        kind=CitationKind.REPUBLIC_ACT,
        matcher=_compile(
            r"Republic\sAct" + _NO_SUFFIX,
            r"R\.A\." + _NO_SUFFIX,
            r"RA",
        ),
    ),
    CitationPattern(
        kind=CitationKind.HOUSE,
        matcher=_compile(
            r"House\sBill" + _NO_SUFFIX,
            r"H\.B\." + _NO_SUFFIX,
            r"HB",
            r"House\sResolution" + _NO_SUFFIX,
            r"H\.Res\." + _NO_SUFFIX,
            r"HR",
        ),
    ),
    CitationPattern(
        kind=CitationKind.SENATE,
        matcher=_compile(
            r"Senate\sBill" + _NO_SUFFIX,
            r"S\.B\." + _NO_SUFFIX,
            r"SBN",
            r"Senate\sResolution" + _NO_SUFFIX,
            r"S\.Res\." + _NO_SUFFIX,
            r"SR",
        ),
    ),
)
