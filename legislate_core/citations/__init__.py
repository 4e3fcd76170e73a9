"""
Bill Citation Linking.

Detects bill and Republic Act citations in analysis text and turns them into
links to the official documents.

Components:
- CITATION_PATTERNS: Ordered pattern catalog (Republic Act, House, Senate)
- CitationDetector: Scan + overlap resolution
- build_bill_link: URL synthesis per citation kind
- render_citations: Plain/linked span sequence for display layers
"""
from legislate_core.citations.patterns import (
    CITATION_PATTERNS,
    CitationKind,
    CitationPattern,
)
from legislate_core.citations.detector import (
    CitationDetector,
    CitationMatch,
    scan_citations,
    resolve_overlaps,
)
from legislate_core.citations.links import (
    build_bill_link,
    extract_session_number,
    normalize_house_bill_code,
)
from legislate_core.citations.renderer import (
    Linked,
    PlainText,
    RenderedSpan,
    render_citations,
)

__all__ = [
    "CITATION_PATTERNS",
    "CitationKind",
    "CitationPattern",
    "CitationDetector",
    "CitationMatch",
    "scan_citations",
    "resolve_overlaps",
    "build_bill_link",
    "extract_session_number",
    "normalize_house_bill_code",
    "Linked",
    "PlainText",
    "RenderedSpan",
    "render_citations",
]
