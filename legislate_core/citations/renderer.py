"""
Citation renderer: splits text into plain and linked spans.

The display layers (markdown reports, rich console) consume the span list
and decide how a link is drawn; this module only decides where links go.
"""
from dataclasses import dataclass
from typing import Any, List, Optional, Union

from legislate_core.citations.detector import CitationDetector
from legislate_core.citations.links import build_bill_link


@dataclass(frozen=True)
class PlainText:
    text: str


@dataclass(frozen=True)
class Linked:
    text: str
    url: str


RenderedSpan = Union[PlainText, Linked]

_default_detector = CitationDetector()


def render_citations(
    text: Any,
    congress_hint: Optional[str] = None,
    detector: Optional[CitationDetector] = None,
) -> List[Any]:
    """
    Turn citations in text into linked spans.

    Empty or non-string input comes back unchanged as a one-element list.
    Citations that cannot be linked (no session number, zero act number)
    are emitted as PlainText with their literal text.

    Args:
        text: Text to annotate
        congress_hint: Congress/session string used for House and Senate links
        detector: Optional detector (defaults to the shared catalog detector)

    Returns:
        Spans covering the whole input, in order
    """
    if not isinstance(text, str) or not text:
        return [text]

    detector = detector or _default_detector
    spans: List[RenderedSpan] = []
    last_index = 0

    for match in detector.detect(text):
        if match.start > last_index:
            spans.append(PlainText(text[last_index:match.start]))

        url = build_bill_link(match.number, match.kind, congress_hint, match.matched_text)
        if url:
            spans.append(Linked(match.matched_text, url))
        else:
            spans.append(PlainText(match.matched_text))
        last_index = match.end

    if last_index < len(text):
        spans.append(PlainText(text[last_index:]))

    return spans or [PlainText(text)]
