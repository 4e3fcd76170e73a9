"""
Document link synthesis for bill citations.

Builds the public document URL for a citation:
- House bills: PDF on the House of Representatives legislative documents host,
  keyed by congress session and normalized bill code (e.g. HB1234)
- Senate bills: Senate legislative search, keyed by session and the raw
  citation text as the query
- Republic Acts: Official Gazette page, keyed by the act number

House and Senate links need a congress session number, taken from the first
run of digits in a caller-supplied hint ("19", "19th Congress").
Republic Act links do not.

Absence (None) is the only failure signal. An unlinkable citation is a normal
outcome and renders as plain text, so nothing here raises.
"""
import re
from typing import Optional, Union
from urllib.parse import quote

from legislate_core.citations.patterns import CitationKind

HOUSE_DOCS_URL = "https://docs.congress.hrep.online/legisdocs/basic_{session}/{code}.pdf"
SENATE_SEARCH_URL = "https://web.senate.gov.ph/lis/bill_res.aspx?congress={session}&q={query}"
REPUBLIC_ACT_URL = "https://www.officialgazette.gov.ph/republic-acts/republic-act-no-{number}/"

# Placeholder values LLM output uses for unknown fields
_PLACEHOLDERS = {"not specified", "n/a"}

# Characters left unescaped, same set as JavaScript's encodeURIComponent
_URI_COMPONENT_SAFE = "!*'()"


def extract_session_number(congress_hint: Optional[str]) -> Optional[str]:
    """Return the first run of digits in the hint, or None."""
    if not isinstance(congress_hint, str):
        return None
    match = re.search(r"[0-9]+", congress_hint)
    return match.group(0) if match else None


def normalize_house_bill_code(citation: str) -> str:
    """
    Normalize a House citation to the HB<digits> document code.

    "HB 01234" -> "HB01234", "H.R. 1234" -> "HB1234",
    "House Bill No. 4664" -> "HB4664".
    """
    code = re.sub(r"\s", "", citation).upper()
    if code.startswith("HB"):
        return code
    if code.startswith("H.R."):
        return code.replace("H.R.", "HB", 1)
    return "HB" + re.sub(r"[^0-9]", "", code)


def _kind_label(kind: Union[CitationKind, str, None]) -> Optional[str]:
    if isinstance(kind, CitationKind):
        return kind.value
    if isinstance(kind, str):
        return kind
    return None


def _is_missing(value: Optional[str]) -> bool:
    return not value or value.strip().lower() in _PLACEHOLDERS


def build_bill_link(
    number: Optional[str],
    kind: Union[CitationKind, str, None],
    congress_hint: Optional[str] = None,
    full_match_text: Optional[str] = None,
) -> Optional[str]:
    """
    Build the document URL for a citation.

    Args:
        number: Bill or act number (digits, or a full id such as "HB1234")
        kind: CitationKind, or a free-text chamber label such as "House",
            "Senate" or "Republic Act" (as returned by the detailed analysis)
        congress_hint: Caller-supplied congress/session string
        full_match_text: Matched citation text, e.g. "House Bill No. 4664"

    Returns:
        URL string, or None when no link can be built
    """
    label = _kind_label(kind)
    if not isinstance(number, str) or _is_missing(number) or _is_missing(label):
        return None
    if full_match_text is not None and not isinstance(full_match_text, str):
        full_match_text = None

    label = label.lower()
    session = extract_session_number(congress_hint)

    if "house" in label:
        if not session:
            return None
        code = normalize_house_bill_code(full_match_text or number)
        return HOUSE_DOCS_URL.format(
            session=session,
            code=quote(code, safe=_URI_COMPONENT_SAFE),
        )

    if "senate" in label:
        if not session:
            return None
        return SENATE_SEARCH_URL.format(
            session=session,
            query=quote(full_match_text or number, safe=_URI_COMPONENT_SAFE),
        )

    if "ra" in label or "republic act" in label:
        act_number = re.sub(r"[^0-9]", "", number).lstrip("0")
        if not act_number:
            return None
        return REPUBLIC_ACT_URL.format(number=act_number)

    return None
