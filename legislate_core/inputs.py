"""
Bill input state and reconciliation.

Each bill slot (bill1 = Senate Version, bill2 = House Version) is filled by
exactly one of three mutually exclusive input modes:

    manual   congress + bill number, text fetched later
    pdf      a selected PDF (text extraction is simulated)
    pasted   bill text pasted directly

A fourth, form-wide mode, keyword search, replaces both slots with a single
fetched bill.

The transition functions below mirror what editing each input does to the
slot: switching mode wipes the other modes' state but keeps congress and
number. All transitions return new objects; BillDetails is never mutated.
"""
from dataclasses import dataclass
from pathlib import Path
from typing import Literal, Optional, Tuple

from pydantic import BaseModel

from legislate_core.exceptions import InputError

Chamber = Literal["House", "Senate", "RA", "N/A"]

PDF_CONTENT_TYPE = "application/pdf"


def get_chamber_from_bill_number(bill_number: Optional[str]) -> Chamber:
    """
    Detect the chamber from a bill number prefix.

    HR / H.R. / HB -> House; S. / SB / SBN / S.RES / S.J.RES -> Senate;
    RA / R.A. -> RA (Republic Act); anything else -> N/A.
    """
    if not bill_number:
        return "N/A"
    upper = bill_number.upper()
    if upper.startswith(("HR", "H.R.", "HB")):
        return "House"
    if upper.startswith(("S.", "SB", "S.RES", "S.J.RES", "SBN")):
        return "Senate"
    if upper.startswith(("RA", "R.A.")):
        return "RA"
    return "N/A"


class BillDetails(BaseModel):
    """State of one bill slot."""
    congress: str = ""
    number: str = ""
    title: str = ""
    text: str = ""
    chamber: Chamber = "N/A"
    file_name: str = ""
    is_pasted: bool = False

    @property
    def has_file(self) -> bool:
        return bool(self.file_name)

    @property
    def has_manual_input(self) -> bool:
        return bool(self.congress and self.number)

    def is_provided(self) -> bool:
        """True when any input mode supplies this bill."""
        return self.has_manual_input or self.has_file or self.is_pasted

    def detected_chamber(self) -> Chamber:
        return get_chamber_from_bill_number(self.number) if self.number else "N/A"


def _base(bill: BillDetails, congress: Optional[str] = None, number: Optional[str] = None) -> BillDetails:
    congress = bill.congress if congress is None else congress
    number = bill.number if number is None else number
    return BillDetails(
        congress=congress,
        number=number,
        chamber=get_chamber_from_bill_number(number),
    )


def with_manual_field(bill: BillDetails, field: Literal["congress", "number"], value: str) -> BillDetails:
    """Edit congress or bill number; drops any PDF or pasted text."""
    if field == "congress":
        return _base(bill, congress=value)
    if field == "number":
        return _base(bill, number=value)
    raise ValueError(f"Unknown manual field: {field}")


def with_pasted_text(bill: BillDetails, text: str) -> BillDetails:
    """Paste bill text; drops any PDF selection."""
    updated = _base(bill)
    return updated.model_copy(update={
        "text": text,
        "title": "Pasted Bill Text" if text else "",
        "is_pasted": bool(text),
    })


def with_pdf(bill: BillDetails, file_name: str, content_type: Optional[str] = None) -> BillDetails:
    """
    Select a PDF for the slot.

    PDF text extraction is not implemented; the slot gets placeholder text
    naming the file.

    Raises:
        InputError: If the file is not a PDF
    """
    is_pdf = (
        content_type == PDF_CONTENT_TYPE
        if content_type is not None
        else Path(file_name).suffix.lower() == ".pdf"
    )
    if not file_name or not is_pdf:
        raise InputError("Please select a PDF file.")

    name = Path(file_name).name
    updated = _base(bill)
    return updated.model_copy(update={
        "file_name": name,
        "text": f"Simulated text from uploaded PDF: {name}. Actual PDF content extraction is not implemented.",
        "title": f"Uploaded PDF: {name}",
    })


def cleared_file(bill: BillDetails) -> BillDetails:
    """Remove a PDF selection, keeping congress and number."""
    return _base(bill)


def apply_keyword(bill1: BillDetails, bill2: BillDetails, keyword: str) -> Tuple[BillDetails, BillDetails]:
    """
    Enter a keyword search term.

    A non-empty keyword keeps only bill1's congress/number (they narrow the
    search) and resets bill2 entirely.
    """
    if not keyword:
        return bill1, bill2
    return _base(bill1), BillDetails()


@dataclass(frozen=True)
class InputLocks:
    """Which input modes of a slot are unavailable in the current state."""
    manual: bool
    pdf: bool
    pasted: bool


def input_locks(bill: BillDetails, keyword: str = "") -> InputLocks:
    """Input modes blocked by the mode already in use."""
    keyword_active = bool(keyword)
    return InputLocks(
        manual=bill.has_file or bill.is_pasted or keyword_active,
        pdf=bill.is_pasted or bill.has_manual_input or keyword_active,
        pasted=bill.has_file or bill.has_manual_input or keyword_active,
    )


def keyword_search_locked(bill1: BillDetails, bill2: BillDetails) -> bool:
    """Keyword search is unavailable once either slot holds a PDF or pasted text."""
    return bill1.has_file or bill2.has_file or bill1.is_pasted or bill2.is_pasted
