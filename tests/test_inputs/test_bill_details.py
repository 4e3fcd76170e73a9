"""
Bill input state tests: chamber detection, mode transitions and locks.
"""
import pytest

from legislate_core.exceptions import InputError
from legislate_core.inputs import (
    BillDetails,
    apply_keyword,
    cleared_file,
    get_chamber_from_bill_number,
    input_locks,
    keyword_search_locked,
    with_manual_field,
    with_pasted_text,
    with_pdf,
)


class TestChamberDetection:

    @pytest.mark.parametrize("number,chamber", [
        ("HB1234", "House"),
        ("hr 55", "House"),
        ("H.R. 1234", "House"),
        ("SBN-1234", "Senate"),
        ("SB 12", "Senate"),
        ("S.567", "Senate"),
        ("S.Res. 8", "Senate"),
        ("S.J.Res. 2", "Senate"),
        ("RA 8799", "RA"),
        ("R.A. 10173", "RA"),
        ("1234", "N/A"),
        ("", "N/A"),
        (None, "N/A"),
    ])
    def test_prefixes(self, number, chamber):
        assert get_chamber_from_bill_number(number) == chamber


class TestBillDetails:

    def test_empty_slot_not_provided(self):
        bill = BillDetails()
        assert not bill.is_provided()
        assert not bill.has_manual_input
        assert bill.chamber == "N/A"

    def test_manual_needs_both_fields(self):
        assert not BillDetails(congress="19").is_provided()
        assert BillDetails(congress="19", number="SBN-1").is_provided()

    def test_detected_chamber(self):
        assert BillDetails(number="HB 12").detected_chamber() == "House"
        assert BillDetails().detected_chamber() == "N/A"


class TestTransitions:

    def test_manual_field_sets_chamber(self):
        bill = with_manual_field(BillDetails(), "number", "SBN-1234")
        bill = with_manual_field(bill, "congress", "19th")

        assert bill.congress == "19th"
        assert bill.number == "SBN-1234"
        assert bill.chamber == "Senate"
        assert bill.has_manual_input

    def test_manual_edit_drops_pasted_text(self):
        pasted = with_pasted_text(BillDetails(congress="19"), "Some bill text")
        bill = with_manual_field(pasted, "number", "HB1")

        assert not bill.is_pasted
        assert bill.text == ""
        assert bill.title == ""
        assert bill.congress == "19"

    def test_unknown_manual_field(self):
        with pytest.raises(ValueError):
            with_manual_field(BillDetails(), "title", "x")

    def test_pasted_text(self):
        bill = with_pasted_text(BillDetails(), "SECTION 1.")
        assert bill.is_pasted
        assert bill.text == "SECTION 1."
        assert bill.title == "Pasted Bill Text"
        assert bill.is_provided()

    def test_clearing_pasted_text(self):
        bill = with_pasted_text(with_pasted_text(BillDetails(), "x"), "")
        assert not bill.is_pasted
        assert bill.title == ""

    def test_pasted_text_drops_pdf(self):
        bill = with_pasted_text(with_pdf(BillDetails(), "senate.pdf"), "text")
        assert bill.file_name == ""
        assert bill.is_pasted

    def test_pdf_selection(self):
        bill = with_pdf(BillDetails(congress="19"), "/tmp/uploads/senate_version.pdf")

        assert bill.file_name == "senate_version.pdf"
        assert bill.title == "Uploaded PDF: senate_version.pdf"
        assert bill.text == (
            "Simulated text from uploaded PDF: senate_version.pdf. "
            "Actual PDF content extraction is not implemented."
        )
        assert bill.congress == "19"
        assert bill.has_file

    def test_pdf_content_type_wins_over_suffix(self):
        assert with_pdf(BillDetails(), "upload.bin", content_type="application/pdf").has_file
        with pytest.raises(InputError, match="Please select a PDF file."):
            with_pdf(BillDetails(), "bill.pdf", content_type="text/plain")

    @pytest.mark.parametrize("name", ["bill.docx", "", "pdf"])
    def test_non_pdf_rejected(self, name):
        with pytest.raises(InputError, match="Please select a PDF file."):
            with_pdf(BillDetails(), name)

    def test_cleared_file(self):
        bill = cleared_file(with_pdf(BillDetails(number="SB 1"), "a.PDF"))
        assert not bill.has_file
        assert bill.text == ""
        assert bill.number == "SB 1"

    def test_transitions_do_not_mutate(self):
        original = BillDetails(congress="19")
        with_pasted_text(original, "text")
        assert original.text == ""


class TestKeyword:

    def test_keyword_resets_bill2_and_keeps_bill1_base(self):
        bill1 = BillDetails(congress="19", number="SBN-1", title="t", text="x")
        bill2 = with_pasted_text(BillDetails(), "house text")

        new1, new2 = apply_keyword(bill1, bill2, "capital markets")

        assert new1.congress == "19"
        assert new1.number == "SBN-1"
        assert new1.text == ""
        assert new2 == BillDetails()

    def test_empty_keyword_is_noop(self):
        bill1, bill2 = BillDetails(congress="19"), BillDetails(number="HB1")
        assert apply_keyword(bill1, bill2, "") == (bill1, bill2)

    def test_keyword_locked_by_pdf_or_paste(self):
        assert keyword_search_locked(with_pdf(BillDetails(), "a.pdf"), BillDetails())
        assert keyword_search_locked(BillDetails(), with_pasted_text(BillDetails(), "t"))
        assert not keyword_search_locked(BillDetails(congress="19", number="HB1"), BillDetails())


class TestInputLocks:

    def test_empty_slot_unlocked(self):
        locks = input_locks(BillDetails())
        assert (locks.manual, locks.pdf, locks.pasted) == (False, False, False)

    def test_manual_locks_pdf_and_paste(self):
        locks = input_locks(BillDetails(congress="19", number="HB1"))
        assert (locks.manual, locks.pdf, locks.pasted) == (False, True, True)

    def test_partial_manual_locks_nothing(self):
        locks = input_locks(BillDetails(congress="19"))
        assert (locks.manual, locks.pdf, locks.pasted) == (False, False, False)

    def test_pdf_locks_manual_and_paste(self):
        locks = input_locks(with_pdf(BillDetails(), "a.pdf"))
        assert (locks.manual, locks.pdf, locks.pasted) == (True, False, True)

    def test_paste_locks_manual_and_pdf(self):
        locks = input_locks(with_pasted_text(BillDetails(), "t"))
        assert (locks.manual, locks.pdf, locks.pasted) == (True, True, False)

    def test_keyword_locks_everything(self):
        locks = input_locks(BillDetails(), keyword="securities")
        assert (locks.manual, locks.pdf, locks.pasted) == (True, True, True)
