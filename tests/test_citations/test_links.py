"""
Link synthesis tests.

build_bill_link is total: every unlinkable input comes back as None.
"""
import pytest

from legislate_core.citations import (
    CitationKind,
    build_bill_link,
    extract_session_number,
    normalize_house_bill_code,
)

HOUSE_19 = "https://docs.congress.hrep.online/legisdocs/basic_19/{}.pdf"


class TestSessionNumber:

    @pytest.mark.parametrize("hint,expected", [
        ("19", "19"),
        ("19th Congress", "19"),
        ("The 18th Congress, 2nd session", "18"),
        ("N/A (Pasted Text)", None),
        ("", None),
        (None, None),
        (19, None),
        ("١٩th", None),
        ("١٩th, 20th Congress", "20"),
    ])
    def test_first_digit_run(self, hint, expected):
        assert extract_session_number(hint) == expected


class TestHouseNormalization:

    @pytest.mark.parametrize("citation,code", [
        ("HB 01234", "HB01234"),
        ("hb4664", "HB4664"),
        ("H.R. 1234", "HB1234"),
        ("House Bill No. 4664", "HB4664"),
        ("H.B. No. 5", "HB5"),
        ("HR 77", "HB77"),
    ])
    def test_normalize(self, citation, code):
        assert normalize_house_bill_code(citation) == code


class TestHouseLinks:

    def test_house_link_uses_session_and_normalized_code(self):
        url = build_bill_link("1234", CitationKind.HOUSE, "19th Congress", "H.R. 1234")
        assert url == HOUSE_19.format("HB1234")

    def test_house_link_without_match_text_uses_number(self):
        assert build_bill_link("4664", CitationKind.HOUSE, "19") == HOUSE_19.format("HB4664")

    def test_house_link_from_chamber_label(self):
        url = build_bill_link("HB 4664", "House of Representatives", "19", "HB 4664")
        assert url == HOUSE_19.format("HB4664")

    @pytest.mark.parametrize("hint", [None, "", "N/A", "nineteenth"])
    def test_house_link_requires_session(self, hint):
        assert build_bill_link("4664", CitationKind.HOUSE, hint, "HB4664") is None


class TestSenateLinks:

    def test_senate_link_queries_raw_citation(self):
        url = build_bill_link("1234", CitationKind.SENATE, "19", "Senate Bill No. 1234")
        assert url == (
            "https://web.senate.gov.ph/lis/bill_res.aspx?congress=19"
            "&q=Senate%20Bill%20No.%201234"
        )

    def test_senate_link_without_match_text_queries_number(self):
        url = build_bill_link("SBN-1234", "Senate", "20th")
        assert url == "https://web.senate.gov.ph/lis/bill_res.aspx?congress=20&q=SBN-1234"

    def test_senate_link_requires_session(self):
        assert build_bill_link("1234", CitationKind.SENATE, "no digits", "SBN 1234") is None


class TestRepublicActLinks:

    def test_leading_zeros_stripped(self):
        url = build_bill_link("007", CitationKind.REPUBLIC_ACT, None, "RA 007")
        assert url == "https://www.officialgazette.gov.ph/republic-acts/republic-act-no-7/"

    def test_zero_number_has_no_link(self):
        assert build_bill_link("0", CitationKind.REPUBLIC_ACT, "19", "RA 0") is None

    def test_republic_act_ignores_session(self):
        assert build_bill_link("8799", CitationKind.REPUBLIC_ACT, "") is not None

    @pytest.mark.parametrize("label", ["RA", "Republic Act", "ra"])
    def test_republic_act_labels(self, label):
        url = build_bill_link("RA 11232", label, None)
        assert url == "https://www.officialgazette.gov.ph/republic-acts/republic-act-no-11232/"


class TestUnlinkable:

    @pytest.mark.parametrize("number,kind", [
        (None, CitationKind.HOUSE),
        ("", CitationKind.HOUSE),
        ("Not specified", "House"),
        ("N/A", "Senate"),
        ("  N/A  ", "Senate"),
        ("1234", None),
        ("1234", ""),
        ("1234", "n/a"),
        ("1234", "NOT SPECIFIED"),
        ("1234", " not specified "),
        ("1234", "Legislature"),
        (1234, CitationKind.HOUSE),
    ])
    def test_absent(self, number, kind):
        assert build_bill_link(number, kind, "19") is None

    def test_never_raises_on_odd_types(self):
        assert build_bill_link("12", CitationKind.HOUSE, ["19"], 42) is None
        assert build_bill_link("12", object(), "19") is None


class TestAsciiDigits:

    def test_republic_act_ignores_non_ascii_digits(self):
        assert build_bill_link("٨٧٩٩", CitationKind.REPUBLIC_ACT) is None

    def test_house_code_keeps_ascii_digits_only(self):
        assert normalize_house_bill_code("House Bill No. 46٦4") == "HB464"
