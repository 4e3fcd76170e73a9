"""
Bill text source.

Legislative sites (senate.gov.ph, congress.gov.ph) have no text API, and
scraping them is out of scope, so bill text is simulated: a generic act with
nine standard sections, titled from the keyword when one is given.

Two ways to get it:
- Locally: generate_mock_bill_text() (default)
- Remotely: GET {base_url}/api/fetch-bill-data, the endpoint served by
  function_app.py, returning {"billText": ...} or {"error": ...}
"""
import logging
from typing import Optional

import httpx

from legislate_core.exceptions import BillFetchError

logger = logging.getLogger(__name__)

FETCH_BILL_PATH = "/api/fetch-bill-data"
API_TIMEOUT: float = 30.0


def _chamber_for(bill_number: str) -> str:
    upper = bill_number.upper()
    if upper.startswith("HR"):
        return "House of Representatives"
    if upper.startswith("S"):
        return "Senate"
    return "Legislature"


def _act_name(keyword: Optional[str]) -> str:
    if not keyword:
        return "Comprehensive Development Act"
    return " ".join(w[:1].upper() + w[1:] for w in keyword.split(" ")) + " Act"


def generate_mock_bill_text(congress: str, bill_number: str, keyword: Optional[str] = None) -> str:
    """
    Generate simulated bill text.

    Args:
        congress: Congress label (e.g. "19th"), echoed into the text
        bill_number: Bill number, echoed and used to pick the enacting chamber
        keyword: Optional subject; drives the act title, policy and definitions

    Returns:
        Markdown-flavored act text
    """
    chamber = _chamber_for(bill_number)
    subject = f"Various Matters Related to {keyword}" if keyword else "Public Welfare and Governance"
    enacting = "House of Representatives of the Philippines" if chamber == "Senate" else chamber
    policy_extra = (
        f"This bill specifically addresses aspects of {keyword} by proposing new regulatory frameworks "
        "and enforcement mechanisms."
        if keyword else ""
    )
    definition_extra = (
        f'(c) "{keyword}" shall mean specific activities or data points relevant to the core subject of this bill.'
        if keyword else ""
    )

    return f"""
**An Act Concerning {subject}**

*Be it enacted by the Senate and {enacting} in Congress assembled:*

**SECTION 1. Short Title.** - This Act shall be known as the "{_act_name(keyword)}".
(Mock data for {congress}, Bill {bill_number})

**SECTION 2. Declaration of Policy.** - It is hereby declared the policy of the State to promote a just and dynamic social order that will ensure the prosperity and independence of the nation and free the people from poverty through policies that provide adequate social services, promote full employment, a rising standard of living, and an improved quality of life for all.
{policy_extra}

**SECTION 3. Definition of Terms.** - As used in this Act:
  (a) "Agency" refers to any government department, bureau, office, instrumentality, or government-owned or -controlled corporation.
  (b) "Stakeholder" refers to any individual, group, or organization affected by or having an interest in the implementation of this Act.
  {definition_extra}

**SECTION 4. Key Provisions.**
  - Establishment of a National {keyword or 'Development'} Council.
  - Allocation of funds for research and development in related fields.
  - Mandated public consultations for implementing rules and regulations.
  - Penalties for non-compliance: Fines ranging from PHP 100,000 to PHP 1,000,000 and/or imprisonment.

**SECTION 5. Implementing Rules and Regulations (IRR).** - Within ninety (90) days from the effectivity of this Act, the lead agency, in consultation with relevant stakeholders, shall promulgate the necessary rules and regulations for the effective implementation of this Act.

**SECTION 6. Appropriations.** - The amount necessary to carry out the provisions of this Act shall be included in the General Appropriations Act of the year following its enactment into law and thereafter.

**SECTION 7. Separability Clause.** - If any provision or part hereof is held invalid or unconstitutional, the remainder of the law or the provision not otherwise affected shall remain valid and subsisting.

**SECTION 8. Repealing Clause.** - Any law, presidential decree or issuance, executive order, letter of instruction, administrative order, rule or regulation contrary to or inconsistent with the provisions of this Act is hereby repealed, modified, or amended accordingly.

**SECTION 9. Effectivity.** - This Act shall take effect fifteen (15) days after its publication in the Official Gazette or in a newspaper of general circulation.

*Approved, (Simulated Approval Date)*
(This is mock data generated for demonstration purposes for {bill_number} of the {congress} Congress.)
"""


def _error_message(response: httpx.Response) -> str:
    try:
        payload = response.json()
    except ValueError:
        return "Failed to fetch bill text from API."
    if isinstance(payload, dict) and payload.get("error"):
        return str(payload["error"])
    return f"API request failed: {response.reason_phrase}"


def fetch_bill_text(
    congress: Optional[str],
    bill_number: Optional[str],
    keyword: Optional[str] = None,
    base_url: Optional[str] = None,
    http: Optional[httpx.Client] = None,
    timeout: float = API_TIMEOUT,
) -> str:
    """
    Fetch bill text, remotely when base_url is set, else simulated locally.

    Args:
        congress: Congress label
        bill_number: Bill number ("KeywordSearch" for keyword-only lookups)
        keyword: Optional keyword
        base_url: Base URL of a bill-data endpoint; empty means local generation
        http: Optional httpx client (shared client or test transport)
        timeout: Request timeout in seconds

    Returns:
        Bill text

    Raises:
        BillFetchError: Endpoint unreachable, non-2xx response, or no billText
    """
    if not base_url:
        return generate_mock_bill_text(congress or "N/A", bill_number or "N/A", keyword or None)

    params = {}
    if congress:
        params["congress"] = congress
    if bill_number:
        params["billNumber"] = bill_number
    if keyword:
        params["keyword"] = keyword

    url = base_url.rstrip("/") + FETCH_BILL_PATH
    client = http or httpx.Client(timeout=timeout)
    try:
        response = client.get(url, params=params)
    except httpx.HTTPError as e:
        logger.error(f"Bill text request to {url} failed: {e}")
        raise BillFetchError(f"API request failed: {e}") from e
    finally:
        if http is None:
            client.close()

    if not response.is_success:
        message = _error_message(response)
        logger.error(f"Bill text request returned {response.status_code}: {message}")
        raise BillFetchError(message)

    try:
        payload = response.json()
    except ValueError as e:
        raise BillFetchError("Bill text not found in API response.") from e
    bill_text = payload.get("billText") if isinstance(payload, dict) else None
    if not bill_text:
        raise BillFetchError("Bill text not found in API response.")
    return bill_text
