import os
from datetime import datetime
from typing import Any, List, Optional, TextIO, Tuple

from legislate_core.citations import Linked, PlainText, build_bill_link, render_citations
from legislate_core.inputs import BillDetails
from legislate_core.models import DetailedSECBillAnalysisOutput
from legislate_core.pipeline import ProcessResult

DEFAULT_TEXT = "N/A"


def _escape_link_text(text: str) -> str:
    return text.replace("[", "\\[").replace("]", "\\]")


def spans_to_markdown(spans: List[Any]) -> str:
    """Join rendered citation spans into markdown, links as [text](url)."""
    parts = []
    for span in spans:
        if isinstance(span, Linked):
            parts.append(f"[{_escape_link_text(span.text)}]({span.url})")
        elif isinstance(span, PlainText):
            parts.append(span.text)
        else:
            parts.append("" if span is None else str(span))
    return "".join(parts)


def render_markdown(text: str, congress_hint: Optional[str] = None) -> str:
    """Markdown for text with its bill citations linked."""
    return spans_to_markdown(render_citations(text, congress_hint))


def format_value(data: Any, congress_hint: Optional[str] = None, default_text: str = DEFAULT_TEXT) -> str:
    """
    Format an analysis field for markdown.

    - None / blank string / the default text itself -> default text
    - bool -> Yes / No
    - list -> bullet list, each item citation-linked (empty list -> default)
    - str -> citation-linked text
    """
    if data is None:
        return default_text
    if isinstance(data, bool):
        return "Yes" if data else "No"
    if isinstance(data, list):
        if not data:
            return default_text
        return "\n".join(f"- {render_markdown(str(item), congress_hint)}" for item in data)
    if isinstance(data, str):
        if not data.strip() or data == default_text:
            return default_text
        return render_markdown(data, congress_hint)
    return default_text


def bill_source_label(bill: BillDetails, keyword: str = "") -> str:
    """Where a bill's text came from, for report headers."""
    if bill.has_file:
        return f"Uploaded PDF ({bill.file_name}) - Content Simulated"
    if bill.is_pasted:
        return "Pasted Text"
    if bill.chamber and bill.chamber != "N/A":
        return f"{bill.chamber} Bill {bill.number} ({bill.congress})"
    if keyword:
        return "Keyword Search Result"
    return "Manual Input (Simulated Text)"


# Heading / (attribute, label) pairs per analysis part
DETAILED_SECTIONS: List[Tuple[str, str, List[Tuple[str, str]]]] = [
    ("Part 2: Executive Summary", "part2_executive_summary", [
        ("main_objectives_and_key_provisions", "Main Objectives & Key Provisions"),
        ("significant_changes_or_new_mechanisms", "Significant Changes/New Mechanisms (3-5)"),
    ]),
    ("Part 3: Regulatory Impact & SEC Relations", "part3_regulatory_impact_and_sec_relations", [
        ("provisions_affecting_sec", "Provisions Affecting SEC"),
        ("impacted_laws_and_regulations", "Impacted Laws & Regulations"),
        ("new_sec_regulatory_obligations", "New SEC Regulatory Obligations"),
        ("conflicts_with_src_and_sec_laws", "Conflicts with SRC & SEC Laws"),
    ]),
    ("Part 4: Legal & Constitutional Analysis", "part4_legal_and_constitutional_analysis", [
        ("potential_legal_or_constitutional_issues", "Potential Legal/Constitutional Issues"),
        ("language_clarity_and_ambiguities", "Language Clarity & Ambiguities"),
        ("sunset_provisions_accountability_and_reporting", "Sunset Provisions, Accountability, Reporting"),
    ]),
    ("Part 5: Stakeholder Impact", "part5_stakeholder_impact", [
        ("affected_sectors_industries_groups", "Affected Sectors/Industries/Groups"),
        ("potential_benefits_or_disadvantages", "Potential Benefits or Disadvantages"),
        ("compliance_burdens_or_regulatory_risks", "Compliance Burdens/Regulatory Risks"),
    ]),
    ("Part 6: Governance & Enforcement", "part6_governance_and_enforcement", [
        ("shift_in_regulatory_powers", "Shift in Regulatory Powers"),
        ("avenues_for_arbitrage_abuse_unintended_consequences", "Avenues for Arbitrage, Abuse, Unintended Consequences"),
        ("adequacy_of_enforcement_penalties_dispute_resolution", "Adequacy of Enforcement, Penalties, Dispute Resolution"),
    ]),
    ("Part 7: Recommendations & Further Questions", "part7_recommendations_and_further_questions", [
        ("key_questions_for_sec_investigation", "Key Questions for SEC Investigation (3-5)"),
        ("process_irregularities_urgent_issues_expert_perspectives", "Process Irregularities, Urgent Issues, Expert Perspectives"),
        ("precedents_historical_context_international_practices", "Precedents, Historical Context, International Practices"),
    ]),
]


def write_bill_identification(
    f: TextIO,
    analysis: DetailedSECBillAnalysisOutput,
    congress_hint: Optional[str] = None,
) -> None:
    """
    Write Part 1. The bill number links through the chamber the AI reported.
    """
    ident = analysis.part1_bill_identification
    f.write("### Part 1: Bill Identification\n\n")
    f.write(f"- **Full Title:** {format_value(ident.full_title, congress_hint)}\n")

    number = ident.bill_number or DEFAULT_TEXT
    link = build_bill_link(ident.bill_number, ident.legislative_chamber, congress_hint, ident.bill_number)
    if link:
        f.write(f"- **Bill Number:** [{_escape_link_text(number)}]({link})\n")
    else:
        f.write(f"- **Bill Number:** {number}\n")

    f.write(f"- **Legislative Chamber:** {format_value(ident.legislative_chamber)}\n")
    f.write(f"- **Primary Sponsors:** {format_value(ident.primary_sponsors, congress_hint)}\n")
    f.write(f"- **Date of Introduction:** {format_value(ident.date_of_introduction)}\n")
    f.write(f"- **Current Status:** {format_value(ident.current_status, congress_hint)}\n")
    f.write(f"- **Related Bills:** {format_value(ident.related_bills, congress_hint)}\n\n")


def write_detailed_analysis(
    f: TextIO,
    analysis: DetailedSECBillAnalysisOutput,
    bill: BillDetails,
    congress_hint: Optional[str] = None,
) -> None:
    """Write the seven-part detailed SEC analysis section."""
    title = analysis.part1_bill_identification.full_title or bill.title or "Selected Bill"
    f.write("## Detailed SEC Regulatory Analysis\n\n")
    f.write(f"Comprehensive analysis for: {title}\n\n")

    write_bill_identification(f, analysis, congress_hint)

    for heading, part_attr, fields in DETAILED_SECTIONS:
        part = getattr(analysis, part_attr)
        f.write(f"### {heading}\n\n")
        for attr, label in fields:
            f.write(f"**{label}:**\n\n")
            f.write(f"{format_value(getattr(part, attr), congress_hint)}\n\n")


def write_summaries(f: TextIO, result: ProcessResult) -> None:
    f.write("## Bill Summaries\n\n")
    slots = [(result.bill1, result.bill1_summary, "Senate Version Details")]
    if not result.keyword:
        slots.append((result.bill2, result.bill2_summary, "House Version Details"))

    for bill, summary, fallback_title in slots:
        if summary is None:
            continue
        f.write(f"### {bill.title or fallback_title}\n\n")
        f.write(f"*Source: {bill_source_label(bill, result.keyword)}*\n\n")
        f.write(f"{format_value(summary.summary, result.congress_hint)}\n\n")


def write_comparison(f: TextIO, result: ProcessResult) -> None:
    """Write comparison details and the draft SEC comments."""
    comparison = result.comparison
    if comparison is None:
        return
    hint = result.congress_hint

    f.write("## Comparison Analysis\n\n")
    f.write(
        f"Comparing {result.bill1.title or 'Senate Version'} "
        f"with {result.bill2.title or 'House Version'}\n\n"
    )
    for label, value in (
        ("Similarities", comparison.similarities),
        ("Differences", comparison.differences),
        ("Potential Conflicts", comparison.potential_conflicts),
    ):
        f.write(f"### {label}\n\n{format_value(value, hint)}\n\n")

    f.write("## Draft SEC Comments\n\n")
    for bill, comment, fallback in (
        (result.bill1, result.comment_bill1, "Senate Version"),
        (result.bill2, result.comment_bill2, "House Version"),
    ):
        if comment:
            f.write(f"### Comment for {bill.title or fallback}\n\n{comment}\n\n")

    if result.impact_assessment is not None:
        f.write("## Regulatory Impact Assessment\n\n")
        f.write(f"{format_value(result.impact_assessment.impact_assessment, hint)}\n\n")
        f.write("### Draft Comment\n\n")
        f.write(f"{result.impact_assessment.draft_comment}\n\n")


def generate_markdown_report(result: ProcessResult, output_dir: str = "reports") -> str:
    """
    Write a markdown report for one pipeline result.

    Args:
        result: Pipeline result
        output_dir: Directory for the report

    Returns:
        Path of the written report
    """
    os.makedirs(output_dir, exist_ok=True)
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    path = os.path.join(output_dir, f"legislate_compare_{timestamp}.md")

    with open(path, "w", encoding="utf-8") as f:
        write_report(f, result)
    return path


def write_report(f: TextIO, result: ProcessResult) -> None:
    f.write("# Legislate Compare Report\n\n")
    f.write(f"**Generated:** {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}\n\n")
    f.write(f"**Mode:** {result.mode.replace('_', ' ').title()}\n\n")
    f.write("---\n\n")

    if result.detailed_analysis is not None:
        write_detailed_analysis(f, result.detailed_analysis, result.bill1, result.congress_hint)
        return

    write_summaries(f, result)
    if not result.keyword:
        write_comparison(f, result)
