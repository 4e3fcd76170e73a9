from typing import Any, List, Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.style import Style
from rich.text import Text

from legislate_core.citations import Linked, PlainText, build_bill_link, render_citations
from legislate_core.pipeline import ProcessResult
from legislate_core.reports.markdown import DETAILED_SECTIONS, bill_source_label

console = Console()


def spans_to_text(spans: List[Any]) -> Text:
    """Rich Text with linked citations as clickable, underlined spans."""
    text = Text()
    for span in spans:
        if isinstance(span, Linked):
            text.append(span.text, style=Style(color="cyan", underline=True, link=span.url))
        elif isinstance(span, PlainText):
            text.append(span.text)
        elif span is not None:
            text.append(str(span))
    return text


def linked_text(value: Any, congress_hint: Optional[str] = None) -> Text:
    """Rich renderable for an analysis field (string or list of strings)."""
    if isinstance(value, list):
        if not value:
            return Text("N/A", style="dim")
        text = Text()
        for i, item in enumerate(value):
            if i:
                text.append("\n")
            text.append("• ")
            text.append_text(spans_to_text(render_citations(str(item), congress_hint)))
        return text
    if not isinstance(value, str) or not value.strip():
        return Text("N/A", style="dim")
    return spans_to_text(render_citations(value, congress_hint))


def display_detailed_analysis(result: ProcessResult) -> None:
    """
    Display the seven-part SEC analysis as one panel per part.
    """
    analysis = result.detailed_analysis
    if analysis is None:
        return
    hint = result.congress_hint
    ident = analysis.part1_bill_identification

    header = Text()
    header.append("Bill Number: ", style="cyan")
    link = build_bill_link(ident.bill_number, ident.legislative_chamber, hint, ident.bill_number)
    if link:
        header.append(ident.bill_number, style=Style(underline=True, link=link))
    else:
        header.append(ident.bill_number or "N/A")
    for label, value in (
        ("Chamber", ident.legislative_chamber),
        ("Sponsors", ident.primary_sponsors),
        ("Introduced", ident.date_of_introduction),
        ("Status", ident.current_status),
        ("Related Bills", ident.related_bills),
    ):
        header.append(f"\n{label}: ", style="cyan")
        header.append_text(linked_text(value, hint))

    console.print(Panel(
        header,
        title=f"[bold]{escape(ident.full_title or result.bill1.title or 'Selected Bill')}[/bold]",
        subtitle="Part 1: Bill Identification",
        border_style="blue",
    ))

    for heading, part_attr, fields in DETAILED_SECTIONS:
        part = getattr(analysis, part_attr)
        body = Text()
        for i, (attr, label) in enumerate(fields):
            if i:
                body.append("\n\n")
            body.append(f"{label}:\n", style="bold")
            body.append_text(linked_text(getattr(part, attr), hint))
        console.print(Panel(body, title=heading, border_style="blue"))


def display_result(result: ProcessResult) -> None:
    """Display a pipeline result in the console."""
    if result.detailed_analysis is not None:
        display_detailed_analysis(result)
        return

    hint = result.congress_hint
    slots = [(result.bill1, result.bill1_summary, "Senate Version Details")]
    if not result.keyword:
        slots.append((result.bill2, result.bill2_summary, "House Version Details"))

    for bill, summary, fallback in slots:
        if summary is None:
            continue
        console.print(Panel(
            linked_text(summary.summary, hint),
            title=f"[bold]{escape(bill.title or fallback)}[/bold]",
            subtitle=escape(bill_source_label(bill, result.keyword)),
            border_style="green",
        ))

    comparison = result.comparison
    if comparison is None or result.keyword:
        return

    for label, value in (
        ("Similarities", comparison.similarities),
        ("Differences", comparison.differences),
        ("Potential Conflicts", comparison.potential_conflicts),
    ):
        console.print(Panel(linked_text(value, hint), title=label, border_style="yellow"))

    for bill, comment, fallback in (
        (result.bill1, result.comment_bill1, "Senate Version"),
        (result.bill2, result.comment_bill2, "House Version"),
    ):
        if comment:
            console.print(Panel(
                Text(comment),
                title=f"Draft SEC Comment: {escape(bill.title or fallback)}",
                border_style="red",
            ))

    if result.impact_assessment is not None:
        console.print(Panel(
            linked_text(result.impact_assessment.impact_assessment, hint),
            title="Regulatory Impact Assessment",
            border_style="magenta",
        ))
