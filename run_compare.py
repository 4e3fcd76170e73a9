#!/usr/bin/env python3
# run_compare.py
"""
CLI for Legislate Compare: bill summaries, comparison and SEC analysis.

Usage:
    # Detailed SEC analysis of one bill
    python run_compare.py --congress1 19 --number1 SBN-1234

    # Compare Senate and House versions
    python run_compare.py --congress1 19 --number1 SBN-1234 --text-file2 house_version.txt

    # Keyword search (single summary)
    python run_compare.py --keyword "digital assets"

Each bill accepts exactly one input mode: congress + number, --pdf, or
--text-file. --keyword cannot be combined with a PDF or pasted text.

Output:
    - Console panels with clickable bill citations
    - Optional JSON result, markdown report and exported SEC comment files
"""
import argparse
import os
import sys

from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape

from legislate_core.config import load_config
from legislate_core.exceptions import InputError, LegislateError
from legislate_core.inputs import (
    BillDetails,
    apply_keyword,
    input_locks,
    keyword_search_locked,
    with_manual_field,
    with_pasted_text,
    with_pdf,
)
from legislate_core.pipeline import BillPipeline
from legislate_core.reports import display_result, export_comment, generate_markdown_report

load_dotenv()
console = Console()


def build_bill(congress: str | None, number: str | None, pdf: str | None, text_file: str | None, label: str) -> BillDetails:
    """Apply CLI inputs to an empty bill slot, rejecting mixed input modes."""
    bill = BillDetails()
    if congress:
        bill = with_manual_field(bill, "congress", congress)
    if number:
        bill = with_manual_field(bill, "number", number)

    if pdf:
        if input_locks(bill).pdf:
            raise InputError(f"{label}: a PDF cannot be combined with congress + bill number or pasted text.")
        bill = with_pdf(bill, pdf)

    if text_file:
        if input_locks(bill).pasted:
            raise InputError(f"{label}: bill text cannot be combined with a PDF or congress + bill number.")
        if not os.path.exists(text_file):
            raise InputError(f"{label}: bill text file not found: {text_file}")
        with open(text_file, "r", encoding="utf-8") as f:
            bill = with_pasted_text(bill, f.read())

    return bill


def main():
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Summarize, compare and analyze Philippine bills for SEC regulatory impact",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    python run_compare.py --congress1 19 --number1 SBN-1234
    python run_compare.py --pdf1 senate.pdf --text-file2 house.txt --output-json result.json
    python run_compare.py --keyword "capital markets" --report-dir reports
        """
    )
    for n, name in (("1", "Senate Version"), ("2", "House Version")):
        parser.add_argument(f"--congress{n}", help=f"{name} congress number (e.g., 19 or 19th)")
        parser.add_argument(f"--number{n}", help=f"{name} bill number (e.g., SBN-1234, HB5678)")
        parser.add_argument(f"--pdf{n}", help=f"{name} PDF file (content extraction is simulated)")
        parser.add_argument(f"--text-file{n}", help=f"{name} bill text file")
    parser.add_argument("--keyword", default="", help="Keyword search (single bill summary)")
    parser.add_argument("--config", default="config.yaml", help="Config file (default: config.yaml)")
    parser.add_argument("--output-json", help="Write the full result as JSON")
    parser.add_argument("--report-dir", help="Write a markdown report into this directory")
    parser.add_argument("--export-comments", help="Export draft SEC comments into this directory")

    args = parser.parse_args()

    try:
        bill1 = build_bill(args.congress1, args.number1, args.pdf1, args.text_file1, "Senate Version")
        bill2 = build_bill(args.congress2, args.number2, args.pdf2, args.text_file2, "House Version")
        if args.keyword and keyword_search_locked(bill1, bill2):
            raise InputError("Keyword search cannot be combined with a PDF or pasted bill text.")
        bill1, bill2 = apply_keyword(bill1, bill2, args.keyword)
    except InputError as e:
        console.print(f"[red]Input Error: {escape(str(e))}[/red]")
        sys.exit(2)

    config = load_config(args.config)
    pipeline = BillPipeline.from_config(config)

    console.print("\n[cyan]Analyzing Bills... This may take a few moments.[/cyan]")
    try:
        result = pipeline.process(bill1, bill2, args.keyword)
    except InputError as e:
        console.print(f"[red]Input Error: {escape(str(e))}[/red]")
        sys.exit(2)
    except LegislateError as e:
        console.print(f"[red]Error: Failed to process bills. {escape(str(e))}[/red]")
        sys.exit(1)

    console.print(f"\n[green]✓ Processing Complete ({result.mode.replace('_', ' ').title()})[/green]\n")
    display_result(result)

    if args.output_json:
        with open(args.output_json, "w", encoding="utf-8") as f:
            f.write(result.model_dump_json(by_alias=True, indent=2))
        console.print(f"\n[green]✓ Results saved to {escape(args.output_json)}[/green]")

    if args.report_dir:
        path = generate_markdown_report(result, args.report_dir)
        console.print(f"[green]✓ Report saved to {escape(str(path))}[/green]")

    if args.export_comments:
        for bill, comment, fallback in (
            (result.bill1, result.comment_bill1, "Senate_Version"),
            (result.bill2, result.comment_bill2, "House_Version"),
        ):
            if not comment:
                continue
            path = export_comment(comment, bill.title or fallback, args.export_comments)
            console.print(f"[green]✓ Comment for {escape(bill.title or fallback)} exported to {escape(str(path))}[/green]")


if __name__ == "__main__":
    main()
