"""
Bill Processing Pipeline - turns form input into AI analysis.

Pipeline Flow:
1. Validate that bill1 (or a keyword) is supplied
2. Materialize bill1 text: PDF placeholder, pasted text, keyword fetch, or
   manual congress/number fetch
3. Materialize bill2 text the same way (never in keyword mode)
4. Choose the analysis mode:
   - DETAILED_ANALYSIS: bill1 only -> seven-part SEC analysis
   - COMPARISON: bill1 + bill2 -> two summaries, then comparison with
     per-bill SEC draft comments (optionally an impact assessment)
   - SUMMARY: keyword search -> single summary
5. Aggregate everything into a ProcessResult

Design Decisions:
- Flows and the bill fetcher are injected, so tests run without network
- Flows run sequentially; the comparison needs both summaries first
- Flow errors propagate as LegislateError subclasses; callers decide how to
  present them
"""
import logging
from typing import Any, Callable, Dict, Literal, Optional

from pydantic import BaseModel

from legislate_core.api.bill_source import fetch_bill_text
from legislate_core.exceptions import InputError
from legislate_core.flows import (
    BillComparator,
    BillSummarizer,
    DetailedSECAnalyst,
    RegulatoryImpactAssessor,
    format_comparison,
)
from legislate_core.inputs import BillDetails, get_chamber_from_bill_number
from legislate_core.models import (
    BillComparisonInput,
    BillComparisonOutput,
    DetailedSECBillAnalysisInput,
    DetailedSECBillAnalysisOutput,
    RegulatoryImpactAssessmentInput,
    RegulatoryImpactAssessmentOutput,
    SummarizeBillInput,
    SummarizeBillOutput,
)

logger = logging.getLogger(__name__)

Mode = Literal["DETAILED_ANALYSIS", "COMPARISON", "SUMMARY"]
BillFetcher = Callable[[str, str, Optional[str]], str]

KEYWORD_SEARCH_NUMBER = "KeywordSearch"


class ProcessResult(BaseModel):
    """Everything one submission produced."""
    mode: Mode
    keyword: str = ""
    bill1: BillDetails
    bill2: BillDetails
    bill1_summary: Optional[SummarizeBillOutput] = None
    bill2_summary: Optional[SummarizeBillOutput] = None
    comparison: Optional[BillComparisonOutput] = None
    impact_assessment: Optional[RegulatoryImpactAssessmentOutput] = None
    detailed_analysis: Optional[DetailedSECBillAnalysisOutput] = None
    comment_bill1: str = ""
    comment_bill2: str = ""

    @property
    def congress_hint(self) -> str:
        """Congress used to build House/Senate citation links (bill1's)."""
        return self.bill1.congress


def _resolved_chamber(bill: BillDetails) -> str:
    if bill.chamber and bill.chamber != "N/A":
        return bill.chamber
    return get_chamber_from_bill_number(bill.number)


class BillPipeline:
    """
    Orchestrates bill input materialization and the AI flows.

    Usage:
        pipeline = BillPipeline.from_config(load_config())
        result = pipeline.process(bill1, bill2, keyword="")
    """

    def __init__(
        self,
        summarizer: BillSummarizer | None = None,
        comparator: BillComparator | None = None,
        analyst: DetailedSECAnalyst | None = None,
        assessor: RegulatoryImpactAssessor | None = None,
        fetcher: BillFetcher | None = None,
        assess_comparison_impact: bool = False,
    ) -> None:
        """
        Initialize pipeline with optional dependency injection for testing.

        Args:
            summarizer: Summarization flow (default: BillSummarizer())
            comparator: Comparison flow (default: BillComparator())
            analyst: Detailed analysis flow (default: DetailedSECAnalyst())
            assessor: Impact assessment flow, used only when
                assess_comparison_impact is set
            fetcher: Callable(congress, bill_number, keyword) -> bill text
            assess_comparison_impact: Run RegulatoryImpactAssessor after a comparison
        """
        self.summarizer = summarizer or BillSummarizer()
        self.comparator = comparator or BillComparator()
        self.analyst = analyst or DetailedSECAnalyst()
        self.assessor = assessor or RegulatoryImpactAssessor()
        self.fetcher = fetcher or (lambda congress, number, keyword=None: fetch_bill_text(congress, number, keyword))
        self.assess_comparison_impact = assess_comparison_impact

    @classmethod
    def from_config(cls, config: Dict[str, Any], api_key: str | None = None, client: Any = None) -> "BillPipeline":
        """Build flows and fetcher from a loaded config."""
        source = config.get("bill_source", {})
        base_url = source.get("base_url") or None
        timeout = source.get("timeout", 30.0)

        def fetcher(congress: str, number: str, keyword: Optional[str] = None) -> str:
            return fetch_bill_text(congress, number, keyword, base_url=base_url, timeout=timeout)

        return cls(
            summarizer=BillSummarizer.from_config(config, api_key, client),
            comparator=BillComparator.from_config(config, api_key, client),
            analyst=DetailedSECAnalyst.from_config(config, api_key, client),
            assessor=RegulatoryImpactAssessor.from_config(config, api_key, client),
            fetcher=fetcher,
            assess_comparison_impact=config.get("analysis", {}).get("assess_comparison_impact", False),
        )

    # ------------------------------------------------------------------
    # Input materialization
    # ------------------------------------------------------------------

    def _materialize(self, bill: BillDetails, label: str) -> BillDetails:
        """Fill in text, title and defaults for a PDF, pasted or manual slot."""
        if bill.has_file:
            number = bill.number or bill.file_name
            return bill.model_copy(update={
                "congress": bill.congress or "N/A (Uploaded PDF)",
                "number": number,
                "chamber": _resolved_chamber(bill.model_copy(update={"number": number})),
                "title": f"Uploaded PDF: {bill.file_name}",
                "is_pasted": False,
            })

        if bill.is_pasted and bill.text:
            number = bill.number or "Pasted Content"
            return bill.model_copy(update={
                "congress": bill.congress or "N/A (Pasted Text)",
                "number": number,
                "chamber": _resolved_chamber(bill.model_copy(update={"number": number})),
                "title": bill.title or "Pasted Bill Text",
            })

        if bill.has_manual_input:
            text = self.fetcher(bill.congress, bill.number, None)
            chamber = _resolved_chamber(bill)
            prefix = f"{chamber} " if chamber != "N/A" else ""
            return bill.model_copy(update={
                "text": text,
                "chamber": chamber,
                "title": f"{prefix}Bill {bill.number} ({bill.congress})",
                "file_name": "",
                "is_pasted": False,
            })

        raise InputError(f"Could not determine text for {label}.")

    def _materialize_keyword(self, bill: BillDetails, keyword: str) -> BillDetails:
        congress = bill.congress or "N/A"
        number = bill.number or KEYWORD_SEARCH_NUMBER
        searching_by_number = number != KEYWORD_SEARCH_NUMBER

        text = self.fetcher(congress, number, keyword)
        if searching_by_number:
            congress_part = f", {congress}" if congress != "N/A" else ""
            title = f'Bill matching "{keyword}" ({number}{congress_part})'
        else:
            title = f'Bill matching "{keyword}" (Keyword: {keyword})'

        return bill.model_copy(update={
            "text": text,
            "chamber": get_chamber_from_bill_number(number if searching_by_number else ""),
            "title": title,
            "file_name": "",
            "is_pasted": False,
        })

    # ------------------------------------------------------------------
    # Processing
    # ------------------------------------------------------------------

    def process(self, bill1: BillDetails, bill2: BillDetails, keyword: str = "") -> ProcessResult:
        """
        Run one submission.

        Args:
            bill1: Senate Version slot
            bill2: House Version slot
            keyword: Keyword search term (empty for none)

        Returns:
            ProcessResult with the selected mode's outputs

        Raises:
            InputError: Missing or unusable input
            BillFetchError: Bill text could not be fetched
            LLMResponseError / APIKeyMissingError: A flow failed
        """
        keyword = keyword.strip() if keyword else ""
        is_bill1_provided = bill1.is_provided() or bool(keyword and (bill1.congress or bill1.number))
        is_bill2_provided = bill2.is_provided()

        if not is_bill1_provided and not keyword:
            raise InputError(
                "Please provide details for at least the Senate Version "
                "(manual, PDF, or pasted text) or a keyword."
            )

        if bill1.has_file or (bill1.is_pasted and bill1.text):
            bill1 = self._materialize(bill1, "Senate Version")
        elif keyword:
            bill1 = self._materialize_keyword(bill1, keyword)
            bill2 = BillDetails()
        else:
            bill1 = self._materialize(bill1, "Senate Version")

        if not keyword and is_bill2_provided:
            bill2 = self._materialize(bill2, "House Version")
        elif not keyword:
            bill2 = BillDetails()

        if not bill1.text:
            raise InputError(
                "Senate Version text could not be obtained or generated. Cannot proceed with analysis."
            )

        if not is_bill2_provided and not keyword:
            return self._run_detailed_analysis(bill1, bill2)
        if bill2.text and not keyword:
            return self._run_comparison(bill1, bill2)
        return self._run_summary(bill1, bill2, keyword)

    def _summarize(self, bill: BillDetails) -> SummarizeBillOutput:
        return self.summarizer.summarize(SummarizeBillInput(
            bill_text=bill.text,
            congress_number=bill.congress,
            bill_number=bill.number,
        ))

    def _run_detailed_analysis(self, bill1: BillDetails, bill2: BillDetails) -> ProcessResult:
        logger.info("Performing detailed analysis: generating in-depth SEC regulatory analysis for the Senate Version")
        analysis = self.analyst.analyze(DetailedSECBillAnalysisInput(
            bill_text=bill1.text,
            bill_title=bill1.title or f"Bill {bill1.number or 'N/A'}",
            bill_number=bill1.number,
            legislative_chamber=bill1.chamber,
        ))
        main_objectives = analysis.part2_executive_summary.main_objectives_and_key_provisions
        return ProcessResult(
            mode="DETAILED_ANALYSIS",
            bill1=bill1,
            bill2=bill2,
            detailed_analysis=analysis,
            bill1_summary=SummarizeBillOutput(summary=main_objectives) if main_objectives else None,
        )

    def _run_comparison(self, bill1: BillDetails, bill2: BillDetails) -> ProcessResult:
        logger.info("Performing comparison: summarizing and comparing Senate and House Versions")
        summary1 = self._summarize(bill1)
        summary2 = self._summarize(bill2)
        comparison = self.comparator.compare(BillComparisonInput(
            bill1_summary=summary1.summary,
            bill2_summary=summary2.summary,
        ))

        impact = None
        if self.assess_comparison_impact:
            logger.info("Assessing SEC regulatory impact of the comparison")
            impact = self.assessor.assess(RegulatoryImpactAssessmentInput(
                bill_comparison=format_comparison(comparison),
            ))

        return ProcessResult(
            mode="COMPARISON",
            bill1=bill1,
            bill2=bill2,
            bill1_summary=summary1,
            bill2_summary=summary2,
            comparison=comparison,
            impact_assessment=impact,
            comment_bill1=comparison.regulatory_impact_assessment_bill1,
            comment_bill2=comparison.regulatory_impact_assessment_bill2,
        )

    def _run_summary(self, bill1: BillDetails, bill2: BillDetails, keyword: str) -> ProcessResult:
        logger.info(f"Performing summary for {'keyword search result' if keyword else 'the bill'}")
        return ProcessResult(
            mode="SUMMARY",
            keyword=keyword,
            bill1=bill1,
            bill2=bill2,
            bill1_summary=self._summarize(bill1),
        )


def process_bills(
    bill1: BillDetails,
    bill2: BillDetails | None = None,
    keyword: str = "",
    config: Dict[str, Any] | None = None,
    api_key: str | None = None,
) -> ProcessResult:
    """
    One-call entry point: build a pipeline from config and process.

    Example:
        result = process_bills(
            BillDetails(congress="19", number="SBN-1234"),
            keyword="",
        )
        print(result.mode, result.detailed_analysis.part1_bill_identification.full_title)
    """
    from legislate_core.config import load_config
    pipeline = BillPipeline.from_config(config or load_config(), api_key=api_key)
    return pipeline.process(bill1, bill2 or BillDetails(), keyword)
