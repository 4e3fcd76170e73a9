"""
AI flows: prompt + hosted LLM call + schema validation.

- BillSummarizer: single-bill summary
- BillComparator: two-summary comparison with per-bill SEC draft comments
- DetailedSECAnalyst: seven-part SEC analysis of one bill
- RegulatoryImpactAssessor: SEC impact assessment of a comparison
"""
from legislate_core.flows.base import BaseFlow
from legislate_core.flows.summarization import BillSummarizer, summarize_bill
from legislate_core.flows.comparison import BillComparator, compare_bills
from legislate_core.flows.detailed_analysis import DetailedSECAnalyst, detailed_sec_bill_analysis
from legislate_core.flows.impact_assessment import (
    RegulatoryImpactAssessor,
    format_comparison,
    regulatory_impact_assessment,
)

__all__ = [
    "BaseFlow",
    "BillSummarizer",
    "summarize_bill",
    "BillComparator",
    "compare_bills",
    "DetailedSECAnalyst",
    "detailed_sec_bill_analysis",
    "RegulatoryImpactAssessor",
    "format_comparison",
    "regulatory_impact_assessment",
]
