"""
Regulatory impact assessment flow.

Assesses the SEC regulatory impact of an already-produced bill comparison and
drafts an initial comment. Runs after BillComparator when the
`analysis.assess_comparison_impact` setting is on.
"""
from legislate_core.config import load_config
from legislate_core.flows.base import BaseFlow
from legislate_core.flows.prompts import build_regulatory_impact_prompt, output_contract
from legislate_core.models import (
    BillComparisonOutput,
    RegulatoryImpactAssessmentInput,
    RegulatoryImpactAssessmentOutput,
)


def format_comparison(comparison: BillComparisonOutput) -> str:
    """Flatten a comparison result into the text the assessment prompt expects."""
    return (
        f"Similarities:\n{comparison.similarities}\n\n"
        f"Differences:\n{comparison.differences}\n\n"
        f"Potential Conflicts:\n{comparison.potential_conflicts}"
    )


class RegulatoryImpactAssessor(BaseFlow):
    """Assess SEC regulatory impact of a bill comparison."""

    flow_name = "regulatory impact assessment"

    def assess(self, request: RegulatoryImpactAssessmentInput) -> RegulatoryImpactAssessmentOutput:
        prompt = build_regulatory_impact_prompt(request, output_contract(RegulatoryImpactAssessmentOutput))
        return self._parse(RegulatoryImpactAssessmentOutput, self._call_llm(prompt))


def regulatory_impact_assessment(
    request: RegulatoryImpactAssessmentInput,
    api_key: str | None = None,
) -> RegulatoryImpactAssessmentOutput:
    return RegulatoryImpactAssessor.from_config(load_config(), api_key).assess(request)
