"""
Detailed SEC bill analysis flow.

Runs the seven-part SEC framework (identification, executive summary,
regulatory impact, legal analysis, stakeholders, governance, recommendations)
over a single bill's full text. Used when only one bill is submitted.
"""
from legislate_core.config import load_config
from legislate_core.flows.base import BaseFlow
from legislate_core.flows.prompts import build_detailed_analysis_prompt, output_contract
from legislate_core.models import DetailedSECBillAnalysisInput, DetailedSECBillAnalysisOutput


class DetailedSECAnalyst(BaseFlow):
    """
    Comprehensive, structured SEC-focused analysis of one bill.

    Every part of DetailedSECBillAnalysisOutput is required; a response
    missing any part raises LLMResponseError rather than producing a
    partially filled report.
    """

    flow_name = "detailed bill analysis"

    def analyze(self, request: DetailedSECBillAnalysisInput) -> DetailedSECBillAnalysisOutput:
        prompt = build_detailed_analysis_prompt(request, output_contract(DetailedSECBillAnalysisOutput))
        return self._parse(DetailedSECBillAnalysisOutput, self._call_llm(prompt))


def detailed_sec_bill_analysis(
    request: DetailedSECBillAnalysisInput,
    api_key: str | None = None,
) -> DetailedSECBillAnalysisOutput:
    return DetailedSECAnalyst.from_config(load_config(), api_key).analyze(request)
