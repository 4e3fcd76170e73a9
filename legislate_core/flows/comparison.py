"""
Bill comparison flow.

Takes two bill summaries (not full texts) and returns similarities,
differences, potential conflicts, and one SEC draft comment per bill.

Why summaries instead of full text:
- Two full bills routinely exceed a comfortable prompt size
- The summaries were already produced for display, so the comparison reuses them
"""
from legislate_core.config import load_config
from legislate_core.flows.base import BaseFlow
from legislate_core.flows.prompts import build_comparison_prompt, output_contract
from legislate_core.models import BillComparisonInput, BillComparisonOutput


class BillComparator(BaseFlow):
    """Compare and contrast two bills."""

    flow_name = "bill comparison"

    def compare(self, request: BillComparisonInput) -> BillComparisonOutput:
        prompt = build_comparison_prompt(request, output_contract(BillComparisonOutput))
        return self._parse(BillComparisonOutput, self._call_llm(prompt))


def compare_bills(request: BillComparisonInput, api_key: str | None = None) -> BillComparisonOutput:
    return BillComparator.from_config(load_config(), api_key).compare(request)
