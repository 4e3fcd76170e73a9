"""
Bill summarization flow.

Produces a concise summary of a bill's key provisions and potential impacts.
Used directly for keyword searches and as the first stage of a comparison.
"""
from legislate_core.config import load_config
from legislate_core.flows.base import BaseFlow
from legislate_core.flows.prompts import build_summarize_prompt, output_contract
from legislate_core.models import SummarizeBillInput, SummarizeBillOutput


class BillSummarizer(BaseFlow):
    """
    Summarize a single bill.

    Usage:
        summarizer = BillSummarizer.from_config(load_config())
        result = summarizer.summarize(SummarizeBillInput(
            bill_text=text, congress_number="19th", bill_number="HB1234"
        ))
    """

    flow_name = "bill summarization"

    def summarize(self, request: SummarizeBillInput) -> SummarizeBillOutput:
        prompt = build_summarize_prompt(request, output_contract(SummarizeBillOutput))
        return self._parse(SummarizeBillOutput, self._call_llm(prompt))


def summarize_bill(request: SummarizeBillInput, api_key: str | None = None) -> SummarizeBillOutput:
    """Convenience entry point using the provider and model from config.yaml."""
    return BillSummarizer.from_config(load_config(), api_key).summarize(request)
