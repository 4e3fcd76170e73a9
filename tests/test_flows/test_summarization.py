"""
Bill summarization flow tests.
"""
from unittest.mock import patch

import pytest

from legislate_core.exceptions import APIKeyMissingError, LLMResponseError
from legislate_core.flows import BillSummarizer, summarize_bill
from legislate_core.models import SummarizeBillInput, SummarizeBillOutput


@pytest.fixture
def request_19th():
    return SummarizeBillInput(bill_text="An Act Concerning Digital Assets", congress_number="19th", bill_number="HB1234")


class TestBillSummarizer:

    def test_summarize_returns_model(self, request_19th, summary_response):
        summarizer = BillSummarizer(client=object())
        with patch.object(summarizer, "_call_llm", return_value=summary_response) as mock_call:
            result = summarizer.summarize(request_19th)

        assert isinstance(result, SummarizeBillOutput)
        assert result.summary.startswith("The bill establishes")
        prompt = mock_call.call_args.args[0]
        assert "An Act Concerning Digital Assets" in prompt
        assert '"summary"' in prompt

    def test_missing_summary_key(self, request_19th):
        summarizer = BillSummarizer(client=object())
        with patch.object(summarizer, "_call_llm", return_value={}):
            with pytest.raises(LLMResponseError):
                summarizer.summarize(request_19th)

    def test_input_accepts_camel_case(self):
        parsed = SummarizeBillInput.model_validate(
            {"billText": "text", "congressNumber": "18th", "billNumber": "SB5678"}
        )
        assert parsed.bill_number == "SB5678"


class TestSummarizeBillFunction:

    @pytest.fixture(autouse=True)
    def config(self, sample_config):
        with patch("legislate_core.flows.summarization.load_config", return_value=sample_config):
            yield sample_config

    def test_requires_api_key(self, request_19th, monkeypatch):
        monkeypatch.delenv("OPENAI_API_KEY", raising=False)
        with pytest.raises(APIKeyMissingError):
            summarize_bill(request_19th)

    def test_uses_given_key(self, request_19th, summary_response):
        with patch("legislate_core.flows.base.OpenAI") as mock_openai, \
             patch.object(BillSummarizer, "_call_llm", return_value=summary_response):
            result = summarize_bill(request_19th, api_key="sk-test")
        assert result.summary == summary_response["summary"]
        mock_openai.assert_called_once_with(api_key="sk-test")

    def test_honors_configured_provider(self, request_19th, summary_response, config, monkeypatch):
        config["llm"]["provider"] = "gemini"
        monkeypatch.setenv("GOOGLE_API_KEY", "g-test")
        with patch("legislate_core.flows.base.genai") as mock_genai, \
             patch("legislate_core.flows.base.OpenAI") as mock_openai, \
             patch.object(BillSummarizer, "_call_llm", return_value=summary_response):
            summarize_bill(request_19th)

        mock_genai.Client.assert_called_once_with(api_key="g-test")
        mock_openai.assert_not_called()

