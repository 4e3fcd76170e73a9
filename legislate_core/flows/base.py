"""
Base class for LLM-powered flows.

A flow formats a prompt, calls a hosted LLM in JSON mode, and validates the
returned object against its response model.

Providers:
- openai (default): Chat Completions with response_format=json_object
- gemini: google-genai generate_content with response_mime_type=application/json

Transient failures (rate limits, timeouts, unparseable JSON) are retried with
exponential backoff. A response that parses but fails schema validation is not
retried: the same prompt tends to produce the same shape.
"""
import json
import logging
import time
from typing import Any, Dict, Optional, Type, TypeVar

from google import genai
from openai import OpenAI
from pydantic import BaseModel, ValidationError

from legislate_core.config import get_api_key
from legislate_core.exceptions import APIKeyMissingError, LLMResponseError

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)

DEFAULT_MODELS = {
    "openai": "gpt-4o",
    "gemini": "gemini-2.0-flash",
}


def extract_text_from_gemini_response(response: Any) -> str:
    """
    Return the first non-thought text part of a Gemini response.

    Thinking models can return thought-signature parts alongside the JSON
    text; response.text then comes back None or concatenated, so the parts
    are walked directly.

    Raises:
        LLMResponseError: If the response holds no text part
    """
    candidates = getattr(response, "candidates", None)
    if not candidates or not candidates[0].content or not candidates[0].content.parts:
        raise LLMResponseError("Gemini response has no content parts")

    for part in candidates[0].content.parts:
        if getattr(part, "thought", False) is True:
            continue
        if part.text and part.text.strip():
            return part.text

    raise LLMResponseError("No text part found in Gemini response")


class BaseFlow:
    """Base class for flows that call a hosted LLM for structured JSON."""

    flow_name = "flow"

    def __init__(
        self,
        model: str | None = None,
        api_key: str | None = None,
        provider: str = "openai",
        client: Any = None,
        temperature: float = 0.2,
        max_retries: int = 3,
        retry_delay: float = 1.0,
        backoff: float = 2.0,
    ):
        """
        Initialize flow with LLM configuration.

        Args:
            model: Model name (defaults per provider)
            api_key: Provider API key; without it (and without client) calls
                raise APIKeyMissingError
            provider: "openai" or "gemini"
            client: Pre-built provider client (tests, shared clients)
            temperature: Sampling temperature
            max_retries: Attempts per call
            retry_delay: Initial backoff delay in seconds
            backoff: Delay multiplier between attempts
        """
        if provider not in DEFAULT_MODELS:
            raise ValueError(f"Unknown LLM provider: {provider}")
        self.provider = provider
        self.model = model or DEFAULT_MODELS[provider]
        self.temperature = temperature
        self.max_retries = max(1, max_retries)
        self.retry_delay = retry_delay
        self.backoff = backoff
        self.client = client if client is not None else self._build_client(api_key)

    @classmethod
    def from_config(cls, config: Dict[str, Any], api_key: str | None = None, client: Any = None):
        """Build a flow from the `llm` section of a loaded config."""
        llm = config.get("llm", {})
        provider = llm.get("provider", "openai")
        retry = llm.get("retry", {})
        return cls(
            model=llm.get(provider, {}).get("model"),
            api_key=api_key if api_key is not None else get_api_key(provider),
            provider=provider,
            client=client,
            temperature=llm.get("temperature", 0.2),
            max_retries=retry.get("max_retries", 3),
            retry_delay=retry.get("delay", 1.0),
            backoff=retry.get("backoff", 2.0),
        )

    def _build_client(self, api_key: str | None) -> Any:
        if not api_key:
            return None
        if self.provider == "gemini":
            return genai.Client(api_key=api_key)
        return OpenAI(api_key=api_key)

    def _ensure_client(self) -> Any:
        """Ensure an LLM client is available, raise if not."""
        if not self.client:
            raise APIKeyMissingError(
                f"{self.__class__.__name__} requires an API key. "
                "Pass api_key to constructor or set OPENAI_API_KEY / GOOGLE_API_KEY."
            )
        return self.client

    def _call_llm(self, prompt: str) -> Dict[str, Any]:
        """
        Call the LLM and parse its JSON object, with retries.

        Returns:
            Parsed JSON object

        Raises:
            APIKeyMissingError: If no client is configured
            LLMResponseError: If every attempt failed to yield a JSON object
        """
        self._ensure_client()

        last_error: Optional[Exception] = None
        delay = self.retry_delay
        for attempt in range(self.max_retries):
            try:
                return self._request_json(prompt)
            except Exception as e:
                last_error = e
                if attempt < self.max_retries - 1:
                    logger.warning(
                        f"{self.flow_name}: attempt {attempt + 1} failed: {e}. Retrying in {delay}s..."
                    )
                    time.sleep(delay)
                    delay *= self.backoff

        logger.error(f"{self.flow_name}: LLM call failed after {self.max_retries} attempts: {last_error}")
        if isinstance(last_error, LLMResponseError):
            raise last_error
        raise LLMResponseError(f"{self.flow_name} failed: {last_error}") from last_error

    def _request_json(self, prompt: str) -> Dict[str, Any]:
        raw = self._request_text(prompt)
        if not raw or not raw.strip():
            raise LLMResponseError(f"The AI failed to return a structured output for {self.flow_name}.")
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.error(f"Failed to parse {self.flow_name} response as JSON: {e}")
            raise LLMResponseError(f"LLM returned invalid JSON for {self.flow_name}: {e}") from e
        if not isinstance(data, dict):
            raise LLMResponseError(f"Expected a JSON object for {self.flow_name}, got {type(data).__name__}")
        return data

    def _request_text(self, prompt: str) -> Optional[str]:
        if self.provider == "gemini":
            response = self.client.models.generate_content(
                model=self.model,
                contents=prompt,
                config={
                    "temperature": self.temperature,
                    "response_mime_type": "application/json",
                },
            )
            text = response.text
            if text is None:
                text = extract_text_from_gemini_response(response)
            return text

        response = self.client.chat.completions.create(
            model=self.model,
            messages=[{"role": "user", "content": prompt}],
            response_format={"type": "json_object"},
            temperature=self.temperature,
        )
        return response.choices[0].message.content

    def _parse(self, model_cls: Type[M], data: Dict[str, Any]) -> M:
        """Validate LLM output against a response model."""
        try:
            return model_cls.model_validate(data)
        except ValidationError as e:
            logger.error(f"{self.flow_name} response failed schema validation: {e}")
            raise LLMResponseError(
                f"The AI returned an output that does not match the {model_cls.__name__} schema."
            ) from e
