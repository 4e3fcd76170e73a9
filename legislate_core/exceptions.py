"""
Custom exceptions for the Legislate Compare pipeline.

These exceptions carry user-facing messages; the CLI and HTTP layers surface
them as-is.
"""


class LegislateError(Exception):
    """Base exception for bill analysis errors."""
    pass


class LLMResponseError(LegislateError):
    """LLM returned an invalid or unexpected response."""
    pass


class APIKeyMissingError(LegislateError):
    """Required API key is not configured."""
    pass


class BillFetchError(LegislateError):
    """Bill text could not be fetched."""
    pass


class InputError(LegislateError):
    """User-supplied bill input is missing or inconsistent."""
    pass
