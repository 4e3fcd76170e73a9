# Legislate Compare Core Library
# Main entry point: from legislate_core.pipeline import process_bills

from .config import load_config, get_api_keys
from .pipeline import BillPipeline, ProcessResult, process_bills

from .inputs import (
    BillDetails,
    get_chamber_from_bill_number,
)

from .citations import (
    CitationDetector,
    CitationKind,
    Linked,
    PlainText,
    build_bill_link,
    render_citations,
)

from .exceptions import (
    LegislateError,
    LLMResponseError,
    APIKeyMissingError,
    BillFetchError,
    InputError,
)

__all__ = [
    # Main entry point
    "process_bills",
    "BillPipeline",
    "ProcessResult",
    "load_config",
    "get_api_keys",
    # Inputs
    "BillDetails",
    "get_chamber_from_bill_number",
    # Citations
    "CitationDetector",
    "CitationKind",
    "Linked",
    "PlainText",
    "build_bill_link",
    "render_citations",
    # Errors
    "LegislateError",
    "LLMResponseError",
    "APIKeyMissingError",
    "BillFetchError",
    "InputError",
]
