from .bill_source import (
    FETCH_BILL_PATH,
    fetch_bill_text,
    generate_mock_bill_text,
)

__all__ = [
    "FETCH_BILL_PATH",
    "fetch_bill_text",
    "generate_mock_bill_text",
]
