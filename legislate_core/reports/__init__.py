from .markdown import (
    format_value,
    generate_markdown_report,
    render_markdown,
    spans_to_markdown,
    write_report,
)
from .display import display_result
from .export import comment_filename, export_comment

__all__ = [
    "format_value",
    "generate_markdown_report",
    "render_markdown",
    "spans_to_markdown",
    "write_report",
    "display_result",
    "comment_filename",
    "export_comment",
]
