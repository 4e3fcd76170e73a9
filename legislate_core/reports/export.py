import re
from pathlib import Path

from legislate_core.exceptions import InputError


def comment_filename(bill_title: str) -> str:
    """SEC_Comment_<title>.txt with anything outside [A-Za-z0-9_.-] replaced by _."""
    safe_title = re.sub(r"[^a-zA-Z0-9_.-]", "_", bill_title or "") or "Comment"
    return f"SEC_Comment_{safe_title}.txt"


def export_comment(comment: str, bill_title: str, output_dir: str = ".") -> Path:
    """
    Save a draft SEC comment as a text file.

    Returns:
        Path of the written file

    Raises:
        InputError: If there is no comment to export
    """
    if not comment:
        raise InputError("There is no comment to export.")
    directory = Path(output_dir)
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / comment_filename(bill_title)
    path.write_text(comment, encoding="utf-8")
    return path
