import logging
from typing import List, Sequence

from core.config import settings
from core.models import Hunk
from utils.diff_parser import InvalidFormatError, format_hunks, parse_hunks

logger = logging.getLogger("hunk_parser.hunk_service")


class DiffTooLargeError(ValueError):
    def __init__(self, length: int, limit: int):
        self.length = length
        self.limit = limit
        super().__init__(f"Diff is {length} characters long, the limit is {limit}.")


def parse_diff_body(diff_text: str) -> List[Hunk]:
    """Parse a diff body with the configured limits and parser options."""
    if len(diff_text) > settings.MAX_DIFF_LENGTH:
        logger.warning(f"Rejecting diff of {len(diff_text)} characters (limit {settings.MAX_DIFF_LENGTH})")
        raise DiffTooLargeError(len(diff_text), settings.MAX_DIFF_LENGTH)

    try:
        hunks = parse_hunks(diff_text, allow_orphan_lines=settings.ALLOW_ORPHAN_LINES)
    except InvalidFormatError as e:
        logger.info(f"Diff rejected at offset {len(diff_text) - len(e.remaining)}: {e}")
        raise

    line_total = sum(len(hunk.lines) for hunk in hunks)
    logger.info(f"Parsed {len(hunks)} hunks with {line_total} lines.")
    return hunks


def render_hunks(hunks: Sequence[Hunk]) -> str:
    logger.info(f"Rendering {len(hunks)} hunks.")
    return format_hunks(hunks)
