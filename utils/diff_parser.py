import logging
import re
from typing import Iterable, List, Optional

from core.models import NO_NEWLINE_MARKER, Hunk, HunkHeader, HunkLine, LinePrefix

logger = logging.getLogger("hunk_parser.diff_parser")

# All patterns are applied with .match(text, pos), so they anchor at the cursor.
_NEWLINE = r"(?:\r\n|\n|\r)"

# e.g. "+added line", "-removed line", " context line"
hunk_line_pattern = re.compile(r"([+\- ])([^\r\n]*)" + _NEWLINE + "?")

# e.g. "@@ -start,count +start,count @@ heading"; either count may be omitted
hunk_header_pattern = re.compile(
    r"@@ -([0-9]+)(?:,([0-9]+))? \+([0-9]+)(?:,([0-9]+))? @@ ?([^\r\n]*)(?:\r\n|\n|\r)"
)

no_newline_pattern = re.compile(r"\\(" + re.escape(NO_NEWLINE_MARKER) + r")(?=[\r\n]|\Z)" + _NEWLINE + "?")


class InvalidFormatError(ValueError):
    """Raised when the text at the cursor matches none of the hunk grammars."""

    def __init__(self, remaining: str):
        self.remaining = remaining
        super().__init__(f"Invalid format for git diff: {remaining!r}")


def _advance(match: re.Match, pos: int) -> int:
    if match.end() <= pos:
        raise RuntimeError(f"Pattern {match.re.pattern!r} matched without advancing at offset {pos}")
    return match.end()


def _count(group: Optional[str]) -> int:
    return int(group) if group is not None else 1


def parse_hunks(diff_text: str, allow_orphan_lines: bool = False) -> List[Hunk]:
    """Parses the body of a unified diff into hunks.

    The input is a contiguous run of hunks: each header is followed by zero or
    more content and "no newline" lines. File headers (diff --git, ---, +++,
    index) are not part of the grammar and fail the parse.

    Lines that appear before the first hunk header are rejected unless
    `allow_orphan_lines` is set, in which case they are dropped.
    """
    hunks: List[Hunk] = []
    header: Optional[HunkHeader] = None
    lines: List[HunkLine] = []
    pos = 0

    while pos < len(diff_text):
        line_match = hunk_line_pattern.match(diff_text, pos)
        if line_match:
            prefix, content = line_match.groups()
            new_pos = _advance(line_match, pos)
            _append_line(lines, header, HunkLine(content=content, prefix=LinePrefix(prefix)),
                         diff_text, pos, allow_orphan_lines)
            pos = new_pos
            continue

        header_match = hunk_header_pattern.match(diff_text, pos)
        if header_match:
            if header is not None:
                hunks.append(Hunk(header=header, lines=tuple(lines)))
                lines = []

            start_prev, count_prev, start_next, count_next, heading = header_match.groups()
            header = HunkHeader(
                line_start_prev=int(start_prev),
                line_count_prev=_count(count_prev),
                line_start_next=int(start_next),
                line_count_next=_count(count_next),
                section_heading=heading,
            )
            pos = _advance(header_match, pos)
            continue

        marker_match = no_newline_pattern.match(diff_text, pos)
        if marker_match:
            new_pos = _advance(marker_match, pos)
            marker = HunkLine(content=marker_match.group(1), prefix=LinePrefix.NO_NEWLINE)
            _append_line(lines, header, marker, diff_text, pos, allow_orphan_lines)
            pos = new_pos
            continue

        raise InvalidFormatError(diff_text[pos:])

    if header is not None:
        hunks.append(Hunk(header=header, lines=tuple(lines)))

    return hunks


def _append_line(lines: List[HunkLine], header: Optional[HunkHeader], line: HunkLine,
                 diff_text: str, pos: int, allow_orphan_lines: bool) -> None:
    if header is not None:
        lines.append(line)
        return
    if not allow_orphan_lines:
        raise InvalidFormatError(diff_text[pos:])
    logger.warning(f"Dropping line before first hunk header: {str(line)!r}")


def format_hunks(hunks: Iterable[Hunk]) -> str:
    """Renders hunks back into diff text that parse_hunks reads as the same hunks."""
    return "".join(hunk.to_diff_text() for hunk in hunks)
