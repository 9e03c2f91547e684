from enum import Enum
from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator

NO_NEWLINE_MARKER = " No newline at end of file"

_SINGLE_LINE = r"^[^\r\n]*$"


class LinePrefix(str, Enum):
    ADDITION = "+"
    DELETION = "-"
    UNCHANGED = " "
    NO_NEWLINE = "\\"


class HunkHeader(BaseModel):
    """The `@@ -a,b +c,d @@ heading` line that opens a hunk."""

    model_config = ConfigDict(frozen=True)

    line_start_prev: int = Field(ge=0)
    line_count_prev: int = Field(default=1, ge=0)
    line_start_next: int = Field(ge=0)
    line_count_next: int = Field(default=1, ge=0)
    section_heading: str = Field(default="", pattern=_SINGLE_LINE)

    def __str__(self) -> str:
        header = (
            f"@@ -{self.line_start_prev},{self.line_count_prev} "
            f"+{self.line_start_next},{self.line_count_next} @@"
        )
        if self.section_heading:
            header += f" {self.section_heading}"
        return header


class HunkLine(BaseModel):
    model_config = ConfigDict(frozen=True)

    content: str = Field(pattern=_SINGLE_LINE)
    prefix: LinePrefix

    @model_validator(mode="after")
    def check_marker_content(self) -> "HunkLine":
        if self.prefix is LinePrefix.NO_NEWLINE and self.content != NO_NEWLINE_MARKER:
            raise ValueError(f"No-newline marker content must be {NO_NEWLINE_MARKER!r}")
        return self

    def __str__(self) -> str:
        return f"{self.prefix.value}{self.content}"


class Hunk(BaseModel):
    model_config = ConfigDict(frozen=True)

    header: HunkHeader
    lines: Tuple[HunkLine, ...] = ()

    def __str__(self) -> str:
        return "\n".join([str(self.header)] + [str(line) for line in self.lines])

    def to_diff_text(self) -> str:
        """Render the hunk so that every line, header included, ends with a newline."""
        return "".join(f"{entry}\n" for entry in (self.header, *self.lines))
