"""Diagnostics core types."""

from dataclasses import dataclass
from typing import Literal

Severity = Literal["error", "warning", "info"]


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured finding emitted by a lint rule against one source line.

    `line` is 1-based and refers to the buffer the rule inspected. It is never
    renumbered after fixes are applied.

    `replacement` is tri-state: `None` means no automatic fix, `""` deletes the
    line, and any other (possibly multi-line) string replaces the line.
    """

    code: str
    message: str
    line: int
    category: str
    suggestion: str
    original_snippet: str = ""
    replacement: str | None = None
    severity: Severity = "warning"

    @property
    def has_fix(self) -> bool:
        return self.replacement is not None

    @property
    def is_deletion(self) -> bool:
        return self.replacement == ""
