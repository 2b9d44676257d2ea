"""Error types and Rust-style colored diagnostic rendering."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING

from algot.source import SourceFile

if TYPE_CHECKING:
    from algot.source import Span


# ── Classification and traversal errors ──────────────────────────


class LexError(ValueError):
    """A lexical unit could not be classified."""

    code = "E100"


class InvalidOperatorSymbol(LexError):
    """A character outside the supported operator set."""

    code = "E101"

    def __init__(self, symbol: str) -> None:
        self.symbol = symbol
        super().__init__(f"invalid operator symbol {symbol!r}")


class MalformedNumericLiteral(LexError):
    """Text with a decimal point that does not parse as a number."""

    code = "E102"

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f"malformed numeric literal {text!r}")


class CursorRangeError(IndexError):
    """An absolute cursor position outside ``[0, length]``."""

    def __init__(self, position: int, length: int) -> None:
        self.position = position
        self.length = length
        super().__init__(
            f"cursor position {position} out of range [0, {length}]"
        )


# ── Diagnostics ──────────────────────────────────────────────────


class Severity(Enum):
    ERROR = "error"
    WARNING = "warning"


# ANSI color codes
_COLORS = {
    Severity.ERROR: "\033[1;31m",    # bold red
    Severity.WARNING: "\033[1;33m",  # bold yellow
}
_BOLD = "\033[1m"
_BLUE = "\033[1;34m"
_RESET = "\033[0m"


@dataclass(frozen=True)
class DiagnosticLabel:
    """Points to a specific source location."""

    span: Span
    message: str


@dataclass(frozen=True)
class Suggestion:
    """A suggested fix."""

    message: str
    replacement: str


@dataclass
class Diagnostic:
    """A single diagnostic message with optional labels and suggestions."""

    severity: Severity
    code: str
    message: str
    labels: list[DiagnosticLabel] = field(default_factory=list)
    suggestions: list[Suggestion] = field(default_factory=list)
    notes: list[str] = field(default_factory=list)


class DiagnosticRenderer:
    """Renders diagnostics in Rust-style format with colors.

    Source lines come from sources registered with :meth:`add_source`;
    any other span file is read from disk on first use.
    """

    def __init__(self, *, color: bool = True) -> None:
        self.color = color
        self._sources: dict[str, SourceFile] = {}

    def _c(self, code: str) -> str:
        return code if self.color else ""

    def _gutter(self, text: str = "") -> str:
        return f"  {self._c(_BLUE)}{text:>4} |{self._c(_RESET)}"

    def add_source(self, source: SourceFile) -> None:
        self._sources[source.name] = source

    def _get_source_line(self, filename: str, line_num: int) -> str | None:
        if filename not in self._sources:
            path = Path(filename)
            try:
                content = path.read_text() if path.is_file() else ""
            except OSError:
                content = ""
            self._sources[filename] = SourceFile(filename, content)
        return self._sources[filename].line_at(line_num)

    def _render_label(self, label: DiagnosticLabel, color: str) -> list[str]:
        span = label.span
        lines = [f"  {self._c(_BLUE)}-->{self._c(_RESET)} {span}", self._gutter()]

        source_line = self._get_source_line(span.file, span.start_line)
        if source_line is not None:
            lines.append(f"{self._gutter(str(span.start_line))} {source_line}")

        if span.start_line == span.end_line:
            carets = "^" * max(1, span.end_col - span.start_col + 1)
            padding = " " * (span.start_col - 1)
            marker = f"{padding}{self._c(color)}{carets}{self._c(_RESET)}"
            if label.message:
                marker += f" {self._c(color)}{label.message}{self._c(_RESET)}"
            lines.append(f"{self._gutter()} {marker}")
        elif label.message:
            lines.append(f"{self._gutter()} {self._c(color)}{label.message}{self._c(_RESET)}")
        return lines

    def render(self, diag: Diagnostic) -> str:
        color = _COLORS[diag.severity]

        # error[E101]: message
        lines = [
            f"{self._c(color)}{diag.severity.value}[{diag.code}]{self._c(_RESET)}"
            f"{self._c(_BOLD)}: {diag.message}{self._c(_RESET)}"
        ]
        for label in diag.labels:
            lines.extend(self._render_label(label, color))
        for note in diag.notes:
            lines.append(f"  {self._c(_BLUE)}={self._c(_RESET)} note: {note}")
        for suggestion in diag.suggestions:
            lines.append(
                f"  {self._c(_BLUE)}={self._c(_RESET)} help: {suggestion.message}:"
                f" `{suggestion.replacement}`"
            )
        return "\n".join(lines)


class ExpressionError(Exception):
    """Batch lexing error carrying every diagnostic of one expression."""

    def __init__(self, diagnostics: list[Diagnostic]) -> None:
        self.diagnostics = diagnostics
        errors = [d.message for d in diagnostics if d.severity == Severity.ERROR]
        super().__init__(f"{len(errors)} error(s): {'; '.join(errors)}")
