"""Batch fix application.

Fixes are planned per line against the buffer as the rules saw it, then
applied bottom-up so that line numbers reported by the rules stay valid while
the buffer changes underneath them.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, replace
from difflib import SequenceMatcher
import logging
import re

from polylint.diagnostics import RELOCATE_TO_TOP_CODES, Diagnostic
from polylint.format.edits import BufferEditor, LineEdit
from polylint.format.indentation import reindent_block
from polylint.text import LiteralSyntax, SourceLines, code_mask, leading_preamble, leading_whitespace

logger = logging.getLogger(__name__)

AUTHORITATIVE_INDENT_CATEGORIES = frozenset({"formatting", "indentation"})


@dataclass(frozen=True, slots=True)
class SkippedFix:
    diagnostic: Diagnostic
    reason: str


@dataclass(frozen=True, slots=True)
class FixResult:
    text: str
    applied: list[Diagnostic]
    skipped: list[SkippedFix]

    @property
    def changed_lines(self) -> int:
        return len({diagnostic.line for diagnostic in self.applied})


@dataclass(frozen=True, slots=True)
class _Span:
    """One diff hunk against the de-indented original line."""

    start: int
    end: int
    text: str

    @property
    def is_insert(self) -> bool:
        return self.start == self.end

    def conflicts_with(self, other: _Span) -> bool:
        if self == other:
            return False
        if self.is_insert and other.is_insert:
            return False
        if self.is_insert:
            return other.start < self.start < other.end
        if other.is_insert:
            return self.start < other.start < self.end
        return self.start < other.end and other.start < self.end


@dataclass(frozen=True, slots=True)
class _PlannedEdit:
    edit: LineEdit
    sources: tuple[Diagnostic, ...]


def is_indent_authoritative(diagnostic: Diagnostic) -> bool:
    return diagnostic.category.casefold() in AUTHORITATIVE_INDENT_CATEGORIES


def apply_fixes(
    text: str,
    diagnostics: Sequence[Diagnostic],
    *,
    indent_unit: int = 4,
    relocatable: str | re.Pattern[str] | None = None,
    syntax: LiteralSyntax | None = None,
) -> FixResult:
    """Apply every diagnostic that carries a replacement to `text`.

    `relocatable` matches the top-level lines that relocation diagnostics
    hoist above the rest of the file. Without it those diagnostics are left
    unapplied.
    """
    source = SourceLines.from_text(text)
    lines = list(source.lines)
    applied: list[Diagnostic] = []
    skipped: list[SkippedFix] = []
    pending = [diagnostic for diagnostic in diagnostics if diagnostic.replacement is not None]

    relocations = [d for d in pending if d.code in RELOCATE_TO_TOP_CODES]
    if relocations:
        pending = [d for d in pending if d.code not in RELOCATE_TO_TOP_CODES]
        if relocatable is None:
            logger.warning("Skipping %d relocation fix(es): no relocation pattern given", len(relocations))
            skipped.extend(_skip(diagnostic, "no relocation pattern given") for diagnostic in relocations)
        else:
            order = relocation_order(lines, relocatable, syntax or LiteralSyntax())
            lines = [lines[position] for position in order]
            pending = remap_lines(pending, order)
            applied.extend(relocations)
            logger.debug("Relocated %d line(s) to the top", len(relocations))

    groups: dict[int, list[Diagnostic]] = {}
    for diagnostic in pending:
        groups.setdefault(diagnostic.line - 1, []).append(diagnostic)

    planned: dict[int, _PlannedEdit] = {}
    for index, group in groups.items():
        try:
            plan, rejected = _plan_line(lines, index, group, indent_unit)
        except Exception as exc:
            logger.warning("Could not plan fixes for line %d: %s", index + 1, exc)
            skipped.extend(_skip(diagnostic, str(exc)) for diagnostic in group)
            continue
        skipped.extend(rejected)
        planned[index] = plan

    editor = BufferEditor(lines, indent_unit)
    for edit in editor.ordered(plan.edit for plan in planned.values()):
        sources = planned[edit.index].sources
        try:
            editor.apply(edit)
        except Exception as exc:
            logger.warning("Could not apply fix on line %d: %s", edit.index + 1, exc)
            skipped.extend(_skip(diagnostic, str(exc)) for diagnostic in sources)
            continue
        applied.extend(sources)

    return FixResult(text=source.render(editor.lines), applied=applied, skipped=skipped)


def relocation_order(
    lines: Sequence[str],
    pattern: str | re.Pattern[str],
    syntax: LiteralSyntax,
) -> list[int]:
    """Index permutation: preamble, then matching top-level statements, then the rest.

    A matching statement moves together with its continuation lines, that is
    until its parentheses balance.
    """
    matcher = re.compile(pattern)
    preamble = leading_preamble(lines, syntax.line_comment or "#")
    hoisted: list[int] = []
    rest: list[int] = []
    index = preamble
    while index < len(lines):
        line = lines[index]
        if line[:1].isspace() or matcher.match(line) is None:
            rest.append(index)
            index += 1
            continue
        hoisted.append(index)
        balance = _paren_balance(line, syntax)
        index += 1
        while balance > 0 and index < len(lines):
            hoisted.append(index)
            balance += _paren_balance(lines[index], syntax)
            index += 1
    return [*range(preamble), *hoisted, *rest]


def remap_lines(diagnostics: Sequence[Diagnostic], order: Sequence[int]) -> list[Diagnostic]:
    """Move each diagnostic to its line's position in the permuted buffer."""
    position = {old: new for new, old in enumerate(order)}
    remapped: list[Diagnostic] = []
    for diagnostic in diagnostics:
        new = position.get(diagnostic.line - 1)
        remapped.append(diagnostic if new is None else replace(diagnostic, line=new + 1))
    return remapped


def compose_replacements(original: str, replacements: Sequence[str]) -> tuple[str, list[int]]:
    """Merge several single-line rewrites of `original` into one line.

    Each replacement is diffed against the de-indented original. Returns the
    merged, de-indented text and the positions of the replacements that were
    rejected for overlapping an earlier one.
    """
    base = original[len(leading_whitespace(original)) :]
    accepted: list[_Span] = []
    rejected: list[int] = []
    for position, replacement in enumerate(replacements):
        target = replacement[len(leading_whitespace(replacement)) :]
        spans = _diff(base, target)
        if any(span.conflicts_with(other) for span in spans for other in accepted):
            rejected.append(position)
            continue
        accepted.extend(span for span in spans if span not in accepted)
    return _merge(base, accepted), rejected


def _plan_line(
    lines: Sequence[str],
    index: int,
    group: list[Diagnostic],
    unit: int,
) -> tuple[_PlannedEdit, list[SkippedFix]]:
    if not 0 <= index < len(lines):
        raise IndexError(f"line {index + 1} is out of range for a {len(lines)}-line buffer")
    deletions = [diagnostic for diagnostic in group if diagnostic.is_deletion]
    if deletions:
        superseded = [_skip(d, "superseded by a deletion on the same line") for d in group if not d.is_deletion]
        return _PlannedEdit(LineEdit.delete(index), tuple(deletions)), superseded

    if len(group) == 1:
        diagnostic = group[0]
        text = diagnostic.replacement or ""
        if "\n" in text:
            edit = LineEdit.insert_block(index, text)
        else:
            edit = LineEdit.replace(index, text, own_indent=is_indent_authoritative(diagnostic))
        return _PlannedEdit(edit, (diagnostic,)), []

    original = lines[index]
    merged, rejected_positions = compose_replacements(original, [d.replacement or "" for d in group])
    rejected = [
        _skip(group[position], "overlaps an earlier fix on the same line") for position in rejected_positions
    ]
    for skipped_fix in rejected:
        logger.warning("Skipping fix %s on line %d: %s", skipped_fix.diagnostic.code, index + 1, skipped_fix.reason)
    used = tuple(d for position, d in enumerate(group) if position not in rejected_positions)
    logger.debug("Composed %d fixes on line %d", len(used), index + 1)

    indent = leading_whitespace(original)
    authoritative = False
    for diagnostic in used:
        own = leading_whitespace(diagnostic.replacement or "")
        if is_indent_authoritative(diagnostic) and "\n" not in (diagnostic.replacement or "") and own != indent:
            indent = own
            authoritative = True
            break

    if "\n" in merged:
        block = reindent_block(indent, merged.split("\n"), unit)
        return _PlannedEdit(LineEdit.insert_block(index, "\n".join(block), own_indent=True), used), rejected
    return _PlannedEdit(LineEdit.replace(index, indent + merged, own_indent=authoritative), used), rejected


def _diff(base: str, target: str) -> list[_Span]:
    matcher = SequenceMatcher(None, base, target, autojunk=False)
    return [
        _Span(start, end, target[target_start:target_end])
        for tag, start, end, target_start, target_end in matcher.get_opcodes()
        if tag != "equal"
    ]


def _merge(base: str, spans: list[_Span]) -> str:
    replaced = [span for span in spans if not span.is_insert]
    spans = [span for span in spans if not _absorbed(span, replaced)]
    # Inserts sort before a replace starting at the same position; sorted() keeps acceptance order otherwise.
    ordered = sorted(spans, key=lambda span: (span.start, not span.is_insert))
    pieces: list[str] = []
    cursor = 0
    for span in ordered:
        if span.start > cursor:
            pieces.append(base[cursor : span.start])
            cursor = span.start
        pieces.append(span.text)
        cursor = max(cursor, span.end)
    pieces.append(base[cursor:])
    return "".join(pieces)


def _absorbed(span: _Span, replaced: Sequence[_Span]) -> bool:
    """A whitespace insert touching a replacement that already pads that side is dropped."""
    if not span.is_insert or span.text.strip():
        return False
    return any(
        (other.start == span.start and other.text[:1].isspace())
        or (other.end == span.start and other.text[-1:].isspace())
        for other in replaced
    )


def _paren_balance(line: str, syntax: LiteralSyntax) -> int:
    code = code_mask(line, syntax)
    return code.count("(") - code.count(")")


def _skip(diagnostic: Diagnostic, reason: str) -> SkippedFix:
    return SkippedFix(diagnostic=diagnostic, reason=reason)
