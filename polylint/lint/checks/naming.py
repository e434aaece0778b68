"""Identifier checks: reserved-word collisions and casing conventions."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Literal, TypeAlias
import re

from polylint.diagnostics import (
    LINT_NAMING_CONVENTION,
    LINT_NAMING_KEYWORD_COLLISION,
    Diagnostic,
    diagnostic_from_spec,
)
from polylint.lint.rules import LintConfidence, LintDomain
from polylint.text import Convention, LiteralSyntax, convert, mask_literals, matches_convention, replace_word, split_line_comment

# Words that can precede an identifier without declaring it.
STATEMENT_WORDS = frozenset(
    {
        "return",
        "else",
        "case",
        "goto",
        "throw",
        "new",
        "delete",
        "yield",
        "await",
        "typeof",
        "instanceof",
        "in",
        "of",
        "is",
        "as",
        "do",
        "using",
        "import",
        "package",
        "namespace",
        "break",
        "continue",
        "sizeof",
        "not",
        "and",
        "or",
    }
)

MODIFIER_WORDS = frozenset(
    {
        "public",
        "private",
        "protected",
        "internal",
        "static",
        "virtual",
        "override",
        "abstract",
        "async",
        "sealed",
        "extern",
        "unsafe",
        "partial",
        "final",
        "synchronized",
        "native",
        "default",
        "readonly",
        "const",
        "export",
    }
)

ParameterPick: TypeAlias = Literal["first", "last"]


@dataclass(frozen=True, slots=True)
class KeywordCollisionRule:
    """Declared identifiers that equal a reserved word get a `_` suffix on that line.

    `declarations` are regexes with a `name` group (and optionally a `type`
    group, which must not be a statement word). `parameter_lists` capture a
    `params` group whose comma-separated entries are searched for the declared
    name: the last word of each entry for typed languages, the first for
    untyped ones.
    """

    language: str
    keywords: frozenset[str]
    declarations: tuple[str, ...]
    parameter_lists: tuple[str, ...] = ()
    parameter_pick: ParameterPick = "last"
    syntax: LiteralSyntax = LiteralSyntax()
    code: str = LINT_NAMING_KEYWORD_COLLISION.code
    name: str = "namingKeywordCollision"
    category: str = LINT_NAMING_KEYWORD_COLLISION.category
    domain: LintDomain = "correctness"
    confidence: LintConfidence = "heuristic"

    def run(self, lines: Sequence[str]) -> list[Diagnostic]:
        diagnostics: list[Diagnostic] = []
        declarations = tuple(re.compile(pattern) for pattern in self.declarations)
        parameter_lists = tuple(re.compile(pattern) for pattern in self.parameter_lists)
        for index, line in enumerate(lines):
            stripped = line.strip()
            if not stripped or self.syntax.is_comment_line(stripped):
                continue
            code, _ = split_line_comment(line, self.syntax)
            masked = mask_literals(code, self.syntax)
            colliding = [
                name
                for name in self._declared_names(masked, declarations, parameter_lists)
                if name in self.keywords
            ]
            if not colliding:
                continue
            fixed = line
            for name in dict.fromkeys(colliding):
                fixed = replace_word(fixed, name, f"{name}_", self.syntax)
            diagnostics.append(
                diagnostic_from_spec(
                    LINT_NAMING_KEYWORD_COLLISION,
                    line=index + 1,
                    snippet=line,
                    replacement=fixed,
                    name=colliding[0],
                    language=self.language,
                )
            )
        return diagnostics

    def _declared_names(
        self,
        masked: str,
        declarations: tuple[re.Pattern[str], ...],
        parameter_lists: tuple[re.Pattern[str], ...],
    ) -> list[str]:
        names: list[str] = []
        for pattern in declarations:
            for match in pattern.finditer(masked):
                if _declared_by_statement_word(match):
                    continue
                names.append(match.group("name"))
        for pattern in parameter_lists:
            for match in pattern.finditer(masked):
                if _declared_by_statement_word(match):
                    continue
                for parameter in match.group("params").split(","):
                    words = re.findall(r"[A-Za-z_$][\w$]*", parameter.split("=")[0])
                    if words:
                        names.append(words[0] if self.parameter_pick == "first" else words[-1])
        return names


@dataclass(frozen=True, slots=True)
class NamingTarget:
    """One construct whose declared name must follow a casing convention."""

    kind: str
    pattern: str
    accepted: tuple[Convention, ...]
    target: Convention
    skip: str | None = None


@dataclass(frozen=True, slots=True)
class NamingConventionRule:
    """Per-construct casing rules with a deterministic rename fix on the declaring line."""

    targets: tuple[NamingTarget, ...]
    keywords: frozenset[str] = frozenset()
    syntax: LiteralSyntax = LiteralSyntax()
    code: str = LINT_NAMING_CONVENTION.code
    name: str = "namingConvention"
    category: str = LINT_NAMING_CONVENTION.category
    domain: LintDomain = "style"
    confidence: LintConfidence = "policy"

    def run(self, lines: Sequence[str]) -> list[Diagnostic]:
        diagnostics: list[Diagnostic] = []
        compiled = tuple((target, re.compile(target.pattern)) for target in self.targets)
        for index, line in enumerate(lines):
            stripped = line.strip()
            if not stripped or self.syntax.is_comment_line(stripped):
                continue
            code, _ = split_line_comment(line, self.syntax)
            masked = mask_literals(code, self.syntax)
            for target, pattern in compiled:
                match = pattern.search(masked)
                if match is None or _declared_by_statement_word(match, modifiers=True):
                    continue
                declared = match.group("name")
                fixed_name = self._fixed_name(declared, target)
                if fixed_name is None:
                    continue
                diagnostics.append(
                    diagnostic_from_spec(
                        LINT_NAMING_CONVENTION,
                        line=index + 1,
                        snippet=line,
                        replacement=replace_word(line, declared, fixed_name, self.syntax),
                        kind=target.kind,
                        name=declared,
                        convention=target.target.value,
                        fixed=fixed_name,
                    )
                )
                break
        return diagnostics

    def _fixed_name(self, declared: str, target: NamingTarget) -> str | None:
        if declared in self.keywords:
            return None
        if target.skip is not None and re.search(target.skip, declared):
            return None
        prefix = declared[: len(declared) - len(declared.lstrip("_"))]
        core = declared[len(prefix) :]
        if not core or any(matches_convention(core, convention) for convention in target.accepted):
            return None
        fixed = prefix + convert(core, target.target)
        if fixed == declared or not fixed.strip("_"):
            return None
        return fixed


def _declared_by_statement_word(match: re.Match[str], *, modifiers: bool = False) -> bool:
    if "type" not in match.re.groupindex:
        return False
    declared_type = match.group("type")
    if declared_type is None:
        return False
    if declared_type in STATEMENT_WORDS:
        return True
    return modifiers and declared_type in MODIFIER_WORDS
