"""HTML markup checks.

Tags are recognized per line with a quote-aware tag pattern. `<!-- -->`
comments are blanked before matching, including comments that span lines.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
import re

from polylint.diagnostics import (
    LINT_HTML_ATTRIBUTE_QUOTES,
    LINT_HTML_DOCUMENT_STRUCTURE,
    LINT_HTML_EMPTY_ELEMENT,
    LINT_HTML_IMAGE_DIMENSIONS,
    LINT_HTML_REQUIRED_ATTRIBUTE,
    LINT_HTML_TABLE_STRUCTURE,
    LINT_HTML_TAG_CASE,
    LINT_HTML_TAG_CLOSING,
    LINT_HTML_TAG_SPELLING,
    Diagnostic,
    diagnostic_from_spec,
)
from polylint.lint.rules import LintConfidence, LintDomain

KNOWN_TAGS = frozenset(
    {
        "html", "head", "body", "title", "meta", "link", "style", "script", "noscript", "base",
        "div", "span", "p", "a", "img", "br", "hr", "pre", "code", "blockquote",
        "b", "i", "u", "s", "em", "strong", "small", "sub", "sup", "abbr", "cite", "q",
        "table", "thead", "tbody", "tfoot", "tr", "td", "th", "caption", "colgroup", "col",
        "ul", "ol", "li", "dl", "dt", "dd",
        "h1", "h2", "h3", "h4", "h5", "h6",
        "form", "input", "button", "select", "option", "optgroup", "textarea", "label",
        "fieldset", "legend", "output", "progress", "meter", "datalist",
        "header", "footer", "nav", "section", "article", "aside", "main", "address",
        "figure", "figcaption", "details", "summary", "dialog", "mark", "time", "template",
        "audio", "video", "source", "track", "canvas", "iframe", "embed", "object", "param",
        "picture", "map", "area", "wbr",
        "svg", "path", "circle", "rect", "line", "polygon", "polyline", "ellipse", "g", "text",
    }
)
VOID_TAGS = frozenset(
    {"img", "br", "hr", "meta", "link", "input", "area", "base", "col", "embed", "keygen", "param", "source", "track", "wbr"}
)
OPTIONAL_CLOSE_TAGS = frozenset({"html", "head", "body"})
ALLOWED_EMPTY_TAGS = frozenset(
    {"div", "span", "section", "article", "aside", "header", "footer", "nav", "main", "template", "script", "td", "th", "textarea", "iframe", "canvas", "i"}
)
BOOLEAN_ATTRIBUTES = frozenset({"checked", "disabled", "readonly", "required", "multiple", "selected", "hidden", "autofocus"})
REQUIRED_ATTRIBUTES: dict[str, tuple[str, ...]] = {
    "img": ("src", "alt"),
    "a": ("href",),
    "link": ("rel", "href"),
    "form": ("action",),
    "input": ("type",),
}

TAG_RE = re.compile(r"""<(/?)([A-Za-z][\w-]*)((?:[^>"']|"[^"]*"|'[^']*')*?)(/?)>""")
ATTRIBUTE_RE = re.compile(r"""([^\s"'<>/=]+)(?:(\s*=\s*)("[^"]*"|'[^']*'|[^\s"'=<>`]+))?""")
_EMPTY_ELEMENT_RE = re.compile(r"<([A-Za-z][\w-]*)\b[^>]*>\s*</\1\s*>", re.IGNORECASE)


@dataclass(frozen=True, slots=True)
class Attribute:
    name: str
    start: int
    value: str | None = None
    value_start: int = -1


@dataclass(frozen=True, slots=True)
class Tag:
    name: str
    start: int
    end: int
    name_start: int
    closing: bool = False
    self_closing: bool = False
    attributes: tuple[Attribute, ...] = ()

    @property
    def lower_name(self) -> str:
        return self.name.lower()

    def attribute(self, name: str) -> Attribute | None:
        return next((attribute for attribute in self.attributes if attribute.name.lower() == name), None)


def blank_comments(lines: Sequence[str]) -> list[str]:
    """Replace `<!-- ... -->` spans with spaces, tracking comments across lines."""
    blanked: list[str] = []
    in_comment = False
    for line in lines:
        chars = list(line)
        position = 0
        while position < len(line):
            search_from = position
            if not in_comment:
                start = line.find("<!--", position)
                if start < 0:
                    break
                position = start
                search_from = start + 4
            end = line.find("-->", search_from)
            stop = len(line) if end < 0 else end + 3
            for index in range(position, stop):
                chars[index] = " "
            in_comment = end < 0
            position = stop
        blanked.append("".join(chars))
    return blanked


def iter_tags(line: str) -> Iterator[Tag]:
    for match in TAG_RE.finditer(line):
        attribute_text = match.group(3)
        offset = match.start(3)
        attributes = []
        for attribute in ATTRIBUTE_RE.finditer(attribute_text):
            value = attribute.group(3)
            attributes.append(
                Attribute(
                    name=attribute.group(1),
                    start=offset + attribute.start(1),
                    value=value,
                    value_start=offset + attribute.start(3) if value is not None else -1,
                )
            )
        yield Tag(
            name=match.group(2),
            start=match.start(),
            end=match.end(),
            name_start=match.start(2),
            closing=match.group(1) == "/",
            self_closing=match.group(4) == "/",
            attributes=tuple(attributes),
        )


def edit_distance(first: str, second: str) -> int:
    """Edit distance counting an adjacent transposition (`dvi` -> `div`) as one edit."""
    rows = len(first) + 1
    columns = len(second) + 1
    table = [[0] * columns for _ in range(rows)]
    for row in range(rows):
        table[row][0] = row
    for column in range(columns):
        table[0][column] = column
    for row in range(1, rows):
        for column in range(1, columns):
            cost = first[row - 1] != second[column - 1]
            table[row][column] = min(
                table[row - 1][column] + 1,
                table[row][column - 1] + 1,
                table[row - 1][column - 1] + cost,
            )
            if (
                row > 1
                and column > 1
                and first[row - 1] == second[column - 2]
                and first[row - 2] == second[column - 1]
            ):
                table[row][column] = min(table[row][column], table[row - 2][column - 2] + 1)
    return table[-1][-1]


def _splice(line: str, start: int, end: int, text: str) -> str:
    return line[:start] + text + line[end:]


@dataclass(frozen=True, slots=True)
class DocumentStructureRule:
    """Document skeleton: doctype, `<html>`, `<head>` with `<title>`, `<body>`, and their order.

    Only the missing doctype carries a fix (inserted above the first
    non-blank line). Missing containers cannot be placed by a line edit.
    """

    code: str = LINT_HTML_DOCUMENT_STRUCTURE.code
    name: str = "htmlDocumentStructure"
    category: str = LINT_HTML_DOCUMENT_STRUCTURE.category
    domain: LintDomain = "correctness"
    confidence: LintConfidence = "heuristic"

    def run(self, lines: Sequence[str]) -> list[Diagnostic]:
        if not any(line.strip() for line in lines):
            return []
        blanked = blank_comments(lines)
        text = "\n".join(blanked)
        first = next(index for index, line in enumerate(lines) if line.strip())
        diagnostics: list[Diagnostic] = []

        doctype = self._find(blanked, r"<!DOCTYPE\s+html\b")
        if doctype is None:
            diagnostics.append(
                diagnostic_from_spec(
                    LINT_HTML_DOCUMENT_STRUCTURE,
                    line=first + 1,
                    snippet=lines[first],
                    replacement=f"<!DOCTYPE html>\n{lines[first].strip()}",
                    element="DOCTYPE declaration",
                    hint="Add <!DOCTYPE html> at the beginning",
                )
            )
        html = self._find(blanked, r"<html\b")
        head = self._find(blanked, r"<head\b")
        body = self._find(blanked, r"<body\b")
        head_end = self._find(blanked, r"</head\s*>")
        missing = (
            (html, "<html> tag", "Add <html> tag", first),
            (head, "<head> section", "Add <head> section inside <html>", html),
            (body, "<body> section", "Add <body> section after </head>", head_end if head_end is not None else html),
        )
        for found, element, hint, anchor in missing:
            if found is None:
                at = anchor if anchor is not None else first
                diagnostics.append(
                    diagnostic_from_spec(
                        LINT_HTML_DOCUMENT_STRUCTURE, line=at + 1, snippet=lines[at], element=element, hint=hint
                    )
                )
        if head is not None and re.search(r"<title\b[^>]*>.*?</title\s*>", text, re.IGNORECASE | re.DOTALL) is None:
            diagnostics.append(
                diagnostic_from_spec(
                    LINT_HTML_DOCUMENT_STRUCTURE,
                    line=head + 1,
                    snippet=lines[head],
                    element="<title> in <head>",
                    hint="Add <title>Document</title> inside <head>",
                )
            )
        if doctype is not None and html is not None and doctype > html:
            diagnostics.append(
                diagnostic_from_spec(
                    LINT_HTML_DOCUMENT_STRUCTURE,
                    line=html + 1,
                    snippet=lines[html],
                    message="DOCTYPE should be before <html>",
                    hint="Move DOCTYPE to the first line",
                )
            )
        if head is not None and body is not None and head > body:
            diagnostics.append(
                diagnostic_from_spec(
                    LINT_HTML_DOCUMENT_STRUCTURE,
                    line=body + 1,
                    snippet=lines[body],
                    message="<head> should be before <body>",
                    hint="Move <head> section before <body>",
                )
            )
        return diagnostics

    def _find(self, lines: Sequence[str], pattern: str) -> int | None:
        compiled = re.compile(pattern, re.IGNORECASE)
        return next((index for index, line in enumerate(lines) if compiled.search(line)), None)


@dataclass(frozen=True, slots=True)
class TagClosingRule:
    """Open/close pairing over a tag stack: unclosed, unexpected and mismatched closing tags."""

    code: str = LINT_HTML_TAG_CLOSING.code
    name: str = "htmlTagClosing"
    category: str = LINT_HTML_TAG_CLOSING.category
    domain: LintDomain = "correctness"
    confidence: LintConfidence = "heuristic"

    def run(self, lines: Sequence[str]) -> list[Diagnostic]:
        diagnostics: list[Diagnostic] = []
        stack: list[tuple[str, int]] = []
        for index, line in enumerate(blank_comments(lines)):
            for tag in iter_tags(line):
                name = tag.lower_name
                if name in VOID_TAGS or tag.self_closing:
                    continue
                if not tag.closing:
                    stack.append((name, index))
                    continue
                if stack and stack[-1][0] == name:
                    stack.pop()
                    continue
                opened = next((position for position in range(len(stack) - 1, -1, -1) if stack[position][0] == name), None)
                if opened is None:
                    diagnostics.append(
                        diagnostic_from_spec(
                            LINT_HTML_TAG_CLOSING,
                            line=index + 1,
                            snippet=lines[index],
                            message=f"Unexpected closing tag </{name}> (no opening tag found)",
                            hint="Remove closing tag or add opening tag",
                        )
                    )
                    continue
                diagnostics.append(
                    diagnostic_from_spec(
                        LINT_HTML_TAG_CLOSING,
                        line=index + 1,
                        snippet=lines[index],
                        message=f"Mismatched closing tag </{name}> (opened at line {stack[opened][1] + 1})",
                        hint="Check tag nesting order",
                    )
                )
                del stack[opened:]
        for name, index in stack:
            if name in OPTIONAL_CLOSE_TAGS:
                continue
            diagnostics.append(
                diagnostic_from_spec(LINT_HTML_TAG_CLOSING, line=index + 1, snippet=lines[index], tag=name)
            )
        return diagnostics


@dataclass(frozen=True, slots=True)
class TagCaseRule:
    code: str = LINT_HTML_TAG_CASE.code
    name: str = "htmlTagCase"
    category: str = LINT_HTML_TAG_CASE.category
    domain: LintDomain = "style"
    confidence: LintConfidence = "policy"

    def run(self, lines: Sequence[str]) -> list[Diagnostic]:
        diagnostics: list[Diagnostic] = []
        for index, blanked in enumerate(blank_comments(lines)):
            line = lines[index]
            # name -> (kind, positions); one diagnostic per distinct name
            found: dict[tuple[str, str], list[int]] = {}
            for tag in iter_tags(blanked):
                if tag.name != tag.lower_name:
                    found.setdefault(("tag", tag.name), []).append(tag.name_start)
                if tag.closing:
                    continue
                for attribute in tag.attributes:
                    if attribute.name != attribute.name.lower():
                        found.setdefault(("attribute", attribute.name), []).append(attribute.start)
            for (kind, name), positions in found.items():
                fixed = line
                for position in positions:
                    fixed = _splice(fixed, position, position + len(name), name.lower())
                diagnostics.append(
                    diagnostic_from_spec(
                        LINT_HTML_TAG_CASE,
                        line=index + 1,
                        snippet=line,
                        replacement=fixed,
                        kind=f"{kind}s",
                        name=name,
                    )
                )
        return diagnostics


@dataclass(frozen=True, slots=True)
class AttributeQuotesRule:
    """Attribute values use double quotes; boolean attributes written as `checked=checked` are fine."""

    code: str = LINT_HTML_ATTRIBUTE_QUOTES.code
    name: str = "htmlAttributeQuotes"
    category: str = LINT_HTML_ATTRIBUTE_QUOTES.category
    domain: LintDomain = "style"
    confidence: LintConfidence = "policy"

    def run(self, lines: Sequence[str]) -> list[Diagnostic]:
        diagnostics: list[Diagnostic] = []
        for index, blanked in enumerate(blank_comments(lines)):
            line = lines[index]
            for tag in iter_tags(blanked):
                for attribute in tag.attributes:
                    value = attribute.value
                    if value is None or value.startswith('"'):
                        continue
                    if value.startswith("'"):
                        inner = value[1:-1]
                        if '"' in inner:
                            continue
                        problem = "uses single quotes"
                    else:
                        inner = value
                        if attribute.name.lower() in BOOLEAN_ATTRIBUTES and inner.lower() == attribute.name.lower():
                            continue
                        problem = "missing quotes"
                    start = attribute.value_start
                    diagnostics.append(
                        diagnostic_from_spec(
                            LINT_HTML_ATTRIBUTE_QUOTES,
                            line=index + 1,
                            snippet=line,
                            replacement=_splice(line, start, start + len(value), f'"{inner}"'),
                            attribute=attribute.name,
                            problem=problem,
                        )
                    )
        return diagnostics


@dataclass(frozen=True, slots=True)
class EmptyElementRule:
    code: str = LINT_HTML_EMPTY_ELEMENT.code
    name: str = "htmlEmptyElement"
    category: str = LINT_HTML_EMPTY_ELEMENT.category
    domain: LintDomain = "heuristic"
    confidence: LintConfidence = "heuristic"

    def run(self, lines: Sequence[str]) -> list[Diagnostic]:
        diagnostics: list[Diagnostic] = []
        for index, blanked in enumerate(blank_comments(lines)):
            for match in _EMPTY_ELEMENT_RE.finditer(blanked):
                tag = match.group(1).lower()
                if tag in ALLOWED_EMPTY_TAGS:
                    continue
                diagnostics.append(
                    diagnostic_from_spec(LINT_HTML_EMPTY_ELEMENT, line=index + 1, snippet=lines[index], tag=tag)
                )
        return diagnostics


@dataclass(frozen=True, slots=True)
class ImageDimensionsRule:
    code: str = LINT_HTML_IMAGE_DIMENSIONS.code
    name: str = "htmlImageDimensions"
    category: str = LINT_HTML_IMAGE_DIMENSIONS.category
    domain: LintDomain = "heuristic"
    confidence: LintConfidence = "policy"

    def run(self, lines: Sequence[str]) -> list[Diagnostic]:
        diagnostics: list[Diagnostic] = []
        for index, blanked in enumerate(blank_comments(lines)):
            line = lines[index]
            fixed = line
            missing: list[str] = []
            for tag in reversed(list(iter_tags(blanked))):
                if tag.lower_name != "img" or tag.closing:
                    continue
                absent = [name for name in ("width", "height") if tag.attribute(name) is None]
                if not absent:
                    continue
                insert_at = tag.name_start + len(tag.name)
                fixed = _splice(fixed, insert_at, insert_at, "".join(f' {name}=""' for name in absent))
                missing = absent
            if not missing:
                continue
            description = "width and height attributes" if len(missing) == 2 else f"{missing[0]} attribute"
            diagnostics.append(
                diagnostic_from_spec(
                    LINT_HTML_IMAGE_DIMENSIONS,
                    line=index + 1,
                    snippet=line,
                    replacement=fixed,
                    missing=description,
                )
            )
        return diagnostics


@dataclass(frozen=True, slots=True)
class TagSpellingRule:
    """Unknown tags within edit distance 2 of a known tag are reported as likely typos."""

    known_tags: frozenset[str] = KNOWN_TAGS
    max_distance: int = 2
    code: str = LINT_HTML_TAG_SPELLING.code
    name: str = "htmlTagSpelling"
    category: str = LINT_HTML_TAG_SPELLING.category
    domain: LintDomain = "heuristic"
    confidence: LintConfidence = "heuristic"

    def run(self, lines: Sequence[str]) -> list[Diagnostic]:
        diagnostics: list[Diagnostic] = []
        for index, blanked in enumerate(blank_comments(lines)):
            line = lines[index]
            tags = list(iter_tags(blanked))
            reported: set[str] = set()
            for tag in tags:
                name = tag.lower_name
                if name in reported or name in self.known_tags or len(name) <= 2 or "-" in name:
                    continue
                candidates = self.similar(name)
                if not candidates:
                    continue
                reported.add(name)
                fixed = line
                for other in reversed(tags):
                    if other.lower_name == name:
                        fixed = _splice(fixed, other.name_start, other.name_start + len(other.name), candidates[0])
                diagnostics.append(
                    diagnostic_from_spec(
                        LINT_HTML_TAG_SPELLING,
                        line=index + 1,
                        snippet=line,
                        replacement=fixed,
                        tag=name,
                        suggestion=", ".join(candidates),
                    )
                )
        return diagnostics

    def similar(self, name: str) -> list[str]:
        # Ties prefer candidates of the same length, then with the same first letter.
        scored = sorted(
            (distance, abs(len(candidate) - len(name)), candidate[0] != name[0], candidate)
            for candidate in self.known_tags
            if (distance := edit_distance(name, candidate)) <= self.max_distance
        )
        return [candidate for *_, candidate in scored]


@dataclass(frozen=True, slots=True)
class TableStructureRule:
    code: str = LINT_HTML_TABLE_STRUCTURE.code
    name: str = "htmlTableStructure"
    category: str = LINT_HTML_TABLE_STRUCTURE.category
    domain: LintDomain = "heuristic"
    confidence: LintConfidence = "heuristic"

    def run(self, lines: Sequence[str]) -> list[Diagnostic]:
        diagnostics: list[Diagnostic] = []
        # Open tables as [start index, row count].
        tables: list[list[int]] = []
        row: int | None = None
        row_cells = 0
        for index, blanked in enumerate(blank_comments(lines)):
            for tag in iter_tags(blanked):
                name = tag.lower_name
                if name == "table":
                    if tag.closing and tables:
                        start, rows = tables.pop()
                        if rows == 0:
                            diagnostics.append(
                                diagnostic_from_spec(
                                    LINT_HTML_TABLE_STRUCTURE,
                                    line=start + 1,
                                    snippet=lines[start],
                                    problem="Empty table (no rows)",
                                    hint="Add table rows with <tr>",
                                )
                            )
                    elif not tag.closing:
                        tables.append([index, 0])
                elif name == "tr" and tables:
                    if not tag.closing:
                        tables[-1][1] += 1
                        row, row_cells = index, 0
                    elif row is not None:
                        if row_cells == 0:
                            diagnostics.append(
                                diagnostic_from_spec(
                                    LINT_HTML_TABLE_STRUCTURE,
                                    line=row + 1,
                                    snippet=lines[row],
                                    problem="Table row without cells",
                                    hint="Add <td> or <th> cells inside <tr>",
                                )
                            )
                        row = None
                elif name in ("td", "th") and not tag.closing:
                    row_cells += 1
        return diagnostics


@dataclass(frozen=True, slots=True)
class RequiredAttributesRule:
    required: tuple[tuple[str, tuple[str, ...]], ...] = tuple(REQUIRED_ATTRIBUTES.items())
    code: str = LINT_HTML_REQUIRED_ATTRIBUTE.code
    name: str = "htmlRequiredAttributes"
    category: str = LINT_HTML_REQUIRED_ATTRIBUTE.category
    domain: LintDomain = "correctness"
    confidence: LintConfidence = "policy"

    def run(self, lines: Sequence[str]) -> list[Diagnostic]:
        diagnostics: list[Diagnostic] = []
        required = dict(self.required)
        for index, blanked in enumerate(blank_comments(lines)):
            line = lines[index]
            for tag in iter_tags(blanked):
                if tag.closing or tag.lower_name not in required:
                    continue
                insert_at = tag.name_start + len(tag.name)
                for attribute in required[tag.lower_name]:
                    if tag.attribute(attribute) is not None:
                        continue
                    diagnostics.append(
                        diagnostic_from_spec(
                            LINT_HTML_REQUIRED_ATTRIBUTE,
                            line=index + 1,
                            snippet=line,
                            replacement=_splice(line, insert_at, insert_at, f' {attribute}=""'),
                            tag=tag.lower_name.upper(),
                            attribute=attribute,
                        )
                    )
        return diagnostics
