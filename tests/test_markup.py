import pytest

from polylint.lint.checks import (
    AttributeQuotesRule,
    DocumentStructureRule,
    EmptyElementRule,
    ImageDimensionsRule,
    RequiredAttributesRule,
    TableStructureRule,
    TagCaseRule,
    TagClosingRule,
    TagSpellingRule,
)
from polylint.languages import html
from polylint.lint.checks.markup import blank_comments, edit_distance
from tests._shared_cases import HTML_DOCUMENT


@pytest.mark.parametrize(
    ("first", "second", "expected"),
    [
        ("div", "div", 0),
        ("dvi", "div", 1),
        ("tabel", "table", 1),
        ("spn", "span", 1),
        ("", "ul", 2),
    ],
)
def test_edit_distance_counts_transpositions_once(first: str, second: str, expected: int) -> None:
    assert edit_distance(first, second) == expected


def test_blank_comments_tracks_comments_across_lines() -> None:
    blanked = blank_comments(["<p>a</p> <!-- start", "<DIV>", "end --> <b>x</b>"])

    assert blanked[0].rstrip() == "<p>a</p>"
    assert len(blanked[0]) == len("<p>a</p> <!-- start")
    assert blanked[1].strip() == ""
    assert blanked[2].strip() == "<b>x</b>"


def test_document_structure_accepts_complete_document() -> None:
    assert DocumentStructureRule().run(HTML_DOCUMENT.splitlines()) == []


def test_document_structure_inserts_missing_doctype() -> None:
    lines = ["<html>", "<head><title>T</title></head>", "<body></body>", "</html>"]

    diagnostics = DocumentStructureRule().run(lines)

    assert len(diagnostics) == 1
    assert diagnostics[0].line == 1
    assert diagnostics[0].message == "Missing DOCTYPE declaration"
    assert diagnostics[0].replacement == "<!DOCTYPE html>\n<html>"


def test_document_structure_reports_missing_title_without_fix() -> None:
    lines = ["<!DOCTYPE html>", "<html>", "<head>", "</head>", "<body></body>", "</html>"]

    diagnostics = DocumentStructureRule().run(lines)

    assert [(diagnostic.line, diagnostic.message) for diagnostic in diagnostics] == [
        (3, "Missing <title> in <head>")
    ]
    assert diagnostics[0].replacement is None


def test_tag_closing_reports_mismatch_with_opening_line() -> None:
    diagnostics = TagClosingRule().run(["<div>", "<span>", "</div>"])

    assert len(diagnostics) == 1
    assert diagnostics[0].line == 3
    assert diagnostics[0].message == "Mismatched closing tag </div> (opened at line 1)"


def test_tag_closing_reports_unclosed_and_unexpected_tags() -> None:
    diagnostics = TagClosingRule().run(["<section>", "<p>text</p>", "</ul>"])

    assert [(diagnostic.line, diagnostic.message) for diagnostic in diagnostics] == [
        (3, "Unexpected closing tag </ul> (no opening tag found)"),
        (1, "Unclosed <section> tag"),
    ]


def test_tag_closing_ignores_void_and_commented_tags() -> None:
    assert TagClosingRule().run(["<p>", '<img src="a.png">', "<br>", "<!-- <div> -->", "</p>"]) == []


def test_tag_case_reports_tags_before_attributes() -> None:
    diagnostics = TagCaseRule().run(['<DIV Class="x">hi</DIV>'])

    assert [diagnostic.message for diagnostic in diagnostics] == [
        "HTML tags should be lowercase: 'DIV'",
        "HTML attributes should be lowercase: 'Class'",
    ]
    assert diagnostics[0].replacement == '<div Class="x">hi</div>'
    assert diagnostics[1].replacement == '<DIV class="x">hi</DIV>'


def test_attribute_quotes_adds_double_quotes() -> None:
    diagnostics = AttributeQuotesRule().run(["<input type=text>", "<a href='/home'>home</a>"])

    assert [diagnostic.replacement for diagnostic in diagnostics] == [
        '<input type="text">',
        '<a href="/home">home</a>',
    ]
    assert diagnostics[0].message == "Attribute 'type' missing quotes"
    assert diagnostics[1].message == "Attribute 'href' uses single quotes"


def test_attribute_quotes_accepts_self_named_boolean_attributes() -> None:
    assert AttributeQuotesRule().run(['<input type="checkbox" disabled=disabled>']) == []


def test_required_attributes_inserts_missing_attribute() -> None:
    diagnostics = RequiredAttributesRule().run(['<img src="a.png">'])

    assert len(diagnostics) == 1
    assert diagnostics[0].message == "<IMG> missing required attribute 'alt'"
    assert diagnostics[0].replacement == '<img alt="" src="a.png">'


def test_image_dimensions_inserts_width_and_height() -> None:
    diagnostics = ImageDimensionsRule().run(['<img src="a.png" alt="">'])

    assert len(diagnostics) == 1
    assert diagnostics[0].message == "Image missing width and height attributes"
    assert diagnostics[0].replacement == '<img width="" height="" src="a.png" alt="">'


def test_tag_spelling_suggests_closest_known_tag() -> None:
    diagnostics = TagSpellingRule().run(["<dvi>text</dvi>"])

    assert len(diagnostics) == 1
    assert diagnostics[0].message == "Unknown or misspelled tag 'dvi'"
    assert diagnostics[0].replacement == "<div>text</div>"


def test_tag_spelling_ignores_custom_elements() -> None:
    assert TagSpellingRule().run(["<my-widget></my-widget>"]) == []


def test_empty_element_allows_layout_containers() -> None:
    diagnostics = EmptyElementRule().run(["<p></p>", '<div class="spacer"></div>'])

    assert [(diagnostic.line, diagnostic.message) for diagnostic in diagnostics] == [
        (1, "Empty p tag without content")
    ]


def test_table_structure_reports_empty_tables_and_rows() -> None:
    empty = TableStructureRule().run(["<table>", "</table>"])
    rowless = TableStructureRule().run(["<table>", "<tr>", "</tr>", "</table>"])

    assert [(diagnostic.line, diagnostic.message) for diagnostic in empty] == [(1, "Empty table (no rows)")]
    assert [(diagnostic.line, diagnostic.message) for diagnostic in rowless] == [(2, "Table row without cells")]


def test_indentation_is_checked_after_stray_parenthesis_in_text() -> None:
    rule = next(rule for rule in html.build_rules() if rule.name == "formatIndentation")

    diagnostics = rule.run(["<p>", "    Prices (in euros", "   <b>ten</b>", "</p>"])

    assert [(diagnostic.line, diagnostic.replacement) for diagnostic in diagnostics] == [(3, "<b>ten</b>")]
