"""Centralized source cases used across detection, lint and pipeline tests."""

from __future__ import annotations

from dataclasses import dataclass
import textwrap


@dataclass(frozen=True, slots=True)
class SourceCase:
    name: str
    language: str | None
    source: str
    file_path: str | None = None


def _dedent(text: str) -> str:
    return textwrap.dedent(text).lstrip()


CSHARP_PROGRAM = _dedent(
    """
    using System;

    namespace Demo
    {
        class my_widget
        {
            int count=0
            public void run(int value)
            {
                if (value == null)
                {
                    count = value;
                }
            }
        }
    }
    """
)

HTML_DOCUMENT = _dedent(
    """
    <!DOCTYPE html>
    <html>
    <head>
    <title>Demo</title>
    </head>
    <body>
    <p>Hello</p>
    </body>
    </html>
    """
)

PYTHON_MODULE = _dedent(
    '''
    """Module docstring."""
    import os

    value = os.getcwd()
    import sys
    print(value, sys.argv)
    '''
)

JAVA_PROGRAM = _dedent(
    """
    public class Main {
        public static void main(String[] args) {
            System.out.println("hi");
        }
    }
    """
)

CPP_PROGRAM = _dedent(
    """
    #include <iostream>
    int main() {
        std::cout << "hi";
    }
    """
)

JAVASCRIPT_PROGRAM = _dedent(
    """
    const total = items.map((item) => item.price);
    console.log(total);
    """
)

DETECTION_CASES: tuple[SourceCase, ...] = (
    SourceCase(name="csharp_using_namespace", language="csharp", source=CSHARP_PROGRAM),
    SourceCase(name="html_document", language="html", source=HTML_DOCUMENT),
    SourceCase(name="python_module", language="python", source=PYTHON_MODULE),
    SourceCase(name="python_function", language="python", source="def main():\n    print('hi')\n"),
    SourceCase(name="java_main_class", language="java", source=JAVA_PROGRAM),
    SourceCase(name="cpp_include_stream", language="cpp", source=CPP_PROGRAM),
    SourceCase(name="javascript_arrow_function", language="javascript", source=JAVASCRIPT_PROGRAM),
    SourceCase(name="paired_inline_tag", language="html", source="<em>hello</em>\n"),
    SourceCase(name="plain_prose_is_unknown", language=None, source="hello world\n"),
    SourceCase(name="stray_closing_marker_is_unknown", language=None, source="ratio a </ b holds\n"),
    SourceCase(name="unclosed_angle_brackets_are_unknown", language=None, source="<x " * 5000),
    SourceCase(name="empty_text_is_unknown", language=None, source=""),
)

EXTENSION_CASES: tuple[SourceCase, ...] = (
    SourceCase(name="js_extension_beats_python_content", language="javascript", source="def main():\n    pass\n", file_path="script.js"),
    SourceCase(name="uppercase_extension", language="html", source="def main():\n    pass\n", file_path="INDEX.HTML"),
    SourceCase(name="header_extension_is_cpp", language="cpp", source="", file_path="include/widget.h"),
    SourceCase(name="typescript_is_javascript", language="javascript", source="", file_path="app.tsx"),
    SourceCase(name="unknown_extension_falls_back_to_content", language="python", source="def main():\n    pass\n", file_path="notes.txt"),
)


def case_id(case: SourceCase) -> str:
    return case.name
