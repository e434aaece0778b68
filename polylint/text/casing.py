"""Identifier casing predicates and converters."""

from __future__ import annotations

import re
from enum import StrEnum

_WORD_RE = re.compile(r"[A-Z]+(?![a-z])\d*|[A-Z]?[a-z]+\d*|\d+")


class Convention(StrEnum):
    PASCAL = "PascalCase"
    CAMEL = "camelCase"
    SNAKE = "snake_case"
    UPPER_SNAKE = "UPPER_SNAKE_CASE"


def split_words(name: str) -> list[str]:
    """Segment an identifier on underscores and casing transitions (`parseHTTPResponse2` -> parse/HTTP/Response2)."""
    return _WORD_RE.findall(name)


def _leading_underscores(name: str) -> str:
    return name[: len(name) - len(name.lstrip("_"))]


def is_pascal_case(name: str) -> bool:
    return re.fullmatch(r"[A-Z][A-Za-z0-9]*", name) is not None


def is_camel_case(name: str) -> bool:
    return re.fullmatch(r"[a-z][A-Za-z0-9]*", name) is not None


def is_snake_case(name: str) -> bool:
    return re.fullmatch(r"_*[a-z][a-z0-9_]*", name) is not None


def is_upper_snake_case(name: str) -> bool:
    return re.fullmatch(r"_*[A-Z][A-Z0-9_]*", name) is not None


def to_pascal_case(name: str) -> str:
    return "".join(word.capitalize() for word in split_words(name))


def to_camel_case(name: str) -> str:
    pascal = to_pascal_case(name)
    return pascal[:1].lower() + pascal[1:]


def to_snake_case(name: str) -> str:
    return _leading_underscores(name) + "_".join(word.lower() for word in split_words(name))


def to_upper_snake_case(name: str) -> str:
    return _leading_underscores(name) + "_".join(word.upper() for word in split_words(name))


_PREDICATES = {
    Convention.PASCAL: is_pascal_case,
    Convention.CAMEL: is_camel_case,
    Convention.SNAKE: is_snake_case,
    Convention.UPPER_SNAKE: is_upper_snake_case,
}

_CONVERTERS = {
    Convention.PASCAL: to_pascal_case,
    Convention.CAMEL: to_camel_case,
    Convention.SNAKE: to_snake_case,
    Convention.UPPER_SNAKE: to_upper_snake_case,
}


def matches_convention(name: str, convention: Convention) -> bool:
    return _PREDICATES[convention](name)


def convert(name: str, convention: Convention) -> str:
    return _CONVERTERS[convention](name)
