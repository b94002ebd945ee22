"""Identifier case conversion and TypeScript naming conventions."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable

_WORD = re.compile(r"[A-Z]+(?![a-z])|[A-Z]?[a-z0-9]+|[0-9]+")


def _words(name: str) -> list[str]:
    return _WORD.findall(name)


def to_pascal_case(name: str) -> str:
    """``hello-world`` -> ``HelloWorld``."""
    return "".join(word[:1].upper() + word[1:].lower() for word in _words(name))


def to_camel_case(name: str) -> str:
    """``user_name`` -> ``userName``."""
    pascal = to_pascal_case(name)
    return pascal[:1].lower() + pascal[1:]


def to_kebab_case(name: str) -> str:
    """``HelloWorld`` -> ``hello-world``."""
    return "-".join(word.lower() for word in _words(name))


@dataclass(frozen=True)
class NamingConvention:
    """How a target language names types, files and fields."""

    command_to_type: Callable[[str], str]
    command_to_file: Callable[[str], str]
    field_to_name: Callable[[str], str]
    reserved_words: frozenset[str]
    escape_reserved: Callable[[str], str]

    def type_name(self, name: str) -> str:
        return self.command_to_type(name)

    def file_name(self, name: str) -> str:
        return self.command_to_file(name)

    def field_name(self, name: str) -> str:
        return self.field_to_name(name)

    def is_reserved(self, name: str) -> bool:
        return name in self.reserved_words

    def safe_name(self, name: str) -> str:
        """Return ``name``, escaped if it is a reserved word."""
        return self.escape_reserved(name) if self.is_reserved(name) else name


def _escape_ts_reserved(name: str) -> str:
    return f"_{name}"


_JS_RESERVED = (
    "break case catch class const continue debugger default delete do else "
    "enum export extends false finally for function if import in instanceof "
    "let new null return super switch this throw true try typeof var void "
    "while with yield"
)

_TS_RESERVED = (
    "any as async await boolean constructor declare get implements interface "
    "module namespace never number object package private protected public "
    "readonly require set static string symbol type undefined unknown"
)

TS_NAMING = NamingConvention(
    command_to_type=to_pascal_case,
    command_to_file=to_kebab_case,
    field_to_name=to_camel_case,
    reserved_words=frozenset(_JS_RESERVED.split() + _TS_RESERVED.split()),
    escape_reserved=_escape_ts_reserved,
)