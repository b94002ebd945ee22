"""JavaScript object literal builder."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Union

from baots.fragments import Block, CodeBuilder, Fragment, Line, Raw


class PropertyKind(Enum):
    STRING = "string"
    RAW = "raw"
    OBJECT = "object"
    ARROW_FN = "arrow_fn"


@dataclass
class ArrowFn:
    """An arrow function used as a property value."""

    params: str
    is_async: bool = False
    body: list[str] = field(default_factory=list)

    def async_(self) -> ArrowFn:
        self.is_async = True
        return self

    def body_line(self, line: str) -> ArrowFn:
        self.body.append(line)
        return self

    def body_lines(self, lines: Iterable[str]) -> ArrowFn:
        self.body.extend(lines)
        return self


@dataclass
class Property:
    """One ``key: value`` entry of an object literal."""

    key: str
    kind: PropertyKind
    value: Union[str, "JsObject", ArrowFn]

    @classmethod
    def string(cls, key: str, value: str) -> Property:
        """A string value, written quoted."""
        return cls(key, PropertyKind.STRING, value)

    @classmethod
    def raw(cls, key: str, value: str) -> Property:
        """An expression, written unquoted."""
        return cls(key, PropertyKind.RAW, value)

    @classmethod
    def object(cls, key: str, value: JsObject) -> Property:
        return cls(key, PropertyKind.OBJECT, value)

    @classmethod
    def arrow_fn(cls, key: str, value: ArrowFn) -> Property:
        return cls(key, PropertyKind.ARROW_FN, value)

    @classmethod
    def shorthand(cls, name: str) -> Property:
        """A property whose value is the variable of the same name."""
        return cls(name, PropertyKind.RAW, name)

    def to_fragment(self) -> Fragment:
        match self.kind:
            case PropertyKind.STRING:
                return Line(f'{self.key}: "{self.value}",')
            case PropertyKind.RAW:
                return Line(f"{self.key}: {self.value},")
            case PropertyKind.OBJECT:
                return Block(
                    header=f"{self.key}: {{",
                    body=self.value._property_fragments(),
                    close="},",
                )
            case PropertyKind.ARROW_FN:
                func = self.value
                async_kw = "async " if func.is_async else ""
                return Block(
                    header=f"{self.key}: {async_kw}({func.params}) => {{",
                    body=[Line(line) for line in func.body],
                    close="},",
                )
        raise ValueError(f"unknown property kind: {self.kind!r}")


@dataclass
class JsObject:
    """An object literal with one property per line."""

    properties: list[Property] = field(default_factory=list)

    def _add(self, prop: Property) -> JsObject:
        self.properties.append(prop)
        return self

    def string(self, key: str, value: str) -> JsObject:
        return self._add(Property.string(key, value))

    def raw(self, key: str, value: str) -> JsObject:
        return self._add(Property.raw(key, value))

    def object(self, key: str, value: JsObject) -> JsObject:
        return self._add(Property.object(key, value))

    def arrow_fn(self, key: str, value: ArrowFn) -> JsObject:
        return self._add(Property.arrow_fn(key, value))

    def shorthand(self, name: str) -> JsObject:
        return self._add(Property.shorthand(name))

    def string_if(self, condition: bool, key: str, value: str) -> JsObject:
        return self.string(key, value) if condition else self

    def string_opt(self, key: str, value: str | None) -> JsObject:
        return self if value is None else self.string(key, value)

    def raw_if(self, condition: bool, key: str, value: str) -> JsObject:
        return self.raw(key, value) if condition else self

    def object_if(self, condition: bool, key: str, value: JsObject) -> JsObject:
        return self.object(key, value) if condition else self

    def is_empty(self) -> bool:
        return not self.properties

    def _property_fragments(self) -> list[Fragment]:
        return [prop.to_fragment() for prop in self.properties]

    def render(self, builder: CodeBuilder) -> CodeBuilder:
        """Write the literal; the closing brace does not end the line."""
        if not self.properties:
            return builder.raw("{}")
        builder.line("{").indent()
        for fragment in self._property_fragments():
            builder.apply_fragment(fragment)
        return builder.dedent().raw("}")

    def build(self) -> str:
        return self.render(CodeBuilder()).build()

    def to_fragments(self) -> list[Fragment]:
        if not self.properties:
            return [Raw("{}")]
        return [Block(header="{", body=self._property_fragments(), close="}")]