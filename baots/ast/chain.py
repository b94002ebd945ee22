"""Method chain builder for fluent APIs."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable


@dataclass
class _Call:
    method: str
    args: list[str]

    def render(self) -> str:
        return f".{self.method}({', '.join(self.args)})"


@dataclass
class MethodChain:
    """A base call followed by chained method calls."""

    base: str
    base_args: list[str] = field(default_factory=list)
    calls: list[_Call] = field(default_factory=list)

    def arg(self, arg: str) -> MethodChain:
        """Add an argument to the base call."""
        self.base_args.append(arg)
        return self

    def call(self, method: str, arg: str) -> MethodChain:
        self.calls.append(_Call(method, [arg]))
        return self

    def call_args(self, method: str, args: Iterable[str]) -> MethodChain:
        self.calls.append(_Call(method, list(args)))
        return self

    def call_empty(self, method: str) -> MethodChain:
        self.calls.append(_Call(method, []))
        return self

    def call_if(self, condition: bool, method: str, arg: str) -> MethodChain:
        return self.call(method, arg) if condition else self

    def call_opt(self, method: str, arg: str | None) -> MethodChain:
        return self if arg is None else self.call(method, arg)

    def _head(self) -> str:
        return f"{self.base}({', '.join(self.base_args)})"

    def build_inline(self) -> str:
        """Render the whole chain on one line."""
        return self._head() + "".join(call.render() for call in self.calls)

    def build(self) -> str:
        """Render the chain with each call on its own indented line."""
        return self._head() + "".join(f"\n  {call.render()}" for call in self.calls)