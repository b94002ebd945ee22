"""Adapter producing code for the boune CLI framework running on Bun."""

from __future__ import annotations

import math
from decimal import Decimal
from typing import Any

from baots.ast.chain import MethodChain
from baots.ast.objects import ArrowFn
from baots.type_mapper import ArgType

_BOUNE_TYPES = {
    ArgType.STRING: "string",
    ArgType.INT: "number",
    ArgType.FLOAT: "number",
    ArgType.BOOL: "boolean",
    ArgType.PATH: "string",
}

_ACTION_PARAMS = {
    (True, True): "{ args, options }",
    (True, False): "{ args }",
    (False, True): "{ options }",
    (False, False): "{}",
}

_ACTION_CALLS = {
    (True, True): "await run(args, options);",
    (True, False): "await run(args);",
    (False, True): "await run(options);",
    (False, False): "await run();",
}


def _format_float(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    return format(Decimal(repr(value)).normalize(), "f")


def toml_to_ts_literal(value: Any) -> str:
    """Render a configuration value as a TypeScript literal.

    Strings are quoted, numbers and booleans are written bare; anything
    else renders as an empty string.
    """
    if isinstance(value, str):
        return f'"{value}"'
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _format_float(value)
    return ""


class BouneAdapter:
    """Builds the declarative argument, option and action code boune expects."""

    name = "boune"

    def map_arg_type(self, arg_type: ArgType) -> str:
        return _BOUNE_TYPES[arg_type]

    def map_optional_type(self, arg_type: ArgType) -> str:
        return f"{self.map_arg_type(arg_type)} | undefined"

    def build_argument_chain(
        self,
        arg_type: ArgType,
        required: bool,
        has_default: bool,
        default: Any = None,
        description: str | None = None,
    ) -> str:
        """Return an ``argument.<type>()`` chain on one line."""
        chain = MethodChain(f"argument.{self.map_arg_type(arg_type)}")
        if required and not has_default:
            chain.call_empty("required")
        if default is not None:
            chain.call("default", toml_to_ts_literal(default))
        if description is not None:
            chain.call("describe", f'"{description}"')
        return chain.build_inline()

    def build_option_chain(
        self,
        flag_type: ArgType,
        short: str | None = None,
        default: Any = None,
        description: str | None = None,
    ) -> str:
        """Return an ``option.<type>()`` chain on one line."""
        chain = MethodChain(f"option.{self.map_arg_type(flag_type)}")
        if short is not None:
            chain.call("short", f'"{short}"')
        if default is not None:
            chain.call("default", toml_to_ts_literal(default))
        if description is not None:
            chain.call("describe", f'"{description}"')
        return chain.build_inline()

    def build_action_handler(self, has_args: bool, has_options: bool) -> ArrowFn:
        """Return the async action that forwards to the handler's ``run``."""
        key = (bool(has_args), bool(has_options))
        return ArrowFn(_ACTION_PARAMS[key]).async_().body_line(_ACTION_CALLS[key])