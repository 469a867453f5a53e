from typing import Tuple

from gowriter import errmsg
from gowriter.caller import fetch_caller_line, fetch_caller_lines
from gowriter.generator.func_parameter import (
    FuncParameter,
    generate_parameters,
    generate_return_types,
)
from gowriter.generator.statement import Evolvable


class FuncSignature(Evolvable):
    """
    Signature of a named function: ``name(params) returns``.

    Used by Func and by Interface method lists. Generates no indentation and
    no trailing newline; the enclosing node decides on both.
    """

    def __init__(self, func_name: str):
        self._func_name = func_name
        self._parameters: Tuple[FuncParameter, ...] = ()
        self._callers: Tuple[str, ...] = ()
        self._return_types: Tuple[str, ...] = ()
        self._caller = fetch_caller_line()

    def add_parameters(self, *parameters: FuncParameter) -> "FuncSignature":
        """Append parameters. All of them share this call's provenance."""
        return self._evolve(
            parameters=self._parameters + parameters,
            callers=self._callers + fetch_caller_lines(len(parameters)),
        )

    def parameters(self, *parameters: FuncParameter) -> "FuncSignature":
        """Replace the parameter list."""
        return self._evolve(
            parameters=tuple(parameters),
            callers=fetch_caller_lines(len(parameters)),
        )

    def add_return_types(self, *return_types: str) -> "FuncSignature":
        return self._evolve(return_types=self._return_types + return_types)

    def return_types(self, *return_types: str) -> "FuncSignature":
        return self._evolve(return_types=tuple(return_types))

    def generate(self, indent_level: int = 0) -> str:
        if not self._func_name:
            raise errmsg.func_name_is_empty(self._caller)

        return (
            self._func_name
            + generate_parameters(self._parameters, self._callers)
            + generate_return_types(self._return_types)
        )
