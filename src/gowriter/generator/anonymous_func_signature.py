from typing import Tuple

from gowriter.caller import fetch_caller_lines
from gowriter.generator.func_parameter import (
    FuncParameter,
    generate_parameters,
    generate_return_types,
)
from gowriter.generator.statement import Evolvable


class AnonymousFuncSignature(Evolvable):
    """Signature of an anonymous function: ``(params) returns``."""

    def __init__(self):
        self._parameters: Tuple[FuncParameter, ...] = ()
        self._callers: Tuple[str, ...] = ()
        self._return_types: Tuple[str, ...] = ()

    def add_parameters(self, *parameters: FuncParameter) -> "AnonymousFuncSignature":
        return self._evolve(
            parameters=self._parameters + parameters,
            callers=self._callers + fetch_caller_lines(len(parameters)),
        )

    def parameters(self, *parameters: FuncParameter) -> "AnonymousFuncSignature":
        return self._evolve(
            parameters=tuple(parameters),
            callers=fetch_caller_lines(len(parameters)),
        )

    def add_return_types(self, *return_types: str) -> "AnonymousFuncSignature":
        return self._evolve(return_types=self._return_types + return_types)

    def return_types(self, *return_types: str) -> "AnonymousFuncSignature":
        return self._evolve(return_types=tuple(return_types))

    def generate(self, indent_level: int = 0) -> str:
        return generate_parameters(self._parameters, self._callers) + generate_return_types(self._return_types)
