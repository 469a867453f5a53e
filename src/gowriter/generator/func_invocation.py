from typing import Tuple

from gowriter import errmsg
from gowriter.caller import fetch_caller_line, fetch_caller_lines
from gowriter.generator.statement import Evolvable


class FuncInvocation(Evolvable):
    """Call suffix ``(a, b)`` appended to an anonymous function."""

    def __init__(self, *parameters: str):
        self._parameters: Tuple[str, ...] = tuple(parameters)
        self._callers: Tuple[str, ...] = (fetch_caller_line(),) * len(parameters)

    def add_parameters(self, *parameters: str) -> "FuncInvocation":
        return self._evolve(
            parameters=self._parameters + parameters,
            callers=self._callers + fetch_caller_lines(len(parameters)),
        )

    def parameters(self, *parameters: str) -> "FuncInvocation":
        return self._evolve(
            parameters=tuple(parameters),
            callers=fetch_caller_lines(len(parameters)),
        )

    def generate(self, indent_level: int = 0) -> str:
        for param, caller in zip(self._parameters, self._callers):
            if not param:
                raise errmsg.func_invocation_parameter_is_empty(caller)
        return "(" + ", ".join(self._parameters) + ")"
