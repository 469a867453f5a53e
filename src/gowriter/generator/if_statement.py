"""
``if`` / ``else if`` / ``else`` chains.

ElseIf and Else are not statements of their own: they only generate as
part of the If they are attached to, continuing its closing brace line.
"""

from typing import Optional

from gowriter import errmsg
from gowriter.caller import fetch_caller_line
from gowriter.generator.statement import Evolvable, Statement, build_indent, generate_statements


class ElseIf(Evolvable):
    def __init__(self, condition: str, *statements: Statement):
        self._condition = condition
        self._statements = tuple(statements)
        self._caller = fetch_caller_line()

    def add_statements(self, *statements: Statement) -> "ElseIf":
        return self._evolve(statements=self._statements + statements)

    def statements(self, *statements: Statement) -> "ElseIf":
        return self._evolve(statements=tuple(statements))

    def generate(self, indent_level: int = 0) -> str:
        if not self._condition:
            raise errmsg.else_if_condition_is_empty(self._caller)

        return (
            f" else if {self._condition} {{\n"
            + generate_statements(self._statements, indent_level + 1)
            + f"{build_indent(indent_level)}}}"
        )


class Else(Evolvable):
    def __init__(self, *statements: Statement):
        self._statements = tuple(statements)

    def add_statements(self, *statements: Statement) -> "Else":
        return self._evolve(statements=self._statements + statements)

    def statements(self, *statements: Statement) -> "Else":
        return self._evolve(statements=tuple(statements))

    def generate(self, indent_level: int = 0) -> str:
        return (
            " else {\n"
            + generate_statements(self._statements, indent_level + 1)
            + f"{build_indent(indent_level)}}}"
        )


class If(Statement):
    def __init__(self, condition: str, *statements: Statement):
        self._condition = condition
        self._statements = tuple(statements)
        self._else_ifs = ()
        self._else_: Optional[Else] = None
        self._caller = fetch_caller_line()

    def add_statements(self, *statements: Statement) -> "If":
        return self._evolve(statements=self._statements + statements)

    def statements(self, *statements: Statement) -> "If":
        return self._evolve(statements=tuple(statements))

    def add_else_if(self, *else_ifs: ElseIf) -> "If":
        return self._evolve(else_ifs=self._else_ifs + else_ifs)

    def else_ifs(self, *else_ifs: ElseIf) -> "If":
        return self._evolve(else_ifs=tuple(else_ifs))

    def else_(self, else_block: Optional[Else]) -> "If":
        return self._evolve(else_=else_block)

    def generate(self, indent_level: int = 0) -> str:
        if not self._condition:
            raise errmsg.if_condition_is_empty(self._caller)

        indent = build_indent(indent_level)
        stmt = f"{indent}if {self._condition} {{\n"
        stmt += generate_statements(self._statements, indent_level + 1)
        stmt += f"{indent}}}"

        for else_if in self._else_ifs:
            stmt += else_if.generate(indent_level)

        if self._else_ is not None:
            stmt += self._else_.generate(indent_level)

        return stmt + "\n"
