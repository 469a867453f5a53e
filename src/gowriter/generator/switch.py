"""
``switch`` statements.

Cases render at the switch's own indentation, their bodies one level deeper.
The default clause is held apart from the case list and always renders last.
"""

from typing import Optional

from gowriter import errmsg
from gowriter.caller import fetch_caller_line
from gowriter.generator.statement import Statement, build_indent, generate_statements


class Case(Statement):
    """``case <condition>:`` clause. The condition must not be empty."""

    def __init__(self, condition: str, *statements: Statement):
        self._condition = condition
        self._statements = tuple(statements)
        self._caller = fetch_caller_line()

    def add_statements(self, *statements: Statement) -> "Case":
        return self._evolve(statements=self._statements + statements)

    def statements(self, *statements: Statement) -> "Case":
        return self._evolve(statements=tuple(statements))

    def generate(self, indent_level: int = 0) -> str:
        if not self._condition:
            raise errmsg.case_condition_is_empty(self._caller)

        return (
            f"{build_indent(indent_level)}case {self._condition}:\n"
            + generate_statements(self._statements, indent_level + 1)
        )


class DefaultCase(Statement):
    """``default:`` clause."""

    def __init__(self, *statements: Statement):
        self._statements = tuple(statements)

    def add_statements(self, *statements: Statement) -> "DefaultCase":
        return self._evolve(statements=self._statements + statements)

    def statements(self, *statements: Statement) -> "DefaultCase":
        return self._evolve(statements=tuple(statements))

    def generate(self, indent_level: int = 0) -> str:
        return (
            f"{build_indent(indent_level)}default:\n"
            + generate_statements(self._statements, indent_level + 1)
        )


class Switch(Statement):
    """``switch`` over a condition. An empty condition generates ``switch {``."""

    def __init__(self, condition: str):
        self._condition = condition
        self._cases = ()
        self._default: Optional[DefaultCase] = None

    def add_case(self, *cases: Case) -> "Switch":
        return self._evolve(cases=self._cases + cases)

    def cases(self, *cases: Case) -> "Switch":
        return self._evolve(cases=tuple(cases))

    def default(self, default_case: Optional[DefaultCase]) -> "Switch":
        """Set (or with None, remove) the default clause."""
        return self._evolve(default=default_case)

    def generate(self, indent_level: int = 0) -> str:
        indent = build_indent(indent_level)
        head = f"switch {self._condition} {{" if self._condition else "switch {"

        stmt = f"{indent}{head}\n"
        stmt += generate_statements(self._cases, indent_level)
        if self._default is not None:
            stmt += self._default.generate(indent_level)
        stmt += f"{indent}}}\n"
        return stmt
