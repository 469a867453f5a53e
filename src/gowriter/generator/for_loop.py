from gowriter.generator.statement import Statement, build_indent, generate_statements


class For(Statement):
    """``for`` loop. An empty condition generates an infinite ``for {``."""

    def __init__(self, condition: str, *statements: Statement):
        self._condition = condition
        self._statements = tuple(statements)

    def add_statements(self, *statements: Statement) -> "For":
        return self._evolve(statements=self._statements + statements)

    def statements(self, *statements: Statement) -> "For":
        return self._evolve(statements=tuple(statements))

    def generate(self, indent_level: int = 0) -> str:
        indent = build_indent(indent_level)
        head = f"for {self._condition} {{" if self._condition else "for {"
        return (
            f"{indent}{head}\n"
            + generate_statements(self._statements, indent_level + 1)
            + f"{indent}}}\n"
        )
