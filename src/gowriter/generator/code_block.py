from gowriter.generator.statement import Statement, build_indent, generate_statements


class CodeBlock(Statement):
    """Bare ``{ ... }`` block opening a new scope."""

    def __init__(self, *statements: Statement):
        self._statements = tuple(statements)

    def add_statements(self, *statements: Statement) -> "CodeBlock":
        return self._evolve(statements=self._statements + statements)

    def statements(self, *statements: Statement) -> "CodeBlock":
        return self._evolve(statements=tuple(statements))

    def generate(self, indent_level: int = 0) -> str:
        indent = build_indent(indent_level)
        return (
            f"{indent}{{\n"
            + generate_statements(self._statements, indent_level + 1)
            + f"{indent}}}\n"
        )
