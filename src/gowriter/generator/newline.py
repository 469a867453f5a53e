from gowriter.generator.statement import Statement


class Newline(Statement):
    """Blank line. Never indented."""

    def generate(self, indent_level: int = 0) -> str:
        return "\n"
