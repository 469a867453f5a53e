from gowriter.generator.statement import Statement, build_indent


class Comment(Statement):
    """Single line comment: ``//`` followed by the text as given."""

    def __init__(self, comment: str):
        self._comment = comment

    def generate(self, indent_level: int = 0) -> str:
        return f"{build_indent(indent_level)}//{self._comment}\n"
