from gowriter.generator.statement import Statement, build_indent


class RawStatement(Statement):
    """Arbitrary code emitted verbatim after the indentation."""

    def __init__(self, stmt: str):
        self._stmt = stmt
        self._newline = True

    def with_newline(self, newline: bool) -> "RawStatement":
        """Whether a line break follows the statement (default: True)."""
        return self._evolve(newline=newline)

    def generate(self, indent_level: int = 0) -> str:
        stmt = build_indent(indent_level) + self._stmt
        if self._newline:
            stmt += "\n"
        return stmt
