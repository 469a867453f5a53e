from gowriter.generator.statement import Statement, build_indent


class ReturnStatement(Statement):
    """``return`` with zero or more comma separated items."""

    def __init__(self, *return_items: str):
        self._return_items = tuple(return_items)

    def add_return_items(self, *return_items: str) -> "ReturnStatement":
        return self._evolve(return_items=self._return_items + return_items)

    def return_items(self, *return_items: str) -> "ReturnStatement":
        return self._evolve(return_items=tuple(return_items))

    def generate(self, indent_level: int = 0) -> str:
        stmt = f"{build_indent(indent_level)}return"
        if self._return_items:
            stmt += " " + ", ".join(self._return_items)
        return stmt + "\n"
