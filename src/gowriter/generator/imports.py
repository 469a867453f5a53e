from gowriter.generator.statement import Statement, build_indent


class Import(Statement):
    """
    Grouped import declaration.

    Empty package names are skipped; an Import without any name generates
    nothing at all.
    """

    def __init__(self, *names: str):
        self._names = tuple(names)

    def add_imports(self, *names: str) -> "Import":
        return self._evolve(names=self._names + names)

    def imports(self, *names: str) -> "Import":
        return self._evolve(names=tuple(names))

    def generate(self, indent_level: int = 0) -> str:
        if not self._names:
            return ""

        indent = build_indent(indent_level)
        stmt = f"{indent}import (\n"
        for name in self._names:
            if not name:
                continue
            stmt += f'{indent}\t"{name}"\n'
        stmt += f"{indent})\n"
        return stmt
