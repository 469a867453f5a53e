from gowriter import errmsg
from gowriter.caller import fetch_caller_line
from gowriter.generator.func_signature import FuncSignature
from gowriter.generator.statement import Statement, build_indent


class Interface(Statement):
    """``type <name> interface { ... }`` listing method signatures."""

    def __init__(self, name: str, *signatures: FuncSignature):
        self._name = name
        self._signatures = tuple(signatures)
        self._caller = fetch_caller_line()

    def add_signatures(self, *signatures: FuncSignature) -> "Interface":
        return self._evolve(signatures=self._signatures + signatures)

    def signatures(self, *signatures: FuncSignature) -> "Interface":
        return self._evolve(signatures=tuple(signatures))

    def generate(self, indent_level: int = 0) -> str:
        if not self._name:
            raise errmsg.interface_name_is_empty(self._caller)

        indent = build_indent(indent_level)
        stmt = f"{indent}type {self._name} interface {{\n"
        for signature in self._signatures:
            stmt += f"{indent}\t{signature.generate(0)}\n"
        stmt += f"{indent}}}\n"
        return stmt
