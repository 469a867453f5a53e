from typing import Optional

from gowriter import errmsg
from gowriter.caller import fetch_caller_line
from gowriter.generator.func_receiver import FuncReceiver
from gowriter.generator.func_signature import FuncSignature
from gowriter.generator.statement import Statement, build_indent, generate_statements


class Func(Statement):
    """
    Named function or method declaration.

    Args:
        receiver: Method receiver, or None for a plain function
        signature: Function signature; required
        *statements: Body statements
    """

    def __init__(
        self,
        receiver: Optional[FuncReceiver],
        signature: Optional[FuncSignature],
        *statements: Statement,
    ):
        self._receiver = receiver
        self._signature = signature
        self._statements = tuple(statements)
        self._caller = fetch_caller_line()

    def add_statements(self, *statements: Statement) -> "Func":
        return self._evolve(statements=self._statements + statements)

    def statements(self, *statements: Statement) -> "Func":
        return self._evolve(statements=tuple(statements))

    def generate(self, indent_level: int = 0) -> str:
        if self._signature is None:
            raise errmsg.func_signature_is_nil(self._caller)

        indent = build_indent(indent_level)
        stmt = f"{indent}func "

        if self._receiver is not None:
            receiver = self._receiver.generate(0)
            if receiver:
                stmt += receiver + " "

        stmt += self._signature.generate(0) + " {\n"
        stmt += generate_statements(self._statements, indent_level + 1)
        stmt += f"{indent}}}\n"
        return stmt
