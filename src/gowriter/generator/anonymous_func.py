from typing import Optional

from gowriter import errmsg
from gowriter.caller import fetch_caller_line
from gowriter.generator.anonymous_func_signature import AnonymousFuncSignature
from gowriter.generator.func_invocation import FuncInvocation
from gowriter.generator.statement import Statement, build_indent, generate_statements


class AnonymousFunc(Statement):
    """
    Function literal, optionally launched as a goroutine (``go func...``)
    and optionally invoked immediately (``func(...) {...}(args)``).
    """

    def __init__(
        self,
        go_func: bool,
        signature: Optional[AnonymousFuncSignature],
        *statements: Statement,
    ):
        self._go_func = go_func
        self._signature = signature
        self._statements = tuple(statements)
        self._invocation: Optional[FuncInvocation] = None
        self._caller = fetch_caller_line()

    def add_statements(self, *statements: Statement) -> "AnonymousFunc":
        return self._evolve(statements=self._statements + statements)

    def statements(self, *statements: Statement) -> "AnonymousFunc":
        return self._evolve(statements=tuple(statements))

    def invocation(self, invocation: Optional[FuncInvocation]) -> "AnonymousFunc":
        """Attach (or with None, detach) an immediate call."""
        return self._evolve(invocation=invocation)

    def generate(self, indent_level: int = 0) -> str:
        if self._signature is None:
            raise errmsg.anonymous_func_signature_is_nil(self._caller)

        indent = build_indent(indent_level)
        stmt = indent
        if self._go_func:
            stmt += "go "
        stmt += "func" + self._signature.generate(0) + " {\n"
        stmt += generate_statements(self._statements, indent_level + 1)
        stmt += f"{indent}}}"

        if self._invocation is not None:
            stmt += self._invocation.generate(0)

        return stmt + "\n"
