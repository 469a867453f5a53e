from gowriter import errmsg
from gowriter.caller import fetch_caller_line
from gowriter.generator.statement import Statement, build_indent


class Package(Statement):
    """``package <name>`` clause."""

    def __init__(self, name: str):
        self._name = name
        self._caller = fetch_caller_line()

    def generate(self, indent_level: int = 0) -> str:
        if not self._name:
            raise errmsg.package_name_is_empty(self._caller)
        return f"{build_indent(indent_level)}package {self._name}\n"
