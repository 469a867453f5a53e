from typing import NamedTuple, Tuple

from gowriter import errmsg
from gowriter.caller import fetch_caller_line
from gowriter.generator.statement import Statement, build_indent


class StructField(NamedTuple):
    name: str
    type: str
    tag: str = ""
    caller: str = ""


class Struct(Statement):
    """
    ``type <name> struct { ... }``.

    Fields are added one at a time with :meth:`add_field` or replaced as a
    whole with :meth:`fields`. A non-empty tag is rendered between backquotes
    after the type.
    """

    def __init__(self, name: str):
        self._name = name
        self._fields = ()
        self._caller = fetch_caller_line()

    def add_field(self, name: str, type_: str, tag: str = "") -> "Struct":
        field = StructField(name, type_, tag, fetch_caller_line())
        return self._evolve(fields=self._fields + (field,))

    def fields(self, *fields: Tuple[str, ...]) -> "Struct":
        """Replace all fields with ``(name, type)`` or ``(name, type, tag)`` tuples."""
        caller = fetch_caller_line()
        return self._evolve(fields=tuple(StructField(*field, caller=caller) for field in fields))

    def generate(self, indent_level: int = 0) -> str:
        if not self._name:
            raise errmsg.struct_name_is_empty(self._caller)

        indent = build_indent(indent_level)
        stmt = f"{indent}type {self._name} struct {{\n"
        for field in self._fields:
            if not field.name:
                raise errmsg.struct_field_name_is_empty(field.caller)
            if not field.type:
                raise errmsg.struct_field_type_is_empty(field.name, field.caller)

            stmt += f"{indent}\t{field.name} {field.type}"
            if field.tag:
                stmt += f" `{field.tag}`"
            stmt += "\n"
        stmt += f"{indent}}}\n"
        return stmt
