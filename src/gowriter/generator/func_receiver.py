from gowriter import errmsg
from gowriter.caller import fetch_caller_line


class FuncReceiver:
    """Method receiver: ``(name type)``. Both parts empty means no receiver."""

    def __init__(self, name: str, type_: str):
        self._name = name
        self._type = type_
        self._caller = fetch_caller_line()

    def generate(self, indent_level: int = 0) -> str:
        if not self._name and not self._type:
            return ""
        if not self._name:
            raise errmsg.func_receiver_name_is_empty(self._caller)
        if not self._type:
            raise errmsg.func_receiver_type_is_empty(self._caller)
        return f"({self._name} {self._type})"
