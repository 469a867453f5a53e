# Custom exceptions for gowriter

from enum import Enum


class ErrorCode(Enum):
    """Stable identifiers of every validation and formatting rule."""
    STRUCT_NAME_IS_EMPTY = 1
    STRUCT_FIELD_NAME_IS_EMPTY = 2
    STRUCT_FIELD_TYPE_IS_EMPTY = 3
    FUNC_PARAMETER_NAME_IS_EMPTY = 4
    LAST_FUNC_PARAMETER_TYPE_IS_EMPTY = 5
    FUNC_NAME_IS_EMPTY = 6
    INTERFACE_NAME_IS_EMPTY = 7
    FUNC_RECEIVER_NAME_IS_EMPTY = 8
    FUNC_RECEIVER_TYPE_IS_EMPTY = 9
    FUNC_SIGNATURE_IS_NIL = 10
    ANONYMOUS_FUNC_SIGNATURE_IS_NIL = 11
    FUNC_INVOCATION_PARAMETER_IS_EMPTY = 12
    CODE_FORMATTER_ERROR = 13
    CASE_CONDITION_IS_EMPTY = 14
    IF_CONDITION_IS_EMPTY = 15
    ELSE_IF_CONDITION_IS_EMPTY = 16
    PACKAGE_NAME_IS_EMPTY = 17
    FORMATTER_COMMAND_IS_EMPTY = 18

    @property
    def tag(self) -> str:
        return f"[GOWRITER-{self.value}]"


class GowriterError(Exception):
    """Base exception for all application-specific errors."""

    def __init__(self, code: ErrorCode, message: str, caller: str = ""):
        self.code = code
        self.message = message
        self.caller = caller
        super().__init__(f"{code.tag} {message}")


class MissingRequiredFieldError(GowriterError):
    """Raised when a required name, type, label or condition is empty."""
    pass


class InvalidChildError(GowriterError):
    """Raised when a required child node (signature, receiver, ...) was omitted."""
    pass


class ParameterTypeOrderError(GowriterError):
    """Raised when the final parameter of a list carries no type."""

    def __init__(self, code: ErrorCode, message: str, parameter_name: str, caller: str = ""):
        self.parameter_name = parameter_name
        super().__init__(code, message, caller)


class FormatterProcessError(GowriterError):
    """Raised when an external formatter cannot be spawned, fails, or breaks a stream."""

    def __init__(self, command: str, reason: str, stderr: str = ""):
        self.command = command
        self.reason = reason
        self.stderr = stderr
        super().__init__(
            ErrorCode.CODE_FORMATTER_ERROR,
            f"code formatter raises error: command='{command}', err='{reason}', stderr='{stderr}'",
        )
