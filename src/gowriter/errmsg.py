"""
Error message catalog.

One factory per validation rule. Each returns (does not raise) the exception
so that call sites read ``raise errmsg.func_name_is_empty(self._caller)``.
"""

from gowriter.exceptions import (
    ErrorCode,
    InvalidChildError,
    MissingRequiredFieldError,
    ParameterTypeOrderError,
)


def _at(caller: str) -> str:
    return f" (caused at {caller})" if caller else ""


def struct_name_is_empty(caller: str) -> MissingRequiredFieldError:
    return MissingRequiredFieldError(
        ErrorCode.STRUCT_NAME_IS_EMPTY,
        f"struct name must not be empty, but it gets empty{_at(caller)}",
        caller,
    )


def struct_field_name_is_empty(caller: str) -> MissingRequiredFieldError:
    return MissingRequiredFieldError(
        ErrorCode.STRUCT_FIELD_NAME_IS_EMPTY,
        f"field name must not be empty, but it gets empty{_at(caller)}",
        caller,
    )


def struct_field_type_is_empty(field_name: str, caller: str) -> MissingRequiredFieldError:
    return MissingRequiredFieldError(
        ErrorCode.STRUCT_FIELD_TYPE_IS_EMPTY,
        f"type of field '{field_name}' must not be empty, but it gets empty{_at(caller)}",
        caller,
    )


def func_parameter_name_is_empty(caller: str) -> MissingRequiredFieldError:
    return MissingRequiredFieldError(
        ErrorCode.FUNC_PARAMETER_NAME_IS_EMPTY,
        f"func parameter name must not be empty, but it gets empty{_at(caller)}",
        caller,
    )


def last_func_parameter_type_is_empty(parameter_name: str, caller: str) -> ParameterTypeOrderError:
    return ParameterTypeOrderError(
        ErrorCode.LAST_FUNC_PARAMETER_TYPE_IS_EMPTY,
        f"the last func parameter '{parameter_name}' must have a type, but it gets empty{_at(caller)}",
        parameter_name,
        caller,
    )


def func_name_is_empty(caller: str) -> MissingRequiredFieldError:
    return MissingRequiredFieldError(
        ErrorCode.FUNC_NAME_IS_EMPTY,
        f"func name must not be empty, but it gets empty{_at(caller)}",
        caller,
    )


def interface_name_is_empty(caller: str) -> MissingRequiredFieldError:
    return MissingRequiredFieldError(
        ErrorCode.INTERFACE_NAME_IS_EMPTY,
        f"interface name must not be empty, but it gets empty{_at(caller)}",
        caller,
    )


def func_receiver_name_is_empty(caller: str) -> MissingRequiredFieldError:
    return MissingRequiredFieldError(
        ErrorCode.FUNC_RECEIVER_NAME_IS_EMPTY,
        f"name of func receiver must not be empty, but it gets empty{_at(caller)}",
        caller,
    )


def func_receiver_type_is_empty(caller: str) -> MissingRequiredFieldError:
    return MissingRequiredFieldError(
        ErrorCode.FUNC_RECEIVER_TYPE_IS_EMPTY,
        f"type of func receiver must not be empty, but it gets empty{_at(caller)}",
        caller,
    )


def func_signature_is_nil(caller: str) -> InvalidChildError:
    return InvalidChildError(
        ErrorCode.FUNC_SIGNATURE_IS_NIL,
        f"func signature must not be None, but it gets None{_at(caller)}",
        caller,
    )


def anonymous_func_signature_is_nil(caller: str) -> InvalidChildError:
    return InvalidChildError(
        ErrorCode.ANONYMOUS_FUNC_SIGNATURE_IS_NIL,
        f"anonymous func signature must not be None, but it gets None{_at(caller)}",
        caller,
    )


def func_invocation_parameter_is_empty(caller: str) -> MissingRequiredFieldError:
    return MissingRequiredFieldError(
        ErrorCode.FUNC_INVOCATION_PARAMETER_IS_EMPTY,
        f"a parameter of function invocation must not be empty, but it gets empty{_at(caller)}",
        caller,
    )


def case_condition_is_empty(caller: str) -> MissingRequiredFieldError:
    return MissingRequiredFieldError(
        ErrorCode.CASE_CONDITION_IS_EMPTY,
        f"condition of case must not be empty, but it gets empty{_at(caller)}",
        caller,
    )


def if_condition_is_empty(caller: str) -> MissingRequiredFieldError:
    return MissingRequiredFieldError(
        ErrorCode.IF_CONDITION_IS_EMPTY,
        f"condition of if must not be empty, but it gets empty{_at(caller)}",
        caller,
    )


def else_if_condition_is_empty(caller: str) -> MissingRequiredFieldError:
    return MissingRequiredFieldError(
        ErrorCode.ELSE_IF_CONDITION_IS_EMPTY,
        f"condition of else-if must not be empty, but it gets empty{_at(caller)}",
        caller,
    )


def package_name_is_empty(caller: str) -> MissingRequiredFieldError:
    return MissingRequiredFieldError(
        ErrorCode.PACKAGE_NAME_IS_EMPTY,
        f"package name must not be empty, but it gets empty{_at(caller)}",
        caller,
    )


def formatter_command_is_empty(caller: str) -> MissingRequiredFieldError:
    return MissingRequiredFieldError(
        ErrorCode.FORMATTER_COMMAND_IS_EMPTY,
        f"formatter command must not be empty, but it gets empty{_at(caller)}",
        caller,
    )
