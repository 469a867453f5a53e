"""
Function parameters and the parameter/return clauses shared by named and
anonymous signatures.
"""

from typing import NamedTuple, Sequence

from gowriter import errmsg


class FuncParameter(NamedTuple):
    """A ``name type`` pair. The type may be empty to use Go's grouped form."""
    name: str
    type: str = ""


def generate_parameters(parameters: Sequence[FuncParameter], callers: Sequence[str]) -> str:
    """
    Generate ``(a, b string, c int)``.

    Parameters before the last one may omit their type, taking the type of
    the next typed parameter as in ``(a, b string)``. The last parameter
    must always have one.

    Args:
        parameters: Parameters in order
        callers: Provenance of each parameter, aligned by index

    Raises:
        MissingRequiredFieldError: A parameter name is empty
        ParameterTypeOrderError: The last parameter has no type
    """
    params = []
    for param, caller in zip(parameters, callers):
        if not param.name:
            raise errmsg.func_parameter_name_is_empty(caller)

        if param.type:
            params.append(f"{param.name} {param.type}")
        else:
            params.append(param.name)

    if parameters and not parameters[-1].type:
        raise errmsg.last_func_parameter_type_is_empty(parameters[-1].name, callers[-1])

    return "(" + ", ".join(params) + ")"


def generate_return_types(return_types: Sequence[str]) -> str:
    """Nothing, `` T`` or `` (T1, T2)`` depending on how many types there are."""
    if not return_types:
        return ""
    if len(return_types) == 1:
        return " " + return_types[0]
    return " (" + ", ".join(return_types) + ")"
