"""
Call-site provenance for builder values.

Constructors and mutators record where in the client code they were invoked
so that a validation failure raised much later, at generate time, can point
back at the offending builder call.
"""

import sys
from typing import Tuple


def fetch_caller_line(skip: int = 1) -> str:
    """
    Return ``"<file>:<line>"`` of the frame that called our caller.

    Args:
        skip: Number of frames above the immediate caller to skip. The default
            (1) resolves to whoever called the function that called us.

    Returns:
        Location string, or an empty string when the stack is shallower than expected.
    """
    try:
        frame = sys._getframe(skip + 1)
    except ValueError:
        return ""
    return f"{frame.f_code.co_filename}:{frame.f_lineno}"


def fetch_caller_lines(count: int, skip: int = 1) -> Tuple[str, ...]:
    """Same location as :func:`fetch_caller_line`, repeated ``count`` times."""
    caller = fetch_caller_line(skip + 1)
    return (caller,) * count
