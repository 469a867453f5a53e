"""
Configuration for the generator root and its formatter pipeline.

Contains the formatter presets and the immutable configuration records
carried by a Root.
"""

import os
from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field


class FormatterStep(BaseModel):
    """
    One external text-to-text transformation.

    The command receives the whole document on stdin and must print the
    transformed document on stdout.
    """
    model_config = ConfigDict(frozen=True)

    command: str = Field(min_length=1)
    args: Tuple[str, ...] = ()

    @property
    def command_line(self) -> str:
        return " ".join((self.command,) + self.args)


class GeneratorConfig(BaseModel):
    """Settings applied by Root.generate() after the tree has been rendered."""
    model_config = ConfigDict(frozen=True)

    syntax_checking: bool = False
    formatters: Tuple[FormatterStep, ...] = ()


FORMATTERS = {
    "gofmt": {
        "command": "gofmt",
        "args": [],
        "env": "GOWRITER_GOFMT",
    },
    "goimports": {
        "command": "goimports",
        "args": [],
        "env": "GOWRITER_GOIMPORTS",
    },
}

# Validation-only pass: output is discarded, only the exit status matters.
SYNTAX_CHECKER = {
    "command": "gofmt",
    "args": ["-e"],
    "env": "GOWRITER_GOFMT",
}


def _resolve_command(preset: dict) -> str:
    return os.getenv(preset["env"]) or preset["command"]


def formatter_preset(name: str, *extra_args: str) -> FormatterStep:
    """
    Build a FormatterStep from the FORMATTERS table.

    Args:
        name: Preset name ("gofmt" or "goimports")
        *extra_args: Flags appended after the preset's own arguments

    Returns:
        FormatterStep for the preset
    """
    preset = FORMATTERS.get(name)
    if preset is None:
        raise KeyError(f"Unknown formatter preset: {name}. Supported: {', '.join(FORMATTERS)}")

    return FormatterStep(
        command=_resolve_command(preset),
        args=tuple(preset["args"]) + tuple(extra_args),
    )


def syntax_checker() -> FormatterStep:
    """FormatterStep used for the check-only pass of syntax checking."""
    return FormatterStep(
        command=_resolve_command(SYNTAX_CHECKER),
        args=tuple(SYNTAX_CHECKER["args"]),
    )
