"""
gowriter - immutable builder for Go source code

Compose a tree of statement nodes and generate it as indented Go code,
optionally piped through gofmt/goimports.
"""

__version__ = "0.1.0"

from loguru import logger

# Library messages stay silent until setup_logging() or logger.enable("gowriter").
logger.disable("gowriter")

# Core exports
from gowriter.generator import (
    Statement,
    Comment,
    Newline,
    Package,
    Import,
    RawStatement,
    ReturnStatement,
    FuncParameter,
    FuncSignature,
    AnonymousFuncSignature,
    FuncReceiver,
    FuncInvocation,
    Func,
    AnonymousFunc,
    CodeBlock,
    If,
    ElseIf,
    Else,
    For,
    Switch,
    Case,
    DefaultCase,
    Interface,
    Struct,
    Root,
)
from gowriter.config import FormatterStep, GeneratorConfig, formatter_preset
from gowriter.exceptions import (
    ErrorCode,
    GowriterError,
    MissingRequiredFieldError,
    InvalidChildError,
    ParameterTypeOrderError,
    FormatterProcessError,
)
from gowriter.pipeline import apply_code_formatter, run_formatter_steps

__all__ = [
    "__version__",
    "Statement",
    "Comment",
    "Newline",
    "Package",
    "Import",
    "RawStatement",
    "ReturnStatement",
    "FuncParameter",
    "FuncSignature",
    "AnonymousFuncSignature",
    "FuncReceiver",
    "FuncInvocation",
    "Func",
    "AnonymousFunc",
    "CodeBlock",
    "If",
    "ElseIf",
    "Else",
    "For",
    "Switch",
    "Case",
    "DefaultCase",
    "Interface",
    "Struct",
    "Root",
    "FormatterStep",
    "GeneratorConfig",
    "formatter_preset",
    "ErrorCode",
    "GowriterError",
    "MissingRequiredFieldError",
    "InvalidChildError",
    "ParameterTypeOrderError",
    "FormatterProcessError",
    "apply_code_formatter",
    "run_formatter_steps",
]
