"""
Statement nodes for generating Go code.

Every node is immutable: mutators such as ``add_statements`` return a new
node and leave the receiver untouched, so a partially built tree can be
shared as the base of several diverging variants.
"""

from .statement import Statement, build_indent, generate_statements
from .comment import Comment
from .newline import Newline
from .package import Package
from .imports import Import
from .raw_statement import RawStatement
from .return_statement import ReturnStatement
from .func_parameter import FuncParameter
from .func_signature import FuncSignature
from .anonymous_func_signature import AnonymousFuncSignature
from .func_receiver import FuncReceiver
from .func_invocation import FuncInvocation
from .func import Func
from .anonymous_func import AnonymousFunc
from .code_block import CodeBlock
from .if_statement import If, ElseIf, Else
from .for_loop import For
from .switch import Switch, Case, DefaultCase
from .interface import Interface
from .struct import Struct
from .root import Root

__all__ = [
    # Contract
    "Statement",
    "build_indent",
    "generate_statements",

    # Leaves
    "Comment",
    "Newline",
    "Package",
    "Import",
    "RawStatement",
    "ReturnStatement",

    # Signatures
    "FuncParameter",
    "FuncSignature",
    "AnonymousFuncSignature",
    "FuncReceiver",
    "FuncInvocation",

    # Composites
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

    # Document
    "Root",
]
