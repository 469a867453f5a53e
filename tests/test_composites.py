"""
Unit tests for scope-introducing statements.

Tests for CodeBlock, Func, AnonymousFunc, If/ElseIf/Else, For,
Switch/Case/DefaultCase, Interface and Struct.
"""

import pytest

from gowriter import (
    AnonymousFunc,
    AnonymousFuncSignature,
    Case,
    CodeBlock,
    Comment,
    DefaultCase,
    Else,
    ElseIf,
    For,
    Func,
    FuncInvocation,
    FuncParameter,
    FuncReceiver,
    FuncSignature,
    If,
    Interface,
    Package,
    RawStatement,
    ReturnStatement,
    Statement,
    Struct,
    Switch,
    ErrorCode,
    InvalidChildError,
    MissingRequiredFieldError,
)


class RecordingStatement(Statement):
    """Statement that remembers whether it was generated."""

    def __init__(self, text: str):
        self.text = text
        self.calls = 0

    def generate(self, indent_level: int = 0) -> str:
        self.calls += 1
        return "\t" * indent_level + self.text + "\n"


class TestEmptyBodies:
    """Composites without children generate only their delimiters."""

    @pytest.mark.parametrize("node,expected", [
        (CodeBlock(), "{\n}\n"),
        (Func(None, FuncSignature("f")), "func f() {\n}\n"),
        (AnonymousFunc(False, AnonymousFuncSignature()), "func() {\n}\n"),
        (If("ok"), "if ok {\n}\n"),
        (For(""), "for {\n}\n"),
        (Switch("x"), "switch x {\n}\n"),
        (Interface("I"), "type I interface {\n}\n"),
        (Struct("S"), "type S struct {\n}\n"),
    ])
    def test_empty_body(self, node, expected):
        assert node.generate(0) == expected
        indented = "".join("\t\t" + line + "\n" for line in expected.splitlines())
        assert node.generate(2) == indented


class TestCodeBlock:
    """Test CodeBlock nesting and immutability."""

    def test_nested_blocks(self):
        block = CodeBlock(
            RawStatement("a := 1"),
            CodeBlock(RawStatement("b := 2")),
        )
        expected = "\t{\n\t\ta := 1\n\t\t{\n\t\t\tb := 2\n\t\t}\n\t}\n"
        assert block.generate(1) == expected

    def test_add_and_set_statements(self):
        base = CodeBlock(RawStatement("a"))
        before = base.generate(0)

        added = base.add_statements(RawStatement("b"))
        replaced = added.statements(RawStatement("c"))

        assert base.generate(0) == before == "{\n\ta\n}\n"
        assert added.generate(0) == "{\n\ta\n\tb\n}\n"
        assert replaced.generate(0) == "{\n\tc\n}\n"

    def test_diverging_extensions_do_not_alias(self):
        base = CodeBlock(RawStatement("a"))
        left = base.add_statements(RawStatement("left"))
        right = base.add_statements(RawStatement("right"))

        assert left.generate(0) == "{\n\ta\n\tleft\n}\n"
        assert right.generate(0) == "{\n\ta\n\tright\n}\n"

    def test_fail_fast(self):
        """The second child's error propagates and the third is never generated."""
        first = RecordingStatement("first")
        third = RecordingStatement("third")
        block = CodeBlock(first, Package(""), third)

        with pytest.raises(MissingRequiredFieldError) as exc_info:
            block.generate(0)

        assert exc_info.value.code == ErrorCode.PACKAGE_NAME_IS_EMPTY
        assert first.calls == 1
        assert third.calls == 0

    def test_first_error_in_document_order_wins(self):
        block = CodeBlock(
            CodeBlock(Interface("")),
            Package(""),
        )
        with pytest.raises(MissingRequiredFieldError) as exc_info:
            block.generate(0)
        assert exc_info.value.code == ErrorCode.INTERFACE_NAME_IS_EMPTY


class TestFunc:
    """Test Func declarations."""

    def test_func_with_receiver(self):
        func = Func(
            FuncReceiver("m", "*MyStruct"),
            FuncSignature("MyFunc")
            .add_parameters(FuncParameter("foo", "string"))
            .add_return_types("string", "error"),
        ).add_statements(ReturnStatement("foo", "nil"))

        expected = (
            "func (m *MyStruct) MyFunc(foo string) (string, error) {\n"
            "\treturn foo, nil\n"
            "}\n"
        )
        assert func.generate(0) == expected

    def test_func_without_receiver(self):
        func = Func(None, FuncSignature("f"), RawStatement("doSomething()"))
        assert func.generate(1) == "\tfunc f() {\n\t\tdoSomething()\n\t}\n"

    def test_empty_receiver_is_omitted(self):
        func = Func(FuncReceiver("", ""), FuncSignature("f"))
        assert func.generate(0) == "func f() {\n}\n"

    def test_statements_setter(self):
        func = Func(None, FuncSignature("f"), RawStatement("a")).statements(RawStatement("b"))
        assert func.generate(0) == "func f() {\n\tb\n}\n"

    def test_nil_signature_raises(self):
        with pytest.raises(InvalidChildError) as exc_info:
            Func(None, None).generate(0)
        assert exc_info.value.code == ErrorCode.FUNC_SIGNATURE_IS_NIL
        assert str(exc_info.value).startswith("[GOWRITER-10]")

    def test_receiver_error_propagates(self):
        with pytest.raises(MissingRequiredFieldError) as exc_info:
            Func(FuncReceiver("m", ""), FuncSignature("f")).generate(0)
        assert exc_info.value.code == ErrorCode.FUNC_RECEIVER_TYPE_IS_EMPTY


class TestAnonymousFunc:
    """Test AnonymousFunc, goroutines and immediate invocation."""

    def test_invoked_anonymous_func(self):
        func = AnonymousFunc(
            False,
            AnonymousFuncSignature()
            .add_parameters(FuncParameter("bar", "string"))
            .add_return_types("string"),
            ReturnStatement("bar"),
        ).invocation(FuncInvocation("foo"))

        expected = "\tfunc(bar string) string {\n\t\treturn bar\n\t}(foo)\n"
        assert func.generate(1) == expected

    def test_goroutine(self):
        func = AnonymousFunc(True, AnonymousFuncSignature(), RawStatement("work()"))
        func = func.invocation(FuncInvocation())
        assert func.generate(0) == "go func() {\n\twork()\n}()\n"

    def test_statements_setters(self):
        func = AnonymousFunc(False, AnonymousFuncSignature(), RawStatement("a"))
        assert func.add_statements(RawStatement("b")).generate(0) == "func() {\n\ta\n\tb\n}\n"
        assert func.statements(RawStatement("c")).generate(0) == "func() {\n\tc\n}\n"

    def test_detach_invocation(self):
        func = AnonymousFunc(False, AnonymousFuncSignature()).invocation(FuncInvocation("x"))
        assert func.invocation(None).generate(0) == "func() {\n}\n"

    def test_nil_signature_raises(self):
        with pytest.raises(InvalidChildError) as exc_info:
            AnonymousFunc(False, None).generate(0)
        assert exc_info.value.code == ErrorCode.ANONYMOUS_FUNC_SIGNATURE_IS_NIL

    def test_invocation_error_propagates(self):
        func = AnonymousFunc(False, AnonymousFuncSignature()).invocation(FuncInvocation(""))
        with pytest.raises(MissingRequiredFieldError) as exc_info:
            func.generate(0)
        assert exc_info.value.code == ErrorCode.FUNC_INVOCATION_PARAMETER_IS_EMPTY


class TestIf:
    """Test if / else if / else chains."""

    def test_if(self):
        stmt = If('str == ""', RawStatement("return"))
        assert stmt.generate(0) == 'if str == "" {\n\treturn\n}\n'

    def test_if_else_chain(self):
        stmt = (
            If("i > 0", RawStatement("a()"))
            .add_else_if(ElseIf("i < 0", RawStatement("b()")))
            .else_(Else(RawStatement("c()")))
        )
        expected = (
            "\tif i > 0 {\n"
            "\t\ta()\n"
            "\t} else if i < 0 {\n"
            "\t\tb()\n"
            "\t} else {\n"
            "\t\tc()\n"
            "\t}\n"
        )
        assert stmt.generate(1) == expected

    def test_else_ifs_setter_and_remove_else(self):
        stmt = (
            If("a", RawStatement("x"))
            .add_else_if(ElseIf("b"))
            .else_ifs(ElseIf("c").add_statements(RawStatement("y")))
            .else_(Else())
            .else_(None)
        )
        assert stmt.generate(0) == "if a {\n\tx\n} else if c {\n\ty\n}\n"

    def test_if_statements_setters(self):
        stmt = If("a").add_statements(RawStatement("x")).statements(RawStatement("y"))
        assert stmt.generate(0) == "if a {\n\ty\n}\n"

    def test_else_statements_setters(self):
        stmt = If("a").else_(Else(RawStatement("x")).add_statements(RawStatement("y")))
        assert stmt.generate(0) == "if a {\n} else {\n\tx\n\ty\n}\n"

        stmt = If("a").else_(Else(RawStatement("x")).statements(RawStatement("z")))
        assert stmt.generate(0) == "if a {\n} else {\n\tz\n}\n"

    def test_empty_conditions_raise(self):
        with pytest.raises(MissingRequiredFieldError) as exc_info:
            If("").generate(0)
        assert exc_info.value.code == ErrorCode.IF_CONDITION_IS_EMPTY

        with pytest.raises(MissingRequiredFieldError) as exc_info:
            If("a").add_else_if(ElseIf("")).generate(0)
        assert exc_info.value.code == ErrorCode.ELSE_IF_CONDITION_IS_EMPTY


class TestFor:
    """Test For loops."""

    def test_for(self):
        stmt = For("i := 0; i < 3; i++").add_statements(RawStatement('fmt.Printf("%d\\n", i)'))
        expected = 'for i := 0; i < 3; i++ {\n\tfmt.Printf("%d\\n", i)\n}\n'
        assert stmt.generate(0) == expected

    def test_infinite_loop(self):
        assert For("", RawStatement("break")).generate(1) == "\tfor {\n\t\tbreak\n\t}\n"

    def test_statements_setter(self):
        stmt = For("x", RawStatement("a")).statements(RawStatement("b"))
        assert stmt.generate(0) == "for x {\n\tb\n}\n"


class TestSwitch:
    """Test Switch / Case / DefaultCase."""

    def test_switch(self):
        stmt = Switch("str").add_case(
            Case('"foo"', RawStatement('fmt.Printf("str is foo\\n")')),
            Case('"bar"', RawStatement('fmt.Printf("str is bar\\n")')),
        ).default(
            DefaultCase(RawStatement('fmt.Printf("here is default\\n")')),
        )
        expected = (
            "switch str {\n"
            'case "foo":\n'
            '\tfmt.Printf("str is foo\\n")\n'
            'case "bar":\n'
            '\tfmt.Printf("str is bar\\n")\n'
            "default:\n"
            '\tfmt.Printf("here is default\\n")\n'
            "}\n"
        )
        assert stmt.generate(0) == expected

    def test_default_is_last_regardless_of_order(self):
        default_first = (
            Switch("x")
            .default(DefaultCase(Comment(" default")))
            .add_case(Case("1"), Case("2"))
            .add_case(Case("3"))
        )
        default_last = (
            Switch("x")
            .add_case(Case("1"), Case("2"), Case("3"))
            .default(DefaultCase(Comment(" default")))
        )
        expected = "\tswitch x {\n\tcase 1:\n\tcase 2:\n\tcase 3:\n\tdefault:\n\t\t// default\n\t}\n"

        assert default_first.generate(1) == expected
        assert default_last.generate(1) == expected

    def test_cases_setter_and_remove_default(self):
        stmt = (
            Switch("")
            .add_case(Case("a"))
            .cases(Case("b", RawStatement("x")))
            .default(DefaultCase())
            .default(None)
        )
        assert stmt.generate(0) == "switch {\ncase b:\n\tx\n}\n"

    def test_case_statements_setters(self):
        case = Case("a", RawStatement("x")).add_statements(RawStatement("y"))
        assert case.generate(0) == "case a:\n\tx\n\ty\n"
        assert case.statements(RawStatement("z")).generate(0) == "case a:\n\tz\n"

        default = DefaultCase(RawStatement("x")).add_statements(RawStatement("y"))
        assert default.generate(0) == "default:\n\tx\n\ty\n"
        assert default.statements().generate(0) == "default:\n"

    def test_empty_case_condition_raises(self):
        stmt = Switch("x").add_case(Case("1"), Case(""))
        with pytest.raises(MissingRequiredFieldError) as exc_info:
            stmt.generate(0)
        assert exc_info.value.code == ErrorCode.CASE_CONDITION_IS_EMPTY


class TestInterface:
    """Test Interface declarations."""

    def test_interface(self):
        stmt = Interface("myInterface", FuncSignature("myFunc1")).add_signatures(
            FuncSignature("myFunc2")
            .add_parameters(FuncParameter("foo", "string"))
            .add_return_types("string", "error"),
        )
        expected = (
            "type myInterface interface {\n"
            "\tmyFunc1()\n"
            "\tmyFunc2(foo string) (string, error)\n"
            "}\n"
        )
        assert stmt.generate(0) == expected

        stmt = stmt.signatures(FuncSignature("myFunc3"))
        assert stmt.generate(0) == "type myInterface interface {\n\tmyFunc3()\n}\n"

    def test_interface_with_indent(self):
        stmt = Interface("myInterface").add_signatures(FuncSignature("myFunc"))
        assert stmt.generate(2) == "\t\ttype myInterface interface {\n\t\t\tmyFunc()\n\t\t}\n"

    def test_empty_name_raises(self):
        with pytest.raises(MissingRequiredFieldError) as exc_info:
            Interface("").generate(0)
        assert exc_info.value.code == ErrorCode.INTERFACE_NAME_IS_EMPTY

    def test_signature_error_propagates(self):
        with pytest.raises(MissingRequiredFieldError) as exc_info:
            Interface("myInterface", FuncSignature("")).generate(0)
        assert exc_info.value.code == ErrorCode.FUNC_NAME_IS_EMPTY


class TestStruct:
    """Test Struct declarations."""

    def test_struct(self):
        stmt = Struct("MyStruct").add_field("Foo", "string").add_field("Bar", "int64", 'json:"bar"')
        expected = "type MyStruct struct {\n\tFoo string\n\tBar int64 `json:\"bar\"`\n}\n"
        assert stmt.generate(0) == expected

    def test_add_field_keeps_original(self):
        base = Struct("S").add_field("A", "int")
        base.add_field("B", "int")
        assert base.generate(0) == "type S struct {\n\tA int\n}\n"

    def test_errors(self):
        with pytest.raises(MissingRequiredFieldError) as exc_info:
            Struct("").generate(0)
        assert exc_info.value.code == ErrorCode.STRUCT_NAME_IS_EMPTY

        with pytest.raises(MissingRequiredFieldError) as exc_info:
            Struct("S").add_field("", "int").generate(0)
        assert exc_info.value.code == ErrorCode.STRUCT_FIELD_NAME_IS_EMPTY

        with pytest.raises(MissingRequiredFieldError) as exc_info:
            Struct("S").add_field("A", "").generate(0)
        assert exc_info.value.code == ErrorCode.STRUCT_FIELD_TYPE_IS_EMPTY
        assert "test_composites.py:" in exc_info.value.caller

    def test_fields_replaces_all(self):
        base = Struct("S").add_field("Old", "bool")
        replaced = base.fields(("Foo", "string"), ("Bar", "int64", 'json:"bar"'))

        assert replaced.generate(0) == "type S struct {\n\tFoo string\n\tBar int64 `json:\"bar\"`\n}\n"
        assert base.generate(0) == "type S struct {\n\tOld bool\n}\n"

    def test_fields_empty_type(self):
        with pytest.raises(MissingRequiredFieldError) as exc_info:
            Struct("S").fields(("A", "int"), ("B", "")).generate(0)
        assert exc_info.value.code == ErrorCode.STRUCT_FIELD_TYPE_IS_EMPTY
        assert "test_composites.py:" in exc_info.value.caller
