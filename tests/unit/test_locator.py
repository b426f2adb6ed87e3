#!/usr/bin/env python3
"""
Tests for the list locator: which list a cursor position refers to.
"""

from tests.test_utils import in_method, locate_at, parse
from listlayout.refactoring import ARGUMENTS, PARAMETERS, locate
from listlayout.shared.source_location import TextSpan


class TestArguments:
    """Argument lists of invocations and object creations"""

    def test_cursor_on_invoked_name(self):
        _, found = locate_at(in_method("    Mi$xin(a, b, c);"), ARGUMENTS)
        assert found.node.text == "(a, b, c)"

    def test_cursor_on_item(self):
        _, found = locate_at(in_method("    Mixin(a, $b, c);"), ARGUMENTS)
        assert found.node.text == "(a, b, c)"

    def test_cursor_on_delimiter(self):
        _, found = locate_at(in_method("    Mixin(a, b, c$);"), ARGUMENTS)
        assert found.node.text == "(a, b, c)"

    def test_cursor_in_indentation(self):
        _, found = locate_at(in_method("  $  Mixin(a, b, c);"), ARGUMENTS)
        assert found.node.text == "(a, b, c)"

    def test_innermost_list_wins(self):
        _, found = locate_at(in_method("    Outer(Inner($x, y), z);"), ARGUMENTS)
        assert found.node.text == "(x, y)"

    def test_outer_list_from_outer_item(self):
        _, found = locate_at(in_method("    Outer(Inner(x, y), $z);"), ARGUMENTS)
        assert found.node.text == "(Inner(x, y), z)"

    def test_inner_invocation_name(self):
        _, found = locate_at(in_method("    Outer($Inner(x, y), z);"), ARGUMENTS)
        assert found.node.text == "(x, y)"

    def test_object_creation(self):
        _, found = locate_at(in_method("    var p = new Po$int(1, 2);"), ARGUMENTS)
        assert found.node.text == "(1, 2)"

    def test_member_invocation(self):
        _, found = locate_at(in_method("    this.items.Ad$d(key, value);"), ARGUMENTS)
        assert found.node.text == "(key, value)"


class TestExpressionForms:
    """Argument lists around lambdas, generic calls and initializers"""

    def test_cursor_on_lambda_parameter(self):
        _, found = locate_at(in_method("    Foo($x => x + 1, \"a,b\");"), ARGUMENTS)
        assert [item.text for item in found.items] == ["x => x + 1", "\"a,b\""]

    def test_list_inside_lambda_body(self):
        _, found = locate_at(in_method("    Foo(x => Bar($x, 1), y);"), ARGUMENTS)
        assert found.node.text == "(x, 1)"

    def test_generic_invocation_name(self):
        _, found = locate_at(in_method("    F$oo<int>(a, b);"), ARGUMENTS)
        assert found.node.text == "(a, b)"

    def test_generic_member_invocation_name(self):
        _, found = locate_at(in_method("    list.Con$vert<int>(a, b);"), ARGUMENTS)
        assert found.node.text == "(a, b)"

    def test_cursor_on_out_var(self):
        _, found = locate_at(in_method("    TryGet(key, out var val$ue);"), ARGUMENTS)
        assert [item.text for item in found.items] == ["key", "out var value"]

    BASE_SOURCE = "class D : B\n{\n    public D(int a, int b) : $base(a, b) { }\n}\n"

    def test_base_initializer(self):
        _, found = locate_at(self.BASE_SOURCE, ARGUMENTS)
        assert found.node.text == "(a, b)"

    def test_this_initializer_item(self):
        _, found = locate_at("class D\n{\n    D(int a) : this(a, $0) { }\n}\n", ARGUMENTS)
        assert found.node.text == "(a, 0)"

    def test_constructor_name_still_finds_parameters(self):
        source = self.BASE_SOURCE.replace("$base", "base").replace("public D(", "public $D(")
        _, found = locate_at(source, PARAMETERS)
        assert found.node.text == "(int a, int b)"
        _, found = locate_at(source, ARGUMENTS)
        assert found is None


class TestParameters:
    """Parameter lists of methods and constructors"""

    SOURCE = "class C\n{\n    public void R$un(int first, string second, bool third) { }\n}\n"

    def test_cursor_on_method_name(self):
        _, found = locate_at(self.SOURCE, PARAMETERS)
        assert found.node.text == "(int first, string second, bool third)"

    def test_cursor_on_parameter(self):
        source = "class C\n{\n    public void Run(int first, str$ing second, bool third) { }\n}\n"
        _, found = locate_at(source, PARAMETERS)
        assert found.item_count == 3
        assert [item.text for item in found.items] == ["int first", "string second", "bool third"]

    def test_constructor(self):
        _, found = locate_at("class C\n{\n    $C(int a, int b) { }\n}\n", PARAMETERS)
        assert found.node.text == "(int a, int b)"

    def test_arguments_kind_ignores_parameters(self):
        _, found = locate_at(self.SOURCE, ARGUMENTS)
        assert found is None

    def test_body_is_not_the_parameter_list(self):
        source = "class C\n{\n    void M(int a, int b)\n    {\n        $Go();\n    }\n}\n"
        _, found = locate_at(source, PARAMETERS)
        assert found is None


class TestNotApplicable:
    """Positions with no list to toggle"""

    def test_single_item(self):
        _, found = locate_at(in_method("    Mi$xin(a);"), ARGUMENTS)
        assert found is None

    def test_no_items(self):
        _, found = locate_at(in_method("    Mi$xin();"), ARGUMENTS)
        assert found is None

    def test_single_item_inner_does_not_fall_back(self):
        _, found = locate_at(in_method("    Outer($Inner(x), z);"), ARGUMENTS)
        assert found is None

    def test_no_enclosing_list(self):
        _, found = locate_at(in_method("    var total = $count + 1;"), ARGUMENTS)
        assert found is None

    def test_outside_document(self):
        tree = parse(in_method("    Mixin(a, b);"))
        assert locate(tree, TextSpan.at(len(tree.text) + 10), ARGUMENTS) is None

    def test_selection_span(self):
        source = in_method("    Mixin(a, b);")
        tree = parse(source)
        start = source.index("a, b")
        found = locate(tree, TextSpan(start, start + 4), ARGUMENTS)
        assert found.node.text == "(a, b)"
