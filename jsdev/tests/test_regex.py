import pytest

from jsdev.tokens import may_precede_regex

# A tagged comment inside a character class: it survives only when the
# slash before it opens a regexp literal.
PROBE = "/[/*debug x*/]/.test(s);\n"


@pytest.mark.parametrize("left", list("(,=:[!&|?{};"))
def test_may_precede_regex(left):
    assert may_precede_regex(left)


@pytest.mark.parametrize("left", list("a1)]+-*/.\"'") + [None, " "])
def test_may_not_precede_regex(left):
    assert not may_precede_regex(left)


@pytest.mark.parametrize("left", list("(,=:[!&|?{};"))
def test_regex_after(run_case, left):
    text = f"a{left} {PROBE}"
    run_case(text, text)


@pytest.mark.parametrize("left", ["b", ")", "]", "1", "+"])
def test_division_after(run_case, left):
    run_case(f"a{left} {PROBE}", f"a{left} /[{{x}}]/.test(s);\n")


def test_whitespace_does_not_change_context(run_case):
    text = f"x =\n\t  \r\n  {PROBE}"
    run_case(text, text)


def test_start_of_input_is_division(run_case):
    run_case(PROBE, "/[{x}]/.test(s);\n")


def test_division_after_parenthesized_expression(run_case):
    run_case("y = (a + b) / 2 /*debug z*/;\n", "y = (a + b) / 2 {z};\n")


def test_slash_after_division_is_division(run_case):
    run_case("a = b / /[/*debug x*/]/;\n", "a = b / /[{x}]/;\n")


def test_regex_with_escapes(run_case):
    text = "r = /\\/*debug x*\\//;\n"
    run_case(text, text)


def test_regex_class_with_slash(run_case):
    text = "r = /[/]*debug/g; /*debug y*/\n"
    run_case(text, "r = /[/]*debug/g; {y}\n")


def test_regex_class_escaped_bracket(run_case):
    text = "r = /[\\]/]/; /*debug y*/\n"
    run_case(text, "r = /[\\]/]/; {y}\n")


def test_string_does_not_change_context(run_case):
    # The quote is not recorded as the left context.
    text = "f(\"s\" /[/*debug x*/]/);\n"
    run_case(text, text)
