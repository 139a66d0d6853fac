import pytest

from core.converters import (
    infix_to_postfix, infix_to_prefix,
    postfix_to_infix, postfix_to_prefix,
    prefix_to_infix, prefix_to_postfix
)
from core.trace import Step, TraceKind


@pytest.mark.parametrize("infix, postfix", [
    ("A+B*C", "ABC*+"),
    ("A*B+C", "AB*C+"),
    ("A^B^C", "ABC^^"),
    ("A-B-C", "AB-C-"),
    ("(A+B)*C", "AB+C*"),
    ("A + B * C", "ABC*+"),
    ("A*(B+C)/D", "ABC+*D/"),
])
def test_infix_to_postfix(infix, postfix):
    assert infix_to_postfix(infix).result == postfix


def test_infix_to_postfix_trace():
    steps = infix_to_postfix("A+B*C").steps
    assert steps == (
        Step('A', (), 'A', "Operand 'A' added to output"),
        Step('+', ('+',), 'A', "Operator '+' processed (precedence check)"),
        Step('B', ('+',), 'AB', "Operand 'B' added to output"),
        Step('*', ('+', '*'), 'AB', "Operator '*' processed (precedence check)"),
        Step('C', ('+', '*'), 'ABC', "Operand 'C' added to output"),
        Step('EOF', ('+',), 'ABC*', "Popping remaining '*'", TraceKind.MARKER),
        Step('EOF', (), 'ABC*+', "Popping remaining '+'", TraceKind.MARKER),
    )


def test_infix_to_postfix_paren_steps():
    steps = infix_to_postfix("(A+B)*C").steps
    assert [s.token for s in steps] == ['(', 'A', '+', 'B', ')', '*', 'C', 'EOF']
    assert steps[0].action == "Left paren pushed to stack"
    assert steps[3].stack == ('(', '+')
    assert steps[4].stack == ()
    assert steps[4].output == "AB+"
    assert steps[4].action == "Right paren: popping until '('"


def test_trace_length_is_tokens_plus_trailing_pops():
    result = infix_to_postfix("A*B+C")
    # A * B + C, then one pop for '+'
    assert len(result.steps) == 6


def test_unmatched_right_paren_is_tolerated():
    result = infix_to_postfix("A+B)")
    assert result.result == "AB+"
    assert len(result.steps) == 4
    assert result.steps[-1].stack == ()


def test_unmatched_left_paren_is_flushed_to_output():
    assert infix_to_postfix("(A+B").result == "AB+("


def test_unrecognized_character_passes_through():
    result = infix_to_postfix("A+B$C")
    dollar = result.steps[3]
    assert dollar.token == '$'
    assert dollar.action == ""
    assert dollar.stack == ('+',)
    assert dollar.output == "AB"
    assert result.result == "ABC+"


@pytest.mark.parametrize("infix, prefix", [
    ("A+B*C", "+A*BC"),
    ("(A+B)*C", "*+ABC"),
    ("A*B+C", "+*ABC"),
])
def test_infix_to_prefix(infix, prefix):
    assert infix_to_prefix(infix).result == prefix


def test_infix_to_prefix_wraps_postfix_trace_with_markers():
    result = infix_to_prefix("A+B*C")
    first, last = result.steps[0], result.steps[-1]
    assert first.token == 'REVERSE'
    assert first.output == "C*B+A"
    assert first.kind is TraceKind.MARKER
    assert last.token == 'FINAL'
    assert last.output == "+A*BC"
    assert result.steps[1:-1] == infix_to_postfix("C*B+A").steps
    assert len(result.steps) == 8


def test_infix_to_prefix_reassociates_equal_precedence_chain():
    # the mirrored scan keeps the postfix tie-break, so chains group from the right
    assert infix_to_prefix("A-B-C").result == "-A-BC"


@pytest.mark.parametrize("postfix, infix", [
    ("ABC*+", "(A+(B*C))"),
    ("AB+C*", "((A+B)*C)"),
    ("AB-C-", "((A-B)-C)"),
    ("A", "A"),
])
def test_postfix_to_infix(postfix, infix):
    assert postfix_to_infix(postfix).result == infix


def test_postfix_to_infix_trace():
    steps = postfix_to_infix("ABC*+").steps
    assert len(steps) == 5
    assert steps[3].action == "Pop 'C', 'B'; Push '(B*C)'"
    assert steps[3].stack == ('A', '(B*C)')
    assert steps[3].output == "(B*C)"
    assert steps[4].output == "(A+(B*C))"


def test_postfix_to_infix_with_missing_operand():
    result = postfix_to_infix("A+")
    assert result.result == "(None+A)"
    assert result.steps[1].action == "Pop 'A', 'None'; Push '(None+A)'"


@pytest.mark.parametrize("prefix, infix", [
    ("+A*BC", "(A+(B*C))"),
    ("*+ABC", "((A+B)*C)"),
    ("-AB", "(A-B)"),
])
def test_prefix_to_infix(prefix, infix):
    assert prefix_to_infix(prefix).result == infix


def test_prefix_to_infix_pops_left_operand_first():
    steps = prefix_to_infix("-AB").steps
    assert [s.token for s in steps] == ['B', 'A', '-']
    assert steps[2].action == "Pop 'A', 'B'; Push '(A-B)'"


def test_postfix_to_prefix():
    assert postfix_to_prefix("ABC*+").result == "+A*BC"
    assert postfix_to_prefix("AB+C*").result == "*+ABC"


def test_prefix_to_postfix():
    assert prefix_to_postfix("+A*BC").result == "ABC*+"
    assert prefix_to_postfix("*+ABC").result == "AB+C*"


@pytest.mark.parametrize("convert, expression", [
    (postfix_to_infix, "AB+C*"),
    (postfix_to_prefix, "A B + C *"),
    (prefix_to_infix, "*+ABC"),
    (prefix_to_postfix, "* + A B C"),
])
def test_scan_trace_has_one_step_per_token(convert, expression):
    assert len(convert(expression).steps) == 5


@pytest.mark.parametrize("convert", [
    infix_to_postfix, infix_to_prefix,
    postfix_to_infix, postfix_to_prefix,
    prefix_to_infix, prefix_to_postfix,
])
@pytest.mark.parametrize("expression", ["", "   "])
def test_empty_input(convert, expression):
    result = convert(expression)
    assert result.steps == ()
    assert result.result == ""


def test_steps_keep_their_snapshot():
    steps = infix_to_postfix("A*B+C").steps
    assert steps[1].stack == ('*',)
    assert steps[3].stack == ('+',)
