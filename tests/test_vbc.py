import pytest

from lvlkit.vbc import Node, NodeType, ParseError, eval_tree, main, parse_expr


def val(n):
    return Node(NodeType.VAL, value=n)


def test_single_digit():
    assert parse_expr("4") == val(4)
    assert eval_tree(parse_expr("4")) == 4


def test_addition_groups_left():
    expected = Node(
        NodeType.ADD,
        left=Node(NodeType.ADD, left=val(1), right=val(2)),
        right=val(3),
    )
    assert parse_expr("1+2+3") == expected


def test_multiplication_binds_tighter():
    expected = Node(
        NodeType.ADD,
        left=val(1),
        right=Node(NodeType.MULTI, left=val(2), right=val(3)),
    )
    assert parse_expr("1+2*3") == expected


def test_parentheses_override_precedence():
    expected = Node(
        NodeType.MULTI,
        left=Node(NodeType.ADD, left=val(1), right=val(2)),
        right=val(3),
    )
    assert parse_expr("(1+2)*3") == expected


def test_redundant_parentheses_give_same_tree():
    assert parse_expr("((((3))))") == parse_expr("3")


@pytest.mark.parametrize("a,b", [("2+3", "3+2"), ("4*5", "5*4"), ("2*(3+4)", "2*3+2*4")])
def test_algebraic_identities(a, b):
    assert eval_tree(parse_expr(a)) == eval_tree(parse_expr(b))


def test_multiply_by_zero():
    assert eval_tree(parse_expr("(9+8+7)*0")) == 0


def test_trailing_operator():
    with pytest.raises(ParseError) as info:
        parse_expr("1+")
    assert info.value.token is None
    assert str(info.value) == "Unexpected end of input"


def test_bad_token():
    with pytest.raises(ParseError) as info:
        parse_expr("1+a")
    assert str(info.value) == "Unexpected token 'a'"


def test_multi_digit_numbers_rejected():
    with pytest.raises(ParseError) as info:
        parse_expr("12")
    assert info.value.token == "2"


def test_unclosed_parenthesis():
    with pytest.raises(ParseError) as info:
        parse_expr("(1+2")
    assert info.value.token is None


def test_extra_closing_parenthesis():
    with pytest.raises(ParseError) as info:
        parse_expr("1)")
    assert info.value.token == ")"


def test_empty_input():
    with pytest.raises(ParseError) as info:
        parse_expr("")
    assert info.value.token is None


def test_main_prints_result(capsys):
    assert main(["1+2*3"]) == 0
    assert capsys.readouterr().out == "7\n"


def test_main_reports_error(capsys):
    assert main(["x"]) == 1
    assert capsys.readouterr().out == "Unexpected token 'x'\n"


def test_main_wrong_argument_count():
    assert main([]) == 1
    assert main(["1", "2"]) == 1