import pytest

from runeparse.parser import Parser, ExpectedParseError, check_rune_range
from runeparse.op import And, Or, XOr, Not, Range, MinOne, MinZero, Optional, Repeat


def test_and():
    p = Parser(b"abc")
    mark, ok = p.check(And(["a", "bc"]))
    assert ok and mark.rune == "c"
    assert p.done()


def test_and_rewinds_on_failure():
    p = Parser(b"abd")
    p.next()
    start = p.mark()
    assert p.check(And(["b", "c"])) == (None, False)
    assert p.mark() == start


def test_and_rewinds_partial_literal():
    p = Parser(b"abd")
    assert p.check(And(["abc"])) == (None, False)
    assert p.current() == "a"


def test_or_is_left_biased():
    p = Parser(b"ab")
    mark, ok = p.check(Or(["a", And(["a", "b"])]))
    assert ok and mark.rune == "a"
    assert p.current() == "b"


def test_or_rewinds_between_alternatives():
    p = Parser(b"abd")
    mark, ok = p.check(Or(["abc", "abd"]))
    assert ok and mark.rune == "d"
    assert p.done()


def test_or_fails_without_consuming():
    p = Parser(b"xyz")
    assert p.check(Or(["xa", "xb"])) == (None, False)
    assert p.current() == "x"


def test_xor():
    p = Parser(b"ab")
    mark, ok = p.check(XOr(["b", "a"]))
    assert ok and mark.rune == "a"
    assert p.current() == "b"

    p = Parser(b"ab")
    assert p.check(XOr(["a", "ab"])) == (None, False)
    assert p.current() == "a"


def test_not():
    p = Parser(b"ab")
    assert p.check(Not("b")) == (None, True)
    assert p.current() == "a"
    assert p.check(Not("a")) == (None, False)
    assert p.current() == "a"


def test_not_in_sequence():
    # any rune but a quote
    p = Parser(b'ab"')
    body = MinOne(And([Not('"'), check_rune_range("\x00", "\U0010ffff")]))
    mark, ok = p.check(body)
    assert ok and mark.rune == "b"
    assert p.current() == '"'


def test_min_one():
    p = Parser(b"aaab")
    mark, ok = p.check(MinOne("a"))
    assert ok and mark.offset == 2
    assert p.current() == "b"


def test_min_one_fails_without_match():
    p = Parser(b"b")
    assert p.check(MinOne("a")) == (None, False)
    assert p.current() == "b"


def test_min_one_keeps_successful_iterations():
    p = Parser(b"ababac")
    mark, ok = p.check(MinOne("ab"))
    assert ok and mark.offset == 3
    # only the failing "ac" attempt is undone
    assert p.current() == "a"
    assert p.mark().offset == 4


def test_min_zero_and_optional():
    p = Parser(b"b")
    assert p.check(MinZero("a")) == (None, True)
    assert p.check(Optional("a")) == (None, True)
    assert p.current() == "b"

    p = Parser(b"aa")
    mark, ok = p.check(Optional("a"))
    assert ok and mark.offset == 0
    assert p.current() == "a"


def test_repeat():
    p = Parser(b"aaaa")
    mark, ok = p.check(Repeat(3, "a"))
    assert ok and mark.offset == 2
    assert p.current() == "a"

    p = Parser(b"aa")
    assert p.check(Repeat(3, "a")) == (None, False)
    assert p.current() == "a"
    assert p.mark().offset == 0


def test_range_bounds():
    p = Parser(b"aaaaa")
    mark, ok = p.check(Range(2, 4, "a"))
    assert ok and mark.offset == 3
    with pytest.raises(ValueError):
        Range(3, 2, "a")


def test_zero_width_repetition_terminates():
    p = Parser(b"ab")
    assert p.check(MinZero(Not("x"))) == (None, True)
    assert p.current() == "a"


def test_nesting():
    digits = MinOne(check_rune_range("0", "9"))
    number = And([Optional("-"), digits, Optional(And([".", digits]))])
    p = Parser(b"-12.5x")
    mark, ok = p.check(number)
    assert ok and mark.rune == "5"
    assert p.current() == "x"


def test_expect_reports_furthest_failure():
    p = Parser(b"ab\ncx")
    with pytest.raises(ExpectedParseError) as ei:
        p.expect(And(["ab\n", Or(["cd", "ce"])]))
    err = ei.value
    assert (err.line, err.column) == (1, 1)
    assert err.expected == "ce"
    assert err.string == "cx"
    # the sequence itself rewound
    assert p.current() == "a"


def test_expect_ignores_lookahead_failures():
    p = Parser(b"ab")
    with pytest.raises(ExpectedParseError) as ei:
        p.expect(And([Not("x"), "b"]))
    assert ei.value.expected == "b"
    assert (ei.value.line, ei.value.column) == (0, 0)


def test_operator_repr():
    assert repr(And(["a", Or(["bc", Not("d")])])) == "And('a', Or('bc', Not('d')))"
    assert repr(MinOne("a")) == "Range(1.., 'a')"
