import io

from cpkit.debug import dbg, format_value


def test_booleans():
    assert format_value(True) == "true"
    assert format_value(False) == "false"


def test_strings_are_quoted():
    assert format_value("ab") == '"ab"'


def test_integers_plain():
    assert format_value(-42) == "-42"


def test_float_general_format():
    assert format_value(0.5) == "0.5"


def test_sequences_in_braces():
    assert format_value([1, 2, 3]) == "{1,2,3}"
    assert format_value([]) == "{}"


def test_pair_and_nesting():
    assert format_value((1, "x")) == '{1,"x"}'
    assert format_value([[1], [2, 3]]) == "{{1},{2,3}}"


def test_mapping_as_pairs():
    assert format_value({1: "a", 2: "b"}) == '{{1,"a"},{2,"b"}}'


def test_complex():
    assert format_value(complex(1, 2)) == "{1,2}"


def test_dbg_writes_line():
    out = io.StringIO()
    line = dbg("a, b", 1, "x", file=out)
    assert out.getvalue() == '[a, b] = [1, "x"]\n'
    assert line == out.getvalue()


def test_dbg_without_values():
    out = io.StringIO()
    dbg("nothing", file=out)
    assert out.getvalue() == "[nothing] = []\n"