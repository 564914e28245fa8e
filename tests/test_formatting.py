from diffurch.formatting import describe_args, describe_types, format_value, verbose


def test_format_list():
    assert format_value([1, 2, 3]) == "[1, 2, 3]"


def test_format_tuple_and_pair():
    assert format_value((1, "a")) == "(1, a)"


def test_format_nested():
    assert format_value([(1, 2), [3]]) == "[(1, 2), [3]]"


def test_format_float_uses_short_form():
    assert format_value(0.5) == "0.5"
    assert format_value([2.0]) == "[2]"


def test_describe_args():
    assert describe_args(1, "x") == "int = 1;   str = x;   "


def test_describe_types():
    assert describe_types(1, 2.5) == "int;   float;   "


def test_verbose_prints_and_returns(capsys):
    def add(a, b):
        return a + b

    assert verbose(add, 2, 3) == 5
    out = capsys.readouterr().out
    assert out == "call add with args " + describe_args(2, 3) + "\n"