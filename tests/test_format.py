import pytest

from sigtalk.format import printf, render


def test_plain_text_unchanged():
    assert render("Server PID: ") == "Server PID: "


def test_percent_literal():
    assert render("%%") == "%"


def test_char_from_string_and_code():
    assert render("%c\n", "d") == "d\n"
    assert render("%c", ord("d")) == "d"


def test_strings_substituted_in_order():
    assert render("sp%secifier %s", "Moin man!", "") == "spMoin man!ecifier "


def test_null_string():
    assert render("%s", None) == "(null)"


def test_nil_pointer():
    assert render("%p", None) == "(nil)"
    assert render("%p", 0) == "(nil)"


def test_pointer_is_hex_address():
    text = render("%p", 0xDEADBEEF)
    assert text.startswith("0x")
    assert int(text, 16) == 0xDEADBEEF


def test_int_min():
    assert render("%d", -2147483648) == "-2147483648"
    assert render("%i", -2147483648) == "-2147483648"


def test_signed_wraps_to_32_bits():
    assert render("%i", 2**31) == "-2147483648"


@pytest.mark.parametrize("n", [0, 12, -12, 419, 2147483647, -2147483647])
def test_signed_round_trip(n):
    assert int(render("%d", n)) == n
    assert render("%i", n) == render("%d", n)


@pytest.mark.parametrize("n", [0, 9, 10, 24381241, 2**32 - 1])
def test_unsigned_round_trip(n):
    assert int(render("%u", n)) == n


def test_unsigned_of_negative_wraps():
    assert int(render("%u", -1)) == 2**32 - 1


@pytest.mark.parametrize("n", [0, 15, 16, 143, 419, 2**32 - 1])
def test_hex_round_trip(n):
    lower = render("%x", n)
    assert int(lower, 16) == n
    assert lower == lower.lower()
    assert render("%X", n) == lower.upper()


def test_hex_of_negative_wraps():
    assert int(render("%x", -1), 16) == 2**32 - 1


def test_unknown_specifier_prints_nothing_and_keeps_argument():
    assert render("a%qb%d", 7) == "ab7"


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        render("%d")


def test_wrong_argument_type_raises():
    with pytest.raises(TypeError):
        render("%d", "x")
    with pytest.raises(TypeError):
        render("%s", 5)


def test_trailing_percent_raises():
    with pytest.raises(ValueError):
        render("abc%")


def test_extra_arguments_ignored():
    assert render("%s", "one", "two") == "one"


def test_printf_writes_and_counts(capsys):
    count = printf("Server PID: %d\n", 4242)
    out = capsys.readouterr().out
    assert out == render("Server PID: %d\n", 4242)
    assert count == len(out)
    assert "4242" in out