import pytest

from cbasics.printf import printf, sprintf


def test_plain_text_unchanged():
    assert sprintf("hello world") == "hello world"


def test_string_conversion():
    assert sprintf("<%s>", "abc") == "<" + "abc" + ">"


def test_null_string():
    assert sprintf("%s", None) == "(null)"


def test_character_conversion():
    assert sprintf("%c", "A") == "A"
    assert sprintf("%c", 66) == chr(66)


def test_percent_literal():
    assert sprintf("100%%") == "100%"


@pytest.mark.parametrize("number", [0, 5, -7, 42, 2147483647, -2147483647])
@pytest.mark.parametrize("spec", ["d", "i"])
def test_signed_decimal(spec, number):
    assert sprintf("%" + spec, number) == str(number)


def test_int_minimum():
    assert sprintf("%d", -2147483648) == "-2147483648"


def test_signed_wraps_to_32_bits():
    assert sprintf("%d", 2**31) == "-2147483648"


def test_unsigned_of_negative():
    assert sprintf("%u", -1) == "4294967295"


@pytest.mark.parametrize("number", [0, 9, 15, 16, 255, 48879, 2**32 - 1])
def test_hex_matches_builtin_format(number):
    assert sprintf("%x", number) == format(number, "x")
    assert sprintf("%X", number) == format(number, "X")


def test_hex_digits_come_from_base_table():
    out = sprintf("%x", 2**32 - 1)
    assert set(out) <= set("0123456789abcdef")


def test_null_pointer():
    assert sprintf("%p", 0) == "(nil)"


@pytest.mark.parametrize("address", [1, 255, 0x7FFF0000, 2**64 - 1])
def test_pointer_hex(address):
    out = sprintf("%p", address)
    assert out.startswith("0x")
    assert int(out[2:], 16) == address


def test_unknown_conversion_dropped():
    assert sprintf("ab%qcd") == "abcd"


def test_unknown_conversion_consumes_no_argument():
    assert sprintf("%q%s", "x") == "x"


def test_mixed_conversions_in_order():
    out = sprintf("%s=%d (%x)", "n", 255, 255)
    assert out == "n=" + str(255) + " (" + format(255, "x") + ")"


def test_trailing_percent_rejected():
    with pytest.raises(ValueError):
        sprintf("oops %")


def test_missing_argument_rejected():
    with pytest.raises(TypeError):
        sprintf("%d %d", 1)


def test_wrong_argument_type_rejected():
    with pytest.raises(TypeError):
        sprintf("%d", "12")


def test_none_format_rejected():
    with pytest.raises(TypeError):
        sprintf(None)


def test_printf_writes_and_returns_length(capsys):
    expected = sprintf("x=%d %s%c", 5, "yz", "!")
    length = printf("x=%d %s%c", 5, "yz", "!")
    captured = capsys.readouterr()
    assert captured.out == expected
    assert length == len(expected)


def test_printf_counts_null_markers(capsys):
    length = printf("%s%p", None, 0)
    captured = capsys.readouterr()
    assert captured.out == "(null)" + "(nil)"
    assert length == len(captured.out)