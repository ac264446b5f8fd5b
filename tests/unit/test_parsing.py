import pytest
from stats_service.services.errors import ParseError
from stats_service.services.parsing import Err, Ok, parse_numbers, require_numbers

def test_parse_numbers_ok():
    assert parse_numbers("1,2.5,-3,1e2,.5") == Ok([1.0, 2.5, -3.0, 100.0, 0.5])

def test_parse_numbers_keeps_order_and_length():
    result = parse_numbers("3,1,2,1")
    assert isinstance(result, Ok)
    assert result.values == [3.0, 1.0, 2.0, 1.0]

def test_parse_numbers_reports_first_bad_token():
    result = parse_numbers("1,abc,x,3")
    assert isinstance(result, Err)
    assert result.error.token == "abc"
    assert str(result.error) == "abc is not a number."

@pytest.mark.parametrize("raw, token", [
    ("1,", ""),           # trailing comma
    (",", ""),
    ("1, 2", " 2"),       # whitespace is not stripped
    ("1,2,3", None),
    ("nan", "nan"),
    ("1,inf", "inf"),
    ("1_000", "1_000"),
    ("1,5", None),
    ("1.5.2", "1.5.2"),
    ("1e999", "1e999"),   # overflows to infinity
    ("١٢,３", "١٢"),       # Arabic-Indic digits
    ("1,３", "３"),        # fullwidth digit
    ("1,2e٣", "2e٣"),
])
def test_parse_numbers_edge_cases(raw, token):
    result = parse_numbers(raw)
    if token is None:
        assert isinstance(result, Ok)
    else:
        assert isinstance(result, Err)
        assert result.error.token == token

def test_require_numbers_raises():
    with pytest.raises(ParseError, match="abc is not a number."):
        require_numbers("1,abc,3")

def test_require_numbers_returns_values():
    assert require_numbers("2,4") == [2.0, 4.0]
