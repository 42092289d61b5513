from utils.identifiers import parse_id


def test_parse_numeric_id():
    assert parse_id("42") == 42
    assert parse_id("0") == 0


def test_parse_non_numeric_id():
    assert parse_id("abc") is None
    assert parse_id("1.5") is None
    assert parse_id("") is None
