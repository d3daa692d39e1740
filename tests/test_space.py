import pytest

from presentfit.space import Space, parse_space


@pytest.mark.parametrize(
    "char, expected",
    [("#", Space.OCCUPIED), (".", Space.FREE), ("o", Space.POCKET)],
)
def test_parse_known_symbols(char, expected):
    assert parse_space(char) is expected


@pytest.mark.parametrize("space", list(Space))
def test_str_round_trip(space):
    assert parse_space(str(space)) is space


@pytest.mark.parametrize("char", ["#", ".", "o"])
def test_repr_matches_symbol(char):
    assert repr(parse_space(char)) == char


@pytest.mark.parametrize("char", ["x", "", "##", " "])
def test_parse_unknown_symbol_raises(char):
    with pytest.raises(ValueError):
        parse_space(char)