import pytest

from minesweep.colornames import COLORS, color_by_name


@pytest.mark.parametrize(
    "name, expected",
    [
        ("snow", 0xFFFAFA),
        ("black", 0x0),
        ("white", 0xFFFFFF),
        ("red", 0xFF0000),
        ("navy", 0x80),
        ("gray50", 0x7F7F7F),
        ("light green", 0x90EE90),
    ],
)
def test_known_names(name, expected):
    assert color_by_name(name) == expected


def test_none_is_transparent():
    assert color_by_name("none") == -1


def test_lookup_ignores_case():
    assert color_by_name("GhostWhite") == color_by_name("ghostwhite")
    assert color_by_name("NAVY BLUE") == color_by_name("navy blue")


def test_first_entry_wins_for_repeated_names():
    assert color_by_name("dark slate") == 0x2F4F4F
    assert color_by_name("light slate") == 0x778899
    assert color_by_name("light goldenrod") == 0xFAFAD2


def test_unknown_name_raises():
    with pytest.raises(KeyError):
        color_by_name("no such colour")


def test_empty_name_raises():
    with pytest.raises(KeyError):
        color_by_name("")


def test_gray_and_grey_agree():
    for level in range(101):
        assert color_by_name(f"gray{level}") == color_by_name(f"grey{level}")


def test_gray_levels_increase():
    values = [color_by_name(f"gray{level}") for level in range(101)]
    assert values == sorted(values)
    assert values[0] == color_by_name("black")
    assert values[-1] == color_by_name("white")


def test_gray_levels_have_equal_channels():
    for level in range(101):
        value = color_by_name(f"gray{level}")
        red, green, blue = (value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF
        assert red == green == blue


def test_spaced_and_joined_names_match():
    for spaced, joined in [
        ("alice blue", "aliceblue"),
        ("misty rose", "mistyrose"),
        ("dark orange", "darkorange"),
        ("deep pink", "deeppink"),
    ]:
        assert color_by_name(spaced) == color_by_name(joined)


def test_numbered_first_shade_matches_base():
    for base in ["snow", "bisque", "azure", "khaki", "orange", "gold", "thistle"]:
        assert color_by_name(f"{base}1") == color_by_name(base)


def test_all_values_fit_rgb_or_are_transparent():
    for name, value in COLORS.items():
        assert value == -1 or 0 <= value <= 0xFFFFFF, name
    assert [n for n, v in COLORS.items() if v == -1] == ["none"]


def test_index_keys_are_lower_case_and_found_in_any_case():
    for name, value in COLORS.items():
        assert name == name.lower()
        assert color_by_name(name.upper()) == value
        assert color_by_name(name) == value


def test_index_is_read_only():
    with pytest.raises(TypeError):
        COLORS["snow"] = 0  # type: ignore[index]
    assert color_by_name("snow") == 0xFFFAFA