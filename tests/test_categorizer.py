import pytest

from kedia.core.categorizer import default_keywords, guess_category, load_keywords
from kedia.core.models import Category


def test_empty_description_is_other():
    assert guess_category("") is Category.OTHER


def test_unmatched_description_is_other():
    assert guess_category("sabzi") is Category.OTHER


@pytest.mark.parametrize(
    "description, expected",
    [
        ("pizza", Category.FOOD),
        ("uber", Category.TRANSPORT),
        ("myntra shopping", Category.SHOPPING),
        ("netflix", Category.ENTERTAINMENT),
        ("rent", Category.BILLS),
        ("pharmacy", Category.HEALTH),
        ("tuition", Category.EDUCATION),
        ("gave to friend", Category.LENT),
    ],
)
def test_default_keywords(description, expected):
    assert guess_category(description) is expected


def test_matching_ignores_case():
    assert guess_category("PIZZA") is guess_category("pizza")


def test_earlier_category_wins_on_shared_keywords():
    # "amazon" is listed under Shopping and Entertainment, "gas" under Transport and Bills
    assert guess_category("amazon") is Category.SHOPPING
    assert guess_category("gas cylinder") is Category.TRANSPORT
    assert guess_category("lunch with friend") is Category.FOOD


def test_substring_matches_inside_words():
    assert guess_category("cabinet") is Category.TRANSPORT


def test_default_table_follows_category_order():
    table = default_keywords()
    assert list(table) == list(Category)
    assert table[Category.OTHER] == ()
    assert "parso" not in table[Category.FOOD]
    with pytest.raises(TypeError):
        table[Category.OTHER] = ("misc",)


def test_custom_keyword_table(tmp_path):
    path = tmp_path / "categories.yaml"
    path.write_text("health: [Gym, yoga]\nfood:\n")

    table = load_keywords(path)

    assert list(table) == list(Category)
    assert table[Category.HEALTH] == ("gym", "yoga")
    assert table[Category.FOOD] == ()
    assert guess_category("GYM membership", table) is Category.HEALTH
    assert guess_category("pizza", table) is Category.OTHER


def test_unknown_category_in_table_is_rejected(tmp_path):
    path = tmp_path / "categories.yaml"
    path.write_text("Travel: [flight]\n")
    with pytest.raises(ValueError):
        load_keywords(path)


def test_keywords_must_be_a_list(tmp_path):
    path = tmp_path / "categories.yaml"
    path.write_text("Food: pizza\n")
    with pytest.raises(ValueError):
        load_keywords(path)
