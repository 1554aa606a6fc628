import pytest

from backend.app.services.categories import parameterize, slug_candidate


def test_parameterize_normalizes_name():
    assert parameterize("Layer 1 (L1)") == "layer-1-l1"


def test_parameterize_collapses_and_strips_separators():
    assert parameterize("  --Hello,  World!-- ") == "hello-world"


def test_parameterize_transliterates_accents():
    assert parameterize("Café Crème") == "cafe-creme"


def test_parameterize_keeps_underscores():
    assert parameterize("snake_case name") == "snake_case-name"


def test_parameterize_custom_separator():
    assert parameterize("Hello World", separator="_") == "hello_world"


@pytest.mark.parametrize(
    "name,expected",
    [
        ("Feature Requests", "feature-requests"),
        ("Snake_case__name", "snake-case-name"),
        ("Ünïcödé 42", "unicode-42"),
        ("1-2", "1-2"),
        ("v2", "v2"),
        ("123", ""),
        ("2020 ", ""),
        ("!!!", ""),
        ("", ""),
    ],
)
def test_slug_candidate(name, expected):
    assert slug_candidate(name) == expected


def test_slug_candidate_truncates():
    slug = slug_candidate("a" * 300)
    assert len(slug) == 255
    assert set(slug) == {"a"}


def test_slug_candidate_custom_length():
    assert slug_candidate("abcdef", max_length=3) == "abc"


def test_parameterize_romanizes_non_latin_scripts():
    assert parameterize("日本") == "ri-ben"
    assert slug_candidate("日本") == "ri-ben"
