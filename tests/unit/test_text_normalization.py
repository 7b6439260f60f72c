import pytest

from services.brand_matching import TitleNormalizer, normalize_title


def test_strips_combining_accents():
    assert normalize_title("Avène Cicalfate+") == "Avene Cicalfate+"


def test_strips_mixed_diacritics():
    assert normalize_title("Crème Ação Žirgs") == "Creme Acao Zirgs"


def test_plain_title_is_returned_unchanged():
    title = "La Roche-Posay Effaclar Duo+ 40ml"
    assert normalize_title(title) is title


def test_letters_without_decomposition_are_kept():
    assert normalize_title("Łódź Ø") == "Łodz Ø"


def test_empty_title():
    assert normalize_title("") == ""


@pytest.mark.parametrize("title", [
    "Avène",
    "L'Oréal Paris Revitalift",
    "Ąžuolas ĒĢĶĻŅ",
    "GUM Travel",
    "étude",
    "",
])
def test_normalization_is_idempotent(title):
    once = normalize_title(title)
    assert normalize_title(once) == once


def test_title_normalizer_caches_by_exact_input():
    normalizer = TitleNormalizer()

    assert normalizer("Avène") == "Avene"
    assert normalizer("Avène") == "Avene"
    assert normalizer("AVÈNE") == "AVENE"
    assert len(normalizer) == 2


def test_title_normalizer_clear():
    normalizer = TitleNormalizer()
    normalizer("Crème")

    normalizer.clear()

    assert len(normalizer) == 0
    assert normalizer("Crème") == "Creme"
