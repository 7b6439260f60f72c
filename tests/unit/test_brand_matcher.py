import pytest

from services.brand_matching import (
    BrandMatcher,
    BrandRelation,
    MatchPolicy,
    TitleNormalizer,
    normalize_title,
)


@pytest.fixture
def matcher(relations, policy):
    return BrandMatcher.from_relations(relations, policy)


def test_no_known_alias_gives_empty_result():
    matcher = BrandMatcher.from_relations(
        [BrandRelation("heel", ""), BrandRelation("gum", ""), BrandRelation("rff", "")],
        MatchPolicy(),
    )

    result = matcher.match("Generic Vitamin C Tablets")

    assert result.matched_brands == []
    assert result.priority_brand is None
    assert result.brand is None
    assert not result.is_match


def test_first_word_alias_is_rejected_mid_title(matcher):
    result = matcher.match("Sensitive Gum Protection")

    assert "gum" not in result.matched_brands
    assert result.brand is None


def test_first_word_alias_matches_at_start(matcher):
    result = matcher.match("Gum Paste Relief")

    assert result.matched_brands == ["gum"]
    assert result.priority_brand == "gum"
    assert result.brand == "gum"


def test_connected_matches_resolve_to_leftmost_alias(matcher):
    result = matcher.match("Heel Contour Cream 50ml")

    assert set(result.matched_brands) == {"heel", "contour"}
    assert result.priority_brand == "heel"
    assert result.brand == matcher.lookup["heel"]


def test_matches_are_reported_longest_alias_first(matcher):
    result = matcher.match("Sunstar GUM Soft Picks")

    assert result.matched_brands == ["sunstar gum", "sunstar"]
    assert result.priority_brand == "sunstar gum"
    assert result.brand == "gum"


def test_neighbour_appearing_earlier_wins_priority():
    matcher = BrandMatcher.from_relations(
        [BrandRelation("Pierre Fabre", "Avene"), BrandRelation("Avene", "Cicalfate")],
        MatchPolicy(first_word_only=frozenset({"pierre fabre"})),
    )

    # "pierre fabre" fails its first-word rule but still wins as a neighbour of "avene"
    result = matcher.match("Eau Thermale by Pierre Fabre Avene Cream")

    assert result.matched_brands == ["avene"]
    assert result.priority_brand == "pierre fabre"
    assert result.brand == matcher.lookup["pierre fabre"]


def test_equal_position_tie_goes_to_first_candidate():
    matcher = BrandMatcher.from_relations(
        [BrandRelation("Bio", "Bioderma")],
        MatchPolicy(),
    )

    result = matcher.match("Bioderma Sensibio H2O")

    assert result.matched_brands == ["bioderma"]
    assert result.priority_brand == "bioderma"
    assert result.brand == "bio"


def test_priority_falls_back_to_first_match_when_no_candidate_is_literal():
    matcher = BrandMatcher(
        graph={"lrp": ()},
        lookup={"lrp": "lrp"},
        cache=BrandMatcher.from_relations([BrandRelation("LRP", "")], MatchPolicy()).cache,
    )

    assert matcher.select_priority_alias("something else", ["lrp"]) == "lrp"


def test_ignored_aliases_are_never_matched(matcher):
    result = matcher.match("Generic Other Paracetamol 500mg")

    assert result.matched_brands == []
    assert result.brand is None


def test_ignored_neighbours_stay_priority_candidates():
    matcher = BrandMatcher.from_relations(
        [BrandRelation("Foo", "Generic"), BrandRelation("Bar", "")],
        MatchPolicy(ignored=frozenset({"generic"})),
    )

    assert matcher.candidate_aliases(["foo"]) == ["foo", "generic"]
    result = matcher.match("Generic Bar Foo")
    assert result.matched_brands == ["foo", "bar"]
    assert result.priority_brand == "generic"
    assert result.brand == "foo"


def test_caller_normalizer_is_used_even_when_empty(relations, policy):
    normalizer = TitleNormalizer()
    matcher = BrandMatcher.from_relations(relations, policy, normalizer=normalizer)

    assert matcher.normalize is normalizer


def test_case_sensitive_alias(matcher):
    assert matcher.match("HAPPY Nappy Cream").matched_brands == ["happy"]
    assert matcher.match("happy nappy cream").matched_brands == []


def test_longer_alias_is_not_case_sensitive(matcher):
    result = matcher.match("happy baby nappy cream")

    assert result.matched_brands == ["happy baby"]
    assert result.brand == "happy"


def test_accented_title_matches_plain_alias(matcher):
    result = matcher.match("Avène Cicalfate+ 40ml")

    assert result.matched_brands == ["avène"]
    assert result.brand == "avène"
    assert result.title == "Avène Cicalfate+ 40ml"


def test_result_to_dict(matcher):
    assert matcher.match("Gum Paste Relief").to_dict() == {
        "title": "Gum Paste Relief",
        "matched_brands": ["gum"],
        "priority_brand": "gum",
        "brand": "gum",
    }


def test_reset_clears_normalization_cache(relations, policy):
    normalizer = TitleNormalizer()
    matcher = BrandMatcher.from_relations(relations, policy, normalizer=normalizer)
    matcher.match("Avène Cicalfate+")
    assert len(normalizer) > 0

    matcher.reset()

    assert len(normalizer) == 0


def test_plain_function_normalizer_needs_no_reset(relations, policy):
    matcher = BrandMatcher.from_relations(relations, policy, normalizer=normalize_title)

    matcher.reset()

    assert matcher.match("Gum Paste Relief").brand == "gum"
