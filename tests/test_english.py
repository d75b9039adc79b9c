import pytest

from lingo.languages.english.rules import IRREGULARS, UNCOUNTABLES

# Words handled by pattern rules alone: (singular, plural)
REGULAR = [
    ("cat", "cats"),
    ("dog", "dogs"),
    ("box", "boxes"),
    ("church", "churches"),
    ("dish", "dishes"),
    ("kiss", "kisses"),
    ("city", "cities"),
    ("query", "queries"),
    ("boy", "boys"),
    ("knife", "knives"),
    ("wolf", "wolves"),
    ("leaf", "leaves"),
    ("hero", "heroes"),
    ("bus", "buses"),
    ("status", "statuses"),
    ("octopus", "octopi"),
    ("quiz", "quizzes"),
    ("matrix", "matrices"),
    ("index", "indices"),
    ("mouse", "mice"),
    ("datum", "data"),
    ("analysis", "analyses"),
    ("thesis", "theses"),
    ("movie", "movies"),
    ("shoe", "shoes"),
    ("ox", "oxen"),
]


@pytest.mark.parametrize("singular,plural", REGULAR)
def test_pluralize(english, singular, plural):
    assert english.pluralize(singular) == plural


@pytest.mark.parametrize("singular,plural", REGULAR)
def test_singularize(english, singular, plural):
    assert english.singularize(plural) == singular


@pytest.mark.parametrize("singular,plural", REGULAR)
def test_plurality_of_regular_words(english, singular, plural):
    assert english.is_plural(plural)
    if not singular.endswith("s"):
        assert english.is_singular(singular)


@pytest.mark.parametrize("word", ["status", "octopus", "analysis", "thesis"])
def test_singulars_ending_in_s_test_as_plural(english, word):
    # Stripping the "s" and adding it back reproduces the word
    assert english.is_plural(word)


def test_singulars_protected_from_s_stripping(english):
    assert english.is_singular("bus")
    assert english.is_singular("kiss")


@pytest.mark.parametrize("singular,plural", REGULAR)
def test_canonical_singular_is_stable(english, singular, plural):
    canonical = english.singularize(plural)
    assert english.singularize(english.pluralize(canonical)) == canonical


def test_pluralize_is_not_idempotent(english):
    assert english.pluralize(english.pluralize("box")) == "boxeses"


@pytest.mark.parametrize(
    "plural,singular",
    [("crises", "crisis"), ("bases", "basis"), ("diagnoses", "diagnosis"), ("media", "medium")],
)
def test_more_singulars(english, plural, singular):
    assert english.singularize(plural) == singular


@pytest.mark.parametrize("word", UNCOUNTABLES)
def test_uncountable_words_are_fixed_points(english, word):
    assert english.pluralize(word) == word
    assert english.singularize(word) == word
    assert english.is_plural(word)
    assert not english.is_singular(word)


def test_uncountable_match_ignores_case(english):
    assert english.pluralize("Sheep") == "Sheep"
    assert english.is_uncountable("NEWS")


@pytest.mark.parametrize(
    "singular,plural",
    [("person", "people"), ("man", "men"), ("child", "children"), ("photo", "photos"), ("i", "we")],
)
def test_irregulars(english, singular, plural):
    assert english.pluralize(singular) == plural
    assert english.singularize(plural) == singular


def test_irregulars_skip_pattern_rules(english):
    # Pattern rules alone would give "photoes" and "videoes"
    assert english.pluralize("photo") == "photos"
    assert english.pluralize("video") == "videos"


def test_every_irregular_plural_form(english):
    for singular, plural in IRREGULARS:
        assert english.pluralize(singular) == plural


def test_shared_plural_maps_back_to_last_registered_singular(english):
    assert english.pluralize("he") == "they"
    assert english.pluralize("she") == "they"
    assert english.singularize("they") == "he"
    assert english.singularize("themselves") == "themself"


def test_self_mapped_irregular_tests_as_plural(english):
    assert english.singularize("theirs") == "theirs"
    assert english.pluralize("theirs") == "theirs"
    assert english.is_plural("theirs")
    assert not english.is_singular("theirs")


@pytest.mark.parametrize("count,plural", [(0, True), (1, False), (2, True), (11, True), (1.0, False)])
def test_number_plurality(english, count, plural):
    assert english.is_plural(count) is plural
    assert english.is_singular(count) is not plural


def test_english_uses_the_shared_number_test(english):
    assert english.rules.plural_number_test is None


def test_unknown_shape_is_left_alone(english):
    assert english.singularize("sky") == "sky"
