import pytest
from lexicon_test_utils import (
    ENGLISH_TESTING_LEXICON,
    REGULAR_TESTING_RECORDS,
    lexicon_of,
)

from simplelex.categories import Inflection, LexicalCategory
from simplelex.english.core_lexicon import ENGLISH_CORE_LEXICON_RECORDS
from simplelex.features import LexicalFeature, inflectional_features
from simplelex.lexicon import Lexicon
from simplelex.records import MalformedSourceError, RawEntryRecord


def test_every_word_is_found_by_id():
    for entry in ENGLISH_TESTING_LEXICON:
        assert ENGLISH_TESTING_LEXICON.get_word_by_id(entry.identifier) is entry
        assert ENGLISH_TESTING_LEXICON.has_word_by_id(entry.identifier)
    assert len(ENGLISH_TESTING_LEXICON) == len(ENGLISH_CORE_LEXICON_RECORDS)


def test_every_word_is_found_by_base_form():
    for entry in ENGLISH_TESTING_LEXICON:
        assert ENGLISH_TESTING_LEXICON.has_word(entry.base_form, entry.category)
        assert entry in ENGLISH_TESTING_LEXICON.get_words(entry.base_form, entry.category)


def test_unknown_words():
    assert not ENGLISH_TESTING_LEXICON.get_words("akjmchsgk")
    assert ENGLISH_TESTING_LEXICON.get_word("akjmchsgk") is None
    assert not ENGLISH_TESTING_LEXICON.has_word("akjmchsgk")
    assert ENGLISH_TESTING_LEXICON.get_word_by_id("E404") is None
    assert ENGLISH_TESTING_LEXICON.get_word_from_variant("akjmchsgk") is None
    assert ENGLISH_TESTING_LEXICON.lookup_word("akjmchsgk") is None


def test_homographs():
    assert len(ENGLISH_TESTING_LEXICON.get_words("can")) == 3
    assert len(ENGLISH_TESTING_LEXICON.get_words("can", LexicalCategory.NOUN)) == 1
    assert not ENGLISH_TESTING_LEXICON.get_words("can", LexicalCategory.ADJECTIVE)
    # the modal is marked as the primary sense
    assert ENGLISH_TESTING_LEXICON.get_word("can").category is LexicalCategory.MODAL


def test_tree():
    assert ENGLISH_TESTING_LEXICON.has_word("tree")
    assert not ENGLISH_TESTING_LEXICON.has_word("tree", LexicalCategory.ADVERB)


def test_good():
    good = ENGLISH_TESTING_LEXICON.get_word("good", LexicalCategory.ADJECTIVE)
    assert good.get_feature_as_string(LexicalFeature.COMPARATIVE) == "better"
    assert good.get_feature_as_string(LexicalFeature.SUPERLATIVE) == "best"
    assert good.get_feature_as_boolean(LexicalFeature.QUALITATIVE) is True
    assert good.get_feature_as_boolean(LexicalFeature.PREDICATIVE) is True
    assert good.get_feature_as_boolean(LexicalFeature.COLOUR) is False
    assert good.get_feature_as_boolean(LexicalFeature.CLASSIFYING) is False


def test_woman():
    woman = ENGLISH_TESTING_LEXICON.get_word("woman")
    assert woman.get_feature_as_string(LexicalFeature.PLURAL) == "women"
    assert woman.get_feature_as_string(LexicalFeature.ACRONYM_OF) is None
    assert woman.get_feature_as_boolean(LexicalFeature.PROPER) is False
    assert not woman.has_inflectional_variant(Inflection.UNCOUNT)
    assert woman.get_feature_as_string(LexicalFeature.DEFAULT_INFL) == "irregular"


def test_uncountable_nouns_never_pluralise():
    sand = ENGLISH_TESTING_LEXICON.get_word("sand", LexicalCategory.NOUN)
    assert sand.has_inflectional_variant(Inflection.UNCOUNT)
    assert sand.default_inflection is Inflection.UNCOUNT
    assert ENGLISH_TESTING_LEXICON.inflect(sand, LexicalFeature.PLURAL) == "sand"


def test_quickly():
    quickly = ENGLISH_TESTING_LEXICON.get_word_by_id("E0051632")
    assert quickly.base_form == "quickly"
    assert quickly.category is LexicalCategory.ADVERB
    assert quickly.get_feature_as_boolean(LexicalFeature.VERB_MODIFIER) is True
    assert quickly.get_feature_as_boolean(LexicalFeature.SENTENCE_MODIFIER) is False
    assert quickly.get_feature_as_boolean(LexicalFeature.INTENSIFIER) is False


def test_eat():
    eat = ENGLISH_TESTING_LEXICON.get_word_from_variant("eating")
    assert eat.base_form == "eat"
    assert eat.category is LexicalCategory.VERB
    assert eat.get_feature_as_boolean(LexicalFeature.INTRANSITIVE) is True
    assert eat.get_feature_as_boolean(LexicalFeature.TRANSITIVE) is True
    assert eat.get_feature_as_boolean(LexicalFeature.DITRANSITIVE) is False


def test_be():
    be = ENGLISH_TESTING_LEXICON.get_word_from_variant("is", LexicalCategory.VERB)
    assert be.base_form == "be"
    assert be.get_feature_as_string(LexicalFeature.PAST_PARTICIPLE) == "been"
    assert ENGLISH_TESTING_LEXICON.get_word_from_variant("were") is be
    assert ENGLISH_TESTING_LEXICON.get_word_from_variant("are") is be
    assert ENGLISH_TESTING_LEXICON.has_word_from_variant("am", LexicalCategory.VERB)
    assert not ENGLISH_TESTING_LEXICON.has_word_from_variant("am", LexicalCategory.NOUN)


def test_modal():
    can = ENGLISH_TESTING_LEXICON.get_word("can", LexicalCategory.MODAL)
    assert can.get_feature_as_string(LexicalFeature.PAST) == "could"
    assert ENGLISH_TESTING_LEXICON.get_word_from_variant("could") is can


def test_man():
    man = ENGLISH_TESTING_LEXICON.lookup_word("man", LexicalCategory.NOUN)
    assert man.identifier == "E0038767"
    assert man.get_feature(LexicalFeature.PLURAL) == "men"
    assert ENGLISH_TESTING_LEXICON.get_word_from_variant("men") is man


def test_lookup_word():
    assert (
        ENGLISH_TESTING_LEXICON.lookup_word("say", LexicalCategory.VERB).base_form
        == "say"
    )
    assert (
        ENGLISH_TESTING_LEXICON.lookup_word("said", LexicalCategory.VERB).base_form
        == "say"
    )
    assert (
        ENGLISH_TESTING_LEXICON.lookup_word("E0054448", LexicalCategory.VERB).base_form
        == "say"
    )
    assert ENGLISH_TESTING_LEXICON.lookup_word("E0054448", LexicalCategory.NOUN) is None


def test_variant_lookup_goes_through_analysis():
    # "fly" is a base form, but only of a noun
    assert ENGLISH_TESTING_LEXICON.lookup_word("fly", LexicalCategory.VERB) is None
    assert ENGLISH_TESTING_LEXICON.get_word_from_variant("flies").base_form == "fly"
    assert (
        ENGLISH_TESTING_LEXICON.get_word_from_variant("tree")
        is ENGLISH_TESTING_LEXICON.get_word("tree")
    )


def test_regular_round_trip():
    lexicon = lexicon_of(*REGULAR_TESTING_RECORDS)
    for entry in lexicon:
        for form in inflectional_features(entry.category):
            surface_form = lexicon.inflect(entry, form)
            assert lexicon.get_word_from_variant(surface_form, entry.category) is entry


def test_irregular_round_trip():
    for base_form in ("be", "do", "go", "have", "say", "eat"):
        entry = ENGLISH_TESTING_LEXICON.get_word(base_form, LexicalCategory.VERB)
        forms = ENGLISH_TESTING_LEXICON.inflected_forms(entry)
        for (form, surface_form) in forms.items():
            assert (
                ENGLISH_TESTING_LEXICON.get_word_from_variant(
                    surface_form, LexicalCategory.VERB
                )
                is entry
            ), f"{surface_form} ({form}) of {entry}"


def test_duplicate_identifiers():
    with pytest.raises(MalformedSourceError) as error:
        Lexicon.from_records(
            [
                RawEntryRecord("E1", "dog", "noun"),
                RawEntryRecord("E2", "cat", "noun"),
                RawEntryRecord("E1", "bird", "noun"),
            ]
        )
    assert error.value.position == 2
    assert error.value.record.base_form == "bird"


def test_one_bad_record_spoils_the_lexicon():
    with pytest.raises(MalformedSourceError):
        Lexicon.from_records(
            [RawEntryRecord("E1", "dog", "noun"), RawEntryRecord("E2", "cat", "feline")]
        )


def test_empty_lexicon():
    lexicon = Lexicon.from_records([])
    assert len(lexicon) == 0
    assert lexicon.lookup_word("dog") is None


def test_non_string_category_is_malformed():
    with pytest.raises(MalformedSourceError) as error:
        Lexicon.from_records([RawEntryRecord("E1", "dog", 5)])
    assert error.value.position == 0
