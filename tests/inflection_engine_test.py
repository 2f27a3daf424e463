from lexicon_test_utils import (
    ENGLISH_TESTING_LEXICON,
    REGULAR_TESTING_RECORDS,
    lexicon_of,
)
from more_itertools import only

from simplelex.categories import Inflection, LexicalCategory
from simplelex.english import english_lexicon
from simplelex.features import LexicalFeature
from simplelex.morphology import AnalysisSource
from simplelex.records import RawEntryRecord

REGULAR_LEXICON = lexicon_of(*REGULAR_TESTING_RECORDS)


def _inflect(lexicon, base_form, category, form, **kwargs):
    return lexicon.inflect(lexicon.get_word(base_form, category), form, **kwargs)


def test_regular_inflection():
    assert (
        _inflect(REGULAR_LEXICON, "baby", LexicalCategory.NOUN, LexicalFeature.PLURAL)
        == "babies"
    )
    assert (
        _inflect(REGULAR_LEXICON, "focus", LexicalCategory.NOUN, LexicalFeature.PLURAL)
        == "foci"
    )
    assert (
        _inflect(REGULAR_LEXICON, "tug", LexicalCategory.VERB, LexicalFeature.PAST)
        == "tugged"
    )
    assert (
        _inflect(
            REGULAR_LEXICON, "tug", LexicalCategory.VERB, LexicalFeature.PRESENT3S
        )
        == "tugs"
    )
    assert (
        _inflect(
            REGULAR_LEXICON, "big", LexicalCategory.ADJECTIVE, LexicalFeature.SUPERLATIVE
        )
        == "biggest"
    )
    assert (
        _inflect(
            REGULAR_LEXICON, "fast", LexicalCategory.ADVERB, LexicalFeature.COMPARATIVE
        )
        == "faster"
    )


def test_inflect_rejects_foreign_form_slots():
    assert (
        _inflect(REGULAR_LEXICON, "dog", LexicalCategory.NOUN, LexicalFeature.PAST)
        is None
    )
    assert (
        _inflect(REGULAR_LEXICON, "walk", LexicalCategory.VERB, LexicalFeature.PROPER)
        is None
    )


def test_inflect_requires_declared_variant():
    assert (
        _inflect(
            REGULAR_LEXICON,
            "dog",
            LexicalCategory.NOUN,
            LexicalFeature.PLURAL,
            inflection=Inflection.GRECO_LATIN_REGULAR,
        )
        is None
    )


def test_irregular_forms_beat_rules():
    assert (
        _inflect(ENGLISH_TESTING_LEXICON, "go", LexicalCategory.VERB, LexicalFeature.PAST)
        == "went"
    )
    assert (
        _inflect(
            ENGLISH_TESTING_LEXICON,
            "be",
            LexicalCategory.VERB,
            LexicalFeature.PRESENT_PARTICIPLE,
        )
        == "being"
    )
    assert (
        _inflect(
            ENGLISH_TESTING_LEXICON, "woman", LexicalCategory.NOUN, LexicalFeature.PLURAL
        )
        == "women"
    )


def test_uncount_and_invariant_words():
    lexicon = lexicon_of(
        RawEntryRecord("N1", "sand", "noun", inflections=["uncount"]),
        RawEntryRecord("N2", "sheep", "noun", inflections=["inv"]),
        RawEntryRecord("N3", "fish", "noun", inflections=["reg", "uncount"]),
    )
    sand = lexicon.get_word("sand")
    assert lexicon.inflect(sand, LexicalFeature.PLURAL) == "sand"
    assert lexicon.inflect(lexicon.get_word("sheep"), LexicalFeature.PLURAL) is None
    fish = lexicon.get_word("fish")
    assert lexicon.inflect(fish, LexicalFeature.PLURAL) == "fishes"
    assert (
        lexicon.inflect(fish, LexicalFeature.PLURAL, inflection=Inflection.UNCOUNT)
        == "fish"
    )


def test_modals_have_no_regular_forms():
    lexicon = lexicon_of(RawEntryRecord("M1", "must", "modal"))
    assert lexicon.inflect(lexicon.get_word("must"), LexicalFeature.PAST) is None
    assert (
        _inflect(
            ENGLISH_TESTING_LEXICON, "can", LexicalCategory.MODAL, LexicalFeature.PAST
        )
        == "could"
    )


def test_inflected_forms():
    walk = REGULAR_LEXICON.get_word("walk")
    assert dict(REGULAR_LEXICON.inflected_forms(walk)) == {
        LexicalFeature.PRESENT3S: "walks",
        LexicalFeature.PAST: "walked",
        LexicalFeature.PAST_PARTICIPLE: "walked",
        LexicalFeature.PRESENT_PARTICIPLE: "walking",
    }
    assert not ENGLISH_TESTING_LEXICON.inflected_forms(
        ENGLISH_TESTING_LEXICON.get_word("the")
    )


def test_analysis_sources():
    went = ENGLISH_TESTING_LEXICON.analyse("went")
    assert [
        (analysis.entry.base_form, analysis.feature, analysis.source) for analysis in went
    ] == [("go", LexicalFeature.PAST, AnalysisSource.IRREGULAR)]
    (dogs,) = ENGLISH_TESTING_LEXICON.analyse("dogs")
    assert dogs.entry.base_form == "dog"
    assert dogs.feature is LexicalFeature.PLURAL
    assert dogs.source is AnalysisSource.GENERATIVE
    (tree,) = ENGLISH_TESTING_LEXICON.analyse("tree")
    assert tree.feature is None
    assert tree.source is AnalysisSource.BASE_FORM
    (am,) = ENGLISH_TESTING_LEXICON.analyse("am")
    assert am.entry.base_form == "be"
    assert am.feature is None
    assert am.source is AnalysisSource.IRREGULAR


def test_analysis_ranking():
    better = ENGLISH_TESTING_LEXICON.analyse("better")
    assert [analysis.entry.base_form for analysis in better] == ["good", "well"]
    cans = ENGLISH_TESTING_LEXICON.analyse("cans")
    assert [analysis.entry.category for analysis in cans] == [
        LexicalCategory.NOUN,
        LexicalCategory.VERB,
    ]
    assert [
        analysis.entry.category
        for analysis in ENGLISH_TESTING_LEXICON.analyse("cans", LexicalCategory.VERB)
    ] == [LexicalCategory.VERB]


def test_analysis_regenerates_surface_form():
    # "walkes" strips to "walk" but "walk" makes "walks"
    assert not REGULAR_LEXICON.analyse("walkes")
    # "run" does not double its final consonant
    lexicon = lexicon_of(RawEntryRecord("V1", "run", "verb"))
    assert not lexicon.analyse("runned")
    assert only(lexicon.analyse("runed")).entry.base_form == "run"
    # the listed past "went" wins over the rule
    assert not ENGLISH_TESTING_LEXICON.analyse("goed")
    assert not ENGLISH_TESTING_LEXICON.analyse("akjmchsgk")


def test_homographs_keep_their_own_forms():
    lexicon = lexicon_of(
        RawEntryRecord(
            "L1",
            "lie",
            "verb",
            variant_forms={"irreg": {"past": "lay", "past_participle": "lain"}},
        ),
        RawEntryRecord("L2", "lie", "verb"),
    )
    recline = lexicon.get_word_by_id("L1")
    deceive = lexicon.get_word_by_id("L2")
    assert lexicon.inflect(recline, LexicalFeature.PAST) == "lay"
    assert lexicon.inflect(deceive, LexicalFeature.PAST) == "lied"
    assert lexicon.inflect(deceive, LexicalFeature.PAST_PARTICIPLE) == "lied"
    assert [analysis.entry for analysis in lexicon.analyse("lay")] == [recline]
    assert [analysis.entry for analysis in lexicon.analyse("lain")] == [recline]
    assert [analysis.entry for analysis in lexicon.analyse("lied")] == [deceive]


def test_forms_listed_as_features():
    lexicon = lexicon_of(
        RawEntryRecord("N1", "octopus", "noun", features={"plural": "octopodes"})
    )
    octopus = lexicon.get_word("octopus")
    assert lexicon.inflect(octopus, LexicalFeature.PLURAL) == "octopodes"
    assert only(lexicon.analyse("octopodes")).entry is octopus


def test_regular_variants_ignore_shared_irregular_forms():
    lexicon = english_lexicon(
        [
            RawEntryRecord("G1", "get", "verb", inflections=["regd", "irreg"]),
            RawEntryRecord("S1", "see", "verb"),
        ]
    )
    get = lexicon.get_word("get")
    assert (
        lexicon.inflect(get, LexicalFeature.PAST, inflection=Inflection.REGULAR_DOUBLE)
        == "getted"
    )
    assert lexicon.inflect(get, LexicalFeature.PAST) == "getted"
    assert (
        lexicon.inflect(get, LexicalFeature.PAST, inflection=Inflection.IRREGULAR)
        == "got"
    )
    assert only(lexicon.analyse("got")).entry is get
    assert only(lexicon.analyse("getted")).entry is get
    # a regular word with no irregular variant of its own takes the shared forms
    see = lexicon.get_word("see")
    assert lexicon.inflect(see, LexicalFeature.PAST) == "saw"
    assert not lexicon.analyse("seed")
