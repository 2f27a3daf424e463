"""
The built-in table of irregular English forms.
"""
from simplelex.categories import LexicalCategory
from simplelex.features import LexicalFeature
from simplelex.morphology.irregular import irregular_form_table

_NOUN = LexicalCategory.NOUN
_VERB = LexicalCategory.VERB
_ADJECTIVE = LexicalCategory.ADJECTIVE
_ADVERB = LexicalCategory.ADVERB
_MODAL = LexicalCategory.MODAL

_PLURAL = LexicalFeature.PLURAL
_PRESENT3S = LexicalFeature.PRESENT3S
_PAST = LexicalFeature.PAST
_PAST_PARTICIPLE = LexicalFeature.PAST_PARTICIPLE
_PRESENT_PARTICIPLE = LexicalFeature.PRESENT_PARTICIPLE
_COMPARATIVE = LexicalFeature.COMPARATIVE
_SUPERLATIVE = LexicalFeature.SUPERLATIVE


def _verb(base_form, present3s, past, past_participle, present_participle=None):
    ret = [
        (_VERB, base_form, _PRESENT3S, present3s),
        (_VERB, base_form, _PAST, past),
        (_VERB, base_form, _PAST_PARTICIPLE, past_participle),
    ]
    if present_participle:
        ret.append((_VERB, base_form, _PRESENT_PARTICIPLE, present_participle))
    return ret


def _compared(category, base_form, comparative, superlative):
    return [
        (category, base_form, _COMPARATIVE, comparative),
        (category, base_form, _SUPERLATIVE, superlative),
    ]


ENGLISH_IRREGULAR_FORMS = irregular_form_table(
    [
        # "am" and "are" fill no form slot and are only ever analysed
        (_VERB, "be", None, ("am", "are")),
        *_verb("be", ("is",), ("was", "were"), ("been",), ("being",)),
        *_verb("have", ("has",), ("had",), ("had",)),
        *_verb("do", ("does",), ("did",), ("done",)),
        *_verb("go", ("goes",), ("went",), ("gone",)),
        *_verb("say", ("says",), ("said",), ("said",)),
        *_verb("see", ("sees",), ("saw",), ("seen",)),
        *_verb("eat", ("eats",), ("ate",), ("eaten",)),
        *_verb("give", ("gives",), ("gave",), ("given",)),
        *_verb("take", ("takes",), ("took",), ("taken",)),
        *_verb("make", ("makes",), ("made",), ("made",)),
        *_verb("come", ("comes",), ("came",), ("come",)),
        *_verb("get", ("gets",), ("got",), ("gotten", "got"), ("getting",)),
        *_verb("know", ("knows",), ("knew",), ("known",)),
        *_verb("think", ("thinks",), ("thought",), ("thought",)),
        *_verb("run", ("runs",), ("ran",), ("run",), ("running",)),
        *_verb("write", ("writes",), ("wrote",), ("written",)),
        (_MODAL, "can", _PAST, ("could",)),
        (_MODAL, "will", _PAST, ("would",)),
        (_MODAL, "shall", _PAST, ("should",)),
        (_MODAL, "may", _PAST, ("might",)),
        (_NOUN, "man", _PLURAL, ("men",)),
        (_NOUN, "woman", _PLURAL, ("women",)),
        (_NOUN, "child", _PLURAL, ("children",)),
        (_NOUN, "person", _PLURAL, ("people",)),
        (_NOUN, "mouse", _PLURAL, ("mice",)),
        (_NOUN, "foot", _PLURAL, ("feet",)),
        (_NOUN, "tooth", _PLURAL, ("teeth",)),
        (_NOUN, "goose", _PLURAL, ("geese",)),
        (_NOUN, "sheep", _PLURAL, ("sheep",)),
        (_NOUN, "fish", _PLURAL, ("fish",)),
        *_compared(_ADJECTIVE, "good", ("better",), ("best",)),
        *_compared(_ADJECTIVE, "bad", ("worse",), ("worst",)),
        *_compared(_ADJECTIVE, "far", ("farther", "further"), ("farthest", "furthest")),
        *_compared(_ADJECTIVE, "little", ("less",), ("least",)),
        *_compared(_ADJECTIVE, "many", ("more",), ("most",)),
        *_compared(_ADJECTIVE, "much", ("more",), ("most",)),
        *_compared(_ADVERB, "well", ("better",), ("best",)),
        *_compared(_ADVERB, "badly", ("worse",), ("worst",)),
        *_compared(_ADVERB, "far", ("farther", "further"), ("farthest", "furthest")),
    ]
)
r"""
Irregular forms of common English words.

A `Lexicon` consults this table before applying any suffixation rule.
"""
