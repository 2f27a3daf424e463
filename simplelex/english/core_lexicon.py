"""
A small lexicon of common English words.

Identifiers follow the EUI scheme of the NIH Specialist Lexicon.
"""
from simplelex.categories import LexicalCategory
from simplelex.records import RawEntryRecord

_NOUN = LexicalCategory.NOUN
_VERB = LexicalCategory.VERB
_ADJECTIVE = LexicalCategory.ADJECTIVE
_ADVERB = LexicalCategory.ADVERB
_MODAL = LexicalCategory.MODAL


def _irregular_verb(
    identifier,
    base_form,
    present3s,
    past,
    past_participle,
    present_participle,
    **features,
):
    return RawEntryRecord(
        identifier,
        base_form,
        _VERB,
        features=features,
        variant_forms={
            "irreg": {
                "present3s": present3s,
                "past": past,
                "past_participle": past_participle,
                "present_participle": present_participle,
            }
        },
    )


# "can" is the only word with homographs in three categories
CAN_MODAL = RawEntryRecord(
    "E0014335",
    "can",
    _MODAL,
    variant_forms={"irreg": {"past": "could"}},
    primary=True,
)
CAN_NOUN = RawEntryRecord("E0014336", "can", _NOUN)
CAN_VERB = RawEntryRecord("E0014337", "can", _VERB, inflections=["regd"])

BE = _irregular_verb(
    "E0012086", "be", "is", "was", "been", "being", intransitive=True, transitive=True
)
DO = _irregular_verb("E0023254", "do", "does", "did", "done", "doing", transitive=True)
EAT = _irregular_verb(
    "E0024376",
    "eat",
    "eats",
    "ate",
    "eaten",
    "eating",
    intransitive=True,
    transitive=True,
    ditransitive=False,
)
GO = _irregular_verb("E0030508", "go", "goes", "went", "gone", "going", intransitive=True)
HAVE = _irregular_verb(
    "E0031210", "have", "has", "had", "had", "having", transitive=True
)
SAY = _irregular_verb(
    "E0054448", "say", "says", "said", "said", "saying", transitive=True
)

GOOD = RawEntryRecord(
    "E0030559",
    "good",
    _ADJECTIVE,
    features={
        "qualitative": True,
        "predicative": True,
        "colour": False,
        "classifying": False,
    },
    variant_forms={"irreg": {"comparative": "better", "superlative": "best"}},
)
WELL = RawEntryRecord(
    "E0066473",
    "well",
    _ADVERB,
    features={"verb_modifier": True},
    variant_forms={"irreg": {"comparative": "better", "superlative": "best"}},
)
QUICKLY = RawEntryRecord(
    "E0051632",
    "quickly",
    _ADVERB,
    features={"verb_modifier": True, "sentence_modifier": False, "intensifier": False},
)

MAN = RawEntryRecord(
    "E0038767", "man", _NOUN, variant_forms={"irreg": {"plural": "men"}}
)
WOMAN = RawEntryRecord(
    "E0067023",
    "woman",
    _NOUN,
    features={"proper": False},
    variant_forms={"irreg": {"plural": "women"}},
)
SAND = RawEntryRecord("E0054515", "sand", _NOUN, inflections=["uncount"])

ENGLISH_CORE_LEXICON_RECORDS = (
    CAN_MODAL,
    CAN_NOUN,
    CAN_VERB,
    RawEntryRecord(
        "E0066612", "will", _MODAL, variant_forms={"irreg": {"past": "would"}}
    ),
    RawEntryRecord(
        "E0038862", "may", _MODAL, variant_forms={"irreg": {"past": "might"}}
    ),
    BE,
    DO,
    EAT,
    GO,
    HAVE,
    SAY,
    RawEntryRecord("E0011730", "walk", _VERB, features={"intransitive": True}),
    RawEntryRecord("E0016022", "chase", _VERB, features={"transitive": True}),
    RawEntryRecord("E0062383", "try", _VERB),
    RawEntryRecord("E0061213", "tie", _VERB),
    RawEntryRecord("E0063174", "tug", _VERB, inflections=["regd"]),
    MAN,
    WOMAN,
    SAND,
    RawEntryRecord("E0066153", "water", _NOUN, inflections=["uncount"]),
    RawEntryRecord("E0062098", "tree", _NOUN),
    RawEntryRecord("E0023355", "dog", _NOUN),
    RawEntryRecord("E0013422", "box", _NOUN),
    RawEntryRecord("E0016576", "church", _NOUN),
    RawEntryRecord("E0012137", "baby", _NOUN),
    RawEntryRecord("E0028049", "fly", _NOUN),
    RawEntryRecord("E0028521", "focus", _NOUN, inflections=["glreg"]),
    RawEntryRecord("E0039187", "matrix", _NOUN, inflections=["glreg"]),
    RawEntryRecord(
        "E0056099", "sheep", _NOUN, variant_forms={"irreg": {"plural": "sheep"}}
    ),
    GOOD,
    RawEntryRecord(
        "E0031020",
        "happy",
        _ADJECTIVE,
        features={"qualitative": True, "predicative": True},
    ),
    RawEntryRecord("E0042451", "nice", _ADJECTIVE, features={"qualitative": True}),
    RawEntryRecord("E0012679", "big", _ADJECTIVE, inflections=["regd"]),
    RawEntryRecord(
        "E0052880",
        "red",
        _ADJECTIVE,
        features={"colour": True},
        inflections=["regd"],
    ),
    RawEntryRecord("E0026575", "fast", _ADJECTIVE),
    RawEntryRecord("E0026576", "fast", _ADVERB),
    WELL,
    QUICKLY,
    RawEntryRecord("E0056240", "she", LexicalCategory.PRONOUN),
    RawEntryRecord("E0060755", "the", LexicalCategory.DETERMINER),
    RawEntryRecord("E0009526", "and", LexicalCategory.CONJUNCTION),
    RawEntryRecord("E0060750", "that", LexicalCategory.COMPLEMENTISER),
    RawEntryRecord("E0033961", "in", LexicalCategory.PREPOSITION),
    RawEntryRecord("E0044003", "oh", LexicalCategory.INTERJECTION),
)
r"""
The `RawEntryRecord`\ s of the built-in English lexicon.
"""
