"""
Regular suffixation rules for English inflection.

Each rule maps a base form to one inflected form.
The rules know nothing about irregular words;
`InflectionEngine` consults the irregular forms before falling back to them.
"""
import re

_CONSONANT_Y = re.compile(r"[b-df-hj-np-tv-z]y$")
_SIBILANT_ENDING = re.compile(r"([sxz]|[cs]h)$")
_DROPPABLE_E = re.compile(r"[^iyeo]e$")


def ends_in_consonant_y(base_form: str) -> bool:
    return _CONSONANT_Y.search(base_form) is not None


def ends_in_sibilant(base_form: str) -> bool:
    return _SIBILANT_ENDING.search(base_form) is not None


def double_final_consonant(base_form: str) -> str:
    return base_form + base_form[-1]


def regular_plural_noun(base_form: str) -> str:
    """
    *fly* becomes *flies*; *box*, *church* become *boxes*, *churches*; *dog* becomes *dogs*.
    """
    if ends_in_consonant_y(base_form):
        return base_form[:-1] + "ies"
    elif ends_in_sibilant(base_form):
        return base_form + "es"
    else:
        return base_form + "s"


def greco_latin_plural_noun(base_form: str) -> str:
    """
    Plurals of Greek and Latin nouns, e.g. *focus*, *foci*; *trauma*, *traumata*;
    *larva*, *larvae*; *taxon*, *taxa*; *analysis*, *analyses*; *cystis*, *cystides*;
    *foramen*, *foramina*; *index*, *indices*; *matrix*, *matrices*.

    Words matching none of these endings are returned unchanged.
    """
    if base_form.endswith("us"):
        return base_form[:-2] + "i"
    elif base_form.endswith("ma"):
        return base_form + "ta"
    elif base_form.endswith("a"):
        return base_form + "e"
    elif base_form.endswith("um") or base_form.endswith("on"):
        return base_form[:-2] + "a"
    elif base_form.endswith("sis"):
        return base_form[:-3] + "ses"
    elif base_form.endswith("is"):
        return base_form[:-2] + "ides"
    elif base_form.endswith("men"):
        return base_form[:-3] + "mina"
    elif base_form.endswith("ex"):
        return base_form[:-2] + "ices"
    elif base_form.endswith("x"):
        return base_form[:-1] + "ces"
    else:
        return base_form


def present3s_verb(base_form: str) -> str:
    """
    *preach* becomes *preaches*; *fly* becomes *flies*; *walk* becomes *walks*.
    """
    if ends_in_sibilant(base_form):
        return base_form + "es"
    elif ends_in_consonant_y(base_form):
        return base_form[:-1] + "ies"
    else:
        return base_form + "s"


def regular_past_verb(base_form: str) -> str:
    """
    Past tense (and past participle) of a regular verb:
    *chase* becomes *chased*; *dry* becomes *dried*; *walk* becomes *walked*.
    """
    if base_form.endswith("e"):
        return base_form + "d"
    elif ends_in_consonant_y(base_form):
        return base_form[:-1] + "ied"
    else:
        return base_form + "ed"


def double_past_verb(base_form: str) -> str:
    """
    *tug* becomes *tugged*.
    """
    return double_final_consonant(base_form) + "ed"


def regular_present_participle_verb(base_form: str) -> str:
    """
    *tie* becomes *tying*; *canoe* becomes *canoeing*; *chase* becomes *chasing*;
    *dry* becomes *drying*.
    """
    if base_form.endswith("ie"):
        return base_form[:-2] + "ying"
    elif _DROPPABLE_E.search(base_form):
        return base_form[:-1] + "ing"
    else:
        return base_form + "ing"


def double_present_participle_verb(base_form: str) -> str:
    """
    *tug* becomes *tugging*.
    """
    return double_final_consonant(base_form) + "ing"


def regular_comparative(base_form: str) -> str:
    """
    *happy* becomes *happier*; *nice* becomes *nicer*; *fast* becomes *faster*.
    """
    if ends_in_consonant_y(base_form):
        return base_form[:-1] + "ier"
    elif base_form.endswith("e"):
        return base_form + "r"
    else:
        return base_form + "er"


def double_comparative(base_form: str) -> str:
    """
    *big* becomes *bigger*.
    """
    return double_final_consonant(base_form) + "er"


def regular_superlative(base_form: str) -> str:
    """
    *happy* becomes *happiest*; *nice* becomes *nicest*; *fast* becomes *fastest*.
    """
    if ends_in_consonant_y(base_form):
        return base_form[:-1] + "iest"
    elif base_form.endswith("e"):
        return base_form + "st"
    else:
        return base_form + "est"


def double_superlative(base_form: str) -> str:
    """
    *big* becomes *biggest*.
    """
    return double_final_consonant(base_form) + "est"
