"""
Undoing the regular suffixation rules.

Given a surface form, these functions propose the base forms it might have been built from.
Proposals are deliberately generous (*likes* proposes both *like* and *lik*);
`InflectionEngine` keeps only those which name a real word
and which regenerate the surface form exactly.
"""
from typing import Iterable, List, Tuple

from immutablecollections import immutableset

from simplelex.features import LexicalFeature

# (suffix, replacement) pairs undoing Greco-Latin plurals
_GRECO_LATIN_ENDINGS = (
    ("i", "us"),
    ("mata", "ma"),
    ("ae", "a"),
    ("a", "um"),
    ("a", "on"),
    ("ses", "sis"),
    ("ides", "is"),
    ("mina", "men"),
    ("ices", "ex"),
    ("ces", "x"),
)


def _strip_suffix(surface_form: str, suffix: str) -> List[str]:
    """
    Candidate stems for *surface_form* with *suffix* removed:
    the bare stem, the stem with an *e* restored, and the stem with a doubled final
    consonant undone.
    """
    if not surface_form.endswith(suffix) or len(surface_form) <= len(suffix):
        return []
    stem = surface_form[: -len(suffix)]
    ret = [stem, stem + "e"]
    if len(stem) > 2 and stem[-1] == stem[-2]:
        ret.append(stem[:-1])
    return ret


def _strip_y_suffix(surface_form: str, y_suffix: str) -> List[str]:
    # flies -> fly, tried -> try, happier -> happy
    if surface_form.endswith(y_suffix) and len(surface_form) > len(y_suffix):
        return [surface_form[: -len(y_suffix)] + "y"]
    return []


def plural_noun_candidates(surface_form: str) -> List[str]:
    ret = _strip_y_suffix(surface_form, "ies")
    if surface_form.endswith("es"):
        ret.append(surface_form[:-2])
    if surface_form.endswith("s") and not surface_form.endswith("ss"):
        ret.append(surface_form[:-1])
    for (suffix, replacement) in _GRECO_LATIN_ENDINGS:
        if surface_form.endswith(suffix) and len(surface_form) > len(suffix):
            ret.append(surface_form[: -len(suffix)] + replacement)
    return ret


def present3s_candidates(surface_form: str) -> List[str]:
    ret = _strip_y_suffix(surface_form, "ies")
    if surface_form.endswith("es"):
        ret.append(surface_form[:-2])
    if surface_form.endswith("s"):
        ret.append(surface_form[:-1])
    return ret


def past_candidates(surface_form: str) -> List[str]:
    ret = _strip_y_suffix(surface_form, "ied")
    ret.extend(_strip_suffix(surface_form, "ed"))
    if surface_form.endswith("d"):
        # chased -> chase
        ret.append(surface_form[:-1])
    return ret


def present_participle_candidates(surface_form: str) -> List[str]:
    ret = []
    if surface_form.endswith("ying") and len(surface_form) > 4:
        # tying -> tie
        ret.append(surface_form[:-4] + "ie")
    ret.extend(_strip_suffix(surface_form, "ing"))
    return ret


def comparative_candidates(surface_form: str) -> List[str]:
    ret = _strip_y_suffix(surface_form, "ier")
    ret.extend(_strip_suffix(surface_form, "er"))
    if surface_form.endswith("r"):
        # nicer -> nice
        ret.append(surface_form[:-1])
    return ret


def superlative_candidates(surface_form: str) -> List[str]:
    ret = _strip_y_suffix(surface_form, "iest")
    ret.extend(_strip_suffix(surface_form, "est"))
    if surface_form.endswith("st"):
        # nicest -> nice
        ret.append(surface_form[:-2])
    return ret


_CANDIDATE_FUNCTIONS = {
    LexicalFeature.PLURAL: plural_noun_candidates,
    LexicalFeature.PRESENT3S: present3s_candidates,
    LexicalFeature.PAST: past_candidates,
    LexicalFeature.PAST_PARTICIPLE: past_candidates,
    LexicalFeature.PRESENT_PARTICIPLE: present_participle_candidates,
    LexicalFeature.COMPARATIVE: comparative_candidates,
    LexicalFeature.SUPERLATIVE: superlative_candidates,
}


def candidate_base_forms(
    surface_form: str, features: Iterable[LexicalFeature]
) -> Tuple[Tuple[str, LexicalFeature], ...]:
    """
    Propose (base form, form slot) pairs from which *surface_form* might have been built
    by a suffixation rule.

    Args:
        surface_form: the possibly-inflected form to analyse
        features: the form slots to consider

    Returns:
        Distinct (base form, form slot) proposals, in the order the slots were given.
    """
    return tuple(
        immutableset(
            (candidate, feature)
            for feature in features
            if feature in _CANDIDATE_FUNCTIONS
            for candidate in _CANDIDATE_FUNCTIONS[feature](surface_form)
            if candidate and candidate != surface_form
        )
    )
