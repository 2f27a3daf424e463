r"""
Closed vocabularies for describing words: lexical categories and inflection kinds.
"""
from enum import Enum, auto
from typing import Any, Mapping, Optional, Union

from immutablecollections import immutabledict


class LexicalCategory(Enum):
    r"""
    The grammatical category of a `WordEntry`.

    The declaration order matters:
    when several categories match a query equally well,
    earlier categories are preferred.

    `ANY` is a wildcard used only in queries; no entry ever has it as its category.
    """

    NOUN = auto()
    VERB = auto()
    ADJECTIVE = auto()
    ADVERB = auto()
    MODAL = auto()
    PRONOUN = auto()
    DETERMINER = auto()
    CONJUNCTION = auto()
    COMPLEMENTISER = auto()
    PREPOSITION = auto()
    INTERJECTION = auto()
    SYMBOL = auto()
    ANY = auto()

    def matches(self, other: "LexicalCategory") -> bool:
        """
        Whether an entry of category *other* satisfies a query for this category
        (or vice versa).
        """
        return (
            self is LexicalCategory.ANY or other is LexicalCategory.ANY or self is other
        )

    @property
    def rank(self) -> int:
        """
        The position of this category in the tie-break order.
        """
        return _CATEGORY_RANKS[self]

    @staticmethod
    def parse(value: Any) -> Optional["LexicalCategory"]:
        """
        Get the category named by *value* (case-insensitive), or `None` if it names none.

        Anything but a string or a `LexicalCategory` names no category.
        """
        if isinstance(value, LexicalCategory):
            return value
        if not isinstance(value, str):
            return None
        return _CATEGORIES_BY_NAME.get(value.strip().upper())


_CATEGORY_RANKS: Mapping[LexicalCategory, int] = immutabledict(
    (category, rank) for (rank, category) in enumerate(LexicalCategory)
)
_CATEGORIES_BY_NAME: Mapping[str, LexicalCategory] = immutabledict(
    (category.name, category) for category in LexicalCategory
)


class Inflection(Enum):
    """
    A pattern by which a word is inflected.
    """

    REGULAR = auto()
    """
    The default suffixation rules, e.g. *dog* becoming *dogs*.
    """
    IRREGULAR = auto()
    """
    None of the rules apply; the forms must come from the lexicon, e.g. *woman*, *women*.
    """
    REGULAR_DOUBLE = auto()
    """
    The final consonant is doubled before a suffix, e.g. *tag*, *tagged*, *tagging*.
    """
    GRECO_LATIN_REGULAR = auto()
    """
    Greek and Latin plurals, e.g. *focus* becoming *foci*.
    """
    UNCOUNT = auto()
    """
    Uncountable nouns, which have no separate plural form, e.g. *sand*.
    """
    INVARIANT = auto()
    """
    Words which are never inflected.
    """

    @staticmethod
    def for_code(code: Union[str, "Inflection"]) -> Optional["Inflection"]:
        """
        Map an inflection code as used by the NIH Specialist Lexicon (e.g. *reg*, *irreg*,
        *glreg*) to an `Inflection`.

        Returns:
            The matching `Inflection`, or `None` if *code* is not an inflection code.
        """
        if isinstance(code, Inflection):
            return code
        if not isinstance(code, str):
            return None
        normalized = code.strip().lower()
        if normalized in _INFLECTIONS_BY_CODE:
            return _INFLECTIONS_BY_CODE[normalized]
        return _INFLECTIONS_BY_NAME.get(normalized.upper())


_INFLECTIONS_BY_CODE: Mapping[str, Inflection] = immutabledict(
    {
        "reg": Inflection.REGULAR,
        "irreg": Inflection.IRREGULAR,
        "regd": Inflection.REGULAR_DOUBLE,
        "glreg": Inflection.GRECO_LATIN_REGULAR,
        "uncount": Inflection.UNCOUNT,
        "noncount": Inflection.UNCOUNT,
        "groupuncount": Inflection.UNCOUNT,
        "inv": Inflection.INVARIANT,
    }
)
_INFLECTIONS_BY_NAME: Mapping[str, Inflection] = immutabledict(
    (inflection.name, inflection) for inflection in Inflection
)
