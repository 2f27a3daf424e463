r"""
Typed features of `WordEntry`\ s.

A `FeatureRecord` maps feature keys to values.
A key is either one of the known `LexicalFeature`\ s
or an arbitrary string for category-specific extensions.
Values are strings, booleans or `Inflection`\ s.

Absence is meaningful: asking for a feature which was never set returns `None`,
which callers can distinguish from a feature explicitly set to `False`.
"""
from enum import Enum
from typing import Any, Iterator, Mapping, Optional, Tuple, Union

from attr import attrib, attrs
from immutablecollections import ImmutableDict, immutabledict
from vistautils.preconditions import check_arg

from simplelex.categories import Inflection, LexicalCategory


class LexicalFeature(Enum):
    """
    The known features a `WordEntry` may carry.
    """

    PLURAL = "plural"
    COMPARATIVE = "comparative"
    SUPERLATIVE = "superlative"
    PAST = "past"
    PAST_PARTICIPLE = "past_participle"
    PRESENT3S = "present3s"
    PRESENT_PARTICIPLE = "present_participle"
    ACRONYM_OF = "acronym_of"
    PROPER = "proper"
    QUALITATIVE = "qualitative"
    PREDICATIVE = "predicative"
    COLOUR = "colour"
    CLASSIFYING = "classifying"
    VERB_MODIFIER = "verb_modifier"
    SENTENCE_MODIFIER = "sentence_modifier"
    INTENSIFIER = "intensifier"
    INTRANSITIVE = "intransitive"
    TRANSITIVE = "transitive"
    DITRANSITIVE = "ditransitive"
    DEFAULT_INFL = "default_infl"
    DEFAULT_SPELL = "default_spell"

    def __str__(self) -> str:
        return self.value


FeatureKey = Union[LexicalFeature, str]
FeatureValue = Union[str, bool, Inflection]

_FEATURES_BY_VALUE: Mapping[str, LexicalFeature] = immutabledict(
    (feature.value, feature) for feature in LexicalFeature
)

INFLECTIONAL_FEATURES: Mapping[
    LexicalCategory, Tuple[LexicalFeature, ...]
] = immutabledict(
    {
        LexicalCategory.NOUN: (LexicalFeature.PLURAL,),
        LexicalCategory.VERB: (
            LexicalFeature.PRESENT3S,
            LexicalFeature.PAST,
            LexicalFeature.PAST_PARTICIPLE,
            LexicalFeature.PRESENT_PARTICIPLE,
        ),
        LexicalCategory.ADJECTIVE: (
            LexicalFeature.COMPARATIVE,
            LexicalFeature.SUPERLATIVE,
        ),
        LexicalCategory.ADVERB: (LexicalFeature.COMPARATIVE, LexicalFeature.SUPERLATIVE),
        LexicalCategory.MODAL: (LexicalFeature.PAST,),
    }
)
r"""
The form slots (features naming an inflected form) each `LexicalCategory` has.

Categories not listed here are never inflected.
"""


def inflectional_features(category: LexicalCategory) -> Tuple[LexicalFeature, ...]:
    return INFLECTIONAL_FEATURES.get(category, ())


def normalize_feature_key(key: FeatureKey) -> FeatureKey:
    """
    Map a string naming a known feature (case-insensitively) to its `LexicalFeature`.

    Any other non-empty string is returned stripped, as an extension key.
    """
    if isinstance(key, LexicalFeature):
        return key
    check_arg(
        isinstance(key, str) and key.strip() != "",
        "Feature keys must be LexicalFeatures or non-empty strings but got %s",
        (repr(key),),
    )
    stripped = key.strip()
    return _FEATURES_BY_VALUE.get(stripped.lower(), stripped)


def _to_feature_values(
    values: Union[Mapping[Any, Any], "FeatureRecord", None]
) -> ImmutableDict[FeatureKey, FeatureValue]:
    if values is None:
        return immutabledict()
    if isinstance(values, FeatureRecord):
        # pylint:disable=protected-access
        return values._values
    ret = []
    for (key, value) in values.items():
        if not isinstance(value, (str, bool, Inflection)):
            raise TypeError(
                f"Feature {key} must have a string, boolean or Inflection value "
                f"but got {value!r}"
            )
        ret.append((normalize_feature_key(key), value))
    return immutabledict(ret)


@attrs(frozen=True, slots=True, repr=False)
class FeatureRecord:
    r"""
    An immutable bag of features for a `WordEntry`.

    Keys may be given as `LexicalFeature`\ s or strings;
    strings naming a known feature are normalized to it.
    """

    _values: ImmutableDict[FeatureKey, FeatureValue] = attrib(
        converter=_to_feature_values, default=immutabledict()
    )

    def get(self, key: FeatureKey) -> Optional[FeatureValue]:
        """
        Get the value of a feature, or `None` if it has never been set.
        """
        return self._values.get(normalize_feature_key(key))

    def get_as_string(self, key: FeatureKey) -> Optional[str]:
        r"""
        Get the value of a feature as a string.

        Booleans become *true* or *false*; `Inflection`\ s become their lower-case name.

        Returns:
            The string value, or `None` if the feature has never been set.
        """
        value = self.get(key)
        if value is None:
            return None
        elif isinstance(value, bool):
            return "true" if value else "false"
        elif isinstance(value, Inflection):
            return value.name.lower()
        else:
            return value

    def get_as_boolean(self, key: FeatureKey) -> Optional[bool]:
        """
        Get the value of a feature as a boolean.

        A string value is true exactly when it reads *true* (ignoring case).
        `Inflection` values have no boolean reading.

        Returns:
            The boolean value, or `None` if the feature has never been set
            or has no boolean reading.
        """
        value = self.get(key)
        if isinstance(value, bool):
            return value
        elif isinstance(value, str):
            return value.strip().lower() == "true"
        else:
            return None

    def has(self, key: FeatureKey) -> bool:
        return normalize_feature_key(key) in self._values

    def with_defaults(
        self, defaults: Mapping[FeatureKey, FeatureValue]
    ) -> "FeatureRecord":
        """
        Get a copy of this record which additionally has the features in *defaults*
        which this record does not already set.
        """
        merged = dict(
            (normalize_feature_key(key), value) for (key, value) in defaults.items()
        )
        merged.update(self._values)
        return FeatureRecord(merged)

    def items(self):
        return self._values.items()

    def __contains__(self, key: object) -> bool:
        if isinstance(key, str) and not key.strip():
            return False
        return isinstance(key, (LexicalFeature, str)) and self.has(key)

    def __iter__(self) -> Iterator[FeatureKey]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return (
            "{"
            + ", ".join(f"{key}={value!r}" for (key, value) in self._values.items())
            + "}"
        )
