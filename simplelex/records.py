r"""
Raw entry records, the input from which a `Lexicon` is built.

A `RawEntryRecord` is what a lexicon source (a file, a database, a generator)
hands to the lexicon for each word.
Nothing about a record is trusted:
it is only checked, and turned into a `WordEntry`, when the lexicon is built.
"""
from typing import Any, Dict, Mapping, Optional, Tuple, Union

from attr import attrib, attrs
from attr.validators import instance_of, optional
from immutablecollections import ImmutableDict, immutabledict
from immutablecollections.converter_utils import _to_immutabledict, _to_tuple

from simplelex.categories import Inflection, LexicalCategory
from simplelex.features import (
    LexicalFeature,
    inflectional_features,
    normalize_feature_key,
)
from simplelex.word import InflectionSet, WordEntry, create_word_entry

# keys of a flat record mapping which are not features
ID_KEY = "id"
BASE_KEY = "base"
CATEGORY_KEY = "category"
INFLECTIONS_KEY = "inflections"
VARIANT_FORMS_KEY = "variant_forms"
PRIMARY_KEY = "primary"

_STRUCTURAL_KEYS = (
    ID_KEY,
    BASE_KEY,
    CATEGORY_KEY,
    INFLECTIONS_KEY,
    VARIANT_FORMS_KEY,
    PRIMARY_KEY,
)


def _to_variant_forms(
    value: Optional[Mapping[Any, Mapping[str, str]]]
) -> ImmutableDict[Union[str, Inflection], ImmutableDict[str, str]]:
    if value is None:
        return immutabledict()
    return immutabledict(
        (code, immutabledict(forms)) for (code, forms) in value.items()
    )


@attrs(frozen=True, slots=True)
class RawEntryRecord:
    """
    One word as supplied by a lexicon source.

    Every field may be missing so that a lexicon can report malformed records
    instead of failing to represent them.
    """

    identifier: Optional[str] = attrib(
        validator=optional(instance_of(str)), default=None
    )
    base_form: Optional[str] = attrib(validator=optional(instance_of(str)), default=None)
    category: Optional[Union[str, LexicalCategory]] = attrib(default=None)
    """
    The category, either as a `LexicalCategory` or by name (e.g. *noun*).
    """
    features: ImmutableDict[str, Any] = attrib(
        converter=_to_immutabledict, default=immutabledict(), kw_only=True
    )
    inflections: Tuple[Union[str, Inflection], ...] = attrib(
        converter=_to_tuple, default=(), kw_only=True
    )
    r"""
    The inflection codes (e.g. *reg*, *irreg*) or `Inflection`\ s the word supports.
    """
    variant_forms: ImmutableDict[
        Union[str, Inflection], ImmutableDict[str, str]
    ] = attrib(converter=_to_variant_forms, default=immutabledict(), kw_only=True)
    """
    Literal forms for particular inflections,
    e.g. ``{"irreg": {"plural": "women"}}``.
    """
    primary: bool = attrib(validator=instance_of(bool), default=False, kw_only=True)

    @staticmethod
    def from_mapping(mapping: Mapping[str, Any]) -> "RawEntryRecord":
        """
        Interpret a flat mapping the way NIH-style XML lexicons describe a word.

        The keys *id*, *base*, *category*, *inflections*, *variant_forms* and *primary*
        fill the corresponding fields.
        Any other key with an empty (or null) value is an inflection code if it names one
        and a boolean feature set to true otherwise.
        Every remaining key is a feature.
        """
        inflections = list(_as_sequence(mapping.get(INFLECTIONS_KEY)))
        features = {}
        for (key, value) in mapping.items():
            if key in _STRUCTURAL_KEYS:
                continue
            if value is None or (isinstance(value, str) and not value.strip()):
                if Inflection.for_code(key) is not None:
                    inflections.append(key)
                else:
                    features[key] = True
            elif isinstance(value, str):
                features[key] = value.strip()
            else:
                features[key] = value

        return RawEntryRecord(
            _optional_string(mapping.get(ID_KEY)),
            _optional_string(mapping.get(BASE_KEY)),
            _optional_string(mapping.get(CATEGORY_KEY)),
            features=features,
            inflections=inflections,
            variant_forms=mapping.get(VARIANT_FORMS_KEY),
            primary=bool(mapping.get(PRIMARY_KEY, False)),
        )


def _as_sequence(value: Any) -> Tuple[Any, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        return (value,)
    return tuple(value)


def _optional_string(value: Any) -> Optional[str]:
    if value is None:
        return None
    ret = str(value).strip()
    return ret if ret else None


class MalformedSourceError(RuntimeError):
    """
    Raised when a lexicon cannot be built because one of its source records is unusable.

    A lexicon is never built from a partially valid source.
    """

    def __init__(self, message: str, record: RawEntryRecord, position: int) -> None:
        super().__init__(f"Malformed lexicon record #{position} ({record}): {message}")
        self.record = record
        self.position = position


def word_entry_from_record(record: RawEntryRecord, position: int) -> WordEntry:
    """
    Check a `RawEntryRecord` and turn it into a `WordEntry`.

    Args:
        record: the record to convert
        position: the index of *record* in its source, used for error reporting

    Raises:
        MalformedSourceError: if the record lacks an identifier, base form or category,
            or names an unknown category or inflection.
    """
    if not record.identifier or not record.identifier.strip():
        raise MalformedSourceError("missing identifier", record, position)
    if not record.base_form or not record.base_form.strip():
        raise MalformedSourceError("missing base form", record, position)
    if record.category is None:
        raise MalformedSourceError("missing category", record, position)

    category = LexicalCategory.parse(record.category)
    if category is None:
        raise MalformedSourceError(
            f"unknown category {record.category!r}", record, position
        )
    if category is LexicalCategory.ANY:
        raise MalformedSourceError(
            "the wildcard category ANY cannot be assigned to a word", record, position
        )

    try:
        inflection_forms: Dict[Inflection, Dict[LexicalFeature, str]] = {}
        for code in record.inflections:
            inflection = _parse_inflection(code, record, position)
            inflection_forms.setdefault(inflection, {})
        for (code, forms) in record.variant_forms.items():
            inflection = _parse_inflection(code, record, position)
            variant_forms = inflection_forms.setdefault(inflection, {})
            for (feature_name, form) in forms.items():
                feature = normalize_feature_key(feature_name)
                if feature not in inflectional_features(category):
                    raise MalformedSourceError(
                        f"{feature_name!r} is not an inflected form of a {category.name}",
                        record,
                        position,
                    )
                variant_forms[feature] = form

        features = {}
        default_inflection = None
        for (key, value) in record.features.items():
            if normalize_feature_key(key) is LexicalFeature.DEFAULT_INFL:
                default_inflection = _parse_inflection(value, record, position)
                inflection_forms.setdefault(default_inflection, {})
            else:
                features[key] = value

        return create_word_entry(
            record.identifier,
            record.base_form,
            category,
            features=features,
            inflectional_variants=immutabledict(
                (inflection, InflectionSet(inflection, forms))
                for (inflection, forms) in inflection_forms.items()
            ),
            default_inflection=default_inflection,
            is_primary=record.primary,
        )
    except (TypeError, ValueError) as e:
        raise MalformedSourceError(str(e), record, position) from e


def _parse_inflection(
    code: Union[str, Inflection], record: RawEntryRecord, position: int
) -> Inflection:
    inflection = None
    if isinstance(code, (str, Inflection)):
        inflection = Inflection.for_code(code)
    if inflection is None:
        raise MalformedSourceError(f"unknown inflection {code!r}", record, position)
    return inflection
