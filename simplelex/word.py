"""
Data structures for the words stored in a `Lexicon`.
"""
from typing import Mapping, Optional

from attr import attrib, attrs
from attr.validators import instance_of
from immutablecollections import ImmutableDict, immutabledict
from immutablecollections.converter_utils import _to_immutabledict
from vistautils.preconditions import check_arg

from simplelex.categories import Inflection, LexicalCategory
from simplelex.features import (
    FeatureKey,
    FeatureRecord,
    FeatureValue,
    LexicalFeature,
    inflectional_features,
)


def _to_form_dict(forms: Mapping) -> ImmutableDict[LexicalFeature, str]:
    return immutabledict(
        (LexicalFeature(key) if isinstance(key, str) else key, form)
        for (key, form) in forms.items()
    )


@attrs(frozen=True, slots=True)
class InflectionSet:
    """
    The literal inflected forms a lexicon source declares for one inflectional variant of a word.

    For example, the `Inflection.IRREGULAR` variant of *woman* has the plural form *women*.
    """

    inflection: Inflection = attrib(validator=instance_of(Inflection))
    forms: ImmutableDict[LexicalFeature, str] = attrib(
        converter=_to_form_dict, default=immutabledict()
    )

    def form(self, feature: LexicalFeature) -> Optional[str]:
        return self.forms.get(feature)


def _to_feature_record(value) -> FeatureRecord:
    if isinstance(value, FeatureRecord):
        return value
    return FeatureRecord(value)


@attrs(frozen=True, slots=True, eq=False, repr=False)
class WordEntry:
    r"""
    A single lexical item: one base form in one `LexicalCategory`.

    Entries are created once when a `Lexicon` is built and never change afterwards.
    Two entries are equal only if they are the same entry;
    homographs (entries sharing a base form and category) are told apart by *identifier*.
    """

    identifier: str = attrib(validator=instance_of(str))
    """
    A globally unique identifier assigned by the lexicon source.
    """
    base_form: str = attrib(validator=instance_of(str))
    """
    The canonical (dictionary) spelling, e.g. *be* rather than *is*.
    """
    category: LexicalCategory = attrib(validator=instance_of(LexicalCategory))
    features: FeatureRecord = attrib(
        converter=_to_feature_record, default=FeatureRecord()
    )
    inflectional_variants: ImmutableDict[Inflection, InflectionSet] = attrib(
        converter=_to_immutabledict,
        default=immutabledict([(Inflection.REGULAR, InflectionSet(Inflection.REGULAR))]),
        kw_only=True,
    )
    r"""
    The `Inflection`\ s this word supports, each with any literal forms declared for it.
    """
    default_inflection: Inflection = attrib(
        validator=instance_of(Inflection), default=Inflection.REGULAR, kw_only=True
    )
    is_primary: bool = attrib(validator=instance_of(bool), default=False, kw_only=True)
    """
    Whether the source marks this as the primary (most frequent) sense among its homographs.
    """

    def __attrs_post_init__(self) -> None:
        check_arg(
            self.category is not LexicalCategory.ANY,
            "Word %s cannot have the wildcard category ANY",
            (self.identifier,),
        )
        check_arg(
            bool(self.inflectional_variants),
            "Word %s must support at least one inflection",
            (self.identifier,),
        )
        check_arg(
            self.default_inflection in self.inflectional_variants,
            "Default inflection %s of word %s is not among its inflectional variants %s",
            (
                self.default_inflection,
                self.identifier,
                list(self.inflectional_variants.keys()),
            ),
        )

    def get_feature(self, key: FeatureKey) -> Optional[FeatureValue]:
        return self.features.get(key)

    def get_feature_as_string(self, key: FeatureKey) -> Optional[str]:
        return self.features.get_as_string(key)

    def get_feature_as_boolean(self, key: FeatureKey) -> Optional[bool]:
        return self.features.get_as_boolean(key)

    def has_feature(self, key: FeatureKey) -> bool:
        return self.features.has(key)

    def has_inflectional_variant(self, inflection: Inflection) -> bool:
        return inflection in self.inflectional_variants

    def inflection_set(self, inflection: Inflection) -> Optional[InflectionSet]:
        return self.inflectional_variants.get(inflection)

    @property
    def default_spelling_variant(self) -> str:
        """
        The preferred spelling of this word (e.g. *colour* over *color*).

        This is the `LexicalFeature.DEFAULT_SPELL` feature if set and the base form otherwise.
        """
        ret = self.get_feature_as_string(LexicalFeature.DEFAULT_SPELL)
        return ret if ret else self.base_form

    def __repr__(self) -> str:
        return f"{self.base_form}:{self.category.name}[{self.identifier}]"


def create_word_entry(
    identifier: str,
    base_form: str,
    category: LexicalCategory,
    *,
    features: Optional[Mapping[FeatureKey, FeatureValue]] = None,
    inflectional_variants: Optional[Mapping[Inflection, InflectionSet]] = None,
    default_inflection: Optional[Inflection] = None,
    is_primary: bool = False,
) -> WordEntry:
    r"""
    Build a `WordEntry` following the conventions of NIH-style lexicon sources.

    * a word which declares no inflection is `Inflection.REGULAR`.
    * unless told otherwise, the default inflection is `Inflection.REGULAR` if the word supports
      it and otherwise the first declared inflection.
    * the *DEFAULT_INFL* feature records the default inflection.
    * the literal forms of the default inflection are copied into the features,
      so e.g. the *PLURAL* feature of *woman* reads *women*,
      but never over a feature the source set explicitly.
    """
    if not inflectional_variants:
        inflectional_variants = immutabledict(
            [(Inflection.REGULAR, InflectionSet(Inflection.REGULAR))]
        )
    if default_inflection is None:
        if Inflection.REGULAR in inflectional_variants:
            default_inflection = Inflection.REGULAR
        else:
            default_inflection = next(iter(inflectional_variants))

    feature_record = FeatureRecord(features)
    derived_features = {LexicalFeature.DEFAULT_INFL: default_inflection}
    default_set = inflectional_variants.get(default_inflection)
    if default_set is not None:
        for form_feature in inflectional_features(category):
            form = default_set.form(form_feature)
            if form is not None:
                derived_features[form_feature] = form

    return WordEntry(
        identifier,
        base_form,
        category,
        feature_record.with_defaults(derived_features),
        inflectional_variants=inflectional_variants,
        default_inflection=default_inflection,
        is_primary=is_primary,
    )
