r"""
Inflection and its inverse.

`InflectionEngine` produces the inflected forms of `WordEntry`\ s
and resolves surface forms back to the entries they were built from.
"""
import logging
from enum import Enum, auto
from typing import Iterable, List, Optional, Tuple

from attr import attrib, attrs
from attr.validators import instance_of, optional
from immutablecollections import (
    ImmutableDict,
    ImmutableSetMultiDict,
    immutabledict,
    immutableset,
    immutablesetmultidict,
)
from more_itertools import unique_everseen

from simplelex.categories import Inflection, LexicalCategory
from simplelex.features import (
    INFLECTIONAL_FEATURES,
    LexicalFeature,
    inflectional_features,
)
from simplelex.index import EntryIndex
from simplelex.morphology.irregular import EMPTY_IRREGULAR_FORM_TABLE, IrregularFormTable
from simplelex.morphology.rules import (
    double_comparative,
    double_past_verb,
    double_present_participle_verb,
    double_superlative,
    greco_latin_plural_noun,
    present3s_verb,
    regular_comparative,
    regular_past_verb,
    regular_plural_noun,
    regular_present_participle_verb,
    regular_superlative,
)
from simplelex.morphology.stemming import candidate_base_forms
from simplelex.word import WordEntry

logger = logging.getLogger(__name__)  # pylint:disable=invalid-name


class AnalysisSource(Enum):
    """
    How a surface form was related to a word.

    Members are declared from the most to the least trusted.
    """

    IRREGULAR = auto()
    """
    The surface form is a listed irregular form of the word.
    """
    GENERATIVE = auto()
    """
    Undoing a suffixation rule led to the word, and applying the rule again gives back
    the surface form.
    """
    BASE_FORM = auto()
    """
    The surface form is the base form of the word.
    """


@attrs(frozen=True, slots=True)
class VariantAnalysis:
    """
    One way of reading a surface form as a form of a word.
    """

    entry: WordEntry = attrib(validator=instance_of(WordEntry))
    feature: Optional[LexicalFeature] = attrib(
        validator=optional(instance_of(LexicalFeature))
    )
    """
    The form slot the surface form fills,
    or `None` for the base form itself and for suppletive forms like *am*.
    """
    source: AnalysisSource = attrib(validator=instance_of(AnalysisSource))


_ALL_FORM_SLOTS: Tuple[LexicalFeature, ...] = tuple(
    unique_everseen(
        feature for features in INFLECTIONAL_FEATURES.values() for feature in features
    )
)


@attrs(frozen=True, slots=True)
class InflectionEngine:
    r"""
    Generates and analyses the inflected forms of the words in an `EntryIndex`.

    The forms a word declares itself always come first.
    Shared irregular forms, keyed only by base form and category,
    stand in for forms a word does not list, and beat the suffixation rules.
    """

    index: EntryIndex = attrib(validator=instance_of(EntryIndex))
    irregular_forms: IrregularFormTable = attrib(
        validator=instance_of(IrregularFormTable),
        default=EMPTY_IRREGULAR_FORM_TABLE,
        kw_only=True,
    )
    _declared_forms: ImmutableSetMultiDict[
        str, Tuple[WordEntry, LexicalFeature]
    ] = attrib(init=False)

    @_declared_forms.default
    def _init_declared_forms(
        self
    ) -> ImmutableSetMultiDict[str, Tuple[WordEntry, LexicalFeature]]:
        return immutablesetmultidict(
            (surface_form, (entry, feature))
            for entry in self.index
            for (feature, surface_form) in _declared_forms_of(entry)
        )

    def inflect(
        self,
        entry: WordEntry,
        form: LexicalFeature,
        *,
        inflection: Optional[Inflection] = None,
    ) -> Optional[str]:
        """
        Get the surface form filling the form slot *form* of *entry*.

        Args:
            entry: the word to inflect
            form: the form slot, e.g. `LexicalFeature.PLURAL`
            inflection: the inflectional variant to use.
                Defaults to the entry's default inflection.

        Returns:
            The surface form, or `None` if *form* is not a form slot of the entry's category,
            the entry does not support the requested variant,
            or the variant yields no form (*INVARIANT* words, modals with no listed form).
        """
        if form not in inflectional_features(entry.category):
            return None
        variant = inflection if inflection is not None else entry.default_inflection
        inflection_set = entry.inflection_set(variant)
        if inflection_set is None:
            return None
        if variant is Inflection.INVARIANT:
            return None
        if variant is Inflection.UNCOUNT and form is LexicalFeature.PLURAL:
            return entry.base_form

        declared_form = inflection_set.form(form)
        if declared_form is not None:
            return declared_form
        if variant is entry.default_inflection:
            feature_form = entry.get_feature(form)
            if isinstance(feature_form, str) and feature_form:
                return feature_form
        if _uses_irregular_forms(entry, variant):
            irregular_form = self.irregular_forms.surface_form(
                entry.category, entry.base_form, form
            )
            if irregular_form is not None:
                return irregular_form
        return _apply_rule(entry, form, variant)

    def inflected_forms(self, entry: WordEntry) -> ImmutableDict[LexicalFeature, str]:
        """
        Get every form *entry* has under its default inflection, keyed by form slot.
        """
        ret = []
        for feature in inflectional_features(entry.category):
            surface_form = self.inflect(entry, feature)
            if surface_form is not None:
                ret.append((feature, surface_form))
        return immutabledict(ret)

    def analyse(
        self, surface_form: str, category: LexicalCategory = LexicalCategory.ANY
    ) -> Tuple[VariantAnalysis, ...]:
        r"""
        Find every word *surface_form* could be a form of.

        Listed irregular forms are tried first,
        then undoing the suffixation rules,
        and finally words whose base form is *surface_form* itself.

        Args:
            surface_form: the (possibly inflected) form, e.g. *went* or *dogs*
            category: if not `LexicalCategory.ANY`, only words of this category are returned.

        Returns:
            The `VariantAnalysis`\ s, best first: by how the word was found,
            then by `LexicalCategory` order, then by the index's preference among homographs.
            Each word appears at most once.
        """
        analyses: List[VariantAnalysis] = []
        analyses.extend(self._irregular_analyses(surface_form, category))
        analyses.extend(self._generative_analyses(surface_form, category))
        analyses.extend(
            VariantAnalysis(entry, None, AnalysisSource.BASE_FORM)
            for entry in self.index.get_words(surface_form, category)
        )

        ranked = sorted(
            analyses,
            key=lambda analysis: (
                _SOURCE_RANKS[analysis.source],
                analysis.entry.category.rank,
                self.index.selection_key(analysis.entry),
            ),
        )
        return tuple(unique_everseen(ranked, key=lambda analysis: analysis.entry))

    def _irregular_analyses(
        self, surface_form: str, category: LexicalCategory
    ) -> Iterable[VariantAnalysis]:
        for (entry, feature) in self._declared_forms[surface_form]:
            if category.matches(entry.category):
                yield VariantAnalysis(entry, feature, AnalysisSource.IRREGULAR)

        for irregular_form in self.irregular_forms.analyses(surface_form, category):
            entries = [
                entry
                for entry in self.index.get_words(
                    irregular_form.base_form, irregular_form.category
                )
                if any(
                    _uses_irregular_forms(entry, variant)
                    for variant in entry.inflectional_variants
                )
            ]
            if not entries:
                logger.debug(
                    "Skipping irregular form %s of %s:%s which no word takes",
                    surface_form,
                    irregular_form.base_form,
                    irregular_form.category.name,
                )
            for entry in entries:
                yield VariantAnalysis(
                    entry, irregular_form.feature, AnalysisSource.IRREGULAR
                )

    def _generative_analyses(
        self, surface_form: str, category: LexicalCategory
    ) -> Iterable[VariantAnalysis]:
        features = (
            _ALL_FORM_SLOTS
            if category is LexicalCategory.ANY
            else inflectional_features(category)
        )
        for (base_form, feature) in candidate_base_forms(surface_form, features):
            for entry in self.index.get_words(base_form, category):
                if feature in inflectional_features(entry.category) and any(
                    self.inflect(entry, feature, inflection=variant) == surface_form
                    for variant in entry.inflectional_variants
                ):
                    yield VariantAnalysis(entry, feature, AnalysisSource.GENERATIVE)


_SOURCE_RANKS = immutabledict(
    (source, rank) for (rank, source) in enumerate(AnalysisSource)
)


def _apply_rule(
    entry: WordEntry, form: LexicalFeature, variant: Inflection
) -> Optional[str]:
    base_form = entry.base_form
    doubled = variant is Inflection.REGULAR_DOUBLE
    if entry.category is LexicalCategory.NOUN:
        if variant is Inflection.GRECO_LATIN_REGULAR:
            return greco_latin_plural_noun(base_form)
        return regular_plural_noun(base_form)
    elif entry.category is LexicalCategory.VERB:
        if form is LexicalFeature.PRESENT3S:
            return present3s_verb(base_form)
        elif form is LexicalFeature.PRESENT_PARTICIPLE:
            if doubled:
                return double_present_participle_verb(base_form)
            return regular_present_participle_verb(base_form)
        else:
            # past and past participle share a rule
            if doubled:
                return double_past_verb(base_form)
            return regular_past_verb(base_form)
    elif entry.category is LexicalCategory.ADJECTIVE:
        if form is LexicalFeature.COMPARATIVE:
            if doubled:
                return double_comparative(base_form)
            return regular_comparative(base_form)
        if doubled:
            return double_superlative(base_form)
        return regular_superlative(base_form)
    elif entry.category is LexicalCategory.ADVERB:
        if form is LexicalFeature.COMPARATIVE:
            return regular_comparative(base_form)
        return regular_superlative(base_form)
    else:
        # modals have no regular forms
        return None


_REGULAR_INFLECTIONS = immutableset(
    [
        Inflection.REGULAR,
        Inflection.REGULAR_DOUBLE,
        Inflection.GRECO_LATIN_REGULAR,
    ]
)


def _uses_irregular_forms(entry: WordEntry, variant: Inflection) -> bool:
    # a regular variant only borrows shared irregular forms
    # when it is the default of a word with no irregular variant of its own
    if variant not in _REGULAR_INFLECTIONS:
        return True
    return (
        variant is entry.default_inflection
        and not entry.has_inflectional_variant(Inflection.IRREGULAR)
    )


def _declared_forms_of(entry: WordEntry) -> Iterable[Tuple[LexicalFeature, str]]:
    for inflection_set in entry.inflectional_variants.values():
        yield from inflection_set.forms.items()
    for feature in inflectional_features(entry.category):
        surface_form = entry.get_feature(feature)
        if isinstance(surface_form, str) and surface_form:
            yield (feature, surface_form)
        elif surface_form is not None:
            logger.debug(
                "Ignoring non-string %s feature %r of %s", feature, surface_form, entry
            )
