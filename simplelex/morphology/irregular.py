r"""
The table of irregular inflected forms.

The table is shared by every word with a given base form and category.
Its forms beat the suffixation rules in `simplelex.morphology.rules`,
but never the forms a word lists itself.
"""
from typing import Iterable, Optional, Tuple

from attr import attrib, attrs
from attr.validators import instance_of, optional
from immutablecollections import (
    ImmutableDict,
    ImmutableSet,
    ImmutableSetMultiDict,
    immutabledict,
    immutableset,
    immutablesetmultidict,
)
from immutablecollections.converter_utils import _to_tuple

from simplelex.categories import LexicalCategory
from simplelex.features import LexicalFeature, inflectional_features


@attrs(frozen=True, slots=True)
class IrregularForm:
    """
    One irregular surface form of a word.

    *feature* names the form slot the surface form fills, e.g. *PAST* for *went*.
    It is `None` for suppletive forms which fill no form slot of their own,
    like *am* and *are* for *be*;
    such forms can be analysed but are never generated.
    """

    base_form: str = attrib(validator=instance_of(str))
    category: LexicalCategory = attrib(validator=instance_of(LexicalCategory))
    feature: Optional[LexicalFeature] = attrib(
        validator=optional(instance_of(LexicalFeature))
    )
    surface_form: str = attrib(validator=instance_of(str))

    def __attrs_post_init__(self) -> None:
        if self.feature is not None and self.feature not in inflectional_features(
            self.category
        ):
            raise ValueError(
                f"{self.feature} is not an inflected form of a {self.category.name}: "
                f"{self.base_form} -> {self.surface_form}"
            )


@attrs(frozen=True, slots=True, repr=False)
class IrregularFormTable:
    r"""
    Irregular forms keyed by (category, base form, form slot), and the reverse mapping
    from surface form to the `IrregularForm`\ s which produce it.

    Where several surface forms share a key (*was* and *were* for the past of *be*),
    the first one listed is the one generated.
    """

    forms: Tuple[IrregularForm, ...] = attrib(converter=_to_tuple)
    _by_key: ImmutableDict[
        Tuple[LexicalCategory, str, LexicalFeature], Tuple[str, ...]
    ] = attrib(init=False)
    _by_surface_form: ImmutableSetMultiDict[str, IrregularForm] = attrib(init=False)

    @_by_key.default
    def _init_by_key(
        self
    ) -> ImmutableDict[Tuple[LexicalCategory, str, LexicalFeature], Tuple[str, ...]]:
        surface_forms_by_key = {}
        for form in self.forms:
            if form.feature is not None:
                key = (form.category, form.base_form, form.feature)
                existing = surface_forms_by_key.setdefault(key, [])
                if form.surface_form not in existing:
                    existing.append(form.surface_form)
        return immutabledict(
            (key, tuple(surface_forms))
            for (key, surface_forms) in surface_forms_by_key.items()
        )

    @_by_surface_form.default
    def _init_by_surface_form(self) -> ImmutableSetMultiDict[str, IrregularForm]:
        return immutablesetmultidict((form.surface_form, form) for form in self.forms)

    def surface_forms(
        self, category: LexicalCategory, base_form: str, feature: LexicalFeature
    ) -> Tuple[str, ...]:
        return self._by_key.get((category, base_form, feature), ())

    def surface_form(
        self, category: LexicalCategory, base_form: str, feature: LexicalFeature
    ) -> Optional[str]:
        """
        Get the irregular form filling *feature* for a word, or `None` if it has none.
        """
        surface_forms = self.surface_forms(category, base_form, feature)
        return surface_forms[0] if surface_forms else None

    def analyses(
        self, surface_form: str, category: LexicalCategory = LexicalCategory.ANY
    ) -> ImmutableSet[IrregularForm]:
        r"""
        Get the `IrregularForm`\ s which produce exactly *surface_form*,
        restricted to *category* unless it is `LexicalCategory.ANY`.
        """
        analyses = self._by_surface_form[surface_form]
        if category is LexicalCategory.ANY:
            return analyses
        return immutableset(
            analysis for analysis in analyses if analysis.category is category
        )

    def with_forms(self, forms: Iterable[IrregularForm]) -> "IrregularFormTable":
        """
        Get a table with the forms of this one followed by *forms*.
        """
        return IrregularFormTable(self.forms + tuple(forms))

    def __len__(self) -> int:
        return len(self.forms)

    def __repr__(self) -> str:
        return f"IrregularFormTable({len(self.forms)} forms)"


def irregular_form_table(
    entries: Iterable[
        Tuple[LexicalCategory, str, Optional[LexicalFeature], Iterable[str]]
    ]
) -> IrregularFormTable:
    """
    Build an `IrregularFormTable` from (category, base form, form slot, surface forms) tuples.
    """
    return IrregularFormTable(
        IrregularForm(base_form, category, feature, surface_form)
        for (category, base_form, feature, surface_forms) in entries
        for surface_form in surface_forms
    )


EMPTY_IRREGULAR_FORM_TABLE = IrregularFormTable(())
