r"""
Indices over the `WordEntry`\ s of a lexicon.
"""
from typing import Iterable, Iterator, Optional, Tuple

from attr import attrib, attrs
from immutablecollections import (
    ImmutableDict,
    ImmutableSet,
    ImmutableSetMultiDict,
    immutabledict,
    immutableset,
    immutablesetmultidict,
)
from immutablecollections.converter_utils import _to_immutableset
from more_itertools import first

from simplelex.categories import LexicalCategory
from simplelex.word import WordEntry


@attrs(frozen=True, slots=True, repr=False)
class EntryIndex:
    r"""
    Retrieves `WordEntry`\ s by base form, by base form and category, and by identifier.

    When a query must pick a single entry from several homographs,
    the choice is made by `selection_key`:
    entries marked as primary senses first, then by identifier,
    then in the order the entries were given to the index.
    """

    entries: ImmutableSet[WordEntry] = attrib(converter=_to_immutableset)
    r"""
    All `WordEntry`\ s in the index, in insertion order.
    """
    _by_id: ImmutableDict[str, WordEntry] = attrib(init=False)
    _by_base_form: ImmutableSetMultiDict[str, WordEntry] = attrib(init=False)
    _insertion_order: ImmutableDict[WordEntry, int] = attrib(init=False)

    @_by_id.default
    def _init_by_id(self) -> ImmutableDict[str, WordEntry]:
        ret = immutabledict((entry.identifier, entry) for entry in self.entries)
        if len(ret) != len(self.entries):
            seen = set()
            duplicates = []
            for entry in self.entries:
                if entry.identifier in seen:
                    duplicates.append(entry.identifier)
                seen.add(entry.identifier)
            raise RuntimeError(
                f"Word identifiers must be unique but these occur more than once: "
                f"{duplicates}"
            )
        return ret

    @_by_base_form.default
    def _init_by_base_form(self) -> ImmutableSetMultiDict[str, WordEntry]:
        return immutablesetmultidict((entry.base_form, entry) for entry in self.entries)

    @_insertion_order.default
    def _init_insertion_order(self) -> ImmutableDict[WordEntry, int]:
        return immutabledict((entry, i) for (i, entry) in enumerate(self.entries))

    def get_words(
        self, base_form: str, category: LexicalCategory = LexicalCategory.ANY
    ) -> ImmutableSet[WordEntry]:
        """
        Get all words with exactly the given base form (case-sensitive).

        Args:
            base_form: the base form to look up, e.g. *be* (not *is*)
            category: if not `LexicalCategory.ANY`, only words of this category are returned.

        Returns:
            The matching words in insertion order, possibly none.
        """
        words = self._by_base_form[base_form]
        if category is LexicalCategory.ANY:
            return words
        return immutableset(word for word in words if word.category is category)

    def get_word(
        self, base_form: str, category: LexicalCategory = LexicalCategory.ANY
    ) -> Optional[WordEntry]:
        """
        Get the preferred word with the given base form, or `None` if there is none.
        """
        return self.preferred(self.get_words(base_form, category))

    def get_word_by_id(self, identifier: str) -> Optional[WordEntry]:
        return self._by_id.get(identifier)

    def has_word(
        self, base_form: str, category: LexicalCategory = LexicalCategory.ANY
    ) -> bool:
        return any(
            category.matches(word.category) for word in self._by_base_form[base_form]
        )

    def selection_key(self, entry: WordEntry) -> Tuple[bool, str, int]:
        """
        A sort key putting the entry which should be preferred among homographs first.
        """
        return (not entry.is_primary, entry.identifier, self._insertion_order[entry])

    def preferred(self, entries: Iterable[WordEntry]) -> Optional[WordEntry]:
        r"""
        Choose the single preferred entry from *entries*, or `None` if *entries* is empty.
        """
        return first(sorted(entries, key=self.selection_key), default=None)

    def __contains__(self, entry: object) -> bool:
        return entry in self._insertion_order

    def __iter__(self) -> Iterator[WordEntry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __repr__(self) -> str:
        return f"EntryIndex({len(self.entries)} entries)"
