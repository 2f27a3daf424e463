r"""
Lexicons: read-only collections of `WordEntry`\ s and the queries over them.

A `Lexicon` is built once, from `RawEntryRecord`\ s, and never changes afterwards,
so it may be shared freely, including between threads.
"""
import logging
from abc import ABC, abstractmethod
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from attr import attrib, attrs
from attr.validators import instance_of
from immutablecollections import ImmutableDict, ImmutableSet, immutableset
from immutablecollections.converter_utils import _to_tuple
from more_itertools import first
from vistautils.preconditions import check_arg

from simplelex.categories import Inflection, LexicalCategory
from simplelex.features import LexicalFeature
from simplelex.index import EntryIndex
from simplelex.morphology import InflectionEngine, VariantAnalysis
from simplelex.morphology.irregular import EMPTY_IRREGULAR_FORM_TABLE, IrregularFormTable
from simplelex.records import MalformedSourceError, RawEntryRecord, word_entry_from_record
from simplelex.word import WordEntry

logger = logging.getLogger(__name__)  # pylint:disable=invalid-name


class AbstractLexicon(ABC):
    r"""
    The queries every lexicon answers.

    No query ever raises for an unknown word:
    single-word queries return `None` and multi-word queries return nothing.
    """

    @abstractmethod
    def get_words(
        self, base_form: str, category: LexicalCategory = LexicalCategory.ANY
    ) -> ImmutableSet[WordEntry]:
        """
        Get all words with exactly the given base form,
        restricted to *category* unless it is `LexicalCategory.ANY`.
        """

    @abstractmethod
    def get_word(
        self, base_form: str, category: LexicalCategory = LexicalCategory.ANY
    ) -> Optional[WordEntry]:
        """
        Get the preferred word with the given base form, or `None`.
        """

    @abstractmethod
    def get_words_by_id(self, identifier: str) -> ImmutableSet[WordEntry]:
        pass

    @abstractmethod
    def get_words_from_variant(
        self, surface_form: str, category: LexicalCategory = LexicalCategory.ANY
    ) -> ImmutableSet[WordEntry]:
        """
        Get every word *surface_form* could be a form of, best first.
        """

    def has_word(
        self, base_form: str, category: LexicalCategory = LexicalCategory.ANY
    ) -> bool:
        return self.get_word(base_form, category) is not None

    def get_word_by_id(self, identifier: str) -> Optional[WordEntry]:
        return first(self.get_words_by_id(identifier), default=None)

    def has_word_by_id(self, identifier: str) -> bool:
        return self.get_word_by_id(identifier) is not None

    def get_word_from_variant(
        self, surface_form: str, category: LexicalCategory = LexicalCategory.ANY
    ) -> Optional[WordEntry]:
        """
        Get the word *surface_form* is most likely a form of, e.g. *be* for *is*.

        Unlike `lookup_word`, this always goes through morphological analysis.
        """
        return first(self.get_words_from_variant(surface_form, category), default=None)

    def has_word_from_variant(
        self, surface_form: str, category: LexicalCategory = LexicalCategory.ANY
    ) -> bool:
        return self.get_word_from_variant(surface_form, category) is not None

    def lookup_word(
        self, form: str, category: LexicalCategory = LexicalCategory.ANY
    ) -> Optional[WordEntry]:
        """
        Find the word meant by *form*, whatever *form* is.

        *form* is tried in turn as a base form, as an inflected form
        and as a word identifier.

        Returns:
            The first word found, or `None` if *form* matches nothing.
        """
        ret = self.get_word(form, category)
        if ret is not None:
            return ret
        ret = self.get_word_from_variant(form, category)
        if ret is not None:
            return ret
        ret = self.get_word_by_id(form)
        if ret is not None and category.matches(ret.category):
            return ret
        return None


@attrs(frozen=True, slots=True, repr=False)
class Lexicon(AbstractLexicon):
    r"""
    A lexicon of `WordEntry`\ s together with the irregular forms used to inflect them.

    Use `Lexicon.from_records` to build one from a lexicon source.
    """

    index: EntryIndex = attrib(validator=instance_of(EntryIndex))
    irregular_forms: IrregularFormTable = attrib(
        validator=instance_of(IrregularFormTable),
        default=EMPTY_IRREGULAR_FORM_TABLE,
        kw_only=True,
    )
    engine: InflectionEngine = attrib(init=False)

    @engine.default
    def _init_engine(self) -> InflectionEngine:
        return InflectionEngine(self.index, irregular_forms=self.irregular_forms)

    @staticmethod
    def from_records(
        records: Iterable[RawEntryRecord],
        *,
        irregular_forms: IrregularFormTable = EMPTY_IRREGULAR_FORM_TABLE,
    ) -> "Lexicon":
        r"""
        Build a `Lexicon` from the records of a lexicon source.

        *irregular_forms* supplies the forms of irregular words which do not list their own.

        Raises:
            MalformedSourceError: if any record is unusable or repeats an identifier.
                No lexicon is built from a source with any bad record.
        """
        entries: List[WordEntry] = []
        positions_by_id: Dict[str, int] = {}
        for (position, record) in enumerate(records):
            entry = word_entry_from_record(record, position)
            if entry.identifier in positions_by_id:
                raise MalformedSourceError(
                    f"identifier {entry.identifier} was already used by record "
                    f"#{positions_by_id[entry.identifier]}",
                    record,
                    position,
                )
            positions_by_id[entry.identifier] = position
            entries.append(entry)

        ret = Lexicon(
            EntryIndex(entries),
            irregular_forms=irregular_forms,
        )
        logger.info(
            "Built lexicon of %s words with %s shared irregular forms",
            len(ret.index),
            len(ret.irregular_forms),
        )
        return ret

    def get_words(
        self, base_form: str, category: LexicalCategory = LexicalCategory.ANY
    ) -> ImmutableSet[WordEntry]:
        return self.index.get_words(base_form, category)

    def get_word(
        self, base_form: str, category: LexicalCategory = LexicalCategory.ANY
    ) -> Optional[WordEntry]:
        return self.index.get_word(base_form, category)

    def has_word(
        self, base_form: str, category: LexicalCategory = LexicalCategory.ANY
    ) -> bool:
        return self.index.has_word(base_form, category)

    def get_words_by_id(self, identifier: str) -> ImmutableSet[WordEntry]:
        entry = self.index.get_word_by_id(identifier)
        return immutableset([entry] if entry is not None else [])

    def get_word_by_id(self, identifier: str) -> Optional[WordEntry]:
        return self.index.get_word_by_id(identifier)

    def get_words_from_variant(
        self, surface_form: str, category: LexicalCategory = LexicalCategory.ANY
    ) -> ImmutableSet[WordEntry]:
        return immutableset(
            analysis.entry for analysis in self.analyse(surface_form, category)
        )

    def analyse(
        self, surface_form: str, category: LexicalCategory = LexicalCategory.ANY
    ) -> Tuple[VariantAnalysis, ...]:
        return self.engine.analyse(surface_form, category)

    def inflect(
        self,
        entry: WordEntry,
        form: LexicalFeature,
        *,
        inflection: Optional[Inflection] = None,
    ) -> Optional[str]:
        return self.engine.inflect(entry, form, inflection=inflection)

    def inflected_forms(self, entry: WordEntry) -> ImmutableDict[LexicalFeature, str]:
        return self.engine.inflected_forms(entry)

    def __iter__(self) -> Iterator[WordEntry]:
        return iter(self.index)

    def __len__(self) -> int:
        return len(self.index)

    def __repr__(self) -> str:
        return f"Lexicon({len(self.index)} words)"


@attrs(frozen=True, slots=True)
class MultipleLexicon(AbstractLexicon):
    """
    Several lexicons queried as one.

    Lexicons are consulted in order.
    Multi-word queries return the results of the first lexicon with any,
    or, if *always_search_all* is set, the results of every lexicon one after another.
    Single-word queries always return the first word found.
    """

    lexicons: Tuple[AbstractLexicon, ...] = attrib(converter=_to_tuple)
    always_search_all: bool = attrib(
        validator=instance_of(bool), default=False, kw_only=True
    )

    def __attrs_post_init__(self) -> None:
        for lexicon in self.lexicons:
            check_arg(
                isinstance(lexicon, AbstractLexicon),
                "MultipleLexicon can only combine lexicons but got %s",
                (lexicon,),
            )

    def get_words(
        self, base_form: str, category: LexicalCategory = LexicalCategory.ANY
    ) -> ImmutableSet[WordEntry]:
        return self._combine(
            lexicon.get_words(base_form, category) for lexicon in self.lexicons
        )

    def get_word(
        self, base_form: str, category: LexicalCategory = LexicalCategory.ANY
    ) -> Optional[WordEntry]:
        for lexicon in self.lexicons:
            ret = lexicon.get_word(base_form, category)
            if ret is not None:
                return ret
        return None

    def get_words_by_id(self, identifier: str) -> ImmutableSet[WordEntry]:
        return self._combine(
            lexicon.get_words_by_id(identifier) for lexicon in self.lexicons
        )

    def get_words_from_variant(
        self, surface_form: str, category: LexicalCategory = LexicalCategory.ANY
    ) -> ImmutableSet[WordEntry]:
        return self._combine(
            lexicon.get_words_from_variant(surface_form, category)
            for lexicon in self.lexicons
        )

    def _combine(
        self, results: Iterable[ImmutableSet[WordEntry]]
    ) -> ImmutableSet[WordEntry]:
        if self.always_search_all:
            return immutableset(entry for result in results for entry in result)
        return first((result for result in results if result), default=immutableset())
