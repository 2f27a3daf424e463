"""
Built-in English data: a table of irregular forms and a small core lexicon.
"""
from typing import Iterable, Optional

from simplelex.english.core_lexicon import ENGLISH_CORE_LEXICON_RECORDS
from simplelex.english.irregular_forms import ENGLISH_IRREGULAR_FORMS
from simplelex.lexicon import Lexicon
from simplelex.records import RawEntryRecord


def english_lexicon(records: Optional[Iterable[RawEntryRecord]] = None) -> Lexicon:
    r"""
    Build a `Lexicon` which inflects words using the built-in English irregular forms.

    Args:
        records: the words of the lexicon.
            Defaults to the built-in core English lexicon.
    """
    return Lexicon.from_records(
        records if records is not None else ENGLISH_CORE_LEXICON_RECORDS,
        irregular_forms=ENGLISH_IRREGULAR_FORMS,
    )
