"""
Resolve a list of words against a lexicon and write what was found as YAML.

Parameters:

* *words_file*: a file with one word (base or inflected form, or word identifier) per line.
* *lexicon_file* (optional): a YAML lexicon as read by `records_from_yaml`.
  Defaults to the built-in English core lexicon.
* *category* (optional): a `LexicalCategory` name to restrict lookups to. Defaults to *ANY*.
* *output_file*: where to write the results.
"""
import logging
from pathlib import Path
from typing import Any, Iterable, List, Mapping, Optional

import yaml
from vistautils.parameters import Parameters
from vistautils.parameters_only_entrypoint import parameters_only_entry_point

from simplelex.categories import LexicalCategory
from simplelex.english import english_lexicon
from simplelex.lexicon import Lexicon
from simplelex.sources import records_from_yaml
from simplelex.word import WordEntry

WORDS_FILE_PARAMETER = "words_file"
LEXICON_FILE_PARAMETER = "lexicon_file"
CATEGORY_PARAMETER = "category"
OUTPUT_FILE_PARAMETER = "output_file"


def main(params: Parameters) -> None:
    words_file = params.existing_file(WORDS_FILE_PARAMETER)
    lexicon_file = params.optional_existing_file(LEXICON_FILE_PARAMETER)
    category = params.enum(
        CATEGORY_PARAMETER, LexicalCategory, default=LexicalCategory.ANY
    )
    output_file = params.creatable_file(OUTPUT_FILE_PARAMETER)

    if lexicon_file:
        lexicon = english_lexicon(records_from_yaml(lexicon_file))
    else:
        lexicon = english_lexicon()

    words = read_words(words_file)
    results = lookup_words(lexicon, words, category)
    logging.info(
        "Resolved %s of %s words",
        sum(1 for result in results if result["entry"] is not None),
        len(results),
    )
    with open(output_file, "w", encoding="utf-8") as yaml_file:
        yaml.dump(results, yaml_file, sort_keys=False)


def read_words(words_file: Path) -> List[str]:
    with open(words_file, encoding="utf-8") as words_in:
        return [line.strip() for line in words_in if line.strip()]


def lookup_words(
    lexicon: Lexicon,
    words: Iterable[str],
    category: LexicalCategory = LexicalCategory.ANY,
) -> List[Mapping[str, Any]]:
    return [
        {"word": word, "entry": _describe(lexicon, lexicon.lookup_word(word, category))}
        for word in words
    ]


def _describe(
    lexicon: Lexicon, entry: Optional[WordEntry]
) -> Optional[Mapping[str, Any]]:
    if entry is None:
        return None
    return {
        "id": entry.identifier,
        "base": entry.base_form,
        "category": entry.category.name,
        "inflected_forms": {
            str(feature): surface_form
            for (feature, surface_form) in lexicon.inflected_forms(entry).items()
        },
    }


if __name__ == "__main__":
    parameters_only_entry_point(main)
