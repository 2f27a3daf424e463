r"""
Reading `RawEntryRecord`\ s from files.
"""
import logging
from pathlib import Path
from typing import Tuple, Union

import yaml

from simplelex.records import RawEntryRecord

logger = logging.getLogger(__name__)  # pylint:disable=invalid-name


def records_from_yaml(path: Union[str, Path]) -> Tuple[RawEntryRecord, ...]:
    r"""
    Read the words of a lexicon from a YAML file.

    The file must hold a list of flat mappings,
    each interpreted by `RawEntryRecord.from_mapping`, e.g.

    .. code-block:: yaml

        - id: E0067023
          base: woman
          category: noun
          irreg:
          variant_forms:
            irreg: {plural: women}

    Raises:
        RuntimeError: if the file does not hold a list of mappings.
    """
    path = Path(path)
    with path.open(encoding="utf-8") as yaml_file:
        raw_records = yaml.safe_load(yaml_file)
    if raw_records is None:
        raw_records = []
    if not isinstance(raw_records, list):
        raise RuntimeError(
            f"Expected {path} to contain a list of lexicon entries "
            f"but got {type(raw_records).__name__}"
        )

    ret = []
    for (position, raw_record) in enumerate(raw_records):
        if not isinstance(raw_record, dict):
            raise RuntimeError(
                f"Entry #{position} of {path} should be a mapping but got {raw_record!r}"
            )
        ret.append(RawEntryRecord.from_mapping(raw_record))
    logger.info("Read %s lexicon records from %s", len(ret), path)
    return tuple(ret)
