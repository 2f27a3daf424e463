import pytest

from simplelex.categories import Inflection, LexicalCategory
from simplelex.english import english_lexicon
from simplelex.features import LexicalFeature
from simplelex.records import MalformedSourceError
from simplelex.sources import records_from_yaml

_LEXICON_YAML = """
- id: E0067023
  base: woman
  category: noun
  irreg:
  proper: "false"
  variant_forms:
    irreg:
      plural: women
- id: E0054515
  base: sand
  category: noun
  uncount:
- id: E0030559
  base: good
  category: adjective
  qualitative:
  variant_forms:
    irreg: {comparative: better, superlative: best}
- id: E9000001
  base: ox
  category: noun
  primary: true
  irreg:
  plural: oxen
"""


def test_records_from_yaml(tmp_path):
    lexicon_file = tmp_path / "lexicon.yaml"
    lexicon_file.write_text(_LEXICON_YAML, encoding="utf-8")
    records = records_from_yaml(lexicon_file)
    assert [record.base_form for record in records] == ["woman", "sand", "good", "ox"]

    lexicon = english_lexicon(records)
    woman = lexicon.get_word("woman", LexicalCategory.NOUN)
    assert woman.get_feature_as_string(LexicalFeature.PLURAL) == "women"
    assert woman.get_feature_as_boolean(LexicalFeature.PROPER) is False
    assert lexicon.get_word("sand").default_inflection is Inflection.UNCOUNT
    good = lexicon.get_word("good")
    assert good.get_feature_as_boolean(LexicalFeature.QUALITATIVE) is True
    assert lexicon.get_word_from_variant("best") is good
    ox = lexicon.get_word("ox")
    assert ox.is_primary
    assert lexicon.inflect(ox, LexicalFeature.PLURAL) == "oxen"
    assert lexicon.get_word_from_variant("oxen") is ox


def test_empty_yaml(tmp_path):
    lexicon_file = tmp_path / "empty.yaml"
    lexicon_file.write_text("", encoding="utf-8")
    assert records_from_yaml(lexicon_file) == ()


def test_yaml_must_hold_a_list_of_mappings(tmp_path):
    lexicon_file = tmp_path / "lexicon.yaml"
    lexicon_file.write_text("base: dog\n", encoding="utf-8")
    with pytest.raises(RuntimeError):
        records_from_yaml(lexicon_file)
    lexicon_file.write_text("- dog\n- cat\n", encoding="utf-8")
    with pytest.raises(RuntimeError):
        records_from_yaml(lexicon_file)


def test_malformed_yaml_records(tmp_path):
    lexicon_file = tmp_path / "lexicon.yaml"
    lexicon_file.write_text("- {id: E1, base: dog}\n", encoding="utf-8")
    records = records_from_yaml(lexicon_file)
    with pytest.raises(MalformedSourceError):
        english_lexicon(records)
