r"""
A lexicon of words for natural language generation.

A `Lexicon` stores `WordEntry`\ s annotated with a `LexicalCategory` and a `FeatureRecord`
and resolves both base forms and inflected surface forms back to those entries.
"""
