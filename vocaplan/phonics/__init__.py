"""vocaplan phonics: chunk resolution and the curated table loader."""

from .resolver import PhonicsResolver, resolve_chunks, split_syllables, VOWELS
from .loader import load_phonics_table, parse_table_line, iter_text_table, iter_yaml_table

__all__ = [
    "PhonicsResolver",
    "resolve_chunks",
    "split_syllables",
    "VOWELS",
    "load_phonics_table",
    "parse_table_line",
    "iter_text_table",
    "iter_yaml_table",
]
