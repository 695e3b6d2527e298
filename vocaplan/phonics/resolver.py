"""
Phonics chunk resolver.

Looks a word up in the curated chunk table and falls back to a rule-based
syllable splitter when it is missing. Resolution never fails for a
non-empty word, so phonics activities are always playable.
"""

from collections.abc import Mapping

from vocaplan.schemas import ChunkEntry, ChunkSource, normalize_text


VOWELS = frozenset("aeiou")


def _is_vowel(char: str) -> bool:
    return char.lower() in VOWELS


def _is_consonant(char: str) -> bool:
    return char.isalpha() and not _is_vowel(char)


def split_syllables(word: str) -> list[str]:
    """
    Approximate syllable chunks.

    A chunk is closed right after a vowel whose next letter is a consonant
    that is either followed by another vowel or ends the word:

        tiger -> ti, ge, r
        robot -> ro, bo, t
        apple -> apple  (consonant clusters are not split)

    The chunks always concatenate back to the input exactly.
    """
    if not word:
        raise ValueError("Cannot split an empty word")

    chunks = []
    current = []
    for i, char in enumerate(word):
        current.append(char)
        if not _is_vowel(char) or i + 1 >= len(word) or not _is_consonant(word[i + 1]):
            continue
        if i + 2 == len(word) or _is_vowel(word[i + 2]):
            chunks.append("".join(current))
            current = []

    if current:
        chunks.append("".join(current))
    return chunks


def resolve_chunks(word: str, curated_table: Mapping[str, list[str]]) -> list[str]:
    """
    Ordered phonics chunks for a word.

    Both the curated lookup and the fallback splitter work on the normalized
    form of the word, so " Tiger " and "tiger" resolve identically.

    Args:
        word: The word as scheduled
        curated_table: normalized word -> chunks; entries are returned unmodified

    Returns:
        At least one non-empty chunk
    """
    key = normalize_text(word)
    curated = curated_table.get(key)
    if curated:
        return list(curated)
    return split_syllables(key)


class PhonicsResolver:
    """
    Resolve chunk entries against one curated table, caching by normalized word.

    Both sources are static for the lifetime of the table, so the cache is
    never invalidated.
    """

    def __init__(self, curated_table: Mapping[str, list[str]] | None = None):
        self.curated_table = dict(curated_table or {})
        self._cache: dict[str, ChunkEntry] = {}

    def resolve(self, word: str) -> ChunkEntry:
        key = normalize_text(word)
        if key not in self._cache:
            curated = self.curated_table.get(key)
            if curated:
                entry = ChunkEntry(word=key, chunks=tuple(curated), source=ChunkSource.CURATED)
            else:
                entry = ChunkEntry(word=key, chunks=tuple(split_syllables(key)), source=ChunkSource.FALLBACK)
            self._cache[key] = entry
        return self._cache[key]

    def chunks(self, word: str) -> list[str]:
        return list(self.resolve(word).chunks)

    def __len__(self) -> int:
        return len(self.curated_table)
