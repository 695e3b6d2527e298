"""
Curated phonics table loader.

Loads the hand-authored word -> chunks table from static content. Two
formats are understood:

- Plain text, one entry per line: ``word|chunk,chunk`` (``#`` comments
  and blank lines are ignored)
- YAML mapping: ``word: [chunk, chunk]``
"""

import logging
from pathlib import Path
from typing import Iterator

import yaml

from vocaplan.schemas import normalize_text

logger = logging.getLogger(__name__)


def parse_table_line(line: str) -> tuple[str, list[str]] | None:
    """
    Parse one ``word|chunk,chunk`` line.

    Examples:
        'rabbit|rab,bit' -> ('rabbit', ['rab', 'bit'])
        '# comment'      -> None

    Returns None for blank lines and comments.
    """
    line = line.strip()
    if not line or line.startswith('#'):
        return None
    if '|' not in line:
        raise ValueError(f"Missing '|' separator: {line!r}")

    word, chunk_part = line.split('|', 1)
    chunks = [c.strip() for c in chunk_part.split(',')]
    return normalize_text(word), chunks


def chunks_match(word: str, chunks: list[str]) -> bool:
    """Curated chunks must be non-empty and spell the word (case-insensitive)."""
    return bool(chunks) and all(chunks) and ''.join(chunks).lower() == word.lower()


def iter_text_table(content: str, source_file: str = "<string>") -> Iterator[tuple[str, list[str]]]:
    """Yield valid (word, chunks) entries from text content, skipping bad lines."""
    for line_no, line in enumerate(content.splitlines(), start=1):
        try:
            parsed = parse_table_line(line)
        except ValueError as e:
            logger.warning(f"{source_file}:{line_no}: skipped ({e})")
            continue
        if parsed is None:
            continue

        word, chunks = parsed
        if not chunks_match(word, chunks):
            logger.warning(f"{source_file}:{line_no}: chunks {chunks} do not spell '{word}', skipped")
            continue
        yield word, chunks


def iter_yaml_table(content: str, source_file: str = "<string>") -> Iterator[tuple[str, list[str]]]:
    """Yield valid (word, chunks) entries from a YAML mapping."""
    data = yaml.safe_load(content) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{source_file}: expected a mapping of word -> chunks")

    for raw_word, raw_chunks in data.items():
        word = normalize_text(raw_word)
        if isinstance(raw_chunks, str):
            raw_chunks = raw_chunks.split(',')
        chunks = [str(c).strip() for c in (raw_chunks or [])]
        if not chunks_match(word, chunks):
            logger.warning(f"{source_file}: chunks {chunks} do not spell '{word}', skipped")
            continue
        yield word, chunks


def load_phonics_table(path: str | Path) -> dict[str, list[str]]:
    """
    Load a curated chunk table from disk.

    Args:
        path: .txt (``word|chunk,chunk``) or .yaml/.yml file

    Returns:
        Dict of normalized word -> chunks (later lines override earlier ones)

    Raises:
        FileNotFoundError: If the table file doesn't exist
        yaml.YAMLError: If YAML parsing fails
    """
    file_path = Path(path)
    if not file_path.exists():
        raise FileNotFoundError(f"Phonics table not found: {file_path}")

    with open(file_path, "r", encoding="utf-8") as f:
        content = f.read()

    if file_path.suffix.lower() in ('.yaml', '.yml'):
        entries = iter_yaml_table(content, file_path.name)
    else:
        entries = iter_text_table(content, file_path.name)

    table = dict(entries)
    logger.info(f"Loaded {len(table)} curated phonics entries from {file_path}")
    return table
