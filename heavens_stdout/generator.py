"""Random sentence generation from a wordset dictionary."""

from __future__ import annotations

import json
import random
from collections.abc import Mapping, Sequence
from pathlib import Path

from .grammar import (
    COMPLEXITIES,
    START_RULES,
    Complexity,
    WordType,
    follow_types,
    map_speech_part,
    sentence_length,
)

DEFAULT_WORDSET_DIR = Path("../deps/wordset-dictionary/data")
MAX_SENTENCES = 5
NO_SENTENCE = "No valid sentence found :/"


def load_wordset(directory: str | Path) -> dict[WordType, list[str]]:
    """Read every ``*.json`` file in ``directory`` and group words by word type.

    Each word is filed under the first of its meanings whose speech part is
    known. Unreadable or malformed files are skipped.
    """
    word_map: dict[WordType, list[str]] = {}
    root_dir = Path(directory)
    if not root_dir.is_dir():
        return word_map

    for path in sorted(p for p in root_dir.glob("*.json") if p.is_file()):
        try:
            document = json.loads(path.read_bytes())
        except (OSError, ValueError):
            continue
        if not isinstance(document, dict):
            continue

        for key in sorted(document):
            entry = document[key]
            if not isinstance(entry, dict):
                entry = {}
            word = entry.get("word")
            word = word if isinstance(word, str) else ""
            meanings = entry.get("meanings")
            if not isinstance(meanings, list):
                meanings = []

            for meaning in meanings:
                if not isinstance(meaning, dict):
                    continue
                part = meaning.get("speech_part")
                part = part.lower() if isinstance(part, str) else ""
                word_type = map_speech_part(part)
                if word_type is not None:
                    word_map.setdefault(word_type, []).append(word)
                    break
    return word_map


class Generator:
    """Builds grammatical-looking nonsense sentences from a word map."""

    def __init__(
        self,
        word_map: Mapping[WordType, Sequence[str]] | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self._word_map: dict[WordType, list[str]] = {
            word_type: list(words) for word_type, words in (word_map or {}).items()
        }
        self._rng = rng if rng is not None else random.Random()

    @classmethod
    def from_directory(
        cls,
        directory: str | Path = DEFAULT_WORDSET_DIR,
        rng: random.Random | None = None,
    ) -> Generator:
        """Create a generator from a wordset dictionary directory."""
        return cls(load_wordset(directory), rng)

    def words_of_type(self, word_type: WordType) -> str:
        """All words of ``word_type``, separated by spaces."""
        return " ".join(self._word_map.get(word_type, ()))

    def generate_sentence(self, complexity: Complexity) -> str:
        """Generate one sentence with as many words as ``complexity`` demands."""
        start = self._rng.choice(START_RULES)
        words = self._walk(start, 0, sentence_length(complexity), set())
        if words is None:
            return NO_SENTENCE
        return " ".join(words) + "."

    def generate_random_sentences(self) -> str:
        """Generate a short paragraph of sentences of random complexity."""
        sentences = [self.generate_sentence(self._rng.choice(COMPLEXITIES))]
        # The bound is drawn afresh on every pass.
        while len(sentences) - 1 < self._rng.randrange(MAX_SENTENCES - 1):
            sentences.append(self.generate_sentence(self._rng.choice(COMPLEXITIES)))
        return " ".join(sentences)

    def _pick(self, word_type: WordType) -> str:
        words = self._word_map.get(word_type)
        return self._rng.choice(words) if words else ""

    def _walk(
        self,
        word_type: WordType,
        count: int,
        max_words: int,
        path: set[tuple[WordType, int]],
    ) -> list[str] | None:
        """Depth-first search for a word sequence that ends exactly at ``max_words``."""
        if count == max_words:
            return [] if word_type is WordType.END else None

        state = (word_type, count)
        if state in path:
            # Revisiting a state without adding a word can never make progress.
            return None

        words: list[str] = []
        word = self._pick(word_type)
        if word:
            words.append(word)
            count += 1

        path.add(state)
        try:
            for next_type in follow_types(word_type):
                rest = self._walk(next_type, count, max_words, path)
                if rest is not None:
                    return words + rest
        finally:
            path.discard(state)
        return None