"""Word types, sentence complexities and the grammar rules that link them."""

from __future__ import annotations

import string
from enum import Enum


class WordType(Enum):
    """Part of speech a word can take in a generated sentence."""

    NOUN = "noun"
    VERB = "verb"
    ADJECTIVE = "adjective"
    ADVERB = "adverb"
    PRONOUN = "pronoun"
    PREPOSITION = "preposition"
    CONJUNCTION = "conjunction"
    DETERMINER = "determiner"
    INTERJECTION = "interjection"
    END = "end"


class Complexity(Enum):
    """How long a generated sentence is."""

    LOW = 0
    NORMAL = 1
    HIGH = 2
    GENIUS = 3


SENTENCE_LENGTHS: dict[Complexity, int] = {
    Complexity.LOW: 5,
    Complexity.NORMAL: 7,
    Complexity.HIGH: 10,
    Complexity.GENIUS: 14,
}

COMPLEXITIES: tuple[Complexity, ...] = tuple(Complexity)

START_RULES: tuple[WordType, ...] = (
    WordType.NOUN,
    WordType.PRONOUN,
    WordType.DETERMINER,
    WordType.INTERJECTION,
    WordType.ADJECTIVE,
)

# Word types that may follow a word of the given type, in the order they are tried.
FOLLOW_RULES: dict[WordType, tuple[WordType, ...]] = {
    WordType.NOUN: (WordType.VERB, WordType.CONJUNCTION, WordType.PREPOSITION, WordType.END),
    WordType.VERB: (
        WordType.NOUN,
        WordType.ADVERB,
        WordType.PREPOSITION,
        WordType.CONJUNCTION,
        WordType.END,
    ),
    WordType.ADJECTIVE: (WordType.NOUN, WordType.ADJECTIVE),
    WordType.ADVERB: (WordType.VERB, WordType.ADJECTIVE, WordType.ADVERB),
    WordType.PRONOUN: (WordType.VERB, WordType.ADVERB),
    WordType.PREPOSITION: (WordType.DETERMINER, WordType.NOUN, WordType.PRONOUN),
    WordType.CONJUNCTION: (WordType.NOUN, WordType.PRONOUN, WordType.VERB),
    WordType.DETERMINER: (WordType.ADJECTIVE, WordType.NOUN),
    WordType.INTERJECTION: (WordType.PRONOUN, WordType.NOUN, WordType.VERB),
    WordType.END: (),
}

LETTERS = string.ascii_lowercase

_SPEECH_PARTS: dict[str, WordType] = {
    word_type.value: word_type for word_type in WordType if word_type is not WordType.END
}


def sentence_length(complexity: Complexity) -> int:
    """Number of words in a sentence of the given complexity."""
    return SENTENCE_LENGTHS[complexity]


def follow_types(word_type: WordType) -> tuple[WordType, ...]:
    """Word types allowed after a word of ``word_type``."""
    return FOLLOW_RULES[word_type]


def map_speech_part(part: str) -> WordType | None:
    """Map a dictionary speech-part name to a word type, or None if unknown."""
    return _SPEECH_PARTS.get(part)