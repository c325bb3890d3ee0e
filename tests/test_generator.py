import json
import random

import pytest

from heavens_stdout.generator import NO_SENTENCE, Generator, load_wordset
from heavens_stdout.grammar import (
    START_RULES,
    Complexity,
    WordType,
    follow_types,
    sentence_length,
)


def _full_word_map():
    return {
        word_type: [f"{word_type.value}{i}" for i in range(3)]
        for word_type in WordType
        if word_type is not WordType.END
    }


def _type_of(word):
    return WordType(word.rstrip("0123456789"))


def _write(path, document):
    path.write_text(json.dumps(document), encoding="utf-8")


def test_load_wordset_uses_first_known_meaning(tmp_path):
    _write(
        tmp_path / "a.json",
        {
            "quick": {
                "word": "quick",
                "meanings": [
                    {"speech_part": "Adjective"},
                    {"speech_part": "noun"},
                ],
            },
            "run": {"word": "run", "meanings": [{"speech_part": "weird"}, {"speech_part": "verb"}]},
        },
    )
    word_map = load_wordset(tmp_path)
    assert word_map == {WordType.ADJECTIVE: ["quick"], WordType.VERB: ["run"]}


def test_load_wordset_skips_bad_files(tmp_path):
    (tmp_path / "broken.json").write_text("{not json", encoding="utf-8")
    _write(tmp_path / "list.json", ["cat"])
    (tmp_path / "notes.txt").write_text(json.dumps({"x": {"word": "x"}}), encoding="utf-8")
    _write(tmp_path / "good.json", {"cat": {"word": "cat", "meanings": [{"speech_part": "noun"}]}})
    assert load_wordset(tmp_path) == {WordType.NOUN: ["cat"]}


def test_load_wordset_reads_files_in_name_order(tmp_path):
    _write(tmp_path / "b.json", {"dog": {"word": "dog", "meanings": [{"speech_part": "noun"}]}})
    _write(tmp_path / "a.json", {"cat": {"word": "cat", "meanings": [{"speech_part": "noun"}]}})
    assert load_wordset(tmp_path)[WordType.NOUN] == ["cat", "dog"]


def test_load_wordset_missing_directory(tmp_path):
    assert load_wordset(tmp_path / "absent") == {}


def test_from_directory(tmp_path):
    _write(tmp_path / "w.json", {"cat": {"word": "cat", "meanings": [{"speech_part": "noun"}]}})
    generator = Generator.from_directory(tmp_path, random.Random(1))
    assert generator.words_of_type(WordType.NOUN) == "cat"


def test_words_of_type():
    generator = Generator({WordType.NOUN: ["cat", "dog"]})
    assert generator.words_of_type(WordType.NOUN) == "cat dog"
    assert generator.words_of_type(WordType.VERB) == ""


def test_empty_word_map_finds_no_sentence():
    generator = Generator({}, random.Random(3))
    assert generator.generate_sentence(Complexity.LOW) == NO_SENTENCE


@pytest.mark.parametrize("complexity", list(Complexity))
@pytest.mark.parametrize("seed", range(5))
def test_sentence_follows_grammar(complexity, seed):
    generator = Generator(_full_word_map(), random.Random(seed))
    sentence = generator.generate_sentence(complexity)
    assert sentence.endswith(".")
    assert not sentence.startswith(" ")
    words = sentence[:-1].split(" ")
    assert len(words) == sentence_length(complexity)
    types = [_type_of(w) for w in words]
    assert types[0] in START_RULES
    for current, following in zip(types, types[1:]):
        assert following in follow_types(current)
    assert WordType.END in follow_types(types[-1])


def test_only_nouns():
    generator = Generator({WordType.NOUN: ["cat"]}, random.Random(0))
    assert generator.generate_sentence(Complexity.LOW) == "cat cat cat cat cat."


def test_same_seed_same_text():
    first = Generator(_full_word_map(), random.Random(42)).generate_random_sentences()
    second = Generator(_full_word_map(), random.Random(42)).generate_random_sentences()
    assert first == second


@pytest.mark.parametrize("seed", range(10))
def test_random_sentences_count(seed):
    generator = Generator(_full_word_map(), random.Random(seed))
    text = generator.generate_random_sentences()
    assert text.endswith(".")
    assert 1 <= text.count(".") <= 4