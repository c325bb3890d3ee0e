# heavens_stdout

Listen to what the heavens have to say.

`heavens_stdout` has two modes:

- **Talk**: the heavens speak a few random sentences, typed out one
  character at a time. Sentences are built from a grammar of word types
  (nouns, verbs, adjectives, ...) with words taken from a directory of
  wordset-dictionary style JSON files.
- **Search**: the heavens emit an endless, seeded stream of lowercase
  letters. Give it a phrase and it scans the stream (with a
  Knuth-Morris-Pratt matcher) until the phrase appears, then shows where it
  was found together with up to 100 letters on each side. Several searches
  with different random seeds run in parallel threads and the first hit wins.

## Installation

```
pip install .
```

The package has no runtime dependencies beyond the standard library.

## Command line

```
heavens-stdout --help
```

With no mode given, `heavens-stdout` talks.

```
heavens-stdout talk [--wordset DIR] [--speed CHARS_PER_SECOND] [--seed N]
```

- `--wordset`: directory whose `*.json` files hold the words
  (default `../deps/wordset-dictionary/data`, relative to the current
  directory). Each file is an object mapping keys to entries with a `word`
  and a list of `meanings`; a word is filed under the first meaning whose
  `speech_part` is one of noun, verb, adjective, adverb, pronoun,
  preposition, conjunction, determiner or interjection. Unreadable or
  malformed files are skipped.
- `--speed`: characters typed per second (default 50).
- `--seed`: seed for reproducible speech.

If no words can be found for a sentence, it reads
`No valid sentence found :/`.

```
heavens-stdout search QUERY... [--workers N]
```

The words of the query are joined, lower-cased and stripped of spaces; what
remains must consist of the letters a-z only, otherwise the command stops
with a usage error. `--workers` sets the number of parallel searches
(default: the number of CPUs). The command prints
`Searching in gods messages...`, then the result as a short piece of HTML
markup: the context with the match wrapped in a red `<span>`, and a line
`Found after N letters`.

## Library use

Generating sentences from a word directory:

```python
import random

from heavens_stdout.generator import Generator
from heavens_stdout.grammar import Complexity

generator = Generator.from_directory("path/to/wordset/data", random.Random(7))
print(generator.generate_sentence(Complexity.NORMAL))
print(generator.generate_random_sentences())
```

A `Generator` can also be given a word map directly, a mapping from
`WordType` to lists of words. `Complexity.LOW`, `NORMAL`, `HIGH` and
`GENIUS` give sentences of 5, 7, 10 and 14 words.

Typing the result out at a steady pace:

```python
import sys

from heavens_stdout.talk import Typewriter, type_out

type_out("Behold the light.", sys.stdout, 50)

for char in Typewriter("Amen.", speed=10):
    ...
```

Searching the letter stream:

```python
from heavens_stdout.search import ParallelSearch, format_result, normalize_query

query = normalize_query("Hello There")
result = ParallelSearch(4).run(query)
if result is not None:
    print(result.position, result.context)
    print(format_result(result))
```

For a single, reproducible search use `search_string(query, seed)`.
Each letter of the stream is fully determined by its position and the seed,
so `letter_at` and `generate_sequence` reproduce any part of it.
`ParallelSearch.cancel()` stops a search running in another thread, and
`run` then returns `None`.

## What it does not do

Everything happens in the terminal: there is no graphical window, and the
search result is printed as HTML markup rather than rendered. No word
dictionary ships with the package; talk mode needs a directory of JSON word
files to produce real sentences.

## Running the tests

```
pip install .[test]
pytest
```