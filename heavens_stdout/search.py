"""Searching for a string in an endless, seeded stream of random letters."""

from __future__ import annotations

import os
import random
import threading
from concurrent.futures import FIRST_COMPLETED, ThreadPoolExecutor, wait
from dataclasses import dataclass

from .grammar import LETTERS

_MASK64 = (1 << 64) - 1
_MIX = 0xFF51AFD7ED558CCD
_BLOCK_SIZE = 1024
CONTEXT_SIZE = 100


def letter_at(position: int, seed: int) -> str:
    """The letter at ``position`` of the stream determined by ``seed``."""
    value = (seed + position) & _MASK64
    value ^= value >> 33
    value = (value * _MIX) & _MASK64
    value ^= value >> 33
    return LETTERS[value % len(LETTERS)]


def generate_sequence(position: int, length: int, seed: int) -> str:
    """``length`` letters of the stream starting at ``position``."""
    return "".join(letter_at(position + offset, seed) for offset in range(length))


def prefix_function(pattern: str) -> list[int]:
    """Knuth-Morris-Pratt failure table of ``pattern``."""
    table = [0] * len(pattern)
    k = 0
    for i, char in enumerate(pattern[1:], start=1):
        while k > 0 and pattern[k] != char:
            k = table[k - 1]
        if pattern[k] == char:
            k += 1
        table[i] = k
    return table


def normalize_query(text: str) -> str:
    """Lower-case ``text`` and drop its spaces."""
    return text.lower().replace(" ", "")


@dataclass(frozen=True)
class SearchResult:
    """Where a query was found and the letters around it."""

    context: str
    local_index: int
    position: int
    query: str


def _check_query(search: str) -> None:
    bad = sorted({char for char in search if char not in LETTERS})
    if bad:
        raise ValueError(f"query may only hold letters a-z, got {''.join(bad)!r}")


def search_string(
    search: str,
    seed: int | None = None,
    cancel: threading.Event | None = None,
) -> SearchResult | None:
    """Find the first occurrence of ``search`` in the stream for ``seed``.

    Returns None for an empty query or when ``cancel`` is set.
    """
    if not search:
        return None
    _check_query(search)
    if seed is None:
        seed = random.getrandbits(64)

    table = prefix_function(search)
    matched = 0
    position = 0
    while matched < len(search):
        if position % _BLOCK_SIZE == 0 and cancel is not None and cancel.is_set():
            return None
        letter = letter_at(position, seed)
        while matched > 0 and letter != search[matched]:
            matched = table[matched - 1]
        if letter == search[matched]:
            matched += 1
        position += 1

    if cancel is not None and cancel.is_set():
        return None

    found = position - len(search)
    before_start = max(0, found - CONTEXT_SIZE)
    context = generate_sequence(
        before_start, found - before_start + len(search) + CONTEXT_SIZE, seed
    )
    return SearchResult(context, found - before_start, found, search)


def format_result(result: SearchResult) -> str:
    """HTML text showing the match highlighted within its context."""
    start = result.local_index
    end = start + len(result.query)
    before = result.context[:start]
    match = result.context[start:end]
    after = result.context[end:]
    return (
        f'...{before}<span style="color: red; font-weight: bold;">{match}</span>{after}...\n'
        f'<span style="color: green; font-weight: bold;">'
        f"Found after {result.position} letters</span>"
    )


class ParallelSearch:
    """Runs several independently seeded searches and keeps the first hit."""

    def __init__(self, workers: int | None = None) -> None:
        self.workers = workers if workers is not None else (os.cpu_count() or 1)
        if self.workers < 1:
            raise ValueError("workers must be at least 1")
        self._cancel = threading.Event()

    def run(self, search: str) -> SearchResult | None:
        """Search with every worker; return the first result, or None if cancelled."""
        self._cancel.set()
        cancel = threading.Event()
        self._cancel = cancel
        if not search:
            return None
        _check_query(search)

        with ThreadPoolExecutor(max_workers=self.workers) as pool:
            pending = {
                pool.submit(search_string, search, random.getrandbits(64), cancel)
                for _ in range(self.workers)
            }
            try:
                while pending and not cancel.is_set():
                    done, pending = wait(pending, return_when=FIRST_COMPLETED)
                    for future in done:
                        result = future.result()
                        if result is not None:
                            return result
                return None
            finally:
                cancel.set()

    def cancel(self) -> None:
        """Stop the search that is running, if any."""
        self._cancel.set()