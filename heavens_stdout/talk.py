"""Revealing text one character at a time, like a slow typist."""

from __future__ import annotations

import sys
import time
from collections.abc import Callable, Iterator
from typing import TextIO

TYPING_SPEED = 50  # characters per second


class Typewriter:
    """Yields the characters of a text at a fixed typing speed."""

    def __init__(self, text: str, speed: float = TYPING_SPEED) -> None:
        if speed <= 0:
            raise ValueError("speed must be positive")
        self.text = text
        self.speed = speed

    @property
    def interval(self) -> float:
        """Seconds between two characters."""
        return 1 / self.speed

    def __len__(self) -> int:
        return len(self.text)

    def __iter__(self) -> Iterator[str]:
        yield from self.text


def type_out(
    text: str,
    stream: TextIO | None = None,
    speed: float = TYPING_SPEED,
    sleep: Callable[[float], object] = time.sleep,
) -> None:
    """Write ``text`` to ``stream`` one character per tick of ``1 / speed`` seconds."""
    out = stream if stream is not None else sys.stdout
    typewriter = Typewriter(text, speed)
    for char in typewriter:
        sleep(typewriter.interval)
        out.write(char)
        out.flush()