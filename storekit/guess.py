"""A number guessing game played on standard input and output."""

from __future__ import annotations

import random
from enum import Enum
from itertools import islice
from typing import Iterable, Iterator, Optional, Sequence

from storekit.prompts import ask_question_int, ask_question_string

MAX_GUESSES = 15
SECRET_RANGE = 1024


class GuessResult(Enum):
    """How a guess compares with the secret number; the value is the reply."""

    TOO_LOW = "För litet!"
    TOO_HIGH = "För stort!"
    CORRECT = "Bingo!"


def judge(guess: int, secret: int) -> GuessResult:
    """Compare ``guess`` with ``secret``."""
    if guess < secret:
        return GuessResult.TOO_LOW
    if guess > secret:
        return GuessResult.TOO_HIGH
    return GuessResult.CORRECT


def play(
    name: str,
    secret: int,
    guesses: Iterable[int],
    max_guesses: int = MAX_GUESSES,
) -> Iterator[str]:
    """Yield the game's messages, drawing guesses lazily from ``guesses``.

    At most ``max_guesses`` wrong guesses are allowed; a guess is only
    taken after the reply to the previous one has been yielded.
    """
    yield f"Du {name}, jag tänker på ett nummer ... kan du gissa vilket?"
    wrong = 0
    for guess in islice(iter(guesses), max_guesses):
        result = judge(guess, secret)
        yield result.value
        if result is GuessResult.CORRECT:
            yield (
                f"Det tog {name} {wrong} gissningar att komma fram till rätt nummer!"
            )
            return
        wrong += 1
    yield f"Nu har du slut på gissningar! Jag tänkte på {secret}!"


def _asked_guesses() -> Iterator[int]:
    while True:
        yield ask_question_int("Gissa ett tal:")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Play one game against a random secret number."""
    secret = random.randrange(SECRET_RANGE)
    try:
        name = ask_question_string("What is your name: \n")
        for line in play(name, secret, _asked_guesses()):
            print(line)
    except EOFError:
        print()
        return 1
    return 0