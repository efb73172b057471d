import io
import random
import sys

import pytest

from storekit.guess import GuessResult, judge, main, play


@pytest.mark.parametrize(
    "guess, expected",
    [(1, GuessResult.TOO_LOW), (9, GuessResult.TOO_HIGH), (5, GuessResult.CORRECT)],
)
def test_judge(guess, expected):
    assert judge(guess, 5) is expected


def test_play_until_correct():
    lines = list(play("Anna", 5, [1, 9, 5]))
    assert lines == [
        "Du Anna, jag tänker på ett nummer ... kan du gissa vilket?",
        "För litet!",
        "För stort!",
        "Bingo!",
        "Det tog Anna 2 gissningar att komma fram till rätt nummer!",
    ]


def test_play_out_of_guesses():
    lines = list(play("Bo", 7, [0] * 20, 15))
    assert lines[-1] == "Nu har du slut på gissningar! Jag tänkte på 7!"
    assert lines.count("För litet!") == 15
    assert "Bingo!" not in lines


def test_play_takes_no_guess_after_bingo():
    guesses = iter([3, 4, 99])
    lines = list(play("Cy", 4, guesses))
    assert lines[-2] == "Bingo!"
    assert next(guesses) == 99


def test_play_stops_when_guesses_run_out():
    lines = list(play("Di", 10, [1, 2]))
    assert lines[-1] == "Nu har du slut på gissningar! Jag tänkte på 10!"
    assert len(lines) == 4


def test_main_plays_a_game(monkeypatch, capsys):
    monkeypatch.setattr(random, "randrange", lambda n: 3)
    monkeypatch.setattr(sys, "stdin", io.StringIO("Anna\n1\n3\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Bingo!" in out
    assert "Det tog Anna 1 gissningar att komma fram till rätt nummer!" in out


def test_main_end_of_input(monkeypatch, capsys):
    monkeypatch.setattr(random, "randrange", lambda n: 3)
    monkeypatch.setattr(sys, "stdin", io.StringIO("Anna\n"))
    assert main([]) == 1
    assert "Du Anna" in capsys.readouterr().out