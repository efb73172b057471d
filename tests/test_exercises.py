import io

import pytest

from storekit import exercises


def test_hello():
    assert exercises.hello() == "Hello, world!"


def test_count_up_and_down():
    assert exercises.count_up(10) == list(range(1, 11))
    assert exercises.count_down(10) == list(reversed(exercises.count_up(10)))
    assert exercises.count_up(0) == []


@pytest.mark.parametrize("rows,growth", [(10, 1), (4, 3), (0, 2)])
def test_staircase_invariants(rows, growth):
    lines, star_total = exercises.staircase(rows, growth)
    assert len(lines) == rows
    assert star_total == sum(len(line) for line in lines)
    assert all(set(line) <= {"*"} for line in lines)
    assert all(len(line) == (i + 1) * growth for i, line in enumerate(lines))


def test_is_prime_small_cases():
    assert exercises.is_prime(0) is False
    assert exercises.is_prime(1) is False
    assert exercises.is_prime(2) is True
    assert exercises.is_prime(7) is True


@pytest.mark.parametrize("a,b", [(2, 2), (3, 5), (7, 11), (4, 9)])
def test_is_prime_rejects_products(a, b):
    assert exercises.is_prime(a * b) is False


@pytest.mark.parametrize(
    "text,expected",
    [("123", True), ("-42", True), ("", False), ("-", False), ("12a", False), ("+5", False)],
)
def test_is_integer(text, expected):
    assert exercises.is_integer(text) is expected


def test_gcd_divides_both():
    a, b = 84, 36
    result = exercises.gcd(a, b)
    assert a % result == 0 and b % result == 0
    assert exercises.gcd(a // result, b // result) == 1


def test_gcd_same_number():
    assert exercises.gcd(17, 17) == 17


@pytest.mark.parametrize("a,b", [(0, 5), (5, 0), (-3, 6)])
def test_gcd_rejects_non_positive(a, b):
    with pytest.raises(ValueError):
        exercises.gcd(a, b)


def test_fizzbuzz_words():
    assert exercises.fizzbuzz_word(15) == "FizzBuzz"
    assert exercises.fizzbuzz_word(9) == "Fizz"
    assert exercises.fizzbuzz_word(10) == "Buzz"
    assert exercises.fizzbuzz_word(7) == "7"


def test_fizzbuzz_joined():
    text = exercises.fizzbuzz(15)
    parts = text.split(", ")
    assert len(parts) == 15
    assert parts == [exercises.fizzbuzz_word(n) for n in range(1, 16)]
    assert exercises.fizzbuzz(0) == ""


def test_fib_base_cases():
    assert exercises.fib(0) == 0
    assert exercises.fib(1) == 1
    assert exercises.fib(-4) == 0


@pytest.mark.parametrize("n", range(2, 20))
def test_fib_recurrence(n):
    assert exercises.fib(n) == exercises.fib(n - 1) + exercises.fib(n - 2)


def test_total_of_source_example():
    assert exercises.total([1, 2, 3, 4, 5]) == 15


def test_foldl_starts_from_zero():
    assert exercises.foldl([], lambda acc, x: acc + x) == 0
    assert exercises.foldl([3, 4], lambda acc, x: acc * 10 + x) == 34


def test_string_length_matches_encoded_length():
    text = "Hej på dig"
    assert exercises.string_length(text) == len(text.encode("utf-8"))
    assert exercises.string_length("") == 0


def test_quoted_trim_source_example():
    assert exercises.quoted_trim("   Hej på dig!  ssafsa     ") == "'Hej på dig!  ssafsa'"


def test_swap():
    assert exercises.swap(7, 42) == (42, 7)


def test_cat_concatenates_files(tmp_path):
    first = tmp_path / "a.txt"
    second = tmp_path / "b.txt"
    first.write_text("first line\n", encoding="utf-8")
    second.write_text("second\nthird\n", encoding="utf-8")
    out = io.StringIO()
    exercises.cat([str(first), str(second)], out)
    assert out.getvalue() == "first line\nsecond\nthird\n"


def test_cat_missing_file(tmp_path):
    with pytest.raises(OSError):
        exercises.cat([str(tmp_path / "missing.txt")], io.StringIO())


def test_passthrough_copies_short_input():
    out = io.StringIO()
    copied = exercises.passthrough(io.StringIO("hello\n"), out)
    assert out.getvalue() == "hello\n"
    assert copied == len("hello\n")


def test_passthrough_stops_before_limit():
    text = "abcdefghij"
    out = io.StringIO()
    copied = exercises.passthrough(io.StringIO(text), out, limit=5)
    assert out.getvalue() == text[: 5 - 1]
    assert copied == 5 - 1


def test_passthrough_default_limit():
    text = "x" * 5000
    out = io.StringIO()
    copied = exercises.passthrough(io.StringIO(text), out)
    assert copied == 1024 - 1
    assert out.getvalue() == text[:copied]