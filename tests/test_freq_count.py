from storekit.common import hash_str, str_eq
from storekit.freq_count import (
    count_files,
    count_words,
    format_frequencies,
    main,
    tokenize,
)
from storekit.hash_table import HashTable


def test_tokenize_splits_on_delimiters():
    assert tokenize("Hello, world!") == ["Hello", "world"]
    assert tokenize("a+b-c#d@e(f)g[h]i{j}k.l,m:n;o!p?q r\ts\r\n") == list(
        "abcdefghijklmnopqrs"
    )


def test_tokenize_empty_and_delimiters_only():
    assert tokenize("") == []
    assert tokenize(" ,.;:!? \n") == []


def test_count_words_lowercases_and_counts():
    table = count_words(["The cat", "the CAT, the dog."])
    assert table.lookup("the") == 3
    assert table.lookup("cat") == 2
    assert table.lookup("dog") == 1
    assert "The" not in table


def test_count_words_adds_to_given_table():
    table = HashTable(hash_str, str_eq)
    result = count_words(["one two"], table)
    count_words(["two"], table)
    assert result is table
    assert table.lookup("two") == 2


def test_format_frequencies_sorted():
    table = count_words(["pear apple banana apple"])
    lines = format_frequencies(table)
    words = [line.split(": ")[0] for line in lines]
    assert words == sorted(words)
    assert "apple: 2" in lines
    assert len(lines) == len(table)


def test_format_frequencies_empty_table():
    assert format_frequencies(HashTable(hash_str, str_eq)) == []


def test_count_files_reads_all_files(tmp_path):
    first = tmp_path / "a.txt"
    second = tmp_path / "b.txt"
    first.write_text("alpha beta\nalpha\n", encoding="utf-8")
    second.write_text("Beta gamma\n", encoding="utf-8")
    table = count_files([str(first), str(second)])
    assert table.lookup("alpha") == 2
    assert table.lookup("beta") == 2
    assert table.lookup("gamma") == 1


def test_count_files_reports_missing(tmp_path, capsys):
    missing = tmp_path / "missing.txt"
    table = count_files([str(missing)])
    assert table.is_empty()
    assert str(missing) in capsys.readouterr().err


def test_main_without_arguments(capsys):
    assert main([]) == 1
    assert capsys.readouterr().out.strip() == "Usage: freq-count file1 ... filen"


def test_main_prints_frequencies(tmp_path, capsys):
    path = tmp_path / "words.txt"
    path.write_text("b a b\n", encoding="utf-8")
    assert main([str(path)]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == format_frequencies(count_files([str(path)]))
    assert out[0].startswith("a: ")