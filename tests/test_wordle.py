from wordsched.wordle import main, wordle


def test_fixed_prefix_with_one_unknown():
    assert wordle("a-", "", {"ab", "ac", "bb", "abc"}) == {"ab", "ac"}


def test_floating_letter_must_be_used():
    dictionary = {"ab", "bb", "cb"}
    assert wordle("-b", "a", dictionary) == {"ab"}


def test_two_floating_letters_any_order():
    dictionary = {"ab", "ba", "aa", "bb"}
    assert wordle("--", "ab", dictionary) == {"ab", "ba"}


def test_repeated_floating_letters():
    dictionary = {"aa", "ab", "ba"}
    assert wordle("--", "aa", dictionary) == {"aa"}


def test_more_floating_than_unknowns_gives_nothing():
    assert wordle("-", "ab", {"a", "b", "ab"}) == set()


def test_fully_fixed_pattern():
    assert wordle("cat", "", {"cat", "cot"}) == {"cat"}


def test_fully_fixed_pattern_with_unused_floating():
    assert wordle("cat", "a", {"cat"}) == set()


def test_results_all_in_dictionary_and_match_pattern():
    dictionary = {"sing", "song", "sang", "ring", "sting", "snag"}
    result = wordle("s-ng", "", dictionary)
    assert result == {"sing", "song", "sang"}
    for word in result:
        assert word in dictionary
        assert word[0] == "s" and word[2:] == "ng"


def test_main_without_arguments(capsys):
    assert main([]) == 1
    assert "Please provide an initial string" in capsys.readouterr().out


def test_main_prints_sorted_matches(tmp_path, monkeypatch, capsys):
    (tmp_path / "dict-eng.txt").write_text("bat cat hat Mat\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    assert main(["-at"]) == 0
    out_lines = capsys.readouterr().out.split()
    assert out_lines == ["bat", "cat", "hat"]


def test_main_with_floating(tmp_path, monkeypatch, capsys):
    (tmp_path / "dict-eng.txt").write_text("bat cat hat\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    assert main(["-at", "c"]) == 0
    assert capsys.readouterr().out.split() == ["cat"]