from treemapkit.cli import WORDS, lower_than_string, main


def test_lower_than_string():
    assert lower_than_string("casa", "case")
    assert not lower_than_string("saco", "saca")
    assert not lower_than_string("seco", "seco")


def test_main_prints_sorted_words(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == sorted(WORDS)
    assert lines[0] == "casa"


def test_main_without_arguments(capsys):
    assert main() == 0
    assert len(capsys.readouterr().out.splitlines()) == len(set(WORDS))