from scripts.solve_board import main


def test_cli_prints_ranked_words(dictionary_file, capsys):
    code = main(["cats/orex/dpqm/enti", "--dictionary", str(dictionary_file)])
    assert code == 0
    out = capsys.readouterr().out
    lines = out.splitlines()

    assert lines[0].split() == ["C", "A", "T", "S"]
    assert lines[2].split() == ["D", "P", "QU", "M"]
    assert any(line.split()[:2] == ["CATS", "400"] and line.endswith("A1 → B1 → C1 → D1") for line in lines)
    assert lines[-1] == "9 words, 2400 points"


def test_cli_board_file_and_limit(tmp_path, dictionary_file, capsys):
    board = tmp_path / "board.txt"
    board.write_text("c a\nr t\n", encoding="utf-8")
    code = main([str(board), "--dictionary", str(dictionary_file), "--limit", "1"])
    assert code == 0
    out = capsys.readouterr().out
    assert "CART" in out
    assert "CAT " not in out
    assert out.strip().endswith("3 words, 600 points")


def test_cli_reports_ragged_board(dictionary_file, capsys):
    code = main(["cat/or", "--dictionary", str(dictionary_file)])
    assert code == 1
    assert "not rectangular" in capsys.readouterr().err


def test_cli_reports_missing_dictionary(tmp_path, capsys):
    code = main(["cats/orex", "--dictionary", str(tmp_path / "missing.txt")])
    assert code == 1
    assert "Error" in capsys.readouterr().err
