from rexpr.cli import main


def test_print_default_pattern(capsys) -> None:
    assert main(["print"]) == 0
    assert capsys.readouterr().out == "(((a|b))*a)\n"


def test_print_pattern(capsys) -> None:
    assert main(["print", "a{2,5}b"]) == 0
    assert capsys.readouterr().out == "((a){2,5}b)\n"


def test_print_syntax_error(capsys) -> None:
    assert main(["print", "a{5,2}"]) == 2
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "[SYNTAX ERROR]" in captured.err
    assert "INVALID_RANGE at 1" in captured.err
    assert "a{5,2}\n ^" in captured.err


def test_print_strict(capsys) -> None:
    assert main(["print", "a)b"]) == 0
    assert capsys.readouterr().out == "a\n"
    assert main(["print", "a)b", "--strict"]) == 2
    assert "BAD_SPLIT at 2" in capsys.readouterr().err


def test_print_max_depth(capsys) -> None:
    assert main(["print", "((((a))))", "--max-depth", "3"]) == 2
    assert "TOO_DEEP" in capsys.readouterr().err
    assert main(["print", "ab", "--max-depth", "0"]) == 2
    assert "[ERROR] ValueError" in capsys.readouterr().err


def test_print_debug(capsys) -> None:
    assert main(["print", "ab", "-D"]) == 0
    captured = capsys.readouterr()
    assert captured.out == "(ab)\n"
    assert "[DEBUG] options | strict=False max_depth=None" in captured.err
    assert "[DEBUG] AST ready | nodes=3" in captured.err
    assert "Concatenation(left=Literal(char='a'), right=Literal(char='b'))" in captured.err


def test_check_text(capsys) -> None:
    assert main(["check", "--text", "ab"]) == 0
    assert capsys.readouterr().out == "[CHECK OK] ab -> (ab)\n"


def test_check_input_file(tmp_path, capsys) -> None:
    path = tmp_path / "patterns.txt"
    path.write_text("# patterns\na|b\na{3,1}\n.+\n", encoding="utf-8")
    assert main(["check", "--input", str(path)]) == 2
    captured = capsys.readouterr()
    assert captured.out == "[CHECK OK] a|b -> (a|b)\n[CHECK OK] .+ -> (.)+\n"
    assert "INVALID_RANGE" in captured.err
    assert "[CHECK FAILED] 1 of 3 pattern(s) rejected" in captured.err


def test_check_missing_file(tmp_path, capsys) -> None:
    assert main(["check", "--input", str(tmp_path / "nope.txt")]) == 2
    assert "[ERROR]" in capsys.readouterr().err


def test_print_long_run_with_large_max_depth(capsys) -> None:
    assert main(["print", "a" * 3000, "--max-depth", "5000"]) == 0
    assert capsys.readouterr().out == "(a" * 2999 + "a" + ")" * 2999 + "\n"


def test_print_debug_large_tree(capsys) -> None:
    assert main(["print", "a" * 3000, "-D"]) == 0
    captured = capsys.readouterr()
    assert "[DEBUG] AST ready | nodes=5999" in captured.err
    assert "[DEBUG] AST repr skipped (more than 200 nodes)" in captured.err
    assert "[AST]" not in captured.err
