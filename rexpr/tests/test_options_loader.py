import pytest

from rexpr.pattern.loader import load_pattern_text, load_patterns
from rexpr.pattern.options import ParseOptions


def test_default_options() -> None:
    opts = ParseOptions()
    assert opts.strict is False
    assert opts.max_depth is None


def test_options_from_mapping() -> None:
    opts = ParseOptions.from_mapping({"strict": True, "max_depth": None})
    assert opts == ParseOptions(strict=True)
    assert ParseOptions.from_mapping({"max_depth": 8}).max_depth == 8


def test_options_reject_bad_values() -> None:
    with pytest.raises(ValueError):
        ParseOptions.from_mapping({"greedy": True})
    with pytest.raises(ValueError):
        ParseOptions(max_depth=0)
    with pytest.raises(TypeError):
        ParseOptions(max_depth=True)
    with pytest.raises(TypeError):
        ParseOptions(max_depth="10")


def test_load_patterns(tmp_path) -> None:
    path = tmp_path / "patterns.txt"
    path.write_bytes(b"# sample\r\n(a|b)*a\r\n\r\n  \nab{1,2}\n# end\n")
    assert load_pattern_text(str(path)) == "# sample\n(a|b)*a\n\n  \nab{1,2}\n# end\n"
    assert load_patterns(str(path)) == ["(a|b)*a", "ab{1,2}"]


def test_load_patterns_keeps_inner_whitespace(tmp_path) -> None:
    path = tmp_path / "patterns.txt"
    path.write_text("a b\n", encoding="utf-8")
    assert load_patterns(str(path)) == ["a b"]


def test_load_patterns_missing_file(tmp_path) -> None:
    with pytest.raises(OSError):
        load_patterns(str(tmp_path / "nope.txt"))
