from pathlib import Path
from evilhangman.datasets import validate_dictionary, pretty_summary, load_words, read_lines, write_lines


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_validate_dictionary_happy_path(tmp_path: Path):
    d = tmp_path / "dictionary.txt"
    _write(d, ["cat", "car", "dog", "bird", "fish"])

    rep = validate_dictionary(str(d))
    assert rep["passed"] is True
    assert rep["lengths"] == {3: 3, 4: 2}
    s = pretty_summary(rep)
    assert "dictionary=5" in s and "lengths 3..4" in s and s.endswith("OK")


def test_validate_dictionary_flags_errors(tmp_path: Path):
    d = tmp_path / "dictionary.txt"
    # 'Dog' is mixed case, 'x-ray' is not alphabetic, blank line is invalid
    d.write_text("cat\nDog\nx-ray\n\ncat\n", encoding="utf-8")

    rep = validate_dictionary(str(d))
    assert rep["passed"] is False
    assert rep["invalid_lines"] == 3
    assert any("invalid" in msg for msg in rep["issues"])
    assert any("duplicate" in msg for msg in rep["issues"])


def test_validate_dictionary_missing_file(tmp_path: Path):
    rep = validate_dictionary(str(tmp_path / "nope.txt"))
    assert rep["exists"] is False and rep["passed"] is False
    assert "lengths none" in pretty_summary(rep)


def test_load_words_normalizes(tmp_path: Path):
    d = tmp_path / "dictionary.txt"
    d.write_text(" Cat\ncar\n\nCAT\ndog \n", encoding="utf-8")
    assert load_words(d) == ["cat", "car", "dog"]


def test_bundled_dictionary_is_clean():
    path = Path(__file__).resolve().parents[1] / "evilhangman" / "datasets" / "data" / "dictionary.txt"
    rep = validate_dictionary(str(path))
    assert rep["passed"] is True
    assert rep["lengths"][5] > 100


def test_write_lines_then_read_back(tmp_path: Path):
    out = tmp_path / "nested" / "words.txt"
    written = write_lines(["cat", "Car", "cat"], out)
    assert written == str(out)
    assert out.read_text(encoding="utf-8") == "cat\nCar\ncat\n"
    assert read_lines(out) == ["cat", "Car", "cat"]
    assert load_words(out) == ["cat", "car"]
