import pytest
from main import analyze_file, interactive_mode, report_identifier


def _feed(monkeypatch, answers):
    it = iter(answers)

    def fake_input(prompt=""):
        try:
            return next(it)
        except StopIteration:
            raise EOFError

    monkeypatch.setattr("builtins.input", fake_input)


def test_analyze_file_writes_report(tmp_path):
    src = tmp_path / "input.txt"
    src.write_text("int agency12@r = 5;\nint bad;\n", encoding="latin-1")
    out = tmp_path / "output.txt"

    session = analyze_file(str(src), str(out))

    report = out.read_text(encoding="latin-1")
    assert "Valid Variables/Identifiers (Count: 1): [agency12@r]" in report
    assert "Invalid Variables/Identifiers (Count: 1): [bad]" in report
    assert "input.txt" in report
    assert session.has_invalid_identifiers


def test_analyze_file_prints_tokens(tmp_path, capsys):
    src = tmp_path / "prog.c"
    src.write_text("void tokyo23@r();\n", encoding="latin-1")
    analyze_file(str(src), str(tmp_path / "out.txt"), print_tokens=True)
    out = capsys.readouterr().out
    assert "'tokyo23@r'" in out
    assert "function declaration (void)" in out


def test_missing_source_fails_before_writing(tmp_path):
    out = tmp_path / "output.txt"
    with pytest.raises(OSError):
        analyze_file(str(tmp_path / "missing.txt"), str(out))
    assert not out.exists()


def test_report_identifier_output(capsys):
    check = report_identifier("#tokyo23@r")
    out = capsys.readouterr().out
    assert check.valid
    assert 'Checking variable: "#tokyo23@r"' in out
    assert "Valid identifier!" in out
    assert "Present (#)" in out


def test_interactive_mode_validates_until_quit(monkeypatch, capsys):
    _feed(monkeypatch, ["agency12@r", "", "aaab12@r", "quit", "never12@r"])
    interactive_mode()
    out = capsys.readouterr().out
    assert "Valid identifier!" in out
    assert "Invalid identifier!" in out
    assert "More than two consecutive same letters found" in out
    assert "Exiting validation mode." in out
    assert "never12@r" not in out


def test_interactive_mode_stops_at_end_of_input(monkeypatch, capsys):
    _feed(monkeypatch, ["nancy12@r"])
    interactive_mode()
    out = capsys.readouterr().out
    assert 'Checking variable: "nancy12@r"' in out
    assert "Exiting..." in out


def test_decode_error_leaves_existing_report(tmp_path):
    src = tmp_path / "input.txt"
    src.write_bytes(b"int agency12@r;\nchar \xff;\n")
    out = tmp_path / "output.txt"
    out.write_text("previous report", encoding="utf-8")

    with pytest.raises(UnicodeError):
        analyze_file(str(src), str(out), encoding="utf-8")
    assert out.read_text(encoding="utf-8") == "previous report"


def test_unencodable_report_leaves_existing_report(tmp_path):
    # The source decodes as ascii, but its name (the report subtitle) does not encode.
    src = tmp_path / "café.c"
    src.write_text("int agency12@r;\n", encoding="ascii")
    out = tmp_path / "output.txt"
    out.write_text("previous report", encoding="ascii")

    with pytest.raises(UnicodeError):
        analyze_file(str(src), str(out), encoding="ascii")
    assert out.read_text(encoding="ascii") == "previous report"
