from pathlib import Path

from essy.cli import main

PROGRAM = """\
COPY START 1000
FIRST LDA ALPHA
 RSUB
ALPHA WORD 7
 END FIRST
"""


def _write(tmp_path: Path, name: str) -> Path:
    path = tmp_path / name
    path.write_text(PROGRAM, encoding="utf-8")
    return path


def test_no_arguments_prints_usage(capsys):
    assert main([]) == 1
    assert "Usage:" in capsys.readouterr().out


def test_assembles_file(tmp_path, capsys):
    source = _write(tmp_path, "prog.sic")
    assert main([str(source)]) == 0
    out = capsys.readouterr().out
    assert f"Assembling file: {source}" in out
    assert "FIRST 1000" in out
    assert "Process complete, all files have been assembled!" in out
    assert (tmp_path / "prog.l").is_file()
    assert (tmp_path / "prog.st").is_file()
    assert (tmp_path / "prog.interm").is_file()


def test_assembles_several_files(tmp_path):
    first = _write(tmp_path, "one.sic")
    second = _write(tmp_path, "two.sic")
    assert main([str(first), str(second)]) == 0
    assert (tmp_path / "one.l").read_text() == (tmp_path / "two.l").read_text()


def test_missing_file_is_reported_and_others_continue(tmp_path, capsys):
    missing = tmp_path / "absent.sic"
    present = _write(tmp_path, "prog.sic")
    assert main([str(missing), str(present)]) == 0
    out = capsys.readouterr().out
    assert f"Could not open file! {missing}" in out
    assert (tmp_path / "prog.l").is_file()
    assert not (tmp_path / "absent.l").exists()


def test_malformed_operand_fails(tmp_path, capsys):
    source = tmp_path / "bad.sic"
    source.write_text("P START 0\nBUF RESB many\n END P\n", encoding="utf-8")
    assert main([str(source)]) == 1
    assert "bad.sic" in capsys.readouterr().err