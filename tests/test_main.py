from pathlib import Path
import sys

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from main import main
from png_funs import read_png


@pytest.fixture
def cover(tmp_path, minimal_png):
    path = tmp_path / "cover.png"
    path.write_bytes(minimal_png)
    return path


def test_encode_then_decode(tmp_path, cover, capsys):
    output = tmp_path / "secret.png"
    assert main(["encode", "-p", str(cover), "-m", "hidden words", "-c", "ruSt", "-o", str(output)]) == 0
    capsys.readouterr()

    assert main(["decode", "-p", str(output), "-c", "ruSt"]) == 0
    assert capsys.readouterr().out.strip() == "hidden words"


def test_encode_without_output_prints_png(cover, capsys, minimal_png):
    assert main(["encode", "-p", str(cover), "-m", "hi", "-c", "ruSt"]) == 0
    out = capsys.readouterr().out
    assert "Type:ruSt" in out
    assert cover.read_bytes() == minimal_png


def test_decode_missing_chunk(cover, capsys):
    assert main(["decode", "-p", str(cover), "-c", "ruSt"]) == 0
    assert capsys.readouterr().out.strip() == "Chunk not found"


def test_remove_writes_output(tmp_path, cover, capsys, minimal_png):
    encoded = tmp_path / "secret.png"
    cleaned = tmp_path / "clean.png"
    main(["encode", "-p", str(cover), "-m", "bye", "-c", "ruSt", "-o", str(encoded)])
    capsys.readouterr()

    assert main(["remove", "-p", str(encoded), "-c", "ruSt", "-o", str(cleaned)]) == 0
    assert "Data: bye" in capsys.readouterr().out
    assert read_png(cleaned).chunk_by_type("ruSt") is None
    assert cleaned.read_bytes() == minimal_png


def test_remove_missing_chunk_fails(cover, capsys):
    assert main(["remove", "-p", str(cover), "-c", "ruSt"]) == 1
    assert "Chunk not found: ruSt" in capsys.readouterr().err


def test_print(cover, capsys):
    assert main(["print", "-p", str(cover)]) == 0
    out = capsys.readouterr().out
    assert "Type:IHDR" in out
    assert "Type:IEND" in out


def test_invalid_chunk_type_argument(cover):
    with pytest.raises(SystemExit):
        main(["decode", "-p", str(cover), "-c", "ru5t"])


def test_not_a_png(tmp_path, capsys):
    path = tmp_path / "plain.txt"
    path.write_bytes(b"just some text")
    assert main(["print", "-p", str(path)]) == 1
    assert "Not a valid PNG file" in capsys.readouterr().err


def test_missing_file(tmp_path, capsys):
    assert main(["print", "-p", str(tmp_path / "missing.png")]) == 1
    assert capsys.readouterr().err.startswith("error:")


def test_no_command(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out.strip() == "No command provided"


def test_version(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--version"])
    assert excinfo.value.code == 0
    assert capsys.readouterr().out.strip() == "png-message 0.1.0"
