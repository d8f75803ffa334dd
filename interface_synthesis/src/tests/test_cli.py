#!/usr/bin/env python3
"""
Tests for the json2interface command-line interface.
"""

import pytest
import io
from pathlib import Path
import sys

sys.path.insert(0, str(Path(__file__).parent.parent / "lib"))

from json2interface_cli import __version__, main


SAMPLE = '{"user-name":"Bob","geo":{"lat":1}}'
EXPECTED = (
    "export interface RootObject {\n  userName: string;\n  geo: Geo;\n}\n\n"
    "export interface Geo {\n  lat: number;\n}"
)


class TestCli:
    """Test argument handling, I/O and exit codes."""

    @pytest.fixture
    def sample_file(self, tmp_path):
        path = tmp_path / "sample.json"
        path.write_text(SAMPLE)
        return path

    def test_reads_file_and_prints(self, sample_file, capsys):
        assert main([str(sample_file)]) == 0
        assert capsys.readouterr().out == EXPECTED + "\n"

    def test_root_name(self, sample_file, capsys):
        assert main([str(sample_file), "--root-name", "User"]) == 0
        assert capsys.readouterr().out.startswith("export interface User {\n")

    def test_reads_stdin(self, monkeypatch, capsys):
        monkeypatch.setattr(sys, "stdin", io.StringIO(SAMPLE))
        assert main([]) == 0
        assert capsys.readouterr().out == EXPECTED + "\n"

    def test_reads_stdin_with_dash(self, monkeypatch, capsys):
        monkeypatch.setattr(sys, "stdin", io.StringIO("[]"))
        assert main(["-", "-r", "Empty"]) == 0
        assert capsys.readouterr().out == "export interface Empty {\n}\n"

    def test_writes_output_file(self, sample_file, tmp_path, capsys):
        output = tmp_path / "types.ts"
        assert main([str(sample_file), "-o", str(output)]) == 0

        assert output.read_text() == EXPECTED + "\n"
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Wrote interfaces" in captured.err

    def test_missing_file(self, tmp_path, capsys):
        assert main([str(tmp_path / "missing.json")]) == 1
        assert "Error" in capsys.readouterr().err

    def test_directory_instead_of_file(self, tmp_path, capsys):
        assert main([str(tmp_path)]) == 1
        assert "Error" in capsys.readouterr().err

    def test_non_utf8_file(self, tmp_path, capsys):
        path = tmp_path / "latin1.json"
        path.write_bytes('{"name": "José"}'.encode("latin-1"))
        assert main([str(path)]) == 1
        assert "Error" in capsys.readouterr().err

    def test_reads_utf8_regardless_of_locale(self, tmp_path, capsys):
        path = tmp_path / "utf8.json"
        path.write_bytes('{"café-name": "crème"}'.encode("utf-8"))
        assert main([str(path), "-r", "Root"]) == 0
        assert capsys.readouterr().out == "export interface Root {\n  caféName: string;\n}\n"

    def test_invalid_json(self, tmp_path, capsys):
        path = tmp_path / "bad.json"
        path.write_text("{oops")
        assert main([str(path)]) == 1
        assert "Invalid JSON" in capsys.readouterr().err

    def test_version(self, capsys):
        assert main(["--version"]) == 0
        assert __version__ in capsys.readouterr().err


if __name__ == "__main__":
    pytest.main([__file__, "-v", "-s"])
