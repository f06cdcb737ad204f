"""
Tests for the ``b26c`` command-line interface.
"""
from __future__ import annotations

import shutil
from pathlib import Path

import pytest

from btsp_compiler.cli import main

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """Run each CLI call inside an empty directory (artifacts land in cwd)."""
    monkeypatch.chdir(tmp_path)
    shutil.copy(FIXTURES / "hello.btsp", tmp_path / "hello.btsp")
    return tmp_path


class TestArgumentCount:
    def test_no_arguments(self, workdir, capsys):
        assert main([]) == 1
        out = capsys.readouterr().out
        assert out == "b26c expected 2 or more arguments, instead got 1.\n"

    def test_flags_not_counted_as_arguments(self, workdir, capsys):
        assert main(["-v"]) == 1
        out = capsys.readouterr().out
        assert out == "b26c expected 2 or more arguments, instead got 1.\n"

    def test_unknown_command_rejected(self, workdir):
        with pytest.raises(SystemExit) as exc_info:
            main(["run", "hello.btsp"])
        assert exc_info.value.code != 0


class TestBuildValidation:
    def _lines(self, capsys):
        return capsys.readouterr().out.splitlines()

    def test_wrong_suffix(self, workdir, capsys):
        (workdir / "hello.txt").write_text("#start\n#end\n", encoding="utf-8")
        assert main(["build", "hello.txt"]) == 1
        lines = self._lines(capsys)
        assert lines[0] == "b26c=1:"
        assert lines[1] == "build-properties-valid: 1"
        assert lines[2].startswith("build-path-valid: 1 (")
        assert lines[3] == "build-path-suffix-valid: 0"
        assert not (workdir / "main.btspdebug").exists()

    def test_missing_path(self, workdir, capsys):
        assert main(["build", "absent.btsp"]) == 1
        lines = self._lines(capsys)
        expected = str((workdir / "absent.btsp").absolute())
        assert lines[2] == f'build-path-valid: 0 ("{expected}")'
        assert lines[3] == "build-path-suffix-valid: 1"

    def test_extra_arguments(self, workdir, capsys):
        assert main(["build", "hello.btsp", "other.btsp"]) == 1
        lines = self._lines(capsys)
        assert lines[1] == "build-properties-valid: 0"
        assert lines[2].startswith("build-path-valid: 1")

    def test_no_path(self, workdir, capsys):
        assert main(["build"]) == 1
        lines = self._lines(capsys)
        assert lines[1:] == [
            "build-properties-valid: 0",
            f'build-path-valid: 0 ("{Path("").absolute()}")',
            "build-path-suffix-valid: 0",
        ]

    def test_path_quotes_and_backslashes_escaped(self, workdir, capsys):
        assert main(["build", 'we"ird\\name.btsp']) == 1
        lines = self._lines(capsys)
        shown = str((workdir / 'we"ird\\name.btsp').absolute())
        shown = shown.replace("\\", "\\\\").replace('"', '\\"')
        assert lines[2] == f'build-path-valid: 0 ("{shown}")'
        assert '\\"ird\\\\name' in lines[2]


class TestBuild:
    def test_writes_main_artifact(self, workdir, capsys):
        assert main(["build", "hello.btsp"]) == 0
        assert capsys.readouterr().out == ""
        text = (workdir / "main.btspdebug").read_text(encoding="utf-8")
        assert text.startswith(";;details\nprojectname=hello.btsp\n")

    def test_output_option(self, workdir):
        assert main(["build", "hello.btsp", "-o", "hello"]) == 0
        assert (workdir / "hello.btspdebug").exists()
        assert not (workdir / "main.btspdebug").exists()

    def test_verbose_after_subcommand(self, workdir):
        assert main(["build", "hello.btsp", "-v"]) == 0

    def test_directory_with_btsp_suffix_fails_to_open(self, workdir, capsys):
        (workdir / "dir.btsp").mkdir()
        assert main(["build", "dir.btsp"]) == 1
        assert capsys.readouterr().out == "b26c=1\nfile-opened: 0\n"
        assert not (workdir / "main.btspdebug").exists()
