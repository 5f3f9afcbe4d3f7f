"""Tests for cli.py - argument handling and the --once printer."""

import io
from pathlib import Path

import pytest

from doot import __version__, cli
from doot.presenter import Presenter
from doot.scan_provider import FileScanProvider


class TestPrintOnce:
    """Tests for print_once function."""

    def test_prints_newest_first_with_location(self, make_tree, diagnostics) -> None:
        root = make_tree({"a.rs": "// TODO: one\n\n// TODO: two\n"})
        out = io.StringIO()

        code = cli.print_once(Presenter(FileScanProvider(root, diagnostics=diagnostics)), out)

        assert code == 0
        assert out.getvalue().splitlines() == [
            f"{root / 'a.rs'}:3: two",
            f"{root / 'a.rs'}:1: one",
        ]

    def test_empty_tree_prints_nothing(self, tmp_path: Path, diagnostics) -> None:
        out = io.StringIO()

        cli.print_once(Presenter(FileScanProvider(tmp_path, diagnostics=diagnostics)), out)

        assert out.getvalue() == ""


class TestMain:
    """Tests for main function."""

    def test_once_flag(self, make_tree, capsys) -> None:
        root = make_tree({"x.rs": "  // TODO: from main\n"})

        code = cli.main([str(root), "--once"])

        assert code == 0
        assert capsys.readouterr().out.strip() == f"{root / 'x.rs'}:1: from main"

    def test_defaults_to_current_directory(
        self, make_tree, capsys, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        root = make_tree({"here.rs": "// TODO: cwd\n"})
        monkeypatch.chdir(root)

        cli.main(["--once"])

        assert capsys.readouterr().out.strip() == "here.rs:1: cwd"

    def test_version(self, capsys) -> None:
        with pytest.raises(SystemExit) as exc:
            cli.main(["--version"])

        assert exc.value.code == 0
        assert __version__ in capsys.readouterr().out

    def test_launches_tui(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        launched = []
        monkeypatch.setattr("doot.app.run", lambda presenter: launched.append(presenter))

        code = cli.main([str(tmp_path)])

        assert code == 0
        assert len(launched) == 1
        assert isinstance(launched[0], Presenter)
