from __future__ import annotations

import argparse
import json
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from hsscaffold import ConfigError, ScaffoldConfig, ScaffoldOutcome, ScaffoldResult, ScaffoldStatus
from hsscaffold.cli import build_parser, format_scaffold_summary, main
from hsscaffold.cli.commands.new import config_from_args


def _new_args(**overrides: object) -> argparse.Namespace:
    values: dict[str, object] = {
        "command": "new",
        "config": None,
        "app": None,
        "lib": None,
        "test": None,
        "app_dir": None,
        "lib_dir": None,
        "test_dir": None,
        "force": False,
        "no_interactive": False,
        "dry_run": False,
        "verbose": False,
    }
    values.update(overrides)
    return argparse.Namespace(**values)


def _read_tree(root: Path) -> dict[str, str]:
    return {
        p.relative_to(root).as_posix(): p.read_text(encoding="utf-8") for p in root.rglob("*.hs") if p.is_file()
    }


# ---------------------------------------------------------------------------
# parser
# ---------------------------------------------------------------------------


def test_build_parser_requires_subcommand() -> None:
    with pytest.raises(SystemExit) as exc:
        build_parser().parse_args([])

    assert exc.value.code == 2


def test_build_parser_new_defaults() -> None:
    args = build_parser().parse_args(["new"])

    assert args.app is None
    assert args.lib is None
    assert args.test is None
    assert args.force is False
    assert args.no_interactive is False
    assert args.dry_run is False


def test_build_parser_new_accepts_lists_and_flags() -> None:
    args = build_parser().parse_args(
        ["new", "--lib", "Lib", "Utils", "--test-dir", "tests", "-f", "--no-interactive", "--what-if"]
    )

    assert args.lib == ["Lib", "Utils"]
    assert args.test_dir == "tests"
    assert args.force is True
    assert args.no_interactive is True
    assert args.dry_run is True


def test_build_parser_file_requires_name() -> None:
    with pytest.raises(SystemExit) as exc:
        build_parser().parse_args(["file"])

    assert exc.value.code == 2


def test_build_parser_version_prints_and_exits(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as exc:
        build_parser().parse_args(["--version"])

    assert exc.value.code == 0
    assert capsys.readouterr().out.startswith("hsscaffold ")


# ---------------------------------------------------------------------------
# config_from_args
# ---------------------------------------------------------------------------


def test_config_from_args_defaults() -> None:
    assert config_from_args(_new_args()) == ScaffoldConfig()


def test_config_from_args_overrides_groups_and_flags() -> None:
    config = config_from_args(_new_args(lib=["Lib", "Echo"], app_dir="exe", dry_run=True))

    assert config.library.file_names == ("Lib", "Echo")
    assert config.app.directory == "exe"
    assert config.app.file_names == ("Main",)
    assert config.dry_run is True


def test_config_from_args_layers_over_config_file(tmp_path: Path) -> None:
    path = tmp_path / "hsscaffold.json"
    path.write_text(
        json.dumps({"test": {"directory": "tests", "file_names": ["Spec"]}, "no_interactive": True}),
        encoding="utf-8",
    )

    config = config_from_args(_new_args(config=str(path), test=["Spec", "Props"]))

    assert Path(config.test.directory) == (tmp_path / "tests").resolve()
    assert config.test.file_names == ("Spec", "Props")
    assert config.no_interactive is True


def test_config_from_args_rejects_invalid_names() -> None:
    with pytest.raises(ConfigError, match="invalid options"):
        config_from_args(_new_args(app_dir=""))


# ---------------------------------------------------------------------------
# summary
# ---------------------------------------------------------------------------


def test_format_summary_apply() -> None:
    result = ScaffoldResult(
        outcomes=(
            ScaffoldOutcome(path=Path("app/Main.hs"), module="Main", status=ScaffoldStatus.WRITTEN),
            ScaffoldOutcome(path=Path("test/Main.hs"), module="Main", status=ScaffoldStatus.SKIPPED),
            ScaffoldOutcome(
                path=Path("src-lib/Lib.hs"), module="Lib", status=ScaffoldStatus.FAILED, error="disk full"
            ),
        )
    )

    text = format_scaffold_summary(result)

    assert "scaffold complete (apply)" in text
    assert "Written:   1 file\n" in text
    assert "Skipped:   1 file\n" in text
    assert "Failed:    1 file\n" in text
    assert f"+ {Path('app/Main.hs')} (module Main)" in text
    assert f"! {Path('src-lib/Lib.hs')} (module Lib): disk full" in text
    assert "[dry-run]" not in text


def test_format_summary_dry_run() -> None:
    result = ScaffoldResult(
        outcomes=(ScaffoldOutcome(path=Path("app/Main.hs"), module="Main", status=ScaffoldStatus.DRY_RUN),),
        dry_run=True,
    )

    text = format_scaffold_summary(result)

    assert "scaffold complete (dry-run)" in text
    assert "Planned:   1 file\n" in text
    assert "Failed" not in text
    assert "[dry-run] No changes were made" in text


# ---------------------------------------------------------------------------
# main: new / file
# ---------------------------------------------------------------------------


def test_main_new_default_layout(workdir: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["new"]) == 0

    assert _read_tree(workdir) == {
        "app/Main.hs": "module Main where\n",
        "src-lib/Lib.hs": "module Lib where\n",
        "test/Main.hs": "module Main where\n",
    }
    assert "Written:   3 files" in capsys.readouterr().out


def test_main_new_dry_run_writes_nothing(workdir: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["new", "--dry-run"]) == 0

    assert list(workdir.iterdir()) == []
    assert "Planned:   3 files" in capsys.readouterr().out


def test_main_new_prompts_through_questionary(workdir: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (workdir / "app").mkdir()
    (workdir / "app" / "Main.hs").write_text("keep\n", encoding="utf-8")
    confirm = MagicMock()
    confirm.return_value.ask.return_value = False
    monkeypatch.setattr("hsscaffold.cli.prompt.questionary.confirm", confirm)

    assert main(["new"]) == 0

    confirm.assert_called_once()
    assert "already exists. Overwrite?" in confirm.call_args.args[0]
    assert confirm.call_args.kwargs == {"default": False}
    assert (workdir / "app" / "Main.hs").read_text(encoding="utf-8") == "keep\n"
    assert (workdir / "src-lib" / "Lib.hs").exists()


def test_main_new_cancelled_prompt_aborts(
    workdir: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    (workdir / "app").mkdir()
    (workdir / "app" / "Main.hs").write_text("keep\n", encoding="utf-8")
    confirm = MagicMock()
    confirm.return_value.ask.return_value = None
    monkeypatch.setattr("hsscaffold.cli.prompt.questionary.confirm", confirm)

    assert main(["new"]) == 2

    assert "Aborted." in capsys.readouterr().out
    assert not (workdir / "src-lib").exists()


def test_main_new_no_interactive_never_prompts(workdir: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (workdir / "test").mkdir()
    (workdir / "test" / "Main.hs").write_text("keep\n", encoding="utf-8")
    confirm = MagicMock()
    monkeypatch.setattr("hsscaffold.cli.prompt.questionary.confirm", confirm)

    assert main(["new", "--no-interactive"]) == 0

    confirm.assert_not_called()
    assert (workdir / "test" / "Main.hs").read_text(encoding="utf-8") == "keep\n"


def test_main_new_invalid_config_returns_3(workdir: Path, capsys: pytest.CaptureFixture[str]) -> None:
    (workdir / "hsscaffold.json").write_text("{", encoding="utf-8")

    assert main(["new", "--config", "hsscaffold.json"]) == 3

    assert "error: invalid JSON" in capsys.readouterr().err


def test_main_new_failed_file_returns_5(workdir: Path) -> None:
    (workdir / "blocker").write_text("", encoding="utf-8")

    assert main(["new", "--lib-dir", "blocker/src", "--no-interactive"]) == 5

    assert (workdir / "app" / "Main.hs").exists()
    assert (workdir / "test" / "Main.hs").exists()


def test_main_new_verbose_configures_logging(workdir: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    import hsscaffold.cli as cli

    basic_config = MagicMock()
    monkeypatch.setattr(cli.logging, "basicConfig", basic_config)

    assert main(["new", "--verbose", "--dry-run"]) == 0

    basic_config.assert_called_once()
    assert basic_config.call_args.kwargs["level"] == cli.logging.DEBUG


def test_main_file_scaffolds_into_directory(workdir: Path) -> None:
    assert main(["file", "Parser", "Lexer.hs", "--dir", "src"]) == 0

    assert _read_tree(workdir) == {
        "src/Parser.hs": "module Parser where\n",
        "src/Lexer.hs": "module Lexer where\n",
    }


@pytest.mark.parametrize("name", ["", ".hs"])
def test_main_file_rejects_empty_name(workdir: Path, capsys: pytest.CaptureFixture[str], name: str) -> None:
    assert main(["file", "Good", name, "--dir", "src"]) == 3

    assert "error: invalid options" in capsys.readouterr().err
    assert list(workdir.iterdir()) == []


def test_main_file_rejects_absolute_name(workdir: Path, tmp_path_factory: pytest.TempPathFactory) -> None:
    outside = tmp_path_factory.mktemp("outside")

    assert main(["file", str(outside / "Evil"), "--dir", "src"]) == 3

    assert list(outside.iterdir()) == []
    assert not (workdir / "src").exists()


def test_main_file_force_overwrites(workdir: Path) -> None:
    (workdir / "Utils.hs").write_text("old\n", encoding="utf-8")

    assert main(["file", "Utils", "--force"]) == 0

    assert (workdir / "Utils.hs").read_text(encoding="utf-8") == "module Utils where\n"


# ---------------------------------------------------------------------------
# main: init / echo
# ---------------------------------------------------------------------------


def test_main_init_writes_default_config(workdir: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["init"]) == 0

    payload = json.loads((workdir / "hsscaffold.json").read_text(encoding="utf-8"))
    assert payload["library"] == {"directory": "src-lib", "file_names": ["Lib"]}
    assert "Config written to hsscaffold.json" in capsys.readouterr().out


def test_main_init_defaults_refuses_existing_output(workdir: Path, capsys: pytest.CaptureFixture[str]) -> None:
    (workdir / "hsscaffold.json").write_text("{}", encoding="utf-8")

    assert main(["init", "--defaults"]) == 2

    assert "already exists" in capsys.readouterr().err
    assert (workdir / "hsscaffold.json").read_text(encoding="utf-8") == "{}"


def test_main_init_declined_overwrite_aborts(workdir: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (workdir / "custom.json").write_text("{}", encoding="utf-8")
    confirm = MagicMock()
    confirm.return_value.ask.return_value = False
    monkeypatch.setattr("hsscaffold.cli.prompt.questionary.confirm", confirm)

    assert main(["init", "--output", "custom.json"]) == 2

    assert (workdir / "custom.json").read_text(encoding="utf-8") == "{}"


def test_main_init_accepted_overwrite_writes(workdir: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (workdir / "custom.json").write_text("{}", encoding="utf-8")
    confirm = MagicMock()
    confirm.return_value.ask.return_value = True
    monkeypatch.setattr("hsscaffold.cli.prompt.questionary.confirm", confirm)

    assert main(["init", "-o", "custom.json"]) == 0

    assert json.loads((workdir / "custom.json").read_text(encoding="utf-8"))["app"]["directory"] == "app"


def test_main_echo(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["echo", "hello", "world"]) == 0

    assert capsys.readouterr().out == "hello\nworld\n"


def test_main_init_unwritable_output_returns_3(workdir: Path, capsys: pytest.CaptureFixture[str]) -> None:
    (workdir / "blocker").write_text("", encoding="utf-8")

    assert main(["init", "--output", "blocker/hsscaffold.json"]) == 3

    assert "error: failed writing config file" in capsys.readouterr().err
