"""Tests for ReachSettings — unified settings with TOML source."""

from pathlib import Path

import click
import pytest

from reachctl.config.settings import ReachSettings
from reachctl.domain.reachability import ReachStrategy


class TestReachSettingsDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        """With no TOML and no env vars, all fields use code defaults."""
        settings = ReachSettings.from_cli(start_dir=tmp_path)
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.quiet is False
        assert settings.verbose is False
        assert settings.generate.edges == 25
        assert settings.generate.letters == 15
        assert settings.generate.seed is None
        assert settings.reachability.strategy is ReachStrategy.PER_SOURCE
        assert settings.render.true_char == "1"

    def test_frozen(self, tmp_path: Path) -> None:
        settings = ReachSettings.from_cli(start_dir=tmp_path)
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]

    def test_cli_flags(self, tmp_path: Path) -> None:
        settings = ReachSettings.from_cli(start_dir=tmp_path, quiet=True, log_json=True)
        assert settings.quiet is True
        assert settings.log_json is True


class TestTomlSource:
    def test_loads_from_toml(self, tmp_path: Path) -> None:
        (tmp_path / "reachctl.toml").write_text(
            '[generate]\nedges = 10\nseed = 3\n[reachability]\nstrategy = "per-pair"\n'
        )
        settings = ReachSettings.from_cli(start_dir=tmp_path)
        assert settings.generate.edges == 10
        assert settings.generate.seed == 3
        assert settings.generate.letters == 15  # default preserved
        assert settings.reachability.strategy is ReachStrategy.PER_PAIR

    def test_walk_up_discovery(self, tmp_path: Path) -> None:
        (tmp_path / "reachctl.toml").write_text("[render]\ntrue_char = '#'\n")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        settings = ReachSettings.from_cli(start_dir=nested)
        assert settings.render.true_char == "#"
        assert settings.config_path == tmp_path / "reachctl.toml"

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom" / "my.toml"
        custom.parent.mkdir(parents=True)
        custom.write_text("[generate]\nletters = 4\n")
        settings = ReachSettings.from_cli(config_path=str(custom), start_dir=tmp_path)
        assert settings.generate.letters == 4
        assert settings.config_path == custom

    def test_missing_explicit_path_uses_defaults(self, tmp_path: Path) -> None:
        settings = ReachSettings.from_cli(config_path=str(tmp_path / "nope.toml"))
        assert settings.config_path is None
        assert settings.generate.edges == 25

    def test_invalid_toml(self, tmp_path: Path) -> None:
        (tmp_path / "reachctl.toml").write_text("[generate\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            ReachSettings.from_cli(start_dir=tmp_path)

    def test_letters_clamped(self, tmp_path: Path) -> None:
        (tmp_path / "reachctl.toml").write_text("[generate]\nletters = 40\n")
        assert ReachSettings.from_cli(start_dir=tmp_path).generate.letters == 26

    def test_invalid_strategy_rejected(self, tmp_path: Path) -> None:
        (tmp_path / "reachctl.toml").write_text('[reachability]\nstrategy = "bfs"\n')
        with pytest.raises(Exception):
            ReachSettings.from_cli(start_dir=tmp_path)


class TestEnvOverrides:
    def test_env_beats_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "reachctl.toml").write_text("[generate]\nedges = 10\n")
        monkeypatch.setenv("REACHCTL_GENERATE__EDGES", "7")
        assert ReachSettings.from_cli(start_dir=tmp_path).generate.edges == 7

    def test_cli_beats_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("REACHCTL_QUIET", "false")
        assert ReachSettings.from_cli(start_dir=tmp_path, quiet=True).quiet is True
