"""Tests for the YAML configuration loader."""

from pathlib import Path

import pytest

from motorcar.core.config import ConfigError, ConfigLoader


@pytest.fixture
def settings_file(tmp_path: Path) -> Path:
    path = tmp_path / "settings.yaml"
    path.write_text(
        "simulation:\n  tick_hz: 20\ncli:\n  car: cars/compact.yaml\n  idle_seconds: 5.0\n",
        encoding="utf-8",
    )
    return path


class TestLoad:
    def test_load_and_get_nested(self, settings_file: Path) -> None:
        config = ConfigLoader.load(settings_file)

        assert config.get("simulation.tick_hz") == 20
        assert config.get("cli.car") == "cars/compact.yaml"

    def test_missing_key_returns_default(self, settings_file: Path) -> None:
        config = ConfigLoader.load(settings_file)

        assert config.get("cli.drive_km", default=10.0) == 10.0
        assert config.get("cli.car.extra") is None

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="not found"):
            ConfigLoader.load(tmp_path / "absent.yaml")

    def test_empty_file_is_empty_config(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")

        assert ConfigLoader.load(path).to_dict() == {}

    def test_non_mapping_root_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")

        with pytest.raises(ConfigError, match="mapping"):
            ConfigLoader.load(path)

    def test_invalid_yaml_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.yaml"
        path.write_text("cli: [unclosed", encoding="utf-8")

        with pytest.raises(ConfigError, match="Failed to load"):
            ConfigLoader.load(path)


class TestModify:
    def test_set_creates_sections(self) -> None:
        config = ConfigLoader()
        config.set("simulation.tick_hz", 30)

        assert config.get("simulation.tick_hz") == 30

    def test_get_section(self, settings_file: Path) -> None:
        config = ConfigLoader.load(settings_file)

        assert config.get_section("simulation") == {"tick_hz": 20}

        with pytest.raises(ConfigError, match="not found"):
            config.get_section("audio")
        with pytest.raises(ConfigError, match="not a section"):
            config.get_section("cli.car")

    def test_merge_overrides_nested_values(self) -> None:
        base = ConfigLoader({"cli": {"idle_seconds": 30.0, "drive_km": 25.0}})
        base.merge(ConfigLoader({"cli": {"drive_km": 5.0}}))

        assert base.get("cli.idle_seconds") == 30.0
        assert base.get("cli.drive_km") == 5.0

    def test_save_round_trip(self, tmp_path: Path) -> None:
        config = ConfigLoader({"cli": {"car": "cars/roadster.yaml"}})
        target = tmp_path / "out" / "settings.yaml"

        config.save(target)

        assert ConfigLoader.load(target).get("cli.car") == "cars/roadster.yaml"
