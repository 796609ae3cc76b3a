import tempfile
from pathlib import Path

import pytest
import yaml

from lifeboard.core.exceptions import ConfigurationError
from lifeboard.utils import config_loader
from lifeboard.utils.config_loader import (
    BoardConfig,
    LifeConfig,
    _get_config_path,
    _load_yaml_file,
    _parse_life_cfg_from_dict,
    clear_config_cache,
    get_config,
    load_config,
)


class TestBoardConfig:
    def test_defaults(self):
        cfg = BoardConfig()
        assert (cfg.width, cfg.height) == (40, 20)
        assert cfg.randomize is True
        assert cfg.seed is None

    def test_immutable(self):
        cfg = BoardConfig()
        with pytest.raises(AttributeError):
            cfg.width = 1


class TestGetConfigPath:
    def test_get_config_path_default(self):
        path = _get_config_path()
        assert path.endswith("config.yaml")
        assert "lifeboard" in path

    def test_get_config_path_custom(self):
        custom_path = "/path/to/custom/config.yaml"
        assert _get_config_path(custom_path) == custom_path


class TestLoadYamlFile:
    def test_load_valid_yaml(self):
        yaml_content = {"board": {"width": 3}}
        with tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False) as f:
            yaml.dump(yaml_content, f)
            f.flush()
            path = Path(f.name)
        try:
            assert _load_yaml_file(path) == yaml_content
        finally:
            path.unlink()

    def test_load_invalid_yaml(self, temp_yaml_file):
        temp_yaml_file.write_text("{ invalid: yaml: content", encoding="utf-8")

        with pytest.raises(ConfigurationError):
            _load_yaml_file(temp_yaml_file)

    def test_load_empty_yaml(self, temp_yaml_file):
        temp_yaml_file.write_text("", encoding="utf-8")

        assert _load_yaml_file(temp_yaml_file) == {}

    def test_load_non_mapping_root(self, temp_yaml_file):
        temp_yaml_file.write_text("- 1\n- 2\n", encoding="utf-8")

        with pytest.raises(ConfigurationError):
            _load_yaml_file(temp_yaml_file)

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError):
            _load_yaml_file(tmp_path / "nope.yaml")


class TestParseLifeCfgFromDict:
    def test_valid(self, valid_config_dict):
        cfg = _parse_life_cfg_from_dict(valid_config_dict)

        assert isinstance(cfg, LifeConfig)
        assert (cfg.board.width, cfg.board.height) == (12, 7)
        assert cfg.board.randomize is False
        assert cfg.board.seed == 42
        assert cfg.timing.tick_interval_ms == 250
        assert cfg.logging.level == "DEBUG"

    def test_missing_sections_take_defaults(self):
        cfg = _parse_life_cfg_from_dict({})

        assert (cfg.board.width, cfg.board.height) == (40, 20)
        assert cfg.timing.tick_interval_ms == 100
        assert cfg.logging.level == "INFO"

    @pytest.mark.parametrize(
        "section,key,value",
        [
            ("board", "width", 0),
            ("board", "height", -3),
            ("board", "width", "wide"),
            ("board", "height", True),
            ("board", "seed", "abc"),
            ("board", "width", 2.9),
            ("board", "height", "5"),
            ("board", "randomize", "false"),
            ("board", "randomize", 0),
            ("timing", "tick_interval_ms", 100.0),
            ("timing", "tick_interval_ms", 0),
            ("logging", "level", "LOUD"),
        ],
    )
    def test_invalid_values(self, valid_config_dict, section, key, value):
        valid_config_dict[section][key] = value

        with pytest.raises(ConfigurationError) as exc_info:
            _parse_life_cfg_from_dict(valid_config_dict)
        assert exc_info.value.config_key == f"{section}.{key}"

    def test_section_must_be_mapping(self, valid_config_dict):
        valid_config_dict["board"] = [1, 2]

        with pytest.raises(ConfigurationError):
            _parse_life_cfg_from_dict(valid_config_dict)


class TestLoadConfig:
    def test_loose_yaml_values_are_rejected(self, temp_yaml_file):
        temp_yaml_file.write_text(
            "board: {width: 2.9, height: '5', randomize: 'false'}\n",
            encoding="utf-8",
        )

        with pytest.raises(ConfigurationError):
            load_config(str(temp_yaml_file))

    def test_load_from_path(self, temp_config_yaml_file):
        cfg = load_config(str(temp_config_yaml_file))

        assert cfg.board.width == 12
        assert cfg.timing.tick_interval_ms == 250

    def test_bundled_config(self):
        cfg = load_config()

        assert cfg.board.width > 0
        assert cfg.board.height > 0
        assert cfg.timing.tick_interval_ms == 100


class TestGetConfig:
    def test_get_config_caches(self, monkeypatch):
        clear_config_cache()
        calls = []
        real_load = config_loader.load_config

        def counting_load(path=None):
            calls.append(path)
            return real_load(path)

        monkeypatch.setattr(config_loader, "load_config", counting_load)
        try:
            first = get_config()
            second = get_config()
        finally:
            clear_config_cache()

        assert first is second
        assert calls == [None]

    def test_clear_config_cache(self):
        first = get_config()
        clear_config_cache()
        second = get_config()

        assert first == second
        assert first is not second
        clear_config_cache()
