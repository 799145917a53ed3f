"""
Tests for config loading.
"""

import pytest

from posix_time.core.config import Config, default_config_path, get_config, reset_config


class TestConfigLoad:
    def test_missing_file_gives_defaults(self, tmp_path):
        config = Config.load(tmp_path / "nope.yaml")
        assert config.strict is False
        assert config.output_format == "text"
        assert config.color is True

    def test_reads_yaml(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text(
            "translate:\n  strict: true\noutput:\n  format: json\n  color: false\n",
            encoding="utf-8",
        )
        config = Config.load(path)
        assert config.strict is True
        assert config.output_format == "json"
        assert config.color is False

    def test_empty_file(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("", encoding="utf-8")
        assert Config.load(path) == Config()

    def test_malformed_yaml_gives_defaults(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("translate: [unclosed\n", encoding="utf-8")
        assert Config.load(path) == Config()

    def test_bad_output_format(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("output:\n  format: xml\n", encoding="utf-8")
        with pytest.raises(ValueError, match="xml"):
            Config.load(path)

    def test_non_mapping_translate_section(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("translate: true\n", encoding="utf-8")
        assert Config.load(path) == Config()

    def test_non_mapping_output_section(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("translate:\n  strict: true\noutput: [json]\n", encoding="utf-8")
        config = Config.load(path)
        assert config.strict is True
        assert config.output_format == "text"

    @pytest.mark.parametrize("body", [
        "translate:\n  strict: 'false'\n",
        "output:\n  color: \"no\"\n",
        "output:\n  color: 1\n",
    ])
    def test_non_bool_flags_rejected(self, tmp_path, body):
        path = tmp_path / "config.yaml"
        path.write_text(body, encoding="utf-8")
        with pytest.raises(ValueError, match="must be true or false"):
            Config.load(path)

    def test_save_round_trip(self, tmp_path):
        path = tmp_path / "sub" / "config.yaml"
        Config(strict=True, output_format="json", color=False).save(path)
        assert Config.load(path) == Config(strict=True, output_format="json", color=False)


class TestGlobalConfig:
    def test_env_var_path(self, isolated_config):
        assert default_config_path() == isolated_config

    def test_cached_until_reset(self, isolated_config):
        first = get_config()
        assert get_config() is first

        isolated_config.write_text("translate:\n  strict: true\n", encoding="utf-8")
        assert get_config().strict is False

        reset_config()
        assert get_config().strict is True
