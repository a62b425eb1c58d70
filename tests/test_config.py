"""Tests for config loading and validation."""

from __future__ import annotations

import pytest

from pc_discovery.config.loader import (
    CONFIG_ENV_VAR,
    apply_overrides,
    load_config,
    parse_config_data,
    resolve_config_path,
)
from pc_discovery.config.schema import ProbeConfig
from pc_discovery.config.validator import validate_config


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    return home


class TestDefaults:
    def test_probe_constants(self):
        config = ProbeConfig()
        assert config.target == ("255.255.255.255", 9999)
        assert config.timeout == 5.0
        assert config.buffer_size == 1024
        assert config.discover_message == "INMO_AAR3_DISCOVER"
        assert config.response_message == "INMO_AAR3_RESPONSE"

    def test_no_file_uses_defaults(self):
        assert resolve_config_path() is None
        assert load_config() == ProbeConfig()


class TestLoading:
    def test_explicit_path(self, tmp_path):
        path = tmp_path / "probe.yaml"
        path.write_text("discovery:\n  port: 4000\n  timeout: 1.5\n  verbose: true\n")

        config = load_config(path)

        assert config.port == 4000
        assert config.timeout == 1.5
        assert config.verbose is True
        assert config.buffer_size == 1024

    def test_env_var_path(self, tmp_path, monkeypatch):
        path = tmp_path / "env.yml"
        path.write_text("discovery:\n  timeout: 2\n")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(path))

        assert load_config().timeout == 2

    def test_home_config(self, isolated_home):
        config_dir = isolated_home / ".pc-discovery"
        config_dir.mkdir()
        (config_dir / "config.yaml").write_text("discovery:\n  port: 12000\n")

        assert load_config().port == 12000

    def test_empty_file_uses_defaults(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_config(path) == ProbeConfig()

    def test_unknown_keys_ignored(self):
        config = parse_config_data({"discovery": {"port": 5000, "colour": "blue"}, "other": 1})
        assert config.port == 5000

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.yaml")

    def test_wrong_suffix(self, tmp_path):
        path = tmp_path / "probe.json"
        path.write_text("{}")
        with pytest.raises(ValueError, match="Expected .yaml"):
            load_config(path)

    def test_malformed_yaml(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("discovery: [unclosed\n")
        with pytest.raises(ValueError, match="Malformed YAML"):
            load_config(path)

    def test_non_mapping_section(self):
        with pytest.raises(ValueError, match="'discovery' must be a mapping"):
            parse_config_data({"discovery": [1, 2]})

    def test_quoted_verbose_rejected(self, tmp_path):
        path = tmp_path / "quoted.yaml"
        path.write_text('discovery:\n  verbose: "false"\n')
        with pytest.raises(ValueError, match="discovery.verbose"):
            load_config(path)

    def test_invalid_values_rejected(self, tmp_path):
        path = tmp_path / "invalid.yaml"
        path.write_text("discovery:\n  port: 70000\n  timeout: 0\n")
        with pytest.raises(ValueError) as exc_info:
            load_config(path)

        assert "discovery.port" in str(exc_info.value)
        assert "discovery.timeout" in str(exc_info.value)


class TestValidation:
    def test_defaults_valid(self):
        result = validate_config(ProbeConfig())
        assert result.valid
        assert result.warnings == []

    @pytest.mark.parametrize(
        "overrides, path",
        [
            ({"port": 0}, "discovery.port"),
            ({"port": "9999"}, "discovery.port"),
            ({"timeout": -1}, "discovery.timeout"),
            ({"timeout": True}, "discovery.timeout"),
            ({"buffer_size": 0}, "discovery.buffer_size"),
            ({"buffer_size": 8}, "discovery.buffer_size"),
            ({"discover_message": ""}, "discovery.discover_message"),
            ({"response_message": ""}, "discovery.response_message"),
            ({"max_workers": 0}, "discovery.max_workers"),
            ({"broadcast_address": ""}, "discovery.broadcast_address"),
            ({"verbose": "false"}, "discovery.verbose"),
        ],
    )
    def test_invalid(self, overrides, path):
        result = validate_config(ProbeConfig(**overrides))
        assert not result.valid
        assert path in [e.path for e in result.errors]

    def test_non_broadcast_address_warns(self):
        result = validate_config(ProbeConfig(broadcast_address="192.168.1.255"))
        assert result.valid
        assert result.warning_count == 1
        assert "warnings" in str(result)


class TestOverrides:
    def test_none_values_keep_config(self):
        base = ProbeConfig(port=4000)
        config = apply_overrides(base, port=None, timeout=1.0)
        assert config.port == 4000
        assert config.timeout == 1.0
        assert base.timeout == 5.0
