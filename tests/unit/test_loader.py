"""Unit tests for build settings loading."""

import json

import pytest

from pydantic import ValidationError

from truffle_config.config import BuildSettings, disabled_test_network, load, parse
from truffle_config.exceptions import (
    ConfigurationError,
    InvalidConfigError,
    MissingConfigError,
)


class TestLoad:
    """Tests for load()."""

    def test_declared_settings(self):
        settings = load()
        assert settings.compilers.solc.version == "0.8.4"
        assert settings.compilers.solc.settings.optimizer.enabled is True

    def test_load_from_file(self, write_document, networked_document):
        settings = load(write_document(networked_document))
        assert settings.solc.settings.optimizer.runs == 200
        assert settings.networks["test"].port == 9545

    def test_load_accepts_str_path(self, write_document, declared_document):
        settings = load(str(write_document(declared_document)))
        assert settings == BuildSettings()

    def test_missing_sections_take_defaults(self, write_document):
        settings = load(write_document({"compilers": {"solc": {"version": "0.7.6"}}}))
        assert settings.solc.version == "0.7.6"
        assert settings.optimizer_enabled is True

    def test_missing_file(self, tmp_path):
        with pytest.raises(MissingConfigError, match="not found"):
            load(tmp_path / "nonexistent.json")

    def test_directory_is_missing_file(self, tmp_path):
        with pytest.raises(MissingConfigError):
            load(tmp_path)

    def test_malformed_file(self, write_document):
        path = write_document('{"compilers": {')
        with pytest.raises(InvalidConfigError) as exc_info:
            load(path)
        assert str(path) in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, json.JSONDecodeError)


class TestParse:
    """Tests for parse()."""

    def test_parse_document(self, declared_document):
        assert parse(json.dumps(declared_document)) == BuildSettings()

    def test_not_an_object(self):
        with pytest.raises(InvalidConfigError, match="must be an object"):
            parse("[1, 2, 3]")

    def test_unknown_key(self):
        with pytest.raises(InvalidConfigError) as exc_info:
            parse('{"compiler": {}}')
        assert isinstance(exc_info.value.__cause__, ValidationError)

    @pytest.mark.parametrize(
        "key",
        [
            "_env_file",
            "_case_sensitive",
            "_env_prefix",
            "_secrets_dir",
            "_cli_parse_args",
        ],
    )
    def test_settings_source_options_rejected(self, key):
        with pytest.raises(InvalidConfigError, match="Unknown settings keys"):
            parse(json.dumps({key: "x"}))

    def test_cli_source_option_does_not_parse_argv(self, monkeypatch):
        monkeypatch.setattr(
            "sys.argv", ["truffle-config", "--config-file", "settings.json"]
        )
        with pytest.raises(InvalidConfigError):
            parse('{"_cli_parse_args": true}')

    def test_invalid_version(self):
        with pytest.raises(InvalidConfigError, match="semantic version"):
            parse('{"compilers": {"solc": {"version": "latest"}}}')

    def test_non_boolean_optimizer(self):
        document = '{"compilers": {"solc": {"settings": {"optimizer": {"enabled": "yes"}}}}}'
        with pytest.raises(InvalidConfigError):
            parse(document)

    def test_errors_are_configuration_errors(self):
        with pytest.raises(ConfigurationError):
            parse("not json")


class TestDisabledTestNetwork:
    """Tests for the disabled test network block."""

    def test_values(self):
        network = disabled_test_network()
        assert network.model_dump() == {
            "host": "127.0.0.1",
            "port": 9545,
            "network_id": "*",
        }

    def test_parses_when_enabled(self, write_document, networked_document):
        settings = load(write_document(networked_document))
        assert settings.networks["test"] == disabled_test_network()

    def test_not_active_by_default(self):
        assert "test" not in load().networks
