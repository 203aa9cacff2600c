from pathlib import Path
import json

import pytest
from mixsim.config.loaders import ConfigLoader, load_scenario_config
from mixsim.config.models import ScenarioConfig
from mixsim.core.exceptions import ConfigurationError


def test_default_scenario_matches_demo():
    config = ScenarioConfig()
    assert config.mixer.input_capacity == 2
    assert [s.mass_flow for s in config.inputs] == [10.0, 5.0]
    assert config.outputs == 1


def test_load_yaml_configuration(tmp_path):
    """Test loading YAML configuration."""
    yaml_content = """
name: "three_feeds"
mixer:
  name: "m1"
  input_capacity: 3
inputs:
  - mass_flow: 1.5
  - 2.5
  - mass_flow: -1.0
outputs: 1
"""
    config_file = tmp_path / "scenario.yaml"
    config_file.write_text(yaml_content)

    config = load_scenario_config(config_file)

    assert config.name == "three_feeds"
    assert config.mixer.name == "m1"
    assert config.mixer.input_capacity == 3
    assert [s.mass_flow for s in config.inputs] == [1.5, 2.5, -1.0]


def test_load_json_configuration(tmp_path):
    config_file = tmp_path / "scenario.json"
    config_file.write_text(json.dumps({
        "mixer": {"input_capacity": 4},
        "inputs": [3, 4],
        "stream_start_index": 10
    }))

    config = load_scenario_config(config_file)

    assert config.mixer.input_capacity == 4
    assert config.stream_start_index == 10
    assert config.name == "mixing_demo"


def test_empty_yaml_gives_defaults(tmp_path):
    config_file = tmp_path / "empty.yml"
    config_file.write_text("")
    config = load_scenario_config(config_file)
    assert config.outputs == 1


def test_load_nonexistent_file():
    with pytest.raises(ConfigurationError, match="not found"):
        load_scenario_config("nonexistent_scenario.yaml")


def test_unsupported_extension(tmp_path):
    with pytest.raises(ConfigurationError, match="Unsupported"):
        load_scenario_config(tmp_path / "scenario.toml")


def test_invalid_yaml_syntax(tmp_path):
    config_file = tmp_path / "broken.yaml"
    config_file.write_text("mixer: [unclosed\n")
    with pytest.raises(ConfigurationError, match="parse YAML"):
        load_scenario_config(config_file)


@pytest.mark.parametrize("payload", [
    {"mixer": {"input_capacity": -1}},
    {"mixer": {"input_capacity": "two"}},
    {"inputs": ["ten"]},
    {"outputs": -1},
    {"unknown_key": True},
])
def test_schema_violations_rejected(payload):
    with pytest.raises(ConfigurationError, match="Schema validation failed"):
        ConfigLoader().load_dict(payload)


def test_non_mapping_root_rejected():
    with pytest.raises(ConfigurationError, match="mapping"):
        ConfigLoader().load_dict([1, 2, 3])


def test_missing_schema_file(tmp_path):
    with pytest.raises(ConfigurationError, match="schema"):
        ConfigLoader(schema_path=tmp_path / "missing.json")


@pytest.mark.parametrize("filename", ["bad.yaml", "bad.json"])
def test_invalid_utf8_file_rejected(tmp_path, filename):
    config_file = tmp_path / filename
    config_file.write_bytes(b'{"name": "\xff\xfe"}')
    with pytest.raises(ConfigurationError):
        load_scenario_config(config_file)


@pytest.mark.parametrize("dirname", ["scenario.yaml", "scenario.json"])
def test_directory_path_rejected(tmp_path, dirname):
    config_dir = tmp_path / dirname
    config_dir.mkdir()
    with pytest.raises(ConfigurationError, match="Failed to read"):
        load_scenario_config(config_dir)
