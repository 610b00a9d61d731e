from pathlib import Path

from datapoint_client.config import DEFAULT_BASE_URL, load_config


def test_defaults_without_overrides():
    config = load_config(env={})

    assert config.client.base_url == DEFAULT_BASE_URL
    assert config.client.api_key is None
    assert config.client.timeout == 10.0
    assert config.logging.level == "INFO"
    assert config.logging.json is True


def test_env_overrides():
    config = load_config(
        env={
            "DATAPOINT_API_KEY": "secret",
            "DATAPOINT_BASE_URL": "http://proxy.test/data/",
            "DATAPOINT_TIMEOUT": "2.5",
            "DATAPOINT_LOG_LEVEL": "debug",
            "DATAPOINT_LOG_JSON": "off",
        }
    )

    assert config.client.api_key == "secret"
    assert config.client.base_url == "http://proxy.test/data/"
    assert config.client.timeout == 2.5
    assert config.logging.level == "debug"
    assert config.logging.json is False


def test_invalid_timeout_is_ignored():
    config = load_config(env={"DATAPOINT_TIMEOUT": "soon"})
    assert config.client.timeout == 10.0


def test_yaml_file_is_merged_over_defaults(tmp_path: Path):
    config_file = tmp_path / "datapoint.yaml"
    config_file.write_text(
        """client:
  api_key: "from-file"
logging:
  json: false
"""
    )

    config = load_config(config_path=str(config_file), env={})

    assert config.client.api_key == "from-file"
    assert config.client.base_url == DEFAULT_BASE_URL
    assert config.logging.json is False
    assert config.logging.level == "INFO"


def test_env_wins_over_yaml_file(tmp_path: Path):
    config_file = tmp_path / "datapoint.yaml"
    config_file.write_text("client:\n  api_key: from-file\n")

    config = load_config(env={"DATAPOINT_CONFIG_PATH": str(config_file), "DATAPOINT_API_KEY": "from-env"})

    assert config.client.api_key == "from-env"


def test_missing_yaml_file_falls_back_to_defaults(tmp_path: Path):
    config = load_config(config_path=str(tmp_path / "absent.yaml"), env={})
    assert config.client.base_url == DEFAULT_BASE_URL
