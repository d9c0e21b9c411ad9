"""
Config loading from the environment and from a config.json mapping.
"""

import pytest
from pydantic import ValidationError as PydanticValidationError

from skills.localcoinswap.config import (
  DEFAULT_API_URL,
  MissingCredentialError,
  SkillConfig,
  load_config,
  require_api_token,
)


def test_defaults():
  config = load_config({})
  assert config.api_token == ""
  assert config.api_url == DEFAULT_API_URL
  assert config.require_confirmation is True
  assert config.confirmation_ttl_seconds == 300
  assert config.sweep_interval_seconds == 60
  assert config.has_token is False


def test_reads_environment():
  config = load_config(
    {
      "LCS_API_TOKEN": "abc",
      "LCS_API_URL": "https://staging.example.com/",
      "LCS_SWEEP_INTERVAL": "15",
    }
  )
  assert config.api_token == "abc"
  assert config.api_url == "https://staging.example.com"
  assert config.sweep_interval_seconds == 15
  assert config.has_token is True


@pytest.mark.parametrize(
  ("value", "required"),
  [("false", False), ("true", True), ("False", True), ("0", True), ("", True), ("no", True)],
)
def test_only_literal_false_disables_confirmation(value, required):
  assert load_config({"LCS_REQUIRE_CONFIRMATION": value}).require_confirmation is required


@pytest.mark.parametrize("value", ["soon", "0", "-5"])
def test_invalid_sweep_interval_is_ignored(value, caplog):
  config = load_config({"LCS_SWEEP_INTERVAL": value})
  assert config.sweep_interval_seconds == 60
  assert "LCS_SWEEP_INTERVAL" in caplog.text


def test_from_dict_ignores_unknown_and_null_keys():
  config = SkillConfig.from_dict(
    {"api_token": "abc", "require_confirmation": False, "api_url": None, "theme": "dark"}
  )
  assert config.api_token == "abc"
  assert config.require_confirmation is False
  assert config.api_url == DEFAULT_API_URL


def test_rejects_non_positive_ttl():
  with pytest.raises(PydanticValidationError):
    SkillConfig(confirmation_ttl_seconds=0)


def test_config_is_frozen():
  config = SkillConfig()
  with pytest.raises(PydanticValidationError):
    config.api_token = "x"


def test_require_api_token():
  require_api_token(SkillConfig(api_token="abc"))
  with pytest.raises(MissingCredentialError, match="LCS_API_TOKEN"):
    require_api_token(SkillConfig())
