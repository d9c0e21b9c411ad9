"""
Skill configuration.

Values come either from the host's config.json mapping (passed to
on_skill_load) or from LCS_* environment variables.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

log = logging.getLogger("skill.localcoinswap.config")

DEFAULT_API_URL = "https://api.localcoinswap.com"


class MissingCredentialError(Exception):
  """An authenticated operation was called without an API token."""

  def __init__(self) -> None:
    super().__init__("API token not configured. Set LCS_API_TOKEN environment variable.")


class SkillConfig(BaseModel):
  model_config = ConfigDict(frozen=True)

  api_token: str = ""
  api_url: str = DEFAULT_API_URL
  require_confirmation: bool = True
  confirmation_ttl_seconds: float = Field(default=300, gt=0)
  sweep_interval_seconds: float = Field(default=60, gt=0)
  request_timeout_seconds: float = Field(default=30, gt=0)

  @field_validator("api_url")
  @classmethod
  def _strip_trailing_slash(cls, v: str) -> str:
    return v.rstrip("/") or DEFAULT_API_URL

  @property
  def has_token(self) -> bool:
    return bool(self.api_token)

  @classmethod
  def from_dict(cls, data: Mapping[str, Any]) -> SkillConfig:
    """Build a config from a config.json mapping, ignoring unknown keys."""
    known = {k: v for k, v in data.items() if k in cls.model_fields and v is not None}
    return cls(**known)


def load_config(env: Mapping[str, str] | None = None) -> SkillConfig:
  """
  Read configuration from the environment.

  Confirmation stays required unless LCS_REQUIRE_CONFIRMATION is exactly
  "false".
  """
  env = os.environ if env is None else env
  values: dict[str, Any] = {
    "api_token": env.get("LCS_API_TOKEN", ""),
    "api_url": env.get("LCS_API_URL") or DEFAULT_API_URL,
    "require_confirmation": env.get("LCS_REQUIRE_CONFIRMATION") != "false",
  }

  sweep = env.get("LCS_SWEEP_INTERVAL")
  if sweep:
    try:
      interval = float(sweep)
    except ValueError:
      interval = 0
    if interval > 0:
      values["sweep_interval_seconds"] = interval
    else:
      log.warning("Ignoring invalid LCS_SWEEP_INTERVAL=%r", sweep)

  return SkillConfig(**values)


def require_api_token(config: SkillConfig) -> None:
  if not config.has_token:
    raise MissingCredentialError()
