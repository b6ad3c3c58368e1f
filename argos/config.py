# === FILE: argos/config.py ===
"""
Loading and validation of the Argos monitor configuration.
Pydantic describes the schema; a config file (YAML or JSON) is optional,
command-line flags are layered on top of it.
"""
from __future__ import annotations

import errno
import json
import os
from datetime import timedelta
from pathlib import Path
from typing import Any, Mapping, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, HttpUrl, field_validator


class MonitorConfig(BaseModel):
    """Settings for one monitoring run; immutable once built."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    web_address: HttpUrl = Field(..., description="Address of the page to watch.")
    check_interval_sec: int = Field(30, gt=0, description="Seconds to wait between checks.")
    max_num_of_failures: int = Field(10, ge=1, description="Consecutive failures before exiting.")
    user_agent: str = Field("Mozilla/5.0", min_length=1, description="User-Agent header.")
    timeout: float = Field(300.0, gt=0, description="Total timeout of a single request (seconds).")

    @field_validator("web_address", mode="before")
    def _strip_whitespace(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip()
        return v

    @property
    def check_interval(self) -> timedelta:
        return timedelta(seconds=self.check_interval_sec)


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid YAML in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Top level of YAML must be a mapping, got {type(data).__name__}")
    return data


def _read_json(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8")) or {}
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Top level of JSON must be a mapping, got {type(data).__name__}")
    return data


def read_config_file(path: Union[str, Path]) -> dict[str, Any]:
    """Read raw settings from a YAML or JSON file, without validating them."""
    path_obj = Path(path).expanduser().resolve()
    if not path_obj.is_file():
        raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))

    suffix = path_obj.suffix.lower()
    if suffix in (".yaml", ".yml"):
        return _read_yaml(path_obj)
    if suffix == ".json":
        return _read_json(path_obj)
    raise ValueError(f"Unsupported config format: {suffix}")


def load_config(
    path: Union[str, Path, None] = None,
    overrides: Optional[Mapping[str, Any]] = None,
) -> MonitorConfig:
    """
    Build a validated MonitorConfig.

    Values from *overrides* that are not None win over the file at *path*.
    Raises FileNotFoundError for a missing file and pydantic.ValidationError
    for bad values.
    """
    data: dict[str, Any] = read_config_file(path) if path is not None else {}
    if overrides:
        data.update({key: value for key, value in overrides.items() if value is not None})
    return MonitorConfig(**data)
