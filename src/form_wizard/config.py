"""Submission settings, loaded from YAML or built from CLI options."""

from __future__ import annotations

from pathlib import Path

import yaml

from form_wizard.final_screen.environment import DEFAULT_RESPONSE_DELAY


class SubmitConfig:
    """Parsed submission configuration.

    Expected YAML shape::

        submission:
          endpoint: https://api.example.com/applicants
          timeout: 10
          response_delay: 0.8
          headers:
            Authorization: Bearer ...
    """

    def __init__(self, config: dict) -> None:
        section = config.get("submission", {}) or {}
        self.endpoint: str = section.get("endpoint", "") or ""
        self.timeout: float = float(section.get("timeout", 10.0))
        self.response_delay: float = float(section.get("response_delay", DEFAULT_RESPONSE_DELAY))
        self.headers: dict[str, str] = dict(section.get("headers", {}) or {})

        if self.timeout <= 0:
            raise ValueError(f"timeout must be positive, got {self.timeout}")
        if self.response_delay < 0:
            raise ValueError(f"response_delay must not be negative, got {self.response_delay}")

    @classmethod
    def from_dict(cls, data: dict) -> SubmitConfig:
        return cls(data)

    @classmethod
    def from_yaml(cls, path: Path) -> SubmitConfig:
        data = yaml.safe_load(path.read_text()) or {}
        if not isinstance(data, dict):
            raise ValueError(f"{path} must contain a mapping")
        return cls(data)

    @classmethod
    def default(cls, endpoint: str = "") -> SubmitConfig:
        config = cls({})
        config.endpoint = endpoint
        return config
