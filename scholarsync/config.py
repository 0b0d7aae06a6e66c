"""
Load analysis settings from YAML and the environment.
"""

import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional

import yaml
from dotenv import load_dotenv

from .retry import DEFAULT_BASE_DELAY, DEFAULT_MAX_RETRIES, RetryPolicy

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("config/settings.yaml")
MODEL_ENV_VAR = "SCHOLARSYNC_MODEL"


@dataclass
class AnalysisSettings:
    model_name: str = "gemini-3-pro-preview"
    temperature: float = 0.2
    thinking_budget: int = 4096
    max_retries: int = DEFAULT_MAX_RETRIES
    base_delay: float = DEFAULT_BASE_DELAY
    api_key_env: str = "GEMINI_API_KEY"

    def retry_policy(self) -> RetryPolicy:
        return RetryPolicy(max_retries=self.max_retries, base_delay=self.base_delay)


def load_settings(path: Optional[Path] = None) -> AnalysisSettings:
    """
    Build settings from a YAML file's ``settings`` block.

    Args:
        path: YAML config file; defaults to config/settings.yaml when present

    Returns:
        AnalysisSettings with file values and environment overrides applied
    """
    load_dotenv()

    if path is None and DEFAULT_CONFIG_PATH.exists():
        path = DEFAULT_CONFIG_PATH

    raw = {}
    if path is not None:
        with open(path, encoding="utf-8") as f:
            config = yaml.safe_load(f) or {}
        raw = config.get("settings", {}) or {}

    known = {f.name for f in fields(AnalysisSettings)}
    unknown = sorted(set(raw) - known)
    if unknown:
        logger.warning("Ignoring unknown settings: %s", ", ".join(unknown))

    settings = AnalysisSettings(**{k: v for k, v in raw.items() if k in known})

    model_override = os.getenv(MODEL_ENV_VAR)
    if model_override:
        settings.model_name = model_override

    return settings
