#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Settings - Centralized configuration management

Every value can be overridden from the environment (``KEGG_LABEL_WIDTH=14``)
or from a ``.env`` file at the project root.
"""

from functools import lru_cache
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import (
    LABEL_WIDTH, LINE_WIDTH, SEQUENCE_WIDTH, SUB_FIELD_INDENT,
    LOG_LEVEL, LOG_FILE,
)


# Base directory
BASE_DIR = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    """Application settings"""

    # ========== Layout ==========
    label_width: int = LABEL_WIDTH
    line_width: int = LINE_WIDTH
    sequence_width: int = SEQUENCE_WIDTH
    sub_field_indent: str = SUB_FIELD_INDENT

    # ========== Logging ==========
    log_level: str = LOG_LEVEL  # DEBUG | INFO | WARNING | ERROR
    log_file: str = LOG_FILE  # empty disables the rotating file handler

    model_config = SettingsConfigDict(
        env_prefix="KEGG_",
        env_file=str(BASE_DIR / ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("label_width", "line_width", "sequence_width")
    @classmethod
    def _positive(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("widths must be positive integers")
        return value

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        return value.upper()


@lru_cache()
def get_settings() -> Settings:
    """Process-wide settings, read once from the environment."""
    return Settings()
