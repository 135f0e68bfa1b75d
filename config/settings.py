#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Settings - Centralized configuration management

Values come from the environment (prefix LIPICS_) or a .env file at the
project root. Per-document behaviour is driven by the document metadata;
these settings only cover what the metadata cannot.
"""

from pathlib import Path
from typing import Optional
from pydantic_settings import BaseSettings

from .constants import (
    DEFAULT_MODE, LOG_LEVEL,
    META_KNOWLEDGES, META_MODE, META_DEBUG, META_REPORT,
)


# Base directory
BASE_DIR = Path(__file__).resolve().parent.parent


class FilterSettings(BaseSettings):
    """Filter settings"""

    # ========== Logging ==========
    log_level: str = LOG_LEVEL
    log_file: Optional[str] = None  # Rotating debug log, off by default

    # ========== Modes ==========
    # Used when the metadata carries no mode selector and the target is LaTeX
    default_mode: str = DEFAULT_MODE

    # ========== Metadata keys ==========
    knowledges_key: str = META_KNOWLEDGES
    mode_key: str = META_MODE
    debug_key: str = META_DEBUG
    report_key: str = META_REPORT

    class Config:
        env_prefix = "LIPICS_"
        env_file = str(BASE_DIR / ".env")
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"  # Allow extra fields from .env that aren't defined in model


# Global settings instance
settings = FilterSettings()
