# ==============================================
# Configuration Management
# ==============================================
#
# PURPOSE:
#   Load configuration from environment variables / .env file
#   for the outer layers (input readers, report, CLI). The
#   type-inference and synopsis core takes no configuration.
#
# CLASSES:
# --------
# - ReportConfig (dataclass)
#     sample_size: int           (default 10)
#     random_seed: int | None    (default None)
#
# - InputConfig (dataclass)
#     input_format: str          (default "auto")
#     request_timeout_seconds: float (default 10.0)
#
# - AppConfig (dataclass)
#     report: ReportConfig
#     input: InputConfig
#
# FUNCTION:
# ---------
# - get_config() -> AppConfig
#     Load .env using python-dotenv, construct AppConfig.
#     Returns the same singleton on repeated calls.
#
# ENVIRONMENT:
# ------------
#   SYNOPSIZE_SAMPLE_SIZE, SYNOPSIZE_RANDOM_SEED,
#   SYNOPSIZE_INPUT_FORMAT, SYNOPSIZE_REQUEST_TIMEOUT_SECONDS
#
# ==============================================

import os
from dataclasses import dataclass, field
from typing import Optional
from pathlib import Path

from dotenv import load_dotenv


INPUT_FORMATS = ("auto", "csv", "tsv", "json")


@dataclass
class ReportConfig:
    """Console report configuration."""
    sample_size: int = 10  # Max example values shown per column
    random_seed: Optional[int] = None  # Fix to make sampling reproducible


@dataclass
class InputConfig:
    """Input source configuration."""
    input_format: str = "auto"
    request_timeout_seconds: float = 10.0


@dataclass
class AppConfig:
    """Main application configuration."""
    report: ReportConfig = field(default_factory=ReportConfig)
    input: InputConfig = field(default_factory=InputConfig)


# Singleton instance
_config_instance: Optional[AppConfig] = None


def get_config() -> AppConfig:
    """
    Load configuration from environment variables / .env file.
    Returns the same singleton instance on repeated calls.

    Returns:
        AppConfig: Application configuration

    Raises:
        ValueError: If a variable holds a malformed number or an unknown
                    input format
    """
    global _config_instance

    if _config_instance is not None:
        return _config_instance

    # .env in the working directory wins over one next to the package
    load_dotenv(dotenv_path=Path.cwd() / ".env")
    load_dotenv(dotenv_path=Path(__file__).parent.parent / ".env")

    seed = os.getenv("SYNOPSIZE_RANDOM_SEED") or None
    report_config = ReportConfig(
        sample_size=int(os.getenv("SYNOPSIZE_SAMPLE_SIZE", "10")),
        random_seed=int(seed) if seed is not None else None,
    )

    input_format = os.getenv("SYNOPSIZE_INPUT_FORMAT", "auto").lower()
    if input_format not in INPUT_FORMATS:
        raise ValueError(
            f"SYNOPSIZE_INPUT_FORMAT must be one of {', '.join(INPUT_FORMATS)}, got {input_format!r}"
        )
    input_config = InputConfig(
        input_format=input_format,
        request_timeout_seconds=float(os.getenv("SYNOPSIZE_REQUEST_TIMEOUT_SECONDS", "10.0")),
    )

    _config_instance = AppConfig(report=report_config, input=input_config)

    return _config_instance
