"""Configuration management for commentguard."""

import logging
import math
import os
import sys
from dataclasses import dataclass
from datetime import datetime, timedelta
from pathlib import Path
from typing import Optional

from .akismet.client import DEFAULT_API_URL, AkismetClient


@dataclass
class AkismetConfig:
    """Akismet provider credentials and transport settings."""

    api_key: str
    blog: str  # Site URL registered with Akismet
    api_url: str
    timeout: float
    strict: bool  # Raise instead of abandoning when the key can't be verified


@dataclass
class Config:
    """Application configuration."""

    akismet: AkismetConfig
    log_level: str
    log_dir: str
    log_retention_days: int

    def create_client(self) -> AkismetClient:
        """Build an Akismet client from the loaded credentials."""
        return AkismetClient(
            api_key=self.akismet.api_key,
            blog=self.akismet.blog,
            timeout=self.akismet.timeout,
            api_url=self.akismet.api_url,
        )


class ConfigError(Exception):
    """Configuration validation error."""

    pass


def _get_required(key: str) -> str:
    """Get required environment variable or raise error."""
    value = os.environ.get(key)
    if not value:
        raise ConfigError(f"Missing required environment variable: {key}")
    return value


def _get_optional(key: str, default: str) -> str:
    """Get optional environment variable with default."""
    return os.environ.get(key, default)


def _get_bool(key: str, default: bool) -> bool:
    """Get boolean environment variable."""
    value = os.environ.get(key)
    if value is None:
        return default
    return value.lower() in ("true", "1", "yes")


def _get_int(key: str, default: int) -> int:
    """Get integer environment variable."""
    value = os.environ.get(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        raise ConfigError(f"Invalid integer value for {key}: {value}")


def _get_float(key: str, default: float) -> float:
    """Get float environment variable."""
    value = os.environ.get(key)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        raise ConfigError(f"Invalid float value for {key}: {value}")


def load_config() -> Config:
    """Load and validate configuration from environment variables."""
    timeout = _get_float("AKISMET_TIMEOUT", 10.0)
    if not math.isfinite(timeout) or timeout <= 0:
        raise ConfigError("AKISMET_TIMEOUT must be a finite number greater than 0")

    retention = _get_int("LOG_RETENTION_DAYS", 3)
    if retention < 0:
        raise ConfigError("LOG_RETENTION_DAYS must not be negative")

    akismet = AkismetConfig(
        api_key=_get_required("AKISMET_KEY"),
        blog=_get_required("AKISMET_BLOG"),
        api_url=_get_optional("AKISMET_API_URL", DEFAULT_API_URL),
        timeout=timeout,
        strict=_get_bool("AKISMET_STRICT", False),
    )

    return Config(
        akismet=akismet,
        log_level=_get_optional("LOG_LEVEL", "INFO"),
        log_dir=_get_optional("LOG_DIR", "logs"),
        log_retention_days=retention,
    )


def cleanup_old_logs(log_dir: str, days: int) -> None:
    """Delete log files older than N days."""
    cutoff = datetime.now() - timedelta(days=days)
    log_path = Path(log_dir)

    if not log_path.exists():
        return

    for log_file in log_path.glob("*.log*"):
        try:
            mtime = datetime.fromtimestamp(log_file.stat().st_mtime)
            if mtime < cutoff:
                log_file.unlink()
                logging.info(f"Deleted old log: {log_file.name}")
        except OSError as e:
            logging.warning(f"Could not delete {log_file.name}: {e}")


def setup_logging(
    level: str,
    log_dir: Optional[str] = "logs",
    retention_days: int = 3
) -> None:
    """Configure logging for the application."""
    from logging.handlers import TimedRotatingFileHandler

    numeric_level = getattr(logging, level.upper(), logging.INFO)
    log_format = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    # stdout carries command results, logs go to stderr
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(logging.Formatter(log_format, date_format))
    handlers = [console_handler]

    if log_dir:
        Path(log_dir).mkdir(parents=True, exist_ok=True)
        cleanup_old_logs(log_dir, retention_days)

        # File handler with daily rotation
        log_file = Path(log_dir) / f"{datetime.now().strftime('%Y-%m-%d')}.log"
        file_handler = TimedRotatingFileHandler(
            str(log_file),
            when='midnight',
            interval=1,
            backupCount=retention_days,
            encoding='utf-8',
        )
        file_handler.suffix = "%Y-%m-%d"
        file_handler.setFormatter(logging.Formatter(log_format, date_format))
        handlers.append(file_handler)

    logging.basicConfig(
        level=numeric_level,
        handlers=handlers,
    )
