"""
Utility functions for the receipt scanner
"""

import os
import re
import sys
from pathlib import Path
from typing import Dict, Optional

import yaml
from loguru import logger


DEFAULT_CONFIG_PATH = Path(__file__).parent.parent / "config" / "scanner_config.yaml"

_DATA_URL_PREFIX = re.compile(r'^data:image/\w+;base64,')


def default_config() -> Dict:
    """Built-in configuration, used when no YAML file is found."""
    return {
        'ocr': {
            'endpoint': 'https://vision.googleapis.com/v1/images:annotate',
            'api_key_env': 'GOOGLE_VISION_API_KEY',
            'feature_type': 'TEXT_DETECTION',
            'max_results': 1,
            'language_hints': ['it'],
            'timeout_seconds': 30,
        },
        'logging': {
            'level': 'INFO',
            'file': 'logs/receipt_scanner.log',
        },
    }


def load_config(config_path: Optional[str] = None) -> Dict:
    """
    Load configuration from YAML file

    Sections missing from the file are filled from default_config().
    SCANNER_CONFIG overrides the default location.
    """
    if config_path is None:
        config_path = os.getenv("SCANNER_CONFIG", str(DEFAULT_CONFIG_PATH))

    config = default_config()
    if not os.path.exists(config_path):
        logger.warning(f"Config file not found: {config_path}, using defaults")
        return config

    with open(config_path, 'r', encoding='utf-8') as f:
        loaded = yaml.safe_load(f) or {}

    for section, values in loaded.items():
        if isinstance(values, dict) and isinstance(config.get(section), dict):
            config[section].update(values)
        else:
            config[section] = values
    return config


def strip_data_url(image: str) -> str:
    """'data:image/png;base64,AAAA' → 'AAAA'; plain base64 passes through."""
    return _DATA_URL_PREFIX.sub('', image.strip(), count=1)


def ensure_directory(dir_path: str) -> str:
    """
    Ensure directory exists, create if it doesn't

    Returns:
        Absolute path to directory
    """
    path = Path(dir_path)
    path.mkdir(parents=True, exist_ok=True)
    return str(path.absolute())


def format_processing_time(milliseconds: float) -> str:
    """1234 → '1.23s', 456 → '456ms'"""
    if milliseconds < 1000:
        return f"{int(milliseconds)}ms"
    return f"{milliseconds / 1000:.2f}s"


# Logging setup helper
def setup_logging(log_file: Optional[str] = "logs/receipt_scanner.log", level: str = "INFO"):
    """
    Setup logging configuration

    Args:
        log_file: Path to log file (None → console only)
        level: Log level (DEBUG, INFO, WARNING, ERROR)
    """
    # Remove default handler
    logger.remove()

    # Add console handler
    logger.add(
        sys.stdout,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <level>{message}</level>",
        level=level
    )

    # Add file handler
    if log_file:
        ensure_directory(os.path.dirname(log_file) or ".")
        logger.add(
            log_file,
            rotation="10 MB",
            retention="30 days",
            level=level,
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} | {message}"
        )

    logger.info("Logging initialized")
