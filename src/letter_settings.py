"""
Central configuration for the letter generator.
Values are read from the environment once, when the Lambda container starts.
Blank or invalid values fall back to the defaults below, with a warning.
"""
import logging
import os

from faker.config import AVAILABLE_LOCALES


LOGGER = logging.getLogger(__name__)

VARIANT_SALUTATION = "salutation"
VARIANT_DATED = "dated"
SUPPORTED_VARIANTS = {VARIANT_SALUTATION, VARIANT_DATED}

DEFAULT_LOCALE = "en_US"

# The letter is set in the PDF base-14 Helvetica, which only encodes WinAnsi
# (Latin-1) text. Locales in other scripts would render as placeholder dots.
LATIN_1_LANGUAGES = {"da", "de", "en", "es", "fi", "fr", "ga", "it", "nl", "no", "pt", "sv"}


def is_supported_locale(locale: str) -> bool:
    if locale not in AVAILABLE_LOCALES:
        return False
    return locale.split("_", 1)[0].lower() in LATIN_1_LANGUAGES


def _env_str(name: str, default: str) -> str:
    val = os.getenv(name)
    if val is None or str(val).strip() == "":
        return default
    return str(val).strip()


def _env_int(name: str, default: int) -> int:
    val = os.getenv(name)
    if val is None or str(val).strip() == "":
        return default
    try:
        return int(val)
    except (TypeError, ValueError):
        LOGGER.warning("Invalid int for %s=%r, using default %s", name, val, default)
        return default


def _env_optional_int(name: str) -> int | None:
    val = os.getenv(name)
    if val is None or str(val).strip() == "":
        return None
    try:
        return int(val)
    except (TypeError, ValueError):
        LOGGER.warning("Invalid int for %s=%r, leaving it unset", name, val)
        return None


def _env_choice(name: str, default: str, choices: set[str]) -> str:
    val = _env_str(name, default).lower()
    if val not in choices:
        LOGGER.warning("Invalid value for %s=%r, using default %s", name, val, default)
        return default
    return val


def _env_log_level(name: str, default: str) -> str:
    val = _env_str(name, default).upper()
    if not isinstance(logging.getLevelName(val), int):
        LOGGER.warning("Invalid log level for %s=%r, using default %s", name, val, default)
        return default
    return val


def _env_locale(name: str, default: str) -> str:
    val = _env_str(name, default)
    if not is_supported_locale(val):
        LOGGER.warning("Unsupported locale for %s=%r, using default %s", name, val, default)
        return default
    return val


LOG_LEVEL = _env_log_level("LOG_LEVEL", "INFO")

# Filename offered to the browser in the Content-disposition header.
LETTER_FILENAME = _env_str("LETTER_FILENAME", "test.pdf")

# 'salutation' opens with "Dear {name},"; 'dated' opens with a past date instead.
LETTER_VARIANT = _env_choice("LETTER_VARIANT", VARIANT_SALUTATION, SUPPORTED_VARIANTS)

LETTER_LOCALE = _env_locale("LETTER_LOCALE", DEFAULT_LOCALE)
LETTER_DATE_FORMAT = _env_str("LETTER_DATE_FORMAT", "%m/%d/%Y")
LETTER_PAST_DAYS = max(1, _env_int("LETTER_PAST_DAYS", 365))

# Unset in production. Setting it makes every invocation render the same letter.
LETTER_FAKER_SEED = _env_optional_int("LETTER_FAKER_SEED")
