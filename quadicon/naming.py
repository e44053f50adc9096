# this_file: quadicon/naming.py
"""
Validation of the short/full app names and names derived from them.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass

from .base import QuadiconError
from .constants import APP_ID_PREFIX, DISPLAY_NAME_SUFFIX, MAX_SHORT_NAME_LENGTH


class ValidationError(QuadiconError):
    """Raised for malformed short or full names."""


@dataclass(frozen=True)
class AppNames:
    short_name: str
    full_name: str

    @property
    def app_id(self) -> str:
        return app_id_for(self.full_name)

    @property
    def display_name(self) -> str:
        return display_name_for(self.full_name)


def normalise_short_name(value: str) -> str:
    """Uppercase and drop all whitespace."""
    return re.sub(r"\s+", "", value.upper())


def parse_names(args: Sequence[str]) -> AppNames:
    """
    Split ``SHORT_NAME FULL NAME...`` arguments.

    Raises:
        ValidationError: Missing arguments, an empty or over-long short name,
            or an empty full name.
    """
    if len(args) < 2:
        raise ValidationError("Missing required arguments")

    short_name = normalise_short_name(args[0])
    if not short_name:
        raise ValidationError("Short name cannot be empty")
    if len(short_name) > MAX_SHORT_NAME_LENGTH:
        raise ValidationError(f"Short name must be at most {MAX_SHORT_NAME_LENGTH} characters")

    full_name = " ".join(args[1:]).strip()
    if not full_name:
        raise ValidationError("Full name cannot be empty")

    return AppNames(short_name, full_name)


def to_pascal_case(value: str) -> str:
    words = re.sub(r"[^a-zA-Z0-9]+", " ", value).split()
    return "".join(word[:1].upper() + word[1:].lower() for word in words)


def app_id_for(full_name: str) -> str:
    return f"{APP_ID_PREFIX}{to_pascal_case(full_name)}"


def display_name_for(full_name: str) -> str:
    return f"{full_name}{DISPLAY_NAME_SUFFIX}"
