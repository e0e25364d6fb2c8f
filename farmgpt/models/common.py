"""Common types and helpers shared across models."""

import math
from dataclasses import dataclass
from datetime import UTC, datetime
from enum import StrEnum


class Language(StrEnum):
    ENGLISH = "en"
    HINDI = "hi"


@dataclass(frozen=True)
class LocalizedText:
    en: str
    hi: str

    def resolve(self, language: Language | str) -> str:
        """Return the text for a language, falling back to English."""
        if language == Language.HINDI:
            return self.hi
        return self.en


def utc_now() -> datetime:
    return datetime.now(UTC)


def utc_now_iso() -> str:
    return utc_now().isoformat()


def round_half_up(value: float, digits: int = 0) -> float:
    """Round with halves toward +infinity, as weather displays expect.

    round() uses banker's rounding, which would show 22.5 as 22.
    """
    factor = 10**digits
    return math.floor(value * factor + 0.5) / factor
