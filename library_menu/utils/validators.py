import re
from typing import Optional

# Letters, digits and spaces only
TEXT_PATTERN: re.Pattern[str] = re.compile(r"^[a-zA-Z0-9 ]+$")
# Exactly four digits
YEAR_PATTERN: re.Pattern[str] = re.compile(r"^[0-9]{4}$")
# Optional sign followed by digits; range is checked by the caller
CHOICE_PATTERN: re.Pattern[str] = re.compile(r"^[+-]?[0-9]+$")


def matches(pattern: re.Pattern[str], value: Optional[str]) -> bool:
    """Return True when the whole of ``value`` matches ``pattern``."""
    if value is None:
        return False
    return pattern.fullmatch(value) is not None


class TextValidator:
    """Validators for the fields collected from the user."""

    @staticmethod
    def validate_text(text: Optional[str]) -> bool:
        return matches(TEXT_PATTERN, text)

    @staticmethod
    def validate_title(title: Optional[str]) -> bool:
        return TextValidator.validate_text(title)

    @staticmethod
    def validate_author(author: Optional[str]) -> bool:
        return TextValidator.validate_text(author)

    @staticmethod
    def validate_year(year: Optional[str]) -> bool:
        return matches(YEAR_PATTERN, year)


class ChoiceValidator:
    """Menu choice parsing: a whole integer within ``[1, upper]``."""

    @staticmethod
    def parse(raw: Optional[str]) -> Optional[int]:
        if raw is None:
            return None
        s = raw.strip()
        if not matches(CHOICE_PATTERN, s):
            return None
        return int(s)

    @staticmethod
    def in_range(choice: int, upper: int) -> bool:
        return 1 <= choice <= upper
