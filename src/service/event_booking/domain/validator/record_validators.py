"""Validation and normalization rules shared by the event and booking entities."""

from datetime import date, datetime
import re
from typing import Any

from dateutil import parser as dtparse

from src.platform.exception.exceptions import ValidationError


_SLUG_SEPARATOR_PATTERN = re.compile(r'[^a-z0-9]+')
_TIME_PATTERN = re.compile(r'([01][0-9]|2[0-3]):([0-5][0-9])(?::[0-5][0-9])?')
# Format check only: local@domain.tld, no deliverability guarantee
EMAIL_PATTERN = re.compile(r'[^\s@]+@[^\s@]+\.[^\s@]+')
# Two fallbacks differing in year, month and day; a component missing from the input shows up
_DATE_PROBE_DEFAULTS = (datetime(2000, 1, 1), datetime(2001, 2, 2))


class StringValidators:
    """Common string validation functions."""

    @staticmethod
    def is_blank(value: Any) -> bool:
        return not isinstance(value, str) or not value.strip()

    @staticmethod
    def validate_required_string(value: Any, field_name: str) -> None:
        """Validate that a string is present and not whitespace-only."""
        if StringValidators.is_blank(value):
            raise ValidationError(f'Field "{field_name}" is required and cannot be empty.')


class ListValidators:
    """Validators for ordered lists of labels (agenda items, tags)."""

    @staticmethod
    def validate_non_empty_string_list(items: Any, field_name: str) -> None:
        if (
            not isinstance(items, list)
            or not items
            or any(StringValidators.is_blank(item) for item in items)
        ):
            raise ValidationError(
                f'{field_name} must be a non-empty array of non-empty strings.'
            )

    @staticmethod
    def validate_agenda(items: Any) -> None:
        ListValidators.validate_non_empty_string_list(items, 'Agenda')

    @staticmethod
    def validate_tags(items: Any) -> None:
        ListValidators.validate_non_empty_string_list(items, 'Tags')


class DateTimeNormalizers:
    """Canonical storage forms for event dates (YYYY-MM-DD) and times (HH:MM)."""

    @staticmethod
    def normalize_date(value: Any) -> str:
        if isinstance(value, datetime):
            return value.date().isoformat()
        if isinstance(value, date):
            return value.isoformat()
        if StringValidators.is_blank(value):
            raise ValidationError('Invalid event date. Please provide a valid date.')
        # Year, month and day must all come from the input, never from the parser defaults
        try:
            parsed = [
                dtparse.parse(value.strip(), default=default).date()
                for default in _DATE_PROBE_DEFAULTS
            ]
        except (ValueError, OverflowError) as e:
            raise ValidationError('Invalid event date. Please provide a valid date.') from e
        if parsed[0] != parsed[1]:
            raise ValidationError('Invalid event date. Please provide a full calendar date.')
        # Time of day and zone are dropped, the calendar date is kept as written
        return parsed[0].isoformat()

    @staticmethod
    def normalize_time(value: Any) -> str:
        match = _TIME_PATTERN.fullmatch(value.strip()) if isinstance(value, str) else None
        if match is None:
            raise ValidationError('Invalid event time. Expected 24h format HH:MM or HH:MM:SS.')
        hours, minutes = match.group(1), match.group(2)
        return f'{hours}:{minutes}'


class SlugGenerator:
    @staticmethod
    def generate_slug(title: str) -> str:
        """URL-friendly slug: lowercase alphanumerics joined by single hyphens."""
        return _SLUG_SEPARATOR_PATTERN.sub('-', title.lower().strip()).strip('-')


class EmailValidators:
    @staticmethod
    def validate_email(value: Any) -> bool:
        return isinstance(value, str) and EMAIL_PATTERN.fullmatch(value) is not None


# Module-level aliases for callers that want plain functions
validate_agenda = ListValidators.validate_agenda
validate_tags = ListValidators.validate_tags
normalize_date = DateTimeNormalizers.normalize_date
normalize_time = DateTimeNormalizers.normalize_time
generate_slug = SlugGenerator.generate_slug
validate_email = EmailValidators.validate_email
