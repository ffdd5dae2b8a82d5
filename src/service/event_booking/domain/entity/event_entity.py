"""Event entity."""

from datetime import datetime
from typing import List, Optional, Self

import attrs

from src.platform.exception.exceptions import ValidationError
from src.platform.logging.loguru_io import Logger
from src.service.event_booking.domain.validator.record_validators import (
    DateTimeNormalizers,
    ListValidators,
    SlugGenerator,
    StringValidators,
)


REQUIRED_STRING_FIELDS = (
    'title',
    'description',
    'overview',
    'image',
    'venue',
    'location',
    'mode',
    'audience',
    'organizer',
)

# Fields a caller may change on an existing event
EDITABLE_FIELDS = frozenset(REQUIRED_STRING_FIELDS + ('date', 'time', 'agenda', 'tags'))


@Logger.io
def validate_required_fields(event: 'Event') -> None:
    for field_name in REQUIRED_STRING_FIELDS:
        StringValidators.validate_required_string(getattr(event, field_name), field_name)


@attrs.define
class Event:
    title: str
    description: str
    overview: str
    image: str
    venue: str
    location: str
    date: str
    time: str
    mode: str
    audience: str
    agenda: List[str]
    organizer: str
    tags: List[str]
    slug: str = ''
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    # Title as last written to storage; None until the event is persisted
    persisted_title: Optional[str] = attrs.field(default=None, eq=False, repr=False)

    @classmethod
    @Logger.io
    def create(
        cls,
        *,
        title: str,
        description: str,
        overview: str,
        image: str,
        venue: str,
        location: str,
        date: str,
        time: str,
        mode: str,
        audience: str,
        agenda: List[str],
        organizer: str,
        tags: List[str],
    ) -> 'Event':
        return cls(
            title=title,
            description=description,
            overview=overview,
            image=image,
            venue=venue,
            location=location,
            date=date,
            time=time,
            mode=mode,
            audience=audience,
            agenda=agenda,
            organizer=organizer,
            tags=tags,
        )

    @property
    def is_new(self) -> bool:
        return self.id is None

    @property
    def title_changed(self) -> bool:
        return self.persisted_title is None or self.title.strip() != self.persisted_title

    @Logger.io
    def validate_and_normalize(self) -> Self:
        """Run every save-time rule; must pass before the event is written."""
        validate_required_fields(self)
        ListValidators.validate_agenda(self.agenda)
        ListValidators.validate_tags(self.tags)

        for field_name in REQUIRED_STRING_FIELDS:
            setattr(self, field_name, getattr(self, field_name).strip())

        self.date = DateTimeNormalizers.normalize_date(self.date)
        self.time = DateTimeNormalizers.normalize_time(self.time)

        if self.title_changed:
            self.slug = SlugGenerator.generate_slug(self.title)
        if not self.slug:
            raise ValidationError(
                f'Title "{self.title}" must contain at least one letter or digit.'
            )
        return self

    def apply_changes(self, **changes: object) -> Self:
        unknown = set(changes) - EDITABLE_FIELDS
        if unknown:
            raise ValidationError(f'Unknown event field(s): {", ".join(sorted(unknown))}')
        return attrs.evolve(self, **changes)
