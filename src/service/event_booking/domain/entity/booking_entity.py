from datetime import datetime
from typing import Optional, Self

import attrs

from src.platform.exception.exceptions import ValidationError
from src.platform.logging.loguru_io import Logger
from src.service.event_booking.domain.validator.record_validators import (
    EmailValidators,
    StringValidators,
)


@attrs.define
class Booking:
    event_id: int
    email: str
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    # Event reference as last written to storage; None until the booking is persisted
    persisted_event_id: Optional[int] = attrs.field(default=None, eq=False, repr=False)

    @classmethod
    @Logger.io
    def create(cls, *, event_id: int, email: str) -> 'Booking':
        return cls(event_id=event_id, email=email)

    @property
    def is_new(self) -> bool:
        return self.id is None

    @property
    def event_reference_changed(self) -> bool:
        return self.persisted_event_id is None or self.event_id != self.persisted_event_id

    @property
    def needs_reference_check(self) -> bool:
        return self.is_new or self.event_reference_changed

    @Logger.io
    def validate_and_normalize(self) -> Self:
        """Email format rule; the event reference is checked by the repo against storage."""
        if isinstance(self.event_id, bool) or not isinstance(self.event_id, int):
            raise ValidationError('Field "event_id" must be an event id.')
        if StringValidators.is_blank(self.email):
            raise ValidationError('Field "email" is required and cannot be empty.')
        self.email = self.email.strip()
        if not EmailValidators.validate_email(self.email):
            raise ValidationError('Invalid email format.')
        return self

    @Logger.io
    def change(self, *, event_id: Optional[int] = None, email: Optional[str] = None) -> Self:
        changes: dict[str, object] = {}
        if event_id is not None:
            changes['event_id'] = event_id
        if email is not None:
            changes['email'] = email
        return attrs.evolve(self, **changes)
