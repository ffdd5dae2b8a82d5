import pytest

from src.platform.exception.exceptions import ValidationError
from src.service.event_booking.domain.entity.booking_entity import Booking
from test.event_test_constants import ANOTHER_BOOKER_EMAIL, TEST_BOOKER_EMAIL


@pytest.mark.unit
class TestBookingValidateAndNormalize:
    def test_valid_booking_passes_and_email_is_trimmed(self) -> None:
        booking = Booking.create(event_id=1, email=f'  {TEST_BOOKER_EMAIL} ')

        booking.validate_and_normalize()

        assert booking.email == TEST_BOOKER_EMAIL

    def test_short_email_is_accepted(self) -> None:
        booking = Booking.create(event_id=1, email=ANOTHER_BOOKER_EMAIL)

        assert booking.validate_and_normalize() is booking

    def test_malformed_email_is_rejected(self) -> None:
        booking = Booking.create(event_id=1, email='not-an-email')

        with pytest.raises(ValidationError, match='Invalid email format.'):
            booking.validate_and_normalize()

    @pytest.mark.parametrize('email', ['', '   ', None])
    def test_missing_email_is_rejected(self, email: object) -> None:
        booking = Booking(event_id=1, email=email)  # type: ignore[arg-type]

        with pytest.raises(ValidationError, match='Field "email" is required'):
            booking.validate_and_normalize()

    @pytest.mark.parametrize('event_id', [None, '1', True, 1.5])
    def test_non_integer_event_id_is_rejected(self, event_id: object) -> None:
        booking = Booking(event_id=event_id, email=TEST_BOOKER_EMAIL)  # type: ignore[arg-type]

        with pytest.raises(ValidationError, match='event_id'):
            booking.validate_and_normalize()


@pytest.mark.unit
class TestBookingReferenceCheck:
    def test_new_booking_needs_reference_check(self) -> None:
        booking = Booking.create(event_id=1, email=TEST_BOOKER_EMAIL)

        assert booking.is_new is True
        assert booking.needs_reference_check is True

    def test_email_only_change_skips_reference_check(self) -> None:
        booking = Booking(event_id=1, email=TEST_BOOKER_EMAIL, id=10, persisted_event_id=1)

        changed = booking.change(email=ANOTHER_BOOKER_EMAIL)

        assert changed.email == ANOTHER_BOOKER_EMAIL
        assert changed.event_reference_changed is False
        assert changed.needs_reference_check is False

    def test_event_change_needs_reference_check(self) -> None:
        booking = Booking(event_id=1, email=TEST_BOOKER_EMAIL, id=10, persisted_event_id=1)

        changed = booking.change(event_id=2)

        assert changed.event_id == 2
        assert changed.email == TEST_BOOKER_EMAIL
        assert changed.needs_reference_check is True

    def test_change_with_nothing_keeps_booking(self) -> None:
        booking = Booking(event_id=1, email=TEST_BOOKER_EMAIL, id=10, persisted_event_id=1)

        assert booking.change() == booking
