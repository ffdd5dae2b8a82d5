import pytest

from src.platform.exception.exceptions import ValidationError
from src.service.event_booking.domain.entity.event_entity import Event
from test.event_test_constants import (
    DEFAULT_EVENT_SLUG,
    DEFAULT_EVENT_TITLE,
    build_event_payload,
)


@pytest.mark.unit
class TestEventValidateAndNormalize:
    def test_new_event_gets_slug_and_canonical_date_time(self) -> None:
        event = Event.create(**build_event_payload(date='September 6, 2025', time='09:30:15'))

        event.validate_and_normalize()

        assert event.slug == DEFAULT_EVENT_SLUG
        assert event.date == '2025-09-06'
        assert event.time == '09:30'

    def test_string_fields_are_trimmed(self) -> None:
        event = Event.create(**build_event_payload(title=f'  {DEFAULT_EVENT_TITLE}  ', venue=' Hall A '))

        event.validate_and_normalize()

        assert event.title == DEFAULT_EVENT_TITLE
        assert event.venue == 'Hall A'
        assert event.slug == DEFAULT_EVENT_SLUG

    @pytest.mark.parametrize(
        'field_name',
        ['title', 'description', 'overview', 'image', 'venue', 'location', 'mode', 'audience', 'organizer'],
    )
    def test_blank_required_field_is_rejected(self, field_name: str) -> None:
        event = Event.create(**build_event_payload(**{field_name: '   '}))

        with pytest.raises(ValidationError, match=f'Field "{field_name}" is required'):
            event.validate_and_normalize()

    def test_empty_agenda_is_rejected(self) -> None:
        event = Event.create(**build_event_payload(agenda=[]))

        with pytest.raises(ValidationError, match='Agenda'):
            event.validate_and_normalize()

    def test_single_item_agenda_is_accepted(self) -> None:
        event = Event.create(**build_event_payload(agenda=['Opening']))

        event.validate_and_normalize()

        assert event.agenda == ['Opening']

    def test_blank_tag_is_rejected(self) -> None:
        event = Event.create(**build_event_payload(tags=['python', ' ']))

        with pytest.raises(ValidationError, match='Tags'):
            event.validate_and_normalize()

    def test_bad_time_is_rejected(self) -> None:
        event = Event.create(**build_event_payload(time='9:05:30'))

        with pytest.raises(ValidationError, match='Invalid event time'):
            event.validate_and_normalize()

    def test_bad_date_is_rejected(self) -> None:
        event = Event.create(**build_event_payload(date='someday'))

        with pytest.raises(ValidationError, match='Invalid event date'):
            event.validate_and_normalize()

    def test_title_without_letters_or_digits_is_rejected(self) -> None:
        event = Event.create(**build_event_payload(title='!!!'))

        with pytest.raises(ValidationError, match='at least one letter or digit'):
            event.validate_and_normalize()

    def test_normalizing_twice_is_stable(self) -> None:
        event = Event.create(**build_event_payload(date='2025-09-06T20:00:00Z', time='21:15:00'))

        event.validate_and_normalize()
        snapshot = (event.slug, event.date, event.time)
        event.validate_and_normalize()

        assert (event.slug, event.date, event.time) == snapshot


@pytest.mark.unit
class TestEventSlugLifecycle:
    def test_persisted_event_keeps_slug_when_title_unchanged(self) -> None:
        event = Event.create(**build_event_payload())
        event.id = 1
        event.slug = 'custom-slug'
        event.persisted_title = DEFAULT_EVENT_TITLE

        event.validate_and_normalize()

        assert event.title_changed is False
        assert event.slug == 'custom-slug'

    def test_persisted_event_regenerates_slug_when_title_changes(self) -> None:
        event = Event.create(**build_event_payload(title='EuroPython 2026'))
        event.id = 1
        event.slug = DEFAULT_EVENT_SLUG
        event.persisted_title = DEFAULT_EVENT_TITLE

        event.validate_and_normalize()

        assert event.slug == 'europython-2026'

    def test_new_event_always_counts_as_title_changed(self) -> None:
        event = Event.create(**build_event_payload())

        assert event.is_new is True
        assert event.title_changed is True


@pytest.mark.unit
class TestEventApplyChanges:
    def test_apply_changes_returns_updated_copy(self) -> None:
        event = Event.create(**build_event_payload())
        event.id = 7
        event.persisted_title = DEFAULT_EVENT_TITLE

        updated = event.apply_changes(venue='Hall B', tags=['python'])

        assert updated.venue == 'Hall B'
        assert updated.tags == ['python']
        assert updated.id == 7
        assert updated.persisted_title == DEFAULT_EVENT_TITLE
        assert event.venue != 'Hall B'

    def test_unknown_field_is_rejected(self) -> None:
        event = Event.create(**build_event_payload())

        with pytest.raises(ValidationError, match='Unknown event field'):
            event.apply_changes(slug='hijacked')
