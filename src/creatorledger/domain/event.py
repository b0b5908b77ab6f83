"""Event (gig) domain service."""

from datetime import date
from typing import Optional
from uuid import UUID

from creatorledger.database.base import Database
from creatorledger.domain.entities import Event as EventEntity
from creatorledger.domain.errors import NotFoundError, ValidationError, event_not_found
from creatorledger.domain.events import EventCreated, EventPublisher
from creatorledger.logging_config import get_logger

logger = get_logger(__name__)


class EventService:
    """Service for managing the gigs and projects income is earned from."""

    def __init__(self, db: Database, publisher: Optional[EventPublisher] = None):
        """Initialize event service.

        Args:
            db: Database instance
            publisher: Optional event publisher notified when events are created
        """
        self.db = db
        self.publisher = publisher

    def record(
        self,
        event_date: date,
        client_name: str,
        description: str,
        today: Optional[date] = None,
    ) -> UUID:
        """Create a new event.

        Args:
            event_date: Date of the gig, within 10 years back and 5 years ahead
            client_name: Client the gig was for (at most 200 characters)
            description: Description of the gig
            today: Reference date for the accepted window (defaults to today)

        Returns:
            Event ID

        Raises:
            ValidationError: If any field is invalid
        """
        event = EventEntity.record(event_date, client_name, description, today=today)
        self.db.save_event(event)
        logger.info("event_created", event_id=str(event.id), event_date=str(event.event_date))

        if self.publisher is not None:
            self.publisher.publish(
                EventCreated(
                    event_id=event.id,
                    event_date=event.event_date,
                    client_name=event.client_name,
                    description=event.description,
                )
            )
        return event.id

    def update(
        self,
        event_id: UUID,
        event_date: date,
        client_name: str,
        description: str,
        today: Optional[date] = None,
    ) -> None:
        """Update an event's date, client and description.

        Raises:
            ValidationError: If any field is invalid
            NotFoundError: If event doesn't exist
        """
        event = self.get_event(event_id)
        if event is None:
            raise NotFoundError(event_not_found(event_id))
        self.db.save_event(event.update(event_date, client_name, description, today=today))

    def get_event(self, event_id: UUID) -> Optional[EventEntity]:
        """Get event by ID.

        Returns:
            Event entity or None if not found
        """
        if event_id is None:
            raise ValidationError("Event ID cannot be null")
        return self.db.get_event(event_id)

    def exists(self, event_id: UUID) -> bool:
        return self.get_event(event_id) is not None

    def list_events(
        self,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> list[EventEntity]:
        return self.db.list_events(start_date=start_date, end_date=end_date)
