"""Notification listing and inline generation of system alerts.

There is no scheduler: alerts are generated synchronously each time the
notification list is fetched. Generated notifications use deterministic
ids, so an alert is created once and then left alone.
"""

from __future__ import annotations

import logging
from datetime import date, datetime, timedelta, timezone

from flightops.contracts.enums import NotificationType
from flightops.contracts.maintenance import MaintenanceTask
from flightops.contracts.messaging import Notification

logger = logging.getLogger(__name__)

DOCUMENT_EXPIRY_WINDOW_DAYS = 30
NEW_BULLETIN_WINDOW = timedelta(hours=24)


def task_due_date(task: MaintenanceTask) -> date | None:
    """Calendar due date of a task, from ``days_due_date`` or an ISO ``days_due_value``."""
    if task.days_due_date is not None:
        return task.days_due_date
    if task.days_due_value:
        try:
            return date.fromisoformat(task.days_due_value)
        except ValueError:
            return None
    return None


def _aware(dt: datetime) -> datetime:
    return dt if dt.tzinfo is not None else dt.replace(tzinfo=timezone.utc)


class NotificationService:
    def __init__(self, notifications, aircraft_documents, bulletins, tasks, fleet):
        self._notifications = notifications
        self._aircraft_documents = aircraft_documents
        self._bulletins = bulletins
        self._tasks = tasks
        self._fleet = fleet

    async def list_with_alerts(self, now: datetime | None = None) -> list[Notification]:
        """Generate pending system alerts, then return the most recent notifications."""
        await self.generate_system_notifications(now)
        return await self._notifications.list_recent()

    async def generate_system_notifications(self, now: datetime | None = None) -> list[Notification]:
        """Create missing alerts; returns the notifications created by this call.

        Each source is handled independently: a failure in one is logged and
        does not prevent the others.
        """
        now = _aware(now or datetime.now(timezone.utc))
        created: list[Notification] = []
        for section, generator in (
            ("document expiry", self._document_expiry_alerts),
            ("new bulletin", self._new_bulletin_alerts),
            ("maintenance due", self._maintenance_due_alerts),
        ):
            try:
                for candidate in await generator(now):
                    if await self._notifications.exists(candidate.id):
                        continue
                    created.append(await self._notifications.create(candidate))
            except Exception as exc:
                logger.error("Failed to generate %s notifications: %s", section, exc)
        if created:
            logger.info("Generated %d system notifications", len(created))
        return created

    async def _document_expiry_alerts(self, now: datetime) -> list[Notification]:
        today = now.date()
        alerts = []
        for doc in await self._aircraft_documents.list_all():
            if doc.expiry_date is None:
                continue
            days_left = (doc.expiry_date - today).days
            if not 0 <= days_left <= DOCUMENT_EXPIRY_WINDOW_DAYS:
                continue
            aircraft = doc.aircraft_tail_number or doc.aircraft_id
            alerts.append(Notification(
                id=f"doc-expiry-{doc.id}",
                type=NotificationType.ALERT,
                title=f"Document Expiring: {doc.document_name}",
                message=(
                    f'The document "{doc.document_name}" for aircraft {aircraft} expires '
                    f"in {days_left} days on {doc.expiry_date.isoformat()}."
                ),
                timestamp=now,
                link="/aircraft/documents",
            ))
        return alerts

    async def _new_bulletin_alerts(self, now: datetime) -> list[Notification]:
        alerts = []
        for bulletin in await self._bulletins.list_all():
            if not bulletin.is_active or bulletin.published_at is None:
                continue
            if now - _aware(bulletin.published_at) > NEW_BULLETIN_WINDOW:
                continue
            alerts.append(Notification(
                id=f"new-bulletin-{bulletin.id}",
                type=NotificationType.INFO,
                title=f"New Bulletin: {bulletin.title}",
                message="A new company bulletin has been published. Check the dashboard for details.",
                timestamp=now,
                link="/dashboard",
            ))
        return alerts

    async def _maintenance_due_alerts(self, now: datetime) -> list[Notification]:
        today = now.date()
        alerts = []
        for aircraft in await self._fleet.list_all():
            if not aircraft.is_maintenance_tracked:
                continue
            for task in await self._tasks.list_for_aircraft(aircraft.id):
                due = task_due_date(task)
                if not (task.is_active and task.is_days_due_enabled and due and due < today):
                    continue
                alerts.append(Notification(
                    id=f"maintenance-due-{task.id}",
                    type=NotificationType.MAINTENANCE,
                    title=f"Maintenance Due: {task.item_title}",
                    message=(
                        f'The maintenance task "{task.item_title}" for aircraft '
                        f"{aircraft.tail_number} was due on {due.isoformat()}."
                    ),
                    timestamp=now,
                    link=f"/aircraft/currency/{aircraft.tail_number}",
                ))
        return alerts
