"""FastAPI dependency injection wiring.

The Firestore client is resolved once per request by ``get_db`` and passed
into every repository constructor; tests override ``get_db`` alone.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any

from fastapi import Depends

from flightops.api.auth import UserClaims, verify_firebase_token
from flightops.persistence.firestore_client import get_firestore_client
from flightops.persistence.repositories.company_repo import (
    CompanyDocumentRepository,
    CompanyProfileRepository,
    CustomerRepository,
)
from flightops.persistence.repositories.crew_repo import CrewDocumentRepository, CrewRepository
from flightops.persistence.repositories.fleet_repo import (
    AircraftDocumentRepository,
    AircraftRateRepository,
    BlockOutRepository,
    ComponentTimesRepository,
    FleetRepository,
    PerformanceRepository,
)
from flightops.persistence.repositories.maintenance_repo import (
    DiscrepancyRepository,
    MaintenanceCostRepository,
    MaintenanceTaskRepository,
    MelRepository,
)
from flightops.persistence.repositories.messaging_repo import (
    BulletinRepository,
    NotificationRepository,
)
from flightops.persistence.repositories.quote_repo import QuoteRepository
from flightops.persistence.repositories.role_repo import RoleRepository
from flightops.persistence.repositories.trip_repo import FlightLogRepository, TripRepository
from flightops.services.bulletin_service import BulletinService
from flightops.services.flight_log import FlightLogService
from flightops.services.generation import GenerationService
from flightops.services.llm import LanguageModel
from flightops.services.maintenance_service import MaintenanceService
from flightops.services.notification_service import NotificationService
from flightops.services.storage import DocumentStorage
from flightops.services.user_admin import UserAdmin


# ------------------------------------------------------------------
# Current user
# ------------------------------------------------------------------


def get_current_user(
    claims: UserClaims = Depends(verify_firebase_token),
) -> str:
    """Return the authenticated user ID."""
    return claims.uid


# ------------------------------------------------------------------
# Store client
# ------------------------------------------------------------------


def get_db() -> Any:
    return get_firestore_client()


# ------------------------------------------------------------------
# Repositories (stateless, one instance per request)
# ------------------------------------------------------------------


def get_fleet_repo(db: Any = Depends(get_db)) -> FleetRepository:
    return FleetRepository(db)


def get_rate_repo(db: Any = Depends(get_db)) -> AircraftRateRepository:
    return AircraftRateRepository(db)


def get_performance_repo(db: Any = Depends(get_db)) -> PerformanceRepository:
    return PerformanceRepository(db)


def get_component_times_repo(db: Any = Depends(get_db)) -> ComponentTimesRepository:
    return ComponentTimesRepository(db)


def get_block_out_repo(db: Any = Depends(get_db)) -> BlockOutRepository:
    return BlockOutRepository(db)


def get_aircraft_document_repo(db: Any = Depends(get_db)) -> AircraftDocumentRepository:
    return AircraftDocumentRepository(db)


def get_task_repo(db: Any = Depends(get_db)) -> MaintenanceTaskRepository:
    return MaintenanceTaskRepository(db)


def get_mel_repo(db: Any = Depends(get_db)) -> MelRepository:
    return MelRepository(db)


def get_discrepancy_repo(db: Any = Depends(get_db)) -> DiscrepancyRepository:
    return DiscrepancyRepository(db)


def get_maintenance_cost_repo(db: Any = Depends(get_db)) -> MaintenanceCostRepository:
    return MaintenanceCostRepository(db)


def get_crew_repo(db: Any = Depends(get_db)) -> CrewRepository:
    return CrewRepository(db)


def get_crew_document_repo(db: Any = Depends(get_db)) -> CrewDocumentRepository:
    return CrewDocumentRepository(db)


def get_company_profile_repo(db: Any = Depends(get_db)) -> CompanyProfileRepository:
    return CompanyProfileRepository(db)


def get_company_document_repo(db: Any = Depends(get_db)) -> CompanyDocumentRepository:
    return CompanyDocumentRepository(db)


def get_customer_repo(db: Any = Depends(get_db)) -> CustomerRepository:
    return CustomerRepository(db)


def get_quote_repo(db: Any = Depends(get_db)) -> QuoteRepository:
    return QuoteRepository(db)


def get_trip_repo(db: Any = Depends(get_db)) -> TripRepository:
    return TripRepository(db)


def get_flight_log_repo(db: Any = Depends(get_db)) -> FlightLogRepository:
    return FlightLogRepository(db)


def get_bulletin_repo(db: Any = Depends(get_db)) -> BulletinRepository:
    return BulletinRepository(db)


def get_notification_repo(db: Any = Depends(get_db)) -> NotificationRepository:
    return NotificationRepository(db)


def get_role_repo(db: Any = Depends(get_db)) -> RoleRepository:
    return RoleRepository(db)


# ------------------------------------------------------------------
# External collaborators (process-wide)
# ------------------------------------------------------------------


@lru_cache
def get_language_model() -> LanguageModel:
    return LanguageModel()


@lru_cache
def get_document_storage() -> DocumentStorage:
    return DocumentStorage()


def get_user_admin() -> UserAdmin:
    return UserAdmin()


# ------------------------------------------------------------------
# Services
# ------------------------------------------------------------------


def get_maintenance_service(
    fleet: FleetRepository = Depends(get_fleet_repo),
    mel_items: MelRepository = Depends(get_mel_repo),
    discrepancies: DiscrepancyRepository = Depends(get_discrepancy_repo),
) -> MaintenanceService:
    return MaintenanceService(fleet, mel_items, discrepancies)


def get_generation_service(
    llm: LanguageModel = Depends(get_language_model),
    fleet: FleetRepository = Depends(get_fleet_repo),
    tasks: MaintenanceTaskRepository = Depends(get_task_repo),
) -> GenerationService:
    return GenerationService(llm, fleet, tasks)


def get_bulletin_service(
    bulletins: BulletinRepository = Depends(get_bulletin_repo),
    notifications: NotificationRepository = Depends(get_notification_repo),
) -> BulletinService:
    return BulletinService(bulletins, notifications)


def get_notification_service(
    notifications: NotificationRepository = Depends(get_notification_repo),
    aircraft_documents: AircraftDocumentRepository = Depends(get_aircraft_document_repo),
    bulletins: BulletinRepository = Depends(get_bulletin_repo),
    tasks: MaintenanceTaskRepository = Depends(get_task_repo),
    fleet: FleetRepository = Depends(get_fleet_repo),
) -> NotificationService:
    return NotificationService(notifications, aircraft_documents, bulletins, tasks, fleet)


def get_flight_log_service(
    logs: FlightLogRepository = Depends(get_flight_log_repo),
    trips: TripRepository = Depends(get_trip_repo),
    fleet: FleetRepository = Depends(get_fleet_repo),
    component_times: ComponentTimesRepository = Depends(get_component_times_repo),
) -> FlightLogService:
    return FlightLogService(logs, trips, fleet, component_times)
