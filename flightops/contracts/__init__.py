"""FlightOps data contracts: Pydantic v2 models for charter operations.

Data authority
--------------

**Firestore** (source of truth, one top-level collection per entity):
- ``FleetAircraft``: ``/fleet/{id}``
- ``AircraftRate`` / ``AircraftPerformanceData`` / ``ComponentTimes``:
  keyed by aircraft id
- ``MaintenanceTask``, ``MelItem``, ``AircraftDiscrepancy``, ``MaintenanceCost``
- ``CrewMember``, ``CrewDocument``, ``CompanyDocument``, ``Customer``
- ``Quote``: ``/quotes/{quoteId}``
- ``Trip``, ``FlightLogLeg``: ``/flightLogs/{tripId}_{legIndex}``
- ``Bulletin``, ``Notification``, ``Role``
- ``CompanyProfile``: singleton ``/companyProfile/main``

**Firebase Auth**:
- ``User``: role names in the ``roles`` custom claim

**Cloud Storage** (binary artifacts, referenced by URL from Firestore docs):
- Aircraft documents (``AircraftDocument.file_url``)
- Company logo (``CompanyProfile.logo_url``)

Calculated (never recomputed by the store)
------------------------------------------
- Quote line-item totals, ``total_*`` and margin, set by the pricing service
- Current / upcoming trip classification
- MEL and discrepancy status when not given explicitly
"""

from flightops.contracts.access import CreateUserInput, Role, UpdateUserInput, User
from flightops.contracts.common import DeleteResult, FileUpload, FirestoreDocument, FirestoreModel
from flightops.contracts.company import (
    COMPANY_PROFILE_ID,
    DEFAULT_COMPANY_PROFILE,
    CompanyDocument,
    CompanyProfile,
    Customer,
    ServiceFeeRate,
)
from flightops.contracts.crew import CrewDocument, CrewLicense, CrewMember
from flightops.contracts.enums import (
    AircraftDocumentType,
    ApproachType,
    BulletinType,
    CompanyDocumentType,
    CostCategory,
    CostType,
    CrewDocumentType,
    CrewRole,
    CustomerType,
    DaysIntervalType,
    FuelUnit,
    ItemStatus,
    LegType,
    MaintenanceItemType,
    MelCategory,
    NotificationType,
    Permission,
    QuoteStatus,
    TrackType,
    TripStatus,
)
from flightops.contracts.fleet import (
    AircraftBlockOut,
    AircraftDocument,
    AircraftDocumentUpload,
    AircraftPerformanceData,
    AircraftRate,
    ComponentTime,
    ComponentTimes,
    EngineDetail,
    FleetAircraft,
    PropellerDetail,
)
from flightops.contracts.maintenance import (
    AircraftDiscrepancy,
    Attachment,
    CostBreakdown,
    MaintenanceCost,
    MaintenanceTask,
    MelItem,
    WorkOrder,
    WorkOrderRequest,
)
from flightops.contracts.messaging import Bulletin, Notification
from flightops.contracts.quote import (
    FlightEstimate,
    FlightEstimateRequest,
    Quote,
    QuoteEmail,
    QuoteEmailRequest,
    QuoteLeg,
    QuoteLineItem,
    QuoteOptions,
)
from flightops.contracts.trip import FlightLogInput, FlightLogLeg, Trip, TripLeg

__all__ = [
    # Enums
    "AircraftDocumentType",
    "ApproachType",
    "BulletinType",
    "CompanyDocumentType",
    "CostCategory",
    "CostType",
    "CrewDocumentType",
    "CrewRole",
    "CustomerType",
    "DaysIntervalType",
    "FuelUnit",
    "ItemStatus",
    "LegType",
    "MaintenanceItemType",
    "MelCategory",
    "NotificationType",
    "Permission",
    "QuoteStatus",
    "TrackType",
    "TripStatus",
    # Common
    "DeleteResult",
    "FileUpload",
    "FirestoreDocument",
    "FirestoreModel",
    # Fleet
    "AircraftBlockOut",
    "AircraftDocument",
    "AircraftDocumentUpload",
    "AircraftPerformanceData",
    "AircraftRate",
    "ComponentTime",
    "ComponentTimes",
    "EngineDetail",
    "FleetAircraft",
    "PropellerDetail",
    # Maintenance
    "AircraftDiscrepancy",
    "Attachment",
    "CostBreakdown",
    "MaintenanceCost",
    "MaintenanceTask",
    "MelItem",
    "WorkOrder",
    "WorkOrderRequest",
    # People & company
    "COMPANY_PROFILE_ID",
    "DEFAULT_COMPANY_PROFILE",
    "CompanyDocument",
    "CompanyProfile",
    "CreateUserInput",
    "CrewDocument",
    "CrewLicense",
    "CrewMember",
    "Customer",
    "Role",
    "ServiceFeeRate",
    "UpdateUserInput",
    "User",
    # Commercial
    "FlightEstimate",
    "FlightEstimateRequest",
    "FlightLogInput",
    "FlightLogLeg",
    "Quote",
    "QuoteEmail",
    "QuoteEmailRequest",
    "QuoteLeg",
    "QuoteLineItem",
    "QuoteOptions",
    "Trip",
    "TripLeg",
    # Messaging
    "Bulletin",
    "Notification",
]
