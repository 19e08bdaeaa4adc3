"""Enumerations shared across all FlightOps contracts.

Values are the exact strings stored in Firestore and shown in the UI.
"""

from enum import Enum


# ------------------------------------------------------------------
# Trips & quotes
# ------------------------------------------------------------------


class LegType(str, Enum):
    CHARTER = "Charter"
    OWNER = "Owner"
    POSITIONING = "Positioning"
    AMBULANCE = "Ambulance"
    CARGO = "Cargo"
    MAINTENANCE = "Maintenance"
    FERRY = "Ferry"


class TripStatus(str, Enum):
    """Lifecycle of a trip: Scheduled → Confirmed → Released/En Route → Completed."""
    SCHEDULED = "Scheduled"
    CONFIRMED = "Confirmed"
    RELEASED = "Released"
    EN_ROUTE = "En Route"
    AWAITING_CLOSEOUT = "Awaiting Closeout"
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"
    DIVERTED = "Diverted"


class QuoteStatus(str, Enum):
    DRAFT = "Draft"
    SENT = "Sent"
    ACCEPTED = "Accepted"
    REJECTED = "Rejected"
    EXPIRED = "Expired"
    BOOKED = "Booked"
    CANCELLED = "Cancelled"


# ------------------------------------------------------------------
# Maintenance
# ------------------------------------------------------------------


class ItemStatus(str, Enum):
    """Status shared by MEL items and discrepancies."""
    OPEN = "Open"
    DEFERRED = "Deferred"
    CLOSED = "Closed"


class MelCategory(str, Enum):
    A = "A"
    B = "B"
    C = "C"
    D = "D"


class MaintenanceItemType(str, Enum):
    INSPECTION = "Inspection"
    SERVICE_BULLETIN = "Service Bulletin"
    AIRWORTHINESS_DIRECTIVE = "Airworthiness Directive"
    COMPONENT_REPLACEMENT = "Component Replacement"
    OVERHAUL = "Overhaul"
    LIFE_LIMITED_PART = "Life Limited Part"
    OTHER = "Other"


class TrackType(str, Enum):
    INTERVAL = "Interval"
    ONE_TIME = "One Time"
    DONT_ALERT = "Dont Alert"


class DaysIntervalType(str, Enum):
    DAYS = "days"
    MONTHS_SPECIFIC_DAY = "months_specific_day"
    MONTHS_EOM = "months_eom"
    YEARS_SPECIFIC_DAY = "years_specific_day"


class CostType(str, Enum):
    SCHEDULED = "Scheduled"
    UNSCHEDULED = "Unscheduled"


class CostCategory(str, Enum):
    LABOR = "Labor"
    PARTS = "Parts"
    SHOP_FEES = "Shop Fees"
    OTHER = "Other"


# ------------------------------------------------------------------
# Documents
# ------------------------------------------------------------------


class AircraftDocumentType(str, Enum):
    REGISTRATION = "Registration"
    AIRWORTHINESS_CERTIFICATE = "Airworthiness Certificate"
    INSURANCE_POLICY = "Insurance Policy"
    MAINTENANCE_LOG_SUMMARY = "Maintenance Log Summary"
    WEIGHT_AND_BALANCE = "Weight & Balance"
    MEL = "MEL (Minimum Equipment List)"
    RADIO_STATION_LICENSE = "Radio Station License"
    NOISE_CERTIFICATE = "Noise Certificate"
    OTHER = "Other"


class CrewDocumentType(str, Enum):
    LICENSE = "License"
    MEDICAL = "Medical"
    PASSPORT = "Passport"
    VISA = "Visa"
    TRAINING_CERTIFICATE = "Training Certificate"
    TYPE_RATING = "Type Rating"
    COMPANY_ID = "Company ID"
    AIRPORT_ID = "Airport ID"
    RECURRENCY_CHECK = "Recurrency Check"
    PROFICIENCY_CHECK = "Proficiency Check"
    LINE_CHECK = "Line Check"
    MEDICAL_CLEARANCE = "Medical Clearance for Duty"
    OTHER = "Other"


class CompanyDocumentType(str, Enum):
    MANUAL = "Manual"
    POLICY = "Policy"
    PROCEDURE = "Procedure"
    TEMPLATE = "Template"
    COMPLIANCE_RECORD = "Compliance Record"
    LEGAL_DOCUMENT = "Legal Document"
    SAFETY_BULLETIN = "Safety Bulletin"
    TRAINING_MATERIAL = "Training Material"
    OTHER = "Other"


# ------------------------------------------------------------------
# People
# ------------------------------------------------------------------


class CrewRole(str, Enum):
    CAPTAIN = "Captain"
    FIRST_OFFICER = "First Officer"
    FLIGHT_ATTENDANT = "Flight Attendant"
    FLIGHT_MEDIC = "Flight Medic"
    MECHANIC = "Mechanic"
    LOADMASTER = "Loadmaster"
    OTHER = "Other"


class CustomerType(str, Enum):
    CHARTER = "Charter"
    OWNER = "Owner"
    INTERNAL = "Internal"
    RETAIL = "Retail"
    BROKER = "Broker"
    OTHER = "Other"


class Permission(str, Enum):
    MANAGE_COMPANY_SETTINGS = "MANAGE_COMPANY_SETTINGS"
    MANAGE_QUOTE_CONFIG = "MANAGE_QUOTE_CONFIG"
    MANAGE_CUSTOMERS = "MANAGE_CUSTOMERS"
    CREATE_QUOTES = "CREATE_QUOTES"
    VIEW_ALL_QUOTES = "VIEW_ALL_QUOTES"
    MANAGE_ALL_QUOTES = "MANAGE_ALL_QUOTES"
    MANAGE_AIRCRAFT_MAINTENANCE_DATA = "MANAGE_AIRCRAFT_MAINTENANCE_DATA"
    VIEW_TRIPS = "VIEW_TRIPS"
    MANAGE_TRIPS = "MANAGE_TRIPS"
    MANAGE_USERS_ROLES = "MANAGE_USERS_ROLES"
    VIEW_DASHBOARD = "VIEW_DASHBOARD"
    ACCESS_SETTINGS_MENU = "ACCESS_SETTINGS_MENU"


# ------------------------------------------------------------------
# Messaging & flight logs
# ------------------------------------------------------------------


class BulletinType(str, Enum):
    INFO = "info"
    WARNING = "warning"
    CRITICAL = "critical"


class NotificationType(str, Enum):
    ALERT = "alert"
    INFO = "info"
    SUCCESS = "success"
    SYSTEM = "system"
    MAINTENANCE = "maintenance"
    TRAINING = "training"
    COMPLIANCE = "compliance"


class ApproachType(str, Enum):
    ILS = "ILS"
    GPS = "GPS"
    VOR = "VOR"
    RNAV = "RNAV"
    VISUAL = "Visual"
    NDB = "NDB"
    OTHER = "Other"


class FuelUnit(str, Enum):
    LBS = "Lbs"
    GAL = "Gal"
    KGS = "Kgs"
    LTRS = "Ltrs"
