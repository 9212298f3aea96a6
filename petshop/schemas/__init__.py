"""Schema exports."""

from petshop.schemas.account import (
    AccountCreate,
    AccountLogin,
    AccountProfile,
    AccountRead,
    AccountUpdate,
    LoginRequest,
)
from petshop.schemas.address import AddressRead, PostalCodeLookup
from petshop.schemas.appointment import (
    AppointmentCreate,
    AppointmentRead,
    AppointmentStatusUpdate,
)
from petshop.schemas.common import (
    APIModel,
    ErrorResponse,
    FieldError,
    MessageResponse,
    SuccessResponse,
)
from petshop.schemas.pet import PetCreate, PetRead, PetSummary, PetUpdate, VisitBooking
from petshop.schemas.product import ProductCreate, ProductRead, ProductUpdate
from petshop.schemas.report import (
    AddressOccupancy,
    Dashboard,
    PetsBySpecies,
    ProductsBySpecies,
    UpcomingVisits,
)
from petshop.schemas.service import (
    ServiceCreate,
    ServiceDetail,
    ServiceListItem,
    ServiceRead,
    ServiceUpdate,
)
from petshop.schemas.staff import (
    StaffCreate,
    StaffLogin,
    StaffProfile,
    StaffRead,
    StaffUpdate,
)
from petshop.schemas.store import StoreCreate, StoreRead

__all__ = [
    "APIModel",
    "AccountCreate",
    "AccountLogin",
    "AccountProfile",
    "AccountRead",
    "AccountUpdate",
    "AddressOccupancy",
    "AddressRead",
    "AppointmentCreate",
    "AppointmentRead",
    "AppointmentStatusUpdate",
    "Dashboard",
    "ErrorResponse",
    "FieldError",
    "LoginRequest",
    "MessageResponse",
    "PetCreate",
    "PetRead",
    "PetSummary",
    "PetUpdate",
    "PetsBySpecies",
    "PostalCodeLookup",
    "ProductCreate",
    "ProductRead",
    "ProductUpdate",
    "ProductsBySpecies",
    "ServiceCreate",
    "ServiceDetail",
    "ServiceListItem",
    "ServiceRead",
    "ServiceUpdate",
    "StaffCreate",
    "StaffLogin",
    "StaffProfile",
    "StaffRead",
    "StaffUpdate",
    "StoreCreate",
    "StoreRead",
    "SuccessResponse",
    "UpcomingVisits",
    "VisitBooking",
]
