"""ORM models package export."""

from petshop.models.account import Account
from petshop.models.address import NO_POSTAL_CODE, Address
from petshop.models.appointment import (
    ACTIVE_STATUSES,
    ALLOWED_STATUS_TRANSITIONS,
    Appointment,
    AppointmentStatus,
)
from petshop.models.pet import Pet
from petshop.models.product import Product, ProductSpecies
from petshop.models.service import Service, ServiceCategory
from petshop.models.staff import ELEVATED_ROLES, Staff, StaffRole
from petshop.models.store import Store

__all__ = [
    "ACTIVE_STATUSES",
    "ALLOWED_STATUS_TRANSITIONS",
    "Account",
    "Address",
    "Appointment",
    "AppointmentStatus",
    "ELEVATED_ROLES",
    "NO_POSTAL_CODE",
    "Pet",
    "Product",
    "ProductSpecies",
    "Service",
    "ServiceCategory",
    "Staff",
    "StaffRole",
    "Store",
]
