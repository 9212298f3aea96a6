"""Service layer exports."""
from petshop.services import (
    account_service,
    address_service,
    appointment_service,
    auth_service,
    pet_service,
    product_service,
    report_service,
    service_catalog_service,
    staff_service,
    store_service,
)

__all__ = [
    "account_service",
    "address_service",
    "appointment_service",
    "auth_service",
    "pet_service",
    "product_service",
    "report_service",
    "service_catalog_service",
    "staff_service",
    "store_service",
]
