"""Versioned API router."""

from fastapi import APIRouter

from . import (
    accounts,
    addresses,
    appointments,
    health,
    pets,
    products,
    reports,
    services,
    staff,
    stores,
)

router = APIRouter()
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(accounts.router, prefix="/usuarios", tags=["usuarios"])
router.include_router(staff.router, prefix="/funcionarios", tags=["funcionarios"])
router.include_router(pets.router, prefix="/pets", tags=["pets"])
router.include_router(products.router, prefix="/produtos", tags=["produtos"])
router.include_router(stores.router, prefix="/lojas", tags=["lojas"])
router.include_router(services.router, prefix="/servicos", tags=["servicos"])
router.include_router(
    appointments.router, prefix="/agendamentos", tags=["agendamentos"]
)
router.include_router(addresses.router, prefix="/cep", tags=["cep"])
router.include_router(reports.router, prefix="/relatorios", tags=["relatorios"])
