from __future__ import annotations

import asyncio
from decimal import Decimal

from sqlalchemy import select

from petshop.core.config import get_settings
from petshop.core.security import hash_password
from petshop.db.session import Database
from petshop.models import (
    Address,
    Product,
    ProductSpecies,
    Service,
    ServiceCategory,
    Staff,
    StaffRole,
    Store,
)

STAFF_ID = "master"
EMAIL = "master@petshop.com.br"
PASSWORD = "master123"

ADDRESSES = [
    ("01001000", "Praça da Sé", "Sé", "São Paulo", "SP"),
    ("20040020", "Avenida Rio Branco", "Centro", "Rio de Janeiro", "RJ"),
]

PRODUCTS = [
    ("Ração Premium", "Ração seca para cães adultos", "129.90", ProductSpecies.DOG, 40),
    ("Arranhador", "Arranhador de sisal com base", "89.50", ProductSpecies.CAT, 12),
    ("Alpiste", "Mistura de sementes para pássaros", "15.00", ProductSpecies.BIRD, 80),
]

SERVICES = [
    ("Consulta clínica", "150.00", "30 minutos", ServiceCategory.VETERINARY),
    ("Banho e tosa", "80.00", "1 hora", ServiceCategory.GROOMING),
    ("Diária de hotel", "120.00", "24 horas", ServiceCategory.BOARDING),
]


async def main() -> None:
    settings = get_settings()
    database = Database.from_settings(settings)
    await database.create_all()
    try:
        async with database.session() as session:
            existing = await session.scalar(
                select(Staff).where(Staff.staff_id == STAFF_ID)
            )
            if existing is not None:
                print(f"Staff {STAFF_ID} already exists")
                return

            for cep, street, neighborhood, city, state in ADDRESSES:
                session.add(
                    Address(
                        cep=cep,
                        street=street,
                        neighborhood=neighborhood,
                        city=city,
                        state=state,
                    )
                )

            session.add(
                Staff(
                    staff_id=STAFF_ID,
                    first_name="Dev",
                    last_name="Master",
                    email=EMAIL,
                    hashed_password=hash_password(PASSWORD),
                    role=StaffRole.MASTER,
                    cep=ADDRESSES[0][0],
                )
            )
            store = Store(
                name="Loja Centro", cep=ADDRESSES[0][0], number="100", staff_id=STAFF_ID
            )
            session.add(store)
            await session.flush()

            for name, description, price, species, stock in PRODUCTS:
                session.add(
                    Product(
                        name=name,
                        description=description,
                        price=Decimal(price),
                        species=species,
                        stock=stock,
                        store_id=store.id,
                        staff_id=STAFF_ID,
                    )
                )
            for name, price, duration, category in SERVICES:
                session.add(
                    Service(
                        name=name,
                        price=Decimal(price),
                        duration=duration,
                        category=category,
                        staff_id=STAFF_ID,
                    )
                )

            await session.commit()
            print(f"Created staff {STAFF_ID} ({EMAIL} / {PASSWORD}) with demo catalog")
    finally:
        await database.dispose()


if __name__ == "__main__":
    asyncio.run(main())
