from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

from .db import SessionLocal
from .models import Client, Organization, RoleEnum, User, WorkOrder

DEMO_ORGANIZATION = "Demo Org"

SEED_USERS = [
    {"username": "admin", "full_name": "Admin User", "role": RoleEnum.ADMIN},
    {"username": "mrossi", "full_name": "Mario Rossi", "role": RoleEnum.EMPLOYEE},
    {"username": "lbianchi", "full_name": "Luca Bianchi", "role": RoleEnum.EMPLOYEE},
    {"username": "gverdi", "full_name": "Giulia Verdi", "role": RoleEnum.EMPLOYEE},
    {"username": "aneri", "full_name": "Anna Neri", "role": RoleEnum.EMPLOYEE},
]

SEED_CLIENTS = {
    "Acme Construction": [
        {
            "name": "Warehouse roof",
            "allowed_work_types": ["Cut", "Weld", "Assembly"],
            "allowed_materials": ["Steel", "Bolts"],
        },
        {
            "name": "Loading bay",
            "allowed_work_types": ["Excavation", "Concrete"],
            "allowed_materials": ["Concrete", "Rebar"],
        },
    ],
    "Northside Farms": [
        {"name": "Irrigation line", "allowed_work_types": [], "allowed_materials": []},
        {
            "name": "Barn repair",
            "allowed_work_types": ["Carpentry", "Painting"],
            "allowed_materials": ["Timber", "Paint"],
        },
    ],
    "City Council": [
        {"name": "Park maintenance", "allowed_work_types": [], "allowed_materials": []},
        {
            "name": "Road signage",
            "allowed_work_types": ["Install", "Remove"],
            "allowed_materials": ["Signs", "Posts"],
        },
    ],
}


def _get_or_create_organization(session: Session) -> tuple[Organization, int]:
    organization = session.execute(
        select(Organization).where(Organization.name == DEMO_ORGANIZATION)
    ).scalar_one_or_none()
    if organization:
        return organization, 0
    organization = Organization(name=DEMO_ORGANIZATION)
    session.add(organization)
    session.flush()
    return organization, 1


def seed_demo(session_factory=SessionLocal) -> int:
    """Create the demo organization and its lookups. Returns rows created."""
    created = 0
    with session_factory() as session:
        organization, created = _get_or_create_organization(session)

        for entry in SEED_USERS:
            exists = session.execute(
                select(User)
                .where(User.organization_id == organization.id)
                .where(User.username == entry["username"])
            ).scalar_one_or_none()
            if exists:
                continue
            session.add(User(organization_id=organization.id, is_active=True, **entry))
            created += 1

        for client_name, work_orders in SEED_CLIENTS.items():
            client = session.execute(
                select(Client)
                .where(Client.organization_id == organization.id)
                .where(Client.name == client_name)
            ).scalar_one_or_none()
            if client is None:
                client = Client(organization_id=organization.id, name=client_name)
                session.add(client)
                session.flush()
                created += 1
            for entry in work_orders:
                exists = session.execute(
                    select(WorkOrder)
                    .where(WorkOrder.client_id == client.id)
                    .where(WorkOrder.name == entry["name"])
                ).scalar_one_or_none()
                if exists:
                    continue
                session.add(
                    WorkOrder(
                        organization_id=organization.id,
                        client_id=client.id,
                        is_active=True,
                        **entry,
                    )
                )
                created += 1

        if created:
            session.commit()
    return created


def main() -> None:
    created = seed_demo()
    print(f"Seeded demo rows: {created}")


if __name__ == "__main__":
    main()
