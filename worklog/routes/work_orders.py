from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ..db import get_db
from ..models import Client, Organization, WorkOrder
from ..schemas import (
    ApprovedOperationRead,
    ClientCreate,
    ClientRead,
    WorkOrderCreate,
    WorkOrderDetailRead,
    WorkOrderRead,
    WorkOrderStatsRead,
)
from ..services import work_order_stats
from .deps import get_organization, get_scoped

router = APIRouter()

DUPLICATE_CLIENT = "A client with this name already exists."


@router.get("/clients", response_model=list[ClientRead])
def clients_list(
    organization: Organization = Depends(get_organization),
    db: Session = Depends(get_db),
) -> list[Client]:
    return list(
        db.scalars(
            select(Client)
            .where(Client.organization_id == organization.id)
            .order_by(Client.name)
        )
    )


@router.post("/clients", response_model=ClientRead, status_code=201)
def clients_create(
    payload: ClientCreate,
    organization: Organization = Depends(get_organization),
    db: Session = Depends(get_db),
) -> Client:
    name = payload.name.strip()
    existing = db.execute(
        select(Client.id)
        .where(Client.organization_id == organization.id)
        .where(Client.name == name)
    ).scalar_one_or_none()
    if existing is not None:
        raise HTTPException(status_code=409, detail=DUPLICATE_CLIENT)
    client = Client(
        organization_id=organization.id, name=name, description=payload.description
    )
    db.add(client)
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        raise HTTPException(status_code=409, detail=DUPLICATE_CLIENT) from exc
    db.refresh(client)
    return client


@router.get("/clients/{client_id}/work-orders", response_model=list[WorkOrderRead])
def client_work_orders(
    client_id: int,
    active_only: bool = False,
    organization: Organization = Depends(get_organization),
    db: Session = Depends(get_db),
) -> list[WorkOrder]:
    client = get_scoped(db, Client, client_id, organization.id, "Client")
    query = (
        select(WorkOrder)
        .where(WorkOrder.organization_id == organization.id)
        .where(WorkOrder.client_id == client.id)
        .order_by(WorkOrder.name)
    )
    if active_only:
        query = query.where(WorkOrder.is_active.is_(True))
    return list(db.scalars(query))


@router.post(
    "/clients/{client_id}/work-orders", response_model=WorkOrderRead, status_code=201
)
def client_work_orders_create(
    client_id: int,
    payload: WorkOrderCreate,
    organization: Organization = Depends(get_organization),
    db: Session = Depends(get_db),
) -> WorkOrder:
    client = get_scoped(db, Client, client_id, organization.id, "Client")
    work_order = WorkOrder(
        organization_id=organization.id,
        client_id=client.id,
        name=payload.name.strip(),
        description=payload.description,
        is_active=payload.is_active,
        allowed_work_types=payload.allowed_work_types,
        allowed_materials=payload.allowed_materials,
    )
    db.add(work_order)
    db.commit()
    db.refresh(work_order)
    return work_order


@router.get("/work-orders/stats", response_model=list[WorkOrderStatsRead])
def work_orders_stats(
    organization: Organization = Depends(get_organization),
    db: Session = Depends(get_db),
):
    return work_order_stats.compute_work_order_stats(db, organization.id)


@router.get(
    "/work-orders/{work_order_id}/operations",
    response_model=list[ApprovedOperationRead],
)
def work_order_operations(
    work_order_id: int,
    organization: Organization = Depends(get_organization),
    db: Session = Depends(get_db),
):
    get_scoped(db, WorkOrder, work_order_id, organization.id, "Work order")
    return work_order_stats.approved_work_order_operations(
        db, work_order_id, organization.id
    )


@router.get("/work-orders/{work_order_id}/report", response_model=WorkOrderDetailRead)
def work_order_report(
    work_order_id: int,
    organization: Organization = Depends(get_organization),
    db: Session = Depends(get_db),
):
    get_scoped(db, WorkOrder, work_order_id, organization.id, "Work order")
    return work_order_stats.compute_work_order_detail_rows(
        db, work_order_id, organization.id
    )
