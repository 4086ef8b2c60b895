from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ..db import get_db
from ..models import Organization, User
from ..schemas import EmployeeCreate, EmployeeRead
from .deps import get_organization

router = APIRouter()


@router.get("/employees", response_model=list[EmployeeRead])
def employees_list(
    organization: Organization = Depends(get_organization),
    db: Session = Depends(get_db),
) -> list[User]:
    return list(
        db.scalars(
            select(User)
            .where(User.organization_id == organization.id)
            .order_by(User.full_name, User.id)
        )
    )


@router.post("/employees", response_model=EmployeeRead, status_code=201)
def employees_create(
    payload: EmployeeCreate,
    organization: Organization = Depends(get_organization),
    db: Session = Depends(get_db),
) -> User:
    username = payload.username.strip()
    existing = db.execute(
        select(User.id)
        .where(User.organization_id == organization.id)
        .where(User.username == username)
    ).scalar_one_or_none()
    if existing is not None:
        raise HTTPException(status_code=409, detail="Username already in use.")
    user = User(
        organization_id=organization.id,
        username=username,
        full_name=payload.full_name.strip(),
        role=payload.role,
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        raise HTTPException(status_code=409, detail="Username already in use.") from exc
    db.refresh(user)
    return user
