from fastapi import Depends, Header, HTTPException
from sqlalchemy.orm import Session

from ..db import get_db
from ..models import Organization


def get_organization(
    organization_id: int = Header(alias="X-Organization-Id"),
    db: Session = Depends(get_db),
) -> Organization:
    # Authentication is handled upstream; the tenant arrives as a header.
    organization = db.get(Organization, organization_id)
    if not organization:
        raise HTTPException(status_code=404, detail="Organization not found.")
    return organization


def get_scoped(db: Session, model, object_id: int, organization_id: int, label: str):
    instance = db.get(model, object_id)
    if instance is None or instance.organization_id != organization_id:
        raise HTTPException(status_code=404, detail=f"{label} not found.")
    return instance
