import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from worklog.db import get_db
from worklog.main import app
from worklog.models import Base, Client, Organization, RoleEnum, User, WorkOrder


@pytest.fixture()
def engine(tmp_path):
    db_path = tmp_path / "test.db"
    engine = create_engine(
        f"sqlite+pysqlite:///{db_path}", connect_args={"check_same_thread": False}
    )
    Base.metadata.create_all(engine)
    return engine


@pytest.fixture()
def SessionLocal(engine):
    return sessionmaker(bind=engine, autocommit=False, autoflush=False)


@pytest.fixture()
def db_session(SessionLocal):
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def client(SessionLocal):
    def override_get_db():
        db = SessionLocal()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture()
def organization(db_session):
    organization = Organization(name="Org X")
    db_session.add(organization)
    db_session.commit()
    return organization


@pytest.fixture()
def other_organization(db_session):
    organization = Organization(name="Org Y")
    db_session.add(organization)
    db_session.commit()
    return organization


@pytest.fixture()
def headers(organization):
    return {"X-Organization-Id": str(organization.id)}


@pytest.fixture()
def timesheet_setup(db_session, organization):
    employee = User(
        organization_id=organization.id,
        username="mrossi",
        full_name="Mario Rossi",
        role=RoleEnum.EMPLOYEE,
    )
    second_employee = User(
        organization_id=organization.id,
        username="lbianchi",
        full_name="Luca Bianchi",
        role=RoleEnum.EMPLOYEE,
    )
    admin = User(
        organization_id=organization.id,
        username="admin",
        full_name="Admin User",
        role=RoleEnum.ADMIN,
    )
    customer = Client(organization_id=organization.id, name="Acme Construction")
    db_session.add_all([employee, second_employee, admin, customer])
    db_session.flush()

    work_order = WorkOrder(
        organization_id=organization.id,
        client_id=customer.id,
        name="Warehouse roof",
        allowed_work_types=["Cut", "Weld"],
        allowed_materials=["Steel"],
    )
    idle_work_order = WorkOrder(
        organization_id=organization.id,
        client_id=customer.id,
        name="Loading bay",
    )
    db_session.add_all([work_order, idle_work_order])
    db_session.commit()

    return {
        "employee": employee,
        "second_employee": second_employee,
        "admin": admin,
        "client": customer,
        "work_order": work_order,
        "idle_work_order": idle_work_order,
    }
