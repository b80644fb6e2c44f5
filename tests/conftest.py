"""
Shared fixtures.

The relational gateways run against an in-memory SQLite database (one
connection shared through StaticPool), the document gateways against
mongomock. Nothing here needs a running MySQL or MongoDB.
"""

from datetime import date, datetime

import mongomock
import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from recruiting.db.mongodb import init_mongo_indexes
from recruiting.db.tables import Base
from recruiting.gateway.mongodb import MongoConsultantGateway, MongoUserGateway
from recruiting.gateway.relational import RelationalConsultantGateway, RelationalUserGateway
from recruiting.models import AddressModel, ConsultantModel, Gender
from recruiting.services import ConsultantService, UserService


@pytest.fixture
def session_factory():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield sessionmaker(autoflush=False, bind=engine)
    engine.dispose()


@pytest.fixture
def mongo_db():
    client = mongomock.MongoClient()
    db = client["recruiting_test"]
    init_mongo_indexes(db)
    yield db
    client.close()


@pytest.fixture
def relational_consultant_gateway(session_factory):
    return RelationalConsultantGateway(session_factory)


@pytest.fixture
def relational_user_gateway(session_factory):
    return RelationalUserGateway(session_factory)


@pytest.fixture
def mongo_consultant_gateway(mongo_db):
    return MongoConsultantGateway(mongo_db["consultants"])


@pytest.fixture
def mongo_user_gateway(mongo_db):
    return MongoUserGateway(mongo_db)


@pytest.fixture(params=["relational", "mongo"])
def consultant_gateway(request):
    """Both consultant gateways, for behaviour they must share."""
    return request.getfixturevalue(f"{request.param}_consultant_gateway")


@pytest.fixture(params=["relational", "mongo"])
def user_gateway(request):
    """Both user gateways, for behaviour they must share."""
    return request.getfixturevalue(f"{request.param}_user_gateway")


@pytest.fixture
def consultant_service(relational_consultant_gateway):
    return ConsultantService(relational_consultant_gateway)


@pytest.fixture
def user_service(relational_user_gateway):
    service = UserService(relational_user_gateway)
    service.ensure_default_accounts("admin", "admin")
    return service


def make_consultant(**overrides) -> ConsultantModel:
    """A registrable consultant; override any field."""
    fields = dict(
        consultant_no="141107-AAAAAA",
        registration_date=datetime(2014, 11, 7, 10, 0),
        fiscal_code="RSSMRA78H05A089N",
        email="mario.rossi@f2informatica.it",
        first_name="Mario",
        last_name="Rossi",
        gender=Gender.male,
        birth_date=date(1978, 6, 5),
        birth_city="Agrigento",
        residence=AddressModel(street="Via Roma", house_no="1", city="Agrigento", zip_code="92100"),
        domicile=AddressModel(street="Corso Italia", house_no="20", city="Milano", zip_code="20122"),
    )
    fields.update(overrides)
    return ConsultantModel(**fields)
