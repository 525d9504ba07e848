"""
Configuración de fixtures para pytest.

Este módulo contiene fixtures reutilizables para todos los tests.
"""

import pytest
import os
from typing import Generator, Dict, Any
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool
from fastapi.testclient import TestClient

# Configurar para usar base de datos en memoria para tests
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["PBKDF2_ITERATIONS"] = "1000"
os.environ["JWT_SECRET_KEY"] = "test-secret-key-with-at-least-thirty-two-characters"

from main import app
from database.db import get_db, Base
from database.models import UserORM, OwnerORM, VetORM, PetORM
from auth import create_access_token, JWTTokenIssuer
from config import settings
from core.security import Pbkdf2PasswordHasher
from repositories import (
    SQLAlchemyUserRepository,
    SQLAlchemyOwnerRepository,
    SQLAlchemyVetRepository,
    SQLAlchemyPetRepository,
    SQLAlchemyRevokedTokenRepository,
)
from services import (
    OwnerService,
    VetService,
    UserService,
    PetService,
    AuthenticationService,
)


ADMIN_ID = "aaaaaaaa-0000-0000-0000-000000000001"
OWNER_USER_ID = "bbbbbbbb-0000-0000-0000-000000000002"
OWNER_PROFILE_ID = "bbbbbbbb-1111-1111-1111-000000000002"
VET_USER_ID = "cccccccc-0000-0000-0000-000000000003"
VET_PROFILE_ID = "cccccccc-1111-1111-1111-000000000003"
PET_ID = "dddddddd-0000-0000-0000-000000000004"


# ==================== Database Fixtures ====================

@pytest.fixture(scope="function")
def db_engine():
    """Create an in-memory SQLite database engine for testing."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    # Enable foreign keys for SQLite
    @event.listens_for(engine, "connect")
    def set_sqlite_pragma(dbapi_conn, connection_record):
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture(scope="function")
def db_session(db_engine) -> Generator[Session, None, None]:
    """Create a new database session for a test."""
    TestingSessionLocal = sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=db_engine
    )
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(scope="function")
def client(db_session: Session) -> Generator[TestClient, None, None]:
    """Create a test client with database session override."""
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


# ==================== Capability Fixtures ====================

@pytest.fixture
def password_hasher() -> Pbkdf2PasswordHasher:
    return Pbkdf2PasswordHasher(iterations=settings.pbkdf2_iterations)


@pytest.fixture
def token_issuer() -> JWTTokenIssuer:
    return JWTTokenIssuer()


# ==================== Repository / Service Fixtures ====================

@pytest.fixture
def user_repository(db_session: Session) -> SQLAlchemyUserRepository:
    return SQLAlchemyUserRepository(db_session)


@pytest.fixture
def owner_repository(db_session: Session) -> SQLAlchemyOwnerRepository:
    return SQLAlchemyOwnerRepository(db_session)


@pytest.fixture
def vet_repository(db_session: Session) -> SQLAlchemyVetRepository:
    return SQLAlchemyVetRepository(db_session)


@pytest.fixture
def pet_repository(db_session: Session) -> SQLAlchemyPetRepository:
    return SQLAlchemyPetRepository(db_session)


@pytest.fixture
def token_repository(db_session: Session) -> SQLAlchemyRevokedTokenRepository:
    return SQLAlchemyRevokedTokenRepository(db_session)


@pytest.fixture
def owner_service(owner_repository, user_repository, password_hasher) -> OwnerService:
    return OwnerService(owner_repository, user_repository, password_hasher)


@pytest.fixture
def vet_service(vet_repository, user_repository, password_hasher) -> VetService:
    return VetService(vet_repository, user_repository, password_hasher)


@pytest.fixture
def user_service(user_repository, owner_repository, vet_repository, password_hasher) -> UserService:
    return UserService(user_repository, owner_repository, vet_repository, password_hasher)


@pytest.fixture
def pet_service(pet_repository, user_repository) -> PetService:
    return PetService(pet_repository, user_repository)


@pytest.fixture
def auth_service(user_repository, token_issuer, password_hasher, token_repository) -> AuthenticationService:
    return AuthenticationService(user_repository, token_issuer, password_hasher, token_repository)


# ==================== User Fixtures ====================

@pytest.fixture
def owner_data() -> Dict[str, Any]:
    """Sample owner registration data."""
    return {
        "name": "rhaenyra",
        "email": "rhaenyra@gmail.com",
        "username": "rhaenyra",
        "password": "Caraxys123!",
    }


@pytest.fixture
def vet_data() -> Dict[str, Any]:
    """Sample vet data."""
    return {
        "name": "Dr. Vet Test",
        "email": "vet@clinic.com",
        "username": "testvet",
        "password": "Vet12345!",
    }


@pytest.fixture
def admin_data() -> Dict[str, Any]:
    """Sample admin data."""
    return {
        "name": "Admin Test",
        "email": "admin@clinic.com",
        "username": "testadmin",
        "password": "Admin123!",
    }


@pytest.fixture
def admin_user(db_session: Session, admin_data: Dict[str, Any], password_hasher) -> UserORM:
    """Create an ADMIN user in the database."""
    user = UserORM(
        id=ADMIN_ID,
        name=admin_data["name"],
        username=admin_data["username"],
        email=admin_data["email"],
        password_hash=password_hasher.hash(admin_data["password"]),
        role="ADMIN",
    )
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def owner_user(db_session: Session, password_hasher) -> UserORM:
    """Create an owner profile and its OWNER user in the database."""
    password_hash = password_hasher.hash("Owner123!")
    db_session.add(OwnerORM(
        id=OWNER_PROFILE_ID,
        name="Daemon Targaryen",
        email="daemon@gmail.com",
        username="daemon",
        password_hash=password_hash,
    ))
    user = UserORM(
        id=OWNER_USER_ID,
        name="Daemon Targaryen",
        username="daemon",
        email="daemon@gmail.com",
        password_hash=password_hash,
        role="OWNER",
        owner_id=OWNER_PROFILE_ID,
    )
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def vet_user(db_session: Session, password_hasher) -> UserORM:
    """Create a vet profile and its VET user in the database."""
    password_hash = password_hasher.hash("Vet12345!")
    db_session.add(VetORM(
        id=VET_PROFILE_ID,
        name="Dr. Gerardo",
        email="gerardo@clinic.com",
        username="gerardo",
        password_hash=password_hash,
    ))
    user = UserORM(
        id=VET_USER_ID,
        name="Dr. Gerardo",
        username="gerardo",
        email="gerardo@clinic.com",
        password_hash=password_hash,
        role="VET",
        vet_id=VET_PROFILE_ID,
    )
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


# ==================== Token Fixtures ====================

@pytest.fixture
def admin_token(admin_user: UserORM) -> str:
    return create_access_token({"sub": admin_user.id, "role": admin_user.role})


@pytest.fixture
def owner_token(owner_user: UserORM) -> str:
    return create_access_token({"sub": owner_user.id, "role": owner_user.role})


@pytest.fixture
def vet_token(vet_user: UserORM) -> str:
    return create_access_token({"sub": vet_user.id, "role": vet_user.role})


@pytest.fixture
def admin_headers(admin_token: str) -> Dict[str, str]:
    """Generate authentication headers for admin."""
    return {"Authorization": f"Bearer {admin_token}"}


@pytest.fixture
def owner_headers(owner_token: str) -> Dict[str, str]:
    return {"Authorization": f"Bearer {owner_token}"}


@pytest.fixture
def vet_headers(vet_token: str) -> Dict[str, str]:
    return {"Authorization": f"Bearer {vet_token}"}


# ==================== Pet Fixtures ====================

@pytest.fixture
def pet_data(owner_user: UserORM) -> Dict[str, Any]:
    """Sample pet data for the seeded owner."""
    return {
        "name": "Michi",
        "breed": "Siamese",
        "color": "white",
        "age": 2,
        "weight": 4.5,
        "type": "CAT",
        "ownerID": owner_user.owner_id,
    }


@pytest.fixture
def pet_instance(db_session: Session, owner_user: UserORM) -> PetORM:
    """Create a pet in the database."""
    pet = PetORM(
        id=PET_ID,
        name="Firulais",
        breed="Labrador",
        color="brown",
        age=3,
        weight=25.5,
        type="DOG",
        owner_id=owner_user.owner_id,
    )
    db_session.add(pet)
    db_session.commit()
    db_session.refresh(pet)
    return pet

