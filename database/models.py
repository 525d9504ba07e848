from datetime import datetime, timezone
from uuid import uuid4

from sqlalchemy import Column, String, Integer, DateTime, Float
from sqlalchemy.orm import declarative_base

Base = declarative_base()


def gen_uuid_str():
    return str(uuid4())


def get_current_time():
    return datetime.now(timezone.utc).replace(tzinfo=None)


#ORM: Usuarios (identidad de autenticación)
class UserORM(Base):
    __tablename__ = "users"
    id = Column("id_user", String(36), primary_key=True, default=gen_uuid_str)
    name = Column(String(200), nullable=False)
    username = Column(String(100), nullable=False, unique=True)
    email = Column(String(254), nullable=False, unique=True)
    password_hash = Column(String(256), nullable=False)
    role = Column(String(20), nullable=False)
    owner_id = Column(String(36), nullable=True, unique=True, index=True)
    vet_id = Column(String(36), nullable=True, unique=True, index=True)
    created_at = Column(DateTime, default=get_current_time)
    updated_at = Column(DateTime, default=get_current_time, onupdate=get_current_time)


#ORM: Owners (perfil)
class OwnerORM(Base):
    __tablename__ = "owners"
    id = Column("id_owner", String(36), primary_key=True, default=gen_uuid_str)
    name = Column(String(200), nullable=False)
    email = Column(String(254), nullable=False)
    username = Column(String(100), nullable=False)
    password_hash = Column(String(256), nullable=False)


#ORM: Vets (perfil)
class VetORM(Base):
    __tablename__ = "vets"
    id = Column("id_vet", String(36), primary_key=True, default=gen_uuid_str)
    name = Column(String(200), nullable=False)
    email = Column(String(254), nullable=False)
    username = Column(String(100), nullable=False)
    password_hash = Column(String(256), nullable=False)


#ORM: Pets
class PetORM(Base):
    __tablename__ = "pets"
    id = Column("id_pet", String(36), primary_key=True, default=gen_uuid_str)
    name = Column(String(50), nullable=False)
    breed = Column(String(50), nullable=False)
    color = Column(String(50), nullable=False)
    age = Column(Integer, nullable=False)
    weight = Column(Float, nullable=False)
    type = Column(String(20), nullable=False)
    owner_id = Column(String(36), nullable=False, index=True)  # id del perfil Owner, validado por el servicio


#ORM: tokens revocados en logout
class RevokedTokenORM(Base):
    __tablename__ = "revoked_tokens"
    jti = Column(String(64), primary_key=True)
    user_id = Column(String(36), nullable=False)
    expires_at = Column(DateTime, nullable=False)
    revoked_at = Column(DateTime, default=get_current_time)


__all__ = [
    "Base",
    "UserORM",
    "OwnerORM",
    "VetORM",
    "PetORM",
    "RevokedTokenORM",
]
