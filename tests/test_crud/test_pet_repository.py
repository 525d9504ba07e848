"""
Tests for SQLAlchemyPetRepository CRUD operations.
"""

import pytest
from sqlalchemy.orm import Session

from database.models import PetORM
from models.pets import Pet, PetType
from repositories.pet_repository import SQLAlchemyPetRepository
from core.exceptions import NotFoundException


def make_pet(owner_id: str, **overrides) -> Pet:
    data = {
        "name": "Michi",
        "breed": "Siamese",
        "color": "white",
        "age": 2,
        "weight": 4.5,
        "type": PetType.CAT,
        "owner_id": owner_id,
    }
    data.update(overrides)
    return Pet(**data)


class TestPetRepository:
    """Tests for pet persistence."""

    def test_save_y_find(self, pet_repository: SQLAlchemyPetRepository, db_session: Session):
        created = pet_repository.save(make_pet("owner-1"))
        pet_repository.commit()

        assert created.id is not None
        assert db_session.get(PetORM, created.id).type == "CAT"
        assert pet_repository.find_one_by_id(created.id) == created

    def test_find_one_by_natural_key(self, pet_repository, pet_instance: PetORM):
        found = pet_repository.find_one_by_natural_key("Firulais", "Labrador", pet_instance.owner_id)

        assert found.id == pet_instance.id
        assert found.type == PetType.DOG
        assert pet_repository.find_one_by_natural_key("Firulais", "Beagle", pet_instance.owner_id) is None
        assert pet_repository.find_one_by_natural_key("Firulais", "Labrador", "other-owner") is None

    def test_find_all_by_owner(self, pet_repository, pet_instance: PetORM):
        pet_repository.save(make_pet(pet_instance.owner_id))
        pet_repository.save(make_pet("other-owner", name="Rex"))
        pet_repository.commit()

        pets = pet_repository.find_all_by_owner(pet_instance.owner_id)

        assert sorted(p.name for p in pets) == ["Firulais", "Michi"]
        assert len(pet_repository.find_all()) == 3

    def test_update(self, pet_repository, pet_instance: PetORM):
        current = pet_repository.find_one_by_id(pet_instance.id)

        updated = pet_repository.update(current.id, current.model_copy(update={"age": 4, "type": PetType.OTHER}))
        pet_repository.commit()

        assert updated.age == 4
        assert updated.type == PetType.OTHER

    def test_delete(self, pet_repository, pet_instance: PetORM):
        pet_id = pet_instance.id

        deleted = pet_repository.delete(pet_id)
        pet_repository.commit()

        assert deleted.name == "Firulais"
        assert pet_repository.find_one_by_id(pet_id) is None

    def test_delete_inexistente(self, pet_repository):
        with pytest.raises(NotFoundException):
            pet_repository.delete("does-not-exist")
