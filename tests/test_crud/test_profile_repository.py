"""
Tests for the Owner and Vet profile repositories.
"""

import pytest

from models.profiles import Owner, Vet
from core.exceptions import NotFoundException


class TestOwnerRepository:
    """Tests for SQLAlchemyOwnerRepository."""

    def test_save_y_find(self, owner_repository):
        created = owner_repository.save(Owner(
            name="rhaenyra",
            email="rhaenyra@gmail.com",
            username="rhaenyra",
            password_hash="salt$hash",
        ))
        owner_repository.commit()

        assert created.id is not None
        assert owner_repository.find_one_by_id(created.id) == created
        assert owner_repository.find_one_by_email_or_username("rhaenyra@gmail.com", "x") == created
        assert owner_repository.find_one_by_email_or_username("x@x.com", "rhaenyra") == created
        assert owner_repository.find_one_by_email_or_username("x@x.com", "x") is None

    def test_save_con_id_explicito(self, owner_repository):
        created = owner_repository.save(Owner(
            id="owner-fixed-id",
            name="Viserys",
            email="viserys@gmail.com",
            username="viserys",
            password_hash="salt$hash",
        ))

        assert created.id == "owner-fixed-id"

    def test_find_all(self, owner_repository, owner_user, vet_user):
        owners = owner_repository.find_all()

        assert [o.id for o in owners] == [owner_user.owner_id]

    def test_update_inexistente(self, owner_repository):
        with pytest.raises(NotFoundException):
            owner_repository.update("missing", Owner(
                name="x", email="x@x.com", username="xxxxx", password_hash="salt$hash",
            ))


class TestVetRepository:
    """Tests for SQLAlchemyVetRepository."""

    def test_update_y_delete(self, vet_repository, vet_user):
        profile_id = vet_user.vet_id
        current = vet_repository.find_one_by_id(profile_id)

        updated = vet_repository.update(profile_id, current.model_copy(update={"name": "Dr. Ruiz"}))
        assert isinstance(updated, Vet)
        assert updated.name == "Dr. Ruiz"

        deleted = vet_repository.delete(profile_id)
        vet_repository.commit()

        assert deleted.name == "Dr. Ruiz"
        assert vet_repository.find_one_by_id(profile_id) is None
