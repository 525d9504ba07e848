"""
Tests for the payload validation engine.

Tests cover:
- Owner / Vet account rules (blank fields, email, username, password policy)
- Update rule sets (id required, optional password)
- User role / profile reference invariant
- Pet rules (numeric ranges, enum parsing, ownerID alias)
- Error reporting (violations, unknown rule set)
"""

import pytest
from typing import Dict, Any

from core.validation import validate, validate_or_raise, Violation
from core.exceptions import OwnerValidationError, ErrorKind
from models.users import Role
from models.pets import PetType


def _fields(outcome) -> set:
    return {v.field for v in outcome.violations}


class TestOwnerRules:
    """Tests for the owner / vet create rule sets."""

    def test_payload_valido(self, owner_data: Dict[str, Any]):
        outcome = validate(owner_data, "owner")

        assert outcome.ok is True
        assert outcome.violations == []
        assert outcome.value["email"] == "rhaenyra@gmail.com"
        assert outcome.value["username"] == "rhaenyra"

    def test_strips_surrounding_whitespace(self, owner_data: Dict[str, Any]):
        owner_data["name"] = "  rhaenyra  "
        owner_data["email"] = " rhaenyra@gmail.com "

        outcome = validate(owner_data, "owner")

        assert outcome.ok is True
        assert outcome.value["name"] == "rhaenyra"
        assert outcome.value["email"] == "rhaenyra@gmail.com"

    def test_nombre_en_blanco(self, owner_data: Dict[str, Any]):
        owner_data["name"] = "   "

        outcome = validate(owner_data, "owner")

        assert outcome.ok is False
        assert _fields(outcome) == {"name"}
        assert outcome.violations[0].message == "must not be blank"

    @pytest.mark.parametrize("email", ["rhaenyra", "rhaenyra@gmail", "rhae nyra@gmail.com", "@gmail.com"])
    def test_email_invalido(self, owner_data: Dict[str, Any], email: str):
        owner_data["email"] = email

        outcome = validate(owner_data, "owner")

        assert outcome.ok is False
        assert "email" in _fields(outcome)

    def test_username_demasiado_corto(self, owner_data: Dict[str, Any]):
        owner_data["username"] = "rha"

        outcome = validate(owner_data, "owner")

        assert outcome.ok is False
        assert _fields(outcome) == {"username"}

    @pytest.mark.parametrize("password,missing", [
        ("caraxys123!", "an uppercase letter"),
        ("CARAXYS123!", "a lowercase letter"),
        ("Caraxysxx!", "a digit"),
        ("Caraxys123", "a special character"),
        ("Ca1!", "at least 8 characters"),
    ])
    def test_politica_de_password(self, owner_data: Dict[str, Any], password: str, missing: str):
        owner_data["password"] = password

        outcome = validate(owner_data, "owner")

        assert outcome.ok is False
        assert _fields(outcome) == {"password"}
        assert missing in outcome.violations[0].message

    def test_campos_faltantes(self):
        outcome = validate({}, "owner")

        assert outcome.ok is False
        assert _fields(outcome) == {"name", "email", "username", "password"}

    def test_tipo_incorrecto(self, owner_data: Dict[str, Any]):
        owner_data["name"] = 123

        outcome = validate(owner_data, "owner")

        assert outcome.ok is False
        assert "name" in _fields(outcome)

    def test_rol_distinto_al_perfil(self, owner_data: Dict[str, Any]):
        owner_data["role"] = "VET"

        outcome = validate(owner_data, "owner")

        assert outcome.ok is False
        assert "role must be OWNER" in outcome.violations[0].message

    def test_rol_del_perfil_aceptado(self, vet_data: Dict[str, Any]):
        vet_data["role"] = "vet"

        outcome = validate(vet_data, "vet")

        assert outcome.ok is True
        assert outcome.value["role"] == Role.VET

    def test_campos_extra_ignorados(self, owner_data: Dict[str, Any]):
        owner_data["id"] = "12345678"

        outcome = validate(owner_data, "owner")

        assert outcome.ok is True
        assert "id" not in outcome.value


class TestUpdateRules:
    """Tests for the *_update rule sets."""

    def test_password_opcional(self, owner_data: Dict[str, Any]):
        owner_data.pop("password")
        owner_data["id"] = "some-id"

        outcome = validate(owner_data, "owner_update")

        assert outcome.ok is True
        assert outcome.value["password"] is None
        assert outcome.value["id"] == "some-id"

    def test_password_presente_se_valida(self, owner_data: Dict[str, Any]):
        owner_data["id"] = "some-id"
        owner_data["password"] = "weak"

        outcome = validate(owner_data, "owner_update")

        assert outcome.ok is False
        assert _fields(outcome) == {"password"}

    def test_id_requerido(self, vet_data: Dict[str, Any]):
        outcome = validate(vet_data, "vet_update")

        assert outcome.ok is False
        assert _fields(outcome) == {"id"}


class TestUserRules:
    """Tests for the role / profile reference invariant."""

    def _user(self, **overrides) -> Dict[str, Any]:
        data = {
            "name": "Admin",
            "email": "admin@clinic.com",
            "username": "superadmin",
            "password": "Admin123!",
            "role": "ADMIN",
        }
        data.update(overrides)
        return data

    def test_admin_sin_referencias(self):
        outcome = validate(self._user(), "user")

        assert outcome.ok is True
        assert outcome.value["role"] == Role.ADMIN

    def test_admin_con_referencia(self):
        outcome = validate(self._user(ownerID="owner-1"), "user")

        assert outcome.ok is False
        assert "ADMIN" in outcome.violations[0].message

    def test_owner_requiere_referencia(self):
        outcome = validate(self._user(role="OWNER"), "user")

        assert outcome.ok is False

    def test_owner_con_referencia(self):
        outcome = validate(self._user(role="owner", ownerID="owner-1"), "user")

        assert outcome.ok is True
        assert outcome.value["role"] == Role.OWNER
        assert outcome.value["owner_id"] == "owner-1"

    def test_vet_con_ambas_referencias(self):
        outcome = validate(self._user(role="VET", vet_id="vet-1", owner_id="owner-1"), "user")

        assert outcome.ok is False

    def test_rol_desconocido(self):
        outcome = validate(self._user(role="SUPERUSER"), "user")

        assert outcome.ok is False
        assert _fields(outcome) == {"role"}


class TestPetRules:
    """Tests for the pet rule sets."""

    def _pet(self, **overrides) -> Dict[str, Any]:
        data = {
            "name": "Michi",
            "breed": "Siamese",
            "color": "white",
            "age": 2,
            "weight": 4.5,
            "type": "CAT",
            "ownerID": "091327246",
        }
        data.update(overrides)
        return data

    def test_payload_valido(self):
        outcome = validate(self._pet(), "pet")

        assert outcome.ok is True
        assert outcome.value["type"] == PetType.CAT
        assert outcome.value["owner_id"] == "091327246"

    def test_tipo_en_minusculas(self):
        outcome = validate(self._pet(type="dog"), "pet")

        assert outcome.ok is True
        assert outcome.value["type"] == PetType.DOG

    def test_tipo_desconocido(self):
        outcome = validate(self._pet(type="DRAGON"), "pet")

        assert outcome.ok is False
        assert _fields(outcome) == {"type"}

    def test_edad_negativa(self):
        outcome = validate(self._pet(age=-1), "pet")

        assert outcome.ok is False
        assert _fields(outcome) == {"age"}

    def test_peso_negativo_y_color_en_blanco(self):
        outcome = validate(self._pet(weight=-0.5, color=" "), "pet")

        assert outcome.ok is False
        assert _fields(outcome) == {"weight", "color"}

    def test_edad_booleana(self):
        outcome = validate(self._pet(age=True), "pet")

        assert outcome.ok is False
        assert _fields(outcome) == {"age"}

    def test_peso_no_finito_o_booleano(self):
        assert _fields(validate(self._pet(weight=float("inf")), "pet")) == {"weight"}
        assert _fields(validate(self._pet(weight=float("nan")), "pet")) == {"weight"}
        assert _fields(validate(self._pet(weight=True), "pet")) == {"weight"}

    def test_cero_es_valido(self):
        outcome = validate(self._pet(age=0, weight=0), "pet")

        assert outcome.ok is True

    def test_update_requiere_id(self):
        outcome = validate(self._pet(), "pet_update")

        assert outcome.ok is False
        assert _fields(outcome) == {"id"}


class TestValidationErrors:
    """Tests for error reporting."""

    def test_rule_set_desconocido(self):
        with pytest.raises(ValueError, match="rule set does not exist"):
            validate({}, "dragon")

    def test_validate_or_raise_devuelve_valor(self, owner_data: Dict[str, Any]):
        value = validate_or_raise(owner_data, "owner", OwnerValidationError)

        assert value["username"] == "rhaenyra"

    def test_validate_or_raise_lanza_error_de_entidad(self, owner_data: Dict[str, Any]):
        owner_data["email"] = "not-an-email"

        with pytest.raises(OwnerValidationError) as exc_info:
            validate_or_raise(owner_data, "owner", OwnerValidationError)

        error = exc_info.value
        assert error.kind == ErrorKind.VALIDATION
        assert error.entity == "Owner"
        assert error.status_code == 422
        assert error.violations == [Violation(field="email", message="must be a valid email address")]
        assert error.details["violations"] == [{"field": "email", "message": "must be a valid email address"}]
