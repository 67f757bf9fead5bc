import uuid
from unittest.mock import MagicMock

import pytest

from shifolink.core.errors import InvalidCredentials, NotFoundError, ValidationError
from shifolink.core.security import hash_password, verify_password
from shifolink.entities import ENTITIES_BY_NAME
from shifolink.schemas.accounts import AuthorCreate
from shifolink.schemas.clinics import ClinicUpdate
from shifolink.schemas.common import PasswordChange
from shifolink.services import CrudService


def make_service(entity_name: str):
    repository = MagicMock()
    repository.entity = ENTITIES_BY_NAME[entity_name]
    return CrudService(repository, password_min_length=6), repository


def test_password_mismatch_never_writes():
    service, repository = make_service("author")
    repository.get_password.return_value = hash_password("secret1")

    with pytest.raises(InvalidCredentials):
        service.change_password(uuid.uuid4(), PasswordChange(old_password="wrong!", new_password="newsecret"))

    assert isinstance(InvalidCredentials(), ValidationError)
    repository.update_password.assert_not_called()
    repository.db.commit.assert_not_called()
    repository.db.rollback.assert_called_once()


def test_weak_new_password_never_writes():
    service, repository = make_service("customer")
    repository.get_password.return_value = "secret1"

    with pytest.raises(ValidationError):
        service.change_password(uuid.uuid4(), PasswordChange(old_password="secret1", new_password="abc"))

    repository.update_password.assert_not_called()


def test_password_change_stores_hash():
    service, repository = make_service("doctor")
    entity_id = uuid.uuid4()
    repository.get_password.return_value = "secret1"

    service.change_password(entity_id, PasswordChange(old_password="secret1", new_password="newsecret"))

    called_id, stored = repository.update_password.call_args.args
    assert called_id == entity_id
    assert verify_password("newsecret", stored)
    repository.db.commit.assert_called_once()


def test_create_reads_back_inside_transaction():
    service, repository = make_service("author")
    entity_id = uuid.uuid4()
    repository.create.return_value = entity_id
    repository.get.return_value = {"id": entity_id, "first_name": "Aziz"}

    result = service.create(AuthorCreate(first_name="Aziz", last_name="Karimov", password="secret1"))

    assert result == {"id": entity_id, "first_name": "Aziz"}
    fields = repository.create.call_args.args[0]
    assert fields["password"] != "secret1"
    repository.get.assert_called_once_with(entity_id)
    repository.db.commit.assert_called_once()


def test_failed_read_back_rolls_create_back():
    service, repository = make_service("author")
    entity_id = uuid.uuid4()
    repository.create.return_value = entity_id
    repository.get.side_effect = NotFoundError("author", entity_id)

    with pytest.raises(NotFoundError):
        service.create(AuthorCreate(first_name="Aziz", last_name="Karimov", password="secret1"))

    repository.db.commit.assert_not_called()
    repository.db.rollback.assert_called_once()


def test_create_rejects_short_password_before_storage():
    service, repository = make_service("author")

    with pytest.raises(ValidationError):
        service.create(AuthorCreate(first_name="Aziz", last_name="Karimov", password="abc"))

    repository.create.assert_not_called()


def test_update_forwards_only_supplied_fields():
    service, repository = make_service("clinic")
    entity_id = uuid.uuid4()
    repository.get.return_value = {"id": entity_id}

    service.update(entity_id, ClinicUpdate(name="New name"))

    repository.update.assert_called_once_with(entity_id, {"name": "New name"})


def test_password_change_refused_for_plain_entities():
    service, repository = make_service("clinic")

    with pytest.raises(ValidationError):
        service.change_password(uuid.uuid4(), PasswordChange(old_password="a", new_password="b"))

    repository.get_password.assert_not_called()
