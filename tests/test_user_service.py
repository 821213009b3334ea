"""Tests for UserService business rules."""

import logging

import pytest

from user_registry_api.app.core.store import UserStore
from user_registry_api.app.schemas.user import UserCreate, UserUpdate
from user_registry_api.app.services.user_service import (
    NOT_FOUND_MESSAGE,
    UserAlreadyExistsError,
    UserNotFoundError,
    UserService,
)


@pytest.fixture
def service():
    return UserService(UserStore())


def create(service, name, age=21, **extra):
    return service.create_user(UserCreate(name=name, age=age, is_married=False, **extra))


class TestCreate:
    def test_create_returns_stored_record(self, service):
        user = create(service, "Anshul", gender="male")
        assert user.model_dump(by_alias=True) == {
            "name": "Anshul",
            "age": 21,
            "gender": "male",
            "isMarried": False,
        }
        assert len(service.store) == 1

    def test_duplicate_name_rejected_ignoring_case(self, service):
        create(service, "Anshul")
        with pytest.raises(UserAlreadyExistsError):
            create(service, "ANSHUL")
        assert len(service.store) == 1

    def test_create_logs(self, service, caplog):
        with caplog.at_level(logging.INFO, logger="user_registry_api.app.services.user_service"):
            create(service, "Anshul")
        assert "Created user Anshul" in caplog.text


class TestList:
    def test_list_all_in_order(self, service):
        for name in ("Charlie", "Alice", "Bob"):
            create(service, name)
        assert [u.name for u in service.list_users()] == ["Charlie", "Alice", "Bob"]

    def test_filter(self, service):
        create(service, "Anshul")
        create(service, "Aniket")
        assert [u.name for u in service.list_users("aniket")] == ["Aniket"]

    def test_empty_filter_means_all(self, service):
        create(service, "Anshul")
        assert len(service.list_users("")) == 1


class TestUpdate:
    def test_merge_only_provided_fields(self, service):
        create(service, "Anshul", gender="male")
        user = service.update_user("anshul", UserUpdate(age=22))
        assert user.age == 22
        assert user.gender == "male"
        assert user.is_married is False
        assert service.get_user("Anshul").age == 22

    def test_unknown_user(self, service):
        create(service, "Anshul")
        with pytest.raises(UserNotFoundError) as excinfo:
            service.update_user("Nobody", UserUpdate(age=22))
        assert str(excinfo.value) == NOT_FOUND_MESSAGE
        assert service.get_user("Anshul").age == 21

    def test_rename_then_lookup_by_new_name(self, service):
        create(service, "Anshul")
        service.update_user("Anshul", UserUpdate(name="Anshu"))
        assert service.get_user("anshu").name == "Anshu"
        with pytest.raises(UserNotFoundError):
            service.get_user("Anshul")

    def test_rename_changing_only_case(self, service):
        create(service, "anshul")
        user = service.update_user("ANSHUL", UserUpdate(name="Anshul"))
        assert user.name == "Anshul"
        assert len(service.store) == 1

    def test_rename_collision_rejected(self, service):
        create(service, "Anshul")
        create(service, "Aniket")
        with pytest.raises(UserAlreadyExistsError):
            service.update_user("Anshul", UserUpdate(name="aniket"))
        assert [u.name for u in service.list_users()] == ["Anshul", "Aniket"]


class TestDelete:
    def test_delete_existing(self, service):
        create(service, "Anshul")
        create(service, "Aniket")
        assert service.delete_user("ANSHUL") is None
        assert [u.name for u in service.list_users()] == ["Aniket"]

    def test_delete_unknown(self, service):
        create(service, "Anshul")
        with pytest.raises(UserNotFoundError):
            service.delete_user("Nobody")
        assert len(service.store) == 1
