"""Unit tests for the in-memory data services."""

from dataclasses import replace

import pytest

from campuscoffee.domain.exceptions import DuplicationException, NotFoundException
from campuscoffee.domain.services import PosService
from campuscoffee.repositories.memory_impl import (
    MemoryPosDataService,
    MemoryUserDataService,
)


@pytest.fixture
def pos_store() -> MemoryPosDataService:
    return MemoryPosDataService()


@pytest.fixture
def user_store() -> MemoryUserDataService:
    return MemoryUserDataService()


@pytest.mark.unit
class TestMemoryPosDataService:

    def test_create_assigns_sequential_ids(self, pos_store, sample_pos, another_pos):
        first = pos_store.upsert(sample_pos)
        second = pos_store.upsert(another_pos)

        assert first.id == 1
        assert second.id == 2
        assert first.created_at is not None
        assert first.updated_at is not None
        # The caller's object is left untouched
        assert sample_pos.id is None

    def test_get_all_returns_entities_ordered_by_id(self, pos_store, sample_pos, another_pos):
        pos_store.upsert(sample_pos)
        pos_store.upsert(another_pos)

        names = [pos.name for pos in pos_store.get_all()]
        assert names == [sample_pos.name, another_pos.name]

    def test_get_by_id_returns_copy(self, pos_store, sample_pos):
        created = pos_store.upsert(sample_pos)

        fetched = pos_store.get_by_id(created.id)
        fetched.name = "Changed"

        assert pos_store.get_by_id(created.id).name == sample_pos.name

    def test_get_by_id_missing_raises_not_found(self, pos_store):
        with pytest.raises(NotFoundException, match="Pos with ID '99' does not exist."):
            pos_store.get_by_id(99)

    def test_update_keeps_created_at(self, pos_store, sample_pos):
        created = pos_store.upsert(sample_pos)

        updated = pos_store.upsert(replace(created, description="New waffle recipe"))

        assert updated.id == created.id
        assert updated.description == "New waffle recipe"
        assert updated.created_at == created.created_at
        assert updated.updated_at >= created.updated_at
        assert len(pos_store.get_all()) == 1

    def test_update_of_unknown_id_raises_not_found(self, pos_store, sample_pos):
        with pytest.raises(NotFoundException):
            pos_store.upsert(replace(sample_pos, id=5))

    def test_duplicate_name_raises_duplication(self, pos_store, sample_pos):
        pos_store.upsert(sample_pos)

        with pytest.raises(DuplicationException) as exc_info:
            pos_store.upsert(replace(sample_pos, street="Other street"))

        assert str(exc_info.value) == "Pos with name 'Schmelzpunkt' already exists."

    def test_update_may_keep_its_own_name(self, pos_store, sample_pos):
        created = pos_store.upsert(sample_pos)

        updated = pos_store.upsert(replace(created, city="Mannheim"))

        assert updated.name == sample_pos.name

    def test_delete_removes_entity(self, pos_store, sample_pos):
        created = pos_store.upsert(sample_pos)

        pos_store.delete(created.id)

        assert pos_store.get_all() == []
        with pytest.raises(NotFoundException):
            pos_store.delete(created.id)

    def test_clear_removes_everything(self, pos_store, sample_pos, another_pos):
        pos_store.upsert(sample_pos)
        pos_store.upsert(another_pos)

        pos_store.clear()

        assert pos_store.get_all() == []

    def test_get_by_name(self, pos_store, sample_pos):
        created = pos_store.upsert(sample_pos)

        assert pos_store.get_by_name("Schmelzpunkt") == created
        with pytest.raises(NotFoundException, match="Pos with name 'Nowhere' does not exist."):
            pos_store.get_by_name("Nowhere")

    def test_works_behind_pos_service(self, pos_store, sample_pos):
        service = PosService(pos_store)

        created = service.upsert(sample_pos)
        updated = service.upsert(replace(created, house_number="92"))

        assert service.get_by_id(created.id).house_number == "92"
        assert updated.id == created.id
        with pytest.raises(NotFoundException):
            service.upsert(replace(created, id=created.id + 100))


@pytest.mark.unit
class TestMemoryUserDataService:

    def test_login_name_must_be_unique(self, user_store, sample_user):
        user_store.upsert(sample_user)

        with pytest.raises(DuplicationException) as exc_info:
            user_store.upsert(replace(sample_user, email_address="other@uni-heidelberg.de"))

        assert exc_info.value.field == "login_name"

    def test_email_address_must_be_unique(self, user_store, sample_user):
        user_store.upsert(sample_user)

        with pytest.raises(DuplicationException) as exc_info:
            user_store.upsert(replace(sample_user, login_name="jdoe"))

        assert exc_info.value.field == "email_address"
        assert exc_info.value.value == sample_user.email_address

    def test_get_by_login_name(self, user_store, sample_user):
        created = user_store.upsert(sample_user)

        assert user_store.get_by_login_name("jane_doe").id == created.id
        with pytest.raises(NotFoundException):
            user_store.get_by_login_name("nobody")
