"""Unit tests for domain exceptions."""

import pytest

from campuscoffee.domain.exceptions import (
    CampusCoffeeError,
    DuplicationException,
    NotFoundException,
)
from campuscoffee.domain.models import Pos, User


@pytest.mark.unit
class TestNotFoundException:

    def test_message_names_class_and_id(self):
        exc = NotFoundException(Pos, 42)
        assert str(exc) == "Pos with ID '42' does not exist."
        assert exc.domain_class is Pos
        assert exc.id == 42
        assert exc.field == "ID"

    def test_message_for_lookup_by_other_field(self):
        exc = NotFoundException(User, "jane_doe", field="login_name")
        assert str(exc) == "User with login_name 'jane_doe' does not exist."

    def test_is_domain_error(self):
        assert isinstance(NotFoundException(Pos, 1), CampusCoffeeError)


@pytest.mark.unit
class TestDuplicationException:

    def test_message_names_class_field_and_value(self):
        exc = DuplicationException(User, "email_address", "jane@example.org")
        assert str(exc) == "User with email_address 'jane@example.org' already exists."
        assert exc.domain_class is User
        assert exc.field == "email_address"
        assert exc.value == "jane@example.org"

    def test_is_domain_error(self):
        assert isinstance(DuplicationException(Pos, "name", "x"), CampusCoffeeError)
