"""Shared test fixtures for representer tests."""

from dataclasses import dataclass, field

import pytest

from representer import Entity


# =============================================================================
# Domain Objects
# =============================================================================

@dataclass
class Status:
    text: str
    created_at: str = "2026-01-15"


@dataclass
class User:
    id: int
    first_name: str
    last_name: str
    email: str = ""
    latest_status: Status | None = None
    statuses: list[Status] = field(default_factory=list)


@pytest.fixture
def status() -> Status:
    return Status(text="Shipping the release")


@pytest.fixture
def user(status) -> User:
    return User(
        id=1,
        first_name="Ann",
        last_name="Lee",
        email="ann@example.com",
        latest_status=status,
        statuses=[status, Status(text="Writing docs", created_at="2026-01-16")],
    )


# =============================================================================
# Entity Types
# =============================================================================

@pytest.fixture
def status_entity() -> type[Entity]:
    """Fresh Status entity type exposing both status fields."""
    class StatusEntity(Entity):
        pass

    StatusEntity.expose("text", "created_at")
    return StatusEntity


@pytest.fixture
def person_entity() -> type[Entity]:
    """Fresh Person entity type: id, name as full_name, email for full views."""
    class Person(Entity):
        pass

    Person.expose("id")
    Person.expose("name", as_="full_name")
    Person.expose("email", if_={"type": "full"})
    return Person
