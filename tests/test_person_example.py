"""End-to-end tests: representing people and their statuses."""

from types import SimpleNamespace

import pytest

from representer import Entity


@pytest.fixture
def ann():
    return SimpleNamespace(id=1, name="Ann", email="a@x.com")


class TestPerson:
    def test_default_view(self, person_entity, ann):
        assert person_entity.represent(ann).serializable_hash({}) == {"id": 1, "full_name": "Ann"}

    def test_full_view(self, person_entity, ann):
        assert person_entity.represent(ann).serializable_hash({"type": "full"}) == {
            "id": 1,
            "full_name": "Ann",
            "email": "a@x.com",
        }

    def test_collection(self, person_entity, ann):
        entities = person_entity.represent([ann, ann])
        assert len(entities) == 2
        assert entities[0].options["collection"] is True
        assert [e.serializable_hash() for e in entities] == [
            {"id": 1, "full_name": "Ann"},
            {"id": 1, "full_name": "Ann"},
        ]


class TestUserWithStatus:
    @pytest.fixture
    def user_entity(self, status_entity):
        class UserEntity(Entity):
            pass

        UserEntity.expose("first_name", "last_name")
        UserEntity.expose(
            "latest_status", using=status_entity, as_="status", unless={"collection": True}
        )
        UserEntity.expose("email", if_={"type": "full"})
        UserEntity.expose("name", lambda u, opts: " ".join([u.first_name, u.last_name]))
        return UserEntity

    def test_single_user(self, user_entity, user):
        assert user_entity.represent(user).serializable_hash() == {
            "first_name": "Ann",
            "last_name": "Lee",
            "status": {"text": "Shipping the release", "created_at": "2026-01-15"},
            "name": "Ann Lee",
        }

    def test_users_in_collection_omit_status(self, user_entity, user):
        outputs = [e.serializable_hash() for e in user_entity.represent([user], {"type": "full"})]
        assert outputs == [{
            "first_name": "Ann",
            "last_name": "Lee",
            "email": "ann@example.com",
            "name": "Ann Lee",
        }]
