"""Tests for the represent entry point."""

from types import SimpleNamespace

import pytest

from representer import Entity, RegistryFrozenError, RepresenterConfig, represent


@pytest.fixture
def objects():
    return [SimpleNamespace(id=i, name=f"user-{i}", email="") for i in range(3)]


class TestRepresentSingle:
    def test_returns_one_entity(self, person_entity):
        obj = SimpleNamespace(id=1)
        entity = person_entity.represent(obj)
        assert isinstance(entity, person_entity)
        assert entity.object is obj

    def test_options_passed_verbatim(self, person_entity):
        entity = person_entity.represent(SimpleNamespace(), {"type": "full"})
        assert entity.options == {"type": "full"}

    def test_no_options(self, person_entity):
        assert person_entity.represent(SimpleNamespace()).options == {}

    def test_dict_is_a_single_object(self, person_entity):
        entity = person_entity.represent({"id": 1, "name": "Ann"})
        assert isinstance(entity, person_entity)
        assert "collection" not in entity.options


class TestRepresentCollection:
    def test_one_entity_per_element(self, person_entity, objects):
        entities = person_entity.represent(objects)
        assert isinstance(entities, list)
        assert len(entities) == 3
        assert [e.object for e in entities] == objects

    def test_collection_flag_injected(self, person_entity, objects):
        for entity in person_entity.represent(objects, {"type": "full"}):
            assert entity.options == {"collection": True, "type": "full"}

    def test_caller_collection_value_wins(self, person_entity, objects):
        for entity in person_entity.represent(objects, {"collection": False}):
            assert entity.options["collection"] is False

    def test_tuples_are_collections(self, person_entity, objects):
        entities = person_entity.represent(tuple(objects))
        assert len(entities) == 3
        assert all(e.options["collection"] is True for e in entities)

    def test_empty_sequence(self, person_entity):
        assert person_entity.represent([]) == []

    def test_entities_do_not_share_options(self, person_entity, objects):
        first, second, _ = person_entity.represent(objects)
        first.options["type"] = "full"
        assert "type" not in second.options

    def test_module_level_represent(self, person_entity, objects):
        entities = represent(person_entity, objects)
        assert len(entities) == 3


class TestFreezeOnRepresent:
    def test_registry_frozen_after_first_represent(self):
        class Frozen(Entity):
            pass

        Frozen.expose("id")
        Frozen.represent(SimpleNamespace(id=1))
        with pytest.raises(RegistryFrozenError):
            Frozen.expose("name")

    def test_freeze_can_be_disabled(self):
        class Open(Entity):
            config = RepresenterConfig(freeze_on_represent=False)

        Open.expose("id")
        Open.represent(SimpleNamespace(id=1))
        Open.expose("name")
        assert Open.exposures().attributes() == ["id", "name"]
