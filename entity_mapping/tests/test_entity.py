import pytest

from entity_mapping.entity import Entity, EntityWithoutIdentity, Identity


def test_entity_allows_one_with_identity():
    class WithIdentity(Entity):
        guid: Identity[int]

    assert WithIdentity(1).guid == 1


def test_entity_accepts_field_named_id_as_identity():
    class WithId(Entity):
        Id: int
        name: str

    assert WithId(1, "Seba").Id == 1


def test_entity_enforces_identity():
    with pytest.raises(EntityWithoutIdentity):

        class Identless(Entity):
            name: str


def test_entity_allows_multiple_identities():
    class WithDoubleIdentity(Entity):
        id: Identity[int]
        second_id: Identity[int]

    entity = WithDoubleIdentity(1, 2)
    assert entity.id == 1
    assert entity.second_id == 2


def test_entities_compare_by_fields():
    class Plan(Entity):
        id: Identity[int]
        discount: float

    assert Plan(1, 0.5) == Plan(1, 0.5)
    assert Plan(1, 0.5) != Plan(1, 0.25)
