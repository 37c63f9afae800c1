import typing
import uuid
from decimal import Decimal

import attr
import pytest

from entity_mapping import Entity, Identity, build


class Account(Entity):
    guid: Identity[uuid.UUID]
    owner: str
    balance: typing.Optional[Decimal] = None
    tags: typing.List[str] = attr.Factory(list)
    code: typing.Union[int, str] = 0


@attr.s(auto_attribs=True)
class Note:
    id: int
    text: str


@attr.s(auto_attribs=True)
class Envelope:
    id: int
    payload: typing.Any = None


class NotAnEntity:
    id: int


def test_builds_one_mapping_per_field_in_order() -> None:
    mappings = build(Account)

    assert list(mappings) == ["guid", "owner", "balance", "tags", "code"]
    assert all(mapping.entity_type is Account for mapping in mappings.values())


def test_unwraps_property_types() -> None:
    mappings = build(Account)

    assert {name: mapping.property_type for name, mapping in mappings.items()} == {
        "guid": uuid.UUID,
        "owner": str,
        "balance": Decimal,
        "tags": list,
        "code": None,
    }


def test_identity_fields_are_primary_keys() -> None:
    mappings = build(Account)

    assert [name for name, mapping in mappings.items() if mapping.is_primary_key] == ["guid"]


def test_field_named_id_is_primary_key_of_plain_attrs_class() -> None:
    mappings = build(Note)

    assert mappings["id"].is_primary_key
    assert not mappings["text"].is_primary_key


def test_mappings_read_and_write_attributes() -> None:
    mappings = build(Account)
    account = Account(guid=uuid.uuid4(), owner="Seba")

    mappings["balance"].set_column_value(account, "10.50")
    mappings["owner"].map({"owner": "Ania"}, account)

    assert account.balance == Decimal("10.50")
    assert mappings["owner"].get_value(account) == "Ania"


def test_requires_attrs_class() -> None:
    with pytest.raises(attr.exceptions.NotAnAttrsClassError):
        build(NotAnEntity)


def test_any_field_is_assigned_unconverted() -> None:
    mappings = build(Envelope)
    envelope = Envelope(id=1)

    mappings["payload"].set_column_value(envelope, "x")

    assert mappings["payload"].property_type is None
    assert envelope.payload == "x"
