import enum
import logging
import typing
import uuid
from datetime import datetime

from sqlalchemy import MetaData, create_engine

from entity_mapping import Entity, Identity, build
from entity_mapping.conversion import enum_adapter, to_storage
from entity_mapping.storages.sqlalchemy import parameters, populate, table_for


class Status(enum.Enum):
    NEW = "NEW"
    OLD = "OLD"


class Subscriber(Entity):
    id: Identity[uuid.UUID]
    name: str
    status: Status
    joined_at: datetime
    visits: int = 0
    nickname: typing.Optional[str] = None


logging.basicConfig(level=logging.DEBUG)

mappings = build(Subscriber)
mappings["name"].column_name = "full_name"
mappings["status"].property_to_column_adapter = to_storage
mappings["status"].column_to_property_adapter = enum_adapter(Status)
# visits are counted by the database, never written by the application
mappings["visits"].not_for_crud()

metadata = MetaData()
table = table_for(Subscriber, metadata, mappings.values())

engine = create_engine("sqlite://", echo=True)
metadata.create_all(engine)

subscriber = Subscriber(uuid.uuid4(), "Seba", Status.NEW, datetime.now())

with engine.begin() as connection:
    connection.execute(table.insert(), parameters(mappings.values(), subscriber))
    row = connection.execute(table.select().where(table.c.id == subscriber.id)).one()

reloaded = populate(mappings.values(), row, Subscriber(None, None, None, None))
assert reloaded == subscriber, f"\n{reloaded}\n{subscriber}"

mappings["visits"].set_column_value(reloaded, "3")
assert reloaded.visits == 3
