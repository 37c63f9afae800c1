import typing

import inflection
from sqlalchemy import Column, MetaData, Table
from sqlalchemy.engine import Row

from entity_mapping.property_mapping import AbstractPropertyMapping, PropertyMapping, Record
from entity_mapping.storages.sqlalchemy import native_type_to_column


def column_for(mapping: PropertyMapping) -> Column:
    return Column(
        mapping.column_name, native_type_to_column.convert(mapping.property_type), primary_key=mapping.is_primary_key
    )


def table_name_for(entity_cls: typing.Type) -> str:
    return inflection.pluralize(inflection.underscore(entity_cls.__name__))


def table_for(
    entity_cls: typing.Type, metadata: MetaData, mappings: typing.Iterable[PropertyMapping]
) -> Table:
    return Table(table_name_for(entity_cls), metadata, *(column_for(mapping) for mapping in mappings))


def parameters(mappings: typing.Iterable[AbstractPropertyMapping], entity: typing.Any) -> typing.Dict[str, typing.Any]:
    return {mapping.column_name: mapping.get_value(entity) for mapping in mappings if mapping.can_read}


def populate(
    mappings: typing.Iterable[AbstractPropertyMapping], row: typing.Union[Row, Record], entity: typing.Any
) -> typing.Any:
    record = row._mapping if isinstance(row, Row) else row
    for mapping in mappings:
        mapping.map(record, entity)
    return entity
