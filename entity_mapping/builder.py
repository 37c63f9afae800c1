import logging
import typing

import attr

from entity_mapping.entity import Identity
from entity_mapping.property_mapping import PropertyMapping, Getter, Setter


logger = logging.getLogger(__name__)


def _is_generic(field_type: typing.Type) -> bool:
    return hasattr(field_type, "__origin__")


def _get_wrapped_type(wrapped_type: typing.Type) -> typing.Type:
    return wrapped_type.__args__[0]


def _is_field_nullable(field_type: typing.Type) -> bool:
    return (
        field_type.__origin__ == typing.Union
        and len(field_type.__args__) == 2
        and isinstance(None, field_type.__args__[1])
    )


def _is_identity(field_type: typing.Type) -> bool:
    return getattr(field_type, "__origin__", None) == Identity


def _property_type(field_type: typing.Any) -> typing.Tuple[typing.Optional[typing.Type], bool]:
    if field_type is typing.Any:
        return None, False
    if not _is_generic(field_type):
        return field_type, False
    if _is_identity(field_type):
        return _get_wrapped_type(field_type), True
    if _is_field_nullable(field_type):
        return _property_type(_get_wrapped_type(field_type))[0], False
    origin = field_type.__origin__
    return (origin if isinstance(origin, type) else None), False


def _getter_for(name: str) -> Getter:
    def get(entity: typing.Any) -> typing.Any:
        return getattr(entity, name)

    return get


def _setter_for(name: str) -> Setter:
    def set_(entity: typing.Any, value: typing.Any) -> None:
        setattr(entity, name, value)

    return set_


def build(entity_cls: typing.Type) -> typing.Dict[str, PropertyMapping]:
    mappings: typing.Dict[str, PropertyMapping] = {}

    for field in attr.fields(entity_cls):
        property_type, is_identity = _property_type(field.type)
        mapping = PropertyMapping(
            field.name,
            setter=_setter_for(field.name),
            getter=_getter_for(field.name),
            property_type=property_type,
            entity_type=entity_cls,
        )
        if is_identity:
            mapping.is_primary_key = True
        mappings[field.name] = mapping

    logger.debug(f"Built {len(mappings)} property mappings for {entity_cls.__name__}")
    return mappings
