import abc
import typing

import attr


class EntityWithoutIdentity(TypeError):
    pass


T = typing.TypeVar("T")


class Identity(typing.Generic[T]):
    @classmethod
    def is_identity(cls, field: attr.Attribute) -> bool:
        return getattr(field.type, "__origin__", None) == cls


def _is_named_id(field: attr.Attribute) -> bool:
    return field.name.casefold() == "id"


class EntityMeta(abc.ABCMeta):
    def __new__(mcs, name: str, bases: tuple, namespace: dict):
        cls = super().__new__(mcs, name, bases, namespace)
        if name == "Entity" and not bases:
            return cls
        attr_cls = attr.s(auto_attribs=True)(cls)
        if not any(Identity.is_identity(field) or _is_named_id(field) for field in attr.fields(attr_cls)):
            raise EntityWithoutIdentity(f"{name} has neither an Identity field nor an 'id' field")
        return attr_cls


class Entity(metaclass=EntityMeta):
    pass
