import abc
import logging
import typing

import attr

from entity_mapping.conversion import change_type, conforms
from entity_mapping.exceptions import (
    ColumnNotFound,
    ConversionFailed,
    PrimaryKeyNotExcludable,
    PropertyNotReadable,
    PropertyNotWritable,
)


logger = logging.getLogger(__name__)

EntityType = typing.TypeVar("EntityType")

ValueHandler = typing.Callable[[typing.Any], typing.Any]
Getter = typing.Callable[[typing.Any], typing.Any]
Setter = typing.Callable[[typing.Any, typing.Any], None]
Record = typing.Mapping[str, typing.Any]


def pass_through(value: typing.Any) -> typing.Any:
    return value


def _adapter_or_pass_through(adapter: typing.Optional[ValueHandler]) -> ValueHandler:
    if adapter is None:
        return pass_through
    return adapter


def _is_coercible_type(property_type: typing.Any) -> bool:
    # typing constructs such as Optional[int] or Any are left alone, Any passes isinstance(type) on 3.11+
    return isinstance(property_type, type) and property_type not in (typing.Any, object)


class AbstractPropertyMapping(abc.ABC):
    """What a mapper needs from a single property: populate it from a record, read it for a parameter."""

    property_name: str
    column_name: str
    is_primary_key: bool

    @property
    @abc.abstractmethod
    def can_read(self) -> bool:
        pass

    @property
    @abc.abstractmethod
    def can_write(self) -> bool:
        pass

    @abc.abstractmethod
    def map(self, record: Record, entity: typing.Any) -> None:
        pass

    @abc.abstractmethod
    def get_value(self, entity: typing.Any) -> typing.Any:
        pass

    @abc.abstractmethod
    def set_column_value(self, entity: typing.Any, value: typing.Any) -> None:
        pass

    @abc.abstractmethod
    def not_for_crud(self) -> None:
        pass

    @abc.abstractmethod
    def not_for_queries(self) -> None:
        pass


@attr.s(auto_attribs=True, eq=False)
class PropertyMapping(AbstractPropertyMapping, typing.Generic[EntityType]):
    """Converts a column value and assigns it to a property of an entity, and back.

    ``None`` stands for SQL NULL. A missing getter makes the property invisible to inserts and updates,
    a missing setter to queries.

        mapping = PropertyMapping("id", setter=lambda user, value: setattr(user, "id", value))
    """

    property_name: str = attr.ib(validator=attr.validators.instance_of(str))
    _setter: typing.Optional[Setter] = None
    _getter: typing.Optional[Getter] = None
    column_name: str = attr.ib()
    property_type: typing.Optional[typing.Type] = None
    is_primary_key: bool = attr.ib()
    column_to_property_adapter: ValueHandler = attr.ib(
        default=None, converter=_adapter_or_pass_through, on_setattr=attr.setters.convert
    )
    property_to_column_adapter: ValueHandler = attr.ib(
        default=None, converter=_adapter_or_pass_through, on_setattr=attr.setters.convert
    )
    entity_type: typing.Optional[typing.Type[EntityType]] = None

    @column_name.default
    def _column_name_from_property_name(self) -> str:
        return self.property_name

    @is_primary_key.default
    def _is_named_id(self) -> bool:
        return isinstance(self.property_name, str) and self.property_name.casefold() == "id"

    @property
    def can_write(self) -> bool:
        return self._setter is not None

    @property
    def can_read(self) -> bool:
        return self._getter is not None

    def map(self, record: Record, entity: EntityType) -> None:
        if not self.can_write:
            return

        try:
            value = record[self.column_name]
        except KeyError as exc:
            raise ColumnNotFound(type(entity), f"Column '{self.column_name}' is not present in the record.") from exc

        if value is None:
            return

        self._setter(entity, self.column_to_property_adapter(value))

    def get_value(self, entity: EntityType) -> typing.Any:
        if entity is None:
            raise ValueError("entity must not be None")
        if not self.can_read:
            raise PropertyNotReadable(type(entity), f"Property '{self.property_name}' is not readable.")

        return self.property_to_column_adapter(self._getter(entity))

    def set_column_value(self, entity: EntityType, value: typing.Any) -> None:
        """Assign a column value, i.e. one that still has to go through ``column_to_property_adapter``.

        Values that are not instances of ``property_type`` after adapting are converted with
        :func:`entity_mapping.conversion.change_type`.
        """
        if value is None:
            return
        if not self.can_write:
            raise PropertyNotWritable(type(entity), f"Property '{self.property_name}' is not writable.")

        adapted = self.column_to_property_adapter(value)
        self._setter(entity, self._coerce(entity, adapted))

    def not_for_crud(self) -> None:
        """Leave this property out of inserts and updates."""
        if self.is_primary_key:
            raise PrimaryKeyNotExcludable(self.entity_type, f"Must always read keys. Property: {self.property_name}")

        self._getter = None

    def not_for_queries(self) -> None:
        """Leave this property out when reading from the database."""
        if self.is_primary_key:
            raise PrimaryKeyNotExcludable(self.entity_type, f"Must always write keys. Property: {self.property_name}")

        self._setter = None

    def _coerce(self, entity: EntityType, value: typing.Any) -> typing.Any:
        if value is None or not _is_coercible_type(self.property_type) or conforms(value, self.property_type):
            return value

        logger.debug(f"Converting {type(value).__name__} to {self.property_type.__name__} for {self.property_name}")
        try:
            return change_type(value, self.property_type)
        except (TypeError, ValueError, ArithmeticError) as exc:
            raise ConversionFailed(
                type(entity),
                f"Property '{self.property_name}' can not take {value!r}, expected {self.property_type.__name__}.",
            ) from exc
