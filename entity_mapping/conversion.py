import datetime
import decimal
import enum
import typing
import uuid
from functools import singledispatch

import dateutil.parser


TRUE_STRINGS = {"true", "t", "yes", "y", "1"}
FALSE_STRINGS = {"false", "f", "no", "n", "0"}


@singledispatch
def to_storage(argument: typing.Any) -> typing.Any:
    return argument


@to_storage.register(uuid.UUID)
def _(argument: uuid.UUID) -> str:
    return str(argument)


@to_storage.register(enum.Enum)
def _(argument: enum.Enum) -> typing.Any:
    return argument.value


def enum_adapter(enum_cls: typing.Type[enum.Enum]) -> typing.Callable[[typing.Any], enum.Enum]:
    def adapt(value: typing.Any) -> enum.Enum:
        return _to_enum(value, enum_cls)

    return adapt


def _to_enum(value: typing.Any, enum_cls: typing.Type[enum.Enum]) -> enum.Enum:
    try:
        return enum_cls(value)
    except ValueError:
        if isinstance(value, str) and value in enum_cls.__members__:
            return enum_cls[value]
        raise


def _to_bool(value: typing.Any) -> bool:
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in TRUE_STRINGS:
            return True
        if lowered in FALSE_STRINGS:
            return False
        raise ValueError(f"Not a boolean - {value!r}")
    return bool(value)


def _to_uuid(value: typing.Any) -> uuid.UUID:
    if isinstance(value, (bytes, bytearray)):
        return uuid.UUID(bytes=bytes(value))
    return uuid.UUID(str(value))


def _to_datetime(value: typing.Any) -> datetime.datetime:
    if isinstance(value, str):
        return dateutil.parser.parse(value)
    if isinstance(value, datetime.date):
        return datetime.datetime.combine(value, datetime.time())
    raise TypeError(f"Can not convert {type(value).__name__} to datetime")


def _to_date(value: typing.Any) -> datetime.date:
    if isinstance(value, datetime.datetime):
        return value.date()
    if isinstance(value, str):
        return dateutil.parser.parse(value).date()
    raise TypeError(f"Can not convert {type(value).__name__} to date")


def _to_int(value: typing.Any) -> int:
    if isinstance(value, (float, decimal.Decimal)):
        # half-to-even, 2.5 becomes 2
        return round(value)
    return int(value)


def _to_decimal(value: typing.Any) -> decimal.Decimal:
    if isinstance(value, float):
        # Decimal(0.1) would keep the binary expansion
        return decimal.Decimal(str(value))
    return decimal.Decimal(value)


converters: typing.Dict[typing.Type, typing.Callable[[typing.Any], typing.Any]] = {
    int: _to_int,
    bool: _to_bool,
    uuid.UUID: _to_uuid,
    datetime.datetime: _to_datetime,
    datetime.date: _to_date,
    decimal.Decimal: _to_decimal,
}


def conforms(value: typing.Any, target_type: typing.Type) -> bool:
    # a datetime is a date subclass but carries a time the property can not hold
    if target_type is datetime.date and isinstance(value, datetime.datetime):
        return False
    return isinstance(value, target_type)


def change_type(value: typing.Any, target_type: typing.Type) -> typing.Any:
    if value is None or conforms(value, target_type):
        return value
    if issubclass(target_type, enum.Enum):
        return _to_enum(value, target_type)
    converter = converters.get(target_type)
    if converter is None:
        return target_type(value)
    return converter(value)
