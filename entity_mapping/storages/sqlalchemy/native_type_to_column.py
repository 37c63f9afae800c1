import datetime
import decimal
import enum
import typing
import uuid

from sqlalchemy import Boolean, Date, DateTime, Enum, Float, Integer, Numeric, String, Uuid


mapping = {
    int: Integer,
    str: String(255),
    uuid.UUID: Uuid,
    float: Float,
    bool: Boolean,
    decimal.Decimal: Numeric,
    datetime.datetime: DateTime,
    datetime.date: Date,
}


def convert(arg: typing.Type) -> typing.Any:
    if isinstance(arg, type) and issubclass(arg, enum.Enum):
        return Enum(arg)
    try:
        return mapping[arg]
    except (KeyError, TypeError):
        raise TypeError(f"Unsupported type - {arg}")
