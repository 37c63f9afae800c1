from entity_mapping.builder import build
from entity_mapping.entity import Entity, EntityWithoutIdentity, Identity
from entity_mapping.exceptions import (
    ColumnNotFound,
    ConversionFailed,
    MappingError,
    PrimaryKeyNotExcludable,
    PropertyNotReadable,
    PropertyNotWritable,
)
from entity_mapping.property_mapping import AbstractPropertyMapping, PropertyMapping, ValueHandler

__all__ = [
    "AbstractPropertyMapping",
    "ColumnNotFound",
    "ConversionFailed",
    "Entity",
    "EntityWithoutIdentity",
    "Identity",
    "MappingError",
    "PrimaryKeyNotExcludable",
    "PropertyMapping",
    "PropertyNotReadable",
    "PropertyNotWritable",
    "ValueHandler",
    "build",
]
