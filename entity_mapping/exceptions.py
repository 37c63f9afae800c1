import typing


class MappingError(Exception):
    def __init__(self, entity_type: typing.Optional[typing.Type], message: str) -> None:
        super().__init__(message)
        self.entity_type = entity_type


class PropertyNotReadable(MappingError):
    pass


class PropertyNotWritable(MappingError):
    pass


class ColumnNotFound(MappingError):
    pass


class ConversionFailed(MappingError):
    pass


class PrimaryKeyNotExcludable(MappingError):
    pass
