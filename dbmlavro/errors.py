"""Errors raised while translating DBML to Avro schemas."""


class DbmlAvroError(ValueError):
    """Base class for all translation errors."""


class InvalidIdentifierError(DbmlAvroError):
    """A table, column, enum or enum value name is not a valid Avro name."""

    def __init__(self, name):
        self.name = name
        super().__init__(f"Invalid name: {name}")


class InvalidNamespaceError(DbmlAvroError):
    """The configured namespace is not a valid Avro namespace."""

    def __init__(self, namespace):
        self.namespace = namespace
        super().__init__(f"Invalid namespace: {namespace}")


class UnmappedTypeError(DbmlAvroError):
    """A column type matches none of the configured type mappings."""

    def __init__(self, column_type):
        self.column_type = column_type
        super().__init__(f"Unmapped type: {column_type}")


class MissingPrecisionError(DbmlAvroError):
    """A decimal column type lacks its precision argument."""

    def __init__(self, column_type):
        self.column_type = column_type
        super().__init__(f"Unspecified precision of type decimal: {column_type}")


class InvalidDecimalArgsError(DbmlAvroError):
    """Precision or scale of a decimal column type are out of range."""

    def __init__(self, column_type, constraint, precision, scale):
        self.column_type = column_type
        self.precision = precision
        self.scale = scale
        super().__init__(
            f"Invalid decimal arguments of {column_type}: {constraint} (precision={precision}, scale={scale})")


class InvalidScaleConfigError(DbmlAvroError):
    """The configured default scale is negative."""

    def __init__(self, scale):
        self.scale = scale
        super().__init__(f"Scale must be zero or a positive integer: {scale}")


class DuplicateNameError(DbmlAvroError):
    """The same name is declared more than once by tables or enums."""

    def __init__(self, name):
        self.name = name
        super().__init__(f"Duplicate name: {name}")
