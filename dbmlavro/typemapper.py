"""Maps DBML column types to Avro types."""

import re
from typing import Any, Dict

from dbmlavro.config import Config
from dbmlavro.errors import InvalidDecimalArgsError, MissingPrecisionError, UnmappedTypeError

JsonNode = Dict[str, 'JsonNode'] | str | int


class TypeMapper:
    """Resolves DBML column types to Avro primitive or logical types."""

    DECIMAL_ARGS = re.compile(r'\(\s*(\d+)\s*,?\s*(\d*)\s*\)', re.ASCII)
    TYPE_ARGS = re.compile(r'\(([^)]*)\)')

    # logical type -> underlying Avro type
    LOGICAL_TYPES = {
        'decimal': 'bytes',
        'uuid': 'string',
        'date': 'int',
        'time-millis': 'int',
        'time-micros': 'long',
        'timestamp-millis': 'long',
        'timestamp-micros': 'long',
        'local-timestamp-millis': 'long',
        'local-timestamp-micros': 'long',
        'duration': 'fixed',
    }

    # Avro duration is a fixed of three little-endian unsigned ints
    DURATION_SIZE = 12

    def __init__(self, config: Config):
        self.config = config

    def map(self, column_type: str) -> JsonNode:
        """Maps a DBML column type to an Avro type name or a logical type object.

        The Avro type whose longest registered prefix matches the start of
        the column type wins; ties go to the type registered first.
        """
        avro_type = self.find_avro_type(column_type)
        if avro_type in self.LOGICAL_TYPES:
            logical_type: Dict[str, Any] = {
                "type": self.LOGICAL_TYPES[avro_type],
                "logicalType": avro_type
            }
            logical_type.update(self.get_additional_attributes(column_type, avro_type))
            return logical_type
        return avro_type

    def find_avro_type(self, column_type: str) -> str:
        """Returns the Avro type registered for the column type."""
        normalized = self.config.normalize(column_type)
        best_type = None
        best_length = -1
        for avro_type, dbml_types in self.config.type_mappings.items():
            for dbml_type in dbml_types:
                if normalized.startswith(dbml_type) and len(dbml_type) > best_length:
                    best_type = avro_type
                    best_length = len(dbml_type)
        if best_type is None:
            raise UnmappedTypeError(column_type)
        return best_type

    def get_additional_attributes(self, column_type: str, avro_type: str) -> Dict[str, int]:
        if avro_type == 'decimal':
            return self.get_decimal_attributes(column_type)
        if avro_type == 'duration':
            return {"size": self.DURATION_SIZE}
        return {}

    def get_decimal_attributes(self, column_type: str) -> Dict[str, int]:
        """Parses precision and scale from e.g. 'decimal(9,2)'."""
        match = self.DECIMAL_ARGS.search(column_type)
        if not match:
            args = self.TYPE_ARGS.search(column_type)
            if args and args.group(1).strip():
                precision_arg, _, scale_arg = args.group(1).partition(',')
                raise InvalidDecimalArgsError(column_type, "precision and scale must be non-negative integers",
                                              precision_arg.strip(), scale_arg.strip())
            raise MissingPrecisionError(column_type)
        precision_arg, scale_arg = match.group(1), match.group(2)
        precision = int(precision_arg)
        scale = int(scale_arg) if scale_arg else self.config.default_scale
        if precision <= 0:
            raise InvalidDecimalArgsError(column_type, "precision must be positive", precision, scale)
        if scale > precision:
            raise InvalidDecimalArgsError(column_type, "scale must not exceed precision", precision, scale)
        return {"precision": precision, "scale": scale}
