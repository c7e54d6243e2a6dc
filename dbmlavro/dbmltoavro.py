"""Translates DBML database models to Apache Avro schemas in JSON format."""

import logging
import os
from typing import Dict, Iterable, List, Mapping, NamedTuple, Optional, TextIO, Union

from dbmlavro.common import dump_schema
from dbmlavro.config import Config
from dbmlavro.errors import DuplicateNameError, InvalidIdentifierError, InvalidNamespaceError
from dbmlavro.model import Column, Database, Enum, Table
from dbmlavro.typemapper import TypeMapper
from dbmlavro.validators import NameValidator, NamespaceValidator

logger = logging.getLogger(__name__)

JsonNode = Dict[str, 'JsonNode'] | List['JsonNode'] | str | bool | int | float | None


class Result(NamedTuple):
    """The result of translating one table or enum.

    Attributes:
        name: The name of the translated table or enum.
        schema: The Avro schema in JSON format.
    """
    name: str
    schema: str


class DbmlToAvro:
    """Translates DBML tables and enums to Avro record and enum schemas."""

    def __init__(
        self,
        config: Config,
        name_validator: Optional[NameValidator] = None,
        namespace_validator: Optional[NamespaceValidator] = None,
        type_mapper: Optional[TypeMapper] = None
    ):
        """Initializes the translator.

        Args:
            config: The translation settings
            name_validator: Validator for table, column, enum and enum value names
            namespace_validator: Validator for the configured namespace
            type_mapper: Maps DBML column types to Avro types
        """
        self.config = config
        self.name_validator = name_validator or NameValidator()
        self.namespace_validator = namespace_validator or NamespaceValidator(self.name_validator)
        self.type_mapper = type_mapper or TypeMapper(config)

    def translate(self, database: Database) -> List[Result]:
        """Translates all tables and enums of the database.

        Returns the table results followed by the enum results. The first
        column referencing an enum inlines its definition, later references
        within the same call use the enum's name.
        """
        enum_schemas: Dict[str, Dict[str, JsonNode]] = {}
        enum_results: List[Result] = []
        for schema in database.schemas:
            for enum in schema.enums:
                if enum.name in enum_schemas:
                    raise DuplicateNameError(enum.name)
                enum_schema = self.enum_to_avro_schema(enum)
                enum_schemas[enum.name] = enum_schema
                enum_results.append(Result(enum.name, dump_schema(enum_schema)))

        # enums not inlined yet; local to this call
        pending_enums = dict(enum_schemas)
        table_names = set()
        table_results: List[Result] = []
        for schema in database.schemas:
            for table in schema.tables:
                # tables and enums share one set of Avro names
                if table.name in table_names or table.name in enum_schemas:
                    raise DuplicateNameError(table.name)
                table_names.add(table.name)
                table_schema = self.table_to_avro_schema(table, enum_schemas, pending_enums)
                table_results.append(Result(table.name, dump_schema(table_schema)))
        return table_results + enum_results

    def translate_dbml(self, dbml: Union[str, TextIO]) -> List[Result]:
        """Parses DBML source text (or a readable file) and translates it."""
        from dbmlavro.dbmlparser import parse_dbml
        return self.translate(parse_dbml(dbml))

    def table_to_avro_schema(
        self,
        table: Table,
        enum_schemas: Mapping[str, Dict[str, JsonNode]],
        pending_enums: Dict[str, Dict[str, JsonNode]]
    ) -> Dict[str, JsonNode]:
        """Converts a table to an Avro record schema."""
        self.validate_name(table.name)
        logger.debug("Translating table %s", table.name)
        schema: Dict[str, JsonNode] = {
            "type": "record",
            "name": table.name
        }
        self._apply_namespace(schema)
        if table.note is not None:
            schema["doc"] = table.note
        if table.alias is not None:
            self.validate_name(table.alias)
            schema["aliases"] = [table.alias]
        schema["fields"] = [self.column_to_avro_field(column, enum_schemas, pending_enums) for column in table.columns]
        return schema

    def column_to_avro_field(
        self,
        column: Column,
        enum_schemas: Mapping[str, Dict[str, JsonNode]],
        pending_enums: Dict[str, Dict[str, JsonNode]]
    ) -> Dict[str, JsonNode]:
        """Converts a column to an Avro record field."""
        self.validate_name(column.name)
        field: Dict[str, JsonNode] = {"name": column.name}
        if column.note is not None:
            field["doc"] = column.note

        avro_type: JsonNode
        if column.type in enum_schemas:
            inlined = pending_enums.pop(column.type, None)
            if inlined is not None:
                logger.debug("Inlining enum %s into field %s", column.type, column.name)
                avro_type = inlined
            else:
                avro_type = column.type
        else:
            avro_type = self.type_mapper.map(column.type)

        if not column.not_null:
            avro_type = [avro_type, "null"]
        field["type"] = avro_type
        return field

    def enum_to_avro_schema(self, enum: Enum) -> Dict[str, JsonNode]:
        """Converts an enum to an Avro enum schema."""
        self.validate_name(enum.name)
        logger.debug("Translating enum %s", enum.name)
        schema: Dict[str, JsonNode] = {
            "type": "enum",
            "name": enum.name
        }
        self._apply_namespace(schema)
        for value in enum.values:
            self.validate_name(value.name)
        schema["symbols"] = [value.name for value in enum.values]
        return schema

    def _apply_namespace(self, schema: Dict[str, JsonNode]):
        namespace = self.config.namespace
        if namespace is not None and namespace.strip():
            self.validate_namespace(namespace)
            schema["namespace"] = namespace

    def validate_name(self, name: str):
        if not self.name_validator.is_valid(name):
            raise InvalidIdentifierError(name)

    def validate_namespace(self, namespace: str):
        if not self.namespace_validator.is_valid(namespace):
            raise InvalidNamespaceError(namespace)


def build_config(namespace: Optional[str] = '', default_scale: int = 0,
                 type_mappings: Optional[Iterable[str]] = None) -> Config:
    """Builds a Config from command line style arguments.

    Each type mapping is formatted as "avrotype=dbmltype" and extends the
    default mappings.
    """
    builder = Config.builder().set_namespace(namespace or '').set_default_scale(default_scale)
    for mapping in type_mappings or []:
        avro_type, sep, dbml_type = mapping.partition('=')
        if not sep or not avro_type.strip() or not dbml_type.strip():
            raise ValueError(f"Invalid type mapping '{mapping}', expected avrotype=dbmltype")
        builder.add_type_mapping(avro_type.strip(), dbml_type.strip())
    return builder.build()


def convert_dbml_to_avro(
    dbml_file_path: str,
    avro_schema_path: str,
    namespace: str = '',
    default_scale: int = 0,
    type_mappings: Optional[Iterable[str]] = None
) -> List[str]:
    """Converts a DBML file to Avro schema files, one per table and enum.

    Args:
        dbml_file_path: Path to the DBML file
        avro_schema_path: Output directory for the .avsc files
        namespace: Namespace for the generated Avro schemas
        default_scale: Scale of decimals declared without a scale
        type_mappings: Additional type mappings, each formatted as "avrotype=dbmltype"

    Returns:
        The paths of the written schema files.
    """
    if not os.path.exists(dbml_file_path):
        raise FileNotFoundError(f"DBML file not found at: {dbml_file_path}")

    translator = DbmlToAvro(build_config(namespace, default_scale, type_mappings))
    with open(dbml_file_path, 'r', encoding='utf-8') as dbml_file:
        results = translator.translate_dbml(dbml_file)

    if not os.path.exists(avro_schema_path):
        os.makedirs(avro_schema_path, exist_ok=True)

    written: List[str] = []
    for result in results:
        file_path = os.path.join(avro_schema_path, f"{result.name}.avsc")
        with open(file_path, 'w', encoding='utf-8') as avro_file:
            avro_file.write(result.schema)
        logger.debug("Wrote %s", file_path)
        written.append(file_path)
    return written
