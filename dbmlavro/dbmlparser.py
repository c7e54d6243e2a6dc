"""Builds the database model from DBML source text using pydbml."""

from typing import Dict, TextIO, Union

from pydbml import PyDBML

from dbmlavro.model import Column, ColumnSetting, Database, Enum, EnumValue, Schema, Table


def _note_text(note) -> str | None:
    """pydbml wraps notes in Note objects whose text is empty when absent."""
    if note is None:
        return None
    text = getattr(note, 'text', note)
    return str(text) if text else None


def _column_settings(column) -> frozenset:
    settings = set()
    if getattr(column, 'not_null', False):
        settings.add(ColumnSetting.NOT_NULL)
    if getattr(column, 'pk', False):
        settings.add(ColumnSetting.PRIMARY_KEY)
    if getattr(column, 'unique', False):
        settings.add(ColumnSetting.UNIQUE)
    if getattr(column, 'autoinc', False):
        settings.add(ColumnSetting.INCREMENT)
    return frozenset(settings)


def _column_type(column) -> str:
    # pydbml resolves types naming a declared enum to the enum object
    column_type = column.type
    if isinstance(column_type, str):
        return column_type
    return column_type.name


def convert_column(column) -> Column:
    return Column(
        name=column.name,
        type=_column_type(column),
        note=_note_text(column.note),
        settings=_column_settings(column))


def convert_table(table) -> Table:
    return Table(
        name=table.name,
        columns=[convert_column(c) for c in table.columns],
        alias=table.alias or None,
        note=_note_text(table.note))


def convert_enum(enum) -> Enum:
    return Enum(name=enum.name, values=[EnumValue(item.name, _note_text(item.note)) for item in enum.items])


def parse_dbml(source: Union[str, TextIO]) -> Database:
    """Parses DBML text (or a readable file object) into a Database.

    Tables and enums are grouped by their DBML schema. Schemas are ordered by
    first appearance, looking at enums before tables.
    """
    if hasattr(source, 'read'):
        source = source.read()
    parsed = PyDBML(source)
    schemas: Dict[str, Schema] = {}

    def schema_of(item) -> Schema:
        name = getattr(item, 'schema', None) or 'public'
        if name not in schemas:
            schemas[name] = Schema(name)
        return schemas[name]

    for enum in parsed.enums:
        schema_of(enum).enums.append(convert_enum(enum))
    for table in parsed.tables:
        schema_of(table).tables.append(convert_table(table))
    return Database(list(schemas.values()))
