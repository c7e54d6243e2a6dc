"""In-memory model of a parsed DBML database."""

from dataclasses import dataclass, field
from enum import Enum as _Enum
from typing import FrozenSet, List, Optional


class ColumnSetting(_Enum):
    """Column settings as written in brackets after a DBML column."""
    NOT_NULL = 'not null'
    NULL = 'null'
    PRIMARY_KEY = 'pk'
    UNIQUE = 'unique'
    INCREMENT = 'increment'


@dataclass
class Column:
    """A table column."""
    name: str
    type: str  # raw DBML type, e.g. "decimal(9,2)" or an enum name
    note: Optional[str] = None
    settings: FrozenSet[ColumnSetting] = field(default_factory=frozenset)

    @property
    def not_null(self) -> bool:
        return ColumnSetting.NOT_NULL in self.settings


@dataclass
class Table:
    """A table with its columns in declaration order."""
    name: str
    columns: List[Column] = field(default_factory=list)
    alias: Optional[str] = None
    note: Optional[str] = None


@dataclass
class EnumValue:
    name: str
    note: Optional[str] = None


@dataclass
class Enum:
    """An enum with its values in declaration order."""
    name: str
    values: List[EnumValue] = field(default_factory=list)


@dataclass
class Schema:
    """A DBML schema holding tables and enums."""
    name: str = 'public'
    tables: List[Table] = field(default_factory=list)
    enums: List[Enum] = field(default_factory=list)


@dataclass
class Database:
    schemas: List[Schema] = field(default_factory=list)
