"""Configuration of the DBML to Avro translation."""

from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Set

from dbmlavro.errors import InvalidScaleConfigError

# Avro type (category) -> DBML type prefixes. A DBML column type maps to an
# Avro type if it starts with any of the prefixes. "null" is a target only.
DEFAULT_TYPE_MAPPINGS: Mapping[str, frozenset] = MappingProxyType({
    'null': frozenset(),
    'boolean': frozenset({'bool'}),
    'int': frozenset({'int'}),
    'long': frozenset({'long', 'bigint'}),
    'float': frozenset({'float'}),
    'double': frozenset({'double'}),
    'bytes': frozenset({'blob', 'binary', 'bytea', 'varbinary'}),
    'string': frozenset({'varchar', 'char', 'clob', 'text', 'string'}),
    'decimal': frozenset({'decimal', 'numeric'}),
    'uuid': frozenset({'uuid'}),
    'date': frozenset({'date'}),
    'time-micros': frozenset({'time'}),
    'timestamp-micros': frozenset({'timestamp', 'datetime'}),
    'local-timestamp-micros': frozenset({'timestamp with time zone', 'timestamptz'}),
    'duration': frozenset({'duration'}),
})

# Avro's default scale for decimals
DEFAULT_SCALE = 0


def normalize(type_name: str) -> str:
    """Normalizes a type name for case-insensitive matching."""
    return type_name.lower()


class Config:
    """Immutable settings of a translation.

    Args:
        namespace: Namespace of the generated Avro schemas. Empty means no namespace.
        type_mappings: Mapping from Avro types to sets of DBML type prefixes.
        default_scale: Scale used for decimals without an explicit scale.
    """

    def __init__(self, namespace: str = '', type_mappings: Mapping[str, Iterable[str]] = DEFAULT_TYPE_MAPPINGS,
                 default_scale: int = DEFAULT_SCALE):
        if default_scale < 0:
            raise InvalidScaleConfigError(default_scale)
        self._namespace = namespace
        normalized: Dict[str, frozenset] = {}
        for avro_type, dbml_types in type_mappings.items():
            key = normalize(avro_type)
            normalized[key] = normalized.get(key, frozenset()) | frozenset(normalize(t) for t in dbml_types)
        self._type_mappings = MappingProxyType(normalized)
        self._default_scale = default_scale

    @property
    def namespace(self) -> str:
        return self._namespace

    @property
    def type_mappings(self) -> Mapping[str, frozenset]:
        return self._type_mappings

    @property
    def default_scale(self) -> int:
        return self._default_scale

    @staticmethod
    def normalize(type_name: str) -> str:
        return normalize(type_name)

    @staticmethod
    def builder() -> 'ConfigBuilder':
        """Creates a config builder."""
        return ConfigBuilder()

    def __eq__(self, other):
        if not isinstance(other, Config):
            return NotImplemented
        return (self._namespace, dict(self._type_mappings), self._default_scale) == \
            (other._namespace, dict(other._type_mappings), other._default_scale)

    def __hash__(self):
        return hash((self._namespace, frozenset(self._type_mappings.items()), self._default_scale))

    def __repr__(self):
        return f"Config(namespace={self._namespace!r}, type_mappings={dict(self._type_mappings)!r}, " \
               f"default_scale={self._default_scale!r})"


class ConfigBuilder:
    """Builds a Config step by step."""

    def __init__(self):
        self.namespace = ''
        self.type_mappings: Mapping[str, Iterable[str]] = DEFAULT_TYPE_MAPPINGS
        self.default_scale = DEFAULT_SCALE
        self._mutable_mappings = False

    def set_namespace(self, namespace: str) -> 'ConfigBuilder':
        """Sets the namespace of all translated schemas."""
        self.namespace = namespace
        return self

    def set_type_mappings(self, type_mappings: Mapping[str, Iterable[str]]) -> 'ConfigBuilder':
        """Replaces the mappings from Avro types to DBML type prefixes."""
        self.type_mappings = type_mappings
        self._mutable_mappings = False
        return self

    def add_type_mapping(self, avro_type: str, dbml_type: str) -> 'ConfigBuilder':
        """Adds a DBML type prefix to an Avro type."""
        if not self._mutable_mappings:
            self.type_mappings = {k: set(v) for k, v in self.type_mappings.items()}
            self._mutable_mappings = True
        mappings: Dict[str, Set[str]] = self.type_mappings  # type: ignore[assignment]
        mappings.setdefault(avro_type, set()).add(dbml_type)
        return self

    def set_default_scale(self, default_scale: int) -> 'ConfigBuilder':
        """Sets the scale used for decimals without an explicit scale."""
        if default_scale < 0:
            raise InvalidScaleConfigError(default_scale)
        self.default_scale = default_scale
        return self

    def build(self) -> Config:
        return Config(self.namespace, self.type_mappings, self.default_scale)
