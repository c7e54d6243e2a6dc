"""
Rendering of Avro schemas as JSON text.

Records are written with one top-level attribute per line and one field per
line. Named types inlined into a field span multiple lines, indented to nest
under the field:

    {
      "type": "record",
      "name": "User",
      "fields": [
        {"name": "id", "type": "int"},
        {"name": "suit", "type": {
          "type": "enum",
          "name": "Suit",
          "symbols": ["SPADES", "HEARTS"]
        }}
      ]
    }
"""

import json
from typing import Any, Dict, List

NAMED_TYPES = ('record', 'enum')


def dump_json(value: Any) -> str:
    """Renders a value as single-line JSON."""
    return json.dumps(value, ensure_ascii=False)


def dump_schema(schema: Dict[str, Any], indent: int = 0) -> str:
    """
    Renders a named Avro schema (record or enum) as JSON text.

    Args:
        schema (dict): The schema. Attribute order is kept.
        indent (int): Indentation of the closing brace. The opening brace is
            not indented so the text can follow a key on the same line.

    Returns:
        str: The JSON text without trailing newline.
    """
    pad = ' ' * (indent + 2)
    lines = []
    for key, value in schema.items():
        if key == 'fields':
            lines.append(f'{pad}{dump_json(key)}: {dump_fields(value, indent + 2)}')
        else:
            lines.append(f'{pad}{dump_json(key)}: {dump_json(value)}')
    return '{\n' + ',\n'.join(lines) + '\n' + ' ' * indent + '}'


def dump_fields(fields: List[Dict[str, Any]], indent: int) -> str:
    if not fields:
        return '[]'
    pad = ' ' * (indent + 2)
    lines = [pad + dump_field(field, indent + 2) for field in fields]
    return '[\n' + ',\n'.join(lines) + '\n' + ' ' * indent + ']'


def dump_field(field: Dict[str, Any], indent: int) -> str:
    """Renders a record field on one line, except for inlined named types."""
    attributes = []
    for key, value in field.items():
        rendered = dump_type(value, indent) if key == 'type' else dump_json(value)
        attributes.append(f'{dump_json(key)}: {rendered}')
    return '{' + ', '.join(attributes) + '}'


def dump_type(avro_type: Any, indent: int) -> str:
    if isinstance(avro_type, list):
        return '[' + ', '.join(dump_type(t, indent) for t in avro_type) + ']'
    if isinstance(avro_type, dict) and avro_type.get('type') in NAMED_TYPES:
        return dump_schema(avro_type, indent)
    # type names and logical types (e.g. decimal) stay on one line
    return dump_json(avro_type)
