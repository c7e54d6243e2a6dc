"""Validation of Avro names and namespaces.

Schema text is assembled from the names found in the DBML model, so every
identifier has to pass these checks before it is written out.
"""

import re


class NameValidator:
    """Validates an Avro name."""

    NAME_PATTERN = re.compile(r'[A-Za-z_][A-Za-z0-9_]*')

    def is_valid(self, name) -> bool:
        """Returns True if name starts with a letter or underscore followed by letters, digits or underscores."""
        if not isinstance(name, str):
            return False
        return self.NAME_PATTERN.fullmatch(name) is not None


class NamespaceValidator:
    """Validates a dot-separated Avro namespace."""

    def __init__(self, name_validator: NameValidator):
        self.name_validator = name_validator

    def is_valid(self, namespace) -> bool:
        """Returns True if namespace is empty or each of its segments is a valid name."""
        if not isinstance(namespace, str):
            return False
        if namespace == '':
            return True
        return all(self.name_validator.is_valid(segment) for segment in namespace.split('.'))
