import json
import logging
from pathlib import Path
from types import MappingProxyType
from typing import Any, Iterable, List, Mapping, NamedTuple, Optional

from jsonschema import Draft7Validator, FormatChecker
from referencing import Registry, Resource
from referencing.jsonschema import DRAFT7

from ..errors import StructuralViolation, UnknownFieldSetError, UnknownSchemaError
from .field_sets import CHILD_FIELD_SETS, FIELD_SETS

logger = logging.getLogger(__name__)

SCHEMAS_DIR = Path(__file__).parent / 'schemas'
DEFINITIONS_FILE = 'definitions.json'
SCHEMA_SUFFIX = '.schema.json'


def join_path(base: str, json_path: str) -> str:
    """Append a `$`-rooted JSON path to the path of the node it was computed on"""
    return base + json_path[1:]


class SchemaRegistry:
    """Named catalog of structural JSON schemas (one per document and event type)"""

    def __init__(self, schemas_dir: Path = SCHEMAS_DIR):
        """Load every `<Name>.schema.json` found in schemas_dir

        Args:
            schemas_dir: Directory holding the schema files and the shared
                definitions they reference
        """
        schemas_dir = Path(schemas_dir)
        resources = []
        definitions_path = schemas_dir / DEFINITIONS_FILE
        if definitions_path.exists():
            definitions = json.loads(definitions_path.read_text(encoding='utf-8'))
            resources.append((
                definitions['$id'],
                Resource.from_contents(definitions, default_specification=DRAFT7),
            ))
        registry = Registry().with_resources(resources)

        validators = {}
        for schema_path in sorted(schemas_dir.glob(f'*{SCHEMA_SUFFIX}')):
            name = schema_path.name[:-len(SCHEMA_SUFFIX)]
            schema = json.loads(schema_path.read_text(encoding='utf-8'))
            Draft7Validator.check_schema(schema)
            validators[name] = Draft7Validator(
                schema,
                registry=registry,
                format_checker=FormatChecker(),
            )
        self._validators = MappingProxyType(validators)
        logger.debug(f"Loaded {len(validators)} schemas from {schemas_dir}: {', '.join(validators)}")

    def names(self) -> List[str]:
        return list(self._validators)

    def __contains__(self, schema_name: object) -> bool:
        return schema_name in self._validators

    def validate_against_schema(self, value: Any, schema_name: str, path: str = '$') -> List[StructuralViolation]:
        """Run the structural check of the named schema over a value

        Args:
            value: JSON-like value to check
            schema_name: Registered schema name, e.g. 'EPCISDocument' or 'ObjectEvent'
            path: JSON path of value inside the enclosing document

        Returns:
            Ordered list of structural violations, empty when the value matches

        Raises:
            UnknownSchemaError: if schema_name is not registered
        """
        validator = self._validators.get(schema_name)
        if validator is None:
            raise UnknownSchemaError(schema_name)
        return [
            StructuralViolation(path=join_path(path, error.json_path), message=error.message)
            for error in validator.iter_errors(value)
        ]


class FieldSetPartition(NamedTuple):
    known: List[str]
    foreign: List[str]


class FieldSetRegistry:
    """Named catalog of the standard field names legal at each node type"""

    def __init__(self,
                 field_sets: Optional[Mapping[str, Iterable[str]]] = None,
                 children: Optional[Mapping[str, Mapping[str, str]]] = None):
        field_sets = FIELD_SETS if field_sets is None else field_sets
        children = CHILD_FIELD_SETS if children is None else children
        self._field_sets = MappingProxyType({
            name: frozenset(fields) for name, fields in field_sets.items()
        })
        self._children: Mapping[str, Mapping[str, str]] = MappingProxyType({
            name: MappingProxyType(dict(mapping)) for name, mapping in children.items()
        })

    def names(self) -> List[str]:
        return list(self._field_sets)

    def __contains__(self, field_set_name: object) -> bool:
        return field_set_name in self._field_sets

    def get(self, field_set_name: str) -> frozenset:
        fields = self._field_sets.get(field_set_name)
        if fields is None:
            raise UnknownFieldSetError(field_set_name)
        return fields

    def ensure_field_set(self, value: Any, field_set_name: str) -> FieldSetPartition:
        """Split the keys of value into standard and foreign ones

        Raises:
            UnknownFieldSetError: if field_set_name is not registered
        """
        fields = self.get(field_set_name)
        known, foreign = [], []
        if isinstance(value, Mapping):
            for key in value:
                (known if key in fields else foreign).append(key)
        return FieldSetPartition(known=known, foreign=foreign)

    def child_field_set(self, field_set_name: str, key: str) -> Optional[str]:
        """Field set of the standard node stored under key, None for plain values"""
        return self._children.get(field_set_name, {}).get(key)
