from .extensions import ExtensionValidator, collect_prefixes
from .field_sets import DOCUMENT_TYPES, EVENT_TYPES, read_discriminator, resolve_event_type
from .registry import FieldSetPartition, FieldSetRegistry, SchemaRegistry
from .validator import (
    DocumentValidator,
    default_validator,
    ensure_field_set,
    validate_against_schema,
    validate_epcis_document,
)

__all__ = [
    'DOCUMENT_TYPES',
    'EVENT_TYPES',
    'DocumentValidator',
    'ExtensionValidator',
    'FieldSetPartition',
    'FieldSetRegistry',
    'SchemaRegistry',
    'collect_prefixes',
    'default_validator',
    'ensure_field_set',
    'read_discriminator',
    'resolve_event_type',
    'validate_against_schema',
    'validate_epcis_document',
]
