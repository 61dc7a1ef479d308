"""Build, serialize and validate EPCIS 2.0 JSON documents"""

from .errors import (
    EPCISError,
    EPCISValidationError,
    ExtensionViolation,
    StructuralViolation,
    UnknownDocumentTypeError,
    UnknownEventTypeError,
    UnknownFieldSetError,
    UnknownSchemaError,
    ValidationResult,
    Violation,
)
from .models import EPCISDocument, event_from_dict
from .schema import (
    DocumentValidator,
    ensure_field_set,
    validate_against_schema,
    validate_epcis_document,
)

__version__ = "0.1.0"

__all__ = [
    'DocumentValidator',
    'EPCISDocument',
    'EPCISError',
    'EPCISValidationError',
    'ExtensionViolation',
    'StructuralViolation',
    'UnknownDocumentTypeError',
    'UnknownEventTypeError',
    'UnknownFieldSetError',
    'UnknownSchemaError',
    'ValidationResult',
    'Violation',
    'ensure_field_set',
    'event_from_dict',
    'validate_against_schema',
    'validate_epcis_document',
]
