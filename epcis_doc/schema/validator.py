import logging
from functools import lru_cache
from typing import Any, Iterator, List, Mapping, Optional, Tuple

from ..errors import (
    EPCISValidationError,
    UnknownDocumentTypeError,
    ValidationResult,
    Violation,
)
from .extensions import ExtensionValidator
from .field_sets import DOCUMENT_TYPES, read_discriminator, resolve_event_type
from .registry import FieldSetPartition, FieldSetRegistry, SchemaRegistry

logger = logging.getLogger(__name__)

# Where each document type keeps its events; a trailing 'event' holds a single one
EVENT_LOCATIONS = {
    'EPCISDocument': (
        ('epcisBody', 'event'),
        ('epcisBody', 'eventList'),
    ),
    'EPCISQueryDocument': (
        ('epcisBody', 'queryResults', 'resultsBody', 'eventList'),
    ),
    'EPCISMasterDataDocument': (),
}

_MISSING = object()


class DocumentValidator:
    """Validator that orchestrates EPCIS document validation

    Runs, without stopping at the first failure:
    1. the structural check of the document against its document type schema
    2. the structural check of every event against its event type schema
    3. the extension check over the whole document tree
    """

    def __init__(self,
                 schemas: Optional[SchemaRegistry] = None,
                 field_sets: Optional[FieldSetRegistry] = None,
                 extension_validator: Optional[ExtensionValidator] = None):
        self.schemas = schemas or SchemaRegistry()
        self.field_sets = field_sets or FieldSetRegistry()
        self.extension_validator = extension_validator or ExtensionValidator(self.field_sets)

    def resolve_document_type(self, document: Any) -> str:
        """Read the document discriminator

        Raises:
            UnknownDocumentTypeError: if it names no registered document schema
        """
        discriminator = read_discriminator(document)
        if isinstance(discriminator, str) and discriminator in DOCUMENT_TYPES and discriminator in self.schemas:
            return discriminator
        raise UnknownDocumentTypeError(discriminator)

    def validate(self, document: Any) -> ValidationResult:
        """Validate a document and report every violation (collect mode)

        Raises:
            UnknownDocumentTypeError, UnknownEventTypeError: when a discriminator
                cannot be resolved; nothing can be validated in that case
        """
        return ValidationResult.from_errors(self.collect_errors(document))

    def assert_valid(self, document: Any) -> bool:
        """Validate a document and raise on the first call that finds violations (assert mode)

        Raises:
            EPCISValidationError: carrying every violation found
        """
        errors = self.collect_errors(document)
        if errors:
            raise EPCISValidationError(errors)
        return True

    def collect_errors(self, document: Any) -> List[Violation]:
        document_type = self.resolve_document_type(document)
        errors: List[Violation] = []

        # Structural check of the whole document
        errors.extend(self.schemas.validate_against_schema(document, document_type))

        # Structural check of each event against its own schema
        event_count = 0
        for event_path, event in self.iter_events(document, document_type):
            event_type = resolve_event_type(event)
            errors.extend(self.schemas.validate_against_schema(event, event_type, path=event_path))
            event_count += 1

        # Extensions over the whole tree
        errors.extend(self.extension_validator.validate(
            document, document_type, context=document.get('@context')
        ))

        for error in errors:
            logger.debug(f"{error.type}: {error}")
        logger.info(f"Validated {document_type} with {event_count} events: {len(errors)} violations")
        return errors

    @staticmethod
    def iter_events(document: Mapping[str, Any], document_type: str) -> Iterator[Tuple[str, Mapping[str, Any]]]:
        """Yield (path, event) for every event object in the document body"""
        for location in EVENT_LOCATIONS.get(document_type, ()):
            value: Any = document
            path = '$'
            for key in location:
                if not isinstance(value, Mapping) or key not in value:
                    value = _MISSING
                    break
                value = value[key]
                path = f"{path}.{key}"
            if value is _MISSING:
                continue

            if location[-1] == 'event':
                # An empty object holds no event
                if isinstance(value, Mapping) and value:
                    yield path, value
            elif isinstance(value, list):
                for index, event in enumerate(value):
                    # Non-object entries are reported by the document schema
                    if isinstance(event, Mapping):
                        yield f"{path}[{index}]", event


@lru_cache(maxsize=None)
def default_validator() -> DocumentValidator:
    """Shared validator over the bundled catalogs, built on first use"""
    return DocumentValidator()


def validate_epcis_document(document: Any, throw_error: bool = True) -> ValidationResult:
    """Validate an EPCIS document

    Args:
        document: Raw JSON-like document
        throw_error: Raise EPCISValidationError when the document is invalid
            instead of returning an unsuccessful result

    Returns:
        ValidationResult with success flag and ordered violations
    """
    validator = default_validator()
    if throw_error:
        validator.assert_valid(document)
        return ValidationResult(success=True, errors=[])
    return validator.validate(document)


def validate_against_schema(value: Any, schema_name: str) -> List[Violation]:
    return list(default_validator().schemas.validate_against_schema(value, schema_name))


def ensure_field_set(value: Any, field_set_name: str) -> FieldSetPartition:
    return default_validator().field_sets.ensure_field_set(value, field_set_name)
