"""Exceptions and violation models for EPCIS document validation"""

from collections import defaultdict
from typing import Any, Dict, List, Literal

from pydantic import BaseModel, Field


class Violation(BaseModel):
    """A single validation finding located by JSON path"""
    type: str
    path: str
    message: str

    def __str__(self) -> str:
        return f"{self.path}: {self.message}"


class StructuralViolation(Violation):
    """Value does not match the shape, type, enum or format of its schema"""
    type: Literal['structural'] = 'structural'


class ExtensionViolation(Violation):
    """Field is neither standard for its node nor a declared namespace extension"""
    type: Literal['extension'] = 'extension'


class ValidationResult(BaseModel):
    """Outcome of validating an EPCIS document in collect mode"""
    success: bool
    errors: List[Violation] = Field(default_factory=list)

    @classmethod
    def from_errors(cls, errors: List[Violation]) -> 'ValidationResult':
        return cls(success=len(errors) == 0, errors=list(errors))

    def summary(self) -> Dict[str, Any]:
        """Group the violations by type

        Returns:
            Dict with the total count, counts per violation type and the
            distinct paths that failed
        """
        by_type = defaultdict(int)
        for error in self.errors:
            by_type[error.type] += 1
        return {
            'success': self.success,
            'total': len(self.errors),
            'by_type': dict(by_type),
            'paths': sorted({error.path for error in self.errors}),
        }


class EPCISError(Exception):
    """Base class for all errors raised by epcis_doc"""


class UnknownSchemaError(EPCISError):
    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        super().__init__(f"Unknown schema name: {schema_name!r}")


class UnknownFieldSetError(EPCISError):
    def __init__(self, field_set_name: str):
        self.field_set_name = field_set_name
        super().__init__(f"Unknown field set name: {field_set_name!r}")


class UnknownDocumentTypeError(EPCISError):
    def __init__(self, document_type: Any):
        self.document_type = document_type
        super().__init__(f"Unable to resolve the document type: {document_type!r}")


class UnknownEventTypeError(EPCISError):
    def __init__(self, event_type: Any):
        self.event_type = event_type
        super().__init__(f"Unable to resolve the event type: {event_type!r}")


class EPCISValidationError(EPCISError):
    """Raised in assert mode, carries every violation found in one pass"""

    def __init__(self, errors: List[Violation]):
        self.errors = list(errors)
        details = '\n'.join(f"  - {error}" for error in self.errors)
        super().__init__(f"EPCIS document is invalid ({len(self.errors)} errors):\n{details}")
