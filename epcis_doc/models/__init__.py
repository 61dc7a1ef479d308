from .base import Entity
from .document import EPCISDocument, EPCISHeader
from .elements import (
    BizLocation,
    BizTransactionElement,
    DestinationElement,
    ErrorDeclaration,
    PersistentDisposition,
    QuantityElement,
    ReadPoint,
    SensorElement,
    SensorMetadata,
    SensorReport,
    SourceElement,
)
from .events import (
    EVENT_TYPES,
    AggregationEvent,
    AssociationEvent,
    Event,
    ObjectEvent,
    TransactionEvent,
    TransformationEvent,
    event_from_dict,
)

__all__ = [
    'EVENT_TYPES',
    'AggregationEvent',
    'AssociationEvent',
    'BizLocation',
    'BizTransactionElement',
    'DestinationElement',
    'EPCISDocument',
    'EPCISHeader',
    'Entity',
    'ErrorDeclaration',
    'Event',
    'ObjectEvent',
    'PersistentDisposition',
    'QuantityElement',
    'ReadPoint',
    'SensorElement',
    'SensorMetadata',
    'SensorReport',
    'SourceElement',
    'TransactionEvent',
    'TransformationEvent',
    'event_from_dict',
]
