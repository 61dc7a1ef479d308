"""Catalog of standard field names per EPCIS node type

A field set lists the keys that are part of the standard at a given node.
Any other key found there has to be a namespace-qualified extension.
"""

from typing import Any, Mapping, Optional

from ..errors import UnknownEventTypeError

# Pseudo field-set name: resolve the field set from the node's own discriminator
EVENT = 'Event'

DOCUMENT_TYPES = ('EPCISDocument', 'EPCISQueryDocument', 'EPCISMasterDataDocument')

EVENT_TYPES = (
    'ObjectEvent',
    'AggregationEvent',
    'TransactionEvent',
    'TransformationEvent',
    'AssociationEvent',
)

DOCUMENT_FIELDS = {
    '@context', 'type', 'isA', 'schemaVersion', 'creationDate', 'format',
    'epcisHeader', 'epcisBody', 'instanceIdentifier', 'sender', 'receiver',
}

COMMON_EVENT_FIELDS = {
    'type', 'isA', 'eventID', 'eventTime', 'eventTimeZoneOffset', 'recordTime',
    'errorDeclaration', 'certificationInfo', 'readPoint', 'bizLocation',
    'bizStep', 'disposition', 'persistentDisposition', 'bizTransactionList',
    'sourceList', 'destinationList', 'sensorElementList',
}

FIELD_SETS = {
    # Documents
    'EPCISDocument': DOCUMENT_FIELDS,
    'EPCISQueryDocument': DOCUMENT_FIELDS,
    'EPCISMasterDataDocument': DOCUMENT_FIELDS,
    'EPCISBody': {'event', 'eventList'},
    'EPCISQueryBody': {'queryResults'},
    'EPCISMasterDataBody': {'vocabularyList'},
    'QueryResults': {'subscriptionID', 'queryName', 'resultsBody'},
    'ResultsBody': {'eventList'},

    # Header and master data
    'EPCISHeader': {'epcisMasterData'},
    'EPCISMasterData': {'vocabularyList'},
    'Vocabulary': {'type', 'vocabularyElementList'},
    'VocabularyElement': {'id', 'attributes', 'children'},
    'VocabularyAttribute': {'id', 'attribute'},

    # Events
    'ObjectEvent': COMMON_EVENT_FIELDS | {'action', 'epcList', 'quantityList', 'ilmd'},
    'AggregationEvent': COMMON_EVENT_FIELDS | {'action', 'parentID', 'childEPCs', 'childQuantityList'},
    'TransactionEvent': COMMON_EVENT_FIELDS | {'action', 'parentID', 'epcList', 'quantityList'},
    'TransformationEvent': COMMON_EVENT_FIELDS | {
        'inputEPCList', 'inputQuantityList', 'outputEPCList', 'outputQuantityList',
        'transformationID', 'ilmd',
    },
    'AssociationEvent': COMMON_EVENT_FIELDS | {'action', 'parentID', 'childEPCs', 'childQuantityList'},

    # Event elements
    'ReadPoint': {'id'},
    'BizLocation': {'id'},
    'BizTransactionElement': {'type', 'bizTransaction'},
    'SourceElement': {'type', 'source'},
    'DestinationElement': {'type', 'destination'},
    'QuantityElement': {'epcClass', 'quantity', 'uom'},
    'PersistentDisposition': {'set', 'unset'},
    'ErrorDeclaration': {'declarationTime', 'reason', 'correctiveEventIDs'},
    'SensorElement': {'sensorMetadata', 'sensorReport'},
    'SensorMetadata': {
        'time', 'startTime', 'endTime', 'deviceID', 'deviceMetadata', 'rawData',
        'dataProcessingMethod', 'bizRules',
    },
    'SensorReport': {
        'type', 'exception', 'deviceID', 'deviceMetadata', 'rawData', 'dataProcessingMethod',
        'time', 'microorganism', 'chemicalSubstance', 'value', 'component', 'stringValue',
        'booleanValue', 'hexBinaryValue', 'uriValue', 'minValue', 'maxValue', 'meanValue',
        'sDev', 'percRank', 'percValue', 'uom', 'coordinateReferenceSystem',
    },
    # Instance/lot master data carries extensions only
    'ILMD': set(),
}

COMMON_EVENT_CHILDREN = {
    'readPoint': 'ReadPoint',
    'bizLocation': 'BizLocation',
    'bizTransactionList': 'BizTransactionElement',
    'sourceList': 'SourceElement',
    'destinationList': 'DestinationElement',
    'sensorElementList': 'SensorElement',
    'persistentDisposition': 'PersistentDisposition',
    'errorDeclaration': 'ErrorDeclaration',
}

# Known keys holding nested standard nodes, and the field set of those nodes
CHILD_FIELD_SETS = {
    'EPCISDocument': {'epcisHeader': 'EPCISHeader', 'epcisBody': 'EPCISBody'},
    'EPCISQueryDocument': {'epcisHeader': 'EPCISHeader', 'epcisBody': 'EPCISQueryBody'},
    'EPCISMasterDataDocument': {'epcisHeader': 'EPCISHeader', 'epcisBody': 'EPCISMasterDataBody'},
    'EPCISBody': {'event': EVENT, 'eventList': EVENT},
    'EPCISQueryBody': {'queryResults': 'QueryResults'},
    'EPCISMasterDataBody': {'vocabularyList': 'Vocabulary'},
    'QueryResults': {'resultsBody': 'ResultsBody'},
    'ResultsBody': {'eventList': EVENT},
    'EPCISHeader': {'epcisMasterData': 'EPCISMasterData'},
    'EPCISMasterData': {'vocabularyList': 'Vocabulary'},
    'Vocabulary': {'vocabularyElementList': 'VocabularyElement'},
    'VocabularyElement': {'attributes': 'VocabularyAttribute'},
    'ObjectEvent': {**COMMON_EVENT_CHILDREN, 'quantityList': 'QuantityElement', 'ilmd': 'ILMD'},
    'AggregationEvent': {**COMMON_EVENT_CHILDREN, 'childQuantityList': 'QuantityElement'},
    'TransactionEvent': {**COMMON_EVENT_CHILDREN, 'quantityList': 'QuantityElement'},
    'TransformationEvent': {
        **COMMON_EVENT_CHILDREN,
        'inputQuantityList': 'QuantityElement',
        'outputQuantityList': 'QuantityElement',
        'ilmd': 'ILMD',
    },
    'AssociationEvent': {**COMMON_EVENT_CHILDREN, 'childQuantityList': 'QuantityElement'},
    'SensorElement': {'sensorMetadata': 'SensorMetadata', 'sensorReport': 'SensorReport'},
}


def read_discriminator(value: Any) -> Optional[Any]:
    """Read the `type` discriminator of a raw node, falling back to the legacy `isA`"""
    if not isinstance(value, Mapping):
        return None
    discriminator = value.get('type')
    if discriminator is None:
        discriminator = value.get('isA')
    return discriminator


def resolve_event_type(event: Any) -> str:
    """Map a raw event to one of the five event type names

    Raises:
        UnknownEventTypeError: if the discriminator names no known event type
    """
    discriminator = read_discriminator(event)
    if isinstance(discriminator, str) and discriminator in EVENT_TYPES:
        return discriminator
    raise UnknownEventTypeError(discriminator)
