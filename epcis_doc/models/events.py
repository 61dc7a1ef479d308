"""EPCIS event hierarchy

Every event type is its own model sharing the common fields of `Event`.
Raw events are turned into the matching model through `event_from_dict`,
which dispatches on the `type` discriminator (or the legacy `isA`).
"""

import copy
from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import Field, model_validator

from ..schema.field_sets import resolve_event_type
from .base import Entity
from .elements import (
    BizLocation,
    BizTransactionElement,
    DestinationElement,
    ErrorDeclaration,
    PersistentDisposition,
    QuantityElement,
    ReadPoint,
    SensorElement,
    SourceElement,
)


class Event(Entity):
    """Fields shared by every EPCIS event type"""
    type: str
    event_id: Optional[str] = Field(default=None, alias='eventID')
    event_time: Optional[str] = Field(default=None, alias='eventTime')
    event_time_zone_offset: Optional[str] = Field(default=None, alias='eventTimeZoneOffset')
    record_time: Optional[str] = Field(default=None, alias='recordTime')
    action: Optional[str] = None
    biz_step: Optional[str] = Field(default=None, alias='bizStep')
    disposition: Optional[str] = None
    read_point: Optional[ReadPoint] = Field(default=None, alias='readPoint')
    biz_location: Optional[BizLocation] = Field(default=None, alias='bizLocation')
    biz_transaction_list: Optional[List[BizTransactionElement]] = Field(default=None, alias='bizTransactionList')
    source_list: Optional[List[SourceElement]] = Field(default=None, alias='sourceList')
    destination_list: Optional[List[DestinationElement]] = Field(default=None, alias='destinationList')
    sensor_element_list: Optional[List[SensorElement]] = Field(default=None, alias='sensorElementList')
    persistent_disposition: Optional[PersistentDisposition] = Field(default=None, alias='persistentDisposition')
    error_declaration: Optional[ErrorDeclaration] = Field(default=None, alias='errorDeclaration')
    certification_info: Optional[Union[str, List[str]]] = Field(default=None, alias='certificationInfo')

    @model_validator(mode='before')
    @classmethod
    def fill_type(cls, data: Any) -> Any:
        # The discriminator is always serialized, legacy `isA` becomes `type`
        if not isinstance(data, dict):
            return data
        default = cls.model_fields['type'].default
        if 'type' not in data and isinstance(default, str):
            data = dict(data)
            if data.get('isA') == default:
                del data['isA']
            data['type'] = default
        return data

    # Scalar fields

    def set_event_id(self, value: str):
        return self._set('event_id', value)

    def set_event_time(self, value: str):
        return self._set('event_time', value)

    def set_event_time_zone_offset(self, value: str):
        return self._set('event_time_zone_offset', value)

    def set_record_time(self, value: str):
        return self._set('record_time', value)

    def set_action(self, value: str):
        return self._set('action', value)

    def set_biz_step(self, value: str):
        return self._set('biz_step', value)

    def set_disposition(self, value: str):
        return self._set('disposition', value)

    def set_persistent_disposition(self, value: PersistentDisposition):
        return self._set('persistent_disposition', value)

    def set_error_declaration(self, value: ErrorDeclaration):
        return self._set('error_declaration', value)

    def set_certification_info(self, value: Union[str, List[str]]):
        return self._set('certification_info', value)

    # Locations, either as an element or by identifier

    def set_read_point(self, read_point: ReadPoint):
        return self._set('read_point', read_point)

    def set_read_point_id(self, read_point_id: str):
        return self._set('read_point', ReadPoint.from_id(read_point_id))

    def set_biz_location(self, biz_location: BizLocation):
        return self._set('biz_location', biz_location)

    def set_biz_location_id(self, biz_location_id: str):
        return self._set('biz_location', BizLocation.from_id(biz_location_id))

    # bizTransactionList

    def add_biz_transaction(self, item: BizTransactionElement):
        return self._add('biz_transaction_list', item)

    def add_biz_transaction_list(self, items: List[BizTransactionElement]):
        return self._add_all('biz_transaction_list', items)

    def remove_biz_transaction(self, item: BizTransactionElement):
        return self._remove('biz_transaction_list', item)

    def remove_biz_transaction_list(self, items: List[BizTransactionElement]):
        return self._remove_all('biz_transaction_list', items)

    def clear_biz_transaction_list(self):
        return self._unset('biz_transaction_list')

    # sourceList

    def add_source(self, item: SourceElement):
        return self._add('source_list', item)

    def add_source_list(self, items: List[SourceElement]):
        return self._add_all('source_list', items)

    def remove_source(self, item: SourceElement):
        return self._remove('source_list', item)

    def remove_source_list(self, items: List[SourceElement]):
        return self._remove_all('source_list', items)

    def clear_source_list(self):
        return self._unset('source_list')

    # destinationList

    def add_destination(self, item: DestinationElement):
        return self._add('destination_list', item)

    def add_destination_list(self, items: List[DestinationElement]):
        return self._add_all('destination_list', items)

    def remove_destination(self, item: DestinationElement):
        return self._remove('destination_list', item)

    def remove_destination_list(self, items: List[DestinationElement]):
        return self._remove_all('destination_list', items)

    def clear_destination_list(self):
        return self._unset('destination_list')

    # sensorElementList

    def add_sensor_element(self, item: SensorElement):
        return self._add('sensor_element_list', item)

    def add_sensor_element_list(self, items: List[SensorElement]):
        return self._add_all('sensor_element_list', items)

    def remove_sensor_element(self, item: SensorElement):
        return self._remove('sensor_element_list', item)

    def remove_sensor_element_list(self, items: List[SensorElement]):
        return self._remove_all('sensor_element_list', items)

    def clear_sensor_element_list(self):
        return self._unset('sensor_element_list')


class EPCListMixin:
    """Accessors for events carrying an `epcList`"""

    def add_epc(self, epc: str):
        return self._add('epc_list', epc)

    def add_epc_list(self, epcs: List[str]):
        return self._add_all('epc_list', epcs)

    def remove_epc(self, epc: str):
        return self._remove('epc_list', epc)

    def remove_epc_list(self, epcs: List[str]):
        return self._remove_all('epc_list', epcs)

    def clear_epc_list(self):
        return self._unset('epc_list')


class QuantityListMixin:
    """Accessors for events carrying a `quantityList`"""

    def add_quantity(self, item: QuantityElement):
        return self._add('quantity_list', item)

    def add_quantity_list(self, items: List[QuantityElement]):
        return self._add_all('quantity_list', items)

    def remove_quantity(self, item: QuantityElement):
        return self._remove('quantity_list', item)

    def remove_quantity_list(self, items: List[QuantityElement]):
        return self._remove_all('quantity_list', items)

    def clear_quantity_list(self):
        return self._unset('quantity_list')


class ParentChildMixin:
    """Accessors for events linking a parent to child EPCs and quantities"""

    def set_parent_id(self, parent_id: str):
        return self._set('parent_id', parent_id)

    def add_child_epc(self, epc: str):
        return self._add('child_epcs', epc)

    def add_child_epc_list(self, epcs: List[str]):
        return self._add_all('child_epcs', epcs)

    def remove_child_epc(self, epc: str):
        return self._remove('child_epcs', epc)

    def remove_child_epc_list(self, epcs: List[str]):
        return self._remove_all('child_epcs', epcs)

    def clear_child_epc_list(self):
        return self._unset('child_epcs')

    def add_child_quantity(self, item: QuantityElement):
        return self._add('child_quantity_list', item)

    def add_child_quantity_list(self, items: List[QuantityElement]):
        return self._add_all('child_quantity_list', items)

    def remove_child_quantity(self, item: QuantityElement):
        return self._remove('child_quantity_list', item)

    def remove_child_quantity_list(self, items: List[QuantityElement]):
        return self._remove_all('child_quantity_list', items)

    def clear_child_quantity_list(self):
        return self._unset('child_quantity_list')


class ILMDMixin:
    """Instance/lot master data, kept as a raw mapping"""

    def set_ilmd(self, ilmd: Dict[str, Any]):
        return self._set('ilmd', ilmd)


class ObjectEvent(EPCListMixin, QuantityListMixin, ILMDMixin, Event):
    type: Literal['ObjectEvent'] = 'ObjectEvent'
    epc_list: Optional[List[str]] = Field(default=None, alias='epcList')
    quantity_list: Optional[List[QuantityElement]] = Field(default=None, alias='quantityList')
    ilmd: Optional[Dict[str, Any]] = None


class AggregationEvent(ParentChildMixin, Event):
    type: Literal['AggregationEvent'] = 'AggregationEvent'
    parent_id: Optional[str] = Field(default=None, alias='parentID')
    child_epcs: Optional[List[str]] = Field(default=None, alias='childEPCs')
    child_quantity_list: Optional[List[QuantityElement]] = Field(default=None, alias='childQuantityList')


class AssociationEvent(ParentChildMixin, Event):
    type: Literal['AssociationEvent'] = 'AssociationEvent'
    parent_id: Optional[str] = Field(default=None, alias='parentID')
    child_epcs: Optional[List[str]] = Field(default=None, alias='childEPCs')
    child_quantity_list: Optional[List[QuantityElement]] = Field(default=None, alias='childQuantityList')


class TransactionEvent(EPCListMixin, QuantityListMixin, Event):
    type: Literal['TransactionEvent'] = 'TransactionEvent'
    parent_id: Optional[str] = Field(default=None, alias='parentID')
    epc_list: Optional[List[str]] = Field(default=None, alias='epcList')
    quantity_list: Optional[List[QuantityElement]] = Field(default=None, alias='quantityList')

    def set_parent_id(self, parent_id: str) -> 'TransactionEvent':
        return self._set('parent_id', parent_id)


class TransformationEvent(ILMDMixin, Event):
    type: Literal['TransformationEvent'] = 'TransformationEvent'
    input_epc_list: Optional[List[str]] = Field(default=None, alias='inputEPCList')
    input_quantity_list: Optional[List[QuantityElement]] = Field(default=None, alias='inputQuantityList')
    output_epc_list: Optional[List[str]] = Field(default=None, alias='outputEPCList')
    output_quantity_list: Optional[List[QuantityElement]] = Field(default=None, alias='outputQuantityList')
    transformation_id: Optional[str] = Field(default=None, alias='transformationID')
    ilmd: Optional[Dict[str, Any]] = None

    def set_transformation_id(self, transformation_id: str) -> 'TransformationEvent':
        return self._set('transformation_id', transformation_id)

    def add_input_epc(self, epc: str) -> 'TransformationEvent':
        return self._add('input_epc_list', epc)

    def add_input_epc_list(self, epcs: List[str]) -> 'TransformationEvent':
        return self._add_all('input_epc_list', epcs)

    def remove_input_epc(self, epc: str) -> 'TransformationEvent':
        return self._remove('input_epc_list', epc)

    def remove_input_epc_list(self, epcs: List[str]) -> 'TransformationEvent':
        return self._remove_all('input_epc_list', epcs)

    def clear_input_epc_list(self) -> 'TransformationEvent':
        return self._unset('input_epc_list')

    def add_output_epc(self, epc: str) -> 'TransformationEvent':
        return self._add('output_epc_list', epc)

    def add_output_epc_list(self, epcs: List[str]) -> 'TransformationEvent':
        return self._add_all('output_epc_list', epcs)

    def remove_output_epc(self, epc: str) -> 'TransformationEvent':
        return self._remove('output_epc_list', epc)

    def remove_output_epc_list(self, epcs: List[str]) -> 'TransformationEvent':
        return self._remove_all('output_epc_list', epcs)

    def clear_output_epc_list(self) -> 'TransformationEvent':
        return self._unset('output_epc_list')

    def add_input_quantity(self, item: QuantityElement) -> 'TransformationEvent':
        return self._add('input_quantity_list', item)

    def add_input_quantity_list(self, items: List[QuantityElement]) -> 'TransformationEvent':
        return self._add_all('input_quantity_list', items)

    def remove_input_quantity(self, item: QuantityElement) -> 'TransformationEvent':
        return self._remove('input_quantity_list', item)

    def remove_input_quantity_list(self, items: List[QuantityElement]) -> 'TransformationEvent':
        return self._remove_all('input_quantity_list', items)

    def clear_input_quantity_list(self) -> 'TransformationEvent':
        return self._unset('input_quantity_list')

    def add_output_quantity(self, item: QuantityElement) -> 'TransformationEvent':
        return self._add('output_quantity_list', item)

    def add_output_quantity_list(self, items: List[QuantityElement]) -> 'TransformationEvent':
        return self._add_all('output_quantity_list', items)

    def remove_output_quantity(self, item: QuantityElement) -> 'TransformationEvent':
        return self._remove('output_quantity_list', item)

    def remove_output_quantity_list(self, items: List[QuantityElement]) -> 'TransformationEvent':
        return self._remove_all('output_quantity_list', items)

    def clear_output_quantity_list(self) -> 'TransformationEvent':
        return self._unset('output_quantity_list')


# Event type discriminator -> model
EVENT_TYPES = {
    'ObjectEvent': ObjectEvent,
    'AggregationEvent': AggregationEvent,
    'TransactionEvent': TransactionEvent,
    'TransformationEvent': TransformationEvent,
    'AssociationEvent': AssociationEvent,
}


def event_from_dict(raw: Dict[str, Any]) -> Event:
    """Build the event model matching the discriminator of a raw event

    Raises:
        UnknownEventTypeError: if the discriminator names no known event type
    """
    event_type = resolve_event_type(raw)
    return EVENT_TYPES[event_type].model_validate(copy.deepcopy(raw))
