"""Value objects owned by EPCIS events"""

from typing import List, Optional, Union

from pydantic import Field, StrictBool, StrictFloat, StrictInt

from .base import Entity

Number = Union[StrictInt, StrictFloat]


class Location(Entity):
    id: Optional[str] = None

    @classmethod
    def from_id(cls, location_id: str):
        return cls(id=location_id)

    def set_id(self, location_id: str):
        return self._set('id', location_id)


class ReadPoint(Location):
    """Where the event was observed"""


class BizLocation(Location):
    """Where the objects are expected to be after the event"""


class BizTransactionElement(Entity):
    type: Optional[str] = None
    biz_transaction: Optional[str] = Field(default=None, alias='bizTransaction')

    def set_type(self, value: str) -> 'BizTransactionElement':
        return self._set('type', value)

    def set_biz_transaction(self, value: str) -> 'BizTransactionElement':
        return self._set('biz_transaction', value)


class SourceElement(Entity):
    type: Optional[str] = None
    source: Optional[str] = None

    def set_type(self, value: str) -> 'SourceElement':
        return self._set('type', value)

    def set_source(self, value: str) -> 'SourceElement':
        return self._set('source', value)


class DestinationElement(Entity):
    type: Optional[str] = None
    destination: Optional[str] = None

    def set_type(self, value: str) -> 'DestinationElement':
        return self._set('type', value)

    def set_destination(self, value: str) -> 'DestinationElement':
        return self._set('destination', value)


class QuantityElement(Entity):
    """Quantity of an EPC class, optionally with a unit of measure"""
    epc_class: Optional[str] = Field(default=None, alias='epcClass')
    quantity: Optional[Number] = None
    uom: Optional[str] = None

    def set_epc_class(self, value: str) -> 'QuantityElement':
        return self._set('epc_class', value)

    def set_quantity(self, value: Union[int, float]) -> 'QuantityElement':
        return self._set('quantity', value)

    def set_uom(self, value: str) -> 'QuantityElement':
        return self._set('uom', value)


class PersistentDisposition(Entity):
    set_values: Optional[List[str]] = Field(default=None, alias='set')
    unset_values: Optional[List[str]] = Field(default=None, alias='unset')

    def add_set(self, value: str) -> 'PersistentDisposition':
        return self._add('set_values', value)

    def add_set_list(self, values: List[str]) -> 'PersistentDisposition':
        return self._add_all('set_values', values)

    def remove_set(self, value: str) -> 'PersistentDisposition':
        return self._remove('set_values', value)

    def remove_set_list(self, values: List[str]) -> 'PersistentDisposition':
        return self._remove_all('set_values', values)

    def clear_set_list(self) -> 'PersistentDisposition':
        return self._unset('set_values')

    def add_unset(self, value: str) -> 'PersistentDisposition':
        return self._add('unset_values', value)

    def add_unset_list(self, values: List[str]) -> 'PersistentDisposition':
        return self._add_all('unset_values', values)

    def remove_unset(self, value: str) -> 'PersistentDisposition':
        return self._remove('unset_values', value)

    def remove_unset_list(self, values: List[str]) -> 'PersistentDisposition':
        return self._remove_all('unset_values', values)

    def clear_unset_list(self) -> 'PersistentDisposition':
        return self._unset('unset_values')


class ErrorDeclaration(Entity):
    """Declares that an earlier event was erroneous"""
    declaration_time: Optional[str] = Field(default=None, alias='declarationTime')
    reason: Optional[str] = None
    corrective_event_ids: Optional[List[str]] = Field(default=None, alias='correctiveEventIDs')

    def set_declaration_time(self, value: str) -> 'ErrorDeclaration':
        return self._set('declaration_time', value)

    def set_reason(self, value: str) -> 'ErrorDeclaration':
        return self._set('reason', value)

    def add_corrective_event_id(self, value: str) -> 'ErrorDeclaration':
        return self._add('corrective_event_ids', value)

    def add_corrective_event_id_list(self, values: List[str]) -> 'ErrorDeclaration':
        return self._add_all('corrective_event_ids', values)

    def remove_corrective_event_id(self, value: str) -> 'ErrorDeclaration':
        return self._remove('corrective_event_ids', value)

    def remove_corrective_event_id_list(self, values: List[str]) -> 'ErrorDeclaration':
        return self._remove_all('corrective_event_ids', values)

    def clear_corrective_event_id_list(self) -> 'ErrorDeclaration':
        return self._unset('corrective_event_ids')


class SensorMetadata(Entity):
    time: Optional[str] = None
    start_time: Optional[str] = Field(default=None, alias='startTime')
    end_time: Optional[str] = Field(default=None, alias='endTime')
    device_id: Optional[str] = Field(default=None, alias='deviceID')
    device_metadata: Optional[str] = Field(default=None, alias='deviceMetadata')
    raw_data: Optional[str] = Field(default=None, alias='rawData')
    data_processing_method: Optional[str] = Field(default=None, alias='dataProcessingMethod')
    biz_rules: Optional[str] = Field(default=None, alias='bizRules')

    def set_time(self, value: str) -> 'SensorMetadata':
        return self._set('time', value)

    def set_start_time(self, value: str) -> 'SensorMetadata':
        return self._set('start_time', value)

    def set_end_time(self, value: str) -> 'SensorMetadata':
        return self._set('end_time', value)

    def set_device_id(self, value: str) -> 'SensorMetadata':
        return self._set('device_id', value)

    def set_device_metadata(self, value: str) -> 'SensorMetadata':
        return self._set('device_metadata', value)

    def set_raw_data(self, value: str) -> 'SensorMetadata':
        return self._set('raw_data', value)

    def set_data_processing_method(self, value: str) -> 'SensorMetadata':
        return self._set('data_processing_method', value)

    def set_biz_rules(self, value: str) -> 'SensorMetadata':
        return self._set('biz_rules', value)


class SensorReport(Entity):
    """One measurement of a sensor element

    Numeric values keep their JSON type, an integer reading is never turned
    into a float.
    """
    type: Optional[str] = None
    exception: Optional[str] = None
    device_id: Optional[str] = Field(default=None, alias='deviceID')
    device_metadata: Optional[str] = Field(default=None, alias='deviceMetadata')
    raw_data: Optional[str] = Field(default=None, alias='rawData')
    data_processing_method: Optional[str] = Field(default=None, alias='dataProcessingMethod')
    time: Optional[str] = None
    microorganism: Optional[str] = None
    chemical_substance: Optional[str] = Field(default=None, alias='chemicalSubstance')
    value: Optional[Number] = None
    component: Optional[str] = None
    string_value: Optional[str] = Field(default=None, alias='stringValue')
    boolean_value: Optional[StrictBool] = Field(default=None, alias='booleanValue')
    hex_binary_value: Optional[str] = Field(default=None, alias='hexBinaryValue')
    uri_value: Optional[str] = Field(default=None, alias='uriValue')
    min_value: Optional[Number] = Field(default=None, alias='minValue')
    max_value: Optional[Number] = Field(default=None, alias='maxValue')
    mean_value: Optional[Number] = Field(default=None, alias='meanValue')
    s_dev: Optional[Number] = Field(default=None, alias='sDev')
    perc_rank: Optional[Number] = Field(default=None, alias='percRank')
    perc_value: Optional[Number] = Field(default=None, alias='percValue')
    uom: Optional[str] = None
    coordinate_reference_system: Optional[str] = Field(default=None, alias='coordinateReferenceSystem')

    def set_type(self, value: str) -> 'SensorReport':
        return self._set('type', value)

    def set_exception(self, value: str) -> 'SensorReport':
        return self._set('exception', value)

    def set_device_id(self, value: str) -> 'SensorReport':
        return self._set('device_id', value)

    def set_device_metadata(self, value: str) -> 'SensorReport':
        return self._set('device_metadata', value)

    def set_raw_data(self, value: str) -> 'SensorReport':
        return self._set('raw_data', value)

    def set_data_processing_method(self, value: str) -> 'SensorReport':
        return self._set('data_processing_method', value)

    def set_time(self, value: str) -> 'SensorReport':
        return self._set('time', value)

    def set_microorganism(self, value: str) -> 'SensorReport':
        return self._set('microorganism', value)

    def set_chemical_substance(self, value: str) -> 'SensorReport':
        return self._set('chemical_substance', value)

    def set_value(self, value: Union[int, float]) -> 'SensorReport':
        return self._set('value', value)

    def set_component(self, value: str) -> 'SensorReport':
        return self._set('component', value)

    def set_string_value(self, value: str) -> 'SensorReport':
        return self._set('string_value', value)

    def set_boolean_value(self, value: bool) -> 'SensorReport':
        return self._set('boolean_value', value)

    def set_hex_binary_value(self, value: str) -> 'SensorReport':
        return self._set('hex_binary_value', value)

    def set_uri_value(self, value: str) -> 'SensorReport':
        return self._set('uri_value', value)

    def set_min_value(self, value: Union[int, float]) -> 'SensorReport':
        return self._set('min_value', value)

    def set_max_value(self, value: Union[int, float]) -> 'SensorReport':
        return self._set('max_value', value)

    def set_mean_value(self, value: Union[int, float]) -> 'SensorReport':
        return self._set('mean_value', value)

    def set_s_dev(self, value: Union[int, float]) -> 'SensorReport':
        return self._set('s_dev', value)

    def set_perc_rank(self, value: Union[int, float]) -> 'SensorReport':
        return self._set('perc_rank', value)

    def set_perc_value(self, value: Union[int, float]) -> 'SensorReport':
        return self._set('perc_value', value)

    def set_uom(self, value: str) -> 'SensorReport':
        return self._set('uom', value)

    def set_coordinate_reference_system(self, value: str) -> 'SensorReport':
        return self._set('coordinate_reference_system', value)


class SensorElement(Entity):
    sensor_metadata: Optional[SensorMetadata] = Field(default=None, alias='sensorMetadata')
    sensor_report: Optional[List[SensorReport]] = Field(default=None, alias='sensorReport')

    def set_sensor_metadata(self, value: SensorMetadata) -> 'SensorElement':
        return self._set('sensor_metadata', value)

    def add_sensor_report(self, report: SensorReport) -> 'SensorElement':
        return self._add('sensor_report', report)

    def add_sensor_report_list(self, reports: List[SensorReport]) -> 'SensorElement':
        return self._add_all('sensor_report', reports)

    def remove_sensor_report(self, report: SensorReport) -> 'SensorElement':
        return self._remove('sensor_report', report)

    def remove_sensor_report_list(self, reports: List[SensorReport]) -> 'SensorElement':
        return self._remove_all('sensor_report', reports)

    def clear_sensor_report_list(self) -> 'SensorElement':
        return self._unset('sensor_report')
