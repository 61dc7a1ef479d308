"""EPCIS document entity with its header and event body"""

import copy
from datetime import datetime, timezone
from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import (
    Field,
    StrictFloat,
    StrictInt,
    StrictStr,
    ValidationInfo,
    field_validator,
    model_validator,
)

from ..config.settings import Context, DocumentDefaults, settings
from ..schema.validator import default_validator
from .base import Entity
from .events import Event, event_from_dict

DocumentType = Literal['EPCISDocument', 'EPCISQueryDocument', 'EPCISMasterDataDocument']


def utc_timestamp() -> str:
    """Current time as an ISO 8601 UTC timestamp with milliseconds"""
    return datetime.now(timezone.utc).isoformat(timespec='milliseconds').replace('+00:00', 'Z')


class EPCISHeader(Entity):
    """Document header, the master data is kept as a raw mapping"""
    epcis_master_data: Optional[Dict[str, Any]] = Field(default=None, alias='epcisMasterData')

    def set_epcis_master_data(self, value: Dict[str, Any]) -> 'EPCISHeader':
        return self._set('epcis_master_data', value)


class EPCISDocument(Entity):
    """EPCIS document holding an ordered list of events

    The events are serialized under `epcisBody`, either as a single `event`
    or as an `eventList` (see `to_dict`). Other body keys, such as the query
    results of an EPCISQueryDocument, are kept verbatim in `body_extensions`.

    `schemaVersion`, `@context`, `creationDate` and the body shape toggle are
    filled from a `DocumentDefaults` value when absent. Pass it explicitly to
    `from_dict`/`create`, otherwise the application settings are used.
    """
    type: DocumentType = 'EPCISDocument'
    context: Optional[Context] = Field(default=None, alias='@context')
    schema_version: Optional[Union[StrictStr, StrictInt, StrictFloat]] = Field(default=None, alias='schemaVersion')
    creation_date: Optional[str] = Field(default=None, alias='creationDate')
    format: Optional[str] = None
    epcis_header: Optional[EPCISHeader] = Field(default=None, alias='epcisHeader')

    # Not serialized as such, see to_dict
    event_list: Optional[List[Event]] = Field(default=None, exclude=True)
    body_extensions: Dict[str, Any] = Field(default_factory=dict, exclude=True)
    use_event_list_by_default: Optional[bool] = Field(default=None, exclude=True)

    @model_validator(mode='before')
    @classmethod
    def unpack_body(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        data = dict(data)
        if 'type' not in data:
            data['type'] = data.pop('isA', 'EPCISDocument')

        if 'epcisBody' not in data:
            return data
        body = data.pop('epcisBody')
        if not isinstance(body, dict):
            raise ValueError('epcisBody must be an object')

        body = dict(body)
        if 'eventList' in body:
            data['event_list'] = body.pop('eventList')
            data.setdefault('use_event_list_by_default', True)
        elif 'event' in body:
            event = body.pop('event')
            # An empty object stands for no event at all
            data['event_list'] = [event] if event else []
            data.setdefault('use_event_list_by_default', False)
        data['body_extensions'] = body
        return data

    @field_validator('event_list', mode='before')
    @classmethod
    def build_events(cls, value: Any) -> Any:
        if not isinstance(value, list):
            return value
        return [event_from_dict(event) if isinstance(event, dict) else event for event in value]

    @model_validator(mode='after')
    def apply_defaults(self, info: ValidationInfo) -> 'EPCISDocument':
        defaults = (info.context or {}).get('defaults') or settings.document_defaults()
        fields_set = self.model_fields_set
        if 'context' not in fields_set and defaults.context is not None:
            self.context = copy.deepcopy(defaults.context)
        if 'schema_version' not in fields_set and defaults.schema_version is not None:
            self.schema_version = defaults.schema_version
        if 'creation_date' not in fields_set:
            self.creation_date = utc_timestamp()
        if self.use_event_list_by_default is None:
            self.use_event_list_by_default = defaults.use_event_list_by_default
        return self

    @classmethod
    def create(cls, defaults: Optional[DocumentDefaults] = None) -> 'EPCISDocument':
        """Empty document, filled with the given defaults"""
        return cls.model_validate({}, context={'defaults': defaults})

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]] = None,
                  defaults: Optional[DocumentDefaults] = None) -> 'EPCISDocument':
        """Build a document and its events from a raw EPCIS JSON mapping

        Raises:
            UnknownEventTypeError: if an event of the body has no known type
            pydantic.ValidationError: if a field has the wrong JSON type
        """
        return cls.model_validate(copy.deepcopy(data or {}), context={'defaults': defaults})

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the document

        A single event (or none) goes under `epcisBody.event` when
        `use_event_list_by_default` is off, every other case uses
        `epcisBody.eventList`. No body key is written while the event list
        is unset.
        """
        output = super().to_dict()

        body = copy.deepcopy(self.body_extensions)
        if self.event_list is not None:
            events = [event.to_dict() for event in self.event_list]
            if not self.use_event_list_by_default and len(events) < 2:
                body['event'] = events[0] if events else {}
            else:
                body['eventList'] = events
        if body or self.event_list is not None:
            output['epcisBody'] = body
        return output

    def is_valid(self) -> bool:
        """Validate the serialized document

        Raises:
            EPCISValidationError: listing every violation found
        """
        return default_validator().assert_valid(self.to_dict())

    # Setters

    def set_type(self, value: str) -> 'EPCISDocument':
        return self._set('type', value)

    def set_context(self, value: Context) -> 'EPCISDocument':
        return self._set('context', value)

    def set_schema_version(self, value: str) -> 'EPCISDocument':
        return self._set('schema_version', value)

    def set_creation_date(self, value: str) -> 'EPCISDocument':
        return self._set('creation_date', value)

    def set_format(self, value: str) -> 'EPCISDocument':
        return self._set('format', value)

    def set_epcis_header(self, value: EPCISHeader) -> 'EPCISDocument':
        return self._set('epcis_header', value)

    def set_use_event_list_by_default(self, value: bool) -> 'EPCISDocument':
        return self._set('use_event_list_by_default', value)

    # Events

    def add_event(self, event: Event) -> 'EPCISDocument':
        return self._add('event_list', event)

    def add_event_list(self, events: List[Event]) -> 'EPCISDocument':
        return self._add_all('event_list', events)

    def remove_event(self, event: Event) -> 'EPCISDocument':
        return self._remove('event_list', event)

    def remove_event_list(self, events: List[Event]) -> 'EPCISDocument':
        return self._remove_all('event_list', events)

    def clear_event_list(self) -> 'EPCISDocument':
        return self._unset('event_list')
