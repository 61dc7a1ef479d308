"""Test configuration and fixtures"""

import copy
import json
import logging
import logging.handlers
from pathlib import Path

import pytest

from epcis_doc.config.settings import DocumentDefaults

DATA_DIR = Path(__file__).parent / "data"

DOCUMENT_FILES = [
    "EPCISDocument-ObjectEvent.json",
    "EPCISDocument-AggregationEvent.json",
    "EPCISDocument-TransactionEvent.json",
    "EPCISDocument-TransformationEvent.json",
    "EPCISDocument-AssociationEvent.json",
    "EPCISQueryDocument.json",
    "EPCISMasterDataDocument.json",
]


def load_data(name):
    """Load a sample document from the data directory"""
    return json.loads((DATA_DIR / name).read_text(encoding="utf-8"))


@pytest.fixture
def object_event_document():
    """EPCISDocument with one ObjectEvent carrying extensions at several levels"""
    return load_data("EPCISDocument-ObjectEvent.json")


@pytest.fixture
def aggregation_event_document():
    return load_data("EPCISDocument-AggregationEvent.json")


@pytest.fixture
def transaction_event_document():
    return load_data("EPCISDocument-TransactionEvent.json")


@pytest.fixture
def transformation_event_document():
    return load_data("EPCISDocument-TransformationEvent.json")


@pytest.fixture
def association_event_document():
    return load_data("EPCISDocument-AssociationEvent.json")


@pytest.fixture
def query_document():
    return load_data("EPCISQueryDocument.json")


@pytest.fixture
def master_data_document():
    return load_data("EPCISMasterDataDocument.json")


@pytest.fixture
def minimal_object_event():
    """Plain ObjectEvent without any extension"""
    return {
        "eventID": "test:event:id",
        "type": "ObjectEvent",
        "action": "OBSERVE",
        "bizStep": "urn:epcglobal:cbv:bizstep:shipping",
        "disposition": "urn:epcglobal:cbv:disp:in_transit",
        "epcList": ["urn:epc:id:sgtin:0614141.107346.2017"],
        "eventTime": "2005-04-03T20:33:31.116000-06:00",
        "eventTimeZoneOffset": "-06:00",
        "readPoint": {"id": "urn:epc:id:sgln:0614141.07346.1234"},
        "bizTransactionList": [
            {
                "type": "urn:epcglobal:cbv:btt:po",
                "bizTransaction": "http://transaction.acme.com/po/12345678",
            }
        ],
    }


@pytest.fixture
def minimal_document(minimal_object_event):
    """EPCISDocument wrapping the minimal ObjectEvent, context declares the evt prefix"""
    return {
        "@context": [
            "https://ref.gs1.org/standards/epcis/epcis-context.jsonld",
            {"evt": "https://evt.example.org/epcis/"},
        ],
        "type": "EPCISDocument",
        "schemaVersion": "2.0",
        "creationDate": "2005-07-11T11:30:47.0Z",
        "epcisBody": {"eventList": [copy.deepcopy(minimal_object_event)]},
    }


@pytest.fixture
def single_event_defaults():
    """Defaults serializing a lone event under epcisBody.event"""
    return DocumentDefaults(
        schema_version="2.0",
        context="https://ref.gs1.org/standards/epcis/epcis-context.jsonld",
        use_event_list_by_default=False,
    )


@pytest.fixture
def restore_logging():
    """Drop the handlers installed by setup_logging once a test is done with them"""
    root_logger = logging.getLogger()
    level = root_logger.level
    yield root_logger
    for handler in list(root_logger.handlers):
        # pytest capture handlers are subclasses and stay in place
        if type(handler) in (logging.StreamHandler, logging.handlers.RotatingFileHandler):
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.setLevel(level)
