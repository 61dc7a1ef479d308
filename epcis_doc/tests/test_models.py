"""Tests for the EPCIS entity model"""

import json

import pytest

from epcis_doc.config.settings import DocumentDefaults, Settings
from epcis_doc.errors import EPCISValidationError, UnknownEventTypeError
from epcis_doc.models import (
    AggregationEvent,
    AssociationEvent,
    BizLocation,
    BizTransactionElement,
    EPCISDocument,
    EPCISHeader,
    ObjectEvent,
    PersistentDisposition,
    QuantityElement,
    ReadPoint,
    SensorElement,
    SensorReport,
    TransactionEvent,
    TransformationEvent,
    event_from_dict,
)

from .conftest import DOCUMENT_FILES, load_data


def build_object_event(epc="urn:epc:id:sgtin:0614141.107346.2017"):
    return (
        ObjectEvent()
        .set_event_time("2005-04-03T20:33:31.116-06:00")
        .set_event_time_zone_offset("-06:00")
        .set_action("OBSERVE")
        .add_epc(epc)
    )


class TestRoundTrip:
    """from_dict followed by to_dict gives back the same value"""

    @pytest.mark.parametrize("name", DOCUMENT_FILES)
    def test_sample_documents(self, name):
        raw = load_data(name)
        assert EPCISDocument.from_dict(raw).to_dict() == raw

    def test_single_event_body(self, minimal_document):
        minimal_document["epcisBody"] = {"event": minimal_document["epcisBody"]["eventList"][0]}

        document = EPCISDocument.from_dict(minimal_document)

        assert document.use_event_list_by_default is False
        assert document.to_dict() == minimal_document

    def test_empty_single_event(self, minimal_document):
        minimal_document["epcisBody"] = {"event": {}}

        document = EPCISDocument.from_dict(minimal_document)

        assert document.event_list == []
        assert document.to_dict() == minimal_document

    def test_raw_value_is_not_modified(self, object_event_document):
        raw = json.loads(json.dumps(object_event_document))
        document = EPCISDocument.from_dict(raw)
        document.event_list[0].add_epc("urn:epc:id:sgtin:0614141.107346.9999")
        assert raw == object_event_document

    def test_numbers_keep_their_type(self, object_event_document):
        document = EPCISDocument.from_dict(object_event_document)
        reports = document.event_list[0].sensor_element_list[0].sensor_report

        assert reports[0].value == 26 and isinstance(reports[0].value, int)
        assert isinstance(reports[1].value, float)

    def test_events_are_typed(self, object_event_document, query_document):
        document = EPCISDocument.from_dict(object_event_document)
        event = document.event_list[0]

        assert isinstance(event, ObjectEvent)
        assert isinstance(event.read_point, ReadPoint)
        assert isinstance(event.quantity_list[0], QuantityElement)
        assert event.read_point.extensions == {"example:extension": "factoryId"}
        assert event.extensions["evt:factoryId"] == "foobar"

        query = EPCISDocument.from_dict(query_document)
        assert query.event_list is None
        assert "queryResults" in query.body_extensions

    def test_to_json(self, minimal_document):
        document = EPCISDocument.from_dict(minimal_document)
        assert json.loads(document.to_json(indent=2)) == minimal_document


class TestDefaults:
    """Defaulted fields are filled only when absent"""

    def test_absent_fields_are_filled(self, single_event_defaults):
        output = EPCISDocument.from_dict({}, defaults=single_event_defaults).to_dict()

        assert output["type"] == "EPCISDocument"
        assert output["schemaVersion"] == "2.0"
        assert output["@context"] == "https://ref.gs1.org/standards/epcis/epcis-context.jsonld"
        assert output["creationDate"].endswith("Z")
        assert "epcisBody" not in output

    def test_present_fields_are_kept(self, single_event_defaults):
        raw = {
            "type": "EPCISDocument",
            "schemaVersion": "1.2",
            "@context": {"example": "http://ns.example.com/epcis/"},
            "creationDate": "2005-07-11T11:30:47.0Z",
        }
        assert EPCISDocument.from_dict(raw, defaults=single_event_defaults).to_dict() == raw

    def test_defaults_without_context(self):
        defaults = DocumentDefaults(schema_version=None, context=None)
        output = EPCISDocument.create(defaults).to_dict()

        assert "@context" not in output
        assert "schemaVersion" not in output

    def test_settings_are_used_without_explicit_defaults(self, monkeypatch):
        custom = Settings(
            _env_file=None,
            EPCIS_DOCUMENT_SCHEMA_VERSION="2.1",
            EPCIS_DOCUMENT_CONTEXT="https://example.org/context.jsonld",
            USE_EVENT_LIST_BY_DEFAULT=False,
        )
        monkeypatch.setattr("epcis_doc.models.document.settings", custom)

        document = EPCISDocument().add_event(build_object_event())
        output = document.to_dict()

        assert output["schemaVersion"] == "2.1"
        assert output["@context"] == "https://example.org/context.jsonld"
        assert "event" in output["epcisBody"]

    def test_mutation_is_reflected_on_next_serialization(self, single_event_defaults):
        document = EPCISDocument.create(single_event_defaults)
        document.set_schema_version("2.1").set_format("application/ld+json")

        output = document.to_dict()

        assert output["schemaVersion"] == "2.1"
        assert output["format"] == "application/ld+json"


class TestBodyShape:
    """Single event or event list, depending on the toggle and the event count"""

    def test_flip_at_second_event(self, single_event_defaults):
        first = build_object_event()
        second = build_object_event("urn:epc:id:sgtin:0614141.107346.2018")
        document = EPCISDocument.create(single_event_defaults).add_event(first)

        assert document.to_dict()["epcisBody"] == {"event": first.to_dict()}

        document.add_event(second)
        assert document.to_dict()["epcisBody"] == {"eventList": [first.to_dict(), second.to_dict()]}

        document.remove_event(second)
        assert document.to_dict()["epcisBody"] == {"event": first.to_dict()}

    def test_no_event_with_toggle_off(self, single_event_defaults):
        event = build_object_event()
        document = EPCISDocument.create(single_event_defaults).add_event(event).remove_event(event)

        assert document.to_dict()["epcisBody"] == {"event": {}}

    def test_event_list_by_default(self):
        event = build_object_event()
        document = EPCISDocument.create(DocumentDefaults()).add_event(event)

        assert document.to_dict()["epcisBody"] == {"eventList": [event.to_dict()]}

        document.set_use_event_list_by_default(False)
        assert document.to_dict()["epcisBody"] == {"event": event.to_dict()}

    def test_cleared_event_list_writes_no_body(self, single_event_defaults):
        document = EPCISDocument.create(single_event_defaults).add_event_list([
            build_object_event(),
            build_object_event("urn:epc:id:sgtin:0614141.107346.2018"),
        ])

        document.clear_event_list()

        assert document.event_list is None
        assert "epcisBody" not in document.to_dict()

    def test_remove_event_list(self):
        first = build_object_event()
        second = build_object_event("urn:epc:id:sgtin:0614141.107346.2018")
        document = EPCISDocument.create(DocumentDefaults()).add_event_list([first, second])

        document.remove_event_list([first, second])

        assert document.to_dict()["epcisBody"] == {"eventList": []}

    def test_header_round_trip(self, master_data_document):
        header = EPCISHeader().set_epcis_master_data(
            {"vocabularyList": master_data_document["epcisBody"]["vocabularyList"]}
        )
        document = EPCISDocument.create(DocumentDefaults()).set_epcis_header(header)

        output = document.to_dict()

        assert output["epcisHeader"] == {"epcisMasterData": {"vocabularyList": master_data_document["epcisBody"]["vocabularyList"]}}
        assert EPCISDocument.from_dict(output).to_dict() == output


class TestEvents:
    """Test cases for the event hierarchy"""

    @pytest.mark.parametrize("event_type, model", [
        ("ObjectEvent", ObjectEvent),
        ("AggregationEvent", AggregationEvent),
        ("TransactionEvent", TransactionEvent),
        ("TransformationEvent", TransformationEvent),
        ("AssociationEvent", AssociationEvent),
    ])
    def test_dispatch_on_type(self, event_type, model):
        event = event_from_dict({"type": event_type, "eventTime": "2019-11-01T14:00:00.000+01:00"})

        assert type(event) is model
        assert event.to_dict() == {"type": event_type, "eventTime": "2019-11-01T14:00:00.000+01:00"}

    def test_legacy_discriminator(self):
        event = event_from_dict({"isA": "AggregationEvent", "action": "ADD"})

        assert isinstance(event, AggregationEvent)
        assert event.to_dict() == {"type": "AggregationEvent", "action": "ADD"}

    @pytest.mark.parametrize("raw", [{}, {"type": "SensorEvent"}, {"isA": 3}])
    def test_unknown_event_type(self, raw):
        with pytest.raises(UnknownEventTypeError):
            event_from_dict(raw)

    def test_unknown_event_type_in_document(self, minimal_document):
        minimal_document["epcisBody"]["eventList"][0]["type"] = "SensorEvent"

        with pytest.raises(UnknownEventTypeError):
            EPCISDocument.from_dict(minimal_document)

    def test_type_is_always_written(self):
        assert TransformationEvent().to_dict() == {"type": "TransformationEvent"}

    def test_read_point_setters(self):
        by_id = ObjectEvent().set_read_point_id("urn:epc:id:sgln:0614141.07346.1234")
        by_element = ObjectEvent().set_read_point(ReadPoint(id="urn:epc:id:sgln:0614141.07346.1234"))

        assert by_id.to_dict() == by_element.to_dict()
        assert by_id.to_dict()["readPoint"] == {"id": "urn:epc:id:sgln:0614141.07346.1234"}

    def test_biz_location_setters(self):
        event = AggregationEvent().set_biz_location_id("urn:epc:id:sgln:9529999.99999.0")
        assert event.biz_location == BizLocation.from_id("urn:epc:id:sgln:9529999.99999.0")

        event.set_biz_location(BizLocation(id="urn:epc:id:sgln:0614141.07346.1234"))
        assert event.to_dict()["bizLocation"] == {"id": "urn:epc:id:sgln:0614141.07346.1234"}

    def test_list_accessors(self):
        event = ObjectEvent().add_epc_list([
            "urn:epc:id:sgtin:0614141.107346.2017",
            "urn:epc:id:sgtin:0614141.107346.2018",
            "urn:epc:id:sgtin:0614141.107346.2017",
        ])

        event.remove_epc("urn:epc:id:sgtin:0614141.107346.2017")
        assert event.epc_list == [
            "urn:epc:id:sgtin:0614141.107346.2018",
            "urn:epc:id:sgtin:0614141.107346.2017",
        ]

        event.remove_epc("urn:epc:id:sgtin:0614141.107346.0000")
        assert len(event.epc_list) == 2

        event.clear_epc_list()
        assert "epcList" not in event.to_dict()

    def test_remove_uses_structural_equality(self):
        event = ObjectEvent().add_quantity(
            QuantityElement(epc_class="urn:epc:class:lgtin:4012345.012345.998877", quantity=200, uom="KGM")
        )

        event.remove_quantity(
            QuantityElement(epcClass="urn:epc:class:lgtin:4012345.012345.998877", quantity=200, uom="KGM")
        )

        assert event.quantity_list == []

    def test_remove_from_unset_list(self):
        event = TransactionEvent().remove_biz_transaction(BizTransactionElement(type="po"))
        assert event.biz_transaction_list is None

    def test_parent_and_children(self):
        event = (
            AggregationEvent()
            .set_parent_id("urn:epc:id:sscc:0614141.1234567890")
            .add_child_epc("urn:epc:id:sgtin:9520001.012346.10000001001")
            .add_child_quantity(QuantityElement(epc_class="urn:epc:idpat:sgtin:4012345.098765.*", quantity=10))
        )

        assert event.to_dict() == {
            "type": "AggregationEvent",
            "parentID": "urn:epc:id:sscc:0614141.1234567890",
            "childEPCs": ["urn:epc:id:sgtin:9520001.012346.10000001001"],
            "childQuantityList": [{"epcClass": "urn:epc:idpat:sgtin:4012345.098765.*", "quantity": 10}],
        }

    def test_transformation_lists(self):
        event = (
            TransformationEvent()
            .add_input_epc("urn:epc:id:sgtin:4012345.011122.25")
            .add_output_epc_list(["urn:epc:id:sgtin:4012345.077889.25"])
            .add_input_quantity(QuantityElement(epc_class="urn:epc:class:lgtin:4012345.011111.4444", quantity=10))
            .set_transformation_id("urn:epc:id:gdti:0614141.12345.400")
            .set_ilmd({"example:batch": "XYZ"})
        )

        output = event.to_dict()

        assert output["inputEPCList"] == ["urn:epc:id:sgtin:4012345.011122.25"]
        assert output["outputEPCList"] == ["urn:epc:id:sgtin:4012345.077889.25"]
        assert output["inputQuantityList"][0]["quantity"] == 10
        assert output["transformationID"] == "urn:epc:id:gdti:0614141.12345.400"
        assert output["ilmd"] == {"example:batch": "XYZ"}

    def test_nested_elements(self):
        event = (
            ObjectEvent()
            .add_sensor_element(
                SensorElement().add_sensor_report(SensorReport(type="Temperature", value=26, uom="CEL"))
            )
            .set_persistent_disposition(PersistentDisposition().add_set("completeness_verified"))
        )

        assert event.to_dict()["sensorElementList"] == [
            {"sensorReport": [{"type": "Temperature", "value": 26, "uom": "CEL"}]}
        ]
        assert event.to_dict()["persistentDisposition"] == {"set": ["completeness_verified"]}


class TestExtensions:
    """Unknown keys are kept verbatim as extensions"""

    def test_set_and_remove_extension(self):
        event = ObjectEvent().set_extension("example:myField", {"example:nested": [1, 2]})

        assert event.extensions == {"example:myField": {"example:nested": [1, 2]}}
        assert event.to_dict()["example:myField"] == {"example:nested": [1, 2]}

        event.remove_extension("example:myField")
        assert event.extensions == {}
        assert "example:myField" not in event.to_dict()

    @pytest.mark.parametrize("key", ["eventID", "event_id", "type"])
    def test_standard_field_is_not_an_extension(self, key):
        with pytest.raises(ValueError):
            ObjectEvent().set_extension(key, "value")

    def test_extension_on_document(self, single_event_defaults):
        document = EPCISDocument.create(single_event_defaults).set_extension("example:note", "hello")
        assert document.to_dict()["example:note"] == "hello"


class TestDocumentValidity:
    """is_valid checks the serialized document"""

    def test_built_document_is_valid(self):
        event = (
            build_object_event()
            .add_epc("urn:epc:id:sgtin:0614141.107346.2021")
            .set_event_id("ni:///sha-256;87b5f18a69993f0052046d4687dfacdf48f?ver=CBV2.0")
            .set_biz_step("shipping")
            .set_disposition("in_transit")
            .set_read_point_id("urn:epc:id:sgln:0614141.07346.1234")
            .add_biz_transaction(BizTransactionElement(
                type="urn:epcglobal:cbv:btt:po",
                bizTransaction="http://transaction.acme.com/po/12345678",
            ))
        )
        document = (
            EPCISDocument.create(DocumentDefaults())
            .set_creation_date("2005-07-11T11:30:47+00:00")
            .add_event(event)
        )

        assert document.is_valid() is True

    def test_generated_creation_date_is_valid(self):
        document = EPCISDocument.create(DocumentDefaults()).add_event(build_object_event())
        assert document.is_valid() is True

    def test_invalid_document(self):
        document = EPCISDocument.create(DocumentDefaults()).add_event(
            build_object_event().set_action("OBSERVED")
        )

        with pytest.raises(EPCISValidationError) as exc_info:
            document.is_valid()
        assert exc_info.value.errors[0].path == "$.epcisBody.eventList[0].action"

    def test_empty_document_is_not_valid(self):
        document = EPCISDocument.create(DocumentDefaults())

        with pytest.raises(EPCISValidationError) as exc_info:
            document.is_valid()
        assert "epcisBody" in str(exc_info.value)

    def test_emptied_single_event_document_is_not_valid(self, single_event_defaults):
        event = build_object_event()
        document = EPCISDocument.create(single_event_defaults).add_event(event).remove_event(event)

        with pytest.raises(EPCISValidationError) as exc_info:
            document.is_valid()
        assert [error.path for error in exc_info.value.errors] == ["$.epcisBody.event"]
