import dataclasses

import pytest

from pihole_admin_api import (
    PiholeSummary,
    GravityLastUpdated,
    PiholeTimeData,
    PiholeTopItems,
    PiholeTopClients,
    PiholeForwardDestinations,
    PiholeQueryTypes,
    PiholeQueryLog,
    PiholeType,
    PiholeVersion,
    QueryLogEntry,
    AnswerType,
    PiholeDataError,
)


def test_summary_keeps_counters_as_text(summary_payload):
    summary = PiholeSummary.from_api(summary_payload)

    assert summary.domains_being_blocked == "123,456"
    assert summary.ads_percentage_today == "12.5"
    assert summary.clients_ever_seen == "14"
    assert summary.reply_unknown == "0"
    assert summary.reply_cname == "8,940"
    assert summary.reply_blob == "0"
    assert summary.privacy_level == "0"
    assert summary.status == "enabled"
    for f in dataclasses.fields(PiholeSummary):
        if f.name not in ("gravity_last_updated", "_extra_fields"):
            assert isinstance(getattr(summary, f.name), str)


def test_summary_preserves_every_field(summary_payload):
    summary = PiholeSummary.from_api(summary_payload)

    assert summary.to_dict() == summary_payload


def test_summary_gravity(summary_payload):
    gravity = PiholeSummary.from_api(summary_payload).gravity_last_updated

    assert gravity.file_exists is True
    assert gravity.absolute == 1697414401
    assert (gravity.relative.days, gravity.relative.hours, gravity.relative.minutes) == (3, 7, 12)


def test_summary_missing_fields_default_to_empty():
    summary = PiholeSummary.from_api({"dns_queries_today": "5"})

    assert summary.dns_queries_today == "5"
    assert summary.ads_blocked_today == ""
    assert summary.gravity_last_updated == GravityLastUpdated()


def test_summary_numeric_counter_is_rejected(summary_payload):
    summary_payload["dns_queries_today"] = 24180
    with pytest.raises(PiholeDataError):
        PiholeSummary.from_api(summary_payload)


def test_summary_extra_fields(summary_payload):
    summary_payload["reply_EXTRA"] = "1"
    summary = PiholeSummary.from_api(summary_payload)

    assert summary._extra_fields == {"reply_EXTRA": "1"}
    assert summary.to_dict()["reply_EXTRA"] == "1"


def test_summary_is_immutable(summary_payload):
    summary = PiholeSummary.from_api(summary_payload)
    with pytest.raises(dataclasses.FrozenInstanceError):
        summary.status = "disabled"


def test_type_and_version():
    assert PiholeType.from_api({"type": "FTL"}) == PiholeType(type="FTL")
    assert PiholeVersion.from_api({"version": 3}).version == 3.0


def test_version_must_be_numeric():
    with pytest.raises(PiholeDataError):
        PiholeVersion.from_api({"version": "three"})


def test_time_data_missing_mapping_is_empty():
    time_data = PiholeTimeData.from_api({"ads_over_time": {"1697414400": 2}})

    assert time_data.ads_over_time == {"1697414400": 2}
    assert time_data.domains_over_time == {}


def test_top_items_php_empty_array():
    top = PiholeTopItems.from_api({"top_queries": [], "top_ads": []})

    assert top.queries == {}
    assert top.blocked == {}


def test_top_items_rejects_fractional_counts():
    with pytest.raises(PiholeDataError):
        PiholeTopItems.from_api({"top_queries": {"example.com": 1.5}})


def test_top_items_rejects_boolean_counts():
    with pytest.raises(PiholeDataError):
        PiholeTopItems.from_api({"top_ads": {"ads.example.net": True}})


def test_top_items_keeps_order():
    top = PiholeTopItems.from_api({"top_queries": {"b.com": 1, "a.com": 9}})
    assert list(top.queries) == ["b.com", "a.com"]


def test_percentages_are_floats():
    destinations = PiholeForwardDestinations.from_api(
        {"forward_destinations": {"cache|cache": 40}})
    types = PiholeQueryTypes.from_api({"querytypes": {"A (IPv4)": 55.25}})

    assert destinations.destinations == {"cache|cache": 40.0}
    assert isinstance(destinations.destinations["cache|cache"], float)
    assert types.types["A (IPv4)"] == 55.25


def test_query_log_entries():
    log = PiholeQueryLog.from_api({"data": [
        ["1697414401", "A", "example.com", "192.168.1.20", "2"],
        ["1697414402", "A", "ads.example.net", "192.168.1.20", "4", "extra"],
        ["1697414403", "A", "odd.example", "192.168.1.20", "9"],
    ]})
    entries = log.entries

    assert len(log) == 3
    assert entries[0] == QueryLogEntry(
        "1697414401", "A", "example.com", "192.168.1.20", "2")
    assert entries[0].answer is AnswerType.FORWARDED
    assert not entries[0].is_blocked
    assert entries[1].answer is AnswerType.WILDCARD_BLOCKED
    assert entries[1].is_blocked
    assert entries[2].answer is None


def test_query_log_short_row():
    log = PiholeQueryLog.from_api({"data": [["1697414401", "A"]]})
    with pytest.raises(PiholeDataError):
        log.entries


def test_query_log_rejects_non_text_values():
    with pytest.raises(PiholeDataError):
        PiholeQueryLog.from_api({"data": [[1697414401, "A", "x", "y", "1"]]})


def test_query_log_missing_data():
    assert PiholeQueryLog.from_api({}).data == ()


@pytest.mark.parametrize("body", [[], "text", 3, None])
def test_non_object_bodies_rejected(body):
    with pytest.raises(PiholeDataError):
        PiholeSummary.from_api(body)


def test_mappings_are_read_only():
    top = PiholeTopItems.from_api({"top_queries": {"a.com": 1}})

    with pytest.raises(TypeError):
        top.queries["b.com"] = 2
    with pytest.raises(TypeError):
        del top.queries["a.com"]
    assert top.queries == {"a.com": 1}


def test_records_copy_caller_mappings():
    counts = {"192.168.1.20": 4}
    clients = PiholeTopClients(clients=counts)
    counts["192.168.1.21"] = 9

    assert clients.clients == {"192.168.1.20": 4}


def test_summary_extra_fields_are_read_only(summary_payload):
    summary_payload["reply_EXTRA"] = "1"
    summary = PiholeSummary.from_api(summary_payload)

    with pytest.raises(TypeError):
        summary._extra_fields["reply_EXTRA"] = "2"


def test_query_log_rows_are_tuples():
    log = PiholeQueryLog(data=[["1697414401", "A", "example.com", "192.168.1.20", "2"]])

    assert log.data == (("1697414401", "A", "example.com", "192.168.1.20", "2"),)
    with pytest.raises(TypeError):
        log.data[0][2] = "other.example"


def test_records_are_value_objects(summary_payload):
    a = PiholeTopItems(queries={"a.com": 1, "b.com": 2})
    b = PiholeTopItems.from_api({"top_queries": {"b.com": 2, "a.com": 1}})

    assert a == b
    assert hash(a) == hash(b)
    assert len({a, b, PiholeTopItems()}) == 2
    assert hash(PiholeTimeData()) == hash(PiholeTimeData())
    assert hash(PiholeQueryTypes(types={"A (IPv4)": 1.0})) == hash(
        PiholeQueryTypes.from_api({"querytypes": {"A (IPv4)": 1}}))
    assert hash(PiholeSummary.from_api(summary_payload)) == hash(
        PiholeSummary.from_api(summary_payload))
    assert hash(PiholeQueryLog(data=[["1", "A", "a.com", "c", "2"]])) == hash(
        PiholeQueryLog.from_api({"data": [["1", "A", "a.com", "c", "2"]]}))


def test_summary_to_dict_uses_api_names(summary_payload):
    data = PiholeSummary.from_api(summary_payload).to_dict()

    assert data["reply_NXDOMAIN"] == "412"
    assert "reply_nxdomain" not in data
