import pytest

from pihole_admin_api import PiholeConnector

from .constants import HOST, TOKEN


@pytest.fixture
def connector():
    return PiholeConnector(HOST, token=TOKEN)


@pytest.fixture
def anonymous_connector():
    return PiholeConnector(HOST)


@pytest.fixture
def summary_payload():
    return {
        "domains_being_blocked": "123,456",
        "dns_queries_today": "24,180",
        "ads_blocked_today": "3,025",
        "ads_percentage_today": "12.5",
        "unique_domains": "2,291",
        "queries_forwarded": "13,905",
        "queries_cached": "7,180",
        "clients_ever_seen": "14",
        "unique_clients": "11",
        "dns_queries_all_types": "24,180",
        "reply_UNKNOWN": "0",
        "reply_NODATA": "1,022",
        "reply_NXDOMAIN": "412",
        "reply_CNAME": "8,940",
        "reply_IP": "12,070",
        "reply_DOMAIN": "201",
        "reply_RRNAME": "0",
        "reply_SERVFAIL": "3",
        "reply_REFUSED": "0",
        "reply_NOTIMP": "0",
        "reply_OTHER": "0",
        "reply_DNSSEC": "0",
        "reply_NONE": "0",
        "reply_BLOB": "0",
        "dns_queries_all_replies": "24,180",
        "privacy_level": "0",
        "status": "enabled",
        "gravity_last_updated": {
            "file_exists": True,
            "absolute": 1697414401,
            "relative": {"days": 3, "hours": 7, "minutes": 12},
        },
    }
