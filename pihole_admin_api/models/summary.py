"""
Models for the Pi-hole 24h summary and gravity list freshness.
"""

from dataclasses import dataclass, field, fields, asdict
from typing import Any, Dict, Mapping

from ..logging import get_logger, log_extra_fields
from ..utils import (
    freeze_mapping,
    map_api_data_to_model,
    require_object,
    require_str,
    require_int,
    require_bool,
)

logger = get_logger(__name__)


def _reply(api_name: str):
    return field(default="", metadata={"pihole_api_field": api_name})


@dataclass(frozen=True)
class GravityRelative:
    """Time since the gravity list was last rebuilt."""
    days: int = 0
    hours: int = 0
    minutes: int = 0

    @classmethod
    def from_api(cls, data: Any) -> "GravityRelative":
        if data is None:
            return cls()
        data = require_object(data, "gravity_last_updated.relative")
        return cls(
            days=require_int(data.get("days"), "relative.days"),
            hours=require_int(data.get("hours"), "relative.hours"),
            minutes=require_int(data.get("minutes"), "relative.minutes"),
        )


@dataclass(frozen=True)
class GravityLastUpdated:
    """
    Freshness of the gravity (blocklist) database.

    Attributes:
        file_exists: Whether the gravity database exists on the appliance.
        absolute: Unix timestamp of the last update.
        relative: Elapsed time since the last update.
    """
    file_exists: bool = False
    absolute: int = 0
    relative: GravityRelative = field(default_factory=GravityRelative)

    @classmethod
    def from_api(cls, data: Any) -> "GravityLastUpdated":
        if data is None:
            return cls()
        data = require_object(data, "gravity_last_updated")
        return cls(
            file_exists=require_bool(data.get("file_exists"), "file_exists"),
            absolute=require_int(data.get("absolute"), "absolute"),
            relative=GravityRelative.from_api(data.get("relative")),
        )


@dataclass(frozen=True)
class PiholeSummary:
    """
    24h aggregate statistics from the ``summary`` endpoint.

    Every counter is kept exactly as the API sends it, as text. The appliance
    pre-formats these values (thousands separators, rounded percentages), so
    they are not converted to numbers here.
    """
    domains_being_blocked: str = ""
    dns_queries_today: str = ""
    ads_blocked_today: str = ""
    ads_percentage_today: str = ""
    unique_domains: str = ""
    queries_forwarded: str = ""
    queries_cached: str = ""
    clients_ever_seen: str = ""
    unique_clients: str = ""
    dns_queries_all_types: str = ""

    # Per reply type counts
    reply_unknown: str = _reply("reply_UNKNOWN")
    reply_nodata: str = _reply("reply_NODATA")
    reply_nxdomain: str = _reply("reply_NXDOMAIN")
    reply_cname: str = _reply("reply_CNAME")
    reply_ip: str = _reply("reply_IP")
    reply_domain: str = _reply("reply_DOMAIN")
    reply_rrname: str = _reply("reply_RRNAME")
    reply_servfail: str = _reply("reply_SERVFAIL")
    reply_refused: str = _reply("reply_REFUSED")
    reply_notimp: str = _reply("reply_NOTIMP")
    reply_other: str = _reply("reply_OTHER")
    reply_dnssec: str = _reply("reply_DNSSEC")
    reply_none: str = _reply("reply_NONE")
    reply_blob: str = _reply("reply_BLOB")

    dns_queries_all_replies: str = ""
    privacy_level: str = ""
    status: str = ""
    gravity_last_updated: GravityLastUpdated = field(
        default_factory=GravityLastUpdated)

    # Store any extra fields that aren't explicitly defined
    _extra_fields: Mapping[str, Any] = field(
        default_factory=dict, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "_extra_fields", freeze_mapping(self._extra_fields))

    @classmethod
    def from_api(cls, data: Any) -> "PiholeSummary":
        """
        Build a summary from the decoded ``summary`` response.

        Raises:
            PiholeDataError: If the body is not an object or a counter is not text.
        """
        data = require_object(data, "summary")
        model_fields, extra_fields = map_api_data_to_model(data, cls)

        values = {}
        for f in fields(cls):
            if f.name in ("gravity_last_updated", "_extra_fields"):
                continue
            api_name = f.metadata.get("pihole_api_field", f.name)
            values[f.name] = require_str(model_fields.get(f.name), api_name)

        values["gravity_last_updated"] = GravityLastUpdated.from_api(
            model_fields.get("gravity_last_updated"))

        log_extra_fields(logger, cls.__name__, extra_fields)
        return cls(**values, _extra_fields=extra_fields)

    def to_dict(self) -> Dict[str, Any]:
        """
        Converts the summary back to the API's shape.

        Keys are the API field names (``reply_NXDOMAIN``, not ``reply_nxdomain``),
        followed by any extra fields the API sent.
        """
        data = {f.metadata.get("pihole_api_field", f.name): getattr(self, f.name)
                for f in fields(self) if f.name != "_extra_fields"}
        data["gravity_last_updated"] = asdict(self.gravity_last_updated)
        data.update(self._extra_fields)
        return data
