"""
Models for Pi-hole frequency statistics (time series, top lists, breakdowns).

Mappings are stored read-only; compare and hash records by their contents.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping

from ..utils import (
    freeze_mapping,
    require_object,
    require_count_map,
    require_number_map,
)


def _hash_mapping(mapping: Mapping[str, Any]) -> int:
    return hash(frozenset(mapping.items()))


@dataclass(frozen=True)
class PiholeTimeData:
    """
    Query and block counts per 10 minute bucket (``overTimeData10mins``).

    Keys are the bucket's Unix timestamp as sent by the API.
    """
    ads_over_time: Mapping[str, int] = field(default_factory=dict)
    domains_over_time: Mapping[str, int] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "ads_over_time", freeze_mapping(self.ads_over_time))
        object.__setattr__(
            self, "domains_over_time", freeze_mapping(self.domains_over_time))

    def __hash__(self):
        return hash((_hash_mapping(self.ads_over_time),
                     _hash_mapping(self.domains_over_time)))

    @classmethod
    def from_api(cls, data: Any) -> "PiholeTimeData":
        data = require_object(data, "overTimeData10mins")
        return cls(
            ads_over_time=require_count_map(
                data.get("ads_over_time"), "ads_over_time"),
            domains_over_time=require_count_map(
                data.get("domains_over_time"), "domains_over_time"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "ads_over_time": dict(self.ads_over_time),
            "domains_over_time": dict(self.domains_over_time),
        }


@dataclass(frozen=True)
class PiholeTopItems:
    """Most frequent queried and blocked domains (``topItems``), domain -> hits."""
    queries: Mapping[str, int] = field(default_factory=dict)
    blocked: Mapping[str, int] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "queries", freeze_mapping(self.queries))
        object.__setattr__(self, "blocked", freeze_mapping(self.blocked))

    def __hash__(self):
        return hash((_hash_mapping(self.queries), _hash_mapping(self.blocked)))

    @classmethod
    def from_api(cls, data: Any) -> "PiholeTopItems":
        data = require_object(data, "topItems")
        return cls(
            queries=require_count_map(data.get("top_queries"), "top_queries"),
            blocked=require_count_map(data.get("top_ads"), "top_ads"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {"top_queries": dict(self.queries), "top_ads": dict(self.blocked)}


@dataclass(frozen=True)
class PiholeTopClients:
    """Most active clients (``topClients``), client -> request count."""
    clients: Mapping[str, int] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "clients", freeze_mapping(self.clients))

    def __hash__(self):
        return _hash_mapping(self.clients)

    @classmethod
    def from_api(cls, data: Any) -> "PiholeTopClients":
        data = require_object(data, "topClients")
        return cls(clients=require_count_map(data.get("top_sources"), "top_sources"))

    def to_dict(self) -> Dict[str, Any]:
        return {"top_sources": dict(self.clients)}


@dataclass(frozen=True)
class PiholeForwardDestinations:
    """Share of queries (percent) handled by each upstream destination."""
    destinations: Mapping[str, float] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "destinations", freeze_mapping(self.destinations))

    def __hash__(self):
        return _hash_mapping(self.destinations)

    @classmethod
    def from_api(cls, data: Any) -> "PiholeForwardDestinations":
        data = require_object(data, "getForwardDestinations")
        return cls(destinations=require_number_map(
            data.get("forward_destinations"), "forward_destinations"))

    def to_dict(self) -> Dict[str, Any]:
        return {"forward_destinations": dict(self.destinations)}


@dataclass(frozen=True)
class PiholeQueryTypes:
    """Share of queries (percent) per DNS record type, e.g. ``"A (IPv4)"``."""
    types: Mapping[str, float] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "types", freeze_mapping(self.types))

    def __hash__(self):
        return _hash_mapping(self.types)

    @classmethod
    def from_api(cls, data: Any) -> "PiholeQueryTypes":
        data = require_object(data, "getQueryTypes")
        return cls(types=require_number_map(data.get("querytypes"), "querytypes"))

    def to_dict(self) -> Dict[str, Any]:
        return {"querytypes": dict(self.types)}
