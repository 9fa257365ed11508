"""
Pi-hole admin API client.

This package provides a Python interface to the statistics and control
endpoints of a Pi-hole's ``/admin/api.php``, returning typed records and
offering simple console presenters for them.
"""

__version__ = "0.1.0"

from .api_client import PiholeConnector
from .models import (
    PiholeType,
    PiholeVersion,
    PiholeSummary,
    GravityLastUpdated,
    GravityRelative,
    PiholeTimeData,
    PiholeTopItems,
    PiholeTopClients,
    PiholeForwardDestinations,
    PiholeQueryTypes,
    PiholeQueryLog,
    QueryLogEntry,
    AnswerType,
)
from .display import (
    sorted_by_frequency,
    show_summary,
    show_top_blocked,
    show_top_queries,
    show_top_clients,
)
from .export import export_json, export_query_log_csv, to_dict_list
from .exceptions import (
    PiholeError,
    PiholeAPIError,
    PiholeDataError,
    PiholeStatusError,
)

__all__ = [
    "PiholeConnector",
    "PiholeType",
    "PiholeVersion",
    "PiholeSummary",
    "GravityLastUpdated",
    "GravityRelative",
    "PiholeTimeData",
    "PiholeTopItems",
    "PiholeTopClients",
    "PiholeForwardDestinations",
    "PiholeQueryTypes",
    "PiholeQueryLog",
    "QueryLogEntry",
    "AnswerType",
    "sorted_by_frequency",
    "show_summary",
    "show_top_blocked",
    "show_top_queries",
    "show_top_clients",
    "export_json",
    "export_query_log_csv",
    "to_dict_list",
    "PiholeError",
    "PiholeAPIError",
    "PiholeDataError",
    "PiholeStatusError",
]
