"""
Data models for Pi-hole admin API responses.

.. warning::
    The dataclasses defined in this module follow the response shapes of the
    Pi-hole v5 ``/admin/api.php`` endpoint. The exact set of fields can vary
    between Pi-hole releases and between the PHP and FTL backends.

    *   Missing fields decode to an empty default (``""``, ``0``, ``{}``).
    *   Fields the models do not declare are kept in the read-only
        ``_extra_fields`` mapping where the model supports it (``PiholeSummary``).
    *   Records are frozen: mappings are read-only views and query log rows
        are tuples.
    *   A field present with the wrong JSON type raises ``PiholeDataError``.

    For the exact data returned by the appliance, call the API client
    methods with ``raw=True``, which returns the decoded JSON unchanged.
"""

from .backend import PiholeType, PiholeVersion
from .summary import PiholeSummary, GravityLastUpdated, GravityRelative
from .stats import (
    PiholeTimeData,
    PiholeTopItems,
    PiholeTopClients,
    PiholeForwardDestinations,
    PiholeQueryTypes,
)
from .query_log import PiholeQueryLog, QueryLogEntry, AnswerType

__all__ = [
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
]
