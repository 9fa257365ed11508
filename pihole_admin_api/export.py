"""
Functions for exporting Pi-hole records to files.

Records are converted through their ``to_dict`` methods. Every record
uses the Pi-hole API's own field names as keys (``top_ads``, ``reply_NXDOMAIN``,
``forward_destinations``), so an exported record has the shape of the
response it was decoded from.
"""

import csv
import json
from typing import Any, Dict, List

from .models.query_log import PiholeQueryLog
from .logging import get_logger

logger = get_logger(__name__)

QUERY_LOG_FIELDS = ["timestamp", "query_type", "domain", "client", "answer_type"]


class PiholeEncoder(json.JSONEncoder):
    def default(self, obj):
        if hasattr(obj, "to_dict") and callable(getattr(obj, "to_dict")):
            return obj.to_dict()
        return super().default(obj)


def to_dict_list(records: List[Any]) -> List[Dict[str, Any]]:
    """
    Convert a list of Pi-hole records to a list of dictionaries.

    Plain dictionaries (e.g. results fetched with ``raw=True``) pass through
    unchanged; anything else is skipped.

    Args:
        records: Pi-hole model objects or dictionaries

    Returns:
        List of dictionaries
    """
    result = []

    for record in records:
        if hasattr(record, "to_dict") and callable(getattr(record, "to_dict")):
            result.append(record.to_dict())
        elif isinstance(record, dict):
            result.append(record)
        else:
            logger.debug(f"Skipping unsupported record type {type(record).__name__}")

    return result


def export_json(records: List[Any], path: str, indent: int = 2) -> None:
    """
    Export Pi-hole records to a JSON file.

    Args:
        records: Pi-hole model objects or dictionaries
        path: Path where the JSON file will be saved
        indent: Number of spaces for indentation in the JSON file (default: 2)
    """
    record_dicts = to_dict_list(records)

    with open(path, "w", encoding="utf-8") as jsonfile:
        json.dump(record_dicts, jsonfile, indent=indent, cls=PiholeEncoder)
    logger.info(f"Exported {len(record_dicts)} records to {path}")


def export_query_log_csv(query_log: PiholeQueryLog, path: str) -> None:
    """
    Export a query log to a CSV file, one row per query.

    Only the first five columns of each row are written, under the header
    ``timestamp, query_type, domain, client, answer_type``.

    Args:
        query_log: Query log returned by ``PiholeConnector.get_all_queries``
        path: Path where the CSV file will be saved

    Raises:
        PiholeDataError: If a row has fewer than five columns.
    """
    entries = query_log.entries

    with open(path, "w", newline="", encoding="utf-8") as csvfile:
        writer = csv.writer(csvfile)
        writer.writerow(QUERY_LOG_FIELDS)
        for entry in entries:
            writer.writerow(
                [entry.timestamp, entry.query_type, entry.domain,
                 entry.client, entry.answer_type])
    logger.info(f"Exported {len(entries)} queries to {path}")
