"""
Utility functions for decoding Pi-hole API responses into models.
"""

import inspect
import dataclasses
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Optional, Type, Tuple

from .logging import get_logger
from .exceptions import PiholeDataError

logger = get_logger(__name__)


def get_api_field_mapping(model_class: Type) -> Dict[str, str]:
    """
    Create a mapping between API field names and model attribute names.

    Examines dataclass fields with metadata to find mappings between
    API field names (like 'reply_NXDOMAIN') and Python attribute names (like 'reply_nxdomain').

    Args:
        model_class: The dataclass model to examine for field mappings

    Returns:
        Dictionary mapping Pi-hole API field names to Python model attribute names
    """
    if not dataclasses.is_dataclass(model_class):
        return {}

    field_mapping = {}

    for field in dataclasses.fields(model_class):
        if "pihole_api_field" in field.metadata:
            field_mapping[field.metadata["pihole_api_field"]] = field.name

    return field_mapping


def map_api_data_to_model(
    data: Dict[str, Any], model_class: Type
) -> Tuple[Dict[str, Any], Dict[str, Any]]:
    """
    Maps API data to model fields, separating model fields from extra fields.

    Args:
        data: Input dictionary from API response
        model_class: The dataclass model to map data to

    Returns:
        Tuple containing (model_fields, extra_fields) where:
            - model_fields: Dictionary of fields that map to the model's attributes
            - extra_fields: Dictionary of extra fields that don't directly map to the model
    """
    signature = inspect.signature(model_class.__init__)
    valid_params = set(signature.parameters.keys())
    valid_params.discard("self")
    valid_params.discard("_extra_fields")

    field_map = get_api_field_mapping(model_class)

    model_fields = {}
    extra_fields = {}

    for api_key, value in data.items():
        mapped_key = None

        if api_key in field_map and field_map[api_key] in valid_params:
            mapped_key = field_map[api_key]
        elif api_key in valid_params:
            mapped_key = api_key

        if mapped_key is not None:
            model_fields[mapped_key] = value
        else:
            extra_fields[api_key] = value

    return model_fields, extra_fields


def require_object(data: Any, what: str) -> Dict[str, Any]:
    """
    Ensure a decoded JSON value is an object.

    The admin API answers ``[]`` to protected endpoints when the token is
    missing or wrong, so that case gets its own message.

    Raises:
        PiholeDataError: If ``data`` is not a JSON object.
    """
    if isinstance(data, dict):
        return data
    if isinstance(data, list):
        raise PiholeDataError(
            f"Expected a JSON object for {what}, got an array "
            "(is the API token missing or wrong?)"
        )
    raise PiholeDataError(
        f"Expected a JSON object for {what}, got {type(data).__name__}"
    )


def require_str(value: Any, what: str) -> str:
    """Return ``value`` unchanged if it is text; ``None`` decodes to ``""``."""
    if value is None:
        return ""
    if not isinstance(value, str):
        raise PiholeDataError(
            f"Expected text for {what}, got {type(value).__name__}: {value!r}"
        )
    return value


def require_int(value: Any, what: str) -> int:
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise PiholeDataError(
            f"Expected an integer for {what}, got {type(value).__name__}: {value!r}"
        )
    return value


def require_bool(value: Any, what: str) -> bool:
    if value is None:
        return False
    if not isinstance(value, bool):
        raise PiholeDataError(
            f"Expected a boolean for {what}, got {type(value).__name__}: {value!r}"
        )
    return value


def require_number(value: Any, what: str) -> float:
    if value is None:
        return 0.0
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise PiholeDataError(
            f"Expected a number for {what}, got {type(value).__name__}: {value!r}"
        )
    return float(value)


def require_count_map(value: Any, what: str) -> Dict[str, int]:
    """
    Decode a ``name -> count`` mapping.

    A missing or ``null`` mapping decodes to an empty dict. Key order is
    preserved as sent by the API.
    """
    if value is None:
        return {}
    if isinstance(value, list) and not value:
        # PHP serializes an empty associative array as []
        return {}
    if not isinstance(value, dict):
        raise PiholeDataError(
            f"Expected a mapping for {what}, got {type(value).__name__}"
        )
    return {k: require_int(v, f"{what}[{k!r}]") for k, v in value.items()}


def require_number_map(value: Any, what: str) -> Dict[str, float]:
    """Decode a ``name -> percentage`` mapping."""
    if value is None:
        return {}
    if isinstance(value, list) and not value:
        return {}
    if not isinstance(value, dict):
        raise PiholeDataError(
            f"Expected a mapping for {what}, got {type(value).__name__}"
        )
    return {k: require_number(v, f"{what}[{k!r}]") for k, v in value.items()}


def require_str_map(value: Any, what: str) -> Dict[str, Optional[str]]:
    """
    Decode a ``name -> text`` mapping.

    ``null`` values are kept as ``None`` so callers can tell an absent value
    from a wrong one.
    """
    mapping = require_object(value, what)
    for k, v in mapping.items():
        if v is not None and not isinstance(v, str):
            raise PiholeDataError(
                f"Expected text for {what}[{k!r}], got {type(v).__name__}"
            )
    return mapping


def freeze_mapping(mapping: Mapping[str, Any]) -> Mapping[str, Any]:
    """Return a read-only copy of ``mapping`` that keeps its key order."""
    if isinstance(mapping, MappingProxyType):
        return mapping
    return MappingProxyType(dict(mapping))


def freeze_rows(rows: Iterable[Iterable[str]]) -> Tuple[Tuple[str, ...], ...]:
    return tuple(tuple(row) for row in rows)


def require_rows(value: Any, what: str) -> List[List[str]]:
    """Decode a list of string lists, e.g. the query log ``data`` array."""
    if value is None:
        return []
    if not isinstance(value, list):
        raise PiholeDataError(
            f"Expected a list for {what}, got {type(value).__name__}"
        )
    rows = []
    for i, row in enumerate(value):
        if not isinstance(row, list):
            raise PiholeDataError(
                f"Expected a list for {what}[{i}], got {type(row).__name__}"
            )
        rows.append([require_str(item, f"{what}[{i}]") for item in row])
    return rows
