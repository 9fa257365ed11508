import json
import os

import requests

from typing import Any, Dict, Optional, Type, TypeVar, Union

from .models.backend import PiholeType, PiholeVersion
from .models.summary import PiholeSummary
from .models.stats import (
    PiholeTimeData,
    PiholeTopItems,
    PiholeTopClients,
    PiholeForwardDestinations,
    PiholeQueryTypes,
)
from .models.query_log import PiholeQueryLog
from .logging import get_logger, log_api_response
from .utils import require_str_map
from .exceptions import (
    PiholeAPIError,
    PiholeDataError,
    PiholeStatusError,
)

logger = get_logger(__name__)

API_PATH = "/admin/api.php"

M = TypeVar("M")


class PiholeConnector:
    """
    Client for the Pi-hole admin API (``/admin/api.php``).

    Each method issues a single GET request against the appliance and decodes
    the JSON body into a model from :mod:`pihole_admin_api.models`. The
    connector holds only its configuration, so one instance can be shared
    freely between callers.

    Note:
        Failures never terminate the calling process. Transport problems raise
        :class:`PiholeAPIError`, undecodable bodies raise
        :class:`PiholeDataError`, and an enable/disable call that does not
        report the expected status raises :class:`PiholeStatusError`.
    """

    def __init__(
        self,
        host: str,
        token: str = "",
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize the connector. No request is made.

        Args:
            host: DNS name or IP address (optionally with ``:port``) of the Pi-hole.
            token: API token (``WEBPASSWORD`` hash from ``/etc/pihole/setupVars.conf``).
                   Appended as ``&auth=<token>`` when non-empty. Defaults to "".
            timeout: Request timeout in seconds. Defaults to None, leaving the
                     transport's default in place.
            session: Optional ``requests.Session`` to send requests through. By
                     default each call opens and releases its own connection.

        Raises:
            ValueError: If ``host`` is empty or ``timeout`` is not positive.
        """
        if not host:
            raise ValueError("host must not be empty")
        if timeout is not None and timeout <= 0:
            raise ValueError("timeout must be positive")

        logger.debug(
            f"Initializing PiholeConnector with host: {host}, token set: {bool(token)}"
        )
        self.host = host
        self.token = token or ""
        self.timeout = timeout
        self.session = session

    @classmethod
    def from_env(cls, prefix: str = "PIHOLE_", **kwargs) -> "PiholeConnector":
        """
        Build a connector from environment variables.

        Reads ``<prefix>HOST`` (required), ``<prefix>TOKEN`` and
        ``<prefix>TIMEOUT`` (seconds). Extra keyword arguments are passed to
        the constructor.

        Raises:
            ValueError: If the host variable is unset or the timeout is not a number.
        """
        host = os.environ.get(f"{prefix}HOST", "")
        if not host:
            raise ValueError(f"{prefix}HOST is not set")

        timeout = None
        raw_timeout = os.environ.get(f"{prefix}TIMEOUT")
        if raw_timeout:
            try:
                timeout = float(raw_timeout)
            except ValueError as e:
                raise ValueError(
                    f"{prefix}TIMEOUT must be a number, got {raw_timeout!r}") from e

        return cls(
            host,
            token=os.environ.get(f"{prefix}TOKEN", ""),
            timeout=timeout,
            **kwargs,
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(host={self.host!r}, token={'***' if self.token else ''!r})"

    def build_url(self, endpoint: str) -> str:
        """
        Build the request URL for an endpoint query fragment.

        Args:
            endpoint: Query fragment, e.g. ``"summary"`` or ``"topItems=10"``.

        Returns:
            ``http://<host>/admin/api.php?<endpoint>``, followed by
            ``&auth=<token>`` when a token is configured.
        """
        url = f"http://{self.host}{API_PATH}?{endpoint}"
        if self.token:
            url += f"&auth={self.token}"
        return url

    def _redact(self, url: str) -> str:
        if self.token:
            return url.replace(f"auth={self.token}", "auth=***")
        return url

    def get(self, endpoint: str) -> bytes:
        """
        Perform a GET request against the admin API and return the raw body.

        Args:
            endpoint: Query fragment identifying the statistic or action.

        Returns:
            The full response body.

        Raises:
            PiholeAPIError: If the request fails (DNS, connection, timeout,
                            4xx/5xx status or an interrupted body).
        """
        url = self.build_url(endpoint)
        safe_url = self._redact(url)
        http = self.session if self.session is not None else requests

        try:
            response = http.get(url, timeout=self.timeout)
            response.raise_for_status()
            body = response.content
        except requests.exceptions.RequestException as e:
            error_msg = f"API GET request to {safe_url} failed: {self._redact(str(e))}"
            logger.error(error_msg)
            raise PiholeAPIError(error_msg) from e

        logger.debug(
            f"API GET request to {safe_url} successful (Status: {response.status_code})")
        log_api_response(logger, safe_url, body, response.status_code)
        return body

    def _get_json(self, endpoint: str) -> Any:
        """
        GET an endpoint and decode its body as JSON.

        Raises:
            PiholeAPIError: If the request fails.
            PiholeDataError: If the body is not valid JSON.
        """
        body = self.get(endpoint)
        try:
            return json.loads(body)
        except ValueError as e:
            error_msg = f"Failed to parse '{endpoint}' response as JSON: {e}"
            logger.error(error_msg)
            raise PiholeDataError(error_msg) from e

    def _fetch_model(
        self, endpoint: str, model_class: Type[M], raw: bool
    ) -> Union[M, Any]:
        data = self._get_json(endpoint)
        if raw:
            return data

        try:
            return model_class.from_api(data)
        except PiholeDataError as e:
            logger.error(
                f"Unexpected '{endpoint}' response for {model_class.__name__}: {e}")
            raise

    def get_type(self, raw: bool = False) -> Union[PiholeType, Dict[str, Any]]:
        """
        Get the backend serving the API (``type`` endpoint).

        Args:
            raw (bool): If True, returns the decoded JSON instead of a model.

        Returns:
            PiholeType: e.g. ``PiholeType(type="FTL")``.

        Raises:
            PiholeAPIError: If the API request fails.
            PiholeDataError: If the response cannot be decoded.
        """
        return self._fetch_model("type", PiholeType, raw)

    def get_version(self, raw: bool = False) -> Union[PiholeVersion, Dict[str, Any]]:
        """
        Get the API version (``version`` endpoint).

        Raises:
            PiholeAPIError: If the API request fails.
            PiholeDataError: If the response cannot be decoded.
        """
        return self._fetch_model("version", PiholeVersion, raw)

    def get_summary(self, raw: bool = False) -> Union[PiholeSummary, Dict[str, Any]]:
        """
        Get the 24h summary statistics (``summary`` endpoint).

        Counters are returned as the text the appliance sends, e.g.
        ``"1,234"`` or ``"12.3"``.

        Args:
            raw (bool): If True, returns the decoded JSON instead of a model.

        Returns:
            PiholeSummary: The summary. Fields the model does not know are kept
            in its ``_extra_fields`` attribute.

        Raises:
            PiholeAPIError: If the API request fails.
            PiholeDataError: If the response cannot be decoded or a counter is not text.
        """
        return self._fetch_model("summary", PiholeSummary, raw)

    def get_time_data(self, raw: bool = False) -> Union[PiholeTimeData, Dict[str, Any]]:
        """
        Get query and block counts per 10 minute bucket (``overTimeData10mins``).

        Raises:
            PiholeAPIError: If the API request fails.
            PiholeDataError: If the response cannot be decoded.
        """
        return self._fetch_model("overTimeData10mins", PiholeTimeData, raw)

    def get_top_items(
        self, n: int = 10, raw: bool = False
    ) -> Union[PiholeTopItems, Dict[str, Any]]:
        """
        Get the top queried and top blocked domains (``topItems=<n>``).

        Requires a token on most installations.

        Args:
            n (int): Number of entries the appliance should return. Sent as is,
                     without client-side validation. Defaults to 10.
            raw (bool): If True, returns the decoded JSON instead of a model.

        Raises:
            PiholeAPIError: If the API request fails.
            PiholeDataError: If the response cannot be decoded, including the
                             ``[]`` body sent when the token is missing or wrong.
        """
        return self._fetch_model(f"topItems={n}", PiholeTopItems, raw)

    def get_top_clients(
        self, n: int = 10, raw: bool = False
    ) -> Union[PiholeTopClients, Dict[str, Any]]:
        """
        Get the most active clients (``topClients=<n>``).

        Args:
            n (int): Number of entries the appliance should return. Sent as is.
                     Defaults to 10.
            raw (bool): If True, returns the decoded JSON instead of a model.

        Raises:
            PiholeAPIError: If the API request fails.
            PiholeDataError: If the response cannot be decoded.
        """
        return self._fetch_model(f"topClients={n}", PiholeTopClients, raw)

    def get_forward_destinations(
        self, raw: bool = False
    ) -> Union[PiholeForwardDestinations, Dict[str, Any]]:
        """
        Get the share of queries sent to each upstream server (``getForwardDestinations``).

        Raises:
            PiholeAPIError: If the API request fails.
            PiholeDataError: If the response cannot be decoded.
        """
        return self._fetch_model(
            "getForwardDestinations", PiholeForwardDestinations, raw)

    def get_query_types(
        self, raw: bool = False
    ) -> Union[PiholeQueryTypes, Dict[str, Any]]:
        """
        Get the share of queries per DNS record type (``getQueryTypes``).

        Raises:
            PiholeAPIError: If the API request fails.
            PiholeDataError: If the response cannot be decoded.
        """
        return self._fetch_model("getQueryTypes", PiholeQueryTypes, raw)

    def get_all_queries(
        self, raw: bool = False
    ) -> Union[PiholeQueryLog, Dict[str, Any]]:
        """
        Get the query log (``getAllQueries``).

        The response can be large on busy installations; it is read fully
        into memory.

        Raises:
            PiholeAPIError: If the API request fails.
            PiholeDataError: If the response cannot be decoded.
        """
        return self._fetch_model("getAllQueries", PiholeQueryLog, raw)

    def _set_status(self, action: str, expected: str) -> None:
        data = self._get_json(action)
        try:
            status = require_str_map(data, action).get("status")
        except PiholeDataError as e:
            logger.error(f"Unexpected '{action}' response: {e}")
            raise

        if status != expected:
            logger.warning(
                f"Pi-hole did not confirm '{action}': expected status "
                f"'{expected}', got {status!r}")
            raise PiholeStatusError(expected, status)
        logger.info(f"Pi-hole status is now '{status}'.")

    def enable(self) -> None:
        """
        Enable blocking on the Pi-hole (``enable`` endpoint).

        Raises:
            PiholeAPIError: If the API request fails.
            PiholeDataError: If the response is not a string-to-string mapping.
            PiholeStatusError: If the reported status is not exactly ``"enabled"``.
        """
        self._set_status("enable", "enabled")

    def disable(self) -> None:
        """
        Disable blocking on the Pi-hole until it is enabled again (``disable`` endpoint).

        Raises:
            PiholeAPIError: If the API request fails.
            PiholeDataError: If the response is not a string-to-string mapping.
            PiholeStatusError: If the reported status is not exactly ``"disabled"``.
        """
        self._set_status("disable", "disabled")

    def get_recent_blocked(self) -> str:
        """
        Get the most recently blocked domain (``recentBlocked``).

        Returns:
            The response body as text. It is never parsed as JSON.

        Raises:
            PiholeAPIError: If the API request fails.
        """
        return self.get("recentBlocked").decode("utf-8", errors="replace")
