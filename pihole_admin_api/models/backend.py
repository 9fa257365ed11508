from dataclasses import dataclass, asdict
from typing import Any, Dict

from ..utils import require_object, require_str, require_number


@dataclass(frozen=True)
class PiholeType:
    """Backend serving the admin API (``type`` endpoint): ``"PHP"`` or ``"FTL"``."""
    type: str

    @classmethod
    def from_api(cls, data: Any) -> "PiholeType":
        data = require_object(data, "type")
        return cls(type=require_str(data.get("type"), "type"))

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class PiholeVersion:
    """API version exposed by the appliance (``version`` endpoint)."""
    version: float

    @classmethod
    def from_api(cls, data: Any) -> "PiholeVersion":
        data = require_object(data, "version")
        return cls(version=require_number(data.get("version"), "version"))

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
