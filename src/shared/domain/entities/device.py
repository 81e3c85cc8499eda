import hmac
from typing import Any, Dict, Optional


class Device:

    def __init__(self, device_id: str, token: str):
        self.device_id = device_id
        self.token = token

    def matches_token(self, token: Optional[str]) -> bool:
        if not token:
            return False
        return hmac.compare_digest(self.token.encode("utf-8"), token.encode("utf-8"))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "device_id": self.device_id,
            "token": self.token,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Device":
        return cls(
            device_id=data["device_id"],
            token=data["token"],
        )

    def __repr__(self) -> str:
        return f"Device(device_id={self.device_id!r})"
