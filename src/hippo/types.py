"""
Shared types for the Hippo client.
"""

import json
from dataclasses import dataclass
from typing import Any, Optional
from uuid import UUID

from .errors import InvalidConfigError, SerializationError

JSON_MIME_TYPE = "application/json"

DEFAULT_HEADERS = {
    "Accept": JSON_MIME_TYPE,
    "Content-Type": JSON_MIME_TYPE,
}

CREATE_TOKEN_PATH = "account/createtoken"
REVISION_PATH = "api/revision"


@dataclass(frozen=True)
class ClientOptions:
    """Connection options, consumed once when the client is built.

    ``timeout`` is in seconds; ``None`` waits as long as the transport does.
    """

    danger_accept_invalid_certs: bool = False
    timeout: Optional[float] = None

    def __post_init__(self) -> None:
        if self.timeout is not None and self.timeout <= 0:
            raise InvalidConfigError(
                f"timeout must be positive, got {self.timeout!r}"
            )


def _unique_keys(pairs: list) -> dict:
    data = {}
    for key, value in pairs:
        if key in data:
            raise SerializationError(f"duplicate field `{key}`")
        data[key] = value
    return data


@dataclass(frozen=True)
class TokenResponse:
    token: str
    expiration: str

    @classmethod
    def from_json(cls, content: bytes) -> "TokenResponse":
        try:
            data = json.loads(content, object_pairs_hook=_unique_keys)
        except ValueError as exc:
            raise SerializationError(f"Invalid JSON: {exc}") from exc
        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: Any) -> "TokenResponse":
        """Strict parse: both fields required, nothing else allowed."""
        if not isinstance(data, dict):
            raise SerializationError(
                f"expected a JSON object, got {type(data).__name__}"
            )

        unknown = sorted(set(data) - {"token", "expiration"})
        if unknown:
            raise SerializationError(
                f"unknown field(s) in token response: {', '.join(unknown)}"
            )

        for field in ("token", "expiration"):
            if field not in data:
                raise SerializationError(f"missing field `{field}`")
            if not isinstance(data[field], str):
                raise SerializationError(f"field `{field}` must be a string")

        return cls(token=data["token"], expiration=data["expiration"])


@dataclass(frozen=True)
class RegisterRevisionRequest:
    """Revision registration payload.

    Use ``for_application`` or ``for_storage_id``; each sets exactly one id.
    """

    app_id: Optional[str]
    app_storage_id: Optional[str]
    revision_number: str

    @classmethod
    def for_application(
        cls, app_id: UUID, revision_number: str
    ) -> "RegisterRevisionRequest":
        try:
            app_id = UUID(str(app_id))
        except ValueError as exc:
            raise SerializationError(f"invalid application id: {exc}") from exc
        return cls(
            app_id=str(app_id),
            app_storage_id=None,
            revision_number=revision_number,
        )

    @classmethod
    def for_storage_id(
        cls, storage_id: str, revision_number: str
    ) -> "RegisterRevisionRequest":
        return cls(
            app_id=None,
            app_storage_id=storage_id,
            revision_number=revision_number,
        )

    def to_dict(self) -> dict[str, Optional[str]]:
        return {
            "appId": self.app_id,
            "appStorageId": self.app_storage_id,
            "revisionNumber": self.revision_number,
        }

    def to_json(self) -> str:
        try:
            return json.dumps(self.to_dict())
        except (TypeError, ValueError) as exc:
            raise SerializationError(str(exc)) from exc
