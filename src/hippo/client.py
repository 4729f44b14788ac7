"""
Hippo API Client
Login, raw authenticated requests, and revision registration.
"""

import argparse
import json
import logging
import sys
from typing import Optional, Union
from uuid import UUID

import requests

from .auth import create_token, decode_body
from .errors import ClientError, HttpClientError, InvalidRequestError, OtherError
from .types import (
    DEFAULT_HEADERS,
    REVISION_PATH,
    ClientOptions,
    RegisterRevisionRequest,
)
from .urls import join_url, normalize_base_url

logger = logging.getLogger(__name__)


def _build_session(options: ClientOptions) -> requests.Session:
    session = requests.Session()
    session.headers.update(DEFAULT_HEADERS)

    if options.danger_accept_invalid_certs:
        logger.warning("TLS certificate validation is disabled")
        session.verify = False
    return session


class HippoClient:
    """Authenticated Hippo client. Base URL and token are fixed for life."""

    def __init__(
        self,
        session: requests.Session,
        base_url: str,
        token: str,
        timeout: Optional[float] = None,
    ):
        self._session = session
        self._base_url = base_url
        self._token = token
        self._timeout = timeout

    @classmethod
    def from_login(
        cls,
        base_url: str,
        username: str,
        password: str,
        options: Optional[ClientOptions] = None,
    ) -> "HippoClient":
        """Log in and return a ready client.

        Raises InvalidUrlError for a bad base URL; login failures propagate
        from :func:`hippo.auth.create_token` unchanged.
        """
        options = options or ClientOptions()
        base = normalize_base_url(base_url)
        session = _build_session(options)
        token = create_token(session, base, username, password, options.timeout)
        logger.debug("Logged in to %s", base)
        return cls(session, base, token, options.timeout)

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def token(self) -> str:
        return self._token

    @property
    def timeout(self) -> Optional[float]:
        return self._timeout

    def close(self) -> None:
        self._session.close()

    def __enter__(self) -> "HippoClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def raw(
        self,
        method: str,
        path: str,
        body: Optional[Union[str, bytes]] = None,
    ) -> requests.Response:
        """Send an authenticated request and return the response as-is.

        ``path`` is resolved against the base URL. Status codes are not
        interpreted here.
        """
        url = join_url(self._base_url, path)
        payload = body.encode("utf-8") if isinstance(body, str) else body
        headers = {
            "Authorization": f"Bearer {self._token}",
            "Content-Length": str(len(payload)) if payload is not None else "0",
        }
        logger.debug("%s %s", method, url)

        try:
            return self._session.request(
                method,
                url,
                headers=headers,
                data=payload,
                timeout=self._timeout,
            )
        except requests.RequestException as exc:
            raise HttpClientError(f"Error creating request: {exc}") from exc

    # ── Revisions ─────────────────────────────────────────

    def _register_revision(self, request: RegisterRevisionRequest) -> None:
        body = request.to_json()
        try:
            resp = self.raw("POST", REVISION_PATH, body)
        except HttpClientError as exc:
            raise OtherError(str(exc)) from exc

        if resp.status_code == 201:
            logger.debug("Registered revision %s", request.revision_number)
            return
        raise InvalidRequestError(resp.status_code, decode_body(resp))

    def register_revision_by_application(
        self, application_id: UUID, revision_number: str
    ) -> None:
        self._register_revision(
            RegisterRevisionRequest.for_application(
                application_id, revision_number
            )
        )

    def register_revision_by_storage_id(
        self, storage_id: str, revision_number: str
    ) -> None:
        self._register_revision(
            RegisterRevisionRequest.for_storage_id(storage_id, revision_number)
        )


# ── CLI ───────────────────────────────────────────────────


def build_parser_base(description: str) -> argparse.ArgumentParser:
    """Parser with the connection flags shared by every command."""
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument("--url", required=True, help="Hippo server base URL")
    parser.add_argument("--username", required=True)
    parser.add_argument("--password", required=True)
    parser.add_argument(
        "--insecure",
        action="store_true",
        help="skip TLS certificate validation",
    )
    parser.add_argument("--timeout", type=float, help="request timeout (s)")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def options_from_args(args: argparse.Namespace) -> ClientOptions:
    return ClientOptions(
        danger_accept_invalid_certs=args.insecure, timeout=args.timeout
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = build_parser_base("Register a revision with a Hippo server")
    parser.add_argument("--revision", required=True, help="revision number")

    target = parser.add_mutually_exclusive_group(required=True)
    target.add_argument("--app-id", type=UUID, help="application id (UUID)")
    target.add_argument("--storage-id", help="bindle / storage id")
    return parser


def main() -> None:
    """CLI entry point for revision registration."""
    args = _build_parser().parse_args()
    configure_logging(args.verbose)

    try:
        client = HippoClient.from_login(
            args.url, args.username, args.password, options_from_args(args)
        )
        with client:
            if args.app_id is not None:
                client.register_revision_by_application(
                    args.app_id, args.revision
                )
            else:
                client.register_revision_by_storage_id(
                    args.storage_id, args.revision
                )
    except ClientError as exc:
        print(json.dumps({"error": str(exc)}), file=sys.stderr)
        sys.exit(1)

    json.dump({"registered": True}, sys.stdout, indent=2)
    print()
