"""
Hippo login
Exchanges a username and password for a bearer token.
"""

import json
import logging
import sys
from typing import Optional

import requests

from .errors import (
    ClientError,
    HttpClientError,
    InvalidRequestError,
    ServerError,
    UnauthorizedError,
)
from .types import CREATE_TOKEN_PATH, TokenResponse
from .urls import join_url

logger = logging.getLogger(__name__)


def decode_body(resp: requests.Response) -> str:
    """Response body as text; invalid UTF-8 is replaced, never raised."""
    return resp.content.decode("utf-8", errors="replace")


def _check_login_status(resp: requests.Response) -> None:
    status = resp.status_code
    if 200 <= status < 300:
        return

    message = decode_body(resp) or None
    logger.debug("Login rejected with status %s", status)
    if status in (401, 403):
        raise UnauthorizedError(message)
    if status >= 500:
        raise ServerError(message)
    raise InvalidRequestError(status, message)


def create_token(
    session: requests.Session,
    base_url: str,
    username: str,
    password: str,
    timeout: Optional[float] = None,
) -> str:
    """POST credentials to the login endpoint and return the bearer token."""
    url = join_url(base_url, CREATE_TOKEN_PATH)
    body = json.dumps({"username": username, "password": password})
    logger.debug("Requesting token for %r from %s", username, url)

    try:
        resp = session.post(url, data=body.encode("utf-8"), timeout=timeout)
    except requests.RequestException as exc:
        raise HttpClientError(f"Error creating request: {exc}") from exc

    _check_login_status(resp)

    return TokenResponse.from_json(resp.content).token


def main() -> None:
    """CLI entry point: log in and print the token as JSON."""
    from .client import (
        HippoClient,
        build_parser_base,
        configure_logging,
        options_from_args,
    )

    parser = build_parser_base("Log in to a Hippo server and print the token")
    args = parser.parse_args()
    configure_logging(args.verbose)

    print(f"[*] Logging in to {args.url}...", file=sys.stderr)

    try:
        client = HippoClient.from_login(
            args.url, args.username, args.password, options_from_args(args)
        )
    except ClientError as exc:
        print(json.dumps({"error": str(exc)}), file=sys.stderr)
        sys.exit(1)

    client.close()
    print("[+] Ready", file=sys.stderr)
    json.dump({"token": client.token}, sys.stdout, indent=2)
    print()
