"""HTTP transport for the PixAI GraphQL API.

Processing flow:
    1. Build a JSON body `{"query": ..., "variables": ...}`.
    2. POST it to the configured endpoint with `Authorization: Bearer <token>`.
    3. Raise on non-2xx status, undecodable JSON, or a GraphQL `errors` payload
       without data.
    4. Return the `data` object to the caller.

Downloads reuse the same session and Authorization header.

Error handling strategy:
    - `requests` exceptions and non-success statuses become `TransportError`
      (status code and body attached when available).
    - Non-JSON success bodies become `MalformedResponse`.
    - Interpretation of `data` fields is left to `pixai.jobs`.

Resource model:
    One `requests.Session` per transport instance; the instance is created and
    passed explicitly by the caller (no module-level client). Close it via
    `close()` or by using the transport as a context manager. After
    construction the transport holds no per-run state, so concurrent runs may
    share it.

Security considerations:
    The bearer token is never logged. Error messages may include upstream
    response bodies.
"""

import logging

import requests

from pixai import settings
from pixai.errors import GraphQLError, MalformedResponse, TransportError

logger = logging.getLogger(__name__)


class GraphQLTransport:
    """Authenticated GraphQL/download exchange against one endpoint.

    Args:
        api_key: Bearer token passed through unchanged.
        url: GraphQL endpoint.
        timeout: Per-request timeout in seconds, or `None` for no limit.
        session: Optional pre-built `requests.Session` (tests, connection reuse).
    """

    def __init__(self, api_key, url=None, timeout=None, session=None):
        if not api_key:
            raise ValueError("PixAI API key is required")
        self.url = url or settings.API_URL
        self.timeout = timeout
        self._api_key = api_key
        self._session = session or requests.Session()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def close(self):
        self._session.close()

    def _headers(self):
        return {"Authorization": f"Bearer {self._api_key}"}

    def execute(self, query: str, variables: dict) -> dict:
        """Send one GraphQL document and return its `data` object.

        Raises:
            TransportError: network failure or non-success HTTP status.
            GraphQLError: body carries `errors` and no usable `data`.
            MalformedResponse: body is not a JSON object.
        """
        body = {"query": query, "variables": variables}
        logger.debug("POST %s (%s)", self.url, query.split("(", 1)[0])

        try:
            response = self._session.post(
                self.url,
                json=body,
                headers=self._headers(),
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as err:
            raise TransportError(f"Request to {self.url} failed: {err}") from err

        _raise_for_status(response)

        try:
            payload = response.json()
        except ValueError as err:
            raise MalformedResponse(
                f"Response from {self.url} is not valid JSON"
            ) from err

        if not isinstance(payload, dict):
            raise MalformedResponse(f"Response from {self.url} is not a JSON object")

        data = payload.get("data")
        errors = payload.get("errors")
        if errors and not data:
            messages = "; ".join(
                str(e.get("message", e)) if isinstance(e, dict) else str(e)
                for e in errors
            )
            raise GraphQLError(
                f"GraphQL request failed: {messages}",
                errors=errors,
                status_code=response.status_code,
            )
        if not isinstance(data, dict):
            raise MalformedResponse("Response is missing the 'data' object")
        return data

    def download(self, url: str) -> bytes:
        """GET `url` with the bearer header and return the body bytes."""
        logger.debug("GET %s", url)
        try:
            response = self._session.get(
                url,
                headers=self._headers(),
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as err:
            raise TransportError(f"Download from {url} failed: {err}") from err

        _raise_for_status(response)
        return response.content


def _raise_for_status(response):
    try:
        response.raise_for_status()
    except requests.exceptions.HTTPError as err:
        raise TransportError(
            f"Unexpected status {response.status_code} with message: {response.text}",
            status_code=response.status_code,
            body=response.text,
        ) from err
