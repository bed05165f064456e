"""Transport package.

Scope:
    Authenticated request/response exchange with the PixAI GraphQL endpoint and
    authenticated artifact downloads. Job semantics live in `pixai.jobs`.

Module split:
    - `client`: `GraphQLTransport`, a `requests.Session` wrapper.
    - `queries`: GraphQL documents and their variable builders.
"""

from pixai.transport.client import GraphQLTransport

__all__ = ["GraphQLTransport"]
