"""Schema introspection over HTTP.

Runs the standard introspection query against an endpoint and turns the
result into a schema document, round-tripping it through printed SDL.
"""

import logging
from typing import Any

import httpx
from graphql import (
    DocumentNode,
    GraphQLError,
    GraphQLSyntaxError,
    build_client_schema,
    get_introspection_query,
    parse,
    print_schema,
)
from pydantic import BaseModel, ValidationError

from .errors import SchemaParseError, TransportError

logger = logging.getLogger(__name__)


class GraphQLResponse(BaseModel):
    """Envelope of a GraphQL response body."""
    data: dict[str, Any] | None = None
    errors: list[dict[str, Any]] | None = None


class IntrospectionClient:
    """Fetches a schema from a GraphQL endpoint.

    Examples:
        async with IntrospectionClient("https://api.example.com/graphql") as client:
            document = await client.fetch_schema()
    """

    def __init__(
        self,
        url: str,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize the client.

        Args:
            url: GraphQL endpoint URL
            timeout: Request timeout in seconds
            transport: Optional httpx transport, used by tests
        """
        self.url = url
        self.timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self.timeout,
                headers={"Content-Type": "application/json"},
                transport=self._transport,
            )
        return self._client

    async def close(self):
        """Close the HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.close()

    async def execute(self, query: str) -> dict[str, Any]:
        """Execute a raw GraphQL query and return its 'data' portion.

        Raises:
            TransportError: On network failure, an error status, a body that
                is not a GraphQL response, or GraphQL errors in the response
        """
        client = await self._get_client()
        logger.debug("POST %s", self.url)

        try:
            response = await client.post(self.url, json={"query": query})
            response.raise_for_status()
            result = GraphQLResponse.model_validate(response.json())
        except httpx.HTTPError as e:
            raise TransportError(f"Request to {self.url} failed: {e}") from e
        except (ValueError, ValidationError) as e:
            raise TransportError(f"Response from {self.url} is not a GraphQL response") from e

        if result.errors:
            error_messages = "; ".join(e.get("message", str(e)) for e in result.errors)
            raise TransportError(f"GraphQL errors: {error_messages}", result.errors)
        if result.data is None:
            raise TransportError(f"Response from {self.url} has no data")

        return result.data

    async def fetch_schema(self) -> DocumentNode:
        """Introspect the endpoint and return the schema as a document.

        Raises:
            TransportError: If the introspection request fails
            SchemaParseError: If the result cannot be converted to a schema
        """
        data = await self.execute(get_introspection_query())
        return introspection_to_document(data)


def introspection_to_document(data: dict[str, Any]) -> DocumentNode:
    """Convert introspection data (the 'data' portion) into a schema document."""
    try:
        schema = build_client_schema(data)
    except (GraphQLError, KeyError, TypeError, ValueError) as e:
        raise SchemaParseError(f"Invalid introspection result: {e}") from e

    sdl = print_schema(schema)
    try:
        return parse(sdl)
    except GraphQLSyntaxError as e:
        raise SchemaParseError(f"Printed schema does not parse: {e.message}") from e


async def fetch_schema(url: str, timeout: float = 30.0) -> DocumentNode:
    """Fetch the schema document of the endpoint at url."""
    async with IntrospectionClient(url, timeout=timeout) as client:
        return await client.fetch_schema()
