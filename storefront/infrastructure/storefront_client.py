import httpx

from storefront.domain.graphql import GraphQLRequest
from storefront.entrypoints.settings import get_config
from storefront.shared.decorators import log_duration, log_errors


class StorefrontTransportError(Exception):
    """Raised when the Storefront API answers with a non-2xx HTTP status."""

    def __init__(self, status_code: int, reason_phrase: str = "") -> None:
        self.status_code = status_code
        self.reason_phrase = reason_phrase
        super().__init__(f"Storefront API error: {status_code} {reason_phrase}".rstrip())


class StorefrontGraphQLClient:
    """Thin httpx wrapper for the Shopify Storefront GraphQL API.

    ``endpoint`` and ``access_token`` fall back to ``STOREFRONT_API_URL`` and
    ``STOREFRONT_ACCESS_TOKEN`` from the process settings. GraphQL-level
    ``errors`` are passed through untouched; callers decide what they mean.
    """

    def __init__(
        self,
        endpoint: str | None = None,
        access_token: str | None = None,
        client: httpx.Client | None = None,
        timeout: float | None = None,
    ) -> None:
        config = get_config()
        self._endpoint = endpoint if endpoint is not None else config.STOREFRONT_API_URL
        self._headers = {
            "X-Shopify-Storefront-Access-Token": (
                access_token if access_token is not None else config.STOREFRONT_ACCESS_TOKEN
            ),
            "Content-Type": "application/json",
        }
        self._client = client
        self._timeout = timeout if timeout is not None else config.REQUEST_TIMEOUT

    @log_errors
    @log_duration
    def execute(self, query: str, variables: dict | None = None) -> dict:
        """POST a GraphQL document and return the parsed JSON body as-is.

        Raises:
            pydantic.ValidationError: if ``query`` is empty (no request is sent).
            StorefrontTransportError: on non-2xx HTTP responses.
            httpx.TransportError: if the endpoint cannot be reached.
        """
        payload = GraphQLRequest(query=query, variables=variables).to_payload()

        if self._client is not None:
            response = self._client.post(
                self._endpoint, headers=self._headers, json=payload
            )
        else:
            response = httpx.post(
                self._endpoint, headers=self._headers, json=payload, timeout=self._timeout
            )

        if not response.is_success:
            raise StorefrontTransportError(response.status_code, response.reason_phrase)

        return response.json()
