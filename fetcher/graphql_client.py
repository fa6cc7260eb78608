"""GraphQL client for the Meetup API."""
import json
import logging
from typing import Any, Dict, Optional

import requests

logger = logging.getLogger(__name__)


class GraphQLClient:
    """Client for the current and legacy Meetup GraphQL endpoints."""

    ENDPOINT = "https://api.meetup.com/gql-ext"
    LEGACY_ENDPOINT = "https://api.meetup.com/gql"

    def __init__(
        self,
        timeout: int = 30,
        verbose: bool = False,
        endpoint: Optional[str] = None,
        legacy_endpoint: Optional[str] = None
    ):
        """
        Initialize the GraphQL client.

        Args:
            timeout: HTTP request timeout in seconds (default: 30)
            verbose: Log every parsed response
            endpoint: Override for the current API endpoint
            legacy_endpoint: Override for the legacy API endpoint
        """
        self.timeout = timeout
        self.verbose = verbose
        self.endpoint = endpoint or self.ENDPOINT
        self.legacy_endpoint = legacy_endpoint or self.LEGACY_ENDPOINT

    def query(
        self,
        document: str,
        variables: Dict[str, Any],
        legacy: bool = False
    ) -> Dict[str, Any]:
        """
        Send a GraphQL query and return the parsed JSON response.

        Args:
            document: GraphQL query document
            variables: Query variables
            legacy: Send to the legacy endpoint instead of the current one

        Returns:
            Parsed response envelope, e.g. {"data": {...}}

        Raises:
            requests.HTTPError: If the response status is not successful
            requests.RequestException: On connection errors or timeouts
        """
        endpoint = self.legacy_endpoint if legacy else self.endpoint
        logger.debug(f"POST {endpoint} with variables {variables}")

        response = requests.post(
            endpoint,
            json={'query': document, 'variables': variables},
            headers={'Content-Type': 'application/json'},
            timeout=self.timeout
        )

        if not response.ok:
            raise requests.HTTPError(
                f"HTTP error! status: {response.status_code} {response.text}",
                response=response
            )

        result = response.json()
        if self.verbose:
            logger.debug(f"Response from {endpoint}: {json.dumps(result)}")
        return result
