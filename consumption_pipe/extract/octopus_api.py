"""
Octopus Energy API Client - Pure I/O Operations

This module handles the consumption endpoint call with no business logic.
Returns the raw parsed JSON body for the transform layer.

One GET per call: no retry and no pagination. When the API pages its
results only the first page is retrieved.
"""

import requests
import time
from typing import Any, Dict, Optional
import logging

from consumption_pipe.coreutils.config import RequestDescriptor
from consumption_pipe.coreutils.request import new_session, basic_auth_header
from consumption_pipe.exceptions import ApiError, TransportError

logger = logging.getLogger(__name__)

ERROR_BODY_PREVIEW = 200


class OctopusAPIClient:
    """Pure API client for the meter consumption endpoint"""

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
    ):
        self._owns_session = session is None
        self.session = session or new_session()
        self.timeout = timeout

    def close(self) -> None:
        """Close the session if this client created it"""
        if self._owns_session:
            self.session.close()

    def __enter__(self) -> "OctopusAPIClient":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def get_consumption(self, descriptor: RequestDescriptor) -> Dict[str, Any]:
        """
        Fetch consumption readings for one meter and window

        Args:
            descriptor: Request descriptor built from the config file

        Returns:
            Dict: Parsed JSON body

        Raises:
            TransportError: DNS, connection, timeout or other network failure
            ApiError: Non-success HTTP status, or a body that is not JSON
        """
        url = descriptor.request_url
        logger.info(f"Fetching from {url}")
        start_time = time.time()

        try:
            response = self.session.get(
                url,
                headers=basic_auth_header(descriptor.api_key),
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as e:
            logger.error(f"❌ Transport failure fetching consumption data: {e}")
            raise TransportError(f"Request to {url} failed: {e}") from e

        try:
            response.raise_for_status()
        except requests.exceptions.HTTPError as e:
            body = response.text
            logger.error(
                f"❌ API returned {response.status_code} for {url}: "
                f"{body[:ERROR_BODY_PREVIEW]}"
            )
            raise ApiError(
                f"API returned HTTP {response.status_code} for {url}",
                status_code=response.status_code,
                body=body,
            ) from e

        try:
            data = response.json()
        except ValueError as e:
            logger.error(f"❌ Invalid JSON response from {url}: {e}")
            raise ApiError(
                f"Invalid JSON response from {url}: {e}",
                status_code=response.status_code,
                body=response.text,
            ) from e

        elapsed = time.time() - start_time
        logger.info(f"Fetched from {url}: {elapsed:.2f} seconds")

        if isinstance(data, dict) and data.get("next"):
            logger.warning(
                "⚠️ API reports further pages; only the first page is retrieved"
            )

        return data


# Convenience function for direct use
def fetch(descriptor: RequestDescriptor) -> Dict[str, Any]:
    """Fetch consumption data with a throwaway client"""
    with OctopusAPIClient() as client:
        return client.get_consumption(descriptor)
