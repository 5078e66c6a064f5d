"""
Registro Civil adapter - Implements CriminalRecordChecker protocol.

Queries the criminal-record service with a single GET per national id.
The service's answer is not yet part of the eligibility decision: one
configured rut is always ineligible without a lookup, and every other
rut is eligible as long as the service responds successfully.
"""

import logging

import httpx

from src.domain.exceptions import ExternalServiceError

logger = logging.getLogger(__name__)


class HttpCriminalRecordChecker:
    """
    Implements CriminalRecordChecker protocol via httpx.

    The AsyncClient is owned by the caller (application lifespan), so
    connections are pooled across requests.
    """

    def __init__(self, client: httpx.AsyncClient, base_url: str, ineligible_rut: str) -> None:
        self._client = client
        self._base_url = base_url.rstrip("/")
        self._ineligible_rut = ineligible_rut

    async def is_eligible(self, rut: str) -> bool:
        """
        Check whether `rut` may register.

        Raises:
            ExternalServiceError: Transport failure or non-2xx response
        """
        if rut == self._ineligible_rut:
            return False

        try:
            response = await self._client.get(f"{self._base_url}/{rut}")
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.error("Criminal-record lookup failed for %s: %s", rut, e)
            raise ExternalServiceError(
                "RegistroCivilUnavailable",
                "Criminal-record service is unavailable",
            ) from e

        return True
