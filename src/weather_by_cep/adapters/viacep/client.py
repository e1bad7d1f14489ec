"""
ViaCEP adapter - Implements LocationResolver protocol.

ViaCEP answers unknown postal codes with HTTP 200 and an ``erro`` flag in
the body instead of a 404, so the payload has to be inspected to tell
"not found" apart from a failed request.
"""

import logging

import httpx
from pydantic import BaseModel, ValidationError

from weather_by_cep.domain.exceptions import LocationLookupError
from weather_by_cep.domain.ports import Location

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://viacep.com.br/ws"


class ViaCEPPayload(BaseModel):
    """Subset of the ViaCEP JSON body this service reads."""

    erro: bool = False  # ViaCEP sends true or "true"
    localidade: str = ""
    uf: str = ""


class ViaCEPLocationResolver:
    """
    Implements LocationResolver protocol over the ViaCEP HTTP API.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    def __init__(self, client: httpx.AsyncClient, base_url: str = DEFAULT_BASE_URL) -> None:
        self.client = client
        self.base_url = base_url.rstrip("/")

    async def resolve(self, cep: str) -> Location | None:
        """
        Look up a CEP on ViaCEP.

        Args:
            cep: 8-digit postal code

        Returns:
            Location, or None when ViaCEP flags the CEP as unknown

        Raises:
            LocationLookupError: On transport error, non-200 status or
                an unreadable body
        """
        url = f"{self.base_url}/{cep}/json/"
        try:
            response = await self.client.get(url)
        except httpx.HTTPError as exc:
            raise LocationLookupError(f"failed to fetch CEP {cep}: {exc!r}") from exc

        if response.status_code != httpx.codes.OK:
            raise LocationLookupError(f"ViaCEP returned status {response.status_code}")

        try:
            payload = ViaCEPPayload.model_validate_json(response.content)
        except ValidationError as exc:
            raise LocationLookupError("failed to decode ViaCEP response") from exc

        if payload.erro:
            logger.info("ViaCEP has no record for CEP %s", cep)
            return None
        if not payload.localidade:
            raise LocationLookupError(f"ViaCEP response for {cep} has no city")

        return Location(city=payload.localidade, state=payload.uf)
