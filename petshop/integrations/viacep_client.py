"""Async client for the ViaCEP postal-code lookup service."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

import httpx

from petshop.core.config import Settings

logger = logging.getLogger(__name__)


class PostalCodeLookupError(RuntimeError):
    """Raised when the lookup service cannot be reached or answers garbage."""


@dataclass(frozen=True)
class PostalCodeResult:
    """Normalized lookup answer; ``found`` is false when ViaCEP reports ``erro``."""

    cep: str
    street: str = ""
    neighborhood: str = ""
    city: str = ""
    state: str = ""
    found: bool = True


class ViaCepClient:
    """Thin wrapper over ``GET {base}/ws/{cep}/json/``."""

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 5.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport

    @classmethod
    def from_settings(cls, settings: Settings) -> "ViaCepClient":
        return cls(settings.viacep_base_url, timeout=settings.viacep_timeout_seconds)

    async def lookup(self, cep: str) -> PostalCodeResult:
        """Fetch the address registered for an 8-digit CEP."""
        url = f"{self._base_url}/ws/{cep}/json/"
        try:
            async with httpx.AsyncClient(
                timeout=self._timeout, transport=self._transport
            ) as client:
                response = await client.get(url)
                response.raise_for_status()
                payload: dict[str, Any] = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            logger.warning("CEP lookup failed for %s: %s", cep, exc)
            raise PostalCodeLookupError(f"CEP lookup failed for {cep}") from exc

        if payload.get("erro"):
            return PostalCodeResult(cep=cep, found=False)
        return PostalCodeResult(
            cep=cep,
            street=payload.get("logradouro") or "",
            neighborhood=payload.get("bairro") or "",
            city=payload.get("localidade") or "",
            state=payload.get("uf") or "",
        )


__all__ = ["PostalCodeLookupError", "PostalCodeResult", "ViaCepClient"]
