"""Email deliverability checks against a mailboxlayer-compatible API."""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Protocol

import httpx
from pydantic import BaseModel, ConfigDict, ValidationError

from inkpress.core.errors import ExternalServiceError
from inkpress.core.settings import settings

logger = logging.getLogger(__name__)


class VerificationResult(BaseModel):
    """The fields of a verification response the verdict depends on."""

    model_config = ConfigDict(extra="ignore")

    smtp_check: bool = False
    score: float | None = None


class DeliverabilityChecker(Protocol):
    def is_deliverable(self, email: str) -> bool:
        ...


class MailboxLayerChecker:
    """Ask the verification API whether an address can receive mail.

    An address is deliverable when the API reports a passing SMTP check and a
    quality score of at least ``min_score``.
    """

    def __init__(
        self,
        client: httpx.Client,
        *,
        url: str,
        access_key: str | None,
        min_score: float = 0.5,
    ) -> None:
        self._client = client
        self._url = url
        self._access_key = access_key
        self._min_score = min_score

    def is_deliverable(self, email: str) -> bool:
        """Return the API verdict for ``email``.

        Raises:
            ExternalServiceError: On transport errors, non-2xx responses or a
                malformed payload.
        """
        params = {
            "access_key": self._access_key or "",
            "email": email,
            "smtp": "1",
            "format": "1",
        }
        try:
            response = self._client.get(self._url, params=params)
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPError as err:
            logger.warning("Deliverability check for %s failed: %s", email, err)
            raise ExternalServiceError("email verification failed", field="email") from err
        except ValueError as err:
            logger.warning("Deliverability API returned invalid JSON: %s", err)
            raise ExternalServiceError("email verification failed", field="email") from err

        if not isinstance(payload, dict) or "error" in payload:
            logger.warning("Deliverability API error payload: %r", payload)
            raise ExternalServiceError("email verification failed", field="email")

        try:
            result = VerificationResult.model_validate(payload)
        except ValidationError as err:
            logger.warning("Deliverability API returned a malformed payload: %s", err)
            raise ExternalServiceError("email verification failed", field="email") from err

        score = result.score or 0.0
        logger.debug(
            "Deliverability for %s: smtp_check=%s score=%.2f", email, result.smtp_check, score
        )
        return result.smtp_check and score >= self._min_score


@lru_cache(maxsize=1)
def get_http_client() -> httpx.Client:
    """Return the shared HTTP client used for verification calls."""
    return httpx.Client(timeout=settings.email_validator_timeout_seconds)


def get_deliverability_checker() -> DeliverabilityChecker:
    """Return a checker configured from application settings."""
    return MailboxLayerChecker(
        get_http_client(),
        url=settings.email_validator_url,
        access_key=settings.email_validator_access_key,
        min_score=settings.email_validator_min_score,
    )
