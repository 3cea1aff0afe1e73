"""HTTP client for a remote documentation-example service."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

import httpx

from botlint.analysis.schemas import Diagnostic
from botlint.enrichment.enricher import attach_examples, diagnostic_text
from botlint.enrichment.examples import DocExample

logger = logging.getLogger(__name__)


class DocsClient:
    """Posts diagnostic text to ``/api/docs`` and parses the examples.

    The underlying ``httpx.Client`` is created on first use. Pass a
    ``transport`` to route requests elsewhere (tests use
    ``httpx.MockTransport``).
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 5.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport
        self._client: httpx.Client | None = None

    def _get_client(self) -> httpx.Client:
        if self._client is None:
            kwargs: dict[str, Any] = {
                "base_url": self._base_url,
                "timeout": self._timeout,
            }
            if self._transport is not None:
                kwargs["transport"] = self._transport
            self._client = httpx.Client(**kwargs)
        return self._client

    def fetch_examples(self, text: str) -> dict[str, DocExample]:
        """Examples relevant to ``text``, in the service's order.

        Raises ``httpx.HTTPError`` on transport or status errors and
        ``ValueError`` when the body is not a successful envelope.
        """
        response = self._get_client().post("/api/docs", json={"text": text})
        response.raise_for_status()
        payload = response.json()

        if not isinstance(payload, dict) or not payload.get("success"):
            error = payload.get("error") if isinstance(payload, dict) else None
            msg = f"Docs service returned an error: {error or 'unknown'}"
            raise ValueError(msg)

        data = payload.get("data") or {}
        raw_examples = data.get("examples") if isinstance(data, dict) else None
        if not isinstance(raw_examples, dict):
            msg = "Docs service response has no examples mapping"
            raise ValueError(msg)

        return {
            str(key): DocExample.model_validate(value)
            for key, value in raw_examples.items()
        }

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None


def enrich_via_service(
    diagnostics: Sequence[Diagnostic],
    client: DocsClient,
) -> list[Diagnostic]:
    """Remote variant of ``enrich_locally``.

    Any failure leaves the diagnostics exactly as they were.
    """
    if not diagnostics:
        return list(diagnostics)
    try:
        examples = client.fetch_examples(diagnostic_text(diagnostics))
    except (httpx.HTTPError, ValueError):
        logger.warning("event=docs_enrichment_failed", exc_info=True)
        return list(diagnostics)
    return attach_examples(diagnostics, examples)
