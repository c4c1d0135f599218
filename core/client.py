# =============================================================================
# core/client.py  —  RunPod REST Request Helper
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Issues one authenticated HTTPS request against the RunPod REST API and
#   normalizes whatever comes back into an ApiResult.
#
# HOW A CALL FLOWS:
#   1. Build the URL from the configured base address and a relative path
#   2. Attach "Authorization: Bearer <key>" (and a JSON content type when a
#      body is present)
#   3. Send exactly one request: no retries, no backoff, no timeout.
#      Redirects are followed; only the final response is interpreted.
#   4. Interpret the response:
#        non-2xx                      → failure "RunPod API error: <status> - <body>"
#        2xx + JSON content type      → decoded JSON, passed through unchanged
#        2xx + anything else          → {"success": true, "status": <code>}
#        transport exception          → failure naming the method and path
#
#   Nothing here raises past request(): a failed call becomes a failed
#   ApiResult and the server keeps serving.
# =============================================================================

import logging
from typing import Any, Optional, Sequence

import httpx

from core.config import Settings
from core.models import ApiResult

logger = logging.getLogger(__name__)

USER_AGENT = "runpod-mcp-server/1.0"


class RunPodClient:
    """Thin synchronous wrapper around httpx for the RunPod REST API.

    Args:
        settings: Resolved process configuration (API key and base URL).
        transport: Optional httpx transport; tests inject httpx.MockTransport.
    """

    def __init__(self, settings: Settings, transport: Optional[httpx.BaseTransport] = None):
        self.settings = settings
        self._http = httpx.Client(
            base_url=settings.base_url,
            headers={
                "Authorization": f"Bearer {settings.api_key}",
                "Accept": "application/json",
                "User-Agent": USER_AGENT,
            },
            timeout=None,
            follow_redirects=True,
            transport=transport,
        )

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> "RunPodClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def request(
        self,
        path: str,
        method: str = "GET",
        body: Optional[dict[str, Any]] = None,
        params: Optional[Sequence[tuple[str, str]]] = None,
    ) -> ApiResult:
        """Perform one API call and normalize the response.

        Args:
            path: Endpoint path relative to the base URL, e.g. "/pods".
            method: HTTP method.  Defaults to GET.
            body: JSON-serializable request body, sent only when not None.
            params: Ordered query pairs; repeated keys are preserved.

        Returns:
            An ApiResult.  Never raises for HTTP or transport errors.
        """
        if not path.startswith("/"):
            raise ValueError(f"path must be relative to the API root, got {path!r}")

        method = method.upper()
        headers = {}
        if body is not None:
            headers["Content-Type"] = "application/json"

        logger.debug("RunPod %s %s params=%s", method, path, list(params or []))

        try:
            response = self._http.request(
                method,
                path,
                params=list(params) if params else None,
                json=body,
                headers=headers,
            )
        except httpx.HTTPError as exc:
            logger.warning("RunPod %s %s failed: %s", method, path, exc)
            return ApiResult.failure(f"RunPod request failed: {method} {path}: {exc}")

        return self._interpret(method, path, response)

    def _interpret(self, method: str, path: str, response: httpx.Response) -> ApiResult:
        status = response.status_code

        if not response.is_success:
            logger.warning("RunPod %s %s returned %s", method, path, status)
            return ApiResult.failure(f"RunPod API error: {status} - {response.text}", status=status)

        content_type = response.headers.get("content-type", "")
        if "application/json" in content_type and response.content:
            try:
                return ApiResult.success(status, response.json())
            except ValueError as exc:
                return ApiResult.failure(
                    f"RunPod API returned invalid JSON (status {status}): {exc}", status=status
                )

        # Some endpoints (start/stop/delete) answer with an empty or plain body.
        return ApiResult.success(status, {"success": True, "status": status})
