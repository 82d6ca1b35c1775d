"""Request counting middleware."""

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response

from src.phonebook.api.http.deps import get_metrics_service


class MetricsMiddleware(BaseHTTPMiddleware):
    """Count every request, and every request that raises or ends in a 5xx."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        metrics = get_metrics_service(request)
        metrics.increment_requests()

        try:
            response = await call_next(request)
        except Exception:
            metrics.increment_errors()
            raise

        # 5xx responses count as errors too, not only raised exceptions
        if response.status_code >= 500:
            metrics.increment_errors()
        return response
