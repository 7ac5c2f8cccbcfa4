"""FastAPI application factory."""

import logging
from uuid import UUID
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from fastapi import FastAPI, HTTPException, Query, Request, status

from nutrition_stats.api.report_models import MonthlyReportResponse
from nutrition_stats.app_logging import configure_logging
from nutrition_stats.containers import AppContainer
from nutrition_stats.services.stats import StatisticsCalculationError


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    app = FastAPI(title="Nutrition Calendar Statistics")
    app.state.container = container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get(
        "/users/{user_id}/calendar/statistics",
        response_model=MonthlyReportResponse,
    )
    def monthly_statistics(
        user_id: UUID,
        request: Request,
        year: int = Query(ge=1900, le=9999),
        month: int = Query(ge=1, le=12),
        timezone: str | None = None,
    ) -> MonthlyReportResponse:
        """Return calendar statistics for a user's month."""
        state_container: AppContainer = request.app.state.container
        timezone_name = timezone or state_container.settings.default_timezone
        if not _is_valid_timezone(timezone_name):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"Unknown timezone: {timezone_name}",
            )
        try:
            report = state_container.stats_service.compute_monthly_report(
                user_id, year, month, timezone_name
            )
        except StatisticsCalculationError as exc:
            logger.warning("Statistics request failed: user_id=%s", user_id)
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=str(exc),
            ) from exc
        return MonthlyReportResponse.model_validate(report)

    return app


def _is_valid_timezone(name: str) -> bool:
    try:
        ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        return False
    return True
