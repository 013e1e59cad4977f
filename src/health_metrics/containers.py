"""Dependency container wiring for the metrics engine."""

from dataclasses import dataclass

from health_metrics.app_logging import configure_logging
from health_metrics.config import Settings, parse_unit_preference
from health_metrics.services.metrics import (
    FoodLogRepository,
    MetricsService,
    ProfileRepository,
    WeightHistoryRepository,
)


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    metrics_service: MetricsService


def build_container(
    profile_repository: ProfileRepository,
    weight_repository: WeightHistoryRepository,
    food_log_repository: FoodLogRepository,
    settings: Settings | None = None,
) -> AppContainer:
    """Create the container around caller-supplied stores."""
    resolved_settings = settings or Settings()
    configure_logging(resolved_settings.log_level)
    metrics_service = MetricsService(
        profile_repository=profile_repository,
        weight_repository=weight_repository,
        food_log_repository=food_log_repository,
        unit_preference=parse_unit_preference(
            resolved_settings.default_unit_preference
        ),
        debug=resolved_settings.metrics_debug,
    )
    return AppContainer(settings=resolved_settings, metrics_service=metrics_service)
