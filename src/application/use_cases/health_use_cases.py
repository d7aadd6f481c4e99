"""Use cases for health and application info endpoints."""

from dataclasses import asdict
from datetime import datetime, timezone
from typing import Optional

from src.application.dtos.health_dto import ApplicationInfoDTO, SystemHealthDTO
from src.application.models import InsightRules, SystemInfo
from src.domain.entities.health import ApplicationInfo, ServiceStatus, SystemHealth


class GetHealthStatusUseCase:
    """The service has no external dependencies, so reaching it means it is up."""

    def execute(self) -> SystemHealthDTO:
        return SystemHealthDTO.from_domain(
            SystemHealth(status=ServiceStatus.UP, checked_at=datetime.now(timezone.utc))
        )


class GetApplicationInfoUseCase:
    """Use case responsible for returning application info."""

    def __init__(self, system_info: SystemInfo, rules: InsightRules) -> None:
        self._info = system_info
        self._rules = rules

    def execute(self, started_at: Optional[datetime]) -> ApplicationInfoDTO:
        now = datetime.now(timezone.utc)
        started = started_at or now
        uptime_seconds = max(0.0, (now - started).total_seconds())

        info = ApplicationInfo(
            name=self._info.title,
            description=self._info.description,
            version=self._info.version,
            environment=self._info.environment,
            git_commit=self._info.git_commit,
            build_time=self._info.build_time,
            started_at=started,
            uptime_seconds=uptime_seconds,
            status=ServiceStatus.UP,
            extras={"insights": asdict(self._rules)},
        )
        return ApplicationInfoDTO.from_domain(info)
