"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os

import dotenv

from src.infrastructure.logging.logger import get_app_logger
from src.utils.utils import get_project_root


DEFAULT_PULL_TIMEOUT_SECONDS = 8.0
DEFAULT_PUSH_TIMEOUT_SECONDS = 15.0


@dataclass(frozen=True)
class DashboardSettings:
    """Settings for the local store and the remote mirror.

    Attributes:
        remote_url: Remote document endpoint, None disables synchronization.
        pull_timeout: Hard deadline in seconds for the session pull.
        push_timeout: Per-request HTTP timeout in seconds for pushes.
        local_db_url: SQLAlchemy URL of the local store database.
    """

    remote_url: str | None = None
    pull_timeout: float = DEFAULT_PULL_TIMEOUT_SECONDS
    push_timeout: float = DEFAULT_PUSH_TIMEOUT_SECONDS
    local_db_url: str = ""

    @property
    def sync_enabled(self) -> bool:
        return bool(self.remote_url)

    @classmethod
    def from_env(cls) -> "DashboardSettings":
        """Build settings from environment variables.

        Returns:
            DashboardSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        remote_url = (os.getenv("DASHBOARD_REMOTE_URL") or "").strip() or None
        if remote_url is None:
            logger.warning(
                "DASHBOARD_REMOTE_URL is not set; running in local-only mode"
            )
        pull_timeout = cls._parse_seconds(
            os.getenv("DASHBOARD_PULL_TIMEOUT"),
            DEFAULT_PULL_TIMEOUT_SECONDS,
            name="DASHBOARD_PULL_TIMEOUT",
            logger=logger,
        )
        push_timeout = cls._parse_seconds(
            os.getenv("DASHBOARD_PUSH_TIMEOUT"),
            DEFAULT_PUSH_TIMEOUT_SECONDS,
            name="DASHBOARD_PUSH_TIMEOUT",
            logger=logger,
        )
        local_db_url = (
            os.getenv("LOCAL_STORE_DB_URL") or ""
        ).strip() or cls._default_local_db_url()
        return cls(
            remote_url=remote_url,
            pull_timeout=pull_timeout,
            push_timeout=push_timeout,
            local_db_url=local_db_url,
        )

    @staticmethod
    def _parse_seconds(
        raw_value: str | None,
        default: float,
        name: str,
        logger,
    ) -> float:
        """Parse a positive duration in seconds.

        Args:
            raw_value: Raw environment value.
            default: Value used when missing or invalid.
            name: Variable name used in warnings.
            logger: Logger used for warnings.

        Returns:
            float: Parsed duration.
        """
        if raw_value is None or not raw_value.strip():
            return default
        try:
            value = float(raw_value)
        except ValueError:
            logger.warning(
                f"Invalid {name} '{raw_value}'. Using {default} seconds."
            )
            return default
        if value <= 0:
            logger.warning(
                f"{name} must be positive, got {value}. "
                f"Using {default} seconds."
            )
            return default
        return value

    @staticmethod
    def _default_local_db_url() -> str:
        """Return the SQLite URL under the project data directory."""
        data_dir = get_project_root() / "data"
        data_dir.mkdir(parents=True, exist_ok=True)
        return f"sqlite:///{data_dir / 'dashboard.sqlite3'}"


__all__ = [
    "DashboardSettings",
    "DEFAULT_PULL_TIMEOUT_SECONDS",
    "DEFAULT_PUSH_TIMEOUT_SECONDS",
]
