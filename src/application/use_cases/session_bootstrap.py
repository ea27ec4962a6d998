"""Use case running the once-per-session startup sequence.

The sequence is:

* compare the stored last-login month with the current month and signal a
  rollover when they differ (no data is archived or reset);
* pull the remote snapshot through the cloud sync gateway;
* record whether the session is online or running from local data only.
"""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import date
from enum import Enum

from src.application.ports.cloud_sync import CloudSyncPort
from src.application.ports.local_store import LocalStoreError
from src.application.ports.repositories import PreferencesRepositoryPort
from src.domain.services.normalization import month_key
from src.infrastructure.logging.logger import get_app_logger, get_usage_logger
from src.infrastructure.record_codec import RecordDecodeError


class ConnectivityState(str, Enum):
    """Connectivity of the current session."""

    PENDING = "pending"
    SYNCING = "syncing"
    ONLINE = "online"
    OFFLINE = "offline"


@dataclass(frozen=True)
class MonthRollover:
    """Signal emitted when a session starts in a new calendar month."""

    previous_month: str
    current_month: str


@dataclass(frozen=True)
class SessionState:
    """Outcome of the session bootstrap.

    Attributes:
        connectivity: ONLINE when the pull succeeded, OFFLINE otherwise.
        rollover: Month rollover detected at startup, if any.
    """

    connectivity: ConnectivityState
    rollover: MonthRollover | None = None

    @property
    def is_offline(self) -> bool:
        return self.connectivity is ConnectivityState.OFFLINE


RolloverListener = Callable[[MonthRollover], None]


class SessionBootstrapUseCase:
    """Run the month check and the initial pull exactly once."""

    def __init__(
        self,
        preferences: PreferencesRepositoryPort,
        gateway: CloudSyncPort,
        clock: Callable[[], date] = date.today,
        logger=None,
        usage_logger=None,
        on_month_rollover: list[RolloverListener] | None = None,
    ) -> None:
        """Initialize the use case.

        Args:
            preferences: Repository holding the last-login month marker.
            gateway: Gateway performing the pull.
            clock: Source of the current calendar day.
            logger: Optional logger compatible with logging.Logger-like API.
            usage_logger: Optional logger for session events.
            on_month_rollover: Callbacks invoked when a rollover is detected.
        """
        self._preferences = preferences
        self._gateway = gateway
        self._clock = clock
        self._logger = logger or get_app_logger()
        self._usage_logger = usage_logger or get_usage_logger()
        self._listeners = list(on_month_rollover or [])
        self._state = ConnectivityState.PENDING
        self._result: SessionState | None = None

    @property
    def state(self) -> ConnectivityState:
        """Current connectivity; SYNCING while the pull is in progress."""
        return self._state

    @property
    def result(self) -> SessionState | None:
        return self._result

    def add_rollover_listener(self, listener: RolloverListener) -> None:
        self._listeners.append(listener)

    def check_monthly_rollover(self) -> MonthRollover | None:
        """Update the last-login marker and report a month change.

        Listener errors and marker read or write failures are logged and do
        not stop the session from starting.

        Returns:
            MonthRollover | None: The rollover when a previous month was
            stored and differs from the current one.
        """
        current_month = month_key(self._clock())
        try:
            previous_month = self._preferences.get_last_login_month()
        except (LocalStoreError, RecordDecodeError) as exc:
            self._logger.error(
                f"Could not read last login month, skipping rollover: {exc}"
            )
            previous_month = None
        rollover = None
        if previous_month and previous_month != current_month:
            rollover = MonthRollover(
                previous_month=previous_month,
                current_month=current_month,
            )
            self._logger.info(
                f"New month detected: {current_month}. "
                f"Previous: {previous_month}"
            )
            self._notify(rollover)
        try:
            self._preferences.set_last_login_month(current_month)
        except LocalStoreError as exc:
            self._logger.error(
                f"Could not store last login month {current_month}: {exc}"
            )
        return rollover

    def _notify(self, rollover: MonthRollover) -> None:
        for listener in self._listeners:
            try:
                listener(rollover)
            except Exception as exc:
                self._logger.error(
                    f"Month rollover listener {listener!r} failed: {exc!r}"
                )

    async def run(self) -> SessionState:
        """Execute the startup sequence.

        Returns:
            SessionState: Connectivity and rollover for the session.

        Raises:
            RuntimeError: If the bootstrap already ran for this session.
        """
        if self._state is not ConnectivityState.PENDING:
            raise RuntimeError("Session bootstrap already ran")

        rollover = self.check_monthly_rollover()

        self._state = ConnectivityState.SYNCING
        synced = await self._gateway.pull()
        self._state = (
            ConnectivityState.ONLINE if synced else ConnectivityState.OFFLINE
        )

        self._result = SessionState(connectivity=self._state, rollover=rollover)
        self._usage_logger.info(
            f"Session started connectivity={self._state.value}"
        )
        return self._result


__all__ = [
    "ConnectivityState",
    "MonthRollover",
    "SessionState",
    "SessionBootstrapUseCase",
]
