from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional
import pytz
import config
from last_event import LastEvent, EventStatus, derive_status
from logging_config import get_logger

logger = get_logger(__name__)


class LoadLastEventRepository(ABC):
    """Data source for the most recent event of a group."""

    @abstractmethod
    async def load_last_event(self, group_id: str) -> Optional[LastEvent]:
        """Return the group's most recent event, or None if it has none."""
        pass


def _default_clock():
    return datetime.now(pytz.timezone(config.TIMEZONE))


class CheckLastEventStatus:
    def __init__(self, load_last_event_repository, clock=None):
        self._repository = load_last_event_repository
        self._clock = clock or _default_clock

    async def execute(self, group_id: str) -> EventStatus:
        """
        Loads the group's last event and derives its status at the current
        time. Repository errors are re-raised untouched.
        """
        logger.debug("Loading last event for group %s", group_id)
        try:
            event = await self._repository.load_last_event(group_id)
        except Exception:
            logger.exception(
                "Last event lookup failed for group %s", group_id)
            raise

        status = derive_status(event, self._clock())
        logger.debug("Group %s last event %r is %s",
                     group_id, event, status.value)
        return status
