from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum
import math
import pytz


class EventStatus(str, Enum):
    ACTIVE = "active"
    IN_REVIEW = "inReview"
    DONE = "done"


@dataclass(frozen=True)
class LastEvent:
    """The most recent event of a group: an end instant plus the length of
    the review window that follows it."""
    end: datetime
    review_duration_in_hours: float

    def __post_init__(self):
        if self.end.tzinfo is None or self.end.utcoffset() is None:
            raise ValueError(
                f"Event end must be timezone-aware, got {self.end!r}")
        if not math.isfinite(self.review_duration_in_hours):
            raise ValueError(
                "Review duration must be finite, "
                f"got {self.review_duration_in_hours!r} hours")
        if self.review_duration_in_hours < 0:
            raise ValueError(
                "Review duration must not be negative, "
                f"got {self.review_duration_in_hours!r} hours")
        # The deadline must be representable for derive_status to be total
        try:
            self.review_deadline
        except OverflowError:
            raise ValueError(
                f"Review duration of {self.review_duration_in_hours!r} hours "
                "ends past the last representable date") from None

    @classmethod
    def from_api_data(cls, api_data, comparison_timezone=pytz.utc):
        """
        Builds an event from a storage record shaped like
        {'endDate': <ISO-8601 string or datetime>, 'reviewDurationInHours': n}.
        Raises KeyError for missing fields and ValueError for bad values.
        """
        end = api_data['endDate']
        if isinstance(end, str):
            # fromisoformat only accepts the 'Z' suffix from Python 3.11
            if end.endswith('Z'):
                end = end[:-1] + '+00:00'
            end = datetime.fromisoformat(end)
        if end.tzinfo is None:
            raise ValueError(f"Event end must be timezone-aware, got {end!r}")

        return cls(
            end.astimezone(comparison_timezone),
            api_data['reviewDurationInHours'],
        )

    @property
    def review_deadline(self):
        return self.end + timedelta(hours=self.review_duration_in_hours)


def derive_status(event, now_utc):
    """
    Determines the status of the last event relative to the current time.
    Both cutoffs are inclusive: an event moves on to its next phase only
    strictly after the cutoff instant.
    """
    # 1. No event: DONE
    if event is None:
        return EventStatus.DONE

    # 2. Not ended yet: ACTIVE
    if now_utc <= event.end:
        return EventStatus.ACTIVE

    # 3. Ended, review window still open: IN_REVIEW
    if now_utc <= event.review_deadline:
        return EventStatus.IN_REVIEW

    return EventStatus.DONE
