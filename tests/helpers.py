from datetime import datetime, timedelta, timezone

BASE_TIME = datetime(2024, 1, 1, tzinfo=timezone.utc)


class StepClock:
    """Clock that advances by ``step`` on every call."""

    def __init__(self, step: timedelta = timedelta(seconds=1)) -> None:
        self.step = step
        self.calls = 0

    def __call__(self) -> datetime:
        now = BASE_TIME + self.step * self.calls
        self.calls += 1
        return now
