"""Length counter that can silence a channel after a number of steps."""


class LengthCounter:
    """Counts down on each length clock and reports whether the channel may play."""

    def __init__(self) -> None:
        self._stop_after_length = False
        self._remaining = 0

    @property
    def remaining(self) -> int:
        """Steps left before the counter expires."""
        return self._remaining

    def set_length(self, value: int, stop_after_length: bool) -> None:
        """Load ``value`` unless a count is still running, and set the stop flag."""
        if self._remaining == 0:
            self._remaining = value
        self._stop_after_length = bool(stop_after_length)

    def clock(self) -> bool:
        """Count down one step; return True while the channel should stay on."""
        if self._remaining:
            self._remaining -= 1
        return not self._stop_after_length or self._remaining != 0