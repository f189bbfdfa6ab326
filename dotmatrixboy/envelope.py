"""Volume envelope shared by the pulse and noise channels."""

MAX_VOLUME = 15


class Envelope:
    """Steps a 4-bit volume up or down once every ``ticks`` clocks."""

    def __init__(self) -> None:
        self._ticks = 0
        self._elapsed = 0
        self._volume = 0
        self._increasing = False

    @property
    def volume(self) -> int:
        """The current volume, 0 to 15."""
        return self._volume

    def set_envelope(self, ticks: int, start_volume: int, increasing: bool) -> None:
        """Load a new period, starting volume and direction."""
        self._ticks = ticks
        self._volume = start_volume
        self._increasing = bool(increasing)

    def clock(self) -> None:
        """Advance the envelope by one frame-sequencer step."""
        if self._ticks == 0:
            return

        self._elapsed = (self._elapsed + 1) % self._ticks
        if self._elapsed != 0:
            return

        if self._increasing:
            if self._volume != MAX_VOLUME:
                self._volume += 1
        elif self._volume != 0:
            self._volume -= 1