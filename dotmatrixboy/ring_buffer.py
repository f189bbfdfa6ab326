"""Fixed-capacity ring buffer of audio samples."""

DEFAULT_CAPACITY = 8192 * 2


class RingBuffer:
    """A FIFO of floats that overwrites its oldest entry when full."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 2:
            raise ValueError("capacity must be at least 2")
        self._capacity = capacity
        self._buffer = [0.0] * capacity
        self._read_index = 0
        self._write_index = 0

    def reset(self) -> None:
        """Drop every queued sample."""
        self._read_index = 0
        self._write_index = 0

    def read(self) -> float:
        """Return the oldest sample, or 0.0 when the buffer is empty."""
        if self._read_index == self._write_index:
            return 0.0
        value = self._buffer[self._read_index]
        self._read_index = (self._read_index + 1) % self._capacity
        return value

    def write(self, value: float) -> None:
        """Append a sample, discarding the oldest one on overflow."""
        self._buffer[self._write_index] = value
        self._write_index = (self._write_index + 1) % self._capacity
        if self._write_index == self._read_index:
            self._read_index = (self._read_index + 1) % self._capacity

    def __len__(self) -> int:
        return (self._write_index - self._read_index) % self._capacity