"""A flat 64 KiB address space used as the emulator's memory bus."""

MEMORY_SIZE = 0x10000


class Memory:
    """Byte-addressable 64 KiB memory with helpers for register bit flags."""

    def __init__(self) -> None:
        self._data = bytearray(MEMORY_SIZE)

    @staticmethod
    def _check_address(address: int) -> None:
        if not 0 <= address < MEMORY_SIZE:
            raise IndexError(f"address {address:#x} is outside the address space")

    def read(self, address: int) -> int:
        """Return the byte stored at ``address``."""
        self._check_address(address)
        return self._data[address]

    def write(self, address: int, value: int) -> None:
        """Store a byte at ``address``."""
        self._check_address(address)
        if not 0 <= value <= 0xFF:
            raise ValueError(f"value {value!r} does not fit in a byte")
        self._data[address] = value

    def read_register_bit(self, address: int, flag: int) -> bool:
        """Return True when any bit of the ``flag`` mask is set at ``address``."""
        return bool(self.read(address) & flag)

    def write_register_bit(self, address: int, flag: int, enabled: bool) -> None:
        """Set or clear the bits of the ``flag`` mask at ``address``."""
        current = self.read(address)
        if enabled:
            self.write(address, (current | flag) & 0xFF)
        else:
            self.write(address, current & ~flag & 0xFF)

    def reset(self) -> None:
        """Clear every byte back to zero."""
        self._data = bytearray(MEMORY_SIZE)