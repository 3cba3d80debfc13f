from ..error_handler import ConfigurationError


class BitArray:
    """Fixed-size packed bit array; every index is taken modulo the size"""

    def __init__(self, size: int):
        if isinstance(size, bool) or not isinstance(size, int) or size <= 0:
            raise ConfigurationError(f"Bit array size must be a positive integer, got {size!r}")

        self.size = size
        self._bits = bytearray((size + 7) // 8)

    def __len__(self) -> int:
        return self.size

    def set(self, index: int):
        """Set bit (index mod size) to 1"""
        index %= self.size
        self._bits[index >> 3] |= 1 << (index & 7)

    def test(self, index: int) -> bool:
        """Check whether bit (index mod size) is 1"""
        index %= self.size
        return bool(self._bits[index >> 3] & (1 << (index & 7)))

    def count(self) -> int:
        """Number of bits currently set"""
        return bin(int.from_bytes(self._bits, 'little')).count('1')

    @property
    def byte_size(self) -> int:
        return len(self._bits)
