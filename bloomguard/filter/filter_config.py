import math
from dataclasses import dataclass

from ..error_handler import ConfigurationError
from .hash_family import DEFAULT_BASE, DEFAULT_MODULUS


def _check_int(name: str, value, minimum: int):
    if isinstance(value, bool) or not isinstance(value, int) or value < minimum:
        raise ConfigurationError(f"{name} must be an integer of at least {minimum}, got {value!r}")


@dataclass
class FilterConfig:
    """Configuration for a Bloom filter"""
    bit_array_size: int = 1_000_001
    polynomial_base: int = DEFAULT_BASE
    modulus: int = DEFAULT_MODULUS

    def __post_init__(self):
        _check_int("bit_array_size", self.bit_array_size, 1)
        _check_int("polynomial_base", self.polynomial_base, 2)
        _check_int("modulus", self.modulus, 2)

    @classmethod
    def for_capacity(cls, capacity: int, error_rate: float = 0.01, **kwargs) -> 'FilterConfig':
        """
        Size the bit array for an expected item count and false positive rate

        Args:
            capacity: Expected number of items
            error_rate: Acceptable false positive rate, in (0, 1)

        Returns:
            FilterConfig with bit_array_size = -n * ln(p) / ln(2)^2
        """
        if capacity <= 0:
            raise ConfigurationError(f"capacity must be positive, got {capacity}")
        if not 0 < error_rate < 1:
            raise ConfigurationError(f"error_rate must be between 0 and 1, got {error_rate}")

        bit_array_size = math.ceil(-capacity * math.log(error_rate) / (math.log(2) ** 2))
        return cls(bit_array_size=bit_array_size, **kwargs)
