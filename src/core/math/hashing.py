"""
Hashing — Целочисленное перемешивание хешей

Хеш интервала собирается в фиксированном порядке:
    hash_start(seed) → hash_combine(h, hash(lower)) → hash_combine(h, hash(upper))
    → hash_combine(h, seed << 24) → hash_finish(h)

Все вычисления ведутся по модулю 2**64 и детерминированы для одинаковых входов.
"""

from typing import Final

# =============================================================================
# CONSTANTS
# =============================================================================

HASH_BITS: Final[int] = 64
HASH_MASK: Final[int] = (1 << HASH_BITS) - 1

# Константы перемешивания (splitmix64 / murmur3 fmix64)
_GOLDEN_GAMMA: Final[int] = 0x9E3779B97F4A7C15
_MIX_MULT_1: Final[int] = 0xBF58476D1CE4E5B9
_MIX_MULT_2: Final[int] = 0x94D049BB133111EB
_FMIX_MULT_1: Final[int] = 0xFF51AFD7ED558CCD
_FMIX_MULT_2: Final[int] = 0xC4CEB9FE1A85EC53


def _mix64(value: int) -> int:
    value = (value ^ (value >> 30)) * _MIX_MULT_1 & HASH_MASK
    value = (value ^ (value >> 27)) * _MIX_MULT_2 & HASH_MASK
    return value ^ (value >> 31)


def hash_start(seed: int) -> int:
    """Начальное состояние хеша из seed."""
    return _mix64((seed + _GOLDEN_GAMMA) & HASH_MASK)


def hash_combine(state: int, value: int) -> int:
    """
    Добавление значения в состояние хеша.

    Args:
        state: Текущее состояние
        value: Хеш компонента (может быть отрицательным)

    Returns:
        Новое состояние в диапазоне [0, 2**64)
    """
    state ^= _mix64(((value & HASH_MASK) + _GOLDEN_GAMMA) & HASH_MASK)
    return (state * _FMIX_MULT_1 + _GOLDEN_GAMMA) & HASH_MASK


def hash_finish(state: int) -> int:
    """
    Финализация: fmix64 и перевод в знаковый диапазон Python hash.

    Returns:
        Знаковое 64-битное целое
    """
    state ^= state >> 33
    state = (state * _FMIX_MULT_1) & HASH_MASK
    state ^= state >> 33
    state = (state * _FMIX_MULT_2) & HASH_MASK
    state ^= state >> 33
    if state >= 1 << (HASH_BITS - 1):
        state -= 1 << HASH_BITS
    return state
