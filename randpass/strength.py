# StrengthTier, tier, is_weak
# (classify entropy)
#

import enum

from .entropy import ENTROPY_THRESHOLD

STRONG_THRESHOLD = 100.0


class StrengthTier(enum.IntEnum):
    WEAK = 0
    MODERATE = 1
    STRONG = 2

    def __str__(self):
        return self.name.lower()


def tier(entropy: float) -> StrengthTier:
    if entropy < ENTROPY_THRESHOLD:
        return StrengthTier.WEAK
    if entropy < STRONG_THRESHOLD:
        return StrengthTier.MODERATE
    return StrengthTier.STRONG


def is_weak(entropy: float) -> bool:
    """Weak passwords trigger a warning (or failure) in the front end."""
    return entropy < ENTROPY_THRESHOLD
