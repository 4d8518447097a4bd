# calculate_entropy, suggest_password_length
# (entropy of the password distribution)
#

import math

from .charset import Charset
from .errors import InfeasibleLength

#: Passwords below this many bits are considered weak
ENTROPY_THRESHOLD = 72.0

MAX_SUGGESTED_LENGTH = 999


def log2_factorial(n: int) -> float:
    return math.log2(math.factorial(n))


def log2_binomial(n: int, k: int) -> float:
    if k > n:
        raise ValueError(f"binomial coefficient undefined for k={k} > n={n}")
    return math.log2(math.comb(n, k))


def count_outcomes(length: int, alphabet_size: int, multiplicities=()) -> int:
    """Count equally likely outcomes of the generator (exact integer).

    C(length, k) * k! / prod(m!) * alphabet_size ** (length - k),
    where k is the sum of `multiplicities`.

    """
    extra_count = sum(multiplicities)
    if length < extra_count:
        raise InfeasibleLength()
    arrangements = math.comb(length, extra_count) * math.factorial(extra_count)
    for m in multiplicities:
        arrangements //= math.factorial(m)
    return arrangements * alphabet_size ** (length - extra_count)


def calculate_entropy(length: int, alphabet_size: int, multiplicities=()) -> float:
    """Calculate entropy in bits.

    :param length: Password length
    :param alphabet_size: Number of distinct characters (base and extra)
    :param multiplicities: Occurrence count of each distinct extra character
    :returns: Entropy in bits, zero for single-character alphabet.

    """
    if alphabet_size <= 1:
        if length < sum(multiplicities):
            raise InfeasibleLength()
        return 0.0
    return math.log2(count_outcomes(length, alphabet_size, multiplicities))


def charset_entropy(charset: Charset, length: int) -> float:
    return calculate_entropy(length, len(charset.alphabet), charset.multiplicities)


def suggest_password_length(alphabet_size: int, multiplicities=()):
    """Find the shortest length reaching `ENTROPY_THRESHOLD`.

    Returns None when no length up to `MAX_SUGGESTED_LENGTH` is enough.

    """
    for length in range(max(1, sum(multiplicities)), MAX_SUGGESTED_LENGTH + 1):
        if calculate_entropy(length, alphabet_size, multiplicities) >= ENTROPY_THRESHOLD:
            return length
    return None
