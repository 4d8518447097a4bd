# pwgen
# (random password generator)
#

import logging
from random import SystemRandom

from .charset import Charset, check_length
from .errors import InvalidCharset

# Every draw goes through this object. Tests may replace it
# with a seeded random.Random (monkeypatch), nothing else does.
random = SystemRandom()

log = logging.getLogger(__name__)

DEFAULT_LENGTH = 20


def generate_password(charset: Charset, length: int = DEFAULT_LENGTH) -> str:
    """Generate random password of exactly `length` characters.

    The extra characters of `charset` are placed first: a random subset
    of positions (size equal to the total extra count) is reserved
    and the extra multiset is shuffled into those positions.
    Each remaining position is then drawn independently
    from the whole alphabet (base and extra characters).

    :param charset: Resolved charset
    :param length: Password length, at least `charset.extra_count`
    :returns: The password.
    :raises InfeasibleLength: extra characters don't fit into `length`
    :raises InvalidCharset: the alphabet is empty

    """
    check_length(charset, length)
    alphabet = charset.alphabet
    if not alphabet:
        raise InvalidCharset()

    chars = [None] * length
    extras = charset.extra_elements()
    slots = sorted(random.sample(range(length), len(extras)))
    random.shuffle(extras)
    for i, ch in zip(slots, extras):
        chars[i] = ch
    for i in range(length):
        if chars[i] is None:
            chars[i] = random.choice(alphabet)
    return ''.join(chars)


def generate_passwords(charset: Charset, length: int = DEFAULT_LENGTH, count: int = 1) -> list:
    """Generate `count` independent passwords."""
    log.debug("Generating %d password(s) of length %d", count, length)
    return [generate_password(charset, length) for _ in range(count)]
