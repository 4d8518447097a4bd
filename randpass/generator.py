# PasswordRequest, GeneratedPassword, generate
# (request/result API over pwgen, entropy and strength)
#

from typing import NamedTuple

from .charset import Charset, check_length
from .errors import InvalidCharset, InvalidCount
from .entropy import charset_entropy
from .strength import StrengthTier, tier
from . import pwgen


class GeneratedPassword(NamedTuple):
    password: str
    entropy_bits: float
    tier: StrengthTier


class PasswordRequest:

    """Resolved request: what to generate and how many times.

    Validated on construction, so `generate` never fails half-way.

    """

    def __init__(self, charset: Charset, length: int = pwgen.DEFAULT_LENGTH, count: int = 1):
        if not charset.alphabet:
            raise InvalidCharset()
        check_length(charset, length)
        if count < 0:
            raise InvalidCount(f"number of passwords must not be negative: {count}")
        self.charset = charset
        self.length = length
        self.count = count

    def __repr__(self):
        return "{}({!r}, length={}, count={})".format(
            self.__class__.__name__, self.charset, self.length, self.count)

    def entropy(self) -> float:
        return charset_entropy(self.charset, self.length)

    def tier(self) -> StrengthTier:
        return tier(self.entropy())


def generate(request: PasswordRequest) -> list:
    """Generate passwords for `request`, in order.

    Entropy and tier describe the generator, so all results share them.

    """
    entropy = request.entropy()
    strength = tier(entropy)
    return [GeneratedPassword(password, entropy, strength)
            for password in pwgen.generate_passwords(request.charset, request.length, request.count)]
