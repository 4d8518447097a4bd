# Criteria, Charset, resolve_charset
# (character sets for password generation)
#

import re
import enum
import string
import logging
from collections import Counter

from .errors import InvalidCharset, InfeasibleLength, InvalidRegex, RegexMatchesNoChars

log = logging.getLogger(__name__)

#: Bounded alphabet for regex expansion: printable ASCII, space included
PRINTABLE_ASCII = ''.join(chr(c) for c in range(ord(' '), ord('~') + 1))


class Criteria(enum.Enum):
    ALPHANUMERIC = 'alphanumeric'
    UPPERCASE_AND_DIGITS = 'uppercase'
    LOWERCASE_AND_DIGITS = 'lowercase'
    DIGITS = 'digits'
    ALL_PRINTABLE = 'symbols'


NAMED_CHARSETS = {
    Criteria.ALPHANUMERIC: string.digits + string.ascii_uppercase + string.ascii_lowercase,
    Criteria.UPPERCASE_AND_DIGITS: string.digits + string.ascii_uppercase,
    Criteria.LOWERCASE_AND_DIGITS: string.digits + string.ascii_lowercase,
    Criteria.DIGITS: string.digits,
    Criteria.ALL_PRINTABLE: PRINTABLE_ASCII,
}


def charset_from_regex(pattern: str) -> str:
    """Expand `pattern` into the printable ASCII characters it matches.

    Each character is tested on its own, the pattern may match
    anywhere in it (no implicit anchoring).

    """
    try:
        regex = re.compile(pattern)
    except re.error as e:
        raise InvalidRegex(f"invalid regex pattern: {e}") from e
    chars = ''.join(c for c in PRINTABLE_ASCII if regex.search(c))
    if not chars:
        raise RegexMatchesNoChars()
    return chars


def count_multiplicities(extra) -> Counter:
    """Count occurrences of each distinct character in `extra`."""
    return Counter(extra or '')


class Charset:

    """Resolved character model.

    * base: characters eligible for unconstrained positions
    * extra: mandatory characters and their multiplicities
    * alphabet: sorted union of base and distinct extra characters,
      the pool for all fill positions

    Instances are read-only after construction.

    """

    def __init__(self, base='', extra=''):
        self._base = frozenset(base)
        if extra is None or isinstance(extra, str):
            extra = count_multiplicities(extra)
        self._extra = {c: n for c, n in sorted(extra.items()) if n > 0}
        self._alphabet = ''.join(sorted(self._base.union(self._extra)))

    def __repr__(self):
        return "{}(base={!r}, extra={!r})".format(
            self.__class__.__name__, ''.join(sorted(self._base)), self._extra)

    def __eq__(self, other):
        if not isinstance(other, Charset):
            return NotImplemented
        return self._base == other._base and self._extra == other._extra

    def __hash__(self):
        return hash((self._base, tuple(self._extra.items())))

    @property
    def base(self) -> frozenset:
        return self._base

    @property
    def extra(self) -> dict:
        return dict(self._extra)

    @property
    def alphabet(self) -> str:
        return self._alphabet

    @property
    def extra_count(self) -> int:
        """Total number of mandatory characters."""
        return sum(self._extra.values())

    @property
    def multiplicities(self) -> tuple:
        return tuple(sorted(self._extra.values()))

    def extra_elements(self) -> list:
        """The extra multiset expanded to a list, e.g. ['!', '@', '@']."""
        return [c for c, n in self._extra.items() for _ in range(n)]


def resolve_charset(base=None, extra='', criteria=None, regex=None) -> Charset:
    """Build a validated `Charset`.

    Base precedence: explicit `base` characters, then named `criteria`,
    then `regex`, finally alphanumeric.

    :raises InvalidCharset: when neither base nor extra yields a character
    :raises InvalidRegex: when `regex` does not compile

    """
    if base is not None:
        base_chars = base
    elif criteria is not None:
        base_chars = NAMED_CHARSETS[criteria]
    elif regex:
        base_chars = charset_from_regex(regex)
    else:
        base_chars = NAMED_CHARSETS[Criteria.ALPHANUMERIC]
    charset = Charset(base_chars, extra)
    if not charset.alphabet:
        raise InvalidCharset()
    log.debug("Resolved charset: %d base, %d distinct extra, %d in alphabet",
              len(charset.base), len(charset.extra), len(charset.alphabet))
    return charset


def check_length(charset: Charset, length: int):
    """Raise `InfeasibleLength` unless `length` fits all extra characters."""
    if length < 0:
        raise InfeasibleLength(f"password length must not be negative: {length}")
    if length < charset.extra_count:
        raise InfeasibleLength(f"too many extra characters: {charset.extra_count} "
                               f"mandatory characters do not fit length {length}")
