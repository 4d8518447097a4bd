# RandpassError, InvalidCharset, InfeasibleLength, ...
# (errors raised while resolving and generating passwords)
#


class RandpassError(Exception):

    default_message = "error"

    def __init__(self, msg=None):
        Exception.__init__(self, msg or self.default_message)


class InvalidCharset(RandpassError):
    default_message = "no valid characters left in the charset"


class InfeasibleLength(RandpassError):
    default_message = "too many extra characters"


class InvalidRegex(RandpassError):
    default_message = "invalid regex pattern"


class RegexMatchesNoChars(InvalidCharset):
    default_message = "no valid characters found for the provided regex"


class EntropyInsufficient(RandpassError):

    def __init__(self, entropy: float):
        self.entropy = entropy
        RandpassError.__init__(self, f"your password has only {entropy:.2f} bits of entropy")


class InvalidCount(RandpassError, ValueError):
    default_message = "number of passwords must not be negative"
