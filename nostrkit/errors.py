"""Exceptions raised by nostrkit."""


class NostrError(ValueError):
    """Base class for every error raised by this package."""


class InvalidPublicKey(NostrError):
    """A public key was malformed or not a valid curve point."""


class InvalidPublicKeyPrefix(NostrError):
    """A public key prefix was too long or not hexadecimal."""


class InvalidSignature(NostrError):
    """A signature was malformed or did not verify."""


class InvalidProfile(NostrError):
    """A profile (nprofile) encoding was malformed."""


class WrongBech32(NostrError):
    """A bech32 string carried an unexpected human-readable prefix."""

    def __init__(self, expected, found):
        self.expected = expected
        self.found = found
        super().__init__(f"Wrong bech32 prefix: expected {expected}, found {found}")


class InvalidUrl(NostrError):
    """A URL could not be parsed."""


class InvalidUrlHost(InvalidUrl):
    """A URL host is missing or not usable on the Internet."""

    def __init__(self, host):
        self.host = host
        super().__init__(f"Invalid URL host: {host!r}")


class InvalidUrlScheme(InvalidUrl):
    """A URL scheme is not acceptable in this context."""

    def __init__(self, scheme):
        self.scheme = scheme
        super().__init__(f"Invalid URL scheme: {scheme!r}")


class InvalidUrlMissingAuthority(InvalidUrl):
    """A URL has no authority component."""

    def __init__(self, message="URL is missing an authority"):
        super().__init__(message)