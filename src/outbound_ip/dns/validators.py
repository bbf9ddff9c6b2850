"""Address format checks."""

import re

_OCTET = r"(?:25[0-5]|2[0-4][0-9]|1[0-9][0-9]|[1-9]?[0-9])"

IPV4_PATTERN = re.compile(rf"{_OCTET}(?:\.{_OCTET}){{3}}")


def is_ipv4(value: object) -> bool:
    """
    Check whether a value is a dotted-quad IPv4 address.

    Four decimal octets in [0, 255] without leading zeros, and nothing
    before or after them.
    """
    if not isinstance(value, str):
        return False

    return IPV4_PATTERN.fullmatch(value) is not None
