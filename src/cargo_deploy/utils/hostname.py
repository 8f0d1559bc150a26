"""Hostname to filename conversion for per-device SSH key names"""
import string

_ALLOWED = frozenset(string.ascii_letters + string.digits + '-_')


def sanitize_hostname(hostname: str) -> str:
    """
    Turn a hostname or IP into a string safe for use in a key file name.

    Every character outside [A-Za-z0-9_-] becomes '_', runs of '_' are
    collapsed to one, and leading/trailing '_' are stripped.

    Examples:
        "10.0.0.5"           -> "10_0_0_5"
        "a__b___c"           -> "a_b_c"
        "_leading_trailing_" -> "leading_trailing"
        "fe80::1%eth0"       -> "fe80_1_eth0"
    """
    sanitized = ''.join(c if c in _ALLOWED else '_' for c in hostname)

    while '__' in sanitized:
        sanitized = sanitized.replace('__', '_')

    return sanitized.strip('_')
