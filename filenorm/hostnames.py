"""Validation of the server component of UNC-style prefixes.

A UNC host is accepted when it is an IPv6 literal or an RFC 3986
``reg-name``. Dotted-quad IPv4 literals are accepted through the
``reg-name`` grammar, where each octet is a valid label; the stricter
:func:`is_ipv4_address` check is only applied to the embedded IPv4 suffix of
an IPv6 literal.
"""

from __future__ import annotations

import re
import typing as t

_IPV4_PATTERN: t.Final = re.compile(
    r"([0-9]{1,3})\.([0-9]{1,3})\.([0-9]{1,3})\.([0-9]{1,3})"
)
_REG_NAME_PART_PATTERN: t.Final = re.compile(r"[a-zA-Z0-9][a-zA-Z0-9-]*")
_HEX_GROUP_PATTERN: t.Final = re.compile(r"[0-9a-fA-F]+")

IPV4_MAX_OCTET_VALUE: t.Final[int] = 255
IPV6_MAX_HEX_GROUPS: t.Final[int] = 8
IPV6_MAX_HEX_DIGITS_PER_GROUP: t.Final[int] = 4
MAX_UNSIGNED_SHORT: t.Final[int] = 0xFFFF


def is_ipv4_address(name: str) -> bool:
    """Return ``True`` for a dotted-quad IPv4 literal such as ``10.0.0.1``.

    Octets above 255 and octets with a leading zero (other than ``0`` itself)
    are rejected.
    """
    match = _IPV4_PATTERN.fullmatch(name)
    if match is None:
        return False
    for segment in match.groups():
        if int(segment) > IPV4_MAX_OCTET_VALUE:
            return False
        if len(segment) > 1 and segment.startswith("0"):
            return False
    return True


def _split_ipv6_groups(address: str, *, compressed: bool) -> list[str]:
    groups = address.split(":")
    # Trailing empty groups are dropped; a trailing "::" is re-added below.
    while groups and not groups[-1]:
        groups.pop()
    if compressed:
        if address.endswith("::"):
            groups.append("")
        elif address.startswith("::") and groups:
            groups.pop(0)
    return groups


def _is_hex_group(group: str) -> bool:
    if len(group) > IPV6_MAX_HEX_DIGITS_PER_GROUP:
        return False
    if _HEX_GROUP_PATTERN.fullmatch(group) is None:
        return False
    return int(group, 16) <= MAX_UNSIGNED_SHORT


def is_ipv6_address(address: str) -> bool:
    """Return ``True`` for an IPv6 literal, optionally with an IPv4 suffix."""
    compressed = "::" in address
    if compressed and address.find("::") != address.rfind("::"):
        return False
    if (address.startswith(":") and not address.startswith("::")) or (
        address.endswith(":") and not address.endswith("::")
    ):
        return False

    groups = _split_ipv6_groups(address, compressed=compressed)
    if len(groups) > IPV6_MAX_HEX_GROUPS:
        return False

    valid_groups = 0
    empty_run = 0
    for index, group in enumerate(groups):
        if not group:
            empty_run += 1
            if empty_run > 1:
                return False
        else:
            empty_run = 0
            if index == len(groups) - 1 and "." in group:
                if not is_ipv4_address(group):
                    return False
                valid_groups += 2
                continue
            if not _is_hex_group(group):
                return False
        valid_groups += 1

    if valid_groups > IPV6_MAX_HEX_GROUPS:
        return False
    return valid_groups == IPV6_MAX_HEX_GROUPS or compressed


def is_reg_name(name: str) -> bool:
    """Return ``True`` for an RFC 3986 ``reg-name`` made of dotted labels.

    A single trailing dot is allowed; any other empty label is not.
    """
    labels = name.split(".")
    for index, label in enumerate(labels):
        if not label:
            return index == len(labels) - 1
        if _REG_NAME_PART_PATTERN.fullmatch(label) is None:
            return False
    return True


def is_valid_host_name(name: str) -> bool:
    """Return ``True`` when *name* may appear as a UNC server."""
    return is_ipv6_address(name) or is_reg_name(name)


__all__ = [
    "is_ipv4_address",
    "is_ipv6_address",
    "is_reg_name",
    "is_valid_host_name",
]
