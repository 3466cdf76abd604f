"""Instance id discovery from the host's private IPv4 address."""

import ipaddress
import socket

from core.errors import NoAddressError

# Connecting a UDP socket only selects a route; nothing is sent.
PROBE_ADDRESS = ("8.8.8.8", 10005)


def _probe_source_address():
    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
        sock.connect(PROBE_ADDRESS)
        return sock.getsockname()[0]


def get_ipv4():
    """Host IPv4 address as a tuple of four octets."""
    try:
        address = ipaddress.IPv4Address(socket.gethostbyname(socket.gethostname()))
        if address.is_loopback:
            address = ipaddress.IPv4Address(_probe_source_address())
    except (OSError, ValueError) as exc:
        raise NoAddressError("Cannot get local address, please check your network!", cause=exc) from exc
    return tuple(address.packed)


def is_private_ip(octets):
    """True for 10/8, 172.16/12 and 192.168/16."""
    if not octets:
        return False
    first, second = octets[0], octets[1]
    return first == 10 or (first == 172 and 16 <= second < 32) or (first == 192 and second == 168)


def format_ip(octets):
    return ".".join(str(octet) for octet in octets)


def obtain_instance_id():
    """Instance id from the two low octets of the private IPv4 address."""
    octets = get_ipv4()
    if not is_private_ip(octets):
        raise NoAddressError(f"{format_ip(octets)} is not a private ip.", address=format_ip(octets))
    return (octets[2] << 8) + octets[3]


instance_id_from_private_ip = obtain_instance_id
