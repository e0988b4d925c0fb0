"""Host Info — hostname and first non-loopback IPv4 address for the root banner.

Invariants:
    - local_ipv4() never raises; "N/A" when no external IPv4 is found
"""

import logging
import socket

logger = logging.getLogger(__name__)

UNKNOWN_ADDRESS = "N/A"


def hostname() -> str:
    return socket.gethostname()


def local_ipv4() -> str:
    """First IPv4 address of this host that is not a loopback address."""
    try:
        infos = socket.getaddrinfo(socket.gethostname(), None, socket.AF_INET)
    except OSError as e:
        logger.debug(f"Could not resolve local addresses: {e}")
        return UNKNOWN_ADDRESS
    for *_, sockaddr in infos:
        address = sockaddr[0]
        if not address.startswith("127."):
            return address
    return UNKNOWN_ADDRESS
