"""Host Info — local IPv4 discovery for the root banner."""

import socket

from movies_api.infrastructure import host_info


def _addr(ip):
    return (socket.AF_INET, socket.SOCK_STREAM, 6, "", (ip, 0))


def test_skips_loopback_addresses(monkeypatch):
    monkeypatch.setattr(
        host_info.socket, "getaddrinfo",
        lambda *a, **kw: [_addr("127.0.1.1"), _addr("192.168.1.20")],
    )
    assert host_info.local_ipv4() == "192.168.1.20"


def test_only_loopback_gives_na(monkeypatch):
    monkeypatch.setattr(
        host_info.socket, "getaddrinfo", lambda *a, **kw: [_addr("127.0.0.1")],
    )
    assert host_info.local_ipv4() == "N/A"


def test_resolution_failure_gives_na(monkeypatch):
    def _fail(*a, **kw):
        raise socket.gaierror("no name")

    monkeypatch.setattr(host_info.socket, "getaddrinfo", _fail)
    assert host_info.local_ipv4() == "N/A"
