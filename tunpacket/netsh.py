"""Driving the Windows netsh tool for DNS settings."""

from __future__ import annotations

import os
import subprocess
from ipaddress import IPv4Address, IPv6Address, ip_address

# Windows address family values.
_AF_INET = 2
_AF_INET6 = 23

_FLUSH4 = "interface ipv4 set dnsservers name={} source=static address=none validate=no"
_FLUSH6 = "interface ipv6 set dnsservers name={} source=static address=none validate=no"
_ADD4 = "interface ipv4 add dnsservers name={} address={} validate=no"
_ADD6 = "interface ipv6 add dnsservers name={} address={} validate=no"
_DISABLE_REGISTRATION = "interface ipv6 set dnsservers name={} register=none"

_NO_DNS_MESSAGE = "There are no Domain Name Servers (DNS) configured on this computer."


class NetshError(RuntimeError):
    """netsh failed or printed something unexpected."""


def dns_commands(family: int, interface_index: int, servers) -> list[str]:
    """Build commands that replace the DNS servers of one interface.

    Only servers of ``family`` (2 for IPv4, 23 for IPv6) are added.
    """
    if family == _AF_INET:
        flush, add, kind = _FLUSH4, _ADD4, IPv4Address
    elif family == _AF_INET6:
        flush, add, kind = _FLUSH6, _ADD6, IPv6Address
    else:
        raise ValueError(f"unsupported address family: {family}")
    commands = [flush.format(interface_index)]
    for server in servers:
        address = ip_address(server)
        if isinstance(address, kind):
            commands.append(add.format(interface_index, address))
    return commands


def disable_registration_command(interface_index: int) -> str:
    """Build the command that turns off DNS registration for an interface."""
    return _DISABLE_REGISTRATION.format(interface_index)


def clean_output(output) -> str:
    """Strip prompts and harmless notices from netsh output."""
    if isinstance(output, (bytes, bytearray)):
        output = output.decode("utf-8", errors="replace")
    cleaned = output.replace("\r\n", "\n")
    cleaned = cleaned.replace("netsh>", "")
    cleaned = cleaned.replace(_NO_DNS_MESSAGE, "")
    return cleaned.strip()


def _netsh_path() -> str:
    root = os.environ.get("SystemRoot", r"C:\Windows")
    return os.path.join(root, "System32", "netsh.exe")


def run_netsh(commands) -> None:
    """Feed ``commands`` to netsh; raise NetshError on failure or any output."""
    script = "\r\n".join([*commands, "exit\r\n"])
    try:
        result = subprocess.run(
            [_netsh_path()],
            input=script.encode("utf-8"),
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            creationflags=getattr(subprocess, "CREATE_NO_WINDOW", 0),
        )
    except OSError as exc:
        raise NetshError(f"netsh: {exc}: ``") from exc
    cleaned = clean_output(result.stdout or b"")
    if result.returncode != 0:
        raise NetshError(f"netsh: exit status {result.returncode}: `{cleaned}`")
    if cleaned:
        raise NetshError(f"netsh: `{cleaned}`")