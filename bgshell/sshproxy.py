"""Maintain an HTTP proxy (corkscrew) entry in the ssh client configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional, Union

CONFIG_NAME = "config"
TMP_CONFIG_NAME = "config.tmp"
AUTH_NAME = "myauth"
AUTH_REFERENCE = "~/.ssh/myauth"
HOST_ALL = "Host *"

_PRIVATE_MODE = 0o600


@dataclass(frozen=True)
class ProxyDetails:
    """The system HTTP proxy: host, port and optional credentials."""

    host: str
    port: int = 0
    user: str = ""
    password: str = ""


def proxy_command(details: ProxyDetails, auth_file: Optional[str] = None) -> str:
    """Return the ssh_config ProxyCommand line (without newline) for ``details``."""
    command = f"\tProxyCommand corkscrew {details.host} {details.port} %h %p"
    if auth_file:
        command += f" {auth_file}"
    return command


def _contains(line: str, needle: str) -> bool:
    return needle.lower() in line.lower()


def add_proxy(lines: Iterable[str], command: str) -> List[str]:
    """Return ``lines`` with ``command`` set as the proxy of the ``Host *`` block."""
    result: List[str] = []
    host_all_found = False
    proxy_written = False
    for line in lines:
        if not host_all_found:
            if _contains(line, HOST_ALL):
                host_all_found = True
            result.append(line)
        elif proxy_written:
            result.append(line)
        elif _contains(line, "ProxyCommand"):
            result.append(command)
            proxy_written = True
        else:
            if _contains(line, "Host"):
                # The next block starts: the proxy belongs before it.
                result.append(command)
                proxy_written = True
            result.append(line)
    if not host_all_found:
        result.extend([HOST_ALL, command])
    elif not proxy_written:
        result.append(command)
    return result


def remove_proxy(lines: Iterable[str]) -> List[str]:
    """Return ``lines`` without any ProxyCommand line."""
    return [line for line in lines if not _contains(line, "ProxyCommand")]


def _write_private(path: Path, lines: List[str]) -> None:
    path.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")
    os.chmod(path, _PRIVATE_MODE)


def _rewrite(config: Path, lines: List[str]) -> None:
    tmp = config.with_name(TMP_CONFIG_NAME)
    _write_private(tmp, lines)
    os.replace(tmp, config)


def _read_lines(path: Path) -> List[str]:
    return path.read_text(encoding="utf-8").splitlines()


def apply_proxy_settings(
    data_dir: Union[str, "os.PathLike[str]"],
    details: Optional[ProxyDetails],
    enabled: bool,
) -> None:
    """Bring ``data_dir/.ssh/config`` in line with the proxy settings.

    With the proxy enabled and a host known, the ``Host *`` block gets a
    corkscrew ProxyCommand, and credentials go to a private auth file.
    Otherwise every ProxyCommand and the auth file are removed. Nothing
    happens when ``details`` is None (the proxy could not be queried).
    """
    if details is None:
        return
    ssh_dir = Path(data_dir) / ".ssh"
    ssh_dir.mkdir(parents=True, exist_ok=True)
    config = ssh_dir / CONFIG_NAME
    auth = ssh_dir / AUTH_NAME

    if enabled and details.host:
        if not details.user:
            command = proxy_command(details)
            auth.unlink(missing_ok=True)
        else:
            try:
                _write_private(auth, [f"{details.user}:{details.password}"])
            except OSError:
                command = proxy_command(details)
            else:
                command = proxy_command(details, AUTH_REFERENCE)
        if config.exists():
            _rewrite(config, add_proxy(_read_lines(config), command))
        else:
            _write_private(config, [HOST_ALL, command])
    else:
        auth.unlink(missing_ok=True)
        if config.exists():
            _rewrite(config, remove_proxy(_read_lines(config)))