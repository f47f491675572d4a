"""System context: detect OS, architecture and shell for the system prompt."""
from __future__ import annotations
from dataclasses import dataclass
import logging, platform

import distro

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class EnvironmentInfo:
    os: str
    arch: str
    shell: str

def shell_name(shell_path: str) -> str:
    return (shell_path or "sh").rsplit("/", 1)[-1]

def os_identity(system: str | None = None, os_release_file: str = "") -> str:
    system = (system or platform.system()).lower()
    if system != "linux":
        return system
    try:
        info = distro.LinuxDistribution(
            include_lsb=False, include_uname=False, include_oslevel=False,
            os_release_file=os_release_file,
        ).os_release_info()
    except (OSError, UnicodeDecodeError) as e:
        logger.debug("os-release unreadable: %s", e)
        return "linux"
    pretty, name, version = (info.get(k, "") for k in ("pretty_name", "name", "version"))
    if pretty:
        return pretty
    if name and version:
        return f"{name} {version}"
    return name or "linux"

def probe(shell_path: str = "sh", system: str | None = None, os_release_file: str = "") -> EnvironmentInfo:
    env = EnvironmentInfo(
        os=os_identity(system, os_release_file),
        arch=platform.machine(),
        shell=shell_name(shell_path),
    )
    logger.debug("probed %s", env)
    return env
