"""System information tool."""

import getpass
import json
import os
import platform
import socket
import sys
import time

import psutil

from mcp.types import ToolAnnotations

from hostname_mcp.audit import log_tool_call
from hostname_mcp.server import mcp
from hostname_mcp.utils.format import format_gigabytes
from hostname_mcp.utils.format import format_hours


try:
    import pwd
except ImportError:  # Windows has no passwd database
    pwd = None


def _uptime_seconds() -> float:
    return time.time() - psutil.boot_time()


def _user_info() -> dict:
    """Identity of the user running the server.

    Returns:
        Dict with uid, gid, username, homedir and shell. Where the platform has
        no POSIX ids, uid and gid are -1 and shell is None.
    """
    if pwd is None:
        return {
            "uid": -1,
            "gid": -1,
            "username": getpass.getuser(),
            "homedir": os.path.expanduser("~"),
            "shell": None,
        }

    uid = os.getuid()
    entry = pwd.getpwuid(uid)
    return {
        "uid": uid,
        "gid": os.getgid(),
        "username": entry.pw_name,
        "homedir": entry.pw_dir,
        "shell": entry.pw_shell,
    }


def collect_system_info() -> dict:
    """Read a fresh snapshot of host identity and resource facts."""
    memory = psutil.virtual_memory()

    return {
        "hostname": socket.gethostname(),
        "platform": sys.platform,
        "arch": platform.machine(),
        "type": platform.system(),
        "release": platform.release(),
        "version": platform.version(),
        "cpus": psutil.cpu_count(logical=True) or 0,
        "totalMemory": format_gigabytes(memory.total),
        "freeMemory": format_gigabytes(memory.available),
        "uptime": format_hours(_uptime_seconds()),
        "userInfo": _user_info(),
    }


@mcp.tool(
    title="Get System Information",
    description="Get detailed system information including OS, architecture, and platform details",
    annotations=ToolAnnotations(readOnlyHint=True),
)
@log_tool_call
async def get_system_info() -> str:
    """Get detailed system information.

    Returns:
        JSON object (2-space indent) with hostname, platform, arch, type,
        release, version, cpus, totalMemory, freeMemory, uptime and userInfo

    Security:
        - Read-only operation
        - No commands executed, no files opened
    """
    return json.dumps(collect_system_info(), indent=2)
