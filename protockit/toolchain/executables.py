"""
Executable layout of an extracted protoc archive.

Every archive unpacks to the same tree (``bin/protoc`` plus ``include/``),
so the layout only varies by the executable suffix of the target OS.
"""

from dataclasses import dataclass, field
from typing import Dict, List

from protockit.core.platform import get_exe_name

EXES_DIR = "bin"


@dataclass(frozen=True)
class ExecutableConfig:
    """One executable inside the installed tool directory."""

    exe_path: str
    """Path relative to the tool directory (e.g., bin/protoc.exe)"""

    primary: bool = False
    """Whether this is the tool's main executable"""


@dataclass
class ExecutableMap:
    """Executables of the tool and where the host should look for them."""

    exes: Dict[str, ExecutableConfig] = field(default_factory=dict)
    exes_dir: str = EXES_DIR
    globals_lookup_dirs: List[str] = field(default_factory=list)


def locate_executables(os_name: str) -> ExecutableMap:
    """
    Build the executable map for protoc on an OS.

    Args:
        os_name: Target OS ('linux', 'macos', 'windows')

    Returns:
        ExecutableMap with the primary "protoc" executable

    Example:
        >>> locate_executables("windows").exes["protoc"].exe_path
        'bin/protoc.exe'
    """
    return ExecutableMap(
        exes={
            "protoc": ExecutableConfig(
                exe_path=get_exe_name(os_name, f"{EXES_DIR}/protoc"), primary=True
            )
        },
        exes_dir=EXES_DIR,
        globals_lookup_dirs=[f"$TOOL_DIR/{EXES_DIR}", "$HOME/.local/bin"],
    )


__all__ = [
    "EXES_DIR",
    "ExecutableConfig",
    "ExecutableMap",
    "locate_executables",
]
