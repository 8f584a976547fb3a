"""shellkit package exposing the path helpers."""

from .core import expand_link, expand_path, join_path
from .exceptions import InvalidArgument, LinkCycle, NotASymlink, ShellKitError

__all__ = [
    "InvalidArgument",
    "LinkCycle",
    "NotASymlink",
    "ShellKitError",
    "expand_link",
    "expand_path",
    "join_path",
]
