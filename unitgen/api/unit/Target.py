"""Systemd target units a service can be ordered against or installed into."""

from enum import Enum


class Target(str, Enum):
    NETWORK = "network.target"
    MULTI_USER = "multi-user.target"
    SOCKET = "socket.target"
