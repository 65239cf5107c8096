"""Builtin vulnerability plugins."""

from .ftp_weakpass import FTPWeakPassPlugin
from .http_security import HTTPSecurityPlugin

__all__ = [
    "FTPWeakPassPlugin",
    "HTTPSecurityPlugin",
]
