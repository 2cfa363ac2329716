"""Readers for the files being checked."""

from __future__ import annotations

from .private_nc import DataSource, PrivateFile

__all__ = ["DataSource", "PrivateFile"]
