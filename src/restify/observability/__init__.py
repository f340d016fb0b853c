"""Logging setup for restify."""

from __future__ import annotations

from .logging import add_request_id, configure_logging

__all__ = ["add_request_id", "configure_logging"]
