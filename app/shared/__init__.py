"""Shared building blocks: Result type, telemetry (logging) and utilities.

Used by domain, application, and infrastructure. No business logic.
"""

from app.shared.result import Err, Ok, Result, err, ok

__all__ = ["Err", "Ok", "Result", "err", "ok"]
