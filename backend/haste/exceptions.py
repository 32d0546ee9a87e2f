"""
Haste Store — Custom Exception Hierarchy
==========================================

What:  Application-specific exceptions for the backing store and static assets.
Why:   Targeted error handling: store failures become a 500 through a global
       handler, asset failures are recovered locally by the SPA fallback.
How:   Each exception carries a client-safe message and an optional context
       dict that is logged but never returned to the client.

Exception Hierarchy:
    HasteError (base)                  → 500 Internal Server Error
    ├── StoreError                     → 500 (backing store read/write failed)
    └── AssetError                     → handled in the static fallback handler
        ├── AssetNotFoundError         (no file for the mapped path)
        ├── AssetMethodNotAllowedError (only GET/HEAD serve assets)
        └── AssetStorageError          (the file exists but could not be read)

Note: a missing document is NOT an exception. Lookups return None and the
handlers answer with a 200 JSON message body.
"""

from typing import Any, Dict, Optional


class HasteError(Exception):
    """
    Base exception for all Haste Store application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class StoreError(HasteError):
    """
    Raised when the key-value backing store fails a read or a write.

    HTTP:    500 Internal Server Error (global handler in main.py)

    Distinct from "not found": a lookup miss returns None, a connectivity or
    write failure raises this. The client only ever sees a generic message.
    """

    def __init__(
        self,
        message: str = "The document store is unavailable. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class AssetError(HasteError):
    """
    Base for static-asset lookup failures.

    Caught by the static fallback handler, which retries once with the
    SPA entry point before turning the original message into a 500 body.
    """

    def __init__(
        self,
        message: str = "Static asset lookup failed",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class AssetNotFoundError(AssetError):
    """No file exists for the mapped asset path."""

    def __init__(self, path: str, context: Optional[Dict[str, Any]] = None):
        ctx = context or {}
        ctx["path"] = path
        super().__init__(
            message=f"could not find {path} in your content namespace",
            context=ctx,
        )
        self.path = path


class AssetMethodNotAllowedError(AssetError):
    """Assets are only served for GET and HEAD."""

    def __init__(self, method: str, context: Optional[Dict[str, Any]] = None):
        ctx = context or {}
        ctx["method"] = method
        super().__init__(
            message=f"{method} is not a valid request method",
            context=ctx,
        )
        self.method = method


class AssetStorageError(AssetError):
    """The asset file exists but reading it failed (permissions, I/O)."""

    def __init__(
        self,
        message: str = "Static asset could not be read",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
