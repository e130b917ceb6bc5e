"""Runtime plumbing: persisted config and the deferred-callback scheduler."""

from __future__ import annotations

from .scheduler import DeferredScheduler

__all__ = ["DeferredScheduler"]
