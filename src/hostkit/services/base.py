"""BaseService — shared foundation for hostkit services.

Every service receives the invocation's :class:`HostSettings`, which
supplies defaults (port, permission modes) the underlying functions take
as explicit arguments.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from hostkit.config.settings import HostSettings


class BaseService:
    """Base for all service-layer classes."""

    def __init__(self, settings: HostSettings) -> None:
        self._settings = settings
