"""BaseService — shared foundation for minmax services.

Every service receives the frozen :class:`MinmaxSettings` at construction
time and reads its behavior switches from there.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from minmax.config.settings import MinmaxSettings


class BaseService:
    """Base for all service-layer classes.

    Usage::

        class ComparisonService(BaseService):
            def min(self, tokens: list[str]) -> ServiceResult:
                operands = self._parse(tokens)
                ...
    """

    def __init__(self, settings: MinmaxSettings) -> None:
        self._settings = settings
