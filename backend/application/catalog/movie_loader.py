from __future__ import annotations

import logging
from typing import Awaitable, Callable, Generic, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_ERROR_MESSAGE = "Failed to load data"


class MovieLoader(Generic[T]):
    """Loading/error bookkeeping around one catalog call.

    `load` never raises for loader failures: the message ends up in `error`
    and `data` is reset so callers can show a retry affordance.
    """

    def __init__(self) -> None:
        self.data: Optional[T] = None
        self.is_loading = False
        self.error = ""

    async def load(self, loader: Callable[[], Awaitable[T]]) -> Optional[T]:
        self.is_loading = True
        self.error = ""
        try:
            self.data = await loader()
        except Exception as e:
            logger.warning("Movie load failed: %s", e)
            self.error = str(e) or DEFAULT_ERROR_MESSAGE
            self.data = None
        finally:
            self.is_loading = False
        return self.data
