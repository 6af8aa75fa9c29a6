import logging
from typing import Optional

from vfsname.core.models import VfsContext


class VfsComponent:
    """
    Base for components with an explicit lifecycle.

    The owner hands over a logger and a context, then calls `init()`; `close()`
    releases whatever the component holds.
    """

    def __init__(self) -> None:
        self._logger: logging.Logger = logging.getLogger(type(self).__module__)
        self._context: Optional[VfsContext] = None

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    @property
    def context(self) -> Optional[VfsContext]:
        return self._context

    def set_logger(self, logger: logging.Logger) -> None:
        self._logger = logger

    def set_context(self, context: Optional[VfsContext]) -> None:
        self._context = context

    def init(self) -> None:
        pass

    def close(self) -> None:
        pass
