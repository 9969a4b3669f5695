from __future__ import annotations

from logging import Logger, getLogger
from typing import Any

import attr

#: The numeric level used for trace records, below DEBUG.
TRACE = 5


@attr.s(slots=True, frozen=True, kw_only=True)
class LoggerWithTrace:
    """
    Wraps a standard library logger with an extra ``trace`` level for very chatty records.
    """

    logger: Logger = attr.ib()

    @classmethod
    def get(cls, name: str) -> LoggerWithTrace:
        return LoggerWithTrace(logger=getLogger(name))

    def debug(self, *args: Any, **kwargs: Any) -> None:
        self.logger.debug(*args, **kwargs)

    def trace(self, message: str, *args: Any, **kws: Any) -> None:
        if self.logger.isEnabledFor(TRACE):
            self.logger.log(TRACE, message, *args, **kws)
