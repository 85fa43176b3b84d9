"""주입 가능한 logger

logging.Logger는 Logger 프로토콜을 그대로 만족하므로 그냥 넘기면 된다.
"""

import contextlib
import logging
import sys
from typing import Any, Protocol, runtime_checkable

TRACE_LOGGER_NAME = "rollbar_client.trace"


@runtime_checkable
class Logger(Protocol):
    def debug(self, msg: str, *args: Any) -> None: ...

    def info(self, msg: str, *args: Any) -> None: ...

    def error(self, msg: str, *args: Any) -> None: ...


class NullLogger:
    """아무것도 출력하지 않는 기본 logger"""

    def debug(self, msg: str, *args: Any) -> None:
        pass

    def info(self, msg: str, *args: Any) -> None:
        pass

    def error(self, msg: str, *args: Any) -> None:
        pass


def trace_logger() -> logging.Logger:
    """debug 모드 기본 logger (stderr 출력)"""
    log = logging.getLogger(TRACE_LOGGER_NAME)
    if not log.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(asctime)s [rollbar] %(message)s"))
        log.addHandler(handler)
        log.setLevel(logging.DEBUG)
        log.propagate = False
    return log


def log_quietly(log: Logger, level: str, msg: str, *args: Any) -> None:
    """logger 호출 - 실패해도 리포팅 흐름을 중단하지 않음"""
    with contextlib.suppress(Exception):
        getattr(log, level)(msg, *args)
