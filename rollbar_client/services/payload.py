"""payload 생성 - 네트워크 I/O 없음"""

import time
import uuid as uuid_lib
from typing import Any

from pydantic import BaseModel

from rollbar_client.core.config import ClientConfig
from rollbar_client.models.payload import (
    Body,
    Data,
    ExceptionInfo,
    Level,
    Notifier,
    Payload,
    Server,
    Trace,
)
from rollbar_client.services.stack import capture_stack
from rollbar_client.version import LANGUAGE, NAME, VERSION

# error 없이 보고할 때의 title (수동 breadcrumb 용)
NONE_TITLE = "<none>"


class ErrorOptions(BaseModel):
    """호출 단위 옵션"""

    custom: dict[str, Any] | None = None
    uuid: str | None = None


def error_title(error: BaseException | None) -> str:
    if error is None:
        return NONE_TITLE
    return str(error) or type(error).__name__


def build_payload(
    config: ClientConfig,
    level: Level | str,
    error: BaseException | None,
    options: ErrorOptions | None = None,
    *,
    skip: int = 0,
) -> Payload:
    """payload 생성.

    Args:
        config: 클라이언트 설정
        level: 심각도 (Level에 없는 값이면 ValueError)
        error: 보고할 예외 (None 허용)
        options: custom 필드, 명시적 uuid
        skip: 스택에서 버릴 호출자 프레임 수 (0이면 build_payload 호출 지점부터)

    Returns:
        Payload: 직렬화 전 요청 body
    """
    level = Level(level)
    options = options or ErrorOptions()

    stack = capture_stack(skip + 1)
    title = error_title(error)
    exception = ExceptionInfo(
        class_name=type(error).__name__ if error is not None else NONE_TITLE,
        message=title,
    )

    data = Data(
        title=title,
        body=Body(trace=Trace(frames=stack.to_wire(), exception=exception)),
        environment=config.environment,
        level=level,
        timestamp=int(time.time()),
        platform=config.platform,
        code_version=config.code_version,
        language=LANGUAGE,
        server=Server(
            host=config.server_host,
            root=config.server_root,
            branch=config.server_branch,
        ),
        fingerprint=stack.fingerprint(),
        notifier=Notifier(name=NAME, version=VERSION),
        custom=options.custom,
        uuid=options.uuid or str(uuid_lib.uuid4()),
    )

    return Payload(access_token=config.token, data=data)
