"""Rollbar 클라이언트 - 심각도별 보고 메서드"""

from typing import Any

import httpx
from pydantic import ValidationError

from rollbar_client.core.config import ClientConfig, Settings
from rollbar_client.core.errors import EncodingError
from rollbar_client.core.logger import Logger, NullLogger, log_quietly, trace_logger
from rollbar_client.models.payload import Level
from rollbar_client.models.response import Response
from rollbar_client.services.payload import ErrorOptions, build_payload
from rollbar_client.services.transport import Transport

# build_payload 기준 라이브러리 내부 프레임 수
_SEND_DEPTH = 1  # send
_REPORT_DEPTH = 2  # _report + debug/info/...


def _error_options(custom: dict[str, Any] | None, uuid: str | None) -> ErrorOptions:
    try:
        return ErrorOptions(custom=custom, uuid=uuid)
    except ValidationError as e:
        raise EncodingError(f"invalid error options: {e}") from e


class Client:
    """Rollbar 에러 리포팅 클라이언트.

    설정은 생성 후 바뀌지 않으므로 여러 태스크에서 락 없이 공유해도 된다.
    debug/info/warning/error/critical 은 실패를 logger로만 보내고 절대 raise 하지 않는다.
    실패를 직접 받고 싶으면 send()를 쓴다.

    Example:
        async with Client("POST_SERVER_ITEM_TOKEN", environment="prod") as rollbar:
            try:
                ...
            except Exception as e:
                await rollbar.error(e, custom={"user_id": 42})
    """

    def __init__(
        self,
        token: str,
        *,
        http_client: httpx.AsyncClient | None = None,
        logger: Logger | None = None,
        debug: bool | None = None,
        **options: Any,
    ):
        """
        Args:
            token: post_server_item access token
            http_client: 주입할 httpx.AsyncClient (없으면 timeout 없는 클라이언트 생성)
            logger: 실패/트레이스 출력용 logger (기본: NullLogger)
            debug: 요청/응답 트레이스 (기본: ROLLBAR_DEBUG 환경변수)
            **options: ClientConfig 필드 (endpoint, environment, platform, code_version,
                server_host, server_root, server_branch, stack_skip)
        """
        if debug is None:
            debug = Settings().rollbar_debug
        self.config = ClientConfig(token=token, debug=debug, **options)

        if logger is None:
            logger = trace_logger() if self.config.debug else NullLogger()
        self.logger = logger

        self._owns_http_client = http_client is None
        self._http_client = http_client or httpx.AsyncClient(timeout=None)
        self.transport = Transport(self.config, self._http_client, self.logger)

    async def __aenter__(self) -> "Client":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """직접 만든 http 클라이언트만 닫음"""
        if self._owns_http_client:
            await self._http_client.aclose()

    async def send(
        self,
        level: Level | str,
        error: BaseException | None = None,
        *,
        custom: dict[str, Any] | None = None,
        uuid: str | None = None,
    ) -> Response:
        """보고 후 응답 반환.

        Raises:
            RollbarError: 옵션 검증, 전송, 응답 디코딩 실패 (하위 클래스)
            ValueError: Level에 없는 level
        """
        payload = build_payload(
            self.config,
            level,
            error,
            _error_options(custom, uuid),
            skip=_SEND_DEPTH + self.config.stack_skip,
        )
        return await self.transport.post(payload)

    async def _report(
        self,
        level: Level,
        error: BaseException | None,
        custom: dict[str, Any] | None,
        uuid: str | None,
    ) -> None:
        try:
            payload = build_payload(
                self.config,
                level,
                error,
                _error_options(custom, uuid),
                skip=_REPORT_DEPTH + self.config.stack_skip,
            )
            resp = await self.transport.post(payload)
        except Exception as e:
            log_quietly(self.logger, "error", "failed to report %s to rollbar: %s", level.value, e)
            return

        result_uuid = resp.result.uuid if resp.result else None
        log_quietly(self.logger, "debug", "reported %s to rollbar: uuid=%s", level.value, result_uuid)

    async def debug(
        self,
        error: BaseException | None = None,
        *,
        custom: dict[str, Any] | None = None,
        uuid: str | None = None,
    ) -> None:
        await self._report(Level.DEBUG, error, custom, uuid)

    async def info(
        self,
        error: BaseException | None = None,
        *,
        custom: dict[str, Any] | None = None,
        uuid: str | None = None,
    ) -> None:
        await self._report(Level.INFO, error, custom, uuid)

    async def warning(
        self,
        error: BaseException | None = None,
        *,
        custom: dict[str, Any] | None = None,
        uuid: str | None = None,
    ) -> None:
        await self._report(Level.WARNING, error, custom, uuid)

    async def error(
        self,
        error: BaseException | None = None,
        *,
        custom: dict[str, Any] | None = None,
        uuid: str | None = None,
    ) -> None:
        await self._report(Level.ERROR, error, custom, uuid)

    async def critical(
        self,
        error: BaseException | None = None,
        *,
        custom: dict[str, Any] | None = None,
        uuid: str | None = None,
    ) -> None:
        await self._report(Level.CRITICAL, error, custom, uuid)
