import asyncio

import httpx
import pytest
import pytest_asyncio
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse

from rollbar_client import Client

ENDPOINT = "http://rollbar.test/api/1/item/"
TOKEN = "test-token-1234"


class MockRollbar:
    """Rollbar item API 대역 (FastAPI). 받은 요청을 순서대로 기록."""

    def __init__(
        self,
        status_code: int = 200,
        body: dict | None = None,
        raw: str | None = None,
        delay: float = 0.0,
    ):
        self.requests: list[dict] = []
        self.app = FastAPI()

        @self.app.post("/api/1/item/")
        async def item(request: Request):
            payload = await request.json()
            self.requests.append({"headers": dict(request.headers), "json": payload})
            if delay:
                await asyncio.sleep(delay)
            if raw is not None:
                return PlainTextResponse(raw, status_code=status_code)
            content = body
            if content is None:
                content = {"err": 0, "result": {"uuid": payload["data"]["uuid"]}}
            return JSONResponse(content, status_code=status_code)

    @property
    def call_count(self) -> int:
        return len(self.requests)

    @property
    def last_data(self) -> dict:
        return self.requests[-1]["json"]["data"]

    def http_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.ASGITransport(app=self.app))


class CapturingLogger:
    """포맷된 로그 메시지를 레벨별로 기록"""

    def __init__(self):
        self.records: list[tuple[str, str]] = []

    def _add(self, level: str, msg: str, args: tuple) -> None:
        self.records.append((level, msg % args if args else msg))

    def debug(self, msg, *args):
        self._add("debug", msg, args)

    def info(self, msg, *args):
        self._add("info", msg, args)

    def error(self, msg, *args):
        self._add("error", msg, args)

    def messages(self, level: str | None = None) -> list[str]:
        return [m for lv, m in self.records if level is None or lv == level]


class FailingLogger(CapturingLogger):
    """모든 호출에서 예외를 던지는 logger"""

    def _add(self, level: str, msg: str, args: tuple) -> None:
        raise OSError("log sink closed")


@pytest.fixture(autouse=True)
def no_debug_env(monkeypatch):
    """개발자 환경의 ROLLBAR_DEBUG가 테스트에 섞이지 않도록"""
    monkeypatch.delenv("ROLLBAR_DEBUG", raising=False)


@pytest.fixture
def rollbar_server() -> MockRollbar:
    return MockRollbar()


@pytest.fixture
def capture_logger() -> CapturingLogger:
    return CapturingLogger()


@pytest_asyncio.fixture
async def make_client(capture_logger):
    """MockRollbar에 연결된 Client 팩토리 (테스트 종료 시 정리)"""
    http_clients: list[httpx.AsyncClient] = []

    def _make(server: MockRollbar, token: str = TOKEN, **options) -> Client:
        http_client = server.http_client()
        http_clients.append(http_client)
        options.setdefault("logger", capture_logger)
        return Client(token, endpoint=ENDPOINT, http_client=http_client, **options)

    yield _make

    for http_client in http_clients:
        await http_client.aclose()


@pytest_asyncio.fixture
async def client(make_client, rollbar_server) -> Client:
    return make_client(rollbar_server)
