from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Level(str, Enum):
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class Frame(BaseModel):
    """trace.frames 항목 (wire 형식)"""

    model_config = ConfigDict(frozen=True)

    filename: str
    lineno: int
    method: str


class ExceptionInfo(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    class_name: str = Field(alias="class")
    message: str


class Trace(BaseModel):
    model_config = ConfigDict(frozen=True)

    frames: list[Frame]
    exception: ExceptionInfo


class Body(BaseModel):
    model_config = ConfigDict(frozen=True)

    trace: Trace


class Server(BaseModel):
    model_config = ConfigDict(frozen=True)

    host: str
    root: str
    branch: str


class Notifier(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    version: str


class Data(BaseModel):
    """payload.data - 발생(occurrence) 하나"""

    model_config = ConfigDict(frozen=True)

    title: str
    body: Body
    environment: str
    level: Level
    timestamp: int
    platform: str
    code_version: str
    language: str
    server: Server
    fingerprint: str
    notifier: Notifier
    custom: dict[str, Any] | None = None  # 없으면 직렬화에서 제외
    uuid: str


class Payload(BaseModel):
    """요청 body 전체"""

    model_config = ConfigDict(frozen=True)

    access_token: str
    data: Data

    def to_json(self, *, indent: int | None = None) -> str:
        exclude = {"data": {"custom"}} if self.data.custom is None else None
        return self.model_dump_json(by_alias=True, exclude=exclude, indent=indent)
