from pydantic import BaseModel


class Result(BaseModel):
    uuid: str | None = None

    model_config = {"extra": "ignore"}


class Response(BaseModel):
    """Rollbar API 응답 (err == 0 이면 원격 측 성공)"""

    err: int
    result: Result | None = None
    message: str | None = None

    model_config = {"extra": "ignore"}
