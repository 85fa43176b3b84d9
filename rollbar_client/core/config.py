import socket
import sys

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_ENDPOINT = "https://api.rollbar.com/api/1/item/"
DEFAULT_ENVIRONMENT = "development"

_TRUE_VALUES = {"1", "t", "true"}


class Settings(BaseSettings):
    """환경변수 설정 (클라이언트 생성 시점에 읽음)"""

    model_config = SettingsConfigDict(extra="ignore")

    rollbar_debug: bool = False

    @field_validator("rollbar_debug", mode="before")
    @classmethod
    def parse_debug(cls, value: object) -> object:
        # "0", "false", 해석할 수 없는 값은 모두 비활성
        if isinstance(value, str):
            return value.strip().lower() in _TRUE_VALUES
        return value


class ClientConfig(BaseModel):
    """클라이언트 설정 - 생성 후 변경 불가"""

    model_config = ConfigDict(frozen=True, extra="forbid")

    token: str
    endpoint: str = DEFAULT_ENDPOINT
    debug: bool = False

    environment: str = DEFAULT_ENVIRONMENT
    platform: str = Field(default_factory=lambda: sys.platform)
    code_version: str = ""

    # data.server
    server_host: str = Field(default_factory=socket.gethostname)
    server_root: str = ""
    server_branch: str = ""

    # 라이브러리 내부 프레임 외에 추가로 버릴 호출자 프레임 수 (래퍼용)
    stack_skip: int = Field(default=0, ge=0)
