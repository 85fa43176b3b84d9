"""리포팅 에러 계층

asyncio 취소(CancelledError / TimeoutError)는 이 계층에 속하지 않는다.
"""


class RollbarError(Exception):
    """라이브러리 에러 베이스"""


class ConfigurationError(RollbarError):
    """access token 누락 등 - 네트워크 호출 전에 감지"""


class EncodingError(RollbarError):
    """payload JSON 직렬화 실패"""


class RequestError(RollbarError):
    """요청 생성 실패 (잘못된 endpoint 등)"""


class TransportError(RollbarError):
    """연결, DNS, TLS 등 네트워크 실패"""


class RemoteRejectionError(RollbarError):
    """HTTP 200 이외의 응답"""

    def __init__(self, status_code: int, reason: str):
        self.status_code = status_code
        self.reason = reason
        super().__init__(f"received response: {status_code} {reason}".rstrip())


class DecodeError(RollbarError):
    """응답 body가 JSON이 아니거나 형식이 다름"""
