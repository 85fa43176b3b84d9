"""호출 스택 캡처 + fingerprint 생성"""

import hashlib
import inspect

from pydantic import BaseModel, ConfigDict

from rollbar_client.models.payload import Frame

UNKNOWN = "unknown"


class StackFrame(BaseModel):
    """캡처된 호출 지점 하나"""

    model_config = ConfigDict(frozen=True)

    function: str = UNKNOWN
    filename: str = UNKNOWN
    lineno: int = 0

    def to_wire(self) -> Frame:
        return Frame(filename=self.filename, lineno=self.lineno, method=self.function)


class Stack(BaseModel):
    """프레임 목록 (가장 안쪽 호출이 먼저)"""

    model_config = ConfigDict(frozen=True)

    frames: tuple[StackFrame, ...] = ()

    def __len__(self) -> int:
        return len(self.frames)

    def fingerprint(self) -> str:
        """에러 메시지와 무관하게 호출 위치만으로 결정되는 그룹 키.

        프로세스를 재시작해도 같은 값이 나오도록 주소, 시간, 난수는 쓰지 않는다.
        """
        digest = hashlib.sha1()
        for frame in self.frames:
            digest.update(f"{frame.filename}:{frame.lineno}:{frame.function}\n".encode())
        return digest.hexdigest()

    def to_wire(self) -> list[Frame]:
        # API는 "most recent call last" 순서를 기대함
        return [frame.to_wire() for frame in reversed(self.frames)]


def fingerprint(stack: Stack) -> str:
    return stack.fingerprint()


def capture_stack(skip: int = 0) -> Stack:
    """현재 호출 스택 캡처.

    skip=0 이면 첫 프레임은 capture_stack을 호출한 함수.
    skip이 하나 늘 때마다 바깥쪽 프레임을 하나씩 더 버린다.
    """
    frame = inspect.currentframe()
    frame = frame.f_back if frame is not None else None
    for _ in range(skip):
        if frame is None:
            break
        frame = frame.f_back

    frames: list[StackFrame] = []
    while frame is not None:
        frames.append(_describe(frame))
        frame = frame.f_back

    return Stack(frames=tuple(frames))


def _describe(frame) -> StackFrame:
    code = getattr(frame, "f_code", None)
    function = getattr(code, "co_qualname", None) or getattr(code, "co_name", None)
    filename = getattr(code, "co_filename", None)
    lineno = getattr(frame, "f_lineno", None)
    return StackFrame(
        function=function or UNKNOWN,
        filename=filename or UNKNOWN,
        lineno=lineno or 0,
    )
