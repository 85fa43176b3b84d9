from types import SimpleNamespace

from rollbar_client.services.stack import (
    UNKNOWN,
    Stack,
    StackFrame,
    _describe,
    capture_stack,
    fingerprint,
)


def _capture_from_helper(skip: int) -> Stack:
    return capture_stack(skip)


class TestCaptureStack:
    """스택 캡처 테스트"""

    def test_first_frame_is_caller(self):
        """skip=0 이면 첫 프레임이 capture_stack 호출 지점"""
        stack = capture_stack()

        first = stack.frames[0]
        assert first.function.endswith("test_first_frame_is_caller")
        assert first.filename == __file__
        assert first.lineno > 0

    def test_skip_drops_inner_frames(self):
        """skip 만큼 안쪽 프레임을 버림"""
        assert _capture_from_helper(0).frames[0].function == "_capture_from_helper"
        assert _capture_from_helper(1).frames[0].function.endswith("test_skip_drops_inner_frames")

    def test_captures_full_remaining_stack(self):
        """호출자 바깥 프레임까지 모두 캡처"""
        full = capture_stack()
        skipped = capture_stack(1)

        assert len(full) > 1
        assert len(skipped) == len(full) - 1

    def test_skip_beyond_depth_returns_empty(self):
        assert len(capture_stack(10_000)) == 0

    def test_unresolved_frame_uses_placeholders(self):
        """파일/라인을 알 수 없는 프레임은 unknown / 0"""
        frame = _describe(SimpleNamespace(f_code=None, f_lineno=None))

        assert frame.function == UNKNOWN
        assert frame.filename == UNKNOWN
        assert frame.lineno == 0


class TestFingerprint:
    """fingerprint 테스트"""

    def test_same_call_site_same_fingerprint(self):
        stacks = [capture_stack() for _ in range(2)]

        assert stacks[0].fingerprint() == stacks[1].fingerprint()

    def test_different_line_different_fingerprint(self):
        first = capture_stack()
        second = capture_stack()

        assert first.frames[0].lineno != second.frames[0].lineno
        assert first.fingerprint() != second.fingerprint()

    def test_fingerprint_is_stable_digest(self):
        """고정된 프레임 → 고정된 값 (프로세스와 무관)"""
        stack = Stack(frames=(StackFrame(function="handler", filename="app/main.py", lineno=42),))

        assert fingerprint(stack) == stack.fingerprint()
        assert stack.fingerprint() == Stack(frames=stack.frames).fingerprint()
        assert len(stack.fingerprint()) == 40

    def test_any_frame_change_changes_fingerprint(self):
        base = [
            StackFrame(function="handler", filename="app/main.py", lineno=42),
            StackFrame(function="main", filename="app/main.py", lineno=10),
        ]
        changed = [base[0], StackFrame(function="main", filename="app/main.py", lineno=11)]

        assert Stack(frames=tuple(base)).fingerprint() != Stack(frames=tuple(changed)).fingerprint()


class TestStackWire:
    def test_wire_frames_are_most_recent_last(self):
        stack = Stack(
            frames=(
                StackFrame(function="inner", filename="a.py", lineno=1),
                StackFrame(function="outer", filename="b.py", lineno=2),
            )
        )

        wire = stack.to_wire()

        assert [f.method for f in wire] == ["outer", "inner"]
        assert wire[-1].filename == "a.py"
        assert wire[-1].lineno == 1
