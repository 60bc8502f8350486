"""结果模型与异常测试"""

from __future__ import annotations

from bower_git.core.exceptions import (
    BowerGitError,
    CloneFailedError,
    SwapFailedError,
    TargetNotFoundError,
)
from bower_git.core.models import BatchResult, RunOutcome


class TestBatchResult:
    def test_views(self) -> None:
        r = BatchResult(outcomes=[
            RunOutcome(target="a", status="skipped"),
            RunOutcome(target="b", status="success", name="b"),
            RunOutcome(target="c", status="failed", message="boom"),
        ])
        assert [o.target for o in r.skipped] == ["a"]
        assert [o.target for o in r.succeeded] == ["b"]
        assert [o.target for o in r.failed] == ["c"]
        assert r.success is False

    def test_empty_is_success(self) -> None:
        assert BatchResult().success is True

    def test_skipped_only_is_success(self) -> None:
        assert BatchResult(outcomes=[RunOutcome(target="a", status="skipped")]).success


class TestExceptions:
    def test_codes_and_hierarchy(self) -> None:
        e = TargetNotFoundError("hejsan")
        assert isinstance(e, BowerGitError)
        assert e.code == "TARGET_NOT_FOUND"
        assert str(e) == 'ABORTING: Folder "hejsan" does not exist'

    def test_clone_failed_keeps_detail(self) -> None:
        e = CloneFailedError("git clone 失败", detail="fatal: repository not found")
        assert e.detail == "fatal: repository not found"
        assert "fatal: repository not found" in str(e)

    def test_swap_failed_critical(self) -> None:
        assert SwapFailedError("x", scratch="/s", original_deleted=True).critical
        assert not SwapFailedError("x", scratch="/s").critical
