
import pytest

from gittracker.scanner import RepoStatus, ScanResult


class TestRepoStatus:
    def test_defaults_are_clean(self) -> None:
        status = RepoStatus(path="repo")
        assert status.uncommitted_changes == 0
        assert status.unpushed_commits == 0
        assert status.has_upstream is False
        assert status.is_dirty is False

    @pytest.mark.parametrize(
        ("uncommitted", "unpushed", "expected"),
        [(0, 0, False), (1, 0, True), (0, 1, True), (2, 5, True)],
    )
    def test_is_dirty(self, uncommitted: int, unpushed: int, expected: bool) -> None:
        status = RepoStatus(
            path="repo",
            uncommitted_changes=uncommitted,
            unpushed_commits=unpushed,
        )
        assert status.is_dirty is expected

    def test_frozen(self) -> None:
        status = RepoStatus(path="repo")
        with pytest.raises(AttributeError):
            status.uncommitted_changes = 3  # pyright: ignore[reportAttributeAccessIssue]

    def test_to_dict_key_order(self) -> None:
        status = RepoStatus(
            path="src/app",
            uncommitted_changes=2,
            unpushed_commits=1,
            has_upstream=True,
        )
        data = status.to_dict()
        assert list(data) == [
            "path",
            "is_dirty",
            "uncommitted_changes",
            "unpushed_commits",
            "has_upstream",
        ]
        assert data["path"] == "src/app"
        assert data["is_dirty"] is True

    def test_to_dict_keeps_path_form(self) -> None:
        assert RepoStatus(path="./a").to_dict()["path"] == "./a"


class TestScanResult:
    @pytest.fixture
    def result(self) -> ScanResult:
        return ScanResult(
            repos=(
                RepoStatus(path="a"),
                RepoStatus(path="b", uncommitted_changes=2),
                RepoStatus(path="c", unpushed_commits=1, has_upstream=True),
                RepoStatus(path="d", uncommitted_changes=1, unpushed_commits=3),
            )
        )

    def test_empty_result(self) -> None:
        result = ScanResult()
        assert result.total == 0
        assert result.has_dirty is False
        assert result.to_dict() == {"total": 0, "repos": []}

    def test_counts(self, result: ScanResult) -> None:
        assert result.total == 4
        assert result.dirty_count == 3
        assert result.clean_count == 1
        assert result.uncommitted_count == 2
        assert result.unpushed_count == 2
        assert result.has_dirty is True

    def test_dirty_and_clean_keep_order(self, result: ScanResult) -> None:
        assert [r.path for r in result.dirty()] == ["b", "c", "d"]
        assert [r.path for r in result.clean()] == ["a"]

    def test_to_dict(self, result: ScanResult) -> None:
        data = result.to_dict()
        assert data["total"] == 4
        assert [repo["path"] for repo in data["repos"]] == ["a", "b", "c", "d"]
