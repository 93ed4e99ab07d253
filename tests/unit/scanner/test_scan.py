"""Tests for status interpretation and scan orchestration."""

from pathlib import Path

import pytest
from pytest_mock import MockerFixture

from gittracker.scanner import FakeStatusQuery, RepoStatus, interpret, scan_root
from gittracker.utils import CommandResult
from tests.conftest import make_marker_dir


class TestInterpret:
    def test_parses_successful_query(self) -> None:
        repo = "repo"
        query = FakeStatusQuery(
            outputs={repo: "# branch.upstream origin/main\n# branch.ab +2 -0\n? a\n"}
        )

        status = interpret(repo, query)

        assert status == RepoStatus(
            path=repo,
            uncommitted_changes=1,
            unpushed_commits=2,
            has_upstream=True,
        )
        assert query.calls == [repo]

    def test_empty_output_is_clean(self) -> None:
        status = interpret("repo", FakeStatusQuery())
        assert status == RepoStatus(path="repo")
        assert status.is_dirty is False

    def test_path_like_root_is_stored_as_string(self) -> None:
        query = FakeStatusQuery()

        status = interpret(Path("repo"), query)

        assert status.path == "repo"
        assert query.calls == ["repo"]

    def test_failed_query_yields_zero_record(self, mocker: MockerFixture) -> None:
        repo = "broken"
        logger = mocker.MagicMock()

        status = interpret(repo, FakeStatusQuery(failures={repo}), logger=logger)

        assert status == RepoStatus(path=repo)
        logger.warning.assert_called_once()
        assert logger.warning.call_args.args[0] == "status_query_failed"
        assert logger.warning.call_args.kwargs["command_not_found"] is True

    def test_timed_out_query_yields_zero_record(self) -> None:
        def timed_out(_repo_root: str) -> CommandResult:
            return CommandResult(
                success=False, error="Command timed out after 1.0s", timed_out=True
            )

        assert interpret("slow", timed_out) == RepoStatus(path="slow")

    def test_nonzero_exit_output_is_still_parsed(self) -> None:
        def partial_output(_repo_root: str) -> CommandResult:
            return CommandResult(success=True, exit_code=128, stdout="? a\n? b\n")

        assert interpret("odd", partial_output).uncommitted_changes == 2


class TestScanRoot:
    @pytest.fixture
    def tree(self, tmp_path: Path) -> list[str]:
        names = ("alpha", "beta", "gamma")
        return [str(make_marker_dir(tmp_path / name)) for name in names]

    def test_one_record_per_repo_in_discovery_order(
        self, tmp_path: Path, tree: list[str]
    ) -> None:
        query = FakeStatusQuery(outputs={tree[1]: "? new.txt\n? other.txt\n"})

        result = scan_root(tmp_path, query=query)

        assert [repo.path for repo in result.repos] == tree
        assert query.calls == tree
        assert result.repos[1].uncommitted_changes == 2
        assert result.dirty_count == 1

    def test_failure_does_not_stop_scan(self, tmp_path: Path, tree: list[str]) -> None:
        query = FakeStatusQuery(
            outputs={tree[2]: "# branch.ab +1 -0\n"},
            failures={tree[0]},
        )

        result = scan_root(tmp_path, query=query)

        assert result.total == 3
        assert result.repos[0] == RepoStatus(path=tree[0])
        assert result.repos[2].unpushed_commits == 1

    def test_no_repos(self, tmp_path: Path) -> None:
        result = scan_root(tmp_path, query=FakeStatusQuery())
        assert result.total == 0
        assert result.has_dirty is False

    def test_parallel_scan_keeps_discovery_order(
        self, tmp_path: Path, tree: list[str]
    ) -> None:
        query = FakeStatusQuery(outputs={path: "? x\n" for path in tree})

        result = scan_root(tmp_path, query=query, jobs=4)

        assert [repo.path for repo in result.repos] == tree
        assert sorted(query.calls) == sorted(tree)
        assert result.dirty_count == 3

    @pytest.mark.parametrize("jobs", [0, -1])
    def test_rejects_invalid_jobs(self, tmp_path: Path, jobs: int) -> None:
        with pytest.raises(ValueError, match="jobs must be at least 1"):
            _ = scan_root(tmp_path, query=FakeStatusQuery(), jobs=jobs)

    def test_logs_start_and_finish(
        self, tmp_path: Path, tree: list[str], mocker: MockerFixture
    ) -> None:
        logger = mocker.MagicMock()
        query = FakeStatusQuery(outputs={tree[0]: "? x\n"})

        _ = scan_root(tmp_path, query=query, logger=logger)

        events = [call.args[0] for call in logger.info.call_args_list]
        assert events == ["scan_started", "scan_finished"]
        finished = logger.info.call_args_list[-1].kwargs
        assert finished["total"] == 3
        assert finished["dirty"] == 1
        assert finished["clean"] == 2

    def test_uses_git_query_by_default(
        self, tmp_path: Path, tree: list[str], mocker: MockerFixture
    ) -> None:
        mock_run = mocker.patch(
            "gittracker.scanner._query.run_command",
            return_value=CommandResult(success=True, exit_code=0, stdout=""),
        )

        result = scan_root(tmp_path)

        assert result.total == len(tree)
        assert mock_run.call_count == len(tree)
