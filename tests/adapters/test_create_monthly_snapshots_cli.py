"""Tests for the monthly snapshot CLI adapter."""

from unittest.mock import MagicMock

from networth_engine.adapters import create_monthly_snapshots_cli as cli
from networth_engine.application.use_cases.create_monthly_snapshots import (
    BatchSnapshotResult,
)


def _patch_builders(monkeypatch, result):
    logger = MagicMock()
    repository = MagicMock()
    use_case = MagicMock()
    use_case.run.return_value = result
    monkeypatch.setattr(cli, "get_job_logger", lambda: logger)
    monkeypatch.setattr(cli, "build_database_adapter", lambda: "db")
    monkeypatch.setattr(
        cli,
        "build_snapshot_repository",
        lambda db: repository,
    )
    monkeypatch.setattr(
        cli,
        "build_create_monthly_snapshots",
        lambda db: use_case,
    )
    return logger, repository, use_case


def test_main_prints_summary(monkeypatch, capsys):
    """A clean run should print counts and prepare the table first."""
    logger, repository, use_case = _patch_builders(
        monkeypatch,
        BatchSnapshotResult(total_owners=3, successful=2, skipped=1),
    )

    cli.main()

    output = capsys.readouterr().out
    assert (
        "Monthly snapshots: 2 created, 1 skipped, 0 failed out of 3 owners."
        in output
    )
    repository.prepare_storage.assert_called_once()
    use_case.run.assert_called_once()
    logger.warning.assert_not_called()


def test_main_lists_errors_and_warns(monkeypatch, capsys):
    """Failed owners should be listed and logged."""
    logger, _, _ = _patch_builders(
        monkeypatch,
        BatchSnapshotResult(
            total_owners=2,
            successful=1,
            failed=1,
            errors=["Owner b: Error creating snapshot: disk full"],
        ),
    )

    cli.main()

    output = capsys.readouterr().out
    assert "1 failed out of 2 owners." in output
    assert "  Owner b: Error creating snapshot: disk full" in output
    logger.warning.assert_called_once()
