"""CLI adapter to record this month's net worth snapshot for every owner.

This module wires the CreateMonthlySnapshotsUseCase to the concrete
database adapter and provides a command-line entry point meant to be run
by a scheduler.
"""

from networth_engine.infrastructure.container import (
    build_create_monthly_snapshots,
    build_database_adapter,
    build_snapshot_repository,
)
from networth_engine.infrastructure.logging.logger import get_job_logger


def main() -> None:
    """Run the monthly snapshot job and print a summary."""
    logger = get_job_logger()
    db_adapter = build_database_adapter()
    build_snapshot_repository(db_adapter).prepare_storage()
    use_case = build_create_monthly_snapshots(db_adapter)

    result = use_case.run()

    print(
        f"Monthly snapshots: {result.successful} created, "
        f"{result.skipped} skipped, {result.failed} failed "
        f"out of {result.total_owners} owners."
    )
    for error in result.errors:
        print(f"  {error}")
    if result.failed:
        logger.warning(f"{result.failed} monthly snapshots failed")


if __name__ == "__main__":  # pragma: no cover
    main()
