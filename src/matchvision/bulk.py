"""Fan many screenshot extractions out across worker processes."""

from __future__ import annotations

import logging
import multiprocessing as mp
import os
import queue as queue_module
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from pydantic import BaseModel, Field

from matchvision.models import Outcome, ResultCode, RosterPlayer
from matchvision.pipeline import process_extraction
from matchvision.processors import failed_outcome


logger = logging.getLogger(__name__)

_WORKERS_ENV = "MATCHVISION_BULK_WORKERS"
_ITEMS_PER_JOB_ENV = "MATCHVISION_ITEMS_PER_JOB"

_WORKERS_DEFAULT = 1
_ITEMS_PER_JOB_DEFAULT = 4
_QUEUE_POLL_SECONDS = 0.5


def _env_int(name: str, default: int, *, min_value: int | None = None) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Invalid int for %s: %s; using default %d", name, raw, default)
        return default
    if min_value is not None:
        value = max(min_value, value)
    return value


def _bulk_workers() -> int:
    return _env_int(_WORKERS_ENV, _WORKERS_DEFAULT, min_value=1)


def _items_per_job() -> int:
    return _env_int(_ITEMS_PER_JOB_ENV, _ITEMS_PER_JOB_DEFAULT, min_value=1)


class BulkStatus(str, Enum):
    SUCCESS = "success"
    CHECK = "check"
    FAILED = "failed"


_STATUS_BY_CODE = {
    ResultCode.SUCCESS: BulkStatus.SUCCESS,
    ResultCode.CHECK_REQUEST: BulkStatus.CHECK,
    ResultCode.FAILED: BulkStatus.FAILED,
}


class BulkItem(BaseModel):
    """One uploaded screenshot's extraction, tagged by an opaque id."""

    item_id: str = Field(..., min_length=1)
    extraction: Any = None
    file_name: Optional[str] = None


class BulkItemResult(BaseModel):
    item_id: str
    file_name: Optional[str] = None
    status: BulkStatus
    message: str
    outcome: Outcome


@dataclass
class BulkReport:
    """Per-item results keyed by item id, in submission order."""

    results: Dict[str, BulkItemResult] = field(default_factory=dict)

    def _with_status(self, *statuses: BulkStatus) -> List[BulkItemResult]:
        return [result for result in self.results.values() if result.status in statuses]

    @property
    def succeeded(self) -> List[BulkItemResult]:
        return self._with_status(BulkStatus.SUCCESS)

    @property
    def needs_review(self) -> List[BulkItemResult]:
        return self._with_status(BulkStatus.CHECK)

    @property
    def failed(self) -> List[BulkItemResult]:
        return self._with_status(BulkStatus.FAILED)

    @property
    def accepted(self) -> List[BulkItemResult]:
        return self._with_status(BulkStatus.SUCCESS, BulkStatus.CHECK)


class BulkJobConfig:
    def __init__(self, job_id: int, game: str, roster: list[RosterPlayer], items: list[BulkItem]):
        self.job_id = job_id
        self.game = game
        self.roster = roster
        self.items = items


class BulkJobResult:
    def __init__(self, job_id: int, results: list[BulkItemResult], error: str | None = None):
        self.job_id = job_id
        self.results = results
        self.error = error


def _to_item_result(item: BulkItem, outcome: Outcome) -> BulkItemResult:
    return BulkItemResult(
        item_id=item.item_id,
        file_name=item.file_name,
        status=_STATUS_BY_CODE[outcome.status],
        message=outcome.message,
        outcome=outcome,
    )


def _failed_results(items: Sequence[BulkItem], message: str) -> list[BulkItemResult]:
    return [_to_item_result(item, failed_outcome(message)) for item in items]


def _run_job(config: BulkJobConfig) -> BulkJobResult:
    results: list[BulkItemResult] = []
    for item in config.items:
        try:
            outcome = process_extraction(config.game, item.extraction, config.roster)
        except Exception as exc:
            logger.exception("Item %s failed while processing", item.item_id)
            outcome = failed_outcome(f"Unexpected error while processing this screenshot: {exc}")
        results.append(_to_item_result(item, outcome))
    return BulkJobResult(config.job_id, results)


def _bulk_worker(config: BulkJobConfig, queue: mp.Queue) -> None:
    try:
        queue.put(_run_job(config))
    except Exception as exc:  # pragma: no cover - parent marks the job failed
        queue.put(BulkJobResult(config.job_id, [], error=str(exc)))


def _coerce_items(items: Sequence[Union[BulkItem, Mapping[str, Any]]]) -> list[BulkItem]:
    coerced = [item if isinstance(item, BulkItem) else BulkItem.model_validate(item) for item in items]
    seen: set[str] = set()
    duplicates: set[str] = set()
    for item in coerced:
        if item.item_id in seen:
            duplicates.add(item.item_id)
        seen.add(item.item_id)
    if duplicates:
        raise ValueError(f"duplicate item ids: {sorted(duplicates)}")
    return coerced


def process_bulk(
    items: Sequence[Union[BulkItem, Mapping[str, Any]]],
    *,
    game: str,
    roster: Sequence[RosterPlayer],
    workers: Optional[int] = None,
    items_per_job: Optional[int] = None,
) -> BulkReport:
    """Process independent extractions concurrently and partition the outcomes.

    Every item resolves to exactly one result; a failure inside one item never
    affects its siblings.
    """

    bulk_items = _coerce_items(items)
    roster_list = list(roster)
    if not roster_list:
        raise ValueError("select at least one session player before processing results")
    workers = max(1, workers if workers is not None else _bulk_workers())
    per_job = max(1, items_per_job if items_per_job is not None else _items_per_job())

    collected: dict[str, BulkItemResult] = {}
    if not bulk_items:
        return BulkReport()

    jobs = [
        BulkJobConfig(job_id, game, roster_list, bulk_items[offset:offset + per_job])
        for job_id, offset in enumerate(range(0, len(bulk_items), per_job))
    ]
    run_start = time.perf_counter()
    logger.info(
        "Starting bulk processing – game=%s, items=%s, jobs=%s, workers=%s, per_job=%s",
        game,
        len(bulk_items),
        len(jobs),
        workers,
        per_job,
    )

    def apply_outcome(outcome: BulkJobResult) -> None:
        job = jobs[outcome.job_id]
        if outcome.error:
            logger.warning("Bulk job %s stopped early: %s", outcome.job_id, outcome.error)
            results = _failed_results(job.items, f"Processing failed: {outcome.error}")
        else:
            results = outcome.results
        for result in results:
            collected[result.item_id] = result
        logger.info(
            "Bulk job %s completed – %s items; total %s/%s (%.2fs)",
            outcome.job_id,
            len(results),
            len(collected),
            len(bulk_items),
            time.perf_counter() - run_start,
        )

    if workers == 1 or len(jobs) == 1:
        for job in jobs:
            apply_outcome(_run_job(job))
    else:
        _run_jobs_in_processes(jobs, workers, apply_outcome)

    # Completion order is arbitrary; report in submission order.
    report = BulkReport({item.item_id: collected[item.item_id] for item in bulk_items})
    logger.info(
        "Bulk processing finished – success=%s, check=%s, failed=%s (%.2fs)",
        len(report.succeeded),
        len(report.needs_review),
        len(report.failed),
        time.perf_counter() - run_start,
    )
    return report


def _run_jobs_in_processes(jobs: Sequence[BulkJobConfig], workers: int, apply_outcome) -> None:
    ctx = mp.get_context("spawn")
    queue: mp.Queue = ctx.Queue()
    processes: dict[int, mp.Process] = {}
    pending = list(jobs)

    def start_job() -> None:
        job = pending.pop(0)
        logger.info("Dispatching bulk job %s – %s items", job.job_id, len(job.items))
        proc = ctx.Process(target=_bulk_worker, args=(job, queue))
        proc.start()
        processes[job.job_id] = proc

    try:
        while len(processes) < workers and pending:
            start_job()

        while processes:
            try:
                outcome = queue.get(timeout=_QUEUE_POLL_SECONDS)
            except queue_module.Empty:
                for job_id, proc in list(processes.items()):
                    if not proc.is_alive() and proc.exitcode not in (0, None):
                        processes.pop(job_id)
                        proc.join()
                        apply_outcome(BulkJobResult(job_id, [], error=f"worker exited with code {proc.exitcode}"))
                while len(processes) < workers and pending:
                    start_job()
                continue

            proc = processes.pop(outcome.job_id, None)
            if proc is None:
                # Already marked failed after its process died.
                continue
            proc.join()
            apply_outcome(outcome)

            while len(processes) < workers and pending:
                start_job()
    finally:
        for proc in processes.values():
            if proc.is_alive():
                proc.terminate()
            proc.join()
