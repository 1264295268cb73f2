"""Run logger for recording intermediate fact-check results to JSON files."""

import dataclasses
import uuid
from datetime import UTC, datetime
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel


class StageRecord(BaseModel):
    """Record of a single stage of a fact-check run."""

    stage: str
    component: str
    input: Any = None
    output: Any = None
    timestamp: str = ""
    duration_seconds: float = 0.0


class RunRecord(BaseModel):
    """Record of a complete fact-check run."""

    run_id: str
    tool: str
    claim: str
    started_at: str
    completed_at: str | None = None
    stages: list[StageRecord] = []
    error: str | None = None
    report: dict[str, Any] | None = None


def _serialize(obj: Any) -> Any:
    """Serialize an object to JSON-compatible format.

    Objects exposing ``to_dict`` use it; other dataclasses, Pydantic models,
    enums, sequences, dicts and paths are converted structurally.
    """
    if obj is None:
        return None
    if hasattr(obj, "to_dict"):
        return obj.to_dict()
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return {f.name: _serialize(getattr(obj, f.name)) for f in dataclasses.fields(obj)}
    if isinstance(obj, BaseModel):
        return obj.model_dump()
    if isinstance(obj, Enum):
        return obj.value
    if isinstance(obj, (list, tuple)):
        return [_serialize(item) for item in obj]
    if isinstance(obj, dict):
        return {k: _serialize(v) for k, v in obj.items()}
    if isinstance(obj, Path):
        return str(obj)
    return obj


class RunLogger:
    """Accumulates stage records and writes a JSON log file per fact-check run.

    When ``enabled=False``, all methods are no-ops.

    Args:
        log_dir: Directory to write JSON log files.
        enabled: If False, all methods become no-ops.
    """

    def __init__(self, log_dir: Path, *, enabled: bool = True) -> None:
        self._log_dir = log_dir
        self._enabled = enabled
        self._record: RunRecord | None = None
        self._last_log_path: Path | None = None

    @property
    def enabled(self) -> bool:
        """Whether logging is active."""
        return self._enabled

    @property
    def last_log_path(self) -> Path | None:
        """Path to the last written log file, or None."""
        return self._last_log_path

    def start_run(self, tool: str, claim: str) -> None:
        """Initialize a new run record.

        Args:
            tool: Name of the tool being run.
            claim: The claim submitted for checking.
        """
        if not self._enabled:
            return

        self._record = RunRecord(
            run_id=str(uuid.uuid4()),
            tool=tool,
            claim=claim,
            started_at=datetime.now(tz=UTC).isoformat(),
        )

    def log_stage(
        self,
        stage: str,
        component: str,
        input_data: Any,
        output_data: Any,
        duration_seconds: float,
    ) -> None:
        """Append a stage record to the current run.

        Args:
            stage: Stage name (e.g. "scoring", "analysis").
            component: Component class name.
            input_data: Stage input (will be serialized).
            output_data: Stage output (will be serialized).
            duration_seconds: Wall-clock time for this stage.
        """
        if not self._enabled or self._record is None:
            return

        self._record.stages.append(
            StageRecord(
                stage=stage,
                component=component,
                input=_serialize(input_data),
                output=_serialize(output_data),
                timestamp=datetime.now(tz=UTC).isoformat(),
                duration_seconds=round(duration_seconds, 4),
            )
        )

    def finish_run(self, report: Any = None, *, error: BaseException | None = None) -> Path | None:
        """Write the run record to a JSON file.

        Args:
            report: Final report of the run, if it succeeded.
            error: Exception that ended the run, if it failed.

        Returns:
            Path to the written JSON file, or None if logging is disabled.
        """
        if not self._enabled or self._record is None:
            return None

        self._record.completed_at = datetime.now(tz=UTC).isoformat()
        self._record.report = _serialize(report)
        self._record.error = str(error) if error is not None else None

        self._log_dir.mkdir(parents=True, exist_ok=True)

        # run_2026-02-12T14-30-00_<id8>.json; colons are not filename-safe everywhere
        ts = self._record.started_at.replace(":", "-")
        ts = ts.split(".")[0].split("+")[0]
        filename = f"run_{ts}_{self._record.run_id[:8]}.json"
        filepath = self._log_dir / filename

        filepath.write_text(self._record.model_dump_json(indent=2))
        self._last_log_path = filepath
        self._record = None
        return filepath
