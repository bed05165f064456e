"""Data contracts shared by the job lifecycle components.

Architectural role:
    Defines the immutable generation-parameter snapshot sent at submission time,
    the builder that accumulates option setters before a run, the job status enum
    observed by the poller, and the result record returned by the orchestrator.

Determinism:
    Pure data structures; no I/O and no hidden shared state. Each `build()` call
    returns an independent snapshot.
"""

from dataclasses import dataclass, fields, replace
from enum import Enum
from pathlib import Path
from typing import Mapping

JobId = str


class JobStatus(str, Enum):
    SUBMITTED = "submitted"
    RUNNING = "running"
    COMPLETED = "completed"
    FAILED = "failed"
    CANCELLED = "cancelled"

    @property
    def is_terminal(self) -> bool:
        return self in TERMINAL_STATUSES

    @classmethod
    def parse(cls, value: str) -> "JobStatus":
        """Map a wire status string to a member.

        Values the enum does not know (for example `waiting`) are still in
        progress from the client's point of view and map to `RUNNING`.
        """
        try:
            return cls(value)
        except ValueError:
            return cls.RUNNING


TERMINAL_STATUSES = frozenset(
    {JobStatus.COMPLETED, JobStatus.FAILED, JobStatus.CANCELLED}
)


@dataclass(frozen=True)
class GenerationConfig:
    """Optional generation options; `None` means "use the service default".

    Attributes are snake_case; `WIRE_NAMES` maps them to the parameter keys the
    service expects inside `createGenerationTask(parameters: ...)`.
    """

    negative_prompt: str | None = None
    sampling_steps: int | None = None
    cfg_scale: float | None = None
    upscale: float | None = None
    width: int | None = None
    height: int | None = None
    sampler: str | None = None
    model_id: str | None = None
    enable_tile: bool | None = None

    def to_parameters(self) -> dict:
        """Return a fresh wire-parameter dict containing only the set options."""
        return {
            WIRE_NAMES[f.name]: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }

    @classmethod
    def from_mapping(cls, options: Mapping) -> "GenerationConfig":
        """Build a snapshot from a mapping keyed by wire or attribute names.

        Raises:
            ValueError: for keys outside the known option set.
        """
        kwargs = {}
        for key, value in options.items():
            name = ATTRIBUTE_NAMES.get(key, key)
            if name not in WIRE_NAMES:
                raise ValueError(f"Unknown generation option: {key!r}")
            kwargs[name] = value
        return cls(**kwargs)

    @classmethod
    def coerce(cls, config) -> "GenerationConfig":
        if config is None:
            return cls()
        if isinstance(config, cls):
            return config
        return cls.from_mapping(config)


WIRE_NAMES = {
    "negative_prompt": "negative_prompt",
    "sampling_steps": "samplingSteps",
    "cfg_scale": "cfgScale",
    "upscale": "upscale",
    "width": "width",
    "height": "height",
    "sampler": "sampler",
    "model_id": "modelId",
    "enable_tile": "enableTile",
}
ATTRIBUTE_NAMES = {wire: attr for attr, wire in WIRE_NAMES.items()}


class GenerationConfigBuilder:
    """Accumulates option setters; `build()` takes an immutable snapshot.

    Setters return the builder so calls can be chained. Snapshots already handed
    out are never affected by later setter calls.
    """

    def __init__(self, config: GenerationConfig | None = None):
        self._config = config or GenerationConfig()

    def _set(self, **changes):
        self._config = replace(self._config, **changes)
        return self

    def set_negative_prompt(self, negative_prompt: str):
        return self._set(negative_prompt=negative_prompt)

    def set_enable_tile(self, enable_tile: bool):
        return self._set(enable_tile=bool(enable_tile))

    def set_sampling_steps(self, sampling_steps: int):
        return self._set(sampling_steps=int(sampling_steps))

    def set_cfg_scale(self, cfg_scale: float):
        return self._set(cfg_scale=float(cfg_scale))

    def set_upscale(self, upscale: float):
        return self._set(upscale=float(upscale))

    def set_width(self, width: int):
        return self._set(width=int(width))

    def set_height(self, height: int):
        return self._set(height=int(height))

    def set_sampler(self, sampler: str):
        return self._set(sampler=sampler)

    def set_model_id(self, model_id: str):
        return self._set(model_id=str(model_id))

    def build(self) -> GenerationConfig:
        return self._config


@dataclass(frozen=True)
class RunResult:
    """Outcome of one end-to-end run.

    Attributes:
        status: Terminal job status reported by the service.
        job_id: Identifier returned at submission.
        path: Saved artifact path; only set when `status` is `completed`.
    """

    status: JobStatus
    job_id: JobId
    path: Path | None = None
