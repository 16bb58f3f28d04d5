from __future__ import annotations
import inspect
import logging
from datetime import datetime
from typing import Any, Awaitable, Callable, Mapping, Optional, Sequence, Union

from .errors import NoExecutorBoundError, StepNotFoundError
from .state import PipelineContext, RunMetadata, Step, StepDefinition

logger = logging.getLogger(__name__)

Executor = Callable[[Step, PipelineContext], Union[Any, Awaitable[Any]]]
StepObserver = Callable[[Step, PipelineContext], None]


class SequentialOrchestrator:
    """Runs an ordered list of steps one at a time and tracks their status.

    Every status transition is reported to the optional observer. A step that
    raises is recorded as ``error`` rather than propagated; ``run_all`` stops at
    the first such step and leaves the remaining steps ``pending``.
    """

    def __init__(
        self,
        steps: Sequence[Union[StepDefinition, Mapping[str, Any]]],
        on_step_update: Optional[StepObserver] = None,
        metadata: Optional[RunMetadata] = None,
    ):
        definitions = [s if isinstance(s, StepDefinition) else StepDefinition.model_validate(s) for s in steps]
        self._context = PipelineContext(
            steps=[
                Step(id=f"step-{index}", title=d.title, description=d.description)
                for index, d in enumerate(definitions)
            ],
            current_step_index=0,
            is_processing=False,
            metadata=metadata or RunMetadata(),
        )
        self._on_step_update = on_step_update

    def _find(self, step_id: str) -> Optional[Step]:
        return next((s for s in self._context.steps if s.id == step_id), None)

    def _notify(self, step: Step) -> None:
        if self._on_step_update is not None:
            self._on_step_update(step, self._context)

    async def run_step(self, step_id: str, executor: Executor) -> Step:
        step = self._find(step_id)
        if step is None:
            raise StepNotFoundError(step_id)

        step.status = "processing"
        step.error = None
        step.timestamp = datetime.now()
        self._context.is_processing = True
        logger.debug("Step %s (%s) started", step.id, step.title)
        self._notify(step)

        try:
            result = executor(step, self._context)
            if inspect.isawaitable(result):
                result = await result
            step.result = result
            step.status = "completed"
            step.timestamp = datetime.now()
            if self._context.current_step_index < len(self._context.steps) - 1:
                self._context.current_step_index += 1
            logger.debug("Step %s (%s) completed", step.id, step.title)
        except Exception as e:
            step.error = str(e) or e.__class__.__name__
            step.status = "error"
            step.timestamp = datetime.now()
            logger.warning("Step %s (%s) failed: %s", step.id, step.title, step.error)
        finally:
            self._context.is_processing = False
            self._notify(step)
        return step

    async def run_all(self, executors: Union[Sequence[Executor], Mapping[str, Executor]]) -> None:
        """Run every step that is not yet completed, in definition order.

        ``executors`` is either a sequence matched to the steps by position or a
        mapping from step id to executor, where the ``"default"`` key serves any
        step without its own entry.
        """
        for index, step in enumerate(self._context.steps):
            if step.status == "completed":
                continue

            executor = self._resolve_executor(executors, index, step.id)
            if executor is None:
                raise NoExecutorBoundError(step.id)

            await self.run_step(step.id, executor)

            if step.status == "error":
                break

    @staticmethod
    def _resolve_executor(
        executors: Union[Sequence[Executor], Mapping[str, Executor]], index: int, step_id: str
    ) -> Optional[Executor]:
        if isinstance(executors, Mapping):
            return executors.get(step_id) or executors.get("default")
        return executors[index] if index < len(executors) else None

    def get_context(self) -> PipelineContext:
        return self._context.model_copy()

    def get_current_step(self) -> Optional[Step]:
        steps = self._context.steps
        index = self._context.current_step_index
        return steps[index] if 0 <= index < len(steps) else None

    def get_step(self, step_id: str) -> Optional[Step]:
        return self._find(step_id)

    def get_step_result(self, step_id: str) -> Any:
        step = self._find(step_id)
        return step.result if step else None

    @property
    def failed_step(self) -> Optional[Step]:
        return next((s for s in self._context.steps if s.status == "error"), None)

    def update_metadata(self, key: str, value: Any) -> None:
        setattr(self._context.metadata, key, value)

    def get_metadata(self, key: Optional[str] = None) -> Any:
        if key is None:
            return self._context.metadata
        return getattr(self._context.metadata, key, None)
