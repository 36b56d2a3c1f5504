"""
Saga runner

Executes an ordered list of steps against a non-transactional store. The
first failing step aborts the remaining forward steps and the compensations
of every already-completed step run in reverse order. Compensation failures
are reported in the returned error, never retried.
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, Generic, List, Optional, TypeVar

from libs.result import Error, Result, Return
from src.domain.errors import DependencyError

logger = logging.getLogger(__name__)

C = TypeVar("C")


@dataclass
class SagaStep(Generic[C]):
    """One forward action and its optional compensating action"""

    name: str
    action: Callable[[C], Awaitable[Result[Any]]]
    compensation: Optional[Callable[[C], Awaitable[None]]] = None
    # Evaluated at rollback time, e.g. "only if the principal was newly created"
    compensate_if: Optional[Callable[[C], bool]] = None

    def needs_compensation(self, context: C) -> bool:
        if self.compensation is None:
            return False
        if self.compensate_if is None:
            return True
        return self.compensate_if(context)


@dataclass(frozen=True)
class CompensationOutcome:
    step: str
    succeeded: bool
    error: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {"step": self.step, "succeeded": self.succeeded, "error": self.error}


class Saga(Generic[C]):
    """
    Ordered, compensable sequence of external calls.

    Steps run strictly one after another with no retries. Cancelling the
    caller never interrupts a step already dispatched: the step settles, no
    further step starts, completed steps are compensated and the
    cancellation propagates.
    """

    def __init__(self, name: str, steps: List[SagaStep[C]]):
        self.name = name
        self.steps = steps

    async def run(self, context: C) -> Result[C]:
        completed: List[SagaStep[C]] = []

        for step in self.steps:
            logger.info(f"Saga {self.name}: running step {step.name}")
            task = asyncio.ensure_future(step.action(context))
            try:
                result = await asyncio.shield(task)
            except asyncio.CancelledError:
                logger.warning(
                    f"Saga {self.name}: cancelled during {step.name}, "
                    "waiting for the step to settle"
                )
                if await self._settle(step, task):
                    completed.append(step)
                await self._compensate(completed, context)
                raise
            except DependencyError as exc:
                return await self._abort(step, exc.to_error(), completed, context)
            except Exception:
                logger.exception(f"Saga {self.name}: step {step.name} raised")
                await self._compensate(completed, context)
                raise

            if result.is_err():
                return await self._abort(step, result.error, completed, context)
            completed.append(step)

        logger.info(f"Saga {self.name}: completed {len(completed)} steps")
        return Return.ok(context)

    async def _settle(self, step: SagaStep[C], task: "asyncio.Future[Result[Any]]") -> bool:
        """Wait for an in-flight step; True if it completed successfully"""
        try:
            result = await task
        except Exception as exc:
            logger.warning(f"Saga {self.name}: step {step.name} failed after cancel: {exc}")
            return False
        return result.is_ok()

    async def _abort(
        self,
        step: SagaStep[C],
        error: Error,
        completed: List[SagaStep[C]],
        context: C,
    ) -> Result[C]:
        logger.warning(
            f"Saga {self.name}: step {step.name} failed with {error.code}, "
            f"compensating {len(completed)} completed steps"
        )
        outcomes = await self._compensate(completed, context)
        details = dict(error.details or {})
        details.update(
            {
                "failed_step": step.name,
                "compensations": [outcome.to_dict() for outcome in outcomes],
                "compensation_failed": any(not o.succeeded for o in outcomes),
            }
        )
        return Return.err(Error(error.code, error.message, details))

    async def _compensate(
        self, completed: List[SagaStep[C]], context: C
    ) -> List[CompensationOutcome]:
        outcomes: List[CompensationOutcome] = []
        for step in reversed(completed):
            if not step.needs_compensation(context):
                continue
            try:
                await step.compensation(context)
            except Exception as exc:
                # Reported to the caller for manual reconciliation, not retried
                logger.error(
                    f"Saga {self.name}: compensation of {step.name} failed: {exc}"
                )
                outcomes.append(CompensationOutcome(step.name, False, str(exc)))
                continue
            logger.warning(f"Saga {self.name}: compensated {step.name}")
            outcomes.append(CompensationOutcome(step.name, True))
        return outcomes
