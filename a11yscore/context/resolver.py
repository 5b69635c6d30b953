import asyncio
import logging
from typing import List, Optional, Sequence

from a11yscore.config import get_context_timeout, get_max_concurrency
from a11yscore.context.provider import ElementContextProvider
from a11yscore.models.element_context import ElementContext
from a11yscore.models.scored_violation import ScoredViolation
from a11yscore.models.violation import RawViolation
from a11yscore.scoring.context import primary_selector
from a11yscore.scoring.engine import ViolationInput, ensure_sequence, score_violations

logger = logging.getLogger("a11yscore.context")


async def _lookup_with_semaphore(
    semaphore: asyncio.Semaphore,
    provider: ElementContextProvider,
    selector: Optional[str],
    timeout_seconds: float,
) -> Optional[ElementContext]:
    """Single lookup. Any failure is reported as 'no context', never raised."""
    if not selector:
        return None

    async with semaphore:
        try:
            return await asyncio.wait_for(provider.get_element_context(selector), timeout_seconds)
        except asyncio.TimeoutError:
            logger.warning(f"Context lookup timed out after {timeout_seconds}s for {selector}")
            return None
        except Exception as e:
            logger.warning(f"Context lookup failed for {selector}: {e}")
            return None


def _selector_for(item: ViolationInput) -> Optional[str]:
    try:
        raw = item if isinstance(item, RawViolation) else RawViolation.from_dict(item)
    except Exception:
        # Unparseable items fall back during scoring
        return None
    return primary_selector(raw)


async def resolve_contexts(
    violations: Sequence[ViolationInput],
    provider: ElementContextProvider,
    max_concurrency: Optional[int] = None,
    timeout_seconds: Optional[float] = None,
) -> List[Optional[ElementContext]]:
    """
    Look up element contexts with bounded concurrency.
    Result is parallel to violations.

    timeout_seconds bounds each lookup and also the whole batch: lookups
    still queued or running at the deadline are cancelled and resolve to None.
    """
    max_concurrency = max_concurrency or get_max_concurrency()
    timeout_seconds = timeout_seconds or get_context_timeout()

    semaphore = asyncio.Semaphore(max_concurrency)
    tasks = [
        asyncio.ensure_future(
            _lookup_with_semaphore(semaphore, provider, _selector_for(v), timeout_seconds)
        )
        for v in violations
    ]
    if not tasks:
        return []

    _, pending = await asyncio.wait(tasks, timeout=timeout_seconds)

    if pending:
        logger.warning(
            f"Context lookup deadline of {timeout_seconds}s reached; "
            f"abandoning {len(pending)}/{len(tasks)} lookups"
        )
        for task in pending:
            task.cancel()
        await asyncio.gather(*pending, return_exceptions=True)

    return [None if task in pending else task.result() for task in tasks]


async def score_violations_async(
    violations: Sequence[ViolationInput],
    provider: Optional[ElementContextProvider] = None,
    max_concurrency: Optional[int] = None,
    timeout_seconds: Optional[float] = None,
) -> List[ScoredViolation]:
    """
    Resolve contexts (when a provider is given), then score the batch.
    Always returns one ScoredViolation per input.
    """
    ensure_sequence(violations, "violations")

    if provider is None:
        return score_violations(violations)

    contexts = await resolve_contexts(violations, provider, max_concurrency, timeout_seconds)

    resolved = sum(1 for c in contexts if c is not None)
    logger.info(f"Resolved {resolved}/{len(contexts)} element contexts")

    return score_violations(violations, contexts)
