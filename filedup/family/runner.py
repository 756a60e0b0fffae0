"""
Plan the cleanup of numbered "Save As" copies, one original at a time.

Each candidate file is treated as a prospective original. Its family is the set of
candidates named like "<stem> (<digits>)<ext>"; copies with the same content as the
original are removed, and if any copy has diverged, the newest one replaces the original.

Families are independent, so they are planned on a thread pool and the per-family
plans are joined back together in candidate order.
"""
from __future__ import annotations
import concurrent.futures
import logging
import os
import sys
from contextlib import nullcontext
from dataclasses import dataclass
from typing import Iterable, Sequence

from alive_progress import alive_bar
from pydantic import BaseModel, ConfigDict, Field, field_validator

from filedup.family import classifier, matcher, plan, resolver
from filedup.lib.types import HashCapability, StrPath, TimeCapability

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FamilyRunner:
    """
    Plans the cleanup of one original at a time.

    Holds only read-only state, so a single runner may be shared by many threads.
    """
    extension : str
    candidates : tuple[str, ...]
    hasher : HashCapability
    created_at : TimeCapability
    index : matcher.FamilyIndex | None = None

    def members(self, original : str) -> tuple[str, ...]:
        if self.index is not None:
            return self.index.members(original)
        return matcher.match_family(original, self.extension, self.candidates)

    def run(self, original : StrPath) -> str:
        """
        Return the plan for one original, or an empty string if it has no copies.

        Raises:
            AppError: The first path, pattern, hash or time failure, with its path attached.
        """
        original = matcher.path_text(original)
        members = self.members(original)
        if not members:
            return ''

        logger.debug('Found %d copies of %s', len(members), original)
        classification = classifier.classify(original, members, self.hasher)
        decision = resolver.resolve(classification, self.created_at)
        return plan.render_text(classification, decision)


class DistributorConfig(BaseModel):
    """
    Worker settings for WorkDistributor.

    Attributes:
        max_threads: Worker threads. 0 picks a default from the CPU count.
        batch_size: Originals planned per submitted task.
        show_progress: Render a progress bar on stderr.
    """
    max_threads : int = Field(default=0, validate_default=True)
    batch_size : int = 16
    show_progress : bool = False

    model_config = ConfigDict(frozen=True)

    @field_validator("max_threads")
    def validate_max_threads(cls, value):
        # Sensible default
        if not value:
            # Twice the cores, capped at 32
            return min(32, (os.cpu_count() or 4) * 2)

        if value < 1:
            raise ValueError("max_threads must be a positive integer.")

        return value

    @field_validator("batch_size")
    def validate_batch_size(cls, value):
        if value < 1:
            raise ValueError("batch_size must be a positive integer.")
        return value


class WorkDistributor:
    """
    Runs FamilyRunner for every candidate and joins the plans in candidate order.
    """

    def __init__(self, config : DistributorConfig | None = None) -> None:
        self.config = config or DistributorConfig()

    def _batches(self, originals : Sequence[str]) -> list[Sequence[str]]:
        size = self.config.batch_size
        return [originals[i:i + size] for i in range(0, len(originals), size)]

    def _progress(self, total : int):
        if not self.config.show_progress:
            return nullcontext(lambda *args, **kwargs: None)
        return alive_bar(total, title="Planning", unit="files", file=sys.stderr)

    def run(self, candidates : Iterable[StrPath], extension : str, hasher : HashCapability, created_at : TimeCapability) -> str:
        """
        Plan every candidate as a prospective original.

        The first failure aborts the run: queued work is cancelled and the error re-raised.

        Returns:
            The non-empty per-family plans joined by newlines, in candidate order.
        """
        index = matcher.FamilyIndex.build(candidates, extension)
        originals = index.candidates
        runner = FamilyRunner(
            extension   = extension,
            candidates  = originals,
            hasher      = hasher,
            created_at  = created_at,
            index       = index,
        )

        batches = self._batches(originals)
        results : list[list[str]] = [[] for _ in batches]

        logger.debug(
            'Planning %d file(s) in %d batch(es) with %d thread(s)',
            len(originals), len(batches), self.config.max_threads,
        )

        def run_batch(batch : Sequence[str]) -> list[str]:
            return [runner.run(original) for original in batch]

        with self._progress(len(originals)) as bar:
            if self.config.max_threads == 1:
                for position, batch in enumerate(batches):
                    results[position] = run_batch(batch)
                    bar(len(batch))
            else:
                executor = concurrent.futures.ThreadPoolExecutor(
                    max_workers=self.config.max_threads,
                    thread_name_prefix="plan",
                )
                try:
                    future_to_position = {
                        executor.submit(run_batch, batch): position for position, batch in enumerate(batches)
                    }
                    for future in concurrent.futures.as_completed(future_to_position):
                        position = future_to_position[future]
                        # Raises the batch's first error, aborting the run
                        results[position] = future.result()
                        bar(len(batches[position]))
                finally:
                    executor.shutdown(wait=True, cancel_futures=True)

        return '\n'.join(block for batch in results for block in batch if block)
