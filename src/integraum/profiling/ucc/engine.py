"""Level-wise discovery of minimal unique column combinations.

The search walks the attribute lattice bottom-up:

1. Seed: build one partition per column. Unique columns are accepted, the rest
   form the level-1 frontier.
2. Generate: join frontier nodes that share all but their last column.
3. Prune: drop a candidate if one of its one-smaller subsets is accepted or is
   missing from the frontier (then some smaller subset is already unique).
4. Validate: refine the parent partition by the added column. Unique candidates
   are accepted; the others become the next frontier.

The loop stops when a level generates no candidates or the size limit is hit.
"""

from __future__ import annotations

import time
from collections import defaultdict
from collections.abc import Callable, Mapping
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from datetime import UTC, datetime
from types import MappingProxyType

from integraum.core.config import Settings, get_settings
from integraum.core.exceptions import ProfilingCancelled
from integraum.core.logging import ProfileMetrics, get_logger, log_context
from integraum.core.models import Result, Table
from integraum.profiling.ucc.attributes import AttributeCombination
from integraum.profiling.ucc.models import UCC, UCCProfileResult
from integraum.profiling.ucc.partition import PartitionIndex
from integraum.profiling.ucc.validators import (
    CandidateValidator,
    PartitionValidator,
    Validation,
    get_validator,
)

logger = get_logger(__name__)

CancelHook = Callable[[int], bool]


@dataclass(frozen=True)
class Candidate:
    """A lattice node waiting for validation."""

    combination: AttributeCombination
    parent: AttributeCombination


@dataclass(frozen=True)
class Frontier:
    """Non-unique combinations of one lattice level, with their partitions."""

    level: int
    nodes: Mapping[AttributeCombination, PartitionIndex | None] = field(
        default_factory=lambda: MappingProxyType({})
    )

    @classmethod
    def of(
        cls, level: int, nodes: dict[AttributeCombination, PartitionIndex | None]
    ) -> Frontier:
        return cls(level, MappingProxyType(dict(nodes)))

    def __bool__(self) -> bool:
        return bool(self.nodes)


class UCCEngine:
    """Discovers all minimal unique column combinations of a table.

    The engine holds configuration only; every call to ``discover`` works on its
    own state, so one engine may profile several tables concurrently.
    """

    def __init__(
        self,
        strategy: CandidateValidator | None = None,
        max_size: int = 0,
        max_workers: int = 1,
        should_cancel: CancelHook | None = None,
    ):
        """Initialize the engine.

        Args:
            strategy: Candidate validator (defaults to partition refinement)
            max_size: Largest combination to explore, 0 for all columns
            max_workers: Threads validating the candidates of one level
            should_cancel: Called with the next level number before it is
                explored; returning True aborts with ProfilingCancelled
        """
        if max_size < 0:
            raise ValueError(f"max_size must be >= 0, got {max_size}")
        if max_workers < 1:
            raise ValueError(f"max_workers must be >= 1, got {max_workers}")
        self.strategy = strategy or PartitionValidator()
        self.max_size = max_size
        self.max_workers = max_workers
        self.should_cancel = should_cancel

    @classmethod
    def from_settings(
        cls, settings: Settings | None = None, should_cancel: CancelHook | None = None
    ) -> UCCEngine:
        settings = settings or get_settings()
        return cls(
            strategy=get_validator(settings.ucc_strategy),
            max_size=settings.ucc_max_size,
            max_workers=settings.ucc_max_workers,
            should_cancel=should_cancel,
        )

    def discover(self, table: Table) -> list[UCC]:
        """Return the minimal UCCs of ``table`` ordered by size, then column index."""
        uccs, _ = self._search(table)
        return uccs

    def profile(self, table: Table) -> UCCProfileResult:
        """Run discovery and summarise it."""
        uccs, metrics = self._search(table)
        return UCCProfileResult(
            table_name=table.name,
            attributes=list(table.attributes),
            row_count=table.num_rows,
            uccs=[ucc.column_names for ucc in uccs],
            strategy=self.strategy.name,
            levels=metrics.levels,
            candidates_generated=metrics.candidates_generated,
            candidates_pruned=metrics.candidates_pruned,
            candidates_validated=metrics.candidates_validated,
            computed_at=metrics.end_time,
            duration_seconds=metrics.duration_seconds,
        )

    def _search(self, table: Table) -> tuple[list[UCC], ProfileMetrics]:
        metrics = ProfileMetrics(operation="ucc_discovery")

        with log_context(table=table.name, strategy=self.strategy.name):
            if table.num_attributes == 0:
                logger.info("ucc_discovery_skipped", reason="no_attributes")
                return [], metrics.finish()

            limit = table.num_attributes
            if self.max_size:
                limit = min(limit, self.max_size)

            logger.debug(
                "ucc_discovery_started",
                attributes=table.num_attributes,
                rows=table.num_rows,
                max_size=limit,
            )

            start = time.perf_counter()
            columns, accepted, frontier = self._seed(table)
            metrics.levels = 1
            metrics.record_timing("seed", time.perf_counter() - start)
            logger.debug("ucc_level_validated", level=1, accepted=len(accepted))

            while frontier and frontier.level < limit:
                level = frontier.level + 1
                if self.should_cancel is not None and self.should_cancel(level):
                    logger.warning("ucc_discovery_cancelled", level=level)
                    raise ProfilingCancelled(level)

                start = time.perf_counter()
                candidates = self._generate(frontier, accepted, metrics)
                if not candidates:
                    break

                validations = self._validate_level(table, candidates, frontier, columns)
                metrics.candidates_validated += len(validations)
                metrics.levels = level

                # Accepted set and frontier change only once the whole level is done
                next_nodes: dict[AttributeCombination, PartitionIndex | None] = {}
                newly_accepted = 0
                for validation in validations:
                    if validation.unique:
                        accepted.add(validation.combination)
                        newly_accepted += 1
                    else:
                        next_nodes[validation.combination] = validation.partition
                frontier = Frontier.of(level, next_nodes)

                metrics.record_timing(f"level_{level}", time.perf_counter() - start)
                logger.debug(
                    "ucc_level_validated",
                    level=level,
                    candidates=len(candidates),
                    accepted=newly_accepted,
                    frontier=len(next_nodes),
                )

            uccs = [UCC(table, combination) for combination in sorted(accepted)]
            metrics.finish()
            logger.info("ucc_discovery_completed", uccs=len(uccs), **metrics.to_dict())
            return uccs, metrics

    def _seed(
        self, table: Table
    ) -> tuple[dict[int, PartitionIndex], set[AttributeCombination], Frontier]:
        columns: dict[int, PartitionIndex] = {}
        accepted: set[AttributeCombination] = set()
        non_unique: dict[AttributeCombination, PartitionIndex | None] = {}

        for index in range(table.num_attributes):
            partition = self.strategy.seed(table, index)
            if partition.num_rows != table.num_rows:
                raise ValueError(
                    f"Partition of column {index} covers {partition.num_rows} rows, "
                    f"table has {table.num_rows}"
                )
            columns[index] = partition
            if partition.is_unique():
                accepted.add(partition.combination)
            else:
                non_unique[partition.combination] = partition

        return columns, accepted, Frontier.of(1, non_unique)

    def _generate(
        self,
        frontier: Frontier,
        accepted: set[AttributeCombination],
        metrics: ProfileMetrics,
    ) -> list[Candidate]:
        """Join frontier nodes sharing all but their last column, then prune."""
        blocks: dict[tuple[int, ...], list[AttributeCombination]] = defaultdict(list)
        for combination in sorted(frontier.nodes):
            blocks[combination.indices[:-1]].append(combination)

        seen: set[AttributeCombination] = set()
        candidates: list[Candidate] = []
        for block in blocks.values():
            for i, left in enumerate(block):
                for right in block[i + 1 :]:
                    combination = left.union(right)
                    if combination.size() != left.size() + 1 or combination in seen:
                        continue
                    seen.add(combination)
                    metrics.candidates_generated += 1

                    if self._is_minimal_candidate(combination, frontier, accepted):
                        candidates.append(Candidate(combination, parent=left))
                    else:
                        metrics.candidates_pruned += 1

        candidates.sort(key=lambda candidate: candidate.combination.sort_key())
        return candidates

    @staticmethod
    def _is_minimal_candidate(
        combination: AttributeCombination,
        frontier: Frontier,
        accepted: set[AttributeCombination],
    ) -> bool:
        for subset in combination.subsets_one_smaller():
            if subset in accepted:
                return False
            # Absent from the frontier means a smaller unique subset exists
            if subset not in frontier.nodes:
                return False
        return True

    def _validate_level(
        self,
        table: Table,
        candidates: list[Candidate],
        frontier: Frontier,
        columns: Mapping[int, PartitionIndex],
    ) -> list[Validation]:
        def validate(candidate: Candidate) -> Validation:
            parent = frontier.nodes.get(candidate.parent)
            return self.strategy.validate(table, candidate.combination, parent, columns)

        if self.max_workers == 1 or len(candidates) == 1:
            return [validate(candidate) for candidate in candidates]

        with ThreadPoolExecutor(max_workers=self.max_workers) as pool:
            return list(pool.map(validate, candidates))


def profile_uccs(
    table: Table,
    settings: Settings | None = None,
    should_cancel: CancelHook | None = None,
) -> Result[UCCProfileResult]:
    """Discover the minimal UCCs of ``table`` with configured defaults.

    Cancellation is reported as a failed Result. Contract violations such as
    malformed tables propagate as exceptions.
    """
    engine = UCCEngine.from_settings(settings, should_cancel=should_cancel)
    try:
        result = engine.profile(table)
    except ProfilingCancelled as e:
        return Result.fail(str(e))

    if result.computed_at is None:
        result.computed_at = datetime.now(UTC)
    return Result.ok(result)
