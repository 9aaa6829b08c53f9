"""Demand calculation for Selenium Grid scaling.

Pure transformation logic: no I/O, no framework dependencies.
Matches queued session requests and active sessions against a target
browser identity and converts the match count into a node count.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Literal

import structlog

from gridscaler.domain.entities.grid import (
    Capability,
    CapabilityParseError,
    GridSnapshot,
    RawCapability,
    TargetIdentity,
)
from gridscaler.domain.ports.logger import EventLoggerPort

log = structlog.get_logger(__name__)

EntryKind = Literal["queued_request", "active_session"]


def matches_target(
    capability: Capability,
    target: TargetIdentity,
    *,
    kind: EntryKind,
) -> bool:
    """Return True if *capability* counts toward demand for *target*.

    Queued requests fall back to a match only when their version is empty
    and the target asks for "latest". Active sessions fall back whenever
    the target asks for "latest", whatever version they run.
    """
    if capability.browser_name != target.browser_name:
        return False
    if capability.browser_version.startswith(target.browser_version):
        return True
    if kind == "active_session":
        return target.wants_latest
    return capability.browser_version == "" and target.wants_latest


def _count_entries(
    raws: Iterable[RawCapability],
    target: TargetIdentity,
    *,
    kind: EntryKind,
    logger: EventLoggerPort,
) -> int:
    count = 0
    for index, raw in enumerate(raws):
        try:
            capability = Capability.from_raw(raw)
        except CapabilityParseError as e:
            logger.warning(
                "capability_parse_failed",
                kind=kind,
                index=index,
                error=str(e),
            )
            continue
        if matches_target(capability, target, kind=kind):
            count += 1
    return count


def count_matches(
    snapshot: GridSnapshot,
    target: TargetIdentity,
    *,
    logger: EventLoggerPort | None = None,
) -> int:
    """Count queued requests and active sessions matching *target*."""
    if logger is None:
        logger = log
    queued = _count_entries(
        snapshot.queued_requests,
        target,
        kind="queued_request",
        logger=logger,
    )
    active = _count_entries(
        (s.capabilities for s in snapshot.active_sessions),
        target,
        kind="active_session",
        logger=logger,
    )
    return queued + active


def normalize_to_nodes(count: int, max_sessions_per_node: int) -> int:
    """Convert a session count into a node count by ceiling division.

    A non-positive node capacity means unknown capacity: the count is
    returned unchanged.
    """
    if max_sessions_per_node <= 0:
        return count
    return (count + max_sessions_per_node - 1) // max_sessions_per_node


def compute_demand(
    snapshot: GridSnapshot,
    target: TargetIdentity,
    *,
    logger: EventLoggerPort | None = None,
) -> int:
    """Compute the required node count for *target* from *snapshot*.

    Never raises for malformed entries; those are logged and skipped.
    """
    if logger is None:
        logger = log
    raw_count = count_matches(snapshot, target, logger=logger)
    demand = normalize_to_nodes(raw_count, snapshot.max_sessions_per_node)
    logger.debug(
        "demand_computed",
        browser_name=target.browser_name,
        browser_version=target.browser_version,
        matched=raw_count,
        max_sessions_per_node=snapshot.max_sessions_per_node,
        demand=demand,
    )
    return demand
