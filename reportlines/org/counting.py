"""Bottom-up recursive report counts over a linked org forest."""

import logging
from collections import deque

import numpy as np

from reportlines.org.errors import CycleDetectedError
from reportlines.org.hierarchy import OrgForest

logger = logging.getLogger(__name__)


def count_recursive_reports(forest: OrgForest) -> None:
    """Set ``recursive_reports`` on every employee in the forest.

    Leaves seed the work queue. A manager joins the queue only once all of its
    direct reports have been folded in, so every node is finalized exactly
    once and after all of its descendants.
    """
    n = len(forest)
    parent = np.full(n, -1, dtype=np.int64)
    for i in range(n):
        manager = forest.manager_index(i)
        if manager is not None:
            parent[i] = manager

    remaining = np.fromiter((len(node.direct_reports) for node in forest.nodes), dtype=np.int64, count=n)
    totals = np.zeros(n, dtype=np.int64)

    queue = deque(int(i) for i in np.flatnonzero(remaining == 0))
    finalized = 0

    while queue:
        i = queue.popleft()
        finalized += 1
        p = parent[i]
        if p < 0:
            continue
        totals[p] += totals[i] + 1
        remaining[p] -= 1
        if remaining[p] == 0:
            queue.append(int(p))

    if finalized != n:
        stuck = [forest.nodes[i].id for i in np.flatnonzero(remaining > 0)]
        raise CycleDetectedError(stuck)

    for node, total in zip(forest.nodes, totals):
        node.employee.recursive_reports = int(total)

    logger.info("Counted recursive reports for %d employees (max %d)", n, int(totals.max()) if n else 0)
