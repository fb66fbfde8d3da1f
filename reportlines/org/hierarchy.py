"""Org hierarchy resolution: root repair, linking and cycle detection."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from reportlines.org.errors import (
    CycleDetectedError,
    MalformedInputRecordError,
    UnresolvedManagerReference,
)
from reportlines.org.models import Employee, EmployeeID, Node

logger = logging.getLogger(__name__)


@dataclass
class OrgForest:
    """Arena of nodes in ingestion order, addressed by employee id.

    Relationships are held as ids only; ``index`` maps an id to its slot in
    ``nodes``.
    """

    nodes: list[Node] = field(default_factory=list)
    index: dict[EmployeeID, int] = field(default_factory=dict)
    roots: list[EmployeeID] = field(default_factory=list)
    unresolved: list[UnresolvedManagerReference] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.nodes)

    def __contains__(self, employee_id: EmployeeID) -> bool:
        return employee_id in self.index

    def node(self, employee_id: EmployeeID) -> Node:
        return self.nodes[self.index[employee_id]]

    def manager_index(self, i: int) -> int | None:
        manager_id = self.nodes[i].manager_id
        return None if manager_id is None else self.index[manager_id]

    @property
    def employees(self) -> list[Employee]:
        return [n.employee for n in self.nodes]


def _load_arena(employees: Iterable[Employee]) -> OrgForest:
    forest = OrgForest()
    duplicates = []
    for employee in employees:
        if employee.id in forest.index:
            duplicates.append(employee.id)
            continue
        forest.index[employee.id] = len(forest.nodes)
        forest.nodes.append(Node(employee))

    if duplicates:
        raise MalformedInputRecordError([f"duplicate employee ids: {sorted(set(duplicates))}"])
    return forest


def _repair_roots(forest: OrgForest) -> None:
    """Record true roots and promote employees with dangling managers to roots."""
    for node in forest.nodes:
        if node.manager_id is None:
            forest.roots.append(node.id)

    # there could be managers whose managers are not in the list
    for node in forest.nodes:
        manager_id = node.manager_id
        if manager_id is not None and manager_id not in forest.index:
            event = UnresolvedManagerReference(employee_id=node.id, manager_id=manager_id)
            logger.warning("%s", event.describe())
            forest.unresolved.append(event)
            forest.roots.append(node.id)

    for employee_id in forest.roots:
        forest.node(employee_id).employee.manager_id = None


def link_and_check(forest: OrgForest) -> None:
    """Attach every employee to its manager, failing on the first cycle.

    Each walk climbs the manager chain from an unvisited employee. Reaching an
    id finalized by an earlier walk ends the walk normally; reaching an id
    already on the current chain means the chain loops back on itself.
    """
    finalized: set[EmployeeID] = set()

    for start in forest.nodes:
        if start.id in finalized:
            continue

        chain: list[EmployeeID] = []
        on_chain: set[EmployeeID] = set()
        current: EmployeeID | None = start.id

        while current is not None:
            if current in on_chain:
                raise CycleDetectedError(chain)
            if current in finalized:
                break

            chain.append(current)
            on_chain.add(current)
            finalized.add(current)

            manager_id = forest.node(current).manager_id
            if manager_id is not None:
                forest.node(manager_id).direct_reports.append(current)
            current = manager_id


def build_forest(employees: Iterable[Employee]) -> OrgForest:
    """Resolve manager references into a validated, linked forest.

    Dangling manager references are repaired (the employee becomes a root and
    the event is kept on ``forest.unresolved``); cycles raise
    :class:`CycleDetectedError`.
    """
    forest = _load_arena(employees)
    _repair_roots(forest)
    link_and_check(forest)

    logger.info(
        "Resolved org hierarchy: %d nodes, %d root(s), %d repaired",
        len(forest),
        len(forest.roots),
        len(forest.unresolved),
    )
    return forest
