"""Pytest fixtures for jugsolver tests."""

from __future__ import annotations

import os
from collections import deque

import pytest

from jugsolver.core.feasibility import gcd


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Run every test without JUGSOLVER_* variables and away from any jugsolver.yaml."""
    for key in list(os.environ):
        if key.startswith("JUGSOLVER_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)


def reference_distance(x: int, y: int, z: int) -> int | None:
    """Minimum number of operations to hold ``z`` in either jug, or None.

    Written independently of the solver: neighbours are built as an
    unordered set, so only the distance (not the path) is comparable.
    """
    start = (0, 0)
    dist = {start: 0}
    queue = deque([start])
    while queue:
        a, b = queue.popleft()
        if z in (a, b):
            return dist[(a, b)]
        to_y = min(a, y - b)
        to_x = min(b, x - a)
        for nxt in {(x, b), (a, y), (0, b), (a, 0), (a - to_y, b + to_y), (a + to_x, b - to_x)}:
            if nxt not in dist:
                dist[nxt] = dist[(a, b)] + 1
                queue.append(nxt)
    return None


def small_cases(limit: int = 8):
    """Every (x, y, z) with capacities up to ``limit`` and z up to max(x, y) + 1."""
    for x in range(1, limit + 1):
        for y in range(1, limit + 1):
            for z in range(0, max(x, y) + 2):
                yield x, y, z


def expected_feasible(x: int, y: int, z: int) -> bool:
    return z <= max(x, y) and z % gcd(x, y) == 0
