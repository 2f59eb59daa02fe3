"""Shared pytest fixtures: small site graphs used across the suite."""

from __future__ import annotations

import pytest

from relnet.graph.site_graph import build_graph

SITES = ["KTM", "JA", "JB", "PH", "BS"]


@pytest.fixture
def relief_network():
    # Five sites, roads in both directions except JB -> JA (one-way).
    #
    #   edge       probability  capacity
    #   KTM<->JA   0.90         10
    #   KTM<->JB   0.80         15
    #   JA <->PH   0.95          8
    #   JA <->BS   0.70          5
    #   JB <->BS   0.90         12
    #   PH <->BS   0.85          6
    #   JB -> JA   0.60          4
    return build_graph(
        SITES,
        reliability_edges=[
            ("KTM", "JA", 0.90),
            ("KTM", "JB", 0.80),
            ("JA", "KTM", 0.90),
            ("JA", "PH", 0.95),
            ("JA", "BS", 0.70),
            ("JB", "KTM", 0.80),
            ("JB", "JA", 0.60),
            ("JB", "BS", 0.90),
            ("PH", "JA", 0.95),
            ("PH", "BS", 0.85),
            ("BS", "JA", 0.70),
            ("BS", "JB", 0.90),
            ("BS", "PH", 0.85),
        ],
        capacity_edges=[
            ("KTM", "JA", 10),
            ("KTM", "JB", 15),
            ("JA", "KTM", 10),
            ("JA", "PH", 8),
            ("JA", "BS", 5),
            ("JB", "KTM", 15),
            ("JB", "JA", 4),
            ("JB", "BS", 12),
            ("PH", "JA", 8),
            ("PH", "BS", 6),
            ("BS", "JA", 5),
            ("BS", "JB", 12),
            ("BS", "PH", 6),
        ],
    )


@pytest.fixture
def scenario_graph():
    # Reliability:
    #        0.90        0.95
    #   KTM ─────► JA ─────► PH
    #    │          │
    #    │0.80      │0.70
    #    ▼   0.90   ▼
    #    JB ─────► BS
    #
    # Capacity:
    #        [10]        [8]
    #   KTM ─────► JA ─────► PH
    #    │          │         │
    #    │[15]      │[5]      │[6]
    #    ▼   [12]   ▼         │
    #    JB ─────► BS ◄───────┘
    return build_graph(
        SITES,
        reliability_edges=[
            ("KTM", "JA", 0.90),
            ("JA", "PH", 0.95),
            ("KTM", "JB", 0.80),
            ("JB", "BS", 0.90),
            ("JA", "BS", 0.70),
        ],
        capacity_edges=[
            ("KTM", "JA", 10),
            ("KTM", "JB", 15),
            ("JA", "PH", 8),
            ("JA", "BS", 5),
            ("JB", "BS", 12),
            ("PH", "BS", 6),
        ],
    )


@pytest.fixture
def isolated_sink():
    # X has outgoing edges only; nothing leads into it.
    #
    #   A ──► B ──► C
    #   ▲
    #   X
    return build_graph(
        ["A", "B", "C", "X"],
        reliability_edges=[("A", "B", 0.5), ("B", "C", 0.5), ("X", "A", 0.9)],
        capacity_edges=[("A", "B", 3), ("B", "C", 2), ("X", "A", 7)],
    )


@pytest.fixture
def line1():
    # Capacity:
    #     [5]      [1]      [7]
    #  A ─────► B ─────► C ─────► D
    return build_graph(
        ["A", "B", "C", "D"],
        reliability_edges=[("A", "B", 1.0), ("B", "C", 0.5), ("C", "D", 0.25)],
        capacity_edges=[("A", "B", 5), ("B", "C", 1), ("C", "D", 7)],
    )


@pytest.fixture
def cancellation_graph():
    # All capacities are 1.
    #
    #   S ──► A ──► B ──► T
    #   │     │     ▲     ▲
    #   ▼     ▼     │     │
    #   C ────┼─────┘     │
    #         ▼           │
    #         D ──► E ────┘
    #
    # BFS first takes S-A-B-T (three hops). The only remaining route,
    # S-C-B-A-D-E-T, needs the back edge B -> A created by that push.
    return build_graph(
        ["S", "A", "B", "C", "D", "E", "T"],
        capacity_edges=[
            ("S", "A", 1),
            ("A", "B", 1),
            ("B", "T", 1),
            ("S", "C", 1),
            ("C", "B", 1),
            ("A", "D", 1),
            ("D", "E", 1),
            ("E", "T", 1),
        ],
    )
