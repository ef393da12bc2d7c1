"""Exploration Context - Breadth-first search over jug states.

Core abstractions:
- Solver / solve: Orchestrates the gated search
- QueueFrontier: States discovered but not yet expanded
- StateGraph: Visited states with parent pointers for path rebuilding
"""

from jugsolver.exploration.frontier import QueueFrontier
from jugsolver.exploration.graph import Discovery, StateGraph
from jugsolver.exploration.solver import EXHAUSTED_MESSAGE, Solver, failure_message, solve

__all__ = [
    "Solver",
    "solve",
    "failure_message",
    "EXHAUSTED_MESSAGE",
    "QueueFrontier",
    "StateGraph",
    "Discovery",
]
