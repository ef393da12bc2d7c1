"""Tests for solution replay and verification."""

from dataclasses import replace

from jugsolver import Outcome, Solution, Step, solve, verify_solution


class TestVerifySolution:
    def test_valid_solution(self):
        assert verify_solution(3, 5, 4, solve(3, 5, 4)) == []

    def test_trivial_solution(self):
        assert verify_solution(3, 5, 0, solve(3, 5, 0)) == []

    def test_not_possible(self):
        problems = verify_solution(2, 6, 5, solve(2, 6, 5))
        assert problems == ["solution is not marked possible"]

    def test_empty_steps(self):
        assert verify_solution(3, 5, 4, Solution(possible=True)) == ["solution has no steps"]

    def test_steps_without_operations_use_labels(self):
        solution = solve(2, 10, 4)
        stripped = [replace(step, operation=None) for step in solution.steps]
        assert verify_solution(2, 10, 4, Solution(possible=True, steps=stripped)) == []

    def test_wrong_state_detected(self):
        solution = solve(2, 10, 4)
        steps = list(solution.steps)
        steps[2] = replace(steps[2], x=1, y=1)
        problems = verify_solution(2, 10, 4, Solution(possible=True, steps=steps))
        assert any(p.startswith("step 2:") for p in problems)

    def test_out_of_bounds_detected(self):
        steps = [
            Step.initial(),
            Step(x=9, y=0, action="Fill jug X (9L capacity)", step_number=1),
        ]
        problems = verify_solution(3, 5, 9, Solution(possible=True, steps=steps))
        assert any("outside capacities" in p for p in problems)

    def test_unknown_action_detected(self):
        steps = [Step.initial(), Step(x=3, y=0, action="Drink jug X", step_number=1)]
        problems = verify_solution(3, 5, 3, Solution(possible=True, steps=steps))
        assert problems == ["step 1: unknown action 'Drink jug X'"]

    def test_misnumbered_step_detected(self):
        steps = [Step.initial(), Step(x=3, y=0, action="Fill jug X (3L capacity)", step_number=5)]
        problems = verify_solution(3, 5, 3, Solution(possible=True, steps=steps))
        assert problems == ["step 1: numbered 5"]

    def test_target_not_reached_detected(self):
        steps = [Step.initial(), Step(x=3, y=0, action="Fill jug X (3L capacity)", step_number=1)]
        problems = verify_solution(3, 5, 4, Solution(possible=True, steps=steps, outcome=Outcome.REACHABLE))
        assert problems == ["final state (3, 0) does not hold 4"]
