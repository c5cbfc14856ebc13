"""
Tests for domain/engine.py - the Snake simulation engine.
"""

import os
import random
import sys

import pytest

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain import (  # noqa: E402
    UP, DOWN, LEFT, RIGHT, DIRECTIONS,
    BOUNDED, TOROIDAL, WALL, SELF, OBSTACLE,
    Position, Snake, SnakeEngine, StepOutcome,
)


def make_engine(cols=10, rows=10, obstacles=0, boundary=BOUNDED, seed=7):
    return SnakeEngine(
        cols=cols,
        rows=rows,
        obstacle_count=obstacles,
        boundary=boundary,
        rng=random.Random(seed),
    )


def place_snake(engine, positions, direction):
    """Put the engine in a hand-made position heading `direction`."""
    engine.body = Snake(positions)
    engine.direction = direction
    engine.next_direction = direction


class TestConstruction:
    """Tests for engine configuration."""

    def test_defaults(self):
        """A default engine is 24x24, toroidal, with one obstacle per 50 cells."""
        engine = SnakeEngine(rng=random.Random(1))
        assert engine.cols == 24
        assert engine.rows == 24
        assert engine.boundary == TOROIDAL
        assert engine.obstacle_count == 11
        assert len(engine.obstacles) == 11

    @pytest.mark.parametrize("cols,rows", [(0, 10), (10, 0), (-3, 5)])
    def test_non_positive_dimensions_fail_fast(self, cols, rows):
        """Non-positive board sizes are rejected at construction."""
        with pytest.raises(ValueError):
            SnakeEngine(cols=cols, rows=rows)

    def test_board_too_narrow_for_starting_snake(self):
        """The starting snake has to fit on the board."""
        with pytest.raises(ValueError):
            SnakeEngine(cols=3, rows=5)

    def test_unknown_boundary(self):
        """Only bounded and toroidal are accepted."""
        with pytest.raises(ValueError):
            SnakeEngine(boundary="spherical")

    def test_negative_obstacle_count_is_clamped(self):
        """A negative obstacle count means no obstacles."""
        engine = SnakeEngine(cols=10, rows=10, obstacle_count=-4)
        assert engine.obstacle_count == 0
        assert engine.obstacles == frozenset()


class TestReset:
    """Tests for SnakeEngine.reset()."""

    def test_canonical_start(self):
        """A fresh 10x10 board starts centred, length 3, heading right."""
        engine = make_engine()
        assert engine.snake == [(5, 5), (4, 5), (3, 5)]
        assert engine.direction == (1, 0)
        assert engine.next_direction == (1, 0)
        assert engine.score == 0
        assert engine.over is False
        assert engine.grow_amount == 0
        assert engine.ticks == 0
        assert engine.death_reason is None

    def test_food_is_placed_on_a_free_cell(self):
        """Reset always ends with food on the board."""
        engine = make_engine(obstacles=5)
        assert engine.food is not None
        assert engine.food not in engine.snake
        assert engine.food not in engine.obstacles

    def test_obstacles_avoid_the_snake(self):
        """Obstacles are distinct and never cover the starting snake."""
        engine = make_engine(obstacles=20)
        assert len(engine.obstacles) == 20
        assert not set(engine.snake) & engine.obstacles

    def test_obstacle_count_clamped_to_free_cells(self):
        """Asking for more obstacles than free cells fills every free cell."""
        engine = SnakeEngine(cols=4, rows=1, obstacle_count=10, boundary=TOROIDAL)
        assert engine.obstacles == {Position(3, 0)}

    def test_reset_restores_start_after_game_over(self):
        """Reset clears score, terminal flag and regenerates obstacles."""
        engine = make_engine(obstacles=3)
        engine.food = Position(6, 5)
        engine.obstacles = frozenset()
        engine.step()
        place_snake(engine, [(0, 5), (1, 5), (2, 5)], LEFT)
        engine.step()
        assert engine.over is True

        engine.reset()
        assert engine.over is False
        assert engine.score == 0
        assert engine.snake == [(5, 5), (4, 5), (3, 5)]
        assert len(engine.obstacles) == 3
        assert engine.death_reason is None


class TestSetDirection:
    """Tests for direction buffering and reversal rejection."""

    @pytest.mark.parametrize("name", list(DIRECTIONS))
    def test_reversal_never_changes_next_direction(self, name):
        """For every heading, the exact opposite is ignored and the others are queued."""
        engine = make_engine()
        current = DIRECTIONS[name]
        engine.direction = current
        engine.next_direction = current

        opposite = Position(-current.x, -current.y)
        assert engine.set_direction(opposite) is False
        assert engine.next_direction == current

        for other in DIRECTIONS.values():
            if other in (current, opposite):
                continue
            engine.next_direction = current
            assert engine.set_direction(other) is True
            assert engine.next_direction == other

    def test_direction_only_applies_on_next_step(self):
        """The active direction is untouched until step() commits it."""
        engine = make_engine()
        engine.set_direction(UP)
        assert engine.direction == RIGHT
        assert engine.next_direction == UP

    def test_last_write_wins(self):
        """Of several accepted calls between ticks, only the last counts."""
        engine = make_engine()
        engine.food = Position(0, 0)
        engine.set_direction(UP)
        engine.set_direction(DOWN)
        engine.step()
        assert engine.direction == DOWN
        assert engine.head == (5, 6)

    def test_reversal_is_judged_against_active_direction(self):
        """A rejected reversal does not erase an earlier accepted intent."""
        engine = make_engine()
        engine.set_direction(UP)
        engine.set_direction(LEFT)
        assert engine.next_direction == UP

    def test_accepts_direction_names(self):
        """Names such as 'up' map to their vectors."""
        engine = make_engine()
        assert engine.set_direction("up") is True
        assert engine.next_direction == UP

    @pytest.mark.parametrize("bad", [(0, 0), (1, 1), (2, 0), "SIDEWAYS", (1, 0, 0), (1,), None, 5])
    def test_rejects_non_unit_vectors(self, bad):
        """Anything other than the four unit directions is caller misuse."""
        engine = make_engine()
        with pytest.raises(ValueError):
            engine.set_direction(bad)
        assert engine.next_direction is RIGHT

    def test_float_vector_is_stored_as_integer_constant(self):
        """An equal float vector queues the integer UP constant, keeping the grid integral."""
        engine = make_engine()
        engine.food = Position(0, 0)
        assert engine.set_direction((0.0, -1.0)) is True
        assert engine.next_direction is UP
        engine.step()
        assert engine.head == (5, 4)
        assert all(isinstance(c, int) for c in engine.head)
        engine.get_current_state().print_board()


class TestStep:
    """Tests for SnakeEngine.step()."""

    def test_plain_move_keeps_length(self):
        """One step without food moves the head and drops the tail."""
        engine = make_engine()
        engine.food = Position(0, 0)
        outcome = engine.step()
        assert outcome == StepOutcome(ate=False, died=False)
        assert engine.snake == [(6, 5), (5, 5), (4, 5)]
        assert engine.ticks == 1

    def test_eating_grows_and_scores(self):
        """Food on the next cell: ate, score 1, length 4, growth token consumed."""
        engine = make_engine()
        engine.food = Position(6, 5)
        outcome = engine.step()
        assert outcome.ate is True
        assert outcome.died is False
        assert engine.score == 1
        assert len(engine.snake) == 4
        assert engine.snake[-1] == (3, 5)
        assert engine.grow_amount == 0
        assert engine.food is not None
        assert engine.food not in engine.snake

    def test_growth_invariant_over_many_ticks(self):
        """Length grows by one exactly on ate ticks and is kept otherwise."""
        engine = make_engine(cols=12, rows=12, boundary=TOROIDAL, seed=3)
        moves = [UP, LEFT, DOWN, RIGHT]
        for i in range(200):
            if engine.over:
                break
            engine.set_direction(moves[(i // 5) % 4])
            before_len = len(engine.snake)
            before_score = engine.score
            outcome = engine.step()
            if outcome.died:
                break
            if outcome.ate:
                assert len(engine.snake) == before_len + 1
                assert engine.score == before_score + 1
            else:
                assert len(engine.snake) == before_len
                assert engine.score == before_score

    def test_toroidal_wrap_right_edge(self):
        """Head at (23, y) heading right re-enters at (0, y)."""
        engine = make_engine(cols=24, rows=24, boundary=TOROIDAL)
        place_snake(engine, [(23, 7), (22, 7), (21, 7)], RIGHT)
        engine.food = Position(10, 10)
        outcome = engine.step()
        assert outcome.died is False
        assert engine.head == (0, 7)
        assert engine.over is False

    def test_toroidal_wrap_negative_coordinates(self):
        """Floored modulo keeps negative coordinates in range."""
        engine = make_engine(cols=24, rows=24, boundary=TOROIDAL)
        place_snake(engine, [(4, 0), (4, 1), (4, 2)], UP)
        engine.food = Position(10, 10)
        engine.step()
        assert engine.head == (4, 23)

    def test_bounded_wall_death(self):
        """Head at (0, y) heading left hits the wall without moving."""
        engine = make_engine(boundary=BOUNDED)
        place_snake(engine, [(0, 5), (1, 5), (2, 5)], LEFT)
        before = engine.snake
        outcome = engine.step()
        assert outcome.died is True
        assert outcome.reason == WALL
        assert engine.over is True
        assert engine.snake == before
        assert engine.death_reason == WALL

    def test_obstacle_death(self):
        """Running into an obstacle ends the round without moving."""
        engine = make_engine()
        engine.obstacles = frozenset({Position(6, 5)})
        engine.food = Position(0, 0)
        before = engine.snake
        outcome = engine.step()
        assert outcome.to_dict() == {"ate": False, "died": True, "reason": OBSTACLE}
        assert engine.snake == before

    def test_self_collision(self):
        """Turning into the body ends the round without moving."""
        engine = make_engine()
        place_snake(engine, [(5, 5), (5, 6), (4, 6), (4, 5), (4, 4)], UP)
        engine.food = Position(0, 0)
        engine.set_direction(LEFT)
        before = engine.snake
        outcome = engine.step()
        assert outcome.reason == SELF
        assert engine.snake == before

    def test_tail_cell_counts_as_occupied(self):
        """Moving onto the current tail is a self collision even though the tail would move."""
        engine = make_engine()
        place_snake(engine, [(5, 5), (5, 6), (4, 6), (4, 5)], UP)
        engine.food = Position(0, 0)
        engine.set_direction(LEFT)
        outcome = engine.step()
        assert outcome.died is True
        assert outcome.reason == SELF

    def test_terminal_step_is_idempotent(self):
        """After game over, step() reports died and changes nothing."""
        engine = make_engine()
        place_snake(engine, [(0, 5), (1, 5), (2, 5)], LEFT)
        engine.step()
        snake, score, food = engine.snake, engine.score, engine.food

        for _ in range(3):
            outcome = engine.step()
            assert outcome.died is True
            assert outcome.ate is False
            assert engine.snake == snake
            assert engine.score == score
            assert engine.food == food

    def test_set_direction_after_game_over_is_harmless(self):
        """Input after the round ended does not raise or revive the snake."""
        engine = make_engine()
        place_snake(engine, [(0, 5), (1, 5), (2, 5)], LEFT)
        engine.step()
        engine.set_direction(UP)
        assert engine.step().died is True
        assert engine.over is True


class TestFoodPlacement:
    """Tests for place_food() and the full-board case."""

    def test_food_never_on_snake_or_obstacle(self):
        """Repeated placements only ever land on free cells."""
        engine = make_engine(obstacles=30, seed=11)
        blocked = set(engine.snake) | engine.obstacles
        for _ in range(200):
            food = engine.place_food()
            assert food is not None
            assert food not in blocked

    def test_full_board_leaves_no_food(self):
        """When every cell is taken, food is None and the round keeps running."""
        engine = SnakeEngine(cols=4, rows=1, obstacle_count=1, boundary=TOROIDAL)
        assert engine.food is None
        assert engine.won is True
        assert engine.over is False

    def test_eating_the_last_free_cell_fills_the_board(self):
        """Growing into the last cell clears the board."""
        engine = SnakeEngine(cols=4, rows=1, obstacle_count=0, boundary=TOROIDAL)
        assert engine.food == (3, 0)
        outcome = engine.step()
        assert outcome.ate is True
        assert engine.food is None
        assert len(engine.snake) == 4
        assert engine.won is True

    def test_seeded_engines_agree(self):
        """The same seed gives the same obstacles and food."""
        a = make_engine(obstacles=6, seed=42)
        b = make_engine(obstacles=6, seed=42)
        assert a.obstacles == b.obstacles
        assert a.food == b.food


class TestSnapshot:
    """Tests for get_current_state()."""

    def test_snapshot_reflects_engine(self):
        """The snapshot carries the renderer-facing fields."""
        engine = make_engine(obstacles=2)
        state = engine.get_current_state()
        assert state.cols == 10
        assert state.rows == 10
        assert state.snake == engine.snake
        assert state.food == engine.food
        assert state.obstacles == engine.obstacles
        assert state.score == 0
        assert state.over is False
        assert state.boundary == BOUNDED

    def test_snapshot_is_detached(self):
        """Mutating the snapshot's snake list leaves the engine alone."""
        engine = make_engine()
        state = engine.get_current_state()
        state.snake.append((0, 0))
        assert len(engine.snake) == 3
