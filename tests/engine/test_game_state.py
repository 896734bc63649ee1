import unittest

import numpy as np

from ur_engine.state import GameState, evolve, initial
from ur_engine.types import CreateToken, Game, Move, MoveToken, Position, Seat


class TestGameStateEvolve(unittest.TestCase):
    def setUp(self):
        self.game = Game(player_1="alice", player_2="bob", first_mover="either")

    def test_initial_state_is_empty(self):
        state = initial()
        self.assertEqual(state.moves, ())
        self.assertEqual(state.p1_tokens, frozenset())
        self.assertEqual(state.p2_tokens, frozenset())
        self.assertEqual(state.p1_home, 0)
        self.assertEqual(state.p2_home, 0)
        self.assertEqual(state, GameState.initial())

    def test_create_token_enters_from_own_entry(self):
        state = evolve(initial(), self.game, Move("alice", CreateToken(distance=1)))
        self.assertEqual(state.p1_tokens, frozenset({Position(3, 0)}))
        self.assertEqual(state.p1_home, 0)
        self.assertEqual(len(state.moves), 1)

        state = evolve(state, self.game, Move("bob", CreateToken(distance=3)))
        self.assertEqual(state.p2_tokens, frozenset({Position(1, 2)}))

    def test_move_token_replaces_origin(self):
        start = GameState(p2_tokens=frozenset({Position(2, 1), Position(5, 1)}))
        state = start.evolve(self.game, Move("bob", MoveToken(x=2, y=1, distance=2)))
        self.assertEqual(state.p2_tokens, frozenset({Position(4, 1), Position(5, 1)}))
        self.assertEqual(state.p1_tokens, frozenset())

    def test_homing_token_leaves_board(self):
        start = GameState(p1_tokens=frozenset({Position(7, 1)}), p1_home=2)
        state = evolve(start, self.game, Move("alice", MoveToken(x=7, y=1, distance=3)))
        self.assertEqual(state.p1_tokens, frozenset())
        self.assertEqual(state.p1_home, 3)
        self.assertEqual(state.p2_home, 0)

    def test_player_two_homes_through_own_exit(self):
        start = GameState(p2_tokens=frozenset({Position(6, 1)}))
        state = evolve(start, self.game, Move("bob", MoveToken(x=6, y=1, distance=4)))
        self.assertEqual(state.p2_home, 1)
        self.assertEqual(state.p2_tokens, frozenset())

    def test_evolve_does_not_mutate_input(self):
        start = GameState(p1_tokens=frozenset({Position(1, 1)}))
        evolve(start, self.game, Move("alice", MoveToken(x=1, y=1, distance=2)))
        self.assertEqual(start.p1_tokens, frozenset({Position(1, 1)}))
        self.assertEqual(start.moves, ())

    def test_moves_are_appended_in_order(self):
        first = Move("alice", CreateToken(distance=2))
        second = Move("bob", CreateToken(distance=2))
        state = evolve(evolve(initial(), self.game, first), self.game, second)
        self.assertEqual(state.moves, (first, second))
        self.assertIs(state.last_move(), second)

    def test_unknown_author_raises(self):
        with self.assertRaises(ValueError):
            evolve(initial(), self.game, Move("carol", CreateToken(distance=1)))


class TestGameStateQueries(unittest.TestCase):
    def setUp(self):
        self.state = GameState(
            p1_tokens=frozenset({Position(2, 0), Position(3, 1)}),
            p1_home=1,
            p2_tokens=frozenset({Position(3, 1), Position(6, 2)}),
            p2_home=4,
        )

    def test_per_seat_accessors(self):
        self.assertEqual(self.state.tokens_for(Seat.TWO), self.state.p2_tokens)
        self.assertEqual(self.state.home_for(Seat.ONE), 1)
        self.assertEqual(self.state.waiting_for(Seat.ONE), 4)
        self.assertEqual(self.state.waiting_for(Seat.TWO), 1)

    def test_occupant(self):
        self.assertEqual(self.state.occupant(Position(2, 0)), Seat.ONE)
        self.assertEqual(self.state.occupant(Position(6, 2)), Seat.TWO)
        self.assertIsNone(self.state.occupant(Position(0, 1)))

    def test_grid(self):
        grid = self.state.to_grid()
        self.assertEqual(grid.shape, (3, 8))
        self.assertEqual(grid.dtype, np.int8)
        self.assertEqual(grid[0, 2], 1)
        self.assertEqual(grid[1, 3], 3)
        self.assertEqual(grid[2, 6], 2)
        self.assertEqual(grid[1, 0], 0)
        # entry and home cells are not part of the board
        self.assertEqual(grid[0, 4], -1)
        self.assertEqual(grid[2, 5], -1)

    def test_render(self):
        lines = self.state.render().splitlines()
        self.assertEqual(len(lines), 5)
        self.assertEqual(lines[0], "* . 1 .     * .")
        self.assertEqual(lines[1], ". . . X . . . .")
        self.assertEqual(lines[2], "* . . .     2 .")
        self.assertEqual(lines[3], "P1 home: 1, waiting: 4")
        self.assertEqual(lines[4], "P2 home: 4, waiting: 1")


if __name__ == "__main__":
    unittest.main()
