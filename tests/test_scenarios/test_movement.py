"""Scenario tests for walking and facing."""

from riverwood.simulation.commands import Button, InputFrame
from riverwood.simulation.player import Direction
from tests.scenario import Scenario


class TestWalking:
    def test_walk_on_open_land(self):
        s = Scenario()
        s.walk(Direction.RIGHT, 3)
        s.walk(Direction.DOWN, 2)
        s.assert_at((3, 2))
        s.assert_facing(Direction.DOWN)

    def test_holding_moves_once(self):
        s = Scenario()
        s.hold(Button.RIGHT, ticks=30)
        s.assert_at((1, 0))
        s.assert_facing(Direction.RIGHT)

    def test_face_turns_without_stepping(self):
        s = Scenario()
        s.place_player((5, 5))
        s.face(Direction.LEFT)
        s.assert_at((5, 5))
        s.assert_facing(Direction.LEFT)

    def test_first_direction_wins(self):
        s = Scenario()
        s.place_player((5, 5))
        s.step(InputFrame.press(Button.RIGHT, Button.UP))
        s.assert_at((5, 4))
        s.assert_facing(Direction.UP)


class TestBlocking:
    def test_water_blocks(self):
        s = Scenario("@~.")
        s.walk(Direction.RIGHT)
        s.assert_at((0, 0))
        s.assert_facing(Direction.RIGHT)

    def test_bridge_is_walkable(self):
        s = Scenario("@=.")
        s.walk(Direction.RIGHT, 2)
        s.assert_at((2, 0))

    def test_active_tree_blocks(self):
        s = Scenario("@T.")
        s.walk(Direction.RIGHT)
        s.assert_at((0, 0))

    def test_chopped_tree_is_passable(self):
        s = Scenario("@T.")
        s.press(Button.HARVEST)
        s.walk(Direction.RIGHT, 2)
        s.assert_at((2, 0))


class TestMapEdges:
    def test_top_left_corner(self):
        s = Scenario()
        s.walk(Direction.UP)
        s.assert_at((0, 0))
        s.assert_facing(Direction.UP)
        s.walk(Direction.LEFT)
        s.assert_at((0, 0))
        s.assert_facing(Direction.LEFT)

    def test_bottom_right_corner(self):
        s = Scenario()
        s.place_player((31, 31))
        s.walk(Direction.DOWN)
        s.walk(Direction.RIGHT)
        s.assert_at((31, 31))

    def test_walk_full_column(self):
        s = Scenario()
        s.walk(Direction.DOWN, 40)
        s.assert_at((0, 31))
