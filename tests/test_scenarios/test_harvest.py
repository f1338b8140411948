"""Scenario tests for chopping trees."""

from riverwood.config import WOOD_PER_TREE
from riverwood.simulation.commands import Button
from riverwood.simulation.player import Direction
from tests.scenario import Scenario


class TestHarvest:
    def test_chop_all_four_neighbors(self):
        s = Scenario("""
            .T.
            T@T
            .T.
        """)
        s.press(Button.HARVEST)
        s.assert_wood(4 * WOOD_PER_TREE)
        for tile in [(1, 0), (0, 1), (2, 1), (1, 2)]:
            s.assert_tree_active(tile, False)

    def test_second_chop_gives_nothing(self):
        s = Scenario("@T")
        s.press(Button.HARVEST)
        s.press(Button.HARVEST)
        s.assert_wood(WOOD_PER_TREE)

    def test_diagonal_tree_out_of_reach(self):
        s = Scenario("""
            T.
            .@
        """)
        s.press(Button.HARVEST)
        s.assert_wood(0)
        s.assert_tree_active((0, 0))

    def test_holding_harvest_chops_once(self):
        s = Scenario("@T")
        s.hold(Button.HARVEST, ticks=20)
        s.assert_wood(WOOD_PER_TREE)

    def test_walk_up_and_chop(self):
        s = Scenario("""
            @....
            ....T
        """)
        s.walk(Direction.RIGHT, 3)
        s.walk(Direction.DOWN)
        s.press(Button.HARVEST)
        s.assert_at((3, 1))
        s.assert_wood(WOOD_PER_TREE)
        s.assert_tree_active((4, 1), False)
