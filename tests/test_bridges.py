"""
Tests for bridge detection.

Diagrams use the board layout of hexgame.display: ● Black, ○ White.
"""

import pytest

from hexgame.board import Board
from hexgame.bridges import (
    BRIDGE_PATTERNS, AttackedBridge, Bridge, find_attacked_bridges, find_bridges, make_bridge
)
from hexgame.coords import Coords
from hexgame.enums import Color, Edge
from hexgame.errors import OutOfBounds

CENTER = Coords(2, 2)


def board_with(size=5, black=(), white=()):
    board = Board(size)
    for coords in black:
        board.place_stone(coords, Color.BLACK)
    for coords in white:
        board.place_stone(coords, Color.WHITE)
    return board


def defended_cells(attacked):
    return [a.defend_at for a in attacked]


def test_six_bridge_patterns():
    partners = {partner for partner, _, _ in BRIDGE_PATTERNS}
    assert partners == {(-2, 1), (-1, 2), (1, 1), (2, -1), (1, -2), (-1, -1)}
    for (pr, pc), (ar, ac), (br, bc) in BRIDGE_PATTERNS:
        assert (ar + br, ac + bc) == (pr, pc)


class TestMakeBridge:
    def test_orders_stones_and_carriers(self):
        bridge = make_bridge(Coords(4, 1), Coords(2, 2), Coords(3, 2), Coords(3, 1))
        assert bridge == Bridge(Coords(2, 2), Coords(4, 1), Coords(3, 1), Coords(3, 2))

    def test_edge_goes_second(self):
        bridge = make_bridge(Edge.TOP, Coords(1, 2), Coords(0, 3), Coords(0, 2))
        assert bridge.stone_a == Coords(1, 2)
        assert bridge.stone_b is Edge.TOP
        assert bridge.is_edge_template

    def test_other_carrier(self):
        bridge = make_bridge(Coords(2, 2), Coords(4, 1), Coords(3, 1), Coords(3, 2))
        assert bridge.other_carrier(Coords(3, 1)) == Coords(3, 2)
        assert bridge.other_carrier(Coords(3, 2)) == Coords(3, 1)
        with pytest.raises(ValueError):
            bridge.other_carrier(Coords(0, 0))


class TestFindBridges:
    def test_empty_board(self):
        assert find_bridges(Board(5), Color.BLACK) == set()

    def test_simple_bridge(self):
        board = board_with(black=[Coords(2, 2), Coords(4, 1)])
        assert find_bridges(board, Color.BLACK) == {
            Bridge(Coords(2, 2), Coords(4, 1), Coords(3, 1), Coords(3, 2)),
        }
        assert find_bridges(board, Color.WHITE) == set()

    @pytest.mark.parametrize("offset", [(-2, 1), (-1, 2), (1, 1), (2, -1), (1, -2), (-1, -1)])
    def test_every_rotation(self, offset):
        partner = CENTER.offset(*offset)
        board = board_with(black=[CENTER, partner])
        bridges = find_bridges(board, Color.BLACK)
        assert len(bridges) == 1
        bridge = bridges.pop()
        assert {bridge.stone_a, bridge.stone_b} == {CENTER, partner}
        for carrier in bridge.carriers:
            assert carrier in board.get_neighbors(CENTER)
            assert carrier in board.get_neighbors(partner)

    def test_occupied_carrier_breaks_bridge(self):
        board = board_with(black=[Coords(2, 2), Coords(4, 1)], white=[Coords(3, 1)])
        assert find_bridges(board, Color.BLACK) == set()

    def test_own_stone_on_carrier_is_not_a_bridge(self):
        board = board_with(black=[Coords(2, 2), Coords(4, 1), Coords(3, 2)])
        assert find_bridges(board, Color.BLACK) == set()

    def test_stone_in_several_bridges(self):
        board = board_with(black=[CENTER, Coords(4, 1), Coords(0, 3), Coords(3, 3)])
        bridges = find_bridges(board, Color.BLACK)
        assert bridges == {
            Bridge(Coords(2, 2), Coords(4, 1), Coords(3, 1), Coords(3, 2)),
            Bridge(Coords(0, 3), Coords(2, 2), Coords(1, 2), Coords(1, 3)),
            Bridge(Coords(2, 2), Coords(3, 3), Coords(2, 3), Coords(3, 2)),
            Bridge(Coords(3, 3), Coords(4, 1), Coords(3, 2), Coords(4, 2)),
        }

    def test_no_edge_bridges_by_default(self):
        board = board_with(black=[Coords(1, 2)])
        assert find_bridges(board, Color.BLACK) == set()

    def test_edge_templates(self):
        board = board_with(black=[Coords(1, 2), Coords(3, 2)], white=[Coords(2, 0)])
        assert find_bridges(board, Color.BLACK, include_edges=True) == {
            Bridge(Coords(1, 2), Edge.TOP, Coords(0, 2), Coords(0, 3)),
            Bridge(Coords(3, 2), Edge.BOTTOM, Coords(4, 1), Coords(4, 2)),
        }
        assert find_bridges(board, Color.WHITE, include_edges=True) == set()

    def test_no_template_to_opponent_edge(self):
        board = board_with(black=[Coords(2, 1)])
        assert find_bridges(board, Color.BLACK, include_edges=True) == set()

    def test_white_edge_template(self):
        board = board_with(white=[Coords(2, 3)])
        assert find_bridges(board, Color.WHITE, include_edges=True) == {
            Bridge(Coords(2, 3), Edge.RIGHT, Coords(1, 4), Coords(2, 4)),
        }

    def test_mixed_records_compare_safely(self):
        board = board_with(black=[Coords(1, 2), Coords(3, 1)])
        bridges = find_bridges(board, Color.BLACK, include_edges=True)
        assert Bridge(Coords(1, 2), Coords(3, 1), Coords(2, 1), Coords(2, 2)) in bridges
        assert Bridge(Coords(1, 2), Edge.TOP, Coords(0, 2), Coords(0, 3)) in bridges


class TestFindAttackedBridges:
    def test_attack_reports_other_carrier(self):
        board = board_with(black=[Coords(2, 2), Coords(4, 1)])
        assert len(find_bridges(board, Color.BLACK)) == 1
        board.place_stone(Coords(3, 1), Color.WHITE)
        assert find_attacked_bridges(board, Coords(3, 1)) == [
            AttackedBridge(Bridge(Coords(2, 2), Coords(4, 1), Coords(3, 1), Coords(3, 2)), Coords(3, 2)),
        ]
        assert find_bridges(board, Color.BLACK) == set()

    def test_cell_without_stone(self):
        assert find_attacked_bridges(Board(5), CENTER) == []

    def test_stone_without_neighbors(self):
        board = board_with(white=[CENTER])
        assert find_attacked_bridges(board, CENTER) == []

    def test_simple_bridge_in_center(self):
        #  a  b  c  d  e
        # 1\.  .  .  .  .\1
        #  2\.  .  .  ●  .\2
        #   3\.  .  ○  .  .\3
        #    4\.  .  ●  .  .\4
        board = board_with(black=[Coords(1, 3), Coords(3, 2)], white=[CENTER])
        assert defended_cells(find_attacked_bridges(board, CENTER)) == [Coords(2, 3)]

    def test_bridge_with_preceding_stone(self):
        #  a  b  c  d  e
        # 1\.  .  .  .  .\1
        #  2\.  .  ●  .  .\2
        #   3\.  ●  ○  ●  .\3
        board = board_with(black=[Coords(2, 1), Coords(1, 2), Coords(2, 3)], white=[CENTER])
        assert defended_cells(find_attacked_bridges(board, CENTER)) == [Coords(1, 3)]

    def test_non_bridge_with_preceding_stone(self):
        #  a  b  c  d  e
        # 1\.  .  .  .  .\1
        #  2\.  .  ○  .  .\2
        #   3\.  ●  ○  ●  .\3
        board = board_with(black=[Coords(2, 1), Coords(2, 3)], white=[Coords(1, 2), CENTER])
        assert find_attacked_bridges(board, CENTER) == []

    def test_three_bridges(self):
        #  a  b  c  d  e
        # 1\.  .  .  .  .\1
        #  2\.  .  .  ●  .\2
        #   3\.  ●  ○  .  .\3
        #    4\.  .  ●  .  .\4
        board = board_with(black=[Coords(2, 1), Coords(1, 3), Coords(3, 2)], white=[CENTER])
        attacked = find_attacked_bridges(board, CENTER)
        assert defended_cells(attacked) == [Coords(2, 3), Coords(3, 1), Coords(1, 2)]
        assert attacked[0].bridge == Bridge(Coords(1, 3), Coords(3, 2), Coords(2, 2), Coords(2, 3))

    def test_bridge_wrapping_from_last_to_first_direction(self):
        #  a  b  c  d  e
        # 1\.  .  .  .  .\1
        #  2\.  .  ●  .  .\2
        #   3\.  .  ○  .  .\3
        #    4\.  ●  .  .  .\4
        board = board_with(black=[Coords(3, 1), Coords(1, 2)], white=[CENTER])
        assert defended_cells(find_attacked_bridges(board, CENTER)) == [Coords(2, 1)]

    def test_both_carriers_taken_is_not_reported(self):
        board = board_with(black=[Coords(2, 2), Coords(4, 1)], white=[Coords(3, 2), Coords(3, 1)])
        assert find_attacked_bridges(board, Coords(3, 1)) == []

    def test_black_attacks_white_bridge(self):
        board = board_with(white=[Coords(1, 1), Coords(2, 2)], black=[Coords(1, 2)])
        attacked = find_attacked_bridges(board, Coords(1, 2))
        assert attacked == [
            AttackedBridge(Bridge(Coords(1, 1), Coords(2, 2), Coords(1, 2), Coords(2, 1)), Coords(2, 1)),
        ]

    def test_own_stones_are_ignored(self):
        board = board_with(black=[Coords(2, 2), Coords(4, 1), Coords(3, 1)])
        assert find_attacked_bridges(board, Coords(3, 1)) == []

    def test_out_of_bounds(self):
        with pytest.raises(OutOfBounds):
            find_attacked_bridges(Board(5), Coords(5, 0))


class TestAttackedEdgeTemplates:
    def test_ignored_by_default(self):
        board = board_with(black=[Coords(1, 2)], white=[Coords(0, 2)])
        assert find_attacked_bridges(board, Coords(0, 2)) == []

    def test_bridge_to_own_edge(self):
        #  a  b  c  d  e
        # 1\.  .  ○  .  .\1
        #  2\.  .  ●  .  .\2
        board = board_with(black=[Coords(1, 2)], white=[Coords(0, 2)])
        assert find_attacked_bridges(board, Coords(0, 2), include_edges=True) == [
            AttackedBridge(Bridge(Coords(1, 2), Edge.TOP, Coords(0, 2), Coords(0, 3)), Coords(0, 3)),
        ]

    def test_bridge_in_obtuse_corner(self):
        #  a  b  c  d  e
        # 1\.  ○  .  .  .\1
        #  2\●  .  .  .  .\2
        board = board_with(black=[Coords(1, 0)], white=[Coords(0, 1)])
        assert find_attacked_bridges(board, Coords(0, 1)) == []
        assert defended_cells(find_attacked_bridges(board, Coords(0, 1), include_edges=True)) == [Coords(0, 0)]

    def test_bridge_next_to_obtuse_corner(self):
        #  a  b  c  d  e
        # 1\○  .  .  .  .\1
        #  2\●  .  .  .  .\2
        board = board_with(black=[Coords(1, 0)], white=[Coords(0, 0)])
        assert defended_cells(find_attacked_bridges(board, Coords(0, 0), include_edges=True)) == [Coords(0, 1)]

    def test_no_bridge_on_other_players_edge(self):
        #  a  b  c  d  e
        # 1\.  .  .  .  .\1
        #  2\.  .  .  .  .\2
        #   3\○  ●  .  .  .\3
        board = board_with(black=[Coords(2, 1)], white=[Coords(2, 0)])
        assert find_attacked_bridges(board, Coords(2, 0), include_edges=True) == []
