from tilecascade.components.group_tier import GroupTier, Tier
from tilecascade.components.thresholds import GroupSizeThresholds
from tilecascade.systems.tiers import tier_for_size, update_group_tiers
from tests.helpers import build_board, set_board_colors


def test_tier_boundaries():
    thresholds = GroupSizeThresholds(2, 3, 5)
    assert tier_for_size(1, thresholds) == Tier.DEFAULT
    assert tier_for_size(2, thresholds) == Tier.A
    assert tier_for_size(3, thresholds) == Tier.B
    assert tier_for_size(4, thresholds) == Tier.B
    assert tier_for_size(5, thresholds) == Tier.B
    assert tier_for_size(6, thresholds) == Tier.C
    assert int(tier_for_size(6, thresholds)) == 3


def test_equal_thresholds_collapse_tiers():
    thresholds = GroupSizeThresholds(4, 4, 4)
    assert tier_for_size(3, thresholds) == Tier.DEFAULT
    assert tier_for_size(4, thresholds) == Tier.B
    assert tier_for_size(5, thresholds) == Tier.C


def test_update_group_tiers_writes_components():
    _, world, system = build_board(3, 3, thresholds=(2, 3, 5))
    set_board_colors(system, [
        [0, 0, 1],
        [2, 0, 3],
        [2, 2, 2],
    ])
    tiers = update_group_tiers(world)
    board = system.board
    assert tiers[board.get(0, 0)] == Tier.B
    assert tiers[board.get(0, 2)] == Tier.DEFAULT
    assert tiers[board.get(2, 2)] == Tier.B
    group_tier = world.component_for_entity(board.get(2, 0), GroupTier)
    assert group_tier.size == 4 and group_tier.tier == Tier.B
    assert system.tier_at(1, 2) == Tier.DEFAULT
    assert system.tier_at(-1, 0) is None


def test_thresholds_are_per_board():
    _, _, low = build_board(2, 2, colors=1, thresholds=(1, 1, 1))
    _, _, high = build_board(2, 2, colors=1, thresholds=(5, 6, 7))
    assert set(low.tiers().values()) == {Tier.C}
    assert set(high.tiers().values()) == {Tier.DEFAULT}
