from __future__ import annotations

from typing import Dict

from esper import World

from tilecascade.components.group_tier import GroupTier, Tier
from tilecascade.components.thresholds import GroupSizeThresholds
from tilecascade.systems.board_ops import get_thresholds
from tilecascade.systems.groups import classify_all_groups


def tier_for_size(size: int, thresholds: GroupSizeThresholds) -> Tier:
    """Map a group size to its icon tier.

    Tier C needs strictly more than ``c`` tiles; B and A start at ``b`` and ``a``.
    """
    if size >= thresholds.c + 1:
        return Tier.C
    if size >= thresholds.b:
        return Tier.B
    if size >= thresholds.a:
        return Tier.A
    return Tier.DEFAULT


def update_group_tiers(world: World) -> Dict[int, Tier]:
    """Classify every group and store size and tier on each tile's GroupTier."""
    thresholds = get_thresholds(world)
    tiers: Dict[int, Tier] = {}
    for tile, size in classify_all_groups(world).items():
        tier = tier_for_size(size, thresholds)
        try:
            group_tier = world.component_for_entity(tile, GroupTier)
        except KeyError:
            world.add_component(tile, GroupTier(size=size, tier=tier))
        else:
            group_tier.size = size
            group_tier.tier = tier
        tiers[tile] = tier
    return tiers
