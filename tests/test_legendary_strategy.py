"""
전설 아이템(Sulfuras) 전략 단위 테스트

대상: src/domain/inventory/strategies/legendary.py
"""

import pytest

from src.domain.inventory.strategies import LegendaryItemStrategy
from src.domain.models import Item
from src.settings.constants import LEGENDARY_QUALITY, SULFURAS


class TestLegendaryItemStrategy:
    """불변 전략 테스트"""

    @pytest.mark.unit
    def test_out_of_range_quality_kept(self):
        """("Sulfuras...", 0, 80) → 변화 없음 (80은 clamp되지 않음)"""
        item = Item(SULFURAS, 0, LEGENDARY_QUALITY)
        LegendaryItemStrategy().apply(item)
        assert item.as_tuple() == (SULFURAS, 0, 80)

    @pytest.mark.unit
    @pytest.mark.parametrize("sell_in,quality", [
        (0, 80),
        (-1, 80),
        (10, 0),     # 비정상 값이어도 그대로
        (-50, 999),
    ])
    def test_never_changes_after_many_ticks(self, sell_in, quality):
        strategy = LegendaryItemStrategy()
        item = Item(SULFURAS, sell_in, quality)
        for _ in range(100):
            strategy.apply(item)
        assert (item.sell_in, item.quality) == (sell_in, quality)
