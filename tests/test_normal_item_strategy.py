"""
일반(기본) 상품 전략 단위 테스트

대상: src/domain/inventory/strategies/normal.py
- 판매기한 내: 품질 -1
- 판매기한 경과 후: 품질 -2
- 품질 하한 0
"""

import pytest

from src.domain.inventory.strategies import NormalItemStrategy
from src.domain.models import Item


@pytest.fixture
def strategy():
    return NormalItemStrategy()


class TestNormalItemStrategy:
    """일반 상품 일일 갱신 테스트"""

    @pytest.mark.unit
    def test_degrades_by_one_before_sell_date(self, strategy):
        """("x", 10, 20) → ("x", 9, 19)"""
        item = Item("x", 10, 20)
        strategy.apply(item)
        assert item.as_tuple() == ("x", 9, 19)

    @pytest.mark.unit
    def test_degrades_twice_as_fast_once_expired(self, strategy):
        """("x", 0, 5) → ("x", -1, 3)"""
        item = Item("x", 0, 5)
        strategy.apply(item)
        assert item.as_tuple() == ("x", -1, 3)

    @pytest.mark.unit
    @pytest.mark.parametrize("sell_in,quality,expected", [
        (1, 5, (0, 4)),       # 마지막 판매일로 진입: 아직 -1
        (0, 5, (-1, 3)),      # 기한 경과: -2
        (-3, 10, (-4, 8)),    # 이미 경과: -2
    ])
    def test_event_horizon_boundary(self, strategy, sell_in, quality, expected):
        """sell_in 감소 후 음수일 때만 2배 감소"""
        item = Item("x", sell_in, quality)
        strategy.apply(item)
        assert (item.sell_in, item.quality) == expected

    @pytest.mark.unit
    @pytest.mark.parametrize("sell_in,quality", [
        (5, 0),
        (0, 1),
        (-1, 0),
        (-1, 1),
    ])
    def test_quality_never_negative(self, strategy, sell_in, quality):
        """품질은 0 미만으로 내려가지 않는다"""
        item = Item("x", sell_in, quality)
        strategy.apply(item)
        assert item.quality == 0

    @pytest.mark.unit
    def test_apply_returns_none(self, strategy):
        assert strategy.apply(Item("x", 1, 1)) is None

    @pytest.mark.unit
    def test_name_unchanged(self, strategy):
        item = Item("Elixir of the Mongoose", 5, 7)
        strategy.apply(item)
        assert item.name == "Elixir of the Mongoose"
