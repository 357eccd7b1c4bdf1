"""
공연 티켓(Backstage passes) 전략 단위 테스트

대상: src/domain/inventory/strategies/backstage_pass.py
- 단계 임계값은 감소 후 sell_in 기준 (10 미만 +2, 5 미만 +3)
- 공연 종료(sell_in < 0) 시 품질 0
- 상한 50
"""

import pytest

from src.domain.inventory.strategies import BackstagePassStrategy
from src.domain.models import Item
from src.settings.constants import BACKSTAGE_PASS


@pytest.fixture
def strategy():
    return BackstagePassStrategy()


def _tick(strategy, sell_in, quality):
    item = Item(BACKSTAGE_PASS, sell_in, quality)
    strategy.apply(item)
    return item.sell_in, item.quality


class TestBackstagePassTiers:
    """단계별 품질 상승 테스트"""

    @pytest.mark.unit
    def test_far_from_event(self, strategy):
        """(15, 20) → sell_in=14, quality=21"""
        assert _tick(strategy, 15, 20) == (14, 21)

    @pytest.mark.unit
    @pytest.mark.parametrize("sell_in,expected_gain", [
        (11, 1),   # 감소 후 10: 10 미만 아님
        (10, 2),   # 감소 후 9
        (9, 2),
        (6, 2),    # 감소 후 5: 5 미만 아님
        (5, 3),    # 감소 후 4
        (4, 3),
        (1, 3),    # 감소 후 0: 아직 공연 전
    ])
    def test_thresholds_use_decremented_sell_in(self, strategy, sell_in, expected_gain):
        """경계값: 임계값 비교는 감소 후 sell_in 기준"""
        new_sell_in, quality = _tick(strategy, sell_in, 20)
        assert new_sell_in == sell_in - 1
        assert quality == 20 + expected_gain

    @pytest.mark.unit
    @pytest.mark.parametrize("sell_in", [0, -1, -10])
    def test_quality_drops_to_zero_after_event(self, strategy, sell_in):
        """공연일 이후 품질 0"""
        assert _tick(strategy, sell_in, 20) == (sell_in - 1, 0)


class TestBackstagePassCap:
    """상한/0 처리 순서 테스트"""

    @pytest.mark.unit
    @pytest.mark.parametrize("sell_in,quality", [
        (15, 50),
        (10, 49),
        (5, 49),
        (5, 48),
        (1, 50),
    ])
    def test_quality_capped_at_50(self, strategy, sell_in, quality):
        assert _tick(strategy, sell_in, quality)[1] == 50

    @pytest.mark.unit
    def test_zero_overrides_increments_at_cap(self, strategy):
        """sell_in 0 → -1: 증가분(+3)보다 0 처리가 우선, clamp 후에도 0"""
        assert _tick(strategy, 0, 50) == (-1, 0)
        assert _tick(strategy, 0, 48) == (-1, 0)

    @pytest.mark.unit
    def test_full_countdown(self, strategy):
        """11일 전부터 공연 종료까지 일자별 품질"""
        item = Item(BACKSTAGE_PASS, 11, 10)
        qualities = []
        for _ in range(12):
            strategy.apply(item)
            qualities.append(item.quality)
        assert qualities == [11, 13, 15, 17, 19, 21, 24, 27, 30, 33, 36, 0]
        assert item.sell_in == -1
