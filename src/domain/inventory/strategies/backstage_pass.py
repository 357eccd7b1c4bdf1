"""공연 티켓(단계 상승) 카테고리 전략"""
from src.domain.inventory.base_strategy import ItemUpdateStrategy
from src.domain.models import Item
from src.settings.constants import (
    BACKSTAGE_PASS,
    BACKSTAGE_TIER_1_DAYS,
    BACKSTAGE_TIER_2_DAYS,
    EVENT_HORIZON,
    MIN_QUALITY,
    SELL_IN_STEP,
)


class BackstagePassStrategy(ItemUpdateStrategy):
    """공연 티켓(Backstage passes) 전략

    판매기한 감소 후의 sell_in 기준으로 단계 적용:
        - 기본 +1
        - sell_in < 10 : +1 추가
        - sell_in < 5  : +1 추가 (누적 +3)
        - sell_in < 0  : 공연 종료, 품질 0
    마지막에 상한 50 적용 (증가 → 0 처리 → clamp 순서).
    """

    item_names = (BACKSTAGE_PASS,)

    @property
    def name(self) -> str:
        return "backstage_pass"

    def apply(self, item: Item) -> None:
        item.sell_in -= SELL_IN_STEP
        item.quality += 1

        if item.sell_in < BACKSTAGE_TIER_1_DAYS:
            item.quality += 1

        if item.sell_in < BACKSTAGE_TIER_2_DAYS:
            item.quality += 1

        if item.sell_in < EVENT_HORIZON:
            item.quality = MIN_QUALITY

        self.clamp_max(item)
