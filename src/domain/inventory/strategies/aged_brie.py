"""숙성(품질 상승) 카테고리 전략"""
from src.domain.inventory.base_strategy import ItemUpdateStrategy
from src.domain.models import Item
from src.settings.constants import AGED_BRIE, EVENT_HORIZON, SELL_IN_STEP


class AgedBrieStrategy(ItemUpdateStrategy):
    """숙성 상품(Aged Brie) 전략 -- 매일 +1, 기한 경과 후 +2, 상한 50"""

    item_names = (AGED_BRIE,)

    @property
    def name(self) -> str:
        return "aged_brie"

    def apply(self, item: Item) -> None:
        item.sell_in -= SELL_IN_STEP
        item.quality += 1
        if item.sell_in < EVENT_HORIZON:
            item.quality += 1
        self.clamp_max(item)
