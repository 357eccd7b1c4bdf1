"""전설 아이템(불변) 카테고리 전략"""
from src.domain.inventory.base_strategy import ItemUpdateStrategy
from src.domain.models import Item
from src.settings.constants import SULFURAS


class LegendaryItemStrategy(ItemUpdateStrategy):
    """전설 아이템(Sulfuras) 전략 -- 판매하지 않으며 어떤 필드도 바뀌지 않음

    품질 80처럼 범위 밖 값도 그대로 유지됩니다 (clamp 없음).
    """

    item_names = (SULFURAS,)

    @property
    def name(self) -> str:
        return "legendary"

    def apply(self, item: Item) -> None:
        return None
