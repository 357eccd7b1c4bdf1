"""일반(기본) 카테고리 전략"""
from src.domain.inventory.base_strategy import ItemUpdateStrategy
from src.domain.models import Item
from src.settings.constants import EVENT_HORIZON, SELL_IN_STEP


class NormalItemStrategy(ItemUpdateStrategy):
    """일반 상품 전략 -- 전용 전략 없는 모든 상품의 폴백

    매일 품질 1 감소, 판매기한 경과 후에는 2배(2) 감소, 하한 0.
    담당 상품명이 없으므로 register가 아닌 set_default로 레지스트리에 설정합니다.
    """

    @property
    def name(self) -> str:
        return "normal"

    def apply(self, item: Item) -> None:
        item.sell_in -= SELL_IN_STEP
        item.quality -= 1
        if item.sell_in < EVENT_HORIZON:
            item.quality -= 1
        self.clamp_min(item)
