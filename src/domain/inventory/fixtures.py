"""기본 샘플 재고 (시뮬레이션/CLI 시작 재고)"""
from typing import List

from src.domain.models import Item
from src.settings.constants import AGED_BRIE, BACKSTAGE_PASS, LEGENDARY_QUALITY, SULFURAS


def default_inventory() -> List[Item]:
    """표준 9종 시작 재고를 새로 생성해 반환

    "Conjured" 상품은 별도 카테고리가 아니므로 일반 상품 규칙으로 갱신됩니다.
    """
    return [
        Item("+5 Dexterity Vest", 10, 20),
        Item(AGED_BRIE, 2, 0),
        Item("Elixir of the Mongoose", 5, 7),
        Item(SULFURAS, 0, LEGENDARY_QUALITY),
        Item(SULFURAS, -1, LEGENDARY_QUALITY),
        Item(BACKSTAGE_PASS, 15, 20),
        Item(BACKSTAGE_PASS, 10, 49),
        Item(BACKSTAGE_PASS, 5, 49),
        Item("Conjured Mana Cake", 3, 6),
    ]
