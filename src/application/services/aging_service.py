"""
InventoryAgingService -- 일일 재고 에이징 서비스 (엔진 진입점)

상품 목록을 1일(tick) 단위로 갱신합니다.
상품마다 레지스트리에서 전략을 찾아 apply()를 호출하며, 상품 간 의존성은 없습니다.
"""

from typing import List, Optional

from src.domain.inventory.strategy_registry import StrategyRegistry, create_default_registry
from src.domain.models import Item
from src.utils.logger import get_logger
from src.validation.item_validator import ItemValidator

logger = get_logger(__name__)

_default_registry: Optional[StrategyRegistry] = None


def get_default_registry() -> StrategyRegistry:
    """프로세스 공용 기본 레지스트리 (최초 호출 시 1회 생성)"""
    global _default_registry
    if _default_registry is None:
        _default_registry = create_default_registry()
    return _default_registry


class InventoryAgingService:
    """일일 재고 에이징 서비스

    Usage:
        service = InventoryAgingService()
        items = service.tick(items)   # 같은 리스트 객체, 각 Item이 in-place 변경됨
    """

    def __init__(
        self,
        registry: Optional[StrategyRegistry] = None,
        validator: Optional[ItemValidator] = None,
    ):
        """초기화

        Args:
            registry: 전략 레지스트리 (None이면 기본 레지스트리)
            validator: 상품 검증기 (None이면 ItemValidator())
        """
        self.registry = registry or get_default_registry()
        self.validator = validator or ItemValidator()

    def tick(self, items: List[Item]) -> List[Item]:
        """하루치 갱신

        호출자가 넘긴 Item들을 직접 변경하고 같은 리스트 객체를 그대로 반환합니다
        (복사본을 만들지 않음). 한 번 호출 = 하루이므로 같은 날에 두 번 호출하면 안 됩니다.

        Args:
            items: 갱신할 상품 목록 (빈 목록 허용, generator 등 비시퀀스는 거부)

        Returns:
            입력과 동일한 리스트 객체

        Raises:
            InvalidItemError: 잘못된 레코드가 하나라도 있으면 어떤 상품도 갱신하지 않고 거부
        """
        self.validator.ensure_valid(items)

        for item in items:
            strategy = self.registry.get_strategy(item.name)
            strategy.apply(item)

        logger.debug(f"tick 완료: {len(items)}개 상품 갱신")
        return items


class GildedRose:
    """상품 목록을 보관하고 update_quality()로 하루씩 갱신하는 래퍼

    Usage:
        shop = GildedRose([Item("Aged Brie", 2, 0)])
        shop.update_quality()
    """

    def __init__(self, items: Optional[List[Item]] = None, service: Optional[InventoryAgingService] = None):
        self.items = items if items is not None else []
        self.service = service or InventoryAgingService()

    def update_quality(self) -> List[Item]:
        """보관 중인 상품 목록에 하루치 갱신 적용 (self.items 반환)"""
        return self.service.tick(self.items)
