"""
ItemUpdateStrategy -- 카테고리별 일일 갱신 전략 인터페이스

상품명 if/elif 분기를 Strategy 패턴으로 대체합니다.
새 카테고리는 Strategy 클래스를 추가하고 레지스트리에 등록하기만 하면 되며,
기존 카테고리 로직은 수정하지 않습니다.
"""

from abc import ABC, abstractmethod
from typing import Tuple

from src.domain.models import Item
from src.settings.constants import MIN_QUALITY, MAX_QUALITY


class ItemUpdateStrategy(ABC):
    """카테고리별 일일 갱신 전략 추상 인터페이스

    Usage:
        strategy = registry.get_strategy(item.name)
        strategy.apply(item)   # item.sell_in / item.quality 직접 변경
    """

    # 이 전략이 담당하는 상품명 (레지스트리가 정확히 일치로 매핑, 대소문자 구분)
    item_names: Tuple[str, ...] = ()

    @property
    @abstractmethod
    def name(self) -> str:
        """전략 이름 (예: 'normal', 'aged_brie')"""

    @abstractmethod
    def apply(self, item: Item) -> None:
        """하루치 갱신 적용

        item의 sell_in / quality 두 필드만 변경하며 반환값은 없습니다.

        Args:
            item: 갱신할 상품 (in-place 변경)
        """

    @staticmethod
    def clamp_min(item: Item, floor: int = MIN_QUALITY) -> None:
        """품질 하한 적용"""
        if item.quality < floor:
            item.quality = floor

    @staticmethod
    def clamp_max(item: Item, ceiling: int = MAX_QUALITY) -> None:
        """품질 상한 적용"""
        if item.quality > ceiling:
            item.quality = ceiling
