"""
StrategyRegistry -- 상품명에 따라 적절한 ItemUpdateStrategy를 반환

상품명 정확 일치(대소문자 구분)로만 조회하며, 패턴/접두어 매칭은 하지 않습니다.
일치하는 전략이 없으면 기본 전략(일반 상품)을 반환합니다.
"""

from typing import Dict, List, Optional

from src.domain.inventory.base_strategy import ItemUpdateStrategy
from src.utils.logger import get_logger

logger = get_logger(__name__)


class StrategyRegistry:
    """카테고리 전략 레지스트리

    생성 시점에 전략을 모두 등록한 뒤 freeze() 하면 이후에는 읽기 전용입니다.
    읽기 전용 레지스트리는 서로 다른 상품 목록을 다루는 호출자 간에 공유해도 안전합니다.

    Usage:
        registry = create_default_registry()
        strategy = registry.get_strategy("Aged Brie")   # → AgedBrieStrategy
        strategy = registry.get_strategy("Elixir")      # → NormalItemStrategy
    """

    def __init__(self):
        self._by_item_name: Dict[str, ItemUpdateStrategy] = {}
        self._strategies: List[ItemUpdateStrategy] = []
        self._default: Optional[ItemUpdateStrategy] = None
        self._frozen = False

    @property
    def frozen(self) -> bool:
        return self._frozen

    def _check_mutable(self) -> None:
        if self._frozen:
            raise RuntimeError("레지스트리가 고정(freeze)되어 전략을 변경할 수 없습니다")

    def register(self, strategy: ItemUpdateStrategy) -> None:
        """전략 등록 (strategy.item_names의 각 상품명에 매핑)

        Raises:
            ValueError: 상품명 없는 전략이거나 이미 다른 전략이 등록된 상품명
            RuntimeError: freeze() 이후 호출
        """
        self._check_mutable()
        if not strategy.item_names:
            raise ValueError(f"전략 '{strategy.name}'에 담당 상품명이 없습니다")

        for item_name in strategy.item_names:
            existing = self._by_item_name.get(item_name)
            if existing is not None:
                raise ValueError(
                    f"상품명 '{item_name}'에 이미 '{existing.name}' 전략이 등록되어 있습니다"
                )

        for item_name in strategy.item_names:
            self._by_item_name[item_name] = strategy
        self._strategies.append(strategy)

    def set_default(self, strategy: ItemUpdateStrategy) -> None:
        """기본 전략 설정"""
        self._check_mutable()
        self._default = strategy

    def freeze(self) -> "StrategyRegistry":
        """이후 등록/변경 금지"""
        self._frozen = True
        return self

    def get_strategy(self, item_name: str) -> ItemUpdateStrategy:
        """상품명에 매칭되는 전략 반환

        Args:
            item_name: 상품명 (정확히 일치)

        Returns:
            매칭되는 ItemUpdateStrategy (없으면 기본 전략)

        Raises:
            ValueError: 매칭 전략도 기본 전략도 없을 때
        """
        strategy = self._by_item_name.get(item_name)
        if strategy is not None:
            return strategy

        if self._default is not None:
            return self._default

        raise ValueError(f"상품명 '{item_name}'에 매칭되는 전략이 없습니다")

    def list_strategies(self) -> List[str]:
        """등록된 전략 이름 목록"""
        names = [s.name for s in self._strategies]
        if self._default:
            names.append(f"{self._default.name} (default)")
        return names

    def registered_item_names(self) -> List[str]:
        """전용 전략이 등록된 상품명 목록 (등록 순서)"""
        return list(self._by_item_name)


def create_default_registry() -> StrategyRegistry:
    """기본 레지스트리 생성 (모든 카테고리 전략 등록 후 고정)

    특수 카테고리 3종을 등록하고 NormalItemStrategy를 폴백으로 설정합니다.

    Returns:
        모든 전략이 등록되고 freeze된 StrategyRegistry
    """
    from src.domain.inventory.strategies import (
        AgedBrieStrategy,
        BackstagePassStrategy,
        LegendaryItemStrategy,
        NormalItemStrategy,
    )

    registry = StrategyRegistry()

    registry.register(AgedBrieStrategy())
    registry.register(LegendaryItemStrategy())
    registry.register(BackstagePassStrategy())

    # 폴백 (미등록 상품명 전체)
    registry.set_default(NormalItemStrategy())
    registry.freeze()

    logger.info(f"카테고리 전략 레지스트리 생성: {len(registry._strategies)}개 등록")
    return registry
