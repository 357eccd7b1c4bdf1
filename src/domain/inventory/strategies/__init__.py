"""
카테고리별 일일 갱신 전략 모듈

Usage:
    from src.domain.inventory.strategies import AgedBrieStrategy, NormalItemStrategy
    from src.domain.inventory.strategy_registry import create_default_registry

    registry = create_default_registry()
    strategy = registry.get_strategy("Aged Brie")  # → AgedBrieStrategy
"""

# --- 특수 카테고리 ---
from .aged_brie import AgedBrieStrategy
from .backstage_pass import BackstagePassStrategy
from .legendary import LegendaryItemStrategy

# --- 기본 (폴백) ---
from .normal import NormalItemStrategy

__all__ = [
    "AgedBrieStrategy",
    "BackstagePassStrategy",
    "LegendaryItemStrategy",
    "NormalItemStrategy",
]
