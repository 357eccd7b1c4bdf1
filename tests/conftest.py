"""
공유 테스트 픽스처

- 테스트 로그를 임시 디렉토리로 격리
- 상품/레지스트리/서비스 생성 헬퍼
"""

import os
import sys
import tempfile
from pathlib import Path

import pytest

# 프로젝트 루트를 sys.path에 추가
PROJECT_ROOT = Path(__file__).parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

# src.settings.app_config 임포트 전에 설정되어야 함
os.environ.setdefault(
    "INVENTORY_LOG_DIR",
    str(Path(tempfile.gettempdir()) / "inventory_aging_test_logs"),
)

from src.application.services.aging_service import InventoryAgingService  # noqa: E402
from src.domain.inventory.fixtures import default_inventory  # noqa: E402
from src.domain.inventory.strategy_registry import create_default_registry  # noqa: E402
from src.domain.models import Item  # noqa: E402


@pytest.fixture
def registry():
    """기본 전략 레지스트리 (freeze됨)"""
    return create_default_registry()


@pytest.fixture
def service(registry):
    """기본 레지스트리를 쓰는 에이징 서비스"""
    return InventoryAgingService(registry=registry)


@pytest.fixture
def sample_items():
    """표준 9종 시작 재고"""
    return default_inventory()


@pytest.fixture
def make_item():
    """Item 생성 헬퍼 (기본값: 일반 상품)"""
    def _make(name="+5 Dexterity Vest", sell_in=10, quality=20):
        return Item(name, sell_in, quality)
    return _make
