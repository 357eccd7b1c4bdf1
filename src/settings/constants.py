"""
재고 에이징 엔진 - 비즈니스 상수
- 특수 상품명 (카테고리 판별용)
- 품질(quality) 하한/상한
- 공연 티켓 단계 임계값

정식 경로: from src.settings.constants import ...
"""

# =====================================================================
# 특수 상품명 (정확히 일치해야 전용 전략 적용, 대소문자 구분)
# =====================================================================

AGED_BRIE = "Aged Brie"                                        # 숙성될수록 품질 상승
BACKSTAGE_PASS = "Backstage passes to a TAFKAL80ETC concert"   # 공연일 임박 시 단계 상승
SULFURAS = "Sulfuras, Hand of Ragnaros"                        # 전설 아이템 (불변)

# 전설 아이템 그룹 (품질 범위 검사 제외 대상)
LEGENDARY_ITEMS = {SULFURAS}

# =====================================================================
# 품질 범위
# =====================================================================

MIN_QUALITY = 0          # 일반/특수 상품 품질 하한
MAX_QUALITY = 50         # 일반/특수 상품 품질 상한
LEGENDARY_QUALITY = 80   # 전설 아이템 품질 (범위 밖, 변하지 않음)

# =====================================================================
# 판매기한 (sell_in)
# =====================================================================

SELL_IN_STEP = 1         # 1일(tick)당 판매기한 감소량
EVENT_HORIZON = 0        # 이 값 미만이면 기한 경과 (0 = 마지막 판매일)

# 공연 티켓 단계 임계값 (감소 후 sell_in 기준, 미만 비교)
BACKSTAGE_TIER_1_DAYS = 10   # 10일 미만: +1 추가
BACKSTAGE_TIER_2_DAYS = 5    # 5일 미만: +1 추가 (누적 +3)
