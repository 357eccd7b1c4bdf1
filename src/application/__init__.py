"""
Application 계층 -- 오케스트레이션 + 서비스

Usage:
    from src.application.services.aging_service import InventoryAgingService
    from src.application.use_cases.daily_aging_flow import DailyAgingFlow
"""
