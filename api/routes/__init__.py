"""
API 라우터 모듈
"""

from .config import router as config_router
from .health import router as health_router

__all__ = ["health_router", "config_router"]
