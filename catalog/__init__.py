# catalog/__init__.py

"""
Catalog FastAPI 애플리케이션의 메인 패키지입니다.

이 패키지는 상품(Product) 카탈로그와 고객사(Client)별 사용자(User) 관리 API를 제공합니다.
FastAPI 애플리케이션의 진입점 (main.py)과
공통 설정, 데이터베이스 연결, 보안, 페이징 유틸리티를 담는 core 서브패키지,
그리고 각 비즈니스 도메인을 대표하는 domains 서브패키지로 구성됩니다.
"""

APP_NAME = "Catalog API"
APP_VERSION = "0.1.0"
API_PREFIX = "/api/v1"  # API 라우트의 공통 접두사 (main.py에서 적용)

__version__ = APP_VERSION
__title__ = APP_NAME
__description__ = "Product catalog and client-scoped user management API backend."
__license__ = "MIT"
__all__ = []
