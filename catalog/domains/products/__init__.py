# catalog/domains/products/__init__.py

"""
'products' 도메인 패키지입니다. 인증 없이 사용할 수 있는 상품 카탈로그 CRUD를 제공합니다.
"""

__all__ = []
