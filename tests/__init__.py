# tests/__init__.py

"""
Catalog API의 테스트 스위트 패키지입니다.

- `core/`: 페이징 등 공통 구성 요소에 대한 테스트.
- `domains/`: 각 비즈니스 도메인(products, usr)에 대한 API 및 서비스 테스트.
- `conftest.py`: 테스트 DB 세션, 사용자/고객사 픽스처, 인증된 클라이언트 팩토리.
"""
