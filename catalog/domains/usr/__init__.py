# catalog/domains/usr/__init__.py

"""
'usr' 도메인 패키지입니다. 고객사(테넌트)와 사용자, 인증을 다룹니다.

주요 서브모듈:
- `models.py`: clients, users 테이블에 매핑되는 SQLModel 정의.
- `schemas.py`: 요청/응답 스키마 (부분 수정 스키마 포함).
- `crud.py`: 데이터 접근 및 사용자 인증.
- `authorization.py`: 호출자(Caller)와 고객사 범위 권한 판정.
- `services.py`: 역할/고객사에 따른 조회, 생성, 수정, 삭제 로직.
- `routers.py`: 인증 및 사용자 관리 API 엔드포인트.
"""

__all__ = []
