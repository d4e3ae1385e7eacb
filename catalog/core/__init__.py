# catalog/core/__init__.py

"""
FastAPI 애플리케이션의 핵심 구성 요소 패키지입니다.

- `config.py`: 애플리케이션의 설정 및 환경 변수 관리 (Pydantic Settings).
- `database.py`: 데이터베이스 연결, 세션 관리 (SQLModel 및 AsyncSQLAlchemy).
- `security.py`: 사용자 인증, 권한 부여, 비밀번호 해싱 등 보안 관련 유틸리티.
- `dependencies.py`: FastAPI의 의존성 주입 시스템에서 사용될 공통 의존성 함수들.
- `exceptions.py`, `validation.py`: 오류 분류와 위반 목록(400) 응답.
- `crud_base.py`, `pagination.py`: 공통 CRUD와 페이지 단위 조회.
"""

__title__ = "Catalog Core"
__version__ = "0.1.0"
__all__ = []
