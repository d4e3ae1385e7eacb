# tests/domains/test_auth_n.py

"""
인증 (토큰 발급, 현재 사용자 조회) 및 JWT 오류 응답에 대한 통합 테스트 모듈입니다.
"""

from datetime import timedelta

import pytest
from httpx import AsyncClient

from catalog.core.security import create_access_token
from catalog.domains.usr import models as usr_models

TOKEN_URL = "/api/v1/auth/token"
ME_URL = "/api/v1/auth/me"
USERS_URL = "/api/v1/users"


@pytest.mark.asyncio
async def test_login_success(client: AsyncClient, test_admin_a: usr_models.User):
    response = await client.post(TOKEN_URL, data={"username": "admina", "password": "adminapass123"})

    assert response.status_code == 200
    token = response.json()
    assert token["token_type"] == "bearer"
    assert token["access_token"]


@pytest.mark.asyncio
async def test_login_wrong_password(client: AsyncClient, test_admin_a: usr_models.User):
    """
    잘못된 비밀번호로 로그인하면 401과 Bearer 인증 헤더를 반환합니다.
    """
    response = await client.post(TOKEN_URL, data={"username": "admina", "password": "wrong-password"})

    assert response.status_code == 401
    assert response.json()["detail"] == "Invalid credentials."
    assert response.headers["www-authenticate"] == "Bearer"


@pytest.mark.asyncio
async def test_login_unknown_user(client: AsyncClient):
    response = await client.post(TOKEN_URL, data={"username": "ghost", "password": "whatever123"})
    assert response.status_code == 401


@pytest.mark.asyncio
async def test_login_inactive_user(client: AsyncClient, user_factory, test_client_a: usr_models.Client):
    await user_factory(
        "sleeper", "sleeperpass1",
        roles=[usr_models.UserRole.ADMIN],
        client_id=test_client_a.id,
        is_active=False,
    )

    response = await client.post(TOKEN_URL, data={"username": "sleeper", "password": "sleeperpass1"})

    assert response.status_code == 400
    assert response.json()["detail"] == "Inactive user"


@pytest.mark.asyncio
async def test_read_me(user_client: AsyncClient, test_user_a: usr_models.User):
    response = await user_client.get(ME_URL)

    assert response.status_code == 200
    body = response.json()
    assert body["user_name"] == "usera"
    assert body["client_id"] == test_user_a.client_id
    assert "password_hash" not in body
    assert "password" not in body


# =============================================================================
# JWT 오류 응답 (401)
# =============================================================================
@pytest.mark.asyncio
async def test_missing_token(client: AsyncClient):
    response = await client.get(USERS_URL)

    assert response.status_code == 401
    assert response.json()["detail"] == "JWT Token not found"


@pytest.mark.asyncio
async def test_malformed_token(client: AsyncClient):
    response = await client.get(USERS_URL, headers={"Authorization": "Bearer not-a-jwt"})

    assert response.status_code == 401
    assert response.json()["detail"] == "Invalid JWT Token"


@pytest.mark.asyncio
async def test_expired_token(client: AsyncClient, test_admin_a: usr_models.User):
    token = create_access_token({"sub": test_admin_a.user_name}, expires_delta=timedelta(minutes=-5))

    response = await client.get(USERS_URL, headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 401
    assert response.json()["detail"] == "Expired JWT Token"


@pytest.mark.asyncio
async def test_token_for_deleted_user(client: AsyncClient):
    """서명은 유효하지만 존재하지 않는 사용자의 토큰은 Invalid JWT Token으로 처리됩니다."""
    token = create_access_token({"sub": "nobody"})

    response = await client.get(ME_URL, headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 401
    assert response.json()["detail"] == "Invalid JWT Token"


@pytest.mark.asyncio
async def test_token_without_subject(client: AsyncClient):
    token = create_access_token({"scope": "none"})

    response = await client.get(ME_URL, headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 401
    assert response.json()["detail"] == "Invalid JWT Token"
