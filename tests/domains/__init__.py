# tests/domains/__init__.py

"""
도메인별(products, usr) 테스트 모듈 패키지입니다.
"""
