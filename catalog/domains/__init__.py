# catalog/domains/__init__.py

"""
비즈니스 도메인별 서브패키지 (products, usr) 모음입니다.
"""
