"""
Туристическая платформа: бронирование размещений и отзывы о местах.
"""

__version__ = "1.0.0"
