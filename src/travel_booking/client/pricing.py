"""
Таблица цен туристических пакетов.
"""

from typing import Dict, Union

from ..shared_kernel import PackageType

# Цена за одного путешественника
PACKAGE_PRICES: Dict[PackageType, int] = {
    PackageType.NORMAL: 100,
    PackageType.PREMIUM: 250,
    PackageType.VIP: 500,
}


def unit_price(package_type: Union[PackageType, str, None]) -> int:
    """Цена пакета за одного человека; для неизвестного пакета - цена ``normal``."""
    try:
        return PACKAGE_PRICES[PackageType(package_type)]
    except ValueError:
        return PACKAGE_PRICES[PackageType.NORMAL]


def total_price(package_type: Union[PackageType, str, None], number_of_travellers: int) -> int:
    return unit_price(package_type) * number_of_travellers
