from __future__ import annotations

from domain.device import Imei, MobilePhone, Tablet


def make_phone(
    imei: int,
    price: int = 100,
    *,
    manufacturer: str = "Samsung",
    for_sale: bool = True,
    supports_5g: bool = True,
) -> MobilePhone:
    return MobilePhone(
        imei=Imei(imei),
        pledge_price=price,
        manufacturer=manufacturer,
        allowed_for_sale=for_sale,
        supports_5g=supports_5g,
    )


def make_tablet(
    imei: int,
    price: int = 200,
    *,
    manufacturer: str = "Apple",
    for_sale: bool = True,
    can_make_calls: bool = False,
) -> Tablet:
    return Tablet(
        imei=Imei(imei),
        pledge_price=price,
        manufacturer=manufacturer,
        allowed_for_sale=for_sale,
        can_make_calls=can_make_calls,
    )
