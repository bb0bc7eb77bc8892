"""Static QRIS domain models shared by config, encoder and renderer."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class MerchantProfile:
    account: str
    name: str
    city: str
    country_code: str = "ID"
    currency_code: str = "360"


@dataclass(frozen=True, slots=True)
class AmountLimits:
    min_amount: int = 1000
    max_amount: int = 10_000_000


@dataclass(frozen=True, slots=True)
class RenderOptions:
    image_format: str = "PNG"
    error_correction: str = "M"
    width: int = 512
    margin: int = 2
    dark_color: str = "#000000"
    light_color: str = "#FFFFFF"
