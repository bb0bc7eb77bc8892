import pytest

from config import Config
from qris.models import AmountLimits, MerchantProfile, RenderOptions


@pytest.fixture
def merchant() -> MerchantProfile:
    return MerchantProfile(
        account="ID.CO.EXAMPLE.WWW",
        name="TOKO EXAMPLE",
        city="JAKARTA",
        country_code="ID",
        currency_code="360",
    )


@pytest.fixture
def cfg(merchant: MerchantProfile) -> Config:
    return Config(
        token="",
        merchant=merchant,
        limits=AmountLimits(min_amount=1000, max_amount=10_000_000),
        render=RenderOptions(),
        keywords=("bayar",),
        enable_group_messages=False,
        max_message_length=1000,
        show_merchant_info=False,
    )
