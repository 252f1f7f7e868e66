from __future__ import annotations

import base64

import pytest

from augury.sigil.address import Address

ALICE_BECH32 = "erd1qyu5wthldzr8wx5c9ucg8kjagg0jfs53s8nr3zpz3hypefsdd8ssycr6th"
ALICE_HEX = "0139472eff6886771a982f3083da5d421f24c29181e63888228dc81ca60d69e1"
BOB_BECH32 = "erd1spyavw0956vq68xj8y4tenjpq2wd5a9p2c6j8gsz7ztyrnpxrruqzu66jx"
BOB_HEX = "8049d639e5a6980d1cd2392abcce41029cda74a1563523a202f09641cc2618f8"


def b64(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


@pytest.fixture()
def alice() -> Address:
    return Address.from_bech32(ALICE_BECH32)


@pytest.fixture()
def bob() -> Address:
    return Address.from_bech32(BOB_BECH32)
