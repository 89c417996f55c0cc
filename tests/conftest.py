"""
Shared fixtures.

The four addresses below were generated by factom-walletd and are paired:
FS derives to FA, ES derives to EC. Never use them for funds.
"""
import pytest

from factom_wallet.core.wallet_types import AddressKind

FA_ADDRESS = "FA2PdKfzGP5XwoSbeW1k9QunCHwC8DY6d8xgEdfm57qfR31nTueb"
FS_ADDRESS = "Fs1ipNRjEXcWj8RUn1GRLMJYVoPFBL1yw9rn6sCxWGcxciC4HdPd"
EC_ADDRESS = "EC2Pawhv7uAiKFQeLgaqfRhzk5o9uPVY8Ehjh8DnLXENosvYTT26"
ES_ADDRESS = "Es2tFRhAqHnydaygVAR6zbpWTQXUDaXy1JHWJugQXnYavS8ssQQE"

ADDRESS_BY_KIND = {
    AddressKind.FACTOID: FA_ADDRESS,
    AddressKind.FACTOID_SECRET: FS_ADDRESS,
    AddressKind.ENTRY_CREDIT: EC_ADDRESS,
    AddressKind.ENTRY_CREDIT_SECRET: ES_ADDRESS,
}


@pytest.fixture(params=list(ADDRESS_BY_KIND.items()), ids=lambda item: item[0].value)
def kind_and_text(request):
    return request.param
