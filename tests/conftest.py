import pytest

from playground.transaction.models import TransactionInput

SENDER = "0x742d35Cc6634C0532925a3b844Bc454e4438f44e"
RECEIVER = "0x8ba1f109551bD432803012645Ac136ddd64DBA72"
AMOUNT = "100.5 USDC"


@pytest.fixture()
def valid_transaction() -> TransactionInput:
    """A transaction whose three fields all pass validation."""
    return TransactionInput(sender=SENDER, receiver=RECEIVER, amount=AMOUNT)


@pytest.fixture()
def clear_playground_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Drop settings-related variables so defaults apply."""
    for name in ("APP_ENV", "LOG_LEVEL", "RESULT_DELAY_MS", "OUTPUT_FORMAT"):
        monkeypatch.delenv(name, raising=False)
