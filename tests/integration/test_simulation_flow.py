"""End-to-end runs through validate -> resolve."""

from playground.policy.models import VisibilityState
from playground.simulator.simulator import build_simulator
from playground.transaction.models import FieldName, TransactionInput
from playground.validation.models import ValidationErrorKind

SENDER = "0x742d35Cc6634C0532925a3b844Bc454e4438f44e"
RECEIVER = "0x000000000000000000000000000000000000dEaD"


class TestRejectedScenarios:
    def test_receiver_with_non_hex_digit(self) -> None:
        result = build_simulator().run(
            TransactionInput(
                sender=SENDER,
                receiver="0x8ba1f109551bD432803012645Hac136c22C1727",
                amount="100.5 USDC",
            )
        )
        assert result.is_valid is False
        error = result.validation.error_for(FieldName.RECEIVER)
        assert error is not None
        assert error.kind is ValidationErrorKind.MALFORMED_ADDRESS
        assert result.descriptors == ()

    def test_receiver_one_char_short(self) -> None:
        receiver = RECEIVER[:-1]
        assert len(receiver) == 41
        result = build_simulator().run(
            TransactionInput(sender=SENDER, receiver=receiver, amount="1")
        )
        assert result.validation.error_for(FieldName.RECEIVER).kind is (
            ValidationErrorKind.MALFORMED_ADDRESS
        )
        assert result.validation.error_for(FieldName.SENDER) is None


class TestAcceptedScenario:
    def test_all_fields_valid(self) -> None:
        transaction = TransactionInput(sender=SENDER, receiver=RECEIVER, amount="100.5 USDC")
        result = build_simulator().run(transaction)

        assert result.is_valid is True
        assert len(result.descriptors) == 12

        rows = dict(result.rows())
        transparent = [d.display_text for d in rows[1]]
        assert transparent == ["0x742d...f44e", "0x0000...dEaD", "100.5 USDC"]

        anonymous = rows[2]
        assert [d.visibility_state for d in anonymous] == [
            VisibilityState.OBFUSCATED,
            VisibilityState.OBFUSCATED,
            VisibilityState.VISIBLE,
        ]
        assert anonymous[2].display_text == "100.5 USDC"

        confidential = rows[3]
        assert confidential[2].display_text == "Confidential Value"
        assert confidential[0].display_text == "0x742d...f44e"

        private = rows[4]
        for descriptor in private:
            assert descriptor.visibility_state is VisibilityState.ENCRYPTED
            for raw in (transaction.sender, transaction.receiver, transaction.amount):
                assert raw not in descriptor.display_text

    def test_repeated_runs_are_identical(self) -> None:
        transaction = TransactionInput(sender=SENDER, receiver=RECEIVER, amount="5")
        simulator = build_simulator()
        assert simulator.run(transaction) == simulator.run(transaction)
