"""Derives what each privacy profile shows for a validated transaction.

For every profile (in id order) and every field (sender, receiver, amount):
1. Look up the field's spec in the profile.
2. VISIBLE: show the formatted raw value; keep the full value as tooltip
   when it was shortened.
3. OBFUSCATED / ENCRYPTED: show the profile's label; the raw value is never
   part of the descriptor.
"""

from playground.logging.logger import Log
from playground.policy.catalog import PRIVACY_PROFILES
from playground.policy.exceptions import UnvalidatedTransactionError
from playground.policy.formatting import format_value, is_shortened
from playground.policy.models import (
    FieldSpec,
    PrivacyProfile,
    RenderDescriptor,
    VisibilityState,
)
from playground.transaction.models import FIELD_ORDER, FieldName, TransactionInput
from playground.validation.models import ValidationResult
from playground.validation.validator import validate


class PolicyResolver:
    """Combines a transaction with a fixed profile catalog."""

    def __init__(self, profiles: tuple[PrivacyProfile, ...] = PRIVACY_PROFILES) -> None:
        self._profiles = tuple(sorted(profiles, key=lambda p: p.id))

    @property
    def profiles(self) -> tuple[PrivacyProfile, ...]:
        return self._profiles

    def resolve(
        self,
        transaction: TransactionInput,
        validation: ValidationResult | None = None,
    ) -> tuple[RenderDescriptor, ...]:
        """Build one descriptor per profile per field, ordered by profile id then field.

        Args:
            transaction: Input to resolve.
            validation: Result of validating *transaction*, when the caller
                        already has one. Validated here otherwise.

        Raises:
            UnvalidatedTransactionError: if *transaction* does not pass validation.
        """
        if validation is None:
            validation = validate(transaction)
        if not validation.is_valid:
            raise UnvalidatedTransactionError(
                "resolve() requires a transaction that passed validation"
            )
        descriptors = tuple(
            self._describe(profile, field_name, transaction.value_of(field_name))
            for profile in self._profiles
            for field_name in FIELD_ORDER
        )
        Log.debug(
            f"Resolved {len(descriptors)} descriptors across {len(self._profiles)} profiles"
        )
        return descriptors

    @staticmethod
    def _describe(
        profile: PrivacyProfile,
        field_name: FieldName,
        raw_value: str,
    ) -> RenderDescriptor:
        spec: FieldSpec = profile.spec_for(field_name)
        state = spec.visibility_state
        if state is VisibilityState.VISIBLE:
            return RenderDescriptor(
                profile_id=profile.id,
                field_name=field_name,
                visibility_state=state,
                display_text=format_value(raw_value),
                tooltip=raw_value if is_shortened(raw_value) else None,
            )
        if state in (VisibilityState.OBFUSCATED, VisibilityState.ENCRYPTED):
            return RenderDescriptor(
                profile_id=profile.id,
                field_name=field_name,
                visibility_state=state,
                display_text=spec.label,
            )
        raise ValueError(f"Unhandled visibility state: {state!r}")


_default_resolver = PolicyResolver()


def resolve(transaction: TransactionInput) -> tuple[RenderDescriptor, ...]:
    """Resolve *transaction* against the built-in catalog."""
    return _default_resolver.resolve(transaction)
