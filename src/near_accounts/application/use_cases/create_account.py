"""Use case for creating a named account on the network.

The use case runs the naming validator, resolves the key material, asks the
network client to create the account and, when the key pair was generated
here, hands it to the key store. Every step runs sequentially and failures
are returned as ProvisionResult values; nothing is retried.
"""

from near_accounts.application.ports.key_store import (
    KeyPairGeneratorPort,
    KeyStorePort,
)
from near_accounts.application.ports.network_client import (
    AccountCreationRejectedError,
    NetworkClientError,
    NetworkClientPort,
    NetworkTransportError,
)
from near_accounts.domain.models.keys import KeyMaterial
from near_accounts.domain.models.outcomes import Rejected
from near_accounts.domain.models.provisioning import (
    AccountConfirmation,
    CreationFailureReason,
    ProvisionError,
    ProvisionErrorKind,
    ProvisionResult,
    ProvisionState,
)
from near_accounts.domain.services.validation import NamingValidator


class CreateAccountUseCase:
    """Validate and provision a new account.

    The network client and key store are injected as ports so the sequencing
    can be exercised without a live network.
    """

    def __init__(
        self,
        network_client: NetworkClientPort,
        key_store: KeyStorePort,
        key_generator: KeyPairGeneratorPort,
        validator: NamingValidator | None = None,
    ) -> None:
        """Initialize the use case.

        Args:
            network_client: Port performing the remote account creation.
            key_store: Port persisting locally generated key pairs.
            key_generator: Port producing fresh ed25519 key pairs.
            validator: Optional naming validator; defaults to the standard
                network conventions.
        """
        self._network_client = network_client
        self._key_store = key_store
        self._key_generator = key_generator
        self._validator = validator or NamingValidator()

    async def execute(
        self,
        account_id: str,
        master_account_id: str,
        network_id: str,
        public_key: str | None = None,
    ) -> ProvisionResult:
        """Provision ``account_id`` as a subaccount of ``master_account_id``.

        Args:
            account_id: Identifier of the account to create.
            master_account_id: Identifier of the account paying for creation.
            network_id: Selected network environment.
            public_key: Optional caller-owned public key. When omitted a key
                pair is generated and stored after creation succeeds.

        Returns:
            ProvisionResult: Terminal state of the run.

        Raises:
            ValueError: If ``account_id`` is empty.
        """
        outcome = self._validator.validate(
            account_id,
            master_account_id,
            network_id,
        )
        if isinstance(outcome, Rejected):
            return ProvisionResult.rejected(
                account_id,
                network_id,
                outcome.message,
            )
        warning = outcome.warning

        key_material = self._resolve_key_material(public_key)

        try:
            await self._network_client.create_account(
                account_id,
                key_material.public_key,
            )
        except AccountCreationRejectedError as exc:
            return self._creation_failed(
                account_id,
                network_id,
                warning,
                CreationFailureReason.REJECTED,
                exc,
            )
        except NetworkTransportError as exc:
            return self._creation_failed(
                account_id,
                network_id,
                warning,
                CreationFailureReason.TRANSPORT,
                exc,
            )
        except NetworkClientError as exc:
            return self._creation_failed(
                account_id,
                network_id,
                warning,
                CreationFailureReason.UNKNOWN,
                exc,
            )

        if key_material.locally_owned:
            try:
                await self._key_store.set_key(
                    network_id,
                    account_id,
                    key_material.key_pair,
                )
            except Exception as exc:  # the account exists, the key is unsaved
                return ProvisionResult(
                    account_id=account_id,
                    network_id=network_id,
                    state=ProvisionState.PERSISTENCE_FAILED,
                    warning=warning,
                    error=ProvisionError(
                        kind=ProvisionErrorKind.PERSISTENCE_FAILED,
                        message=(
                            f"Account {account_id} was created on network "
                            f'"{network_id}" but its key could not be saved: '
                            f"{exc}"
                        ),
                        key_pair=key_material.key_pair,
                    ),
                )

        return ProvisionResult(
            account_id=account_id,
            network_id=network_id,
            state=ProvisionState.DONE,
            warning=warning,
            confirmation=AccountConfirmation(
                account_id=account_id,
                network_id=network_id,
            ),
        )

    def _resolve_key_material(self, public_key: str | None) -> KeyMaterial:
        if public_key:
            return KeyMaterial.supplied(public_key)
        return KeyMaterial.generated(self._key_generator.generate())

    @staticmethod
    def _creation_failed(
        account_id: str,
        network_id: str,
        warning: str | None,
        reason: CreationFailureReason,
        exc: Exception,
    ) -> ProvisionResult:
        return ProvisionResult(
            account_id=account_id,
            network_id=network_id,
            state=ProvisionState.CREATION_FAILED,
            warning=warning,
            error=ProvisionError(
                kind=ProvisionErrorKind.CREATION_FAILED,
                message=str(exc) or f"Failed to create account {account_id}",
                reason=reason,
            ),
        )


__all__ = ["CreateAccountUseCase"]
