"""
Transaction and Staking Wallet Unit Tests
Tests for ledger/schemas/transaction.py and ledger/crypto/keys.py
"""
from decimal import Decimal

import pytest
from pydantic import ValidationError

from ledger.crypto.keys import StakingWallet, load_public_key, public_key_id
from ledger.schemas.errors import ConfigurationException, ErrorCodes
from ledger.schemas.transaction import StakingTransaction, Transaction

from fixtures.common import make_transaction, write_public_key


class TestTransaction:
    """Tests for the Transaction model."""

    def test_rejects_negative_amount(self):
        with pytest.raises(ValidationError):
            Transaction(source_wallet_id="a", destination_wallet_id="b", amount=Decimal("-1"))

    def test_rejects_unknown_fields(self):
        with pytest.raises(ValidationError):
            Transaction.model_validate(
                {"source_wallet_id": "a", "destination_wallet_id": "b", "amount": "1", "memo": "x"}
            )

    def test_is_frozen(self):
        tx = make_transaction()

        with pytest.raises(ValidationError):
            tx.amount = Decimal("5")

    def test_validates_from_json_strings(self):
        tx = Transaction.model_validate(
            {"source_wallet_id": "a", "destination_wallet_id": "b", "amount": "2.50"}
        )

        assert tx.amount == Decimal("2.5")
        assert tx.tip == Decimal("0")


class TestKeys:
    """Tests for public key loading."""

    def test_der_and_pem_give_same_wallet_id(self, tmp_path):
        der_path = write_public_key(tmp_path / "key.der")
        key = load_public_key(der_path)
        pem_path = tmp_path / "key.pem"
        from cryptography.hazmat.primitives import serialization
        pem_path.write_bytes(
            key.public_bytes(
                encoding=serialization.Encoding.PEM,
                format=serialization.PublicFormat.SubjectPublicKeyInfo,
            )
        )

        assert public_key_id(load_public_key(pem_path)) == public_key_id(key)

    def test_missing_key_file(self, tmp_path):
        with pytest.raises(ConfigurationException) as exc_info:
            load_public_key(tmp_path / "absent.der")

        assert exc_info.value.code == ErrorCodes.KEY_LOAD_ERROR

    def test_garbage_key_file(self, tmp_path):
        bad = tmp_path / "bad.der"
        bad.write_bytes(b"not a key")

        with pytest.raises(ConfigurationException) as exc_info:
            load_public_key(bad)

        assert exc_info.value.code == ErrorCodes.KEY_LOAD_ERROR

    def test_staking_wallet_from_file(self, staking_key_path):
        wallet = StakingWallet.from_file(staking_key_path)

        assert wallet.wallet_id == public_key_id(load_public_key(staking_key_path))


class TestStakingTransaction:
    """Tests for StakingTransaction.create()."""

    def test_destination_is_staking_wallet(self, staking_key_path):
        wallet = StakingWallet.from_file(staking_key_path)

        tx = StakingTransaction.create(
            source_wallet_id="ab" * 16,
            amount=Decimal("100"),
            tip=Decimal("1"),
            signature="ff",
            staking_wallet=wallet,
        )

        assert tx.destination_wallet_id == wallet.wallet_id
        assert tx.is_for(wallet)
        assert not tx.is_for(StakingWallet(wallet_id="00"))

    def test_different_wallets_give_different_leaves(self):
        kwargs = dict(source_wallet_id="ab", amount=Decimal("1"), tip=Decimal("0"), signature="")

        first = StakingTransaction.create(staking_wallet=StakingWallet("01"), **kwargs)
        second = StakingTransaction.create(staking_wallet=StakingWallet("02"), **kwargs)

        assert first.hash() != second.hash()
