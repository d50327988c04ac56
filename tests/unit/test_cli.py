"""
CLI Unit Tests
Tests for ledger_cli build / prove / verify commands.
"""
import json
import logging

import pytest

from ledger.crypto.hashing import hash_leaf
from ledger.schemas.errors import ErrorCodes
from ledger_cli.main import (
    EXIT_RUNTIME_ERROR,
    EXIT_SUCCESS,
    EXIT_VERIFICATION_FAILED,
    main,
    setup_logging,
)


@pytest.fixture
def tx_file(tmp_path):
    path = tmp_path / "transactions.json"
    path.write_text(json.dumps([
        "alpha",
        "beta",
        {"source_wallet_id": "aa", "destination_wallet_id": "bb", "amount": "5"},
        "delta",
    ]))
    return path


@pytest.fixture(autouse=True)
def _clean_env(clean_ledger_env):
    return clean_ledger_env


class TestBuildCommand:

    def test_build_json(self, tx_file, capsys):
        code = main(["build", str(tx_file), "--json"])

        out = json.loads(capsys.readouterr().out)
        assert code == EXIT_SUCCESS
        assert out["leaf_count"] == 4
        assert out["depth"] == 3
        assert out["leaf_hashes"][0] == hash_leaf("alpha")

    def test_build_rejects_odd_count(self, tmp_path, capsys):
        path = tmp_path / "three.json"
        path.write_text(json.dumps(["a", "b", "c"]))

        code = main(["build", str(path)])

        assert code == EXIT_RUNTIME_ERROR
        assert "power of two" in capsys.readouterr().err

    def test_build_odd_count_json(self, tmp_path, capsys):
        """Leaf count errors are reported as structured JSON."""
        path = tmp_path / "three.json"
        path.write_text(json.dumps(["a", "b", "c"]))

        code = main(["build", str(path), "--json"])

        report = json.loads(capsys.readouterr().out)
        assert code == EXIT_RUNTIME_ERROR
        assert report["ok"] is False
        assert report["error"]["code"] == ErrorCodes.INVALID_LEAF_COUNT
        assert report["error"]["details"] == {"leaf_count": 3}
        assert report["error"]["retryable"] is False

    def test_build_missing_file(self, tmp_path):
        assert main(["build", str(tmp_path / "nope.json")]) == EXIT_RUNTIME_ERROR

    def test_build_invalid_transaction(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps([{"amount": "1"}]))

        assert main(["build", str(path)]) == EXIT_RUNTIME_ERROR


class TestProveAndVerify:

    def test_prove_then_verify(self, tx_file, tmp_path, capsys):
        proof_path = tmp_path / "proof.json"

        assert main(["prove", str(tx_file), hash_leaf("beta"), "--out", str(proof_path)]) == EXIT_SUCCESS
        capsys.readouterr()

        assert main(["verify", str(proof_path), "--json"]) == EXIT_SUCCESS

        report = json.loads(capsys.readouterr().out)
        assert report["ok"] is True
        assert report["steps"] == 2

    def test_verify_against_wrong_root(self, tx_file, tmp_path, capsys):
        proof_path = tmp_path / "proof.json"
        main(["prove", str(tx_file), hash_leaf("delta"), "--out", str(proof_path)])
        capsys.readouterr()

        code = main(["verify", str(proof_path), "--root", hash_leaf("forged"), "--json"])

        report = json.loads(capsys.readouterr().out)
        assert code == EXIT_VERIFICATION_FAILED
        assert report["ok"] is False
        assert report["error"]["code"] == "ROOT_MISMATCH"

    def test_prove_unknown_leaf(self, tx_file, capsys):
        code = main(["prove", str(tx_file), hash_leaf("missing")])

        assert code == EXIT_VERIFICATION_FAILED
        assert hash_leaf("missing") in capsys.readouterr().err

    def test_prove_unknown_leaf_json(self, tmp_path, capsys):
        """A missing leaf is reported with the LEAF_NOT_FOUND code."""
        path = tmp_path / "two.json"
        path.write_text(json.dumps(["a", "b"]))

        code = main(["prove", str(path), "deadbeef", "--json"])

        report = json.loads(capsys.readouterr().out)
        assert code == EXIT_VERIFICATION_FAILED
        assert report["ok"] is False
        assert report["error"]["code"] == ErrorCodes.LEAF_NOT_FOUND
        assert report["error"]["details"]["leaf_hash"] == "deadbeef"

    def test_prove_odd_count_json(self, tmp_path, capsys):
        path = tmp_path / "three.json"
        path.write_text(json.dumps(["a", "b", "c"]))

        code = main(["prove", str(path), hash_leaf("a"), "--json"])

        report = json.loads(capsys.readouterr().out)
        assert code == EXIT_RUNTIME_ERROR
        assert report["error"]["code"] == ErrorCodes.INVALID_LEAF_COUNT

    def test_prove_to_stdout(self, tx_file, capsys):
        code = main(["prove", str(tx_file), hash_leaf("alpha")])

        proof = json.loads(capsys.readouterr().out)
        assert code == EXIT_SUCCESS
        assert proof["leaf_hash"] == hash_leaf("alpha")
        assert len(proof["steps"]) == 2

    def test_verify_invalid_file(self, tmp_path):
        path = tmp_path / "proof.json"
        path.write_text(json.dumps({"leaf_hash": "x"}))

        assert main(["verify", str(path)]) == EXIT_RUNTIME_ERROR


class TestSetupLogging:

    def test_keeps_existing_root_handlers(self):
        """Handlers already installed on the root logger are left in place."""
        root = logging.getLogger()
        marker = logging.NullHandler()
        root.addHandler(marker)
        try:
            before = list(root.handlers)

            setup_logging(level="DEBUG")

            assert root.handlers == before
        finally:
            root.removeHandler(marker)


class TestConfigCommand:

    def test_config_show(self, capsys):
        assert main(["config", "--show"]) == EXIT_SUCCESS

        shown = json.loads(capsys.readouterr().out)
        assert shown["cache"]["message_capacity"] == 1000

    def test_no_command(self):
        assert main([]) == EXIT_RUNTIME_ERROR
