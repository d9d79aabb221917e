"""
Unit tests for the Web3Service chain data source.
"""

from unittest.mock import MagicMock

import pytest
from web3 import Web3
from web3.exceptions import BlockNotFound as Web3BlockNotFound

from storage_proof_toolkit.shared.exceptions import BlockNotFound, ErrorKind
from storage_proof_toolkit.shared.services.web3_service import Web3Service


@pytest.fixture
def service() -> Web3Service:
    service = Web3Service("http://localhost:8545")
    service.w3 = MagicMock()
    service.w3.to_hex = Web3.to_hex
    return service


class TestGetBlock:
    def test_returns_block(self, service, london_block):
        service.w3.eth.get_block.return_value = london_block

        assert service.get_block(17_000_000) is london_block
        service.w3.eth.get_block.assert_called_once_with(17_000_000)

    def test_web3_block_not_found(self, service):
        service.w3.eth.get_block.side_effect = Web3BlockNotFound("nope")

        with pytest.raises(BlockNotFound) as exc_info:
            service.get_block(99_999_999)

        assert exc_info.value.kind == ErrorKind.BLOCK_NOT_FOUND
        assert exc_info.value.is_fatal is False

    def test_none_response(self, service):
        service.w3.eth.get_block.return_value = None

        with pytest.raises(BlockNotFound):
            service.get_block(99_999_999)

    def test_does_not_cache(self, service, london_block):
        service.w3.eth.get_block.return_value = london_block

        service.get_block(1)
        service.get_block(1)

        assert service.w3.eth.get_block.call_count == 2


class TestGetProof:
    def test_slots_sent_as_hex(self, service, proof_response, sample_account):
        service.w3.eth.get_proof.return_value = proof_response

        response = service.get_proof(sample_account.lower(), [5], 100)

        assert response is proof_response
        service.w3.eth.get_proof.assert_called_once_with(
            sample_account, ["0x5"], 100
        )

    def test_errors_propagate(self, service, sample_account):
        service.w3.eth.get_proof.side_effect = ConnectionError("refused")

        with pytest.raises(ConnectionError):
            service.get_proof(sample_account, [5], 100)
