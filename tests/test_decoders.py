import logging

import pytest

from core.exceptions import BlockNumberParseException
from exporter.decoders import ResponseDecoder, parse_block_number


@pytest.fixture
def decoder() -> ResponseDecoder:
    return ResponseDecoder(logger=logging.getLogger("test"))


class TestParseBlockNumber:
    """
    Tests for hex block number parsing.
    """

    @pytest.mark.parametrize("hex_value, expected", [
        ("0x10", 16),
        ("0x0", 0),
        ("0x2a", 42),
        ("0x12A05F200", 5000000000),
        ("ff", 255),
        ("0x7fffffffffffffff", 2 ** 63 - 1),
    ])
    def test_valid(self, hex_value, expected):
        assert parse_block_number(hex_value) == expected

    @pytest.mark.parametrize("hex_value", [
        "",
        "0x",
        "0xzz",
        "0x1_0",
        " 0x10",
        "0X10",
        "Invalid API Key",
        "0x8000000000000000",
    ])
    def test_invalid(self, hex_value):
        with pytest.raises(BlockNumberParseException):
            parse_block_number(hex_value)


class TestResponseDecoder:
    """
    Tests for lenient response body decoding.
    """

    def test_balance_multi(self, decoder):
        response = decoder.decode_balance_multi(
            '{"status":"1","message":"OK","result":[{"account":"0xabc","balance":"1230000000000000000"}]}'
        )

        assert response.status == "1"
        assert response.message == "OK"
        assert len(response.result) == 1
        assert response.result[0].account == "0xabc"
        assert response.result[0].balance == "1230000000000000000"

    def test_balance_multi_error_result(self, decoder):
        response = decoder.decode_balance_multi(
            '{"status":"0","message":"NOTOK","result":"Invalid API Key"}'
        )

        assert response.status == "0"
        assert response.message == "NOTOK"
        assert response.result == []

    @pytest.mark.parametrize("body", ["", "not json", "[]", "null"])
    def test_balance_multi_malformed(self, decoder, body):
        response = decoder.decode_balance_multi(body)

        assert response.status == ""
        assert response.result == []

    def test_balance_multi_mistyped_fields(self, decoder):
        response = decoder.decode_balance_multi(
            '{"status":1,"result":[{"account":"0xabc","balance":5}, "junk"]}'
        )

        assert response.status == ""
        assert [(r.account, r.balance) for r in response.result] == [("0xabc", "")]

    def test_block_number(self, decoder):
        response = decoder.decode_block_number('{"jsonrpc":"2.0","id":83,"result":"0x2a"}')

        assert response.jsonrpc == "2.0"
        assert response.id == 83
        assert response.result == "0x2a"

    @pytest.mark.parametrize("body", ["", "{", '"0x2a"'])
    def test_block_number_malformed(self, decoder, body):
        assert decoder.decode_block_number(body).result == ""

    @pytest.mark.parametrize("request_id", ["1.5", '{"n":1}', "[1]", "true", "null"])
    def test_block_number_mistyped_id_keeps_result(self, decoder, request_id):
        response = decoder.decode_block_number(
            '{"jsonrpc":"2.0","id":' + request_id + ',"result":"0x2a"}'
        )

        assert response.id is None
        assert response.result == "0x2a"
