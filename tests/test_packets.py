"""
Tests for request datagram builders and filter serialization
"""

import pytest

from pysourcequery.models import Address, FilterSet, SENTINEL
from pysourcequery.protocol.enums import Region
from pysourcequery.protocol.packets import (
    build_info_request,
    build_master_request,
    build_player_request,
    build_rules_request,
    format_filters,
    is_challenge,
    read_challenge,
)
from pysourcequery.exceptions import DecodeError

TOKEN = b'\x0a\x0b\x0c\x0d'


class TestInfoRequest:
    """A2S_INFO request layout"""

    def test_without_challenge(self):
        assert build_info_request() == b'\xff\xff\xff\xffTSource Engine Query\x00'

    def test_challenge_follows_terminator(self):
        packet = build_info_request(TOKEN)
        assert packet == b'\xff\xff\xff\xffTSource Engine Query\x00' + TOKEN
        assert packet.index(b'\x00') == len(packet) - len(TOKEN) - 1


class TestChallengedRequests:
    """A2S_PLAYER and A2S_RULES request layout"""

    def test_player_placeholder(self):
        assert build_player_request() == b'\xff\xff\xff\xff\x55\xff\xff\xff\xff'

    def test_player_with_challenge(self):
        assert build_player_request(TOKEN) == b'\xff\xff\xff\xff\x55' + TOKEN

    def test_rules_placeholder(self):
        assert build_rules_request() == b'\xff\xff\xff\xff\x56\xff\xff\xff\xff'

    def test_rules_with_challenge(self):
        assert build_rules_request(TOKEN) == b'\xff\xff\xff\xff\x56' + TOKEN


class TestChallengeDetection:
    """S2C_CHALLENGE replies"""

    def test_is_challenge(self):
        assert is_challenge(b'\xff\xff\xff\xff\x41' + TOKEN)
        assert not is_challenge(b'\xff\xff\xff\xff\x49rest')
        assert not is_challenge(b'\xff\xff')

    def test_read_challenge(self):
        assert read_challenge(b'\xff\xff\xff\xff\x41' + TOKEN) == TOKEN

    def test_read_challenge_without_token(self):
        with pytest.raises(DecodeError):
            read_challenge(b'\xff\xff\xff\xff\x41')


class TestFilterSerialization:
    """Master server filter strings"""

    def test_empty(self):
        assert format_filters() == '\x00'
        assert format_filters({}) == '\x00'

    def test_flags_and_strings_in_order(self):
        assert format_filters({'dedicated': True, 'map': 'de_dust2'}) == '\\dedicated\\1\\map\\de_dust2\x00'

    def test_order_follows_insertion(self):
        assert format_filters({'map': 'de_dust2', 'dedicated': True}) == '\\map\\de_dust2\\dedicated\\1\x00'

    def test_nested_nor(self):
        assert format_filters({'nor': {'empty': True}}) == '\\nor\\1\\empty\\1\x00'

    def test_nested_nand_count(self):
        filters = FilterSet(nand={'map': 'cs_office', 'full': True}, appid=730)
        assert format_filters(filters) == '\\nand\\2\\map\\cs_office\\full\\1\\appid\\730\x00'

    def test_integers_and_false(self):
        assert format_filters({'appid': 440, 'password': False}) == '\\appid\\440\\password\\0\x00'

    def test_list_values_comma_joined(self):
        assert format_filters({'gametype': ['coop', 'hardcore']}) == '\\gametype\\coop,hardcore\x00'

    def test_unsupported_value_rejected(self):
        with pytest.raises(TypeError):
            FilterSet({'map': 1.5})

    def test_nested_requires_mapping(self):
        with pytest.raises(TypeError):
            FilterSet({'nor': 'empty'})

    def test_nested_cannot_nest_again(self):
        with pytest.raises(TypeError):
            FilterSet({'nor': {'nand': {'empty': True}}})

    def test_list_items_must_be_strings(self):
        with pytest.raises(TypeError):
            FilterSet({'gametype': ['coop', 3]})


class TestMasterRequest:
    """Master server query layout"""

    def test_first_page(self):
        packet = build_master_request(Region.ALL, SENTINEL)
        assert packet == b'\x31\xff0.0.0.0:0\x00\x00'

    def test_seeded_with_filters(self):
        packet = build_master_request(Region.EUROPE, Address('10.0.0.1', 27015), {'appid': 730})
        assert packet == b'\x31\x0310.0.0.1:27015\x00\\appid\\730\x00'

    def test_region_accepts_int(self):
        assert build_master_request(0x05, SENTINEL)[1] == Region.AUSTRALIA
