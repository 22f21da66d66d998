"""
Tests for the sourcequery command line front end
"""

import pytest

from pysourcequery import cli
from pysourcequery.config import ConfigValidationError
from pysourcequery.exceptions import QueryTimeoutError
from pysourcequery.models import Address, FilterSet


class TestFilterArguments:
    """-f key=value parsing"""

    def test_plain_values(self):
        assert cli.parse_filter_args(['appid=730', 'map=de_dust2']).to_dict() == {'appid': 730, 'map': 'de_dust2'}

    def test_nested_group(self):
        assert cli.parse_filter_args(['nor.empty=1', 'nor.full=1']).to_dict() == {'nor': {'empty': 1, 'full': 1}}

    def test_comma_list(self):
        assert cli.parse_filter_args(['gametype=coop,pvp']).to_dict() == {'gametype': ['coop', 'pvp']}

    def test_missing_equals(self):
        with pytest.raises(ConfigValidationError):
            cli.parse_filter_args(['appid'])

    def test_group_outside_nested_keys(self):
        with pytest.raises(ConfigValidationError):
            cli.parse_filter_args(['gametype.x=1'])

    def test_key_used_as_value_and_group(self):
        with pytest.raises(ConfigValidationError):
            cli.parse_filter_args(['nand=1', 'nand.full=1'])

    def test_nested_key_without_group(self):
        with pytest.raises(ConfigValidationError):
            cli.parse_filter_args(['nor=1'])


class TestMain:
    """Exit codes"""

    def test_timeout_list_mismatch(self, capsys):
        assert cli.main(['info', '192.0.2.1:27015', '--attempts', '3', '--timeout', '0.5', '1']) == 2
        assert 'does not match' in capsys.readouterr().err

    def test_bad_address(self, capsys):
        assert cli.main(['info', 'not-an-address']) == 2

    def test_query_failure(self, monkeypatch, capsys):
        async def silent(address, attempts, timeout):
            raise QueryTimeoutError("Timeout reached", address=Address.parse(address), timeouts=[1.0])

        monkeypatch.setattr(cli, 'query_info', silent)
        assert cli.main(['info', '192.0.2.1:27015']) == 1
        assert 'Timeout reached' in capsys.readouterr().err

    def test_master_success(self, monkeypatch, capsys):
        seen = {}

        async def fake_master(address, region, filters, timeout, attempts, max_pages):
            seen.update(region=region, filters=filters, max_pages=max_pages)
            return [Address('1.2.3.4', 27015)]

        monkeypatch.setattr(cli, 'query_master', fake_master)
        code = cli.main(['master', '198.51.100.1:27011', '--region', 'EUROPE',
                         '-f', 'appid=730', '--max-pages', '5'])
        assert code == 0
        assert capsys.readouterr().out.strip() == '1.2.3.4:27015'
        assert seen == {'region': cli.Region.EUROPE, 'filters': FilterSet(appid=730), 'max_pages': 5}

    @pytest.mark.parametrize('filters', [
        ['nor=1'],
        ['gametype.x=1'],
        ['appid=1', 'appid.x=2'],
        ['nor.empty=1', 'nor=1'],
    ])
    def test_malformed_filter_exits_with_usage_error(self, filters, capsys):
        argv = ['master', '198.51.100.1:27011']
        for item in filters:
            argv += ['-f', item]
        assert cli.main(argv) == 2
        assert 'Error:' in capsys.readouterr().err
