from winversion.lib.runtime.internal.constants import SM_SERVERR2, VER_SUITE_WH_SERVER
from winversion.lib.utils.name_rules import (
    NAME_RULES, NameRule, ProductFilter, match_name, numeric_name, resolve_name
)

import pytest

from conftest import make_record

WS, DC, SRV = 1, 2, 3


def _no_metric(index: int) -> int:
    return 0


@pytest.mark.parametrize(
    'major, minor, build, product, expected', [
        pytest.param(10, 0, 22000, WS, "Windows 11", id="win11_first_build"),
        pytest.param(10, 0, 22631, WS, "Windows 11", id="win11"),
        pytest.param(10, 0, 21999, WS, "Windows 10", id="win10_last_build"),
        pytest.param(10, 0, 19045, WS, "Windows 10", id="win10"),
        pytest.param(10, 0, 26100, SRV, "Windows Server 2016", id="server_10"),
        pytest.param(10, 0, 17763, DC, "Windows Server 2016", id="dc_10"),
        pytest.param(6, 3, 9600, WS, "Windows 8.1", id="win81"),
        pytest.param(6, 2, 9200, WS, "Windows 8", id="win8"),
        pytest.param(6, 1, 7600, WS, "Windows 7", id="win7"),
        pytest.param(6, 0, 6000, WS, "Windows Vista", id="vista"),
        pytest.param(6, 3, 9600, SRV, "Windows Server 2012 R2", id="2012r2"),
        pytest.param(6, 2, 9200, SRV, "Windows Server 2012", id="2012"),
        pytest.param(6, 1, 7600, SRV, "Windows Server 2008 R2", id="2008r2"),
        pytest.param(6, 0, 6001, DC, "Windows Server 2008", id="2008"),
        pytest.param(5, 2, 3790, WS, "Windows XP Professional x64 Edition", id="xp_x64"),
        pytest.param(5, 2, 3790, SRV, "Windows Server 2003", id="2003"),
        pytest.param(5, 1, 2600, WS, "Windows XP", id="xp"),
        pytest.param(5, 1, 2600, SRV, "Windows XP", id="xp_any_product"),
        pytest.param(5, 0, 2195, WS, "Windows 2000", id="2000"),
        pytest.param(5, 0, 2195, SRV, "Windows 2000", id="2000_server"),
    ])
def test_resolve_known_versions(major, minor, build, product, expected):
    info = make_record(major, minor, build, product_type=product)
    assert resolve_name(info, _no_metric) == expected


@pytest.mark.parametrize(
    'major, minor, product, expected', [
        pytest.param(7, 0, WS, "7.0", id="unknown_major"),
        pytest.param(6, 4, WS, "6.4", id="unknown_minor_workstation"),
        pytest.param(6, 4, SRV, "6.4", id="unknown_minor_server"),
        pytest.param(5, 3, WS, "5.3", id="unknown_minor_5"),
        pytest.param(4, 0, WS, "4.0", id="nt4"),
    ])
def test_resolve_falls_back_to_numeric(major, minor, product, expected):
    info = make_record(major, minor, 1000, product_type=product)
    assert resolve_name(info, _no_metric) == expected


def test_home_server_uses_suite_mask_without_metric():
    calls = []

    def metric(index):
        calls.append(index)
        return 1

    info = make_record(5, 2, 3790, product_type=SRV, suite_mask=VER_SUITE_WH_SERVER | 0x10)
    assert resolve_name(info, metric) == "Windows Home Server"
    assert calls == []


def test_server_2003_r2_uses_system_metric():
    calls = []

    def metric(index):
        calls.append(index)
        return 1

    info = make_record(5, 2, 3790, product_type=SRV)
    assert resolve_name(info, metric) == "Windows Server 2003 R2"
    assert calls == [SM_SERVERR2]


def test_metric_not_queried_for_other_versions():
    calls = []
    for info in (make_record(10, 0, 22631), make_record(6, 1, 7601, product_type=SRV), make_record(5, 2, 3790)):
        resolve_name(info, calls.append)
    assert calls == []


@pytest.mark.parametrize(
    'info, expected', [
        pytest.param(make_record(6, 1, 7601, service_pack_major=1), "Windows 7 SP1", id="win7_sp1"),
        pytest.param(make_record(5, 1, 2600, service_pack_major=2), "Windows XP SP2", id="xp_sp2"),
        pytest.param(make_record(6, 0, 6002, product_type=SRV, service_pack_major=2),
                     "Windows Server 2008 SP2", id="2008_sp2"),
        pytest.param(make_record(7, 1, 1, service_pack_major=3), "7.1 SP3", id="numeric_sp3"),
        pytest.param(make_record(6, 1, 7601, service_pack_major=0, service_pack_minor=5),
                     "Windows 7", id="minor_only_has_no_suffix"),
    ])
def test_resolve_appends_service_pack(info, expected):
    assert resolve_name(info, _no_metric) == expected


def test_match_name_reports_no_match():
    assert match_name(make_record(7, 0, 1), _no_metric) is None
    assert numeric_name(make_record(7, 0, 1)) == "7.0"


def test_custom_rule_table():
    rules = (NameRule(11, None, ProductFilter.ANY, "Windows Next"),) + NAME_RULES
    assert resolve_name(make_record(11, 2, 30000), _no_metric, rules) == "Windows Next"
    assert resolve_name(make_record(10, 0, 19045), _no_metric, rules) == "Windows 10"


def test_rule_names_are_unique():
    names = [rule.name for rule in NAME_RULES]
    assert len(names) == len(set(names))
