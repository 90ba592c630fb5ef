import pytest

from tunpacket.addrenums import (
    DadState,
    DnsInterfaceSettingsFlag,
    LinkLocalAddressBehavior,
    MibNotificationType,
    OffloadRod,
    PrefixOrigin,
    RouteOrigin,
    RouteProtocol,
    RouterDiscoveryBehavior,
    ScopeLevel,
    SuffixOrigin,
)


def test_lookup_by_value_round_trips():
    assert all(DadState(int(m)) is m for m in DadState)
    assert all(PrefixOrigin(int(m)) is m for m in PrefixOrigin)
    assert all(LinkLocalAddressBehavior(int(m)) is m for m in LinkLocalAddressBehavior)
    assert all(RouteOrigin(int(m)) is m for m in RouteOrigin)
    assert all(RouteProtocol(int(m)) is m for m in RouteProtocol)
    assert all(RouterDiscoveryBehavior(int(m)) is m for m in RouterDiscoveryBehavior)
    assert all(SuffixOrigin(int(m)) is m for m in SuffixOrigin)
    assert all(MibNotificationType(int(m)) is m for m in MibNotificationType)
    assert all(ScopeLevel(int(m)) is m for m in ScopeLevel)
    assert all(OffloadRod(int(m)) is m for m in OffloadRod)
    assert all(DnsInterfaceSettingsFlag(int(m)) is m for m in DnsInterfaceSettingsFlag)


def test_values_are_unique():
    assert len({DadState(int(m)) for m in DadState}) == len(list(DadState))
    assert len({PrefixOrigin(int(m)) for m in PrefixOrigin}) == len(list(PrefixOrigin))
    assert len({LinkLocalAddressBehavior(int(m)) for m in LinkLocalAddressBehavior}) == len(
        list(LinkLocalAddressBehavior)
    )
    assert len({RouteOrigin(int(m)) for m in RouteOrigin}) == len(list(RouteOrigin))
    assert len({RouteProtocol(int(m)) for m in RouteProtocol}) == len(list(RouteProtocol))
    assert len({RouterDiscoveryBehavior(int(m)) for m in RouterDiscoveryBehavior}) == len(
        list(RouterDiscoveryBehavior)
    )
    assert len({SuffixOrigin(int(m)) for m in SuffixOrigin}) == len(list(SuffixOrigin))
    assert len({MibNotificationType(int(m)) for m in MibNotificationType}) == len(
        list(MibNotificationType)
    )
    assert len({ScopeLevel(int(m)) for m in ScopeLevel}) == len(list(ScopeLevel))
    assert len({OffloadRod(int(m)) for m in OffloadRod}) == len(list(OffloadRod))
    assert len({DnsInterfaceSettingsFlag(int(m)) for m in DnsInterfaceSettingsFlag}) == len(
        list(DnsInterfaceSettingsFlag)
    )


def test_unknown_value_is_rejected():
    with pytest.raises(ValueError):
        DadState(123456)
    with pytest.raises(ValueError):
        PrefixOrigin(123456)
    with pytest.raises(ValueError):
        LinkLocalAddressBehavior(123456)
    with pytest.raises(ValueError):
        RouteOrigin(123456)
    with pytest.raises(ValueError):
        RouteProtocol(123456)
    with pytest.raises(ValueError):
        RouterDiscoveryBehavior(123456)
    with pytest.raises(ValueError):
        SuffixOrigin(123456)
    with pytest.raises(ValueError):
        MibNotificationType(123456)
    with pytest.raises(ValueError):
        ScopeLevel(123456)


def test_route_protocol_nt_values():
    assert RouteProtocol(10002) is RouteProtocol.NT_AUTOSTATIC
    assert RouteProtocol(10006) is RouteProtocol.NT_STATIC
    assert RouteProtocol(10007) is RouteProtocol.NT_STATIC_NON_DOD


def test_route_protocol_numbered_members_are_contiguous():
    low = sorted((m for m in RouteProtocol if int(m) < 10002), key=int)
    assert [RouteProtocol(value) for value in range(1, 20)] == low
    assert RouteProtocol(1) is RouteProtocol.OTHER
    assert RouteProtocol(19) is RouteProtocol.DHCP


def test_unchanged_values():
    assert LinkLocalAddressBehavior(-1) is LinkLocalAddressBehavior.UNCHANGED
    assert RouterDiscoveryBehavior(-1) is RouterDiscoveryBehavior.UNCHANGED
    assert PrefixOrigin(1 << 4) is PrefixOrigin.UNCHANGED
    assert SuffixOrigin(1 << 4) is SuffixOrigin.UNCHANGED


def test_scope_levels():
    assert ScopeLevel(8) is ScopeLevel.ORGANIZATION
    assert ScopeLevel(14) is ScopeLevel.GLOBAL
    assert ScopeLevel(16) is ScopeLevel.COUNT
    assert max(ScopeLevel) is ScopeLevel.COUNT


def test_dad_state_ordering():
    assert DadState(0) is DadState.INVALID
    assert DadState(4) is DadState.PREFERRED
    assert min(DadState) is DadState.INVALID
    assert max(DadState) is DadState.PREFERRED


def test_offload_rod_bits_are_single_powers_of_two():
    combined = OffloadRod(0)
    for member in OffloadRod:
        value = int(member)
        assert value & (value - 1) == 0
        assert not combined & member
        combined |= member
    assert int(combined) <= 0xFF


def test_offload_rod_combination_membership():
    caps = OffloadRod.CHECKSUM_SUPPORTED | OffloadRod.FAST_PATH_COMPATIBLE
    assert OffloadRod.CHECKSUM_SUPPORTED in caps
    assert OffloadRod.FAST_PATH_COMPATIBLE in caps
    assert OffloadRod.OPTIONS_SUPPORTED not in caps
    assert OffloadRod(int(caps)) == caps


def test_dns_flag_values():
    assert DnsInterfaceSettingsFlag(0x0001) is DnsInterfaceSettingsFlag.IPV6
    assert DnsInterfaceSettingsFlag(0x0008) is DnsInterfaceSettingsFlag.REGISTRATION_ENABLED
    assert DnsInterfaceSettingsFlag(0x2000) is DnsInterfaceSettingsFlag.DOH_PROFILE


def test_dns_flag_combination_for_servers():
    flags = DnsInterfaceSettingsFlag.NAMESERVER | DnsInterfaceSettingsFlag.SEARCH_LIST
    assert DnsInterfaceSettingsFlag(0x0006) == flags
    assert DnsInterfaceSettingsFlag.NAMESERVER in flags
    assert DnsInterfaceSettingsFlag.SEARCH_LIST in flags
    assert DnsInterfaceSettingsFlag.IPV6 not in flags
    flags |= DnsInterfaceSettingsFlag.IPV6
    assert DnsInterfaceSettingsFlag.IPV6 in flags
    assert DnsInterfaceSettingsFlag(0x0007) == flags
    assert int(flags) == 0x0001 | 0x0002 | 0x0004


def test_notification_types_are_distinct_kinds():
    assert MibNotificationType(1) is MibNotificationType.ADD_INSTANCE
    assert MibNotificationType(2) is MibNotificationType.DELETE_INSTANCE
    assert MibNotificationType.ADD_INSTANCE != MibNotificationType.DELETE_INSTANCE
    assert len(list(MibNotificationType)) == len({m.name for m in MibNotificationType})
    assert MibNotificationType(int(MibNotificationType.INITIAL_NOTIFICATION)).name == "INITIAL_NOTIFICATION"