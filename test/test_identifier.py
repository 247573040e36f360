import isobus
from isobus.identifier import ParameterGroupNumber


def test_address_claim_identifier():
    mid = isobus.CANIdentifier(can_id=0x18EEFF80)
    assert mid.priority == 6
    assert mid.parameter_group_number == 0xEEFF
    assert mid.source_address == 0x80
    assert mid.pdu_format == 0xEE
    assert mid.is_pdu1_format
    assert mid.destination_address == ParameterGroupNumber.Address.GLOBAL
    assert mid.can_id == 0x18EEFF80


def test_peer_to_peer_identifier():
    mid = isobus.CANIdentifier(can_id=0x18EA2A80)
    assert mid.destination_address == 0x2A
    assert mid.pgn.value == 0xEA2A
    assert mid.pgn.is_pdu1_format


def test_broadcast_identifier():
    mid = isobus.CANIdentifier(can_id=0x00FEB201)
    assert mid.priority == 0
    assert mid.parameter_group_number == 65202
    assert not mid.is_pdu1_format
    assert mid.pgn.is_pdu2_format
    assert mid.destination_address == ParameterGroupNumber.Address.GLOBAL


def test_build_identifier():
    mid = isobus.CANIdentifier(priority=6, parameter_group_number=ParameterGroupNumber.PGN.ADDRESSCLAIM | 0xFF, source_address=0x80)
    assert mid.can_id == 0x18EEFF80
    assert mid == isobus.CANIdentifier(can_id=0x18EEFF80)

    # values are masked to their width
    mid = isobus.CANIdentifier(priority=9, parameter_group_number=0x7FFFF, source_address=0x1FF)
    assert mid.priority == 1
    assert mid.parameter_group_number == 0x3FFFF
    assert mid.source_address == 0xFF


def test_parameter_group_number_parts():
    pgn = ParameterGroupNumber(data_page=1, pdu_format=0xFE, pdu_specific=0xCA)
    assert pgn.value == 0x1FECA
    assert ParameterGroupNumber.from_value(0x1FECA).pdu_specific == 0xCA


def test_address_claim_needs_data_page_0():
    assert isobus.CANIdentifier(can_id=0x18EEFF80).is_address_claim
    assert isobus.CANIdentifier(can_id=0x18EE2A80).is_address_claim
    assert not isobus.CANIdentifier(can_id=0x19EEFF80).is_address_claim
    assert not isobus.CANIdentifier(can_id=0x1AEEFF80).is_address_claim
    assert not isobus.CANIdentifier(can_id=0x18EAFF80).is_address_claim
