"""Tests for the parsing of DACL and SACL bodies."""

import pytest

from describesddl.acl import AccessControlList, parse_acl_body
from describesddl.exceptions import MalformedAce


def test_acl_without_flags():
    flags, entries = parse_acl_body("(A;;FA;;;SY)(A;;FR;;;BU)")
    assert flags == ()
    assert [ace.accountSid for ace in entries] == ["Local system", "Built-in users"]


def test_acl_with_flags():
    flags, entries = parse_acl_body("PAI(D;;GA;;;BG)")
    assert flags == ("DDL_PROTECTED", "SDDL_AUTO_INHERITED")
    assert len(entries) == 1
    assert entries[0].aceType == "ACCESS DENIED"


def test_acl_with_two_character_flag():
    flags, entries = parse_acl_body("AI(A;ID;FA;;;SY)")
    assert flags == ("SDDL_AUTO_INHERITED",)
    assert entries[0].aceFlags == ("ACE IS INHERITED",)


def test_acl_unknown_flags_are_kept():
    flags, entries = parse_acl_body("XXAI(A;;FA;;;SY)")
    assert flags == ("XX", "SDDL_AUTO_INHERITED")


def test_acl_flags_only():
    flags, entries = parse_acl_body("P")
    assert flags == ("DDL_PROTECTED",)
    assert entries == ()


def test_acl_empty_body():
    flags, entries = parse_acl_body("")
    assert flags == ()
    assert entries == ()


def test_acl_preserves_entries_order():
    acl = AccessControlList("(D;;GA;;;BG)(A;;GA;;;BA)(A;;GR;;;WD)")
    assert len(acl) == 3
    assert [ace.aceType for ace in acl] == ["ACCESS DENIED", "ACCESS ALLOWED", "ACCESS ALLOWED"]
    assert acl[2].accountSid == "Everyone"


def test_acl_missing_closing_parenthesis():
    flags, entries = parse_acl_body("(A;;GA;;;BA")
    assert entries[0].accountSid == "Built-in administrators"


def test_acl_malformed_ace():
    with pytest.raises(MalformedAce):
        parse_acl_body("(A;;GA;;;BA)(A;;RP)")


def test_acl_protected_flag_followed_by_unknown_code():
    flags, entries = parse_acl_body("PX(A;;FA;;;SY)")
    assert flags == ("PX",)
    assert entries[0].accountSid == "Local system"
