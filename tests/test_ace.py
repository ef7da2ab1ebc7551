"""Tests for the parsing of ACE bodies."""

import pytest

from describesddl.ace import AccessControlEntry, AceEntry, parse_ace
from describesddl.exceptions import MalformedAce, MalformedInput


def test_parse_ace_fields():
    ace = parse_ace("A;CIOI;FR;;;AU")
    assert ace.aceType == "ACCESS ALLOWED"
    assert ace.aceFlags == ("CONTAINER INHERIT", "OBJECT INHERIT")
    assert ace.rights == ("FILE_GENERIC_READ",)
    assert ace.objectGuid == ""
    assert ace.inheritObjectGuid == ""
    assert ace.accountSid == "Authenticated users"


def test_parse_object_ace_keeps_guids_verbatim():
    ace = parse_ace("OA;;CR;00299570-246d-11d0-a768-00aa006e0529;bf967aba-0de6-11d0-a285-00aa003049e2;S-1-5-32-548")
    assert ace.aceType == "OBJECT ACCESS ALLOWED"
    assert ace.rights == ("ADS_RIGHT_DS_CONTROL_ACCESS",)
    assert ace.objectGuid == "00299570-246d-11d0-a768-00aa006e0529"
    assert ace.inheritObjectGuid == "bf967aba-0de6-11d0-a285-00aa003049e2"
    assert ace.accountSid == "Account Operators"


def test_parse_ace_unknown_codes_are_kept():
    ace = parse_ace("QQ;CIXX;GAYY;;;ZZ")
    assert ace.aceType == "QQ"
    assert ace.aceFlags == ("CONTAINER INHERIT", "XX")
    assert ace.rights == ("GENERIC_ALL", "YY")
    assert ace.accountSid == "ZZ"


def test_parse_ace_extra_fields_are_ignored():
    ace = parse_ace("A;;GA;;;SY;(condition)")
    assert ace.accountSid == "Local system"


def test_parse_ace_too_few_fields():
    with pytest.raises(MalformedAce) as excinfo:
        parse_ace("A;;RP")
    assert excinfo.value.value == "A;;RP"


def test_malformed_ace_is_malformed_input():
    with pytest.raises(MalformedInput):
        parse_ace("A;;GA;;")


def test_ace_serialization_keys():
    ace = parse_ace("D;;GA;;;BG")
    assert ace.to_dict() == {
        "accountsid": "Built-in guests",
        "aceType": "ACCESS DENIED",
        "aceflags": [],
        "rights": ["GENERIC_ALL"],
        "objectguid": "",
        "InheritObjectGuid": "",
    }
    assert ace["aceType"] == "ACCESS DENIED"
    assert list(ace.keys()) == ["accountsid", "aceType", "aceflags", "rights", "objectguid", "InheritObjectGuid"]


def test_ace_serialization_is_a_copy():
    ace = parse_ace("A;;GA;;;WD")
    ace.to_dict()["rights"].append("WRITE_DAC")
    assert ace.rights == ("GENERIC_ALL",)


def test_ace_equality():
    assert parse_ace("A;;GA;;;WD") == AceEntry("A;;GA;;;WD")
    assert parse_ace("A;;GA;;;WD") != parse_ace("A;;GR;;;WD")


def test_ace_describe(capsys):
    AccessControlEntry("A;;GA;;;WD").describe(ace_number=1)
    out = capsys.readouterr().out
    assert "AccessControlEntry #1" in out
    assert "GENERIC_ALL" in out
    assert "Everyone" in out


def test_ace_fields_are_read_only():
    ace = parse_ace("A;;GA;;;WD")
    with pytest.raises(AttributeError):
        ace.aceType = "ACCESS DENIED"
    with pytest.raises(AttributeError):
        ace.rights = ("WRITE_DAC",)
    assert not hasattr(ace, "parse")
    assert ace.aceType == "ACCESS ALLOWED"
