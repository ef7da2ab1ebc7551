"""Tests for the human readable summary."""

from describesddl import HumanDescriber, decode


def test_explain_allowed_ace():
    permissions = decode("D:(A;;GAWD;;;WD)")
    line = HumanDescriber(permissions).explain_ace(permissions.dacl[0], entry_id=1)
    assert line.startswith("001. ")
    assert "Everyone" in line
    assert "allowed" in line
    assert "GENERIC_ALL, WRITE_DAC" in line
    assert line.endswith("me\x1b[0m")


def test_explain_denied_inherited_ace():
    permissions = decode("D:(D;ID;GA;;;BG)")
    line = HumanDescriber(permissions).explain_ace(permissions.dacl[0], entry_id=2)
    assert "not allowed" in line
    assert line.endswith(", by inheritance.")


def test_explain_extended_right():
    permissions = decode("D:(OA;;CR;1131F6AA-9C07-11D1-F79F-00C04FC2DCD2;;BA)")
    line = HumanDescriber(permissions).explain_ace(permissions.dacl[0])
    assert "my Extended Right DS_REPLICATION_GET_CHANGES" in line


def test_explain_unknown_guid():
    permissions = decode("D:(OA;;RP;11111111-2222-3333-4444-555555555555;4828cc14-1437-45bc-9b07-ad6f015e5f28;AU)")
    line = HumanDescriber(permissions).explain_ace(permissions.dacl[0])
    assert "on \x1b[95m11111111-2222-3333-4444-555555555555 (inherited from the 4828cc14-1437-45bc-9b07-ad6f015e5f28)" in line


def test_summary_lists_sacl(capsys):
    permissions = decode("D:(A;;GA;;;SY)S:(AU;FA;GA;;;WD)")
    HumanDescriber(permissions).summary()
    out = capsys.readouterr().out
    assert "Other objects have the following rights on this object:" in out
    assert "are audited" in out
    assert "audited" in out.splitlines()[-1]
