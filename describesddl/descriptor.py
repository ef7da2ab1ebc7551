#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File name          : descriptor.py
# Author             : Podalirius (@podalirius_)
# Date created       : 19 Oct 2026

from describesddl.acl import describe_acl, parse_acl_body
from describesddl.constants import SDDL_DACL, SDDL_GROUP, SDDL_OWNER, SDDL_SACL, SDDL_SECTION_MARKERS
from describesddl.exceptions import UnknownSection
from describesddl.resolver import resolve_sid


class PermissionSet(object):
    """
    The decoded form of an SDDL string: owner, primary group, and the
    discretionary and system access control lists with their inheritance flags.

    A PermissionSet is built once by decode(), its fields are read-only.

    Attributes:
        owner (str): The resolved owner SID, None if the "O:" section is absent.
        primary (str): The resolved primary group SID, None if the "G:" section is absent.
        dacl (tuple): The AccessControlEntry objects of the DACL, in evaluation order.
        daclInheritanceFlags (tuple): The resolved inheritance flags of the DACL.
        sacl (tuple): The AccessControlEntry objects of the SACL, in evaluation order.
        saclInheritanceFlags (tuple): The resolved inheritance flags of the SACL.
    """

    def __init__(self, owner=None, primary=None, dacl=(), daclInheritanceFlags=(), sacl=(), saclInheritanceFlags=()):
        self.__owner = owner
        self.__primary = primary
        self.__dacl = tuple(dacl)
        self.__daclInheritanceFlags = tuple(daclInheritanceFlags)
        self.__sacl = tuple(sacl)
        self.__saclInheritanceFlags = tuple(saclInheritanceFlags)

    @property
    def owner(self):
        return self.__owner

    @property
    def primary(self):
        return self.__primary

    @property
    def dacl(self):
        return self.__dacl

    @property
    def daclInheritanceFlags(self):
        return self.__daclInheritanceFlags

    @property
    def sacl(self):
        return self.__sacl

    @property
    def saclInheritanceFlags(self):
        return self.__saclInheritanceFlags

    def describe(self, indent=0):
        indent_prompt = " │ " * indent
        print("%s<PermissionSet>" % indent_prompt)
        if self.owner is not None:
            print("%s │ \x1b[93mOwner\x1b[0m   : \x1b[94m%s\x1b[0m" % (indent_prompt, self.owner))
        else:
            print("%s │ \x1b[93mOwner\x1b[0m   : \x1b[91mnot present\x1b[0m" % indent_prompt)
        if self.primary is not None:
            print("%s │ \x1b[93mPrimary\x1b[0m : \x1b[94m%s\x1b[0m" % (indent_prompt, self.primary))
        else:
            print("%s │ \x1b[93mPrimary\x1b[0m : \x1b[91mnot present\x1b[0m" % indent_prompt)
        describe_acl(name="DiscretionaryAccessControlList", flags=self.daclInheritanceFlags, entries=self.dacl, indent=(indent + 1))
        describe_acl(name="SystemAccessControlList", flags=self.saclInheritanceFlags, entries=self.sacl, indent=(indent + 1))
        print(''.join([" │ "]*indent + [" └─"]))

    def to_dict(self):
        return {
            "owner": self.owner,
            "primary": self.primary,
            "dacl": [ace.to_dict() for ace in self.dacl],
            "daclInheritFlags": list(self.daclInheritanceFlags),
            "sacl": [ace.to_dict() for ace in self.sacl],
            "saclInheritFlags": list(self.saclInheritanceFlags)
        }

    def __getitem__(self, key):
        return self.to_dict()[key]

    def keys(self):
        return self.to_dict().keys()

    def __eq__(self, other):
        if not isinstance(other, PermissionSet):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self):
        return "<PermissionSet owner=%r primary=%r dacl=%d sacl=%d>" % (self.owner, self.primary, len(self.dacl), len(self.sacl))


def split_sections(value):
    """
    Splits an SDDL string into its top-level sections.

    Only the first occurrence of each of the "O:", "G:", "D:" and "S:" markers is
    considered. Sections are sliced in the order they appear in the string, each one
    running up to the start of the next one.

    Args:
        value (str): The SDDL string, for example "O:BAG:SYD:(A;;FA;;;WD)".

    Returns:
        list: The (letter, body) pairs, for example [("O", "BA"), ("G", "SY"), ("D", "(A;;FA;;;WD)")].
    """
    indexes = []
    for marker in SDDL_SECTION_MARKERS:
        if marker in value:
            indexes.append(value.index(marker))
    indexes = sorted(indexes) + [len(value)]

    sections = []
    for k in range(len(indexes) - 1):
        letter, body = value[indexes[k]:indexes[k+1]].split(":", 1)
        sections.append((letter, body))
    return sections


def dispatch_section(letter, body, fields, verbose=False):
    """
    Decodes the body of one section and stores the result in the fields of the
    PermissionSet being built.

    Raises:
        UnknownSection: If the letter is not one of O, G, D or S.
    """
    if letter == SDDL_OWNER:
        fields["owner"] = resolve_sid(body)
    elif letter == SDDL_GROUP:
        fields["primary"] = resolve_sid(body)
    elif letter == SDDL_DACL:
        fields["daclInheritanceFlags"], fields["dacl"] = parse_acl_body(body, verbose=verbose)
    elif letter == SDDL_SACL:
        fields["saclInheritanceFlags"], fields["sacl"] = parse_acl_body(body, verbose=verbose)
    else:
        raise UnknownSection("Unknown SDDL section '%s:'" % letter, value=letter)
    return fields


def decode(value, verbose=False):
    """
    Decodes an SDDL string into a PermissionSet.

    Unknown codes (rights, flags, ace types, SIDs) are kept in their raw form.

    Args:
        value (str): The SDDL string.
        verbose (bool): Print parsing details.

    Returns:
        PermissionSet: The decoded permissions.

    Raises:
        MalformedAce: If an ACE does not have six fields.
        UnknownSection: If a section letter is not one of O, G, D or S.
    """
    if verbose:
        print("[>] Decoding SDDL string\n  | value: %s" % value)

    fields = {}
    for letter, body in split_sections(value):
        dispatch_section(letter, body, fields, verbose=verbose)

    return PermissionSet(**fields)
