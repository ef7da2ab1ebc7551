#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File name          : acl.py
# Author             : Podalirius (@podalirius_)
# Date created       : 19 Oct 2026

from describesddl.ace import AccessControlEntry
from describesddl.constants import SDDL_INHERITANCE_FLAGS
from describesddl.resolver import resolve_codes


class AccessControlList(object):
    """
    Represents the body of a DACL ("D:") or SACL ("S:") section of an SDDL string.

    The body is an optional prefix of inheritance flags followed by a list of
    parenthesized ACEs, for example "PAI(A;;FA;;;SY)(A;;FR;;;BU)".

    Attributes:
        value (str): The raw ACL body.
        flags (tuple): The resolved inheritance flags, in order.
        entries (tuple): The AccessControlEntry objects, in evaluation order.

    See: https://learn.microsoft.com/en-us/windows/win32/secauthz/security-descriptor-string-format
    """

    def __init__(self, value, verbose=False):
        self.verbose = verbose
        self.value = value
        #
        self.flags = ()
        self.entries = ()
        #
        self.parse()

    def parse(self):
        if self.verbose:
            print("[>] Parsing %s\n  | value: %s" % (__class__, self.value))

        aces = self.value
        if not self.value.startswith("("):
            if "(" in self.value:
                inheritance_flags = self.value[:self.value.index("(")]
                aces = self.value[self.value.index("("):]
            else:
                # No ACE at all, the whole body is made of flags
                inheritance_flags = self.value
                aces = ""
            self.flags = tuple(resolve_codes(SDDL_INHERITANCE_FLAGS, inheritance_flags))

        entries = []
        # The first segment is always empty, it is the one before the first '('
        for ace in aces.split("(")[1:]:
            if len(ace) == 0:
                continue
            if ace.endswith(")"):
                ace = ace[:-1]
            entries.append(AccessControlEntry(value=ace, verbose=self.verbose))
        self.entries = tuple(entries)

        if self.verbose:
            self.describe()

    def describe(self, name="AccessControlList", indent=0):
        describe_acl(name=name, flags=self.flags, entries=self.entries, indent=indent)

    def __getitem__(self, key):
        return self.entries[key]

    def __iter__(self):
        yield from self.entries

    def __len__(self):
        return len(self.entries)


def parse_acl_body(value, verbose=False):
    """
    Parses the body of a DACL or SACL section.

    Args:
        value (str): The ACL body, for example "PAI(A;;FA;;;SY)".
        verbose (bool): Print parsing details.

    Returns:
        tuple: (inheritance_flags, entries), both in input order.
    """
    acl = AccessControlList(value=value, verbose=verbose)
    return acl.flags, acl.entries


def describe_acl(name, flags, entries, indent=0):
    """
    Prints the tree of an ACL: its inheritance flags, then each of its entries.
    """
    indent_prompt = " │ " * indent
    print("%s<%s (%d entries)>" % (indent_prompt, name, len(entries)))
    if len(flags) != 0:
        print("%s │ \x1b[93mFlags\x1b[0m : \x1b[96m%s\x1b[0m" % (indent_prompt, ' | '.join(flags)))
    ace_number = 0
    for ace in entries:
        ace_number += 1
        ace.describe(ace_number=ace_number, indent=(indent + 1))
    print(''.join([" │ "]*indent + [" └─"]))
