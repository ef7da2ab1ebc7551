#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File name          : ace.py
# Author             : Podalirius (@podalirius_)
# Date created       : 19 Oct 2026

from describesddl.constants import SDDL_ACE_FIELDS_COUNT, SDDL_ACE_FLAGS, SDDL_ACE_TYPES, SDDL_RIGHTS
from describesddl.exceptions import MalformedAce
from describesddl.resolver import resolve_code, resolve_codes, resolve_sid


class AccessControlEntry(object):
    """
    Represents one Access Control Entry (ACE) of an SDDL string.

    The ACE body (without its surrounding parentheses) is made of six fields separated by ';':

        ace_type;ace_flags;rights;object_guid;inherit_object_guid;account_sid

    The entry is parsed once at construction, its fields are read-only.

    Attributes:
        value (str): The raw ACE body.
        aceType (str): The resolved ace type, for example "ACCESS ALLOWED".
        aceFlags (tuple): The resolved ace flags, in order.
        rights (tuple): The resolved access rights, in order.
        objectGuid (str): The raw object GUID, may be empty.
        inheritObjectGuid (str): The raw inherited object GUID, may be empty.
        accountSid (str): The resolved trustee SID.

    Methods:
        describe(ace_number=0, indent=0): Prints a formatted description of the ACE.
        to_dict(): Returns the serializable form of the ACE.

    See: https://learn.microsoft.com/en-us/windows/win32/secauthz/ace-strings
    """

    def __init__(self, value, verbose=False):
        self.verbose = verbose
        self.__value = value
        #
        self.__data = {}
        #
        self.__parse()

    def __parse(self):
        if self.verbose:
            print("[>] Parsing %s\n  | value: %s" % (__class__, self.__value))

        fields = self.__value.split(";")
        if len(fields) < SDDL_ACE_FIELDS_COUNT:
            raise MalformedAce(
                "ACE '%s' has %d fields, %d expected" % (self.__value, len(fields), SDDL_ACE_FIELDS_COUNT),
                value=self.__value
            )

        # The ace type is a single code of one or two characters
        self.__data = {
            "accountsid": resolve_sid(fields[5]),
            "aceType": resolve_code(SDDL_ACE_TYPES, fields[0]),
            "aceflags": tuple(resolve_codes(SDDL_ACE_FLAGS, fields[1])),
            "rights": tuple(resolve_codes(SDDL_RIGHTS, fields[2])),
            "objectguid": fields[3],
            "InheritObjectGuid": fields[4]
        }

        if self.verbose:
            self.describe()

    @property
    def value(self):
        return self.__value

    @property
    def aceType(self):
        return self.__data["aceType"]

    @property
    def aceFlags(self):
        return self.__data["aceflags"]

    @property
    def rights(self):
        return self.__data["rights"]

    @property
    def objectGuid(self):
        return self.__data["objectguid"]

    @property
    def inheritObjectGuid(self):
        return self.__data["InheritObjectGuid"]

    @property
    def accountSid(self):
        return self.__data["accountsid"]

    def describe(self, ace_number=0, indent=0):
        indent_prompt = " │ " * indent
        print("%s<AccessControlEntry #%d>" % (indent_prompt, ace_number))
        properties = ["AceType", "AceFlags", "Rights", "ObjectGuid", "InheritObjectGuid", "AccountSid"]
        padding_len = max([len(p) for p in properties])
        print("%s │ \x1b[93m%s\x1b[0m : \x1b[96m%s\x1b[0m" % (indent_prompt, "AceType".ljust(padding_len), self.aceType))
        print("%s │ \x1b[93m%s\x1b[0m : \x1b[96m%s\x1b[0m" % (indent_prompt, "AceFlags".ljust(padding_len), ' | '.join(self.aceFlags)))
        print("%s │ \x1b[93m%s\x1b[0m : \x1b[96m%s\x1b[0m" % (indent_prompt, "Rights".ljust(padding_len), ' | '.join(self.rights)))
        if len(self.objectGuid) != 0:
            print("%s │ \x1b[93m%s\x1b[0m : \x1b[96m%s\x1b[0m" % (indent_prompt, "ObjectGuid".ljust(padding_len), self.objectGuid))
        if len(self.inheritObjectGuid) != 0:
            print("%s │ \x1b[93m%s\x1b[0m : \x1b[96m%s\x1b[0m" % (indent_prompt, "InheritObjectGuid".ljust(padding_len), self.inheritObjectGuid))
        print("%s │ \x1b[93m%s\x1b[0m : \x1b[94m%s\x1b[0m" % (indent_prompt, "AccountSid".ljust(padding_len), self.accountSid))
        print(''.join([" │ "]*indent + [" └─"]))

    def to_dict(self):
        return {
            key: (list(value) if type(value) == tuple else value)
            for key, value in self.__data.items()
        }

    def __getitem__(self, key):
        return self.to_dict()[key]

    def keys(self):
        return self.__data.keys()

    def __eq__(self, other):
        if not isinstance(other, AccessControlEntry):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self):
        return "<AccessControlEntry '%s'>" % self.value


# Aliases

AceEntry = AccessControlEntry


def parse_ace(value, verbose=False):
    """
    Parses one ACE body (without its surrounding parentheses).

    Raises:
        MalformedAce: If the body has less than six ';'-delimited fields.
    """
    return AccessControlEntry(value=value, verbose=verbose)
