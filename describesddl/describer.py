#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File name          : describer.py
# Author             : Podalirius (@podalirius_)
# Date created       : 19 Oct 2026

from describesddl.constants import SDDL_ACE_FLAGS, ExtendedRights, PropertySet


class HumanDescriber(object):
    """
    Prints a human readable summary of the ACEs of a PermissionSet,
    one sentence per entry.
    """

    def __init__(self, permissions, verbose=False):
        self.verbose = verbose
        self.permissions = permissions

    def summary(self):
        print("Other objects have the following rights on this object:")
        self.explain_acl(entries=self.permissions.dacl)

        if len(self.permissions.sacl) != 0:
            print("\nThe following accesses to this object are audited:")
            self.explain_acl(entries=self.permissions.sacl)

    def explain_acl(self, entries):
        entry_id = 0
        for ace in entries:
            entry_id += 1
            print(self.explain_ace(ace=ace, entry_id=entry_id))

    def explain_ace(self, ace, entry_id=0):
        if "ALLOWED" in ace.aceType:
            str_ace_type = "\x1b[92mallowed\x1b[0m"
        elif "DENIED" in ace.aceType:
            str_ace_type = "\x1b[91mnot allowed\x1b[0m"
        elif "AUDIT" in ace.aceType or "ALARM" in ace.aceType:
            str_ace_type = "\x1b[93maudited\x1b[0m"
        else:
            str_ace_type = "\x1b[93m%s\x1b[0m" % ace.aceType

        if len(ace.rights) != 0:
            str_rights = ', '.join(ace.rights)
        else:
            str_rights = "nothing"

        # Parse target
        str_target = "me"
        if len(ace.objectGuid) != 0:
            str_target = self.resolve_name(ace.objectGuid)
            if str_target != ace.objectGuid:
                str_target = "my " + str_target

        if len(ace.inheritObjectGuid) != 0:
            str_target += " (inherited from the %s)" % self.resolve_name(ace.inheritObjectGuid)

        # Check inheritance
        if SDDL_ACE_FLAGS["ID"] in ace.aceFlags:
            return "%03d. '\x1b[94m%s\x1b[0m' is %s to \x1b[93m%s\x1b[0m on \x1b[95m%s\x1b[0m, by inheritance." % (entry_id, ace.accountSid, str_ace_type, str_rights, str_target)
        else:
            return "%03d. '\x1b[94m%s\x1b[0m' is %s to \x1b[93m%s\x1b[0m on \x1b[95m%s\x1b[0m" % (entry_id, ace.accountSid, str_ace_type, str_rights, str_target)

    def resolve_name(self, objectGuid):
        guid = objectGuid.lower()

        # Parse Extended Rights from the docs
        if guid in [_.value for _ in ExtendedRights]:
            return "Extended Right %s" % ExtendedRights(guid).name

        # Parse Property Set from the docs
        elif guid in [_.value for _ in PropertySet]:
            return "Property Set %s" % PropertySet(guid).name

        return objectGuid
