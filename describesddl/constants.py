#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File name          : constants.py
# Author             : Podalirius (@podalirius_)
# Date created       : 19 Oct 2026

from enum import Enum
from types import MappingProxyType


# Section markers, in canonical order
SDDL_SECTION_MARKERS = ("O:", "G:", "D:", "S:")

SDDL_OWNER = "O"
SDDL_GROUP = "G"
SDDL_DACL = "D"
SDDL_SACL = "S"

# Number of ';'-delimited fields of an ACE:
# (ace_type;ace_flags;rights;object_guid;inherit_object_guid;account_sid)
SDDL_ACE_FIELDS_COUNT = 6


# https://learn.microsoft.com/en-us/windows/win32/secauthz/ace-strings
SDDL_RIGHTS = MappingProxyType({
    # Generic access rights
    "GA": "GENERIC_ALL",
    "GR": "GENERIC_READ",
    "GW": "GENERIC_WRITE",
    "GX": "GENERIC_EXECUTE",
    # Standard access rights
    "RC": "READ_CONTROL",
    "SD": "DELETE",
    "WD": "WRITE_DAC",
    "WO": "WRITE_OWNER",
    # Directory service object access rights
    "RP": "ADS_RIGHT_DS_READ_PROP",
    "WP": "ADS_RIGHT_DS_WRITE_PROP",
    "CC": "ADS_RIGHT_DS_CREATE_CHILD",
    "DC": "ADS_RIGHT_DS_DELETE_CHILD",
    "LC": "ADS_RIGHT_ACTRL_DS_LIST",
    "SW": "ADS_RIGHT_DS_SELF",
    "LO": "ADS_RIGHT_DS_LIST_OBJECT",
    "DT": "ADS_RIGHT_DS_DELETE_TREE",
    "CR": "ADS_RIGHT_DS_CONTROL_ACCESS",
    # File access rights
    "FA": "FILE_ALL_ACCESS",
    "FR": "FILE_GENERIC_READ",
    "FW": "FILE_GENERIC_WRITE",
    "FX": "FILE_GENERIC_EXECUTE",
    # Registry key access rights
    "KA": "KEY_ALL_ACCESS",
    "KR": "KEY_READ",
    "KW": "KEY_WRITE",
    "KX": "KEY_EXECUTE",
    # Mandatory label rights
    "NR": "SYSTEM_MANDATORY_LABEL_NO_READ_UP",
    "NW": "SYSTEM_MANDATORY_LABEL_NO_WRITE_UP",
    "NX": "SYSTEM_MANDATORY_LABEL_NO_EXECUTE",
})

# https://learn.microsoft.com/en-us/windows/win32/secauthz/security-descriptor-string-format
SDDL_INHERITANCE_FLAGS = MappingProxyType({
    "P": "DDL_PROTECTED",
    "AI": "SDDL_AUTO_INHERITED",
    "AR": "SDDL_AUTO_INHERIT_REQ",
})

SDDL_ACE_TYPES = MappingProxyType({
    "A": "ACCESS ALLOWED",
    "D": "ACCESS DENIED",
    "OA": "OBJECT ACCESS ALLOWED",
    "OD": "OBJECT ACCESS DENIED",
    "AU": "SYSTEM AUDIT",
    "AL": "SYSTEM ALARM",
    "OU": "OBJECT SYSTEM AUDIT",
    "OL": "OBJECT SYSTEM ALARM",
    "ML": "SYSTEM MANDATORY LABEL",
    "XA": "CALLBACK ACCESS ALLOWED",
    "XD": "CALLBACK ACCESS DENIED",
    "ZA": "CALLBACK OBJECT ACCESS ALLOWED",
    "SP": "SYSTEM SCOPED POLICY ID",
})

SDDL_ACE_FLAGS = MappingProxyType({
    "CI": "CONTAINER INHERIT",
    "OI": "OBJECT INHERIT",
    "NP": "NO PROPAGATE",
    "IO": "INHERITANCE ONLY",
    "ID": "ACE IS INHERITED",
    "SA": "SUCCESSFUL ACCESS AUDIT",
    "FA": "FAILED ACCESS AUDIT",
})

# https://learn.microsoft.com/en-us/windows/win32/secauthz/sid-strings
SDDL_SID_ALIASES = MappingProxyType({
    "O": "Owner",
    "AO": "Account operators",
    "PA": "Group Policy administrators",
    "RU": "Alias to allow previous Windows 2000",
    "IU": "Interactively logged-on user",
    "AN": "Anonymous logon",
    "LA": "Local administrator",
    "AU": "Authenticated users",
    "LG": "Local guest",
    "BA": "Built-in administrators",
    "LS": "Local service account",
    "BG": "Built-in guests",
    "SY": "Local system",
    "BO": "Backup operators",
    "NU": "Network logon user",
    "BU": "Built-in users",
    "NO": "Network configuration operators",
    "CA": "Certificate server administrators",
    "NS": "Network service account",
    "CG": "Creator group",
    "PO": "Printer operators",
    "CO": "Creator owner",
    "PS": "Personal self",
    "DA": "Domain administrators",
    "PU": "Power users",
    "DC": "Domain computers",
    "RS": "RAS servers group",
    "DD": "Domain controllers",
    "RD": "Terminal server users",
    "DG": "Domain guests",
    "RE": "Replicator",
    "DU": "Domain users",
    "RC": "Restricted code",
    "EA": "Enterprise administrators",
    "SA": "Schema administrators",
    "ED": "Enterprise domain controllers",
    "SO": "Server operators",
    "WD": "Everyone",
    "SU": "Service logon user",
    # Mandatory integrity levels
    "LW": "Low integrity level",
    "ME": "Medium integrity level",
    "MP": "Medium plus integrity level",
    "HI": "High integrity level",
    "SI": "System integrity level",
})

# https://learn.microsoft.com/en-us/windows-server/identity/ad-ds/manage/understand-security-identifiers
SDDL_WELL_KNOWN_SIDS = MappingProxyType({
    "S-1-0": "Null Authority",
    "S-1-0-0": "Nobody",
    "S-1-1": "World Authority",
    "S-1-1-0": "Everyone",
    "S-1-2": "Local Authority",
    "S-1-2-0": "Local",
    "S-1-2-1": "Console Logon",
    "S-1-3": "Creator Authority",
    "S-1-3-0": "Creator Owner",
    "S-1-3-1": "Creator Group",
    "S-1-3-2": "Creator Owner Server",
    "S-1-3-3": "Creator Group Server",
    "S-1-3-4": "Owner Rights",
    "S-1-4": "Non-unique Authority",
    "S-1-5": "NT Authority",
    "S-1-5-1": "Dialup",
    "S-1-5-2": "Network",
    "S-1-5-3": "Batch",
    "S-1-5-4": "Interactive",
    "S-1-5-6": "Service",
    "S-1-5-7": "Anonymous",
    "S-1-5-8": "Proxy",
    "S-1-5-9": "Enterprise Domain Controllers",
    "S-1-5-10": "Principal Self",
    "S-1-5-11": "Authenticated Users",
    "S-1-5-12": "Restricted Code",
    "S-1-5-13": "Terminal Server Users",
    "S-1-5-14": "Remote Interactive Logon",
    "S-1-5-15": "This Organization",
    "S-1-5-17": "This Organization",
    "S-1-5-18": "Local System",
    "S-1-5-19": "NT Authority",
    "S-1-5-20": "NT Authority",
    "S-1-5-32-544": "Administrators",
    "S-1-5-32-545": "Users",
    "S-1-5-32-546": "Guests",
    "S-1-5-32-547": "Power Users",
    "S-1-5-32-548": "Account Operators",
    "S-1-5-32-549": "Server Operators",
    "S-1-5-32-550": "Print Operators",
    "S-1-5-32-551": "Backup Operators",
    "S-1-5-32-552": "Replicators",
    "S-1-5-32-554": "BUILTIN\\Pre-Windows 2000 Compatible Access",
    "S-1-5-32-555": "BUILTIN\\Remote Desktop Users",
    "S-1-5-32-556": "BUILTIN\\Network Configuration Operators",
    "S-1-5-32-557": "BUILTIN\\Incoming Forest Trust Builders",
    "S-1-5-32-558": "BUILTIN\\Performance Monitor Users",
    "S-1-5-32-559": "BUILTIN\\Performance Log Users",
    "S-1-5-32-560": "BUILTIN\\Windows Authorization Access Group",
    "S-1-5-32-561": "BUILTIN\\Terminal Server License Servers",
    "S-1-5-32-562": "BUILTIN\\Distributed COM Users",
    "S-1-5-32-569": "BUILTIN\\Cryptographic Operators",
    "S-1-5-32-573": "BUILTIN\\Event Log Readers",
    "S-1-5-32-574": "BUILTIN\\Certificate Service DCOM Access",
    "S-1-5-32-575": "BUILTIN\\RDS Remote Access Servers",
    "S-1-5-32-576": "BUILTIN\\RDS Endpoint Servers",
    "S-1-5-32-577": "BUILTIN\\RDS Management Servers",
    "S-1-5-32-578": "BUILTIN\\Hyper-V Administrators",
    "S-1-5-32-579": "BUILTIN\\Access Control Assistance Operators",
    "S-1-5-32-580": "BUILTIN\\Remote Management Users",
    "S-1-5-64-10": "NTLM Authentication",
    "S-1-5-64-14": "SChannel Authentication",
    "S-1-5-64-21": "Digest Authentication",
    "S-1-5-80": "NT Service",
    "S-1-5-80-0": "All Services",
    "S-1-5-83-0": "NT VIRTUAL MACHINE\\Virtual Machines",
    "S-1-5-80-956008885-3418522649-1831038044-1853292631-2271478464": "Trusted Installer",
    "S-1-16-0": "Untrusted Mandatory Level",
    "S-1-16-4096": "Low Mandatory Level",
    "S-1-16-8192": "Medium Mandatory Level",
    "S-1-16-8448": "Medium Plus Mandatory Level",
    "S-1-16-12288": "High Mandatory Level",
    "S-1-16-16384": "System Mandatory Level",
    "S-1-16-20480": "Protected Process Mandatory Level",
    "S-1-16-28672": "Secure Process Mandatory Level",
})


class PropertySet(Enum):
    """
    PropertySet is an enumeration of GUIDs representing property sets in Active Directory.
    These GUIDs appear in the object_guid and inherit_object_guid fields of object ACEs,
    to grant or deny permissions to read or write a whole set of properties on AD objects.

    https://learn.microsoft.com/en-us/openspecs/windows_protocols/ms-adts/177c0db5-fa12-4c31-b75a-473425ce9cca
    """
    DOMAIN_PASSWORD_AND_LOCKOUT_POLICIES = "c7407360-20bf-11d0-a768-00aa006e0529"
    GENERAL_INFORMATION = "59ba2f42-79a2-11d0-9020-00c04fc2d3cf"
    ACCOUNT_RESTRICTIONS = "4c164200-20c0-11d0-a768-00aa006e0529"
    LOGON_INFORMATION = "5f202010-79a5-11d0-9020-00c04fc2d4cf"
    GROUP_MEMBERSHIP = "bc0ac240-79a9-11d0-9020-00c04fc2d4cf"
    PHONE_AND_MAIL_OPTIONS = "e45795b2-9455-11d1-aebd-0000f80367c1"
    PERSONAL_INFORMATION = "77b5b886-944a-11d1-aebd-0000f80367c1"
    WEB_INFORMATION = "e45795b3-9455-11d1-aebd-0000f80367c1"
    PUBLIC_INFORMATION = "e48d0154-bcf8-11d1-8702-00c04fb96050"
    REMOTE_ACCESS_INFORMATION = "037088f8-0ae1-11d2-b422-00a0c968f939"
    DNS_HOST_NAME_ATTRIBUTES = "72e39547-7b18-11d1-adef-00c04fd8d5cd"
    PRIVATE_INFORMATION = "91e647de-d96f-4b70-9557-d63ff4f3ccd8"


class ExtendedRights(Enum):
    """
    ExtendedRights is an enumeration of GUIDs of the extended rights of Active Directory
    most commonly found in the object ACEs of SDDL strings (replication, password resets,
    certificate enrollment, ...).

    https://learn.microsoft.com/en-us/openspecs/windows_protocols/ms-adts/443fe66f-c9b7-4c50-8c24-c708692bbf1d
    """
    ALLOWED_TO_AUTHENTICATE = "68b1d179-0d15-4d4f-ab71-46152e79a7bc"
    APPLY_GROUP_POLICY = "edacfd8f-ffb3-11d1-b41d-00a0c968f939"
    CERTIFICATE_ENROLLMENT = "0e10c968-78fb-11d2-90d4-00c04f79dc55"
    DS_REPLICATION_GET_CHANGES = "1131f6aa-9c07-11d1-f79f-00c04fc2dcd2"
    DS_REPLICATION_GET_CHANGES_ALL = "1131f6ad-9c07-11d1-f79f-00c04fc2dcd2"
    DS_REPLICATION_GET_CHANGES_IN_FILTERED_SET = "89e95b76-444d-4c62-991a-0facbeda640c"
    DS_REPLICATION_MANAGE_TOPOLOGY = "1131f6ac-9c07-11d1-f79f-00c04fc2dcd2"
    DS_REPLICATION_SYNCHRONIZE = "1131f6ab-9c07-11d1-f79f-00c04fc2dcd2"
    MIGRATE_SID_HISTORY = "ba33815a-4f93-4c76-87f3-57574bff8109"
    SEND_AS = "ab721a54-1e2f-11d0-9819-00aa0040529b"
    RECEIVE_AS = "ab721a56-1e2f-11d0-9819-00aa0040529b"
    UNEXPIRE_PASSWORD = "ccc2dc7d-a6ad-4a7a-8846-c04e3cc53501"
    USER_CHANGE_PASSWORD = "ab721a53-1e2f-11d0-9819-00aa0040529b"
    USER_FORCE_CHANGE_PASSWORD = "00299570-246d-11d0-a768-00aa006e0529"
