#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File name          : __init__.py
# Author             : Podalirius (@podalirius_)
# Date created       : 19 Oct 2026

VERSION = "1.0"

from describesddl.exceptions import MalformedInput, MalformedAce, UnknownSection
from describesddl.resolver import resolve_code, resolve_codes, resolve_sid
from describesddl.ace import AccessControlEntry, AceEntry, parse_ace
from describesddl.acl import AccessControlList, parse_acl_body
from describesddl.descriptor import PermissionSet, decode, dispatch_section, split_sections
from describesddl.describer import HumanDescriber
