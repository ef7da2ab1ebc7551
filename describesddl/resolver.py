#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File name          : resolver.py
# Author             : Podalirius (@podalirius_)
# Date created       : 19 Oct 2026

from describesddl.constants import SDDL_SID_ALIASES, SDDL_WELL_KNOWN_SIDS


def resolve_code(table, code):
    """
    Resolves a short SDDL code against a lookup table.

    Args:
        table (Mapping): The lookup table, from short code to display name.
        code (str): The code to resolve.

    Returns:
        str: The display name of the code, or the code itself if it is unknown.
    """
    return table.get(code, code)


def resolve_codes(table, value):
    """
    Splits a field made of concatenated SDDL codes (rights, ace flags, inheritance flags)
    and resolves each of them against a lookup table, preserving their order.

    Codes are two characters long, except for a few one-character codes (like "P" in
    the inheritance flags). At each position, a known two-character code is taken first.
    A known one-character code is only taken when it ends the field or is followed by a
    known code, otherwise the raw two-character chunk is kept. A last lone character
    that is not a known code is dropped.

    Args:
        table (Mapping): The lookup table, from short code to display name.
        value (str): The field to split, for example "CCDCLCSWRPWPDTLOCRSDRCWDWO".

    Returns:
        list: The display names, unknown codes are kept as is.
    """
    resolved = []
    k = 0
    while k < len(value):
        chunk = value[k:k+2]
        if len(chunk) == 2 and chunk in table:
            resolved.append(resolve_code(table, chunk))
            k += 2
        elif value[k] in table and (k + 1 == len(value) or value[k+1:k+3] in table):
            resolved.append(resolve_code(table, value[k]))
            k += 1
        elif len(chunk) == 2:
            resolved.append(resolve_code(table, chunk))
            k += 2
        else:
            break
    return resolved


def resolve_sid(value):
    """
    Resolves the display name of a SID token of an SDDL string.

    Tokens longer than two characters are literal SIDs (like "S-1-5-18") and are
    matched exactly against the well known SIDs. Shorter tokens are SID aliases
    (like "BA" or "WD"). Unknown tokens are returned unchanged.

    Args:
        value (str): The SID token.

    Returns:
        str: The display name of the SID.
    """
    if len(value) > 2:
        return resolve_code(SDDL_WELL_KNOWN_SIDS, value)
    else:
        return resolve_code(SDDL_SID_ALIASES, value)
