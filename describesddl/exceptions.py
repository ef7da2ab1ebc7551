#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File name          : exceptions.py
# Author             : Podalirius (@podalirius_)
# Date created       : 19 Oct 2026


class MalformedInput(Exception):
    """
    Raised when an SDDL string cannot be decoded. Decoding is aborted as a whole,
    no partially populated PermissionSet is ever returned.

    Attributes:
        value (str): The fragment of the SDDL string that could not be decoded.
    """

    def __init__(self, message, value=None):
        super(MalformedInput, self).__init__(message)
        self.value = value


class MalformedAce(MalformedInput):
    """An ACE body does not split into at least six ';'-delimited fields."""
    pass


class UnknownSection(MalformedInput):
    """A section letter outside of O, G, D and S reached the dispatcher."""
    pass
