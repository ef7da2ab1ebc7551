#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File name          : __main__.py
# Author             : Podalirius (@podalirius_)
# Date created       : 19 Oct 2026

import argparse
import json
import os
import sys

from describesddl import VERSION
from describesddl.describer import HumanDescriber
from describesddl.descriptor import decode
from describesddl.exceptions import MalformedInput


def parseArgs(argv=None):
    parser = argparse.ArgumentParser(prog="describesddl", add_help=True, description="Decode and describe the contents of an SDDL string")

    parser.add_argument("sddl", nargs="?", default=None, type=str, help="The SDDL string to decode, or a file containing it")
    parser.add_argument("-V", "--verbose", default=False, action="store_true", help="Verbose mode. (default: False)")

    output = parser.add_argument_group("output")
    output.add_argument("--summary", action="store_true", default=False, help="Generate a human readable summary of the rights.")
    output.add_argument("--describe", action="store_true", default=False, help="Describe the decoded structure.")

    api = parser.add_argument_group("api")
    api.add_argument("--api", action="store_true", default=False, help="Start the HTTP API instead of decoding a single string.")
    api.add_argument("--host", default="0.0.0.0", type=str, help="Interface to listen on. (default: 0.0.0.0)")
    api.add_argument("--port", default=8000, type=int, help="Port to listen on. (default: 8000)")

    if argv is None:
        argv = sys.argv[1:]

    if len(argv) == 0:
        parser.print_help()
        sys.exit(1)

    options = parser.parse_args(argv)

    if not options.api and options.sddl is None:
        parser.print_help()
        print("\n[+] An SDDL string is needed when --api is not set.\n")
        sys.exit(1)

    return options


def main(argv=None):
    options = parseArgs(argv)

    if options.api:
        print("DescribeSDDL v%s - by @podalirius_\n" % VERSION)
        from describesddl.api import serve
        serve(host=options.host, port=options.port)
        return 0

    sddl = options.sddl
    # Read value from a file
    if os.path.isfile(sddl):
        if options.verbose:
            print("[+] Loading SDDL string from file '%s'" % sddl)
        with open(sddl, "r") as f:
            sddl = f.read().strip()

    try:
        permissions = decode(sddl, verbose=options.verbose)
    except MalformedInput as e:
        print("[!] Error: %s" % e)
        return 1

    if options.verbose:
        print("[>] Final result " + "".center(80, "="))

    if options.describe:
        permissions.describe()

    if options.summary:
        print("\n" + "==[Summary]".ljust(80, '=') + "\n")
        HumanDescriber(permissions=permissions, verbose=options.verbose).summary()

    if not options.describe and not options.summary:
        print(json.dumps(permissions.to_dict()))

    return 0


if __name__ == "__main__":
    sys.exit(main())
