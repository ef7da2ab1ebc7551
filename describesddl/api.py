#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File name          : api.py
# Author             : Podalirius (@podalirius_)
# Date created       : 19 Oct 2026

import uvicorn
from fastapi import FastAPI, HTTPException

from describesddl import VERSION
from describesddl.descriptor import decode
from describesddl.exceptions import MalformedInput


app = FastAPI(title="DescribeSDDL API", version=VERSION)


@app.get("/sddl")
async def get_info():
    return {"status": "ok", "version": VERSION}


@app.get("/sddl/{sddl:path}")
async def decode_sddl(sddl: str):
    # Each request gets its own PermissionSet
    try:
        permissions = decode(sddl)
    except MalformedInput as e:
        raise HTTPException(status_code=400, detail=str(e))
    return permissions.to_dict()


def serve(host="0.0.0.0", port=8000):
    print("[+] API Interface started on %s:%d" % (host, port))
    uvicorn.run(app, host=host, port=port)
