from __future__ import annotations

import logging

from fastapi import FastAPI, HTTPException
from pydantic import ValidationError

from . import SDK_VERSION
from .version import VersionInfo, read_version, version_file_path

logger = logging.getLogger(__name__)

app = FastAPI(title="SDK Version API", version=SDK_VERSION)


@app.get("/health")
def health() -> dict:
    return {"status": "ok", "sdk_version": SDK_VERSION}


@app.get("/version", response_model=VersionInfo)
def version_get() -> VersionInfo:
    try:
        return read_version()
    except FileNotFoundError as err:
        logger.warning("Version file not found: %s", version_file_path())
        raise HTTPException(status_code=404, detail="Version file not found") from err
    except OSError as err:
        logger.warning("Version file %s could not be read: %s", version_file_path(), err)
        raise HTTPException(status_code=500, detail="Version file could not be read") from err
    except ValidationError as err:
        logger.warning("Version file %s is malformed: %s", version_file_path(), err)
        raise HTTPException(status_code=500, detail="Version file is malformed") from err
