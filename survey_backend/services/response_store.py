# survey_backend/services/response_store.py

import json
import logging
from pathlib import Path
from typing import Any

from survey_backend.services.errors import InternalFailure, InvalidParameter

logger = logging.getLogger(__name__)

# Response documents are opaque JSON: dict, list, str, number, bool or None.
JSONValue = Any

FILE_SUFFIX = "_responses.json"


def _reject_constant(name: str):
    # json.loads accepts NaN and Infinity, which no JSON response can carry.
    raise ValueError(f"Out of range float value {name} is not valid JSON")


class ResponseStore:
    """
    One JSON file per response category, kept under data_dir:

        <data_dir>/<type>_responses.json

    Reads return the whole document, writes replace it. There is no
    locking, so concurrent saves to the same type race and the last
    writer wins.
    """

    def __init__(self, data_dir):
        self.data_dir = Path(data_dir)

    def path_for(self, response_type: str) -> Path:
        if (
            "/" in response_type
            or "\\" in response_type
            or "\x00" in response_type
            or response_type in (".", "..")
        ):
            raise InvalidParameter(f"Invalid type parameter: {response_type!r}")
        return self.data_dir / f"{response_type}{FILE_SUFFIX}"

    def load(self, response_type: str) -> JSONValue:
        """
        Return the stored document for response_type.
        A category that was never saved reads as an empty list.
        An unreadable or unparsable file is not treated as empty: it raises
        InternalFailure with the underlying message.
        """
        file_path = self.path_for(response_type)
        logger.info("Reading responses for type %s from %s", response_type, file_path)

        try:
            raw = file_path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.info("File not found for type %s, returning empty list", response_type)
            return []
        except OSError as e:
            logger.error("Failed to read %s: %s", file_path, e)
            raise InternalFailure(str(e)) from e

        try:
            return json.loads(raw, parse_constant=_reject_constant)
        except ValueError as e:
            logger.error("Stored responses for type %s are not valid JSON: %s", response_type, e)
            raise InternalFailure(str(e)) from e

    def save(self, response_type: str, document: JSONValue) -> Path:
        file_path = self.path_for(response_type)
        logger.info("Writing responses for type %s to %s", response_type, file_path)

        try:
            payload = json.dumps(document, indent=2, ensure_ascii=False, allow_nan=False)
            self.data_dir.mkdir(parents=True, exist_ok=True)
            file_path.write_text(payload, encoding="utf-8")
        except (OSError, TypeError, ValueError) as e:
            logger.error("Failed to write responses for type %s: %s", response_type, e)
            raise InternalFailure(str(e)) from e

        logger.info("Successfully wrote responses for type %s", response_type)
        return file_path
