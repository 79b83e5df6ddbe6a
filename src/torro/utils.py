"""
Small helpers shared across torro: file loading and peer ids.
"""
import logging
import random
import string
from pathlib import Path
from typing import Union

from . import config
from .error import BadFileRead

logger = logging.getLogger(__name__)


def read_file_bytes(path: Union[str, Path]) -> bytes:
    """
    Reads the whole file at ``path`` into memory.
    Raises BadFileRead (chained to the OSError) if it cannot be read.
    """
    path = Path(path)
    try:
        data = path.read_bytes()
    except OSError as exc:
        raise BadFileRead(path) from exc

    logger.debug("Read %d bytes from %s", len(data), path)
    return data


def generate_peer_id() -> bytes:
    """
    Builds an Azureus-style peer id, e.g. ``-TO0010-482915027364``.
    Not suitable as a secret.
    """
    prefix = f"-{config.CLIENT_PREFIX}{config.CLIENT_VERSION}-"
    suffix = "".join(random.choices(string.digits, k=config.PEER_ID_LENGTH - len(prefix)))
    return (prefix + suffix).encode()
