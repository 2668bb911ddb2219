from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def parse_dictionary(data: bytes, *, origin: str = "<bytes>") -> list[str]:
    """Split newline-delimited candidates, dropping empty lines."""
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError as exc:
        logger.warning(
            "%s is not valid UTF-8 (%s); undecodable bytes were replaced", origin, exc
        )
        text = data.decode("utf-8", errors="replace")
    return [line for line in text.splitlines() if line]


def load_dictionary(path: Path) -> list[str]:
    candidates = parse_dictionary(path.read_bytes(), origin=str(path))
    logger.info("Loaded %d candidates from %s", len(candidates), path)
    return candidates
