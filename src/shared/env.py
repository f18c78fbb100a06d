"""Environment helpers for Docker-style ``*_FILE`` secrets."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Dict, MutableMapping, Optional

logger = logging.getLogger(__name__)

FILE_SUFFIX = "_FILE"


def load_secret_file_variables(
    environ: Optional[MutableMapping[str, str]] = None,
) -> Dict[str, str]:
    """
    Expose the contents of ``KEY_FILE`` files as ``KEY`` variables.

    A variable that is already set is never overwritten. Unreadable files are
    logged and skipped.

    Returns:
        The variables that were set, keyed by name.
    """
    env = os.environ if environ is None else environ
    loaded: Dict[str, str] = {}

    for key, file_path in list(env.items()):
        if not key.endswith(FILE_SUFFIX) or not file_path:
            continue
        target_key = key[: -len(FILE_SUFFIX)]
        if env.get(target_key):
            continue
        extra = {"key": key, "path": file_path}
        try:
            value = Path(file_path).read_text(encoding="utf-8").strip()
        except FileNotFoundError as exc:
            logger.warning("env.secret_file.missing", extra={**extra, "error": str(exc)})
            continue
        except UnicodeDecodeError as exc:
            logger.warning(
                "env.secret_file.decode_failed", extra={**extra, "error": str(exc)}
            )
            continue
        except OSError as exc:
            logger.warning(
                "env.secret_file.load_failed", extra={**extra, "error": str(exc)}
            )
            continue
        env[target_key] = value
        loaded[target_key] = value

    return loaded


load_secret_file_variables()
