"""
Session Store - Keeps the session in one file on local disk.

The store:
- Uses a fixed storage key as the file name
- Writes the whole session at once (temp file, then replace)
- Treats a missing, unreadable or invalid blob as absent
- Never raises from load() or save()
"""

from __future__ import annotations
from pathlib import Path
import logging
import os
import tempfile

from pydantic import ValidationError
from pydantic_core import PydanticSerializationError

from ..engine_core.state import Session
from .schema import PersistedSession

logger = logging.getLogger(__name__)

STORAGE_KEY = "commander-life-state-v1"


class SessionStore:
    """
    File-based storage for the tracker session.

    Usage:
        store = SessionStore(state_dir="~/.lifecounter")

        session = store.load()
        if session is None:
            session = build_default()

        store.save(session)
    """

    def __init__(
        self,
        state_dir: str | Path | None = None,
        storage_key: str = STORAGE_KEY,
    ):
        if state_dir is None:
            state_dir = Path.home() / ".lifecounter"
        self.state_dir = Path(state_dir).expanduser()
        self.storage_key = storage_key

    @property
    def path(self) -> Path:
        return self.state_dir / f"{self.storage_key}.json"

    def load(self) -> Session | None:
        """
        Read the persisted session.

        Returns None if there is no blob or it can't be used.
        """
        path = self.path
        if not path.exists():
            logger.debug("No saved session at %s", path)
            return None

        try:
            text = path.read_text(encoding="utf-8")
            persisted = PersistedSession.model_validate_json(text)
        except ValidationError as e:
            logger.warning("Discarding invalid saved session at %s: %d error(s)", path, e.error_count())
            return None
        except (OSError, ValueError) as e:
            logger.warning("Could not read saved session at %s: %s", path, e)
            return None

        return persisted.to_session()

    def save(self, session: Session) -> bool:
        """
        Write the whole session.

        A failed write is logged and reported as False; the in-memory
        session is unaffected.
        """
        try:
            payload = PersistedSession.from_session(session).to_json()
        except ValidationError as e:
            logger.error("Refusing to save invalid session: %s", e)
            return False
        except PydanticSerializationError as e:
            logger.error("Could not serialize session: %s", e)
            return False

        tmp_name = None
        try:
            self.state_dir.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=self.state_dir, prefix=f".{self.storage_key}.", suffix=".tmp"
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload)
            os.replace(tmp_name, self.path)
            tmp_name = None
        except OSError as e:
            logger.error("Failed to save session to %s: %s", self.path, e)
            return False
        finally:
            if tmp_name is not None:
                Path(tmp_name).unlink(missing_ok=True)

        return True

    def clear(self):
        """Remove the saved session."""
        self.path.unlink(missing_ok=True)
