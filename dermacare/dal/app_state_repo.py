import json
import logging
from typing import Any, Callable, List, Optional, Set
from pydantic import TypeAdapter
from dermacare.models import HistoryEntry, UserProfile
from dermacare.dal.database import DuckDBManager, db_manager
from dermacare.config import (
    HISTORY_LIMIT,
    STORAGE_KEY_PROFILE,
    STORAGE_KEY_HISTORY,
    STORAGE_KEY_DETAILED_MODE,
    STORAGE_KEY_FIRST_TIME,
)

logger = logging.getLogger(__name__)

_history_adapter = TypeAdapter(List[HistoryEntry])


class AppState:
    """
    Per-session application state: profile, display mode, scan history and onboarding flag.

    Each key loads on its own. A key whose stored value could not be read or
    parsed stays at its default and is marked unloaded; changes derived from
    an unloaded value (appending history, toggling the mode) stay in memory
    and are not written over what is stored. Replacing a key outright writes
    it and marks it loaded again. Storage write failures are logged and never
    roll back memory.
    """

    def __init__(self, session_id: str, store: DuckDBManager):
        self.session_id = session_id
        self.store = store
        self.user_profile: Optional[UserProfile] = None
        self.is_detailed_mode = False
        self.skin_history: List[HistoryEntry] = []
        self.is_first_time = True
        self.unloaded_keys: Set[str] = set()

    def load(self) -> "AppState":
        profile = self._read(STORAGE_KEY_PROFILE, UserProfile.model_validate_json)
        if profile is not None:
            self.user_profile = profile
        history = self._read(STORAGE_KEY_HISTORY, _history_adapter.validate_json)
        if history is not None:
            self.skin_history = history
        detailed = self._read(STORAGE_KEY_DETAILED_MODE, json.loads)
        if detailed is not None:
            self.is_detailed_mode = bool(detailed)
        first_time = self._read(STORAGE_KEY_FIRST_TIME, json.loads)
        if first_time is not None:
            self.is_first_time = bool(first_time)
        return self

    def _read(self, key: str, parse: Callable[[str], Any]):
        try:
            raw = self.store.get_item(self.session_id, key)
            return parse(raw) if raw else None
        except Exception as e:
            self.unloaded_keys.add(key)
            logger.error(f"Error loading {key} for session {self.session_id}: {e}")
            return None

    def persist(self):
        """Writes every loaded key; used after bulk changes."""
        self._write_profile()
        self._write(STORAGE_KEY_DETAILED_MODE, json.dumps(self.is_detailed_mode))
        self._write_history()
        self._write(STORAGE_KEY_FIRST_TIME, json.dumps(self.is_first_time))

    def _write(self, key: str, value: str):
        if key in self.unloaded_keys:
            logger.warning(f"Not saving {key} for session {self.session_id}: stored value was never loaded")
            return
        try:
            self.store.set_item(self.session_id, key, value)
        except Exception as e:
            logger.error(f"Error saving {key} for session {self.session_id}: {e}")

    def _write_profile(self):
        if self.user_profile is None:
            if STORAGE_KEY_PROFILE in self.unloaded_keys:
                return
            try:
                self.store.remove_item(self.session_id, STORAGE_KEY_PROFILE)
            except Exception as e:
                logger.error(f"Error removing {STORAGE_KEY_PROFILE} for session {self.session_id}: {e}")
        else:
            self._write(STORAGE_KEY_PROFILE, self.user_profile.model_dump_json())

    def _write_history(self):
        self._write(STORAGE_KEY_HISTORY, _history_adapter.dump_json(self.skin_history).decode("utf-8"))

    def set_user_profile(self, profile: Optional[UserProfile]):
        self.user_profile = profile
        self.unloaded_keys.discard(STORAGE_KEY_PROFILE)
        self._write_profile()

    def toggle_detailed_mode(self) -> bool:
        self.is_detailed_mode = not self.is_detailed_mode
        self._write(STORAGE_KEY_DETAILED_MODE, json.dumps(self.is_detailed_mode))
        return self.is_detailed_mode

    def add_history(self, entry: HistoryEntry):
        # Newest first, capped
        self.skin_history = [entry] + self.skin_history[:HISTORY_LIMIT - 1]
        self._write_history()

    def clear_history(self):
        self.skin_history = []
        self.unloaded_keys.discard(STORAGE_KEY_HISTORY)
        self._write_history()

    def set_first_time(self, value: bool):
        self.is_first_time = value
        self.unloaded_keys.discard(STORAGE_KEY_FIRST_TIME)
        self._write(STORAGE_KEY_FIRST_TIME, json.dumps(value))


class AppStateRepository:
    """Loads session state from the store on every call; nothing is held between requests."""

    def __init__(self, store: DuckDBManager = db_manager):
        self.store = store

    def get_state(self, session_id: str) -> AppState:
        return AppState(session_id, self.store).load()

    def clear_session(self, session_id: str):
        self.store.clear_namespace(session_id)
        logger.info(f"Cleared state for session {session_id}")


app_state_repo = AppStateRepository()
