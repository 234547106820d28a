"""Client-side session storage.

Keeps the session token and the UI theme preference in a small JSON file,
so they survive between runs.
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel

Theme = Literal["light", "dark"]


class SessionState(BaseModel):
    """Persisted client state."""

    token: str | None = None
    theme: Theme = "light"


class SessionStore:
    """JSON file backed session store.

    A missing or unreadable file behaves like an empty session.
    """

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path).expanduser()

    def load(self) -> SessionState:
        if not self.path.exists():
            return SessionState()
        try:
            return SessionState.model_validate_json(self.path.read_text())
        except ValueError:
            return SessionState()

    def save(self, state: SessionState) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(state.model_dump_json())

    @property
    def token(self) -> str | None:
        return self.load().token

    def set_token(self, token: str) -> None:
        self.save(self.load().model_copy(update={"token": token}))

    def clear_token(self) -> None:
        self.save(self.load().model_copy(update={"token": None}))

    @property
    def theme(self) -> Theme:
        return self.load().theme

    def set_theme(self, theme: Theme) -> None:
        self.save(SessionState(token=self.load().token, theme=theme))

    def toggle_theme(self) -> Theme:
        """Switch between light and dark; returns the new theme."""
        theme: Theme = "dark" if self.theme == "light" else "light"
        self.set_theme(theme)
        return theme
