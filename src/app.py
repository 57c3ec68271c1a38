"""Main TUI application for localconfig."""

import logging
from pathlib import Path

from textual.app import App
from textual.binding import Binding

from constants import SYNC_TIMEOUT, get_state_home
from controller import ConfigViewModel
from errors import ConfigError
from remote import RemoteSync
from store import ConfigStore
from ui import ConfigScreen

log = logging.getLogger(__name__)

# Load CSS from file next to the ui package
APP_CSS = (Path(__file__).parent / "ui" / "styles.css").read_text()


def _get_log_path() -> Path:
    """Get the log file path using XDG Base Directory spec."""
    log_dir = get_state_home()
    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir / "localconfig.log"


def setup_logging(level: int = logging.DEBUG) -> None:
    """Send logs to the XDG state directory (the terminal belongs to the TUI)."""
    logging.basicConfig(
        filename=str(_get_log_path()),
        level=level,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )


class LocalConfigApp(App):
    """TUI for browsing and editing named configurations."""

    TITLE = "Local Config"
    ENABLE_COMMAND_PALETTE = False
    CSS = APP_CSS

    BINDINGS = [
        Binding("q", "quit", "Quit", show=True),
    ]

    def __init__(
        self,
        store: ConfigStore,
        remote: RemoteSync,
        version: str = "0.0",
        sync_timeout: float = SYNC_TIMEOUT,
        initial_selection: str | None = None,
    ) -> None:
        super().__init__()
        self.version = version
        self._mounted_ready = False
        self._startup_errors: list[ConfigError] = []
        self.view_model = ConfigViewModel(
            store,
            remote,
            on_error=self._on_view_model_error,
            sync_timeout=sync_timeout,
            initial_selection=initial_selection,
        )

    def on_mount(self) -> None:
        """Called when the app is mounted."""
        log.info(f"localconfig {self.version} started")
        self.push_screen(ConfigScreen(self.view_model))
        for error in self._startup_errors:
            self._show_error(error)
        self._startup_errors.clear()
        self._mounted_ready = True

    def on_unmount(self) -> None:
        self.view_model.close()

    def _on_view_model_error(self, error: ConfigError) -> None:
        """Show a transient notice for errors the view-model reports."""
        if not self._mounted_ready:
            # Reported while constructing the view-model; shown once mounted
            self._startup_errors.append(error)
            return
        self._show_error(error)

    def _show_error(self, error: ConfigError) -> None:
        self.notify(str(error), title=error.title, severity="error")
