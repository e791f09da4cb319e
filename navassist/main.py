"""Console application entry point.

Wires the navigation controller to a terminal: each input line is a key
command, and the status screen is redrawn after every command.

Keys:
    w/a/s/d  Move up/left/down/right.
    v        Toggle voice guidance.
    r        Reset the environment.
    b        Speak the current message.
    q        Quit.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, TextIO

from navassist.braille import encode
from navassist.config import validate_startup_config
from navassist.exceptions import NavigationError
from navassist.logging import bind_session, setup_logging
from navassist.navigation.announcer import LoggingAnnouncer
from navassist.navigation.controller import NavigationController
from navassist.render import render_status

if TYPE_CHECKING:
    from navassist.config import Settings
    from navassist.navigation.announcer import Announcer

logger = logging.getLogger(__name__)

MOVE_KEYS: dict[str, tuple[int, int]] = {
    "w": (0, -1),
    "s": (0, 1),
    "a": (-1, 0),
    "d": (1, 0),
}
VOICE_KEY = "v"
RESET_KEY = "r"
SPEAK_KEY = "b"
QUIT_KEY = "q"

HELP_TEXT = "Keys: w/a/s/d move, v voice, r reset, b speak, q quit"


class ConsoleApplication:
    """Terminal front end for a navigation session.

    Owns the voice toggle; the controller only learns about it through the
    ``voice_enabled`` argument of each call.
    """

    def __init__(
        self,
        settings: Settings,
        announcer: Announcer | None = None,
        output: TextIO | None = None,
    ) -> None:
        """Initialize the application.

        Args:
            settings: Navigation settings.
            announcer: Sink for spoken guidance. Logs announcements if omitted.
            output: Stream the status screen is drawn on. Defaults to sys.stdout.
        """
        self._settings = settings
        self._output = output or sys.stdout
        self._voice_enabled = settings.voice_enabled
        self._controller = NavigationController(
            settings,
            announcer if announcer is not None else LoggingAnnouncer(),
        )

    @property
    def controller(self) -> NavigationController:
        """Return the navigation session."""
        return self._controller

    @property
    def voice_enabled(self) -> bool:
        """Return whether voice guidance is on."""
        return self._voice_enabled

    def run(self, commands: TextIO) -> None:
        """Process commands until ``q`` or end of input.

        Args:
            commands: Stream of key commands, one per line.
        """
        self._controller.refresh(voice_enabled=self._voice_enabled)
        self._draw()
        self._write(HELP_TEXT)

        for line in commands:
            key = line.strip().lower()
            if not key:
                continue
            if key == QUIT_KEY:
                logger.info("Quit requested")
                break
            self.handle_key(key)
            self._draw()

    def handle_key(self, key: str) -> None:
        """Apply a single key command.

        Args:
            key: Lowercase key name.
        """
        if key in MOVE_KEYS:
            dx, dy = MOVE_KEYS[key]
            self._controller.move(dx, dy, voice_enabled=self._voice_enabled)
        elif key == VOICE_KEY:
            self._voice_enabled = not self._voice_enabled
            logger.info("Voice guidance %s", "enabled" if self._voice_enabled else "disabled")
            self._controller.refresh(voice_enabled=self._voice_enabled)
        elif key == RESET_KEY:
            self._controller.reset(voice_enabled=self._voice_enabled)
        elif key == SPEAK_KEY:
            self._controller.speak_current_message()
        else:
            logger.warning("Unknown key: %s", key)
            self._write(HELP_TEXT)

    def _draw(self) -> None:
        snapshot = self._controller.snapshot()
        voice = "on" if self._voice_enabled else "off"
        self._write(f"{render_status(snapshot, braille=encode(snapshot.message))}\nVoice: {voice}")

    def _write(self, text: str) -> None:
        self._output.write(text + "\n\n")
        self._output.flush()


def main() -> None:
    """CLI entry point: load settings and run the console loop on stdin."""
    setup_logging()

    try:
        settings = validate_startup_config()
    except NavigationError as error:
        logger.error("Startup failed", extra={"error": error.to_log_dict()})
        sys.exit(1)

    setup_logging(
        settings.log_level,
        settings.log_format,
        use_colors=settings.log_colors,
        force=True,
    )

    try:
        application = ConsoleApplication(settings)
    except NavigationError as error:
        logger.error("Navigation session failed", extra={"error": error.to_log_dict()})
        sys.exit(1)

    with bind_session(application.controller.session_id, grid_size=settings.grid_size):
        logger.info(
            "Starting navigation session (obstacles=%d, seed=%s)",
            settings.obstacle_count,
            settings.random_seed,
        )
        try:
            application.run(sys.stdin)
        except NavigationError as error:
            logger.error("Navigation session failed", extra={"error": error.to_log_dict()})
            sys.exit(1)
        except KeyboardInterrupt:
            logger.info("Interrupted")


if __name__ == "__main__":
    main()
