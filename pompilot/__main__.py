"""Allow running Pom Pilot as a module: python -m pompilot."""

import sys

from loguru import logger
from PyQt6.QtWidgets import QApplication

from .log import configure_logging
from .settings import load_settings
from .app import PomPilotApp


def main() -> None:
    settings = load_settings()
    configure_logging(settings.log_level)

    app = QApplication(sys.argv)
    app.setApplicationName("Pom Pilot")
    app.setOrganizationName("Pom Pilot")

    window = PomPilotApp(settings)
    window.show()
    logger.info("Pom Pilot ready")

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
