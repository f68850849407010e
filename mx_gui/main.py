"""Console entrypoint for the export selection GUI."""

from __future__ import annotations

import sys
from pathlib import Path


def main(data_path: Path | None = None, locale: str | None = None) -> int:
    """Launch the GUI application."""
    # Configure logging before anything else
    from mx_common.api import configure_logging

    configure_logging()

    # Import Qt after logging is configured
    from PySide6.QtWidgets import QApplication

    from mx_gui.app import ServiceContainer, create_app
    from mx_gui.settings import GUISettings

    settings = GUISettings.from_env()
    if locale:
        settings = settings.model_copy(update={"locale": locale})

    app = QApplication.instance() or QApplication(sys.argv)
    app.setApplicationName("Export Selection")
    app.setOrganizationName("mx")

    services = ServiceContainer(settings, data_path=data_path)
    window = create_app(services)
    window.show()
    services.loader.load_all()

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
