"""Entry point for the hourlog time tracker.

This script launches the ``TimeTrackerApp`` defined in ``hourlog.ui``:
a window with a sidebar for navigating between the dashboard, the time
entry form and the project manager.  Settings are read from the
environment (or a ``.env`` file) by ``hourlog.config``.
"""

import logging

from hourlog.config import Settings
from hourlog.ui import TimeTrackerApp


def main() -> None:
    settings = Settings.from_env()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    # Instantiate and run the primary application window
    app = TimeTrackerApp(settings)
    app.mainloop()


if __name__ == "__main__":
    main()
