"""
Application Initialization
==========================
This module constructs the MVC architecture and starts the Qt Event Loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Sets up logging from the configured level / file.
2. Instantiates the Data Model (CalculatorState).
3. Instantiates the Main Window (View), passing the model in.
"""
import logging
import sys

from reverseffmi.application import create_app
from reverseffmi.config import LOG_FILE, LOG_LEVEL
from reverseffmi.logging_config import setup_logging
from reverseffmi.model.state import CalculatorState
from reverseffmi.view.main_window import MainWindow

logger = logging.getLogger(__name__)


def main() -> int:
    # 1. Setup Logging (Console + Optional File)
    # REVERSEFFMI_LOG_LEVEL=DEBUG shows every proposed slider value
    setup_logging(level=LOG_LEVEL, log_file=LOG_FILE)

    # 2. Create the Qt Application
    app = create_app()

    # 3. Initialize the Data Model
    state = CalculatorState()

    # 4. Initialize the Main Window, passing the model
    window = MainWindow(state)
    window.show()
    logger.info("Main window shown.")

    # 5. Start Event Loop
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
