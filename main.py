"""Collapsible Catalog — Entry Point."""
import logging
import sys
from app.application import create_application, setup_logging
from app.main_window import MainWindow


def main():
    setup_logging(logging.DEBUG if "--debug" in sys.argv else logging.INFO)
    app = create_application(sys.argv)
    window = MainWindow()
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
