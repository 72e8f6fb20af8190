#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Liberator Storefront - lead-generation wizards.
Main entry point for the application.
"""

import sys

from PyQt5.QtWidgets import QApplication
from PyQt5.QtCore import Qt

from app.config import Config
from app.main_window import StorefrontWindow
from repositories.local_storage import create_storage
from utils.logger import setup_logger
from ui.font_utils import set_application_default_font


def main():
    """Main application entry point."""

    # Set Qt attributes BEFORE creating QApplication
    QApplication.setAttribute(Qt.AA_EnableHighDpiScaling, True)
    QApplication.setAttribute(Qt.AA_UseHighDpiPixmaps, True)

    logger = setup_logger()

    try:
        app = QApplication(sys.argv)
        app.setApplicationName(Config.APP_NAME)
        app.setApplicationVersion(Config.VERSION)
        app.setOrganizationName(Config.ORGANIZATION)

        # Set before any widget is created
        set_application_default_font()

        logger.info("=" * 80)
        logger.info(f"Starting {Config.APP_NAME} {Config.VERSION}")
        logger.info("=" * 80)

        storage = create_storage()
        logger.info(f"Checkpoint storage backend: {Config.STORAGE_BACKEND}")

        window = StorefrontWindow(storage)
        window.show()
        logger.info(">> Storefront window displayed")

        try:
            exit_code = app.exec_()
        finally:
            storage.close()
        logger.info(f"Application closed with exit code: {exit_code}")
        sys.exit(exit_code)

    except Exception as e:
        error_msg = f"Fatal error during application startup: {e}"
        print(f"\n[ERROR] {error_msg}")
        print(f"\nPlease check {Config.LOG_PATH} for details")
        logger.exception(error_msg)
        sys.exit(1)


if __name__ == "__main__":
    main()
