#!/usr/bin/env python3
"""
8Pass settings - headless entry point.
Initializes logging, creates the process-wide settings and reports them.
"""

import sys

from PyQt6.QtCore import QCoreApplication

from eightpass import setup_logging, AppSettings
from eightpass.settings_manager import APP_NAME, APP_ORGANIZATION


def main():
    """
    Application entry point.
    """
    app = QCoreApplication(sys.argv)
    app.setApplicationName(APP_NAME)
    app.setOrganizationName(APP_ORGANIZATION)

    logger = setup_logging()
    logger.info(f"🚀 Starting {APP_NAME} settings...")

    settings = AppSettings.instance()
    logger.info(f"Instance id: {settings.instance_id}")
    logger.info(f"Analytics consent: {settings.allow_analytics.name}")
    logger.info(f"Integrated browser: {settings.use_integrated_browser}, search in passwords: {settings.search_in_pw}")
    logger.info(f"Sync toast: {settings.sync_toast}, toasts shown: {settings.toast_shown_count}")
    logger.info(f"Auto update: {settings.auto_update} (WLAN only: {settings.auto_update_wlan})")
    logger.info(f"Hide recycle bin: {settings.hide_recycle_bin}, password set: {settings.password is not None}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
