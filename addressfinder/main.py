#!/usr/bin/env python3
"""Address Finder: type-ahead address search backed by a geocoding service."""

import sys
import os
import argparse

# Add the addressfinder directory to the path (skip when frozen via PyInstaller)
if not getattr(sys, 'frozen', False):
    sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from logging_config import setup_logging
from PyQt6.QtWidgets import QApplication
from PyQt6.QtCore import QSettings
from theme import Theme
from app import MainWindow
from secure_config import delete_secret, set_secret


def main():
    parser = argparse.ArgumentParser(description="Address Finder")
    parser.add_argument(
        "--set-api-key",
        metavar="KEY",
        default=None,
        help="Store the geocoding API key (system keyring when available) and exit",
    )
    parser.add_argument(
        "--clear-api-key",
        action="store_true",
        help="Remove the stored geocoding API key and exit",
    )
    args, qt_args = parser.parse_known_args()

    setup_logging()

    settings = QSettings("AddressFinder", "AddressFinder")
    if args.set_api_key is not None:
        set_secret("geocoding_api_key", args.set_api_key, fallback_store=settings)
        print("API key stored")
        return
    if args.clear_api_key:
        delete_secret("geocoding_api_key", fallback_store=settings)
        print("API key removed")
        return

    app = QApplication([sys.argv[0]] + qt_args)
    app.setApplicationName("Address Finder")
    app.setOrganizationName("AddressFinder")
    app.setStyleSheet(Theme.global_stylesheet())

    window = MainWindow(settings=settings)
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
