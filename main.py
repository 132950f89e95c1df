#!/usr/bin/env python3
"""
TouchTime - Main Entry Point
Feel the time on a touchscreen watch face. Long press to dismiss.
"""

import logging
import threading
from touchtime.core.listener import TouchTimeListener

def main():
    """Main entry point for the watch face."""
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    dismissed = threading.Event()
    listener = TouchTimeListener(on_dismiss=dismissed.set)

    if not listener.start():
        return

    try:
        while not dismissed.wait(0.1):
            pass
    except KeyboardInterrupt:
        print("\n👋 Stopping...")
    finally:
        listener.stop()

if __name__ == "__main__":
    main()
