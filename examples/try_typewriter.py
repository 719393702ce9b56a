#!/usr/bin/env python3
"""
Interactive Typewriter Test Script.

This script demonstrates the TypewriterInterface API.
Run it with the typewriter attached to print a line, ring the bell and
echo keystrokes typed on the machine for ten seconds.
"""

import sys
import time
import logging
from pathlib import Path

# Add SDK to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from erika import (
    CharacterEvent,
    DeviceMode,
    SerialTransport,
    TypewriterInterface,
    UnknownCode,
)

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(levelname)s - %(message)s'
)

DEVICE = sys.argv[1] if len(sys.argv) > 1 else "/dev/ttyUSB0"


def main():
    print(f"Opening typewriter on {DEVICE}...")
    erika = TypewriterInterface(SerialTransport(DEVICE, timeout=0.5))
    erika.open()

    mode = DeviceMode.LOCAL
    try:
        print("Printing a test line...")
        erika.send_text("Hallo Welt! Grüße aus Python, 3€.\n")
        erika.bell(500)

        print("\nSwitching to remote mode, type on the machine (10s)...")
        mode = erika.enable_remote_mode()
        deadline = time.monotonic() + 10
        while time.monotonic() < deadline:
            try:
                event = erika.read_event()
            except UnknownCode as e:
                print(f"\n[unknown 0x{e.byte:02X}]", end="")
                continue
            if event is None:
                continue
            if isinstance(event, CharacterEvent):
                print(event.character, end="")
            else:
                print(f" <{event.code.name}> ", end="")
            sys.stdout.flush()

    except KeyboardInterrupt:
        print("\nInterrupted by user.")
    finally:
        if mode is DeviceMode.REMOTE:
            erika.disable_remote_mode()
        print("\nClosing...")
        erika.close()
        print("Done.")


if __name__ == "__main__":
    main()
