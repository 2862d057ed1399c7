"""
Configuration
"""
import os
from pathlib import Path

APP_NAME = "iching"
APP_VERSION = "1.0.0"
APP_DESCRIPTION = """
Ever wish you could know the future? Well now you can!
Divine the answers to life's greatest mysteries using
the ancient Chinese method of the I-Ching.

Learn more on Wikipedia:
https://en.wikipedia.org/wiki/I_Ching
"""

# Logging
LOG_LEVEL = os.getenv("ICHING_LOG_LEVEL", "WARNING").upper()
LOG_FORMAT = "%(levelname)s: %(message)s"

# Reference data
PACKAGE_DATA_DIR = Path(__file__).resolve().parent / "data"
HEXAGRAM_DATA_PATH = Path(os.getenv("ICHING_HEXAGRAM_DATA", PACKAGE_DATA_DIR / "hexagrams.json"))

# Casting
DEFAULT_METHOD = os.getenv("ICHING_DEFAULT_METHOD", "ancient-yarrow-stalk")
