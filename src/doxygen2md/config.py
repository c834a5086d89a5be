"""Local configuration for doxygen2md."""

from __future__ import annotations

import os
from pathlib import Path


DEFAULT_XML_INPUT_DIR = "doxygen/xml"
DEFAULT_IMAGES_OUTPUT_DIR = "static/img/doxygen"
DEFAULT_LOG_LEVEL = "WARNING"

INDEX_XML_FILE_NAME = "index.xml"
DOXYFILE_XML_FILE_NAME = "Doxyfile.xml"

_TRUTHY = {"1", "true", "yes"}

# Folder where Doxygen wrote index.xml, Doxyfile.xml and the compound files.
DOXYGEN2MD_XML_INPUT_PATH = Path(os.getenv("DOXYGEN2MD_XML_INPUT_PATH", DEFAULT_XML_INPUT_DIR)).expanduser()
DOXYGEN2MD_IMAGES_OUTPUT_PATH = Path(
    os.getenv("DOXYGEN2MD_IMAGES_OUTPUT_PATH", DEFAULT_IMAGES_OUTPUT_DIR)
).expanduser()
DOXYGEN2MD_VERBOSE = os.getenv("DOXYGEN2MD_VERBOSE", "false").strip().lower() in _TRUTHY
DOXYGEN2MD_LOG_LEVEL = os.getenv("DOXYGEN2MD_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
