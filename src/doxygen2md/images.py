"""Copy the local images referenced by the parsed documentation."""

from __future__ import annotations

import logging
from pathlib import Path

from doxygen2md.file_utils import copy_file_async, mkdir_async
from doxygen2md.xml_parser import ParseContext

logger = logging.getLogger(__name__)


async def copy_images(
    context: ParseContext,
    xml_input_path: Path,
    images_output_path: Path,
) -> list[Path]:
    """Copy every image registered during the parse next to the site pages.

    Doxygen copies HTML images into its XML output folder, so each name is
    looked up there.

    Args:
        context: The parse context holding the registered images.
        xml_input_path: The Doxygen XML folder.
        images_output_path: Destination folder, created when needed.

    Returns:
        Destination paths of the copied files, in first-seen order.
    """
    names = context.image_names()
    if not names:
        return []

    copied: list[Path] = []
    for name in names:
        source = xml_input_path / name
        if not source.is_file():
            logger.warning(
                "Image %s not found in %s, skipped",
                name,
                xml_input_path,
                extra={"image": name, "xml_input_path": str(xml_input_path)},
            )
            continue
        destination = images_output_path / name
        await mkdir_async(destination.parent, parents=True, exist_ok=True)
        copied.append(await copy_file_async(source, destination))

    logger.info("%d images copied", len(copied), extra={"images": len(copied)})
    return copied
