"""Recipe photo lookup and thumbnail generation.

Each recipe may have a photo stored beside its document as ``<id>.jpg`` with
a matching ``<id>_thumbnail.jpg``. The site builder only attaches photos when
both files exist; :func:`generate_thumbnails` creates the missing thumbnails.
"""

from __future__ import annotations

import dataclasses as dc
import logging
import typing as typ

from PIL import Image

from ._constants import IMAGE_TEMPLATE, THUMBNAIL_SIZE, THUMBNAIL_TEMPLATE

if typ.TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)

_THUMBNAIL_SUFFIX = "_thumbnail"


@dc.dataclass(slots=True, frozen=True)
class ImagePair:
    """A full-size photo and its thumbnail."""

    thumbnail: Path
    full: Path

    def names(self) -> tuple[str, str]:
        """Return ``(thumbnail, full)`` file names as attached to partials."""
        return (self.thumbnail.name, self.full.name)


def find_image_pair(directory: Path, recipe_id: str) -> ImagePair | None:
    """Return the photo pair for ``recipe_id`` in ``directory`` if both exist."""
    full = directory / IMAGE_TEMPLATE.format(stem=recipe_id)
    thumbnail = directory / THUMBNAIL_TEMPLATE.format(stem=recipe_id)
    if full.is_file() and thumbnail.is_file():
        return ImagePair(thumbnail=thumbnail, full=full)
    return None


def generate_thumbnails(recipe_dir: Path) -> list[Path]:
    """Create ``<stem>_thumbnail.jpg`` for every photo that lacks one.

    Photos are found recursively below ``recipe_dir``. Files that are already
    thumbnails, and photos whose thumbnail exists, are skipped. Thumbnails are
    bounded by ``THUMBNAIL_SIZE`` while keeping the aspect ratio.

    Returns
    -------
    list[Path]
        Paths of the thumbnails that were written.

    Raises
    ------
    FileNotFoundError
        If ``recipe_dir`` is not a directory.
    """
    if not recipe_dir.is_dir():
        msg = f"Recipe directory '{recipe_dir}' not found."
        raise FileNotFoundError(msg)
    written: list[Path] = []
    for path in sorted(recipe_dir.rglob("*.jpg")):
        if path.stem.endswith(_THUMBNAIL_SUFFIX):
            logger.info("SKIP %s", path)
            continue
        thumbnail = path.with_name(THUMBNAIL_TEMPLATE.format(stem=path.stem))
        if thumbnail.exists():
            logger.info("SKIP %s", path)
            continue
        logger.info("generating thumbnail for %s", path)
        with Image.open(path) as source:
            image = source.copy()
        image.thumbnail(THUMBNAIL_SIZE)
        image.save(thumbnail)
        written.append(thumbnail)
    return written


__all__ = ["ImagePair", "find_image_pair", "generate_thumbnails"]
