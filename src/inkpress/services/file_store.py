"""Storage for uploaded post images."""

from __future__ import annotations

import logging
import secrets
from pathlib import Path
from typing import Final

from inkpress.core.errors import ExternalServiceError, ValidationFailedError
from inkpress.core.settings import settings

logger = logging.getLogger(__name__)

ALLOWED_EXTENSIONS: Final[frozenset[str]] = frozenset({".jpeg", ".jpg", ".png"})


class ImageStore:
    """Write image bytes into a shared directory.

    File names are ``{identifier}-{random}{extension}``; uniqueness comes from
    the identifier, there is no locking.
    """

    def __init__(self, directory: Path) -> None:
        self.directory = Path(directory)

    @staticmethod
    def check_extension(extension: str) -> str:
        """Return the normalized extension or raise if it is not an accepted image type."""
        normalized = extension.lower()
        if normalized not in ALLOWED_EXTENSIONS:
            raise ValidationFailedError(
                "Unaccepted image, only .jpeg, .png, .jpg",
                field="blogImage",
            )
        return normalized

    def save(self, data: bytes, extension: str, identifier: str) -> str:
        """Store ``data`` and return the stored file name.

        Raises:
            ValidationFailedError: If the extension is not an accepted image type.
            ExternalServiceError: If the file cannot be written.
        """
        extension = self.check_extension(extension)
        name = f"{identifier}-{secrets.token_hex(4)}{extension}"
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            with open(self.directory / name, "xb") as handle:
                handle.write(data)
        except OSError as err:
            logger.error("Writing image %s failed: %s", name, err)
            raise ExternalServiceError("storing image failed", field="blogImage") from err

        logger.info("Stored image %s (%d bytes)", name, len(data))
        return name

    def delete(self, name: str) -> None:
        """Remove a stored file; a missing file is ignored."""
        try:
            (self.directory / name).unlink(missing_ok=True)
        except OSError as err:
            logger.error("Removing image %s failed: %s", name, err)
            return
        logger.info("Removed image %s", name)


def get_image_store() -> ImageStore:
    """Return the image store configured from application settings."""
    return ImageStore(settings.image_dir)
