"""Clipboard Image Service - Reads the clipboard image through the bundled helper script."""

import logging
import subprocess
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

DEFAULT_HELPER_SCRIPT = Path(__file__).resolve().parent.parent / "scripts" / "clipboard-image.sh"


class ClipboardImageError(Exception):
    """Raised when no usable image could be read from the clipboard."""


class ClipboardImageService:
    """
    Fetches the current clipboard image as PNG bytes.

    The helper script writes the image to a temporary file and prints its
    path on stdout; on failure it exits non-zero with a reason on stderr.
    The temporary file is always removed once read.
    """

    def __init__(self, helper_script: Optional[Path] = None, shell: str = "/bin/bash"):
        self.helper_script = helper_script or DEFAULT_HELPER_SCRIPT
        self.shell = shell

    def read_image(self) -> bytes:
        """
        Run the helper and return the clipboard image bytes.

        Raises:
            ClipboardImageError: If the helper fails or the image cannot be read.
        """
        try:
            completed = subprocess.run(
                [self.shell, str(self.helper_script)],
                capture_output=True,
                text=True,
                check=False,
            )
        except OSError as e:
            logger.warning("Clipboard helper could not be started: %s", e)
            raise ClipboardImageError(f"Unable to execute script for image: {e}") from e

        stdout_line = _first_line(completed.stdout)
        if completed.returncode != 0 or not stdout_line:
            message = _first_line(completed.stderr) or "No image found in clipboard"
            logger.warning("Clipboard helper exited with %s: %s", completed.returncode, message)
            raise ClipboardImageError(message)

        image_path = Path(stdout_line)
        logger.debug("Clipboard image saved at %s", image_path)
        try:
            return image_path.read_bytes()
        except OSError as e:
            raise ClipboardImageError(f"Error processing image: {e}") from e
        finally:
            image_path.unlink(missing_ok=True)


def _first_line(output: Optional[str]) -> str:
    if not output:
        return ""
    lines = output.strip().splitlines()
    return lines[0].strip() if lines else ""
