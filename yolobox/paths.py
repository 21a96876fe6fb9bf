"""
Annotation path derivation.

An image's YOLO annotations live next to it, in a file with the same
name and a .txt extension.
"""

import re

from yolobox.errors import UnsupportedImageFormat


# Image extensions that have an annotation file
IMAGE_EXTENSIONS = {'.jpg', '.jpeg', '.png'}

# Anchored to the end so only the final extension is replaced
_IMAGE_SUFFIX_RE = re.compile(r'\.(jpe?g|png)$', re.IGNORECASE)


def is_supported_image(image_path: str) -> bool:
    """Check whether an image path has a supported extension."""
    return _IMAGE_SUFFIX_RE.search(image_path) is not None


def annotation_path_for(image_path: str) -> str:
    """
    Derive the annotation file path for an image.

    E.g., "data/photo.jpg" -> "data/photo.txt". Extensions match
    case-insensitively; directory names are never touched.

    Args:
        image_path: Path to a .jpg, .jpeg or .png image

    Returns:
        Path of the .txt annotation file

    Raises:
        UnsupportedImageFormat: if the extension is not supported
    """
    match = _IMAGE_SUFFIX_RE.search(image_path)
    if match is None:
        raise UnsupportedImageFormat(image_path)
    return image_path[:match.start()] + '.txt'
