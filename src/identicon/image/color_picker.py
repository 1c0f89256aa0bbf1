from identicon.contracts.failure import InsufficientData
from identicon.image.descriptor import ImageDescriptor


def pick_color(image: ImageDescriptor) -> ImageDescriptor:
    """Use the first three digest bytes as the (r, g, b) fill colour."""
    digest = image.digest_bytes
    if len(digest) < 3:
        raise InsufficientData(
            f"Color needs 3 digest bytes, got {len(digest)}"
        )

    r, g, b = digest[:3]
    return image.model_copy(update={"color": (r, g, b)})
