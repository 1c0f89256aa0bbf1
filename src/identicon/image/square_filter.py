from identicon.image.descriptor import ImageDescriptor


def filter_odd_squares(image: ImageDescriptor) -> ImageDescriptor:
    """Drop odd-valued cells; only even cells get coloured.

    Indices are kept as they are. The pixel mapper needs the original
    0..24 position of each surviving cell.
    """
    grid = tuple(
        (value, index) for value, index in image.grid
        if value % 2 == 0
    )
    return image.model_copy(update={"grid": grid})
