from ._base import ConstantSet


class ImageFormat(ConstantSet):
    """Output formats for file previews."""

    label = "image format"

    JPG = "jpg"
    JPEG = "jpeg"
    GIF = "gif"
    PNG = "png"
    WEBP = "webp"
