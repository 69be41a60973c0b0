"""Image use cases."""

from .list_images import (
    ImageListItem,
    ListImagesRequest,
    ListImagesResponse,
    ListImagesUseCase,
)

__all__ = [
    "ImageListItem",
    "ListImagesRequest",
    "ListImagesResponse",
    "ListImagesUseCase",
]
