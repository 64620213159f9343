"""Project gallery browsing."""

from src.gallery.browser import GalleryPage, ProjectGallery

__all__ = ["GalleryPage", "ProjectGallery"]
