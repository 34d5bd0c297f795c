"""Named stores for loaded assets such as textures and fonts."""

from __future__ import annotations

import logging
import os
from typing import Dict, Generic, Optional, TypeVar, Union

import pygame
import pygame.freetype

T = TypeVar("T")

log = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


class Store(Generic[T]):
    """Items kept under unique names."""

    def __init__(self) -> None:
        self._items: Dict[str, Optional[T]] = {}

    def create(self, name: str, item: Optional[T]) -> Optional[T]:
        """Store item under name; raises ValueError if the name is taken."""
        if name in self._items:
            raise ValueError(f"name {name!r} already used")
        self._items[name] = item
        return item

    def get(self, name: str) -> Optional[T]:
        """The item stored under name, logging a warning if there is none."""
        item = self.find(name)
        if item is None:
            log.warning("could not find %r", name)
        return item

    def find(self, name: str) -> Optional[T]:
        """The item stored under name, or None."""
        return self._items.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._items

    def __len__(self) -> int:
        return len(self._items)


class ResourcesStore:
    """Textures and fonts loaded from files and looked up by name.

    A file that fails to load leaves its name registered with no asset.
    """

    def __init__(self) -> None:
        self._fonts: Store[pygame.freetype.Font] = Store()
        self._textures: Store[pygame.Surface] = Store()

    def register_font(self, filename: PathLike, name: str) -> None:
        if name in self._fonts:
            raise ValueError(f"name {name!r} already used")
        font: Optional[pygame.freetype.Font] = None
        try:
            if not pygame.freetype.get_init():
                pygame.freetype.init()
            font = pygame.freetype.Font(os.fspath(filename))
        except (OSError, pygame.error) as exc:
            log.warning("failed to open font file %r: %s", os.fspath(filename), exc)
        self._fonts.create(name, font)

    def register_texture(self, filename: PathLike, name: str) -> None:
        if name in self._textures:
            raise ValueError(f"name {name!r} already used")
        texture: Optional[pygame.Surface] = None
        try:
            texture = pygame.image.load(os.fspath(filename))
        except (OSError, pygame.error) as exc:
            log.warning("failed to open texture file %r: %s", os.fspath(filename), exc)
        self._textures.create(name, texture)

    def font(self, name: str) -> Optional[pygame.freetype.Font]:
        return self._fonts.get(name)

    def texture(self, name: str) -> Optional[pygame.Surface]:
        return self._textures.get(name)