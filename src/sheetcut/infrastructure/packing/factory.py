"""Registry and factory for packer implementations."""

from __future__ import annotations

import logging
from typing import Callable, ClassVar, TypeVar

from sheetcut.contracts.packer import Packer
from sheetcut.domain.exceptions import UnknownPackerError
from sheetcut.domain.value_objects import PackerSettings, PackerType

logger = logging.getLogger(__name__)

P = TypeVar("P", bound=type[Packer])


class PackerFactory:
    """Maps packer types to packer classes.

    Engines register themselves with the ``@PackerFactory.register``
    decorator when their module is imported; importing
    ``sheetcut.infrastructure.packing`` registers all built-in engines.

    Example:
        @PackerFactory.register(PackerType.GRID_HEURISTIC)
        class GridHeuristicPacker(Packer):
            ...

        packer = PackerFactory.create(PackerType.GRID_HEURISTIC, settings)
    """

    _packers: ClassVar[dict[PackerType, type[Packer]]] = {}

    @classmethod
    def register(cls, packer_type: PackerType) -> Callable[[P], P]:
        """Decorator to register a packer class under a packer type.

        Args:
            packer_type: The identifier to register the class under.

        Returns:
            Decorator that registers the class and returns it unchanged.
        """

        def decorator(packer_class: P) -> P:
            if packer_type in cls._packers:
                logger.warning(
                    "Overwriting existing packer type '%s'", packer_type.value
                )
            cls._packers[packer_type] = packer_class
            packer_class.packer_type = packer_type
            logger.debug(
                "Registered packer '%s': %s", packer_type.value, packer_class.__name__
            )
            return packer_class

        return decorator

    @classmethod
    def create(
        cls, packer_type: PackerType | str, settings: PackerSettings
    ) -> Packer:
        """Create a packer instance of the given type.

        Args:
            packer_type: Registered packer type, or its string value.
            settings: Settings for the new packer.

        Returns:
            A new, empty packer.

        Raises:
            UnknownPackerError: If the type is not registered.
        """
        packer_class = cls.get(packer_type)
        return packer_class(settings)

    @classmethod
    def get(cls, packer_type: PackerType | str) -> type[Packer]:
        """Look up the packer class registered for a type.

        Raises:
            UnknownPackerError: If the type is not registered.
        """
        requested = packer_type.value if isinstance(packer_type, PackerType) else packer_type
        try:
            key = PackerType(requested)
        except ValueError:
            raise UnknownPackerError(requested, cls.available_packers()) from None

        if key not in cls._packers:
            raise UnknownPackerError(requested, cls.available_packers())
        return cls._packers[key]

    @classmethod
    def available_packers(cls) -> list[str]:
        """Sorted identifiers of all registered packers."""
        return sorted(packer_type.value for packer_type in cls._packers)

    @classmethod
    def is_registered(cls, packer_type: PackerType | str) -> bool:
        value = packer_type.value if isinstance(packer_type, PackerType) else packer_type
        return any(registered.value == value for registered in cls._packers)

    @classmethod
    def clear(cls) -> None:
        """Remove all registrations.

        This is primarily useful for testing.
        """
        cls._packers.clear()


__all__ = ["PackerFactory"]
