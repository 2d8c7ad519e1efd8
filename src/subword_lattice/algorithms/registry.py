"""Registry for segmentation policy implementations.

Uses a decorator pattern for registration. Unlike open plugin registries,
the key space is the closed Algorithm enum: each member maps to exactly one
policy class.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from subword_lattice.algorithms.types import Algorithm

if TYPE_CHECKING:
    from collections.abc import Callable

    from subword_lattice.algorithms.base import SegmentationPolicy
    from subword_lattice.config import LatticeConfig


class PolicyRegistry:
    """Registry mapping Algorithm members to SegmentationPolicy classes.

    Built-in policies register via the ``@PolicyRegistry.register()``
    decorator. The ``build()`` class method resolves an algorithm name and
    instantiates its policy with the active config.
    """

    _registry: ClassVar[dict[Algorithm, type[SegmentationPolicy]]] = {}

    @classmethod
    def register(
        cls, algorithm: Algorithm
    ) -> Callable[[type[SegmentationPolicy]], type[SegmentationPolicy]]:
        """Decorator that registers a SegmentationPolicy class for *algorithm*.

        Args:
            algorithm: The Algorithm member the policy implements.

        Returns:
            Decorator that registers the class and returns it unchanged.

        Raises:
            ValueError: If *algorithm* already has a policy.
        """

        def decorator(klass: type[SegmentationPolicy]) -> type[SegmentationPolicy]:
            if algorithm in cls._registry:
                raise ValueError(f"Policy for '{algorithm.value}' is already registered")
            klass.algorithm = algorithm
            cls._registry[algorithm] = klass
            return klass

        return decorator

    @classmethod
    def get(cls, algorithm: Algorithm | str) -> type[SegmentationPolicy]:
        """Return the policy class registered for *algorithm*.

        Args:
            algorithm: An Algorithm member or its name.

        Returns:
            The registered SegmentationPolicy subclass.

        Raises:
            UnknownAlgorithmError: If *algorithm* is not a known name.
            KeyError: If the algorithm has no registered policy.
        """
        member = Algorithm.parse(algorithm)
        if member not in cls._registry:
            available = ", ".join(sorted(a.value for a in cls._registry)) or "(none)"
            raise KeyError(f"No policy registered for '{member.value}'. Available: {available}")
        return cls._registry[member]

    @classmethod
    def build(cls, algorithm: Algorithm | str, config: LatticeConfig) -> SegmentationPolicy:
        """Instantiate the policy for *algorithm*.

        Args:
            algorithm: An Algorithm member or its name.
            config: Active configuration for this call.

        Returns:
            A fully constructed SegmentationPolicy instance.
        """
        return cls.get(algorithm)(config)

    @classmethod
    def list_registered(cls) -> list[str]:
        """Return sorted list of algorithms with a registered policy."""
        return sorted(a.value for a in cls._registry)
