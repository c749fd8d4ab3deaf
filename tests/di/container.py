"""Test container builder with selective unmocking."""

from dishka import AsyncContainer

from remark.util.di import PROVIDERS, Component
from remark.util.di.container import create_container


def mockable_components() -> set[Component]:
    """Names of all components that ship a mock implementation."""
    return {
        base.__mock_component__
        for base in PROVIDERS
        if base.__mock_component__ and base.__subclasses__()
    }


def build_test_container(unmock: set[Component] | None = None) -> AsyncContainer:
    """Build test container with selective unmocking.

    Every mockable component uses its mock unless named in `unmock`.
    Integration runs assume PostgreSQL is reachable at DATABASE__URL.

    Args:
        unmock: Components to use production implementations for

    Returns:
        Configured test container

    Raises:
        ValueError: If unmock names an unknown component

    Examples:
        # Unit tests - all mocks
        container = build_test_container()

        # Real PostgreSQL
        container = build_test_container(unmock={"persistence"})
    """
    unmock = unmock or set()
    components = mockable_components()

    unknown = unmock - components
    if unknown:
        raise ValueError(f"Unknown components: {unknown}")

    return create_container(mocked=components - unmock)
