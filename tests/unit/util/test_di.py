"""Unit tests for provider selection."""

import pytest

from devconnect.util.di import (
    PersistenceProvider,
    ProdConfigProvider,
    ProdPersistenceProvider,
    get_provider,
    swappable_components,
)
from tests.di import MockPersistenceProvider, build_test_container


class TestProviderSelection:
    """Tests for choosing production or test implementations."""

    def test_swappable_components(self):
        assert swappable_components() == {"github", "persistence"}

    def test_single_implementation_is_used_as_is(self):
        assert get_provider(ProdConfigProvider, use_mock=True) is ProdConfigProvider

    def test_component_resolves_by_kind(self):
        assert get_provider(PersistenceProvider) is ProdPersistenceProvider
        assert get_provider(PersistenceProvider, use_mock=True) is MockPersistenceProvider

    def test_unknown_component_is_rejected(self):
        with pytest.raises(ValueError, match="Unknown components"):
            build_test_container(unmock={"bluesky"})
