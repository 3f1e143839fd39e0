from __future__ import annotations

import pytest

from dealership_lite.domain.catalog import CatalogStore
from dealership_lite.infra.catalog_loader import load_catalog_store


@pytest.fixture()
def sample_store() -> CatalogStore:
    """The six vehicles shipped with the package, in catalog order."""
    return load_catalog_store()
