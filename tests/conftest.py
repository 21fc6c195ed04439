"""Shared fixtures: a small voice catalog."""

import pytest

from models import CatalogVoice


@pytest.fixture
def catalog() -> list[CatalogVoice]:
    return [
        CatalogVoice(
            id="v1", name="Oliver", gender="male", accent="British",
            age_group="young", language="en", tags=("narrator",),
            description="Crisp young British narrator",
        ),
        CatalogVoice(id="v2", name="Amelia", gender="female", accent="British", age_group="middle-aged", language="en-GB"),
        CatalogVoice(id="v3", name="Priya", gender="female", accent="Indian-American", age_group="young", language="en"),
        CatalogVoice(id="v4", name="Sofia", gender="female", accent="Latin American", age_group="young", language="es"),
        CatalogVoice(id="v5", name="Thabo", gender="male", accent="South African", age_group="middle-aged", language="en"),
        CatalogVoice(id="v6", name="Billy Ray", gender="male", accent="Southern American", age_group="older", language="en"),
        CatalogVoice(id="v7", name="Dmitri", gender="male", accent="Russian", age_group="middle-aged", language="en"),
        CatalogVoice(id="v8", name="Sam", gender="neutral", accent="American", age_group="young", language="en-US"),
        CatalogVoice(
            id="v9", name="Captain Flint", gender="male", accent="British",
            age_group="older", language="en", tags=("pirate", "gravelly"),
            description="Salty pirate captain",
        ),
    ]
