"""Tests for static content."""

import pytest
from pydantic import ValidationError

from revivehair.content import DEFAULT_CAROUSEL_IMAGES, FAQ_TIPS, RECOMMENDATIONS


def test_three_faq_tips() -> None:
    """Test the FAQ has the three hair care tips."""
    assert [tip.title for tip in FAQ_TIPS] == [
        "Avoid Harsh Chemicals",
        "Balanced Diet for Hair Health",
        "Reduce Heat Styling",
    ]


def test_two_recommendations() -> None:
    """Test there are exactly two recommendations with icons."""
    assert len(RECOMMENDATIONS) == 2
    assert [rec.icon for rec in RECOMMENDATIONS] == ["medical_services", "nature_people"]


def test_content_is_frozen() -> None:
    """Test content models cannot be modified."""
    with pytest.raises(ValidationError):
        FAQ_TIPS[0].title = "Changed"  # type: ignore[misc]


def test_default_carousel_images() -> None:
    """Test the carousel ships three images."""
    assert len(DEFAULT_CAROUSEL_IMAGES) == 3
