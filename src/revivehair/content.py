"""Static content shown by the app: FAQ tips, recommendations, carousel images."""

from pydantic import BaseModel, ConfigDict


class FaqTip(BaseModel):
    """A hair care tip listed in the FAQ dialog."""

    model_config = ConfigDict(frozen=True)

    title: str
    detail: str


class Recommendation(BaseModel):
    """A fixed advice entry on the recommendations screen."""

    model_config = ConfigDict(frozen=True)

    title: str
    icon: str  # Flet icon name, e.g. "medical_services"


FAQ_TITLE = "Hair Fall Detection And Prevention System FAQ"

FAQ_TIPS: tuple[FaqTip, ...] = (
    FaqTip(
        title="Avoid Harsh Chemicals",
        detail=(
            "Excessive use of chemicals can weaken hair, leading to hair loss. "
            "Opt for milder, sulfate-free products instead."
        ),
    ),
    FaqTip(
        title="Balanced Diet for Hair Health",
        detail=(
            "Include protein, vitamins, and minerals in your diet. "
            "Biotin, iron, and vitamin E support hair growth."
        ),
    ),
    FaqTip(
        title="Reduce Heat Styling",
        detail=(
            "Frequent heat styling can damage hair shafts. "
            "Try air drying or using low heat settings."
        ),
    ),
)

RECOMMENDATIONS_HEADING = "Personalized Recommendations for Your Hair Health"

RECOMMENDATIONS: tuple[Recommendation, ...] = (
    Recommendation(title="Visit Dermatologist for Advanced Care", icon="medical_services"),
    Recommendation(title="Try Herbal Remedies for Hair Growth", icon="nature_people"),
)

# Paths are relative to the Flet assets directory
DEFAULT_CAROUSEL_IMAGES: tuple[str, ...] = (
    "images/carousel_item1.svg",
    "images/carousel_item2.svg",
    "images/carousel_item3.svg",
)
LOGO_IMAGE = "images/revive_hair.svg"
