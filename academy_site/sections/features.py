"""Section Features — titre + liste de points forts."""
from typing import List

from pydantic import BaseModel, Field

from .base import SectionContent, SectionKind


class FeatureItem(BaseModel):
    title: str = ""
    description: str = ""


class FeaturesContent(SectionContent):
    title: str = ""
    features: List[FeatureItem] = Field(default_factory=list)


FEATURES = SectionKind(
    type="features",
    label="Features Section",
    # Le titre n'est pas persisté : seul le tableau l'est
    field_map={"features": "features"},
    markers=("features",),
    decode_order=2,
    decode_extras={"title": "Our Features"},
    empty=FeaturesContent().model_dump(),
    default=FeaturesContent(
        title="Features Title",
        features=[
            FeatureItem(title="Feature 1", description="Description 1"),
            FeatureItem(title="Feature 2", description="Description 2"),
        ],
    ).model_dump(),
    seed=FeaturesContent(
        title="Why Choose Us",
        features=[
            FeatureItem(title="Professional Coaching", description="Expert trainers with years of experience"),
            FeatureItem(title="Modern Facilities", description="State-of-the-art equipment and facilities"),
            FeatureItem(title="Flexible Programs", description="Programs for all ages and skill levels"),
        ],
    ).model_dump(),
    anchor="features",
    render_key="features",
)
