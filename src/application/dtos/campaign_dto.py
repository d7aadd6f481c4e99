"""
Application DTOs - Campaign

Payloads for the creative studio: drafting a campaign from an insight
and estimating its reach and cost.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from src.domain.entities.campaign import (
    CampaignDraft,
    CampaignEstimate,
    InsightType,
    PricingModel,
)


class CampaignRequestDTO(BaseModel):
    """Unknown insight types are accepted and drafted from the fallback template."""

    insight_type: str = Field(description="Insight category driving the campaign")
    business_category: Optional[str] = Field(
        default=None, description="Partner business type (delivery, hotel, ...)"
    )
    product_name: Optional[str] = Field(
        default=None, description="Product highlighted in the copy"
    )

    model_config = {
        "json_schema_extra": {
            "example": {
                "insight_type": "rainy_day",
                "business_category": "delivery",
                "product_name": "Pizza Calabresa",
            }
        }
    }


class CampaignDraftDTO(BaseModel):
    """Editable campaign draft returned to the studio modal."""

    title: str
    ad_copy: str = Field(alias="copy", description="Campaign body text")
    tags: List[str] = Field(default_factory=list)
    image_prompt: str = Field(description="Description for image generation or search")
    suggested_discount: int = Field(ge=0, le=100, description="Discount in percent")

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_domain(cls, draft: CampaignDraft) -> "CampaignDraftDTO":
        return cls(
            title=draft.title,
            ad_copy=draft.copy,
            tags=sorted(draft.tags),
            image_prompt=draft.image_prompt,
            suggested_discount=draft.suggested_discount,
        )


class CampaignEstimateRequestDTO(BaseModel):
    radius_km: float = Field(ge=1, le=10, description="Campaign radius in km")
    pricing_model: PricingModel = Field(default=PricingModel.FIXED)
    budget: float = Field(
        default=50.0, ge=0, description="Budget for pay-per-view campaigns"
    )


class CampaignEstimateDTO(BaseModel):
    radius_km: float
    potential_reach: int = Field(ge=0, description="Simulated audience size")
    pricing_model: PricingModel
    estimated_cost: float = Field(ge=0)

    @classmethod
    def from_domain(cls, estimate: CampaignEstimate) -> "CampaignEstimateDTO":
        return cls(
            radius_km=estimate.radius_km,
            potential_reach=estimate.potential_reach,
            pricing_model=estimate.pricing_model,
            estimated_cost=estimate.estimated_cost,
        )


class InsightTypeOptionDTO(BaseModel):
    """DTO representing an insight type the studio can draft for."""

    value: InsightType
    label: str
    has_template: bool

    model_config = {
        "json_schema_extra": {
            "example": {
                "value": "rainy_day",
                "label": "Rainy Day",
                "has_template": True,
            }
        }
    }
