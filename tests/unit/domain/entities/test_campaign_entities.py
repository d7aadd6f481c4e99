from __future__ import annotations

import dataclasses

import pytest

from src.domain.entities.campaign import (
    BusinessType,
    CampaignTemplate,
    InsightType,
    PricingModel,
)


def test_insight_type_parse_accepts_members_and_strings() -> None:
    assert InsightType.parse(InsightType.SLOW_SALES) is InsightType.SLOW_SALES
    assert InsightType.parse("rainy_day") is InsightType.RAINY_DAY
    assert InsightType.parse("  Holiday ") is InsightType.HOLIDAY


@pytest.mark.parametrize("value", ["solar_eclipse", "", None, 42])
def test_insight_type_parse_returns_none_for_unknown(value) -> None:
    assert InsightType.parse(value) is None


def test_business_type_parse() -> None:
    assert BusinessType.parse("delivery") is BusinessType.DELIVERY
    assert BusinessType.parse("spaceport") is None


def test_template_render_interpolates_product_and_copies_tags() -> None:
    template = CampaignTemplate(
        title="Promo de {product}",
        copy="Peça {product} agora",
        image_prompt="promo",
        suggested_discount=15,
        tags=("promo", "delivery"),
    )

    draft = template.render("Açaí 500ml")

    assert draft.title == "Promo de Açaí 500ml"
    assert draft.copy == "Peça Açaí 500ml agora"
    assert draft.tags == {"promo", "delivery"}
    assert draft.suggested_discount == 15

    draft.tags.add("edited")
    assert template.tags == ("promo", "delivery")


def test_draft_is_mutable_but_template_is_not() -> None:
    template = CampaignTemplate(title="t", copy="c", image_prompt="i")
    draft = template.render("x")

    draft.title = "Editado"
    assert draft.title == "Editado"

    with pytest.raises(dataclasses.FrozenInstanceError):
        template.title = "other"  # type: ignore[misc]


def test_pricing_model_values() -> None:
    assert PricingModel("fixed") is PricingModel.FIXED
    assert PricingModel("pay_per_view") is PricingModel.PAY_PER_VIEW
