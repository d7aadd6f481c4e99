from __future__ import annotations

import pytest

from src.domain.entities.campaign import (
    BusinessType,
    CampaignTemplate,
    InsightType,
    PricingModel,
)
from src.domain.services.campaign_composer import CampaignComposer
from src.domain.services.campaign_templates import (
    DEFAULT_PRODUCT_NAME,
    FALLBACK_TEMPLATE,
)
from src.infrastructure.services.random_source import SeededRandomSource
from tests.conftest import FixedRandomSource


def test_known_insight_renders_product_into_template(composer) -> None:
    draft = composer.generate_campaign(
        InsightType.RAINY_DAY, BusinessType.DELIVERY, "Pizza Calabresa"
    )

    assert draft.title == "Chuva de Sabores! ☔"
    assert "Pizza Calabresa" in draft.copy
    assert draft.tags == {"delivery", "conforto"}
    assert draft.image_prompt == "cozy food rainy window"
    assert draft.suggested_discount == 0


def test_random_source_picks_between_candidates() -> None:
    composer = CampaignComposer(random_source=FixedRandomSource(0.99))

    draft = composer.generate_campaign("slow_sales", "delivery", "Açaí")

    assert draft.title == "Saudades de você... 💔"
    assert "Açaí" in draft.copy
    assert draft.suggested_discount == 15


def test_string_and_enum_insight_types_are_equivalent(composer) -> None:
    assert composer.generate_campaign("holiday", "hotel", "Suíte") == (
        composer.generate_campaign(InsightType.HOLIDAY, BusinessType.HOTEL, "Suíte")
    )


@pytest.mark.parametrize("insight_type", ["solar_eclipse", "", None])
def test_unknown_insight_falls_back_without_raising(composer, insight_type) -> None:
    draft = composer.generate_campaign(insight_type, "delivery", "Burger")

    assert draft.title == "Oferta Especial de Burger ✨"
    assert draft.copy
    assert draft.tags == {"institucional"}


def test_unknown_business_category_is_tolerated(composer) -> None:
    draft = composer.generate_campaign("low_stock", "spaceport", "Camiseta")
    assert "Camiseta" in draft.title


@pytest.mark.parametrize("product_name", [None, "", "   "])
def test_blank_product_uses_default_name(composer, product_name) -> None:
    draft = composer.generate_campaign("unknown", None, product_name)
    assert DEFAULT_PRODUCT_NAME in draft.title


def test_injected_table_replaces_defaults(fixed_random) -> None:
    custom = CampaignTemplate(
        title="Só {product}", copy="Compre {product}", image_prompt="x", tags=("a",)
    )
    composer = CampaignComposer(
        random_source=fixed_random, templates={InsightType.CHURN_RISK: (custom,)}
    )

    assert composer.generate_campaign("churn_risk", None, "Bolo").title == "Só Bolo"
    assert composer.generate_campaign("slow_sales", None, "Bolo").title == (
        FALLBACK_TEMPLATE.render("Bolo").title
    )
    assert composer.has_template("churn_risk") is True
    assert composer.has_template("slow_sales") is False


def test_business_specific_templates_take_precedence(fixed_random) -> None:
    hotel_holiday = CampaignTemplate(
        title="Feriado no hotel com {product}", copy="Reserve {product}", image_prompt="h"
    )
    composer = CampaignComposer(
        random_source=fixed_random,
        business_templates={(BusinessType.HOTEL, InsightType.HOLIDAY): (hotel_holiday,)},
    )

    hotel = composer.generate_campaign("holiday", "hotel", "Suíte Master")
    delivery = composer.generate_campaign("holiday", "delivery", "Pizza")

    assert hotel.title == "Feriado no hotel com Suíte Master"
    assert delivery.title == "Feriado Chegando! 🎉"


def test_drafts_are_independent(composer) -> None:
    first = composer.generate_campaign("rainy_day", "delivery", "Sopa")
    second = composer.generate_campaign("rainy_day", "delivery", "Sopa")

    first.tags.add("editado")
    first.title = "Meu título"

    assert "editado" not in second.tags
    assert second.title == "Chuva de Sabores! ☔"


def test_every_default_insight_type_has_a_template(composer) -> None:
    assert all(composer.has_template(insight) for insight in InsightType)
    assert composer.has_template("not-a-type") is False


def test_reach_bounds_follow_random_factor() -> None:
    assert CampaignComposer(FixedRandomSource(0.0)).estimate_reach(2) == 2000
    assert CampaignComposer(FixedRandomSource(0.4)).estimate_reach(2) == 2500
    assert CampaignComposer(FixedRandomSource(1 - 2**-53)).estimate_reach(2) == 3249


def test_reach_for_radius_two_stays_in_range() -> None:
    composer = CampaignComposer(random_source=SeededRandomSource(seed=7))

    for _ in range(500):
        assert 2000 <= composer.estimate_reach(2) < 3250


def test_reach_scales_with_configured_audience() -> None:
    composer = CampaignComposer(FixedRandomSource(0.4), reach_per_km=1000)
    assert composer.estimate_reach(3) == 3000


def test_same_seed_gives_same_choices() -> None:
    first = CampaignComposer(random_source=SeededRandomSource(seed=99))
    second = CampaignComposer(random_source=SeededRandomSource(seed=99))

    for radius in (1, 4, 10):
        assert first.estimate_reach(radius) == second.estimate_reach(radius)
    assert first.generate_campaign("slow_sales", None, "X") == (
        second.generate_campaign("slow_sales", None, "X")
    )


@pytest.mark.parametrize(
    "radius, expected",
    [(1, 9.90), (2, 9.90), (2.5, 29.90), (5, 29.90), (6, 49.90), (10, 49.90)],
)
def test_fixed_package_cost_steps(radius, expected) -> None:
    assert CampaignComposer.estimate_cost(radius, PricingModel.FIXED) == expected


def test_pay_per_view_cost_is_the_budget() -> None:
    assert CampaignComposer.estimate_cost(9, "pay_per_view", 75.0) == 75.0
    assert CampaignComposer.estimate_cost(1, PricingModel.PAY_PER_VIEW) == 50.0


def test_estimate_combines_reach_and_cost() -> None:
    composer = CampaignComposer(FixedRandomSource(0.0))

    estimate = composer.estimate(6, "fixed")

    assert estimate.radius_km == 6
    assert estimate.potential_reach == 6000
    assert estimate.pricing_model is PricingModel.FIXED
    assert estimate.estimated_cost == 49.90


def test_invalid_pricing_model_raises(composer) -> None:
    with pytest.raises(ValueError):
        composer.estimate(2, "per_click")
