"""Creative template table used by the campaign composer."""

from typing import Dict, Tuple

from src.domain.entities.campaign import CampaignTemplate, InsightType

DEFAULT_PRODUCT_NAME = "nosso destaque"

FALLBACK_TEMPLATE = CampaignTemplate(
    title="Oferta Especial de {product} ✨",
    copy=(
        "Você merece o melhor! Experimente nosso {product} preparado "
        "com todo carinho. Peça já!"
    ),
    image_prompt="generic product high quality",
    suggested_discount=10,
    tags=("institucional",),
)

_RAIN_TEMPLATES = (
    CampaignTemplate(
        title="Chuva de Sabores! ☔",
        copy=(
            "O tempo fechou? O preço também! Peça {product} com entrega grátis "
            "e curta o barulhinho da chuva no conforto de casa. 🏠❤️"
        ),
        image_prompt="cozy food rainy window",
        suggested_discount=0,
        tags=("delivery", "conforto"),
    ),
    CampaignTemplate(
        title="Esqueceu o guarda-chuva? 🌧️",
        copy=(
            "Não se molhe! Nós levamos {product} até você. Peça agora e ganhe "
            "uma bebida quente para acompanhar! ☕"
        ),
        image_prompt="delivery man rain",
        suggested_discount=10,
        tags=("delivery", "promo"),
    ),
)

_SLOW_SALES_TEMPLATES = (
    CampaignTemplate(
        title="O Patrão Ficou Louco! 🤪",
        copy=(
            "Só hoje! {product} com um desconto que a gente não via há tempos. "
            "Corre antes que ele mude de ideia! 🏃💨"
        ),
        image_prompt="crazy sale sign",
        suggested_discount=20,
        tags=("urgencia", "desconto"),
    ),
    CampaignTemplate(
        title="Saudades de você... 💔",
        copy=(
            "Faz tempo que não te vemos! Que tal um {product} hoje para matar "
            "a saudade? Tem cupom especial te esperando."
        ),
        image_prompt="miss you card",
        suggested_discount=15,
        tags=("retencao", "afetivo"),
    ),
)

_HOLIDAY_TEMPLATES = (
    CampaignTemplate(
        title="Feriado Chegando! 🎉",
        copy=(
            "Já planejou seu feriado? Garanta seu {product} antecipado e não "
            "fique na mão. Reservas abertas!"
        ),
        image_prompt="holiday celebration",
        suggested_discount=5,
        tags=("antecipacao", "feriado"),
    ),
)

_PEAK_TEMPLATES = (
    CampaignTemplate(
        title="Todo mundo quer {product}! 🔥",
        copy=(
            "A procura está nas alturas. Faça seu pedido de {product} agora "
            "e fure a fila do horário de pico!"
        ),
        image_prompt="busy restaurant happy customers",
        suggested_discount=0,
        tags=("demanda", "urgencia"),
    ),
)

_LOW_STOCK_TEMPLATES = (
    CampaignTemplate(
        title="Últimas unidades de {product} ⏳",
        copy=(
            "Restam poucas unidades de {product}. Garanta o seu antes que acabe!"
        ),
        image_prompt="last items shelf",
        suggested_discount=0,
        tags=("escassez", "urgencia"),
    ),
)

_LOW_TICKET_TEMPLATES = (
    CampaignTemplate(
        title="Combo {product} + sobremesa 🍰",
        copy=(
            "Leve {product} com sobremesa por um preço especial. Mais sabor, "
            "mais vantagem!"
        ),
        image_prompt="combo meal with dessert",
        suggested_discount=10,
        tags=("combo", "ticket-medio"),
    ),
)

_CHURN_TEMPLATES = (
    CampaignTemplate(
        title="Volta pra gente! 🤗",
        copy=(
            "Sentimos sua falta. Seu {product} favorito está te esperando com "
            "um cupom exclusivo de retorno."
        ),
        image_prompt="welcome back coupon",
        suggested_discount=15,
        tags=("retencao", "cupom"),
    ),
)

DEFAULT_CAMPAIGN_TEMPLATES: Dict[InsightType, Tuple[CampaignTemplate, ...]] = {
    InsightType.RAINY_DAY: _RAIN_TEMPLATES,
    InsightType.WEATHER_OPPORTUNITY: _RAIN_TEMPLATES,
    InsightType.SLOW_SALES: _SLOW_SALES_TEMPLATES,
    InsightType.HOLIDAY: _HOLIDAY_TEMPLATES,
    InsightType.HOLIDAY_OPPORTUNITY: _HOLIDAY_TEMPLATES,
    InsightType.PEAK_DEMAND: _PEAK_TEMPLATES,
    InsightType.PEAK_HOUR: _PEAK_TEMPLATES,
    InsightType.LOW_STOCK: _LOW_STOCK_TEMPLATES,
    InsightType.LOW_TICKET: _LOW_TICKET_TEMPLATES,
    InsightType.CHURN_RISK: _CHURN_TEMPLATES,
}
