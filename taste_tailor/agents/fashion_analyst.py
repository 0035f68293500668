"""Fashion Analyst - identifies the style DNA behind a set of cultural tastes."""

from ..models import FashionAnalysis, FashionEntity
from ..utils.text import join_list


FASHION_ANALYST_SYSTEM = (
    "You are a renowned fashion analyst specializing in cultural fashion psychology "
    "and style archetypes. Analyze fashion preferences with depth and precision."
)

FASHION_ANALYST_PROMPT = """As a professional fashion analyst, analyze these cultural tastes and fashion correlations to identify core style elements:

Cultural Tastes: {tastes}
Fashion Correlations: {correlations}

Provide:
1. A detailed analysis of the fashion DNA and style psychology
2. Key fashion archetypes and style identities present
3. Specific clothing categories and garment types that align
4. Core fashion DNA and psychological drivers"""


async def analyze_fashion(
    generator,
    tastes_input: list[str],
    fashion_entities: list[FashionEntity],
) -> FashionAnalysis:
    """Run the fashion analysis stage."""
    return await generator.generate_object(
        FashionAnalysis,
        name="FashionAnalyst",
        prompt=FASHION_ANALYST_PROMPT.format(
            tastes=join_list(tastes_input),
            correlations=join_list([e.name for e in fashion_entities]),
        ),
        system=FASHION_ANALYST_SYSTEM,
    )
