"""
Card generation from a captured image.

Issues a display id from the repository, then runs the AI pipeline stages
in order. A failing stage aborts generation with AIServiceError naming the
stage; no partial card is produced.
"""

import logging
from collections.abc import Awaitable
from typing import TypeVar

from snapdex.models.card import Card, CardType
from snapdex.models.failure import AIServiceError, KnownError
from snapdex.repository.base import CardRepository
from snapdex.services.ai_service import AIService

logger = logging.getLogger(__name__)

T = TypeVar("T")


def parse_card_type(name: str) -> CardType:
    """Map a type name from analysis to a CardType, defaulting to NORMAL."""
    try:
        return CardType(name.strip().lower())
    except ValueError:
        logger.debug("Unknown card type %r from analysis, using normal", name)
        return CardType.NORMAL


async def _run_stage(stage: str, call: Awaitable[T]) -> T:
    try:
        return await call
    except KnownError:
        raise
    except Exception as e:
        logger.warning("Generation stage %s failed: %s", stage, e)
        raise AIServiceError(stage=stage, detail=str(e) or type(e).__name__) from e


class CardGenerator:
    """Turns a captured image into a new, not yet collected, Card."""

    def __init__(self, repository: CardRepository, ai_service: AIService):
        self.repository = repository
        self.ai_service = ai_service

    async def generate(self, image: bytes) -> Card:
        """
        Run the full pipeline for one image.

        Raises:
            AIServiceError: If any stage fails
        """
        display_id = self.repository.get_next_card_id()

        analysis = await _run_stage("analyze_image", self.ai_service.analyze_image(image))
        card_data = await _run_stage(
            "generate_card_data", self.ai_service.generate_card_data(analysis)
        )
        image_url = await _run_stage(
            "generate_image", self.ai_service.generate_image(card_data.art_prompt)
        )

        title = card_data.title
        if card_data.numbered_title:
            title = f"{title} #{display_id}"

        card = Card(
            display_id=display_id,
            title=title,
            description=card_data.description,
            image_url=image_url or None,
            stats=card_data.stats,
            type=parse_card_type(analysis.type),
        )
        logger.info("Generated card %s (%s)", card.formatted_id, card.title)
        return card
