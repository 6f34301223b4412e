"""
AI card generation service.

Generation runs in three independently callable stages:
1. analyze_image - classify the captured photo
2. generate_card_data - derive the card's displayable fields
3. generate_image - synthesize artwork from a prompt

Each stage raises on failure instead of returning a partial result.
No production backend ships with this package; MockAIService returns fixed
stub values and PlaceholderAIService samples random stats after a fixed delay.
"""

import asyncio
import logging
import random
from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field

from snapdex.config import Settings
from snapdex.models.card import CardType, IntValue, Stat, TextValue

logger = logging.getLogger(__name__)

PLACEHOLDER_IMAGE_URL = "https://placekitten.com/300/300"


@dataclass(frozen=True)
class InitialAnalysisData:
    """
    Result of analyzing a captured photo.

    Attributes:
        subject: What the photo shows
        visual_traits: Free text describing the look of the subject
        type: Suggested card type name (e.g., "fire"); may be unknown
        stats: Free-form stat suggestions {category: value}
    """

    subject: str
    visual_traits: str
    type: str
    stats: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class CardGenerationData:
    """
    Displayable card fields derived from an analysis.

    When numbered_title is set, the issued display id is appended to the
    title ("Generated Card #7").
    """

    title: str
    description: str
    stats: tuple[Stat, ...]
    art_prompt: str
    numbered_title: bool = False


class AIService(ABC):
    """The three-stage card generation pipeline."""

    @abstractmethod
    async def analyze_image(self, image: bytes) -> InitialAnalysisData:
        """Classify a captured photo."""

    @abstractmethod
    async def generate_card_data(self, analysis: InitialAnalysisData) -> CardGenerationData:
        """Derive title, description, stats and an art prompt from an analysis."""

    @abstractmethod
    async def generate_image(self, prompt: str) -> str:
        """Synthesize artwork and return its reference. Empty means no artwork."""


class MockAIService(AIService):
    """Stub pipeline with fixed values. No network, no delay."""

    async def analyze_image(self, image: bytes) -> InitialAnalysisData:
        return InitialAnalysisData(
            subject="Mock Subject",
            visual_traits="Mock visual traits",
            type=CardType.NORMAL.value,
            stats={},
        )

    async def generate_card_data(self, analysis: InitialAnalysisData) -> CardGenerationData:
        return CardGenerationData(
            title="Mock Card",
            description="Mock description",
            stats=(),
            art_prompt="Mock art prompt",
        )

    async def generate_image(self, prompt: str) -> str:
        return PLACEHOLDER_IMAGE_URL


class PlaceholderAIService(AIService):
    """
    Stand-in pipeline that invents a card with random stats.

    The random source and the sleep function are injected so tests can fix
    the output and skip the delay.
    """

    def __init__(
        self,
        rng: random.Random | None = None,
        delay_seconds: float = 2.0,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        self.rng = rng or random.Random()
        self.delay_seconds = delay_seconds
        self._sleep = sleep

    async def analyze_image(self, image: bytes) -> InitialAnalysisData:
        if self.delay_seconds > 0:
            await self._sleep(self.delay_seconds)

        card_type = self.rng.choice(list(CardType))
        return InitialAnalysisData(
            subject="Captured object",
            visual_traits=f"{len(image)} bytes of image data",
            type=card_type.value,
            stats={"Type": card_type.display_name},
        )

    async def generate_card_data(self, analysis: InitialAnalysisData) -> CardGenerationData:
        stats = (
            Stat(category="Power", value=IntValue(self.rng.randint(50, 100))),
            Stat(category="Defense", value=IntValue(self.rng.randint(30, 80))),
            Stat(category="Special", value=IntValue(self.rng.randint(40, 90))),
            Stat(category="Type", value=TextValue(analysis.stats.get("Type", analysis.type))),
        )
        return CardGenerationData(
            title="Generated Card",
            description="This is a newly generated card from an image capture.",
            stats=stats,
            art_prompt=f"{analysis.subject}, {analysis.visual_traits}",
            numbered_title=True,
        )

    async def generate_image(self, prompt: str) -> str:
        # Captured photos are not stored yet, so generated cards have no artwork
        return ""


def build_ai_service(config: Settings) -> AIService:
    """Create the AI service selected by configuration."""
    if config.ai_service == "placeholder":
        logger.info("Using placeholder AI service (%.1fs delay)", config.placeholder_delay_seconds)
        return PlaceholderAIService(delay_seconds=config.placeholder_delay_seconds)

    logger.info("Using mock AI service")
    return MockAIService()
