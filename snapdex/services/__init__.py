"""
SnapDex services.

Card generation and sample data.
"""

from snapdex.services.ai_service import (
    AIService,
    CardGenerationData,
    InitialAnalysisData,
    MockAIService,
    PlaceholderAIService,
    build_ai_service,
)
from snapdex.services.card_generator import CardGenerator, parse_card_type
from snapdex.services.sample_cards import get_sample_cards, sample_card

__all__ = [
    # AI pipeline
    "AIService",
    "CardGenerationData",
    "InitialAnalysisData",
    "MockAIService",
    "PlaceholderAIService",
    "build_ai_service",
    # Generation
    "CardGenerator",
    "parse_card_type",
    # Sample data
    "get_sample_cards",
    "sample_card",
]
