"""
Sample cards for previews and debug sessions.

Shown in memory when the stored collection is empty and seeding is enabled.
They are never written to storage unless the user adds them.
"""

from snapdex.models.card import Card, CardType, IntValue, Stat, TextValue


def sample_card() -> Card:
    """A single representative card."""
    return Card(
        display_id=42,
        title="Majestic Oak",
        description=(
            "An ancient oak tree with sprawling branches that has stood for centuries, "
            "providing shelter for woodland creatures."
        ),
        image_url="https://placekitten.com/300/300",
        stats=(
            Stat(category="Age", value=IntValue(250)),
            Stat(category="Height", value=TextValue("18m")),
            Stat(category="Habitat", value=TextValue("Forest")),
            Stat(category="Rarity", value=TextValue("Uncommon")),
        ),
        type=CardType.GRASS,
    )


def get_sample_cards() -> list[Card]:
    """
    Get the sample collection.

    Returns new Card instances (fresh ids) on every call.
    """
    return [
        sample_card(),
        Card(
            display_id=7,
            title="Ruby Crystal",
            description=(
                "A vibrant red crystal that glows with inner fire, said to embody "
                "the essence of passion and energy."
            ),
            image_url="https://images.unsplash.com/photo-1566398476332-118d3ba299ad?q=80&w=300",
            stats=(
                Stat(category="Power", value=IntValue(65)),
                Stat(category="Hardness", value=IntValue(8)),
                Stat(category="Element", value=TextValue("Fire")),
                Stat(category="Origin", value=TextValue("Mountains")),
            ),
            type=CardType.FIRE,
        ),
        Card(
            display_id=23,
            title="Aqua Serpent",
            description=(
                "A mystical water creature that flows like liquid between dimensions, "
                "able to control currents and tides."
            ),
            image_url="https://images.unsplash.com/photo-1580394629311-9a29113a5166?q=80&w=300",
            stats=(
                Stat(category="Speed", value=IntValue(90)),
                Stat(category="Fluidity", value=IntValue(100)),
                Stat(category="Element", value=TextValue("Water")),
                Stat(category="Rarity", value=TextValue("Very Rare")),
            ),
            type=CardType.WATER,
        ),
    ]
