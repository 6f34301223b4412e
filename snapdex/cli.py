"""
Command line access to the local card collection.

Every change goes through AppState.dispatch, exactly as the app does.
"""

import argparse
import asyncio
import logging
from pathlib import Path

from snapdex.app import build_app_state
from snapdex.config import settings
from snapdex.models.card import Card, stat_display_string
from snapdex.state import (
    AddCard,
    AppState,
    DismissCameraView,
    GenerateCard,
    RemoveCard,
    ShowCameraView,
)


def format_card_line(card: Card) -> str:
    """One-line summary: "#007  Ruby Crystal  [Fire]  <id>"."""
    return f"{card.formatted_id}  {card.title}  [{card.type.display_name}]  {card.id}"


def format_card(card: Card) -> str:
    """Multi-line card details."""
    lines = [
        f"{card.formatted_id} {card.title}",
        f"Type: {card.type.display_name}",
        card.description,
    ]
    for stat in card.stats:
        lines.append(f"  {stat.category}: {stat_display_string(stat.value)}")
    if card.image_url:
        lines.append(f"Image: {card.image_url}")
    lines.append(f"Created: {card.created_at.isoformat()}")
    lines.append(f"Id: {card.id}")
    return "\n".join(lines)


def _find_card(state: AppState, card_id: str) -> Card | None:
    return next((card for card in state.cards if card.id == card_id), None)


def _cmd_list(state: AppState, args: argparse.Namespace) -> int:
    if not state.cards:
        print("Collection is empty.")
        return 0
    for card in state.cards:
        print(format_card_line(card))
    return 0


def _cmd_show(state: AppState, args: argparse.Namespace) -> int:
    card = _find_card(state, args.card_id)
    if card is None:
        print(f"Error: No card with id {args.card_id}")
        return 1
    print(format_card(card))
    return 0


async def _generate(state: AppState, image: bytes, keep: bool) -> int:
    state.dispatch(ShowCameraView())
    task = state.dispatch(GenerateCard(image=image))
    state.dispatch(DismissCameraView())
    if task is not None:
        await task

    if state.error is not None:
        print(f"Error: {state.error.message}")
        if state.error.detail:
            print(f"  {state.error.detail}")
        return 1

    card = state.selected_card
    if card is None:
        print("Error: Generation produced no card")
        return 1

    print(format_card(card))
    if keep:
        state.dispatch(AddCard(card=card))
        if state.error is not None:
            print(f"Error: {state.error.message}")
            return 1
        print(f"Added {card.formatted_id} to collection.")
    return 0


def _cmd_generate(state: AppState, args: argparse.Namespace) -> int:
    image_path: Path = args.image
    if not image_path.exists():
        print(f"Error: Image file not found: {image_path}")
        return 1
    return asyncio.run(_generate(state, image_path.read_bytes(), args.keep))


def _cmd_remove(state: AppState, args: argparse.Namespace) -> int:
    card = _find_card(state, args.card_id)
    if card is None:
        print(f"Error: No card with id {args.card_id}")
        return 1
    state.dispatch(RemoveCard(card=card))
    if state.error is not None:
        print(f"Error: {state.error.message}")
        return 1
    print(f"Removed {card.formatted_id} {card.title}.")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="snapdex", description="Manage your SnapDex cards")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    list_parser = subparsers.add_parser("list", help="List collected cards")
    list_parser.set_defaults(handler=_cmd_list)

    show_parser = subparsers.add_parser("show", help="Show one card")
    show_parser.add_argument("card_id", help="Card id")
    show_parser.set_defaults(handler=_cmd_show)

    generate_parser = subparsers.add_parser("generate", help="Generate a card from a photo")
    generate_parser.add_argument("image", type=Path, help="Path to the photo")
    generate_parser.add_argument(
        "--keep",
        action="store_true",
        help="Add the generated card to the collection",
    )
    generate_parser.set_defaults(handler=_cmd_generate)

    remove_parser = subparsers.add_parser("remove", help="Remove a card from the collection")
    remove_parser.add_argument("card_id", help="Card id")
    remove_parser.set_defaults(handler=_cmd_remove)

    return parser


def main(argv: list[str] | None = None, state: AppState | None = None) -> int:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose or settings.debug else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if state is None:
        state = build_app_state()
    result: int = args.handler(state, args)
    return result


if __name__ == "__main__":
    raise SystemExit(main())
