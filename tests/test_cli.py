"""Tests for the command line interface."""

from collections.abc import Callable
from pathlib import Path

import pytest

from snapdex.cli import format_card, format_card_line, main
from snapdex.models.card import Card, CardType
from snapdex.repository.memory import InMemoryCardRepository
from snapdex.services.sample_cards import sample_card
from snapdex.state import AppState

CardFactory = Callable[..., Card]


@pytest.fixture
def photo(tmp_path: Path) -> Path:
    path = tmp_path / "photo.jpg"
    path.write_bytes(b"\xff\xd8\xff fake jpeg")
    return path


class TestFormatting:
    def test_card_line(self, make_card: CardFactory) -> None:
        card = make_card(display_id=7, title="Ruby Crystal", type=CardType.FIRE)
        assert format_card_line(card) == f"#007  Ruby Crystal  [Fire]  {card.id}"

    def test_card_details(self) -> None:
        text = format_card(sample_card())

        assert text.startswith("#042 Majestic Oak")
        assert "Type: Grass" in text
        assert "  Age: 250" in text
        assert "  Height: 18m" in text
        assert "Image: https://placekitten.com/300/300" in text


class TestListCommand:
    def test_empty(self, capsys: pytest.CaptureFixture[str]) -> None:
        state = AppState(repository=InMemoryCardRepository())

        assert main(["list"], state=state) == 0
        assert "Collection is empty." in capsys.readouterr().out

    def test_lists_cards(self, make_card: CardFactory, capsys: pytest.CaptureFixture[str]) -> None:
        cards = [make_card(display_id=1, title="Oak"), make_card(display_id=2, title="Pine")]
        state = AppState(repository=InMemoryCardRepository(cards=cards))

        assert main(["list"], state=state) == 0

        out = capsys.readouterr().out
        assert "#001  Oak" in out
        assert "#002  Pine" in out


class TestShowCommand:
    def test_show_card(self, make_card: CardFactory, capsys: pytest.CaptureFixture[str]) -> None:
        card = make_card(title="Oak")
        state = AppState(repository=InMemoryCardRepository(cards=[card]))

        assert main(["show", card.id], state=state) == 0
        assert "Oak" in capsys.readouterr().out

    def test_show_missing(self, capsys: pytest.CaptureFixture[str]) -> None:
        state = AppState(repository=InMemoryCardRepository())

        assert main(["show", "missing"], state=state) == 1
        assert "No card with id missing" in capsys.readouterr().out


class TestGenerateCommand:
    def test_generate_without_keep(
        self, photo: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        repository = InMemoryCardRepository()
        state = AppState(repository=repository)

        assert main(["generate", str(photo)], state=state) == 0

        assert "#001 Mock Card" in capsys.readouterr().out
        assert state.cards == ()
        assert repository.load_cards() == []

    def test_generate_with_keep(self, photo: Path, capsys: pytest.CaptureFixture[str]) -> None:
        repository = InMemoryCardRepository()
        state = AppState(repository=repository)

        assert main(["generate", str(photo), "--keep"], state=state) == 0

        assert "Added #001 to collection." in capsys.readouterr().out
        assert [card.display_id for card in repository.load_cards()] == [1]

    def test_missing_image(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        state = AppState(repository=InMemoryCardRepository())

        assert main(["generate", str(tmp_path / "nope.jpg")], state=state) == 1
        assert "Image file not found" in capsys.readouterr().out


class TestRemoveCommand:
    def test_remove(self, make_card: CardFactory, capsys: pytest.CaptureFixture[str]) -> None:
        card = make_card(title="Oak")
        repository = InMemoryCardRepository(cards=[card])
        state = AppState(repository=repository)

        assert main(["remove", card.id], state=state) == 0

        assert "Removed #001 Oak." in capsys.readouterr().out
        assert repository.load_cards() == []

    def test_remove_write_failure(
        self, make_card: CardFactory, capsys: pytest.CaptureFixture[str]
    ) -> None:
        card = make_card()
        repository = InMemoryCardRepository(cards=[card])
        repository.fail_writes = True
        state = AppState(repository=repository)

        assert main(["remove", card.id], state=state) == 1
        assert "could not be saved" in capsys.readouterr().out
