# aac_app/core/board.py

from dataclasses import dataclass, field
from aac_app.core.cards import COLUMN1, COLUMN2, GRID


SECTIONS = ("column1", "column2", "grid")

_ID_PREFIXES = {"column1": "col1", "column2": "col2", "grid": "grid"}


@dataclass
class Card:
    id: str
    text: str
    image: str | None = None


def default_cards() -> dict[str, list[Card]]:
    defaults = {"column1": COLUMN1, "column2": COLUMN2, "grid": GRID}
    return {
        section: [
            Card(id=f"{_ID_PREFIXES[section]}-{i}", text=text, image=image)
            for i, (text, image) in enumerate(entries)
        ]
        for section, entries in defaults.items()
    }


# -------------------------------
# Sentence buffer
# -------------------------------

def append_word(sentence: str, word: str) -> str:
    if not word:
        return sentence
    return sentence + (" " if sentence else "") + word


def delete_last_word(sentence: str) -> str:
    words = sentence.split()
    if words:
        words.pop()
    return " ".join(words)


def clear_sentence() -> str:
    return ""


# -------------------------------
# Board
# -------------------------------

@dataclass
class Board:
    """
    The three card collections of the communicator and the edit-mode state
    around them: the card selected for editing and an in-progress move.

    Moves follow drag-and-drop semantics. `start_drag` records the source
    card, `drag_over` marks the drop target, and `drop` removes the source
    from its collection and inserts it at the target's index.
    """
    cards: dict[str, list[Card]] = field(default_factory=default_cards)
    edit_mode: bool = False
    selected: Card | None = None
    dragged: Card | None = None
    drop_target: Card | None = None

    def toggle_edit_mode(self) -> bool:
        self.edit_mode = not self.edit_mode
        if not self.edit_mode:
            self.selected = None
            self.end_drag()
        return self.edit_mode

    def find(self, card_id: str) -> tuple[str, int] | None:
        for section in SECTIONS:
            for index, card in enumerate(self.cards[section]):
                if card.id == card_id:
                    return section, index
        return None

    def get(self, card_id: str) -> Card | None:
        location = self.find(card_id)
        if location is None:
            return None
        section, index = location
        return self.cards[section][index]

    def click(self, card_id: str, sentence: str) -> str:
        """
        Normal mode appends the card text to the sentence. Edit mode selects
        the card for editing and leaves the sentence alone.
        """
        card = self.get(card_id)
        if card is None:
            return sentence
        if self.edit_mode:
            self.selected = card
            return sentence
        return append_word(sentence, card.text)

    def update_card(self, card_id: str, text: str | None = None, image: str | None = None) -> Card | None:
        card = self.get(card_id)
        if card is None:
            return None
        if text:
            card.text = text
        if image:
            card.image = image
        if self.selected is not None and self.selected.id == card_id:
            self.selected = None
        return card

    # Drag and drop

    def start_drag(self, card_id: str) -> bool:
        if not self.edit_mode:
            return False
        card = self.get(card_id)
        if card is None:
            return False
        self.dragged = card
        self.drop_target = None
        return True

    def drag_over(self, card_id: str) -> None:
        card = self.get(card_id)
        if card is not None:
            self.drop_target = card

    def end_drag(self) -> None:
        self.dragged = None
        self.drop_target = None

    def drop(self, target_id: str) -> bool:
        dragged = self.dragged
        if dragged is None or dragged.id == target_id:
            return False

        source = self.find(dragged.id)
        target = self.find(target_id)
        if source is None or target is None:
            return False

        source_section, source_index = source
        target_section, target_index = target

        source_cards = list(self.cards[source_section])
        source_cards.pop(source_index)

        if source_section == target_section:
            source_cards.insert(target_index, dragged)
            self.cards[source_section] = source_cards
        else:
            target_cards = list(self.cards[target_section])
            target_cards.insert(target_index, dragged)
            self.cards[source_section] = source_cards
            self.cards[target_section] = target_cards

        self.end_drag()
        return True
