"""
Генератор текста-заполнителя "Lorem ipsum".

Чистая функция от (количество, режим, флаг случайности) плюс источник
случайности, который передается явно.

Режимы:
- w — слова через пробел
- p — HTML-абзацы <p>...</p>
- b — обычные абзацы, разделенные пустой строкой (по умолчанию)
"""

from __future__ import annotations

import enum
import random as _random
import re
from typing import List, Optional, Union

from .errors import UnknownModeError


class LoremMode(enum.Enum):
    """Режим генерации текста."""
    WORDS = "w"
    HTML_PARAGRAPHS = "p"
    PLAIN_PARAGRAPHS = "b"


# Канонический корпус (порядок абзацев фиксирован)
PARAGRAPHS: List[str] = [
    "Lorem ipsum dolor sit amet, consectetur adipisicing elit, sed do eiusmod tempor "
    "incididunt ut labore et dolore magna aliqua. Ut enim ad minim veniam, quis nostrud "
    "exercitation ullamco laboris nisi ut aliquip ex ea commodo consequat. Duis aute irure "
    "dolor in reprehenderit in voluptate velit esse cillum dolore eu fugiat nulla pariatur. "
    "Excepteur sint occaecat cupidatat non proident, sunt in culpa qui officia deserunt "
    "mollit anim id est laborum.",

    "Sed ut perspiciatis unde omnis iste natus error sit voluptatem accusantium doloremque "
    "laudantium, totam rem aperiam, eaque ipsa quae ab illo inventore veritatis et quasi "
    "architecto beatae vitae dicta sunt explicabo. Nemo enim ipsam voluptatem quia voluptas "
    "sit aspernatur aut odit aut fugit, sed quia consequuntur magni dolores eos qui ratione "
    "voluptatem sequi nesciunt. Neque porro quisquam est, qui dolorem ipsum quia dolor sit "
    "amet, consectetur, adipisci velit, sed quia non numquam eius modi tempora incidunt ut "
    "labore et dolore magnam aliquam quaerat voluptatem.",

    "Ut enim ad minima veniam, quis nostrum exercitationem ullam corporis suscipit "
    "laboriosam, nisi ut aliquid ex ea commodi consequatur. Quis autem vel eum iure "
    "reprehenderit qui in ea voluptate velit esse quam nihil molestiae consequatur, vel "
    "illum qui dolorem eum fugiat quo voluptas nulla pariatur.",

    "At vero eos et accusamus et iusto odio dignissimos ducimus qui blanditiis praesentium "
    "voluptatum deleniti atque corrupti quos dolores et quas molestias excepturi sint "
    "occaecati cupiditate non provident, similique sunt in culpa qui officia deserunt "
    "mollitia animi, id est laborum et dolorum fuga. Et harum quidem rerum facilis est et "
    "expedita distinctio. Nam libero tempore, cum soluta nobis est eligendi optio cumque "
    "nihil impedit quo minus id quod maxime placeat facere possimus, omnis voluptas "
    "assumenda est, omnis dolor repellendus.",

    "Temporibus autem quibusdam et aut officiis debitis aut rerum necessitatibus saepe "
    "eveniet ut et voluptates repudiandae sint et molestiae non recusandae. Itaque earum "
    "rerum hic tenetur a sapiente delectus, ut aut reiciendis voluptatibus maiores alias "
    "consequatur aut perferendis doloribus asperiores repellat.",
]

WORDS: List[str] = re.findall(r"[A-Za-z]+", " ".join(PARAGRAPHS))

SENTENCES: List[str] = [
    sentence
    for paragraph in PARAGRAPHS
    for sentence in re.split(r"(?<=\.)\s+", paragraph)
]

# Число предложений в случайном абзаце
MIN_SENTENCES = 4
MAX_SENTENCES = 8

PARAGRAPH_SEPARATOR = "\n\n"


def lorem(
    count: int,
    mode: Union[LoremMode, str] = LoremMode.PLAIN_PARAGRAPHS,
    random: bool = False,
    rng: Optional[_random.Random] = None,
) -> str:
    """
    Генерирует текст-заполнитель.

    Args:
        count: Количество слов (режим w) или абзацев (p, b); <= 0 дает пустую строку
        mode: Режим генерации (LoremMode или его буква)
        random: Случайная выборка вместо канонического текста
        rng: Источник случайности; по умолчанию новый random.Random()

    Returns:
        Сгенерированный текст

    Raises:
        UnknownModeError: Если режим не распознан
    """
    try:
        mode = LoremMode(mode)
    except ValueError:
        raise UnknownModeError(str(mode)) from None

    if count <= 0:
        return ""

    if random and rng is None:
        rng = _random.Random()

    if mode is LoremMode.WORDS:
        return " ".join(_words(count, rng if random else None))

    paragraphs = _paragraphs(count, rng if random else None)
    if mode is LoremMode.HTML_PARAGRAPHS:
        paragraphs = [f"<p>{p}</p>" for p in paragraphs]
    return PARAGRAPH_SEPARATOR.join(paragraphs)


def _words(count: int, rng: Optional[_random.Random]) -> List[str]:
    if rng is None:
        return [WORDS[i % len(WORDS)] for i in range(count)]
    # Равномерная выборка с возвращением
    return [rng.choice(WORDS) for _ in range(count)]


def _paragraphs(count: int, rng: Optional[_random.Random]) -> List[str]:
    if rng is None:
        return [PARAGRAPHS[i % len(PARAGRAPHS)] for i in range(count)]
    return [
        " ".join(rng.sample(SENTENCES, rng.randint(MIN_SENTENCES, MAX_SENTENCES)))
        for _ in range(count)
    ]


__all__ = ["LoremMode", "PARAGRAPHS", "WORDS", "SENTENCES", "lorem"]
