"""Funko collectible model and its enumerations."""

from __future__ import annotations

import dataclasses
from enum import Enum
from typing import Any, Dict


class _LabeledEnum(str, Enum):
    @classmethod
    def parse(cls, raw):
        """
        Resolve a member from its label or its name, ignoring case.

        :param raw: Label (e.g. ``"Pop! Rides"``), member name
            (e.g. ``"POP_RIDES"``) or an existing member.
        :raises ValueError: If nothing matches.
        :returns: Matching enum member.
        """

        if isinstance(raw, cls):
            return raw
        wanted = str(raw).strip().casefold()
        for member in cls:
            if wanted in (member.value.casefold(), member.name.casefold()):
                return member
        choices = ", ".join(member.value for member in cls)
        raise ValueError(f"Invalid {cls.__name__} {raw!r} (expected one of: {choices})")


class FunkoType(_LabeledEnum):
    POP = "Pop!"
    POP_RIDES = "Pop! Rides"
    VYNIL_SODA = "Vynil Soda"
    VYNIL_GOLD = "Vynil Gold"


class FunkoGenre(_LabeledEnum):
    ANIMATION = "Animación"
    MOVIES_TV = "Películas y TV"
    VIDEO_GAMES = "Videojuegos"
    SPORTS = "Deportes"
    MUSIC = "Música"
    ANIME = "Ánime"


@dataclasses.dataclass
class Funko:
    """One collectible figure in a user's collection."""

    id: int
    name: str
    description: str
    type: FunkoType
    genre: FunkoGenre
    franchise: str
    number: int
    exclusive: bool
    special_features: str
    market_value: float

    def __post_init__(self):
        self.type = FunkoType.parse(self.type)
        self.genre = FunkoGenre.parse(self.genre)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "type": self.type.value,
            "genre": self.genre.value,
            "franchise": self.franchise,
            "number": self.number,
            "exclusive": self.exclusive,
            "special_features": self.special_features,
            "market_value": self.market_value,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Funko":
        """
        Build a Funko from its stored JSON shape.

        :param data: Dict as produced by :meth:`to_dict`.
        :raises KeyError: If a field is missing.
        :raises ValueError: If type or genre is not recognized.
        :returns: New :class:`Funko`.
        """

        return cls(
            id=int(data["id"]),
            name=data["name"],
            description=data["description"],
            type=data["type"],
            genre=data["genre"],
            franchise=data["franchise"],
            number=int(data["number"]),
            exclusive=bool(data["exclusive"]),
            special_features=data["special_features"],
            market_value=float(data["market_value"]),
        )
