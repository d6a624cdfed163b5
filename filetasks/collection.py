"""
File-backed Funko collections.

Each user owns a directory under the configured data root and every Funko
is stored as its own pretty-printed ``<id>.json`` file inside it.
"""

import json
import logging
import os

try:
    from . import config
    from .funko import Funko
except ImportError:  # pragma: no cover - script execution path
    import config
    from funko import Funko


LOGGER = logging.getLogger(__name__)

ITEM_SUFFIX = ".json"
ITEM_LOAD_ERRORS = (
    OSError,
    UnicodeDecodeError,
    json.JSONDecodeError,
    KeyError,
    TypeError,
    ValueError,
)


class CollectionError(Exception):
    """Base class for collection operation failures."""


class FunkoExistsError(CollectionError):
    """Raised when adding a Funko whose id is already stored."""


class FunkoNotFoundError(CollectionError):
    """Raised when a Funko id is not present in the collection."""


def market_value_color(value: float) -> str:
    """
    Pick the display color for a market value.

    :param value: Market value.
    :returns: ``red`` below 10, ``yellow`` below 50, ``cyan`` below 100,
        otherwise ``green``.
    """

    if value < 10:
        return "red"
    if value < 50:
        return "yellow"
    if value < 100:
        return "cyan"
    return "green"


def _validate_user(user: str) -> str:
    name = (user or "").strip()
    if not name or name in (".", "..") or "/" in name or "\\" in name:
        raise ValueError(f"Invalid user name: {user!r}")
    return name


class FunkoCollection:
    """CRUD access to one user's Funko files."""

    def __init__(self, user: str, base_dir=None):
        self.user = _validate_user(user)
        root = base_dir if base_dir is not None else config.get_funko_data_dir()
        self.directory = os.path.join(root, self.user)
        os.makedirs(self.directory, exist_ok=True)

    def _item_path(self, funko_id: int) -> str:
        return os.path.join(self.directory, f"{int(funko_id)}{ITEM_SUFFIX}")

    def _write(self, funko: Funko) -> None:
        with open(self._item_path(funko.id), "w", encoding="utf-8") as handle:
            json.dump(funko.to_dict(), handle, indent=2, ensure_ascii=False)

    def add(self, funko: Funko) -> None:
        """
        Store a new Funko.

        :raises FunkoExistsError: If the id is already stored.
        """

        if os.path.exists(self._item_path(funko.id)):
            raise FunkoExistsError(
                f"Funko {funko.id} already exists in {self.user}'s collection."
            )
        self._write(funko)
        LOGGER.info("Added Funko %s for %s.", funko.id, self.user)

    def update(self, funko: Funko) -> None:
        """
        Overwrite an existing Funko.

        :raises FunkoNotFoundError: If the id is not stored.
        """

        if not os.path.exists(self._item_path(funko.id)):
            raise FunkoNotFoundError(
                f"Funko {funko.id} not found in {self.user}'s collection."
            )
        self._write(funko)
        LOGGER.info("Updated Funko %s for %s.", funko.id, self.user)

    def remove(self, funko_id: int) -> None:
        """
        Delete a stored Funko.

        :raises FunkoNotFoundError: If the id is not stored.
        """

        path = self._item_path(funko_id)
        if not os.path.exists(path):
            raise FunkoNotFoundError(
                f"Funko {funko_id} not found in {self.user}'s collection."
            )
        os.remove(path)
        LOGGER.info("Removed Funko %s for %s.", funko_id, self.user)

    def get(self, funko_id: int) -> Funko:
        """
        Load one Funko by id.

        :raises FunkoNotFoundError: If the id is not stored.
        :raises CollectionError: If the stored file cannot be parsed.
        """

        path = self._item_path(funko_id)
        if not os.path.exists(path):
            raise FunkoNotFoundError(
                f"Funko {funko_id} not found in {self.user}'s collection."
            )
        try:
            with open(path, "r", encoding="utf-8") as handle:
                return Funko.from_dict(json.load(handle))
        except ITEM_LOAD_ERRORS as exc:
            raise CollectionError(f"Funko file {path} is unreadable: {exc}") from exc

    def list_funkos(self):
        """
        Load every stored Funko, sorted by id.

        Files that cannot be parsed are skipped with a warning.

        :returns: List of :class:`Funko`; empty when the collection is empty.
        """

        funkos = []
        for filename in sorted(os.listdir(self.directory)):
            if not filename.endswith(ITEM_SUFFIX):
                continue
            path = os.path.join(self.directory, filename)
            try:
                with open(path, "r", encoding="utf-8") as handle:
                    funkos.append(Funko.from_dict(json.load(handle)))
            except ITEM_LOAD_ERRORS:
                LOGGER.warning("Skipping unreadable Funko file %s.", path, exc_info=True)
        funkos.sort(key=lambda funko: funko.id)
        return funkos
