"""Active/deleted bookkeeping shared by workouts and routines."""

import logging
from typing import Generic, TypeVar

from ..errors import IllegalStateError, InvalidArgumentError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class SoftDeleteAggregate(Generic[T]):
    """A named container whose items are either active or soft-deleted.

    Items are matched by value equality. An item is never in both lists, the
    active list never holds duplicates, and removal always leaves at least
    one active item. Every operation validates before mutating, so a failed
    call leaves both lists untouched.
    """

    item_type: type = object
    item_kind = "Item"
    container_kind = "container"
    last_item_error: type[IllegalStateError] = IllegalStateError

    def __init__(self, name: str):
        self._check_name(name)
        self._name = name
        self._active: list[T] = []
        self._deleted: list[T] = []

    @property
    def name(self) -> str:
        return self._name

    def set_name(self, name: str) -> None:
        """Rename the container."""
        self._check_name(name)
        self._name = name

    def _add(self, item: T | None) -> None:
        self._check_item(item, "add")
        if item in self._active:
            raise InvalidArgumentError(
                f'{self.item_kind} "{item.name}" already exists in {self.container_kind} "{self._name}".'
            )

        if item in self._deleted:
            self._deleted.remove(item)
            self._active.append(item)
            logger.info(
                '%s "%s" restored to %s "%s".',
                self.item_kind, item.name, self.container_kind, self._name,
            )
        else:
            self._active.append(item)
            logger.info(
                '%s "%s" added to %s "%s".',
                self.item_kind, item.name, self.container_kind, self._name,
            )

    def _remove(self, item: T | None) -> None:
        self._check_item(item, "remove")
        if item in self._deleted:
            raise InvalidArgumentError(
                f'{self.item_kind} "{item.name}" is already deleted from {self.container_kind} "{self._name}".'
            )
        if item not in self._active:
            raise InvalidArgumentError(
                f'{self.item_kind} "{item.name}" is not in {self.container_kind} "{self._name}".'
            )
        if len(self._active) == 1:
            raise self.last_item_error(
                f'{self.container_kind.capitalize()} "{self._name}" must keep at least one '
                f"{self.item_kind.lower()}."
            )

        stored = self._active.pop(self._active.index(item))
        self._deleted.append(stored)
        logger.info(
            '%s "%s" removed from %s "%s".',
            self.item_kind, stored.name, self.container_kind, self._name,
        )

    def _restore(self, item: T | None) -> None:
        self._check_item(item, "restore")
        if item not in self._deleted:
            raise InvalidArgumentError(
                f'{self.item_kind} "{item.name}" is not in the deleted list of '
                f'{self.container_kind} "{self._name}".'
            )

        stored = self._deleted.pop(self._deleted.index(item))
        self._active.append(stored)
        logger.info(
            '%s "%s" restored to %s "%s".',
            self.item_kind, stored.name, self.container_kind, self._name,
        )

    def _replace(self, current: T | None, new: T | None) -> None:
        self._check_item(current, "edit")
        self._check_item(new, "edit")
        if current == new:
            raise IllegalStateError(
                f'The new {self.item_kind.lower()} must differ from "{current.name}" '
                "in at least one field."
            )
        if current not in self._active:
            raise InvalidArgumentError(
                f'{self.item_kind} "{current.name}" is not in {self.container_kind} "{self._name}".'
            )
        if new in self._active:
            raise InvalidArgumentError(
                f'{self.item_kind} "{new.name}" already exists in {self.container_kind} "{self._name}".'
            )
        if new in self._deleted:
            raise InvalidArgumentError(
                f'{self.item_kind} "{new.name}" is deleted from {self.container_kind} "{self._name}"; '
                "restore it instead."
            )

        self._active[self._active.index(current)] = new
        logger.info(
            '%s "%s" replaced by "%s" in %s "%s".',
            self.item_kind, current.name, new.name, self.container_kind, self._name,
        )

    def _load_deleted(self, items: list[T]) -> None:
        """Populate the deleted list directly, keeping the lists disjoint."""
        for item in items:
            self._check_item(item, "load")
            if item in self._active or item in self._deleted:
                raise InvalidArgumentError(
                    f'{self.item_kind} "{item.name}" appears more than once in '
                    f'{self.container_kind} "{self._name}".'
                )
            self._deleted.append(item)

    def _check_item(self, item: T | None, action: str) -> None:
        if item is None:
            raise InvalidArgumentError(
                f"Cannot {action} a null {self.item_kind.lower()} in "
                f'{self.container_kind} "{self._name}".'
            )
        if not isinstance(item, self.item_type):
            raise InvalidArgumentError(
                f"Cannot {action} a {type(item).__name__} as a {self.item_kind.lower()} in "
                f'{self.container_kind} "{self._name}".'
            )

    def _check_name(self, name: str) -> None:
        if not name or not isinstance(name, str):
            raise InvalidArgumentError(
                f"{self.container_kind.capitalize()} name cannot be null or empty."
            )

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if type(other) is not type(self):
            return NotImplemented
        return self._name == other._name and self._active == other._active

    def __hash__(self) -> int:
        return hash((self._name, tuple(self._active)))
