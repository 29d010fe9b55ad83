"""Ordered collection of nerves with lookups by layer."""

from __future__ import annotations

import logging
from typing import Callable, Iterable, Iterator, overload

from .consts import BindType
from .nerve import LayerLike, Nerve

__all__ = ["NerveList"]

logger = logging.getLogger(__name__)


class NerveList:
    """Ordered list of nerves binding the layers of a net."""

    def __init__(self) -> None:
        self._nerves: list[Nerve] = []

    def __len__(self) -> int:
        return len(self._nerves)

    def __iter__(self) -> Iterator[Nerve]:
        return iter(self._nerves)

    @overload
    def __getitem__(self, index: int) -> Nerve: ...

    @overload
    def __getitem__(self, index: slice) -> list[Nerve]: ...

    def __getitem__(self, index: int | slice) -> Nerve | list[Nerve]:
        return self._nerves[index]

    def __repr__(self) -> str:
        return f"NerveList({[n.calc_id() for n in self._nerves]!r})"

    def add(self, nerve: Nerve) -> Nerve:
        """Append one nerve and return it."""
        self._nerves.append(nerve)
        return nerve

    def extend(self, nerves: Iterable[Nerve]) -> None:
        """Append every nerve from ``nerves``."""
        self._nerves.extend(list(nerves))

    def index(self, nerve: Nerve) -> int:
        """Return the position of ``nerve``; raise ValueError if absent."""
        for position, item in enumerate(self._nerves):
            if item is nerve:
                return position
        raise ValueError("nerve is not in the list")

    def find(self, parent_id: str, child_id: str, bind_type: BindType) -> Nerve | None:
        """Return the first nerve with these layer ids and bind type, or None."""
        return next(
            (
                nerve
                for nerve in self._nerves
                if nerve.parent.id == parent_id
                and nerve.child.id == child_id
                and nerve.bind_type == bind_type
            ),
            None,
        )

    def remove_by_layer(self, layer: LayerLike) -> list[Nerve]:
        """Remove every nerve touching ``layer`` and return the removed ones."""
        kept: list[Nerve] = []
        removed: list[Nerve] = []
        for nerve in self._nerves:
            touches = nerve.parent is layer or nerve.child is layer
            (removed if touches else kept).append(nerve)
        self._nerves = kept
        for nerve in removed:
            nerve.purge()
        return removed

    def parents_of(self, child: LayerLike) -> list[LayerLike]:
        """Return the parent layers of every nerve leading into ``child``."""
        return [nerve.parent for nerve in self._nerves if nerve.child is child]

    def children_of(self, parent: LayerLike) -> list[LayerLike]:
        """Return the child layers of every nerve leaving ``parent``."""
        return [nerve.child for nerve in self._nerves if nerve.parent is parent]

    def select_by_layers(self, parent: LayerLike, child: LayerLike) -> list[Nerve]:
        """Return the nerves that bind ``parent`` to ``child``."""
        return [
            nerve
            for nerve in self._nerves
            if nerve.parent is parent and nerve.child is child
        ]

    def clear(self) -> None:
        """Drop every nerve together with its weights."""
        for nerve in self._nerves:
            nerve.purge()
        self._nerves = []

    def compare(self, other: NerveList) -> bool:
        """Return True if ``other`` holds a matching nerve for each of ours."""
        if len(self) != len(other):
            return False
        return all(other.get_by_nerve(nerve) is not None for nerve in self._nerves)

    def get_by_nerve(self, nerve: Nerve) -> Nerve | None:
        """Return the first nerve structurally equal to ``nerve``, or None."""
        return next(
            (
                item
                for item in self._nerves
                if item.parent.id == nerve.parent.id
                and item.child.id == nerve.child.id
                and item.weights_count == nerve.weights_count
                and item.nerve_type == nerve.nerve_type
                and item.bind_type == nerve.bind_type
            ),
            None,
        )

    def copy_structure_from(
        self, source: Iterable[Nerve], layers: Iterable[LayerLike]
    ) -> None:
        """Replace the contents with unweighted copies of ``source``.

        Each copy binds the layers from ``layers`` that carry the same ids as
        the source nerve's layers; nerves whose layers are missing are skipped.
        """
        by_id: dict[str, LayerLike] = {}
        for layer in layers:
            by_id.setdefault(layer.id, layer)
        self.clear()
        for original in source:
            parent = by_id.get(original.parent.id)
            child = by_id.get(original.child.id)
            if parent is None or child is None:
                continue
            self._nerves.append(
                Nerve(
                    parent,
                    child,
                    original.nerve_type,
                    original.bind_type,
                    min_weight=original.min_weight,
                    max_weight=original.max_weight,
                )
            )

    def dump(self, comment: str = "") -> None:
        """Write the list of nerves to the log."""
        logger.debug("Nerve list dump comment=%s", comment)
        for nerve in self._nerves:
            logger.debug(
                "nerve=%s parent=%s child=%s",
                nerve.calc_id(),
                nerve.parent.id,
                nerve.child.id,
            )

    def allocate_weights(
        self, on_allocate: Callable[[Nerve], None] | None = None
    ) -> None:
        """Allocate the weights of every nerve."""
        for nerve in self._nerves:
            nerve.allocate(on_allocate)