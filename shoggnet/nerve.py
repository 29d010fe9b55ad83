"""Nerves: weighted binds between the neurons of two layers."""

from __future__ import annotations

import logging
import math
import os
from array import array
from dataclasses import dataclass, field
from random import Random
from typing import Any, Callable, Protocol

from .consts import BindType, NerveType, bind_type_to_string, nerve_type_to_string

__all__ = ["NerveError", "StorageNeuron", "LayerLike", "Nerve", "NEURON_WEIGHT_SIZE"]

logger = logging.getLogger(__name__)

NEURON_WEIGHT_SIZE = array("d").itemsize


class NerveError(Exception):
    """A nerve operation failed; ``code`` names the failure."""

    def __init__(self, code: str, **details: Any) -> None:
        super().__init__(code if not details else f"{code}: {details}")
        self.code = code
        self.details = details


@dataclass
class StorageNeuron:
    """Stored state of one neuron."""

    value: float = 0.0
    error: float = 0.0


class LayerLike(Protocol):
    """What a nerve needs to know about a layer."""

    @property
    def id(self) -> str: ...

    @property
    def count(self) -> int: ...


@dataclass(eq=False)
class Nerve:
    """Bind between a parent and a child layer holding the weights."""

    parent: LayerLike
    child: LayerLike
    nerve_type: NerveType = NerveType.ALL_TO_ALL
    bind_type: BindType = BindType.ADD
    min_weight: float = 0.0
    max_weight: float = 0.0
    weights: list[float] = field(default_factory=list, repr=False)
    delta_weights: list[float] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        logger.debug("Layer connecting from=%s to=%s", self.parent.id, self.child.id)

    @property
    def weights_count(self) -> int:
        """Number of weights currently allocated."""
        return len(self.weights)

    def _required_count(self) -> int:
        c_from = self.parent.count
        c_to = self.child.count
        if self.nerve_type is NerveType.ONE_TO_ONE:
            return max(c_from, c_to)
        return c_from * c_to

    def allocate(self, on_allocate: Callable[[Nerve], None] | None = None) -> bool:
        """Resize the weights to fit the layers; return True if reallocated."""
        new_count = self._required_count()
        if new_count == self.weights_count:
            return False
        self.purge()
        self.weights = [0.0] * new_count
        self.delta_weights = [0.0] * new_count
        logger.debug("Memory allocated binds_count=%d", new_count)
        if on_allocate is not None:
            on_allocate(self)
        return True

    def purge(self) -> None:
        """Drop the weights."""
        self.weights = []
        self.delta_weights = []

    def fill(
        self,
        rng: Random | None = None,
        min_weight: float = 1.0,
        max_weight: float = -1.0,
    ) -> None:
        """Fill weights with random values, or min_weight without a generator.

        If min_weight exceeds max_weight the nerve's own bounds are used.
        Delta weights are reset to zero.
        """
        if min_weight > max_weight:
            min_weight, max_weight = self.min_weight, self.max_weight
        count = self.weights_count
        if rng is None:
            self.weights = [min_weight] * count
        else:
            self.weights = [rng.uniform(min_weight, max_weight) for _ in range(count)]
        self.delta_weights = [0.0] * count

    def _one_to_one_sizes(self) -> tuple[float, float, float]:
        cp = float(self.parent.count)
        cc = float(self.child.count)
        return cp, cc, max(cp, cc)

    def parent_by_weight_index(self, index: int) -> int:
        """Return the parent neuron index bound by the weight at ``index``."""
        if self.nerve_type is NerveType.ONE_TO_ONE:
            cp, _, m = self._one_to_one_sizes()
            return int(cp / m * index)
        return index % self.parent.count

    def child_by_weight_index(self, index: int) -> int:
        """Return the child neuron index bound by the weight at ``index``."""
        if self.nerve_type is NerveType.ONE_TO_ONE:
            _, cc, m = self._one_to_one_sizes()
            return int(cc / m * index)
        return index // self.parent.count

    def weights_range_by_child_index(self, index: int) -> range:
        """Return the weight indexes that feed the child neuron ``index``."""
        if self.nerve_type is NerveType.ONE_TO_ONE:
            _, cc, m = self._one_to_one_sizes()
            return range(math.ceil(index * m / cc), math.ceil((index + 1) * m / cc))
        c = self.parent.count
        start = index * c
        return range(start, start + c)

    def weights_range_by_parent_index(self, index: int) -> range:
        """Return the weight indexes leaving the parent neuron ``index``."""
        if self.nerve_type is NerveType.ONE_TO_ONE:
            cp, _, m = self._one_to_one_sizes()
            return range(math.ceil(index * m / cp), math.ceil((index + 1) * m / cp))
        c = self.parent.count
        return range(index, self.weights_count - c + index + 1, c)

    def read_from_bytes(self, data: bytes) -> None:
        """Replace the weights with native doubles from ``data``."""
        if len(data) != self.weights_count * NEURON_WEIGHT_SIZE:
            raise NerveError("BufferSizeNotMatchWeightsCount", size=len(data))
        self.weights = array("d", data).tolist()

    def to_bytes(self) -> bytes:
        """Return the weights as native doubles."""
        return array("d", self.weights).tobytes()

    def index_by_neurons_index(self, parent_index: int, child_index: int) -> int:
        """Return the weight index binding two neurons, or -1."""
        if self.nerve_type is NerveType.ALL_TO_ALL:
            return self.weights_range_by_child_index(child_index).start + parent_index
        result = -1
        by_parent = self.weights_range_by_parent_index(parent_index)
        by_child = self.weights_range_by_child_index(child_index)
        if by_child.start < by_parent.start < by_child.stop:
            result = by_parent.start
        if by_parent.start <= by_child.start < by_parent.stop:
            result = by_child.start
        return result

    def weight_file_name(self, path: str) -> str:
        """Return the file in ``path`` that stores this nerve's weights."""
        return (
            f"{path}/{self.parent.id}_{bind_type_to_string(self.bind_type)}"
            f"_{self.child.id}.bin"
        )

    @staticmethod
    def _ensure_dir(file: str) -> None:
        folder = os.path.dirname(file)
        try:
            if folder:
                os.makedirs(folder, exist_ok=True)
        except OSError as exc:
            raise NerveError("WeightPathCreateError", file=file, path=folder) from exc

    def load_weights(self, path: str) -> None:
        """Read the weights from their file in ``path``."""
        file = self.weight_file_name(path)
        self._ensure_dir(file)
        if not os.path.isfile(file):
            raise NerveError("WeightFileNotExists", file=file)
        expected = self.weights_count * NEURON_WEIGHT_SIZE
        size = os.path.getsize(file)
        if size != expected:
            raise NerveError(
                "WeightFileSizeChanged", file=file, fileSize=size, weightSize=expected
            )
        try:
            with open(file, "rb") as handle:
                data = handle.read()
        except OSError as exc:
            raise NerveError("LoadOpenStorageError", file=file) from exc
        if len(data) != expected:
            raise NerveError("LoadError", file=file)
        self.weights = array("d", data).tolist()
        logger.debug("Weights loaded file=%s", file)

    def save_weights(self, path: str) -> None:
        """Write the weights to their file in ``path``."""
        file = self.weight_file_name(path)
        self._ensure_dir(file)
        try:
            handle = open(file, "wb")
        except OSError as exc:
            raise NerveError("SaveOpenStorageError", file=file) from exc
        try:
            with handle:
                handle.write(self.to_bytes())
        except OSError as exc:
            raise NerveError("SaveError", file=file) from exc

    def parents_weights(self, neuron_index: int) -> list[float]:
        """Return the weights feeding the child neuron ``neuron_index``."""
        span = self.weights_range_by_child_index(neuron_index)
        return self.weights[span.start:span.stop]

    def child_weights(self, neuron_index: int) -> list[float]:
        """Return the weights leaving the parent neuron ``neuron_index``."""
        return [self.weights[i] for i in self.weights_range_by_parent_index(neuron_index)]

    def dump_to_log(self) -> None:
        """Write every weight and its delta to the log."""
        logger.debug("nerve from=%s to=%s", self.parent.id, self.child.id)
        for i, (weight, delta) in enumerate(zip(self.weights, self.delta_weights)):
            logger.debug("%d | weights: %s | delta:   %s", i, weight, abs(delta))

    def calc_id(self) -> str:
        """Return an id like ``parent-(bind,nerve)-child``."""
        return (
            f"{self.parent.id}-({bind_type_to_string(self.bind_type)},"
            f"{nerve_type_to_string(self.nerve_type)})-{self.child.id}"
        )