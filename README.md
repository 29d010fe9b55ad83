# shoggnet

Building blocks for layered neural networks. Layers are linked by **nerves**,
and each nerve holds the weights between two layers. The package has no
dependencies outside the standard library.

## Install

    pip install .

To run the test suite, install the test extra:

    pip install ".[test]"
    pytest

## Modules

### `shoggnet.consts`

These enumerations (`IntEnum`s) describe a network and the protocol used to
talk to it: `NerveType`, `BindType`, `Action`, `Command`, `CalcStage`,
`NetMode`, `Direction`, `Data`, `Dataview`, `Task`, `ErrorCalc`, `ValueCalc`
and `WeightCalc`.

Most of them come with functions that convert to and from strings:

```python
from shoggnet.consts import (
    BindType, NerveType, NetMode,
    bind_type_to_string, nerve_type_from_string, net_mode_to_string,
)

bind_type_to_string(BindType.MUL)           # "MUL"
nerve_type_from_string("ONE_TO_ONE")        # NerveType.ONE_TO_ONE
net_mode_to_string(NetMode.LEARN)           # "MODE_LEARN"
```

If a string is not recognised, the function returns a fixed fallback instead
of raising. Examples are `Command.UNKNOWN`, `BindType.ADD` and
`NerveType.ALL_TO_ALL`. `dataview_from_string` and `net_mode_from_string`
let you pass that fallback as `default`. `action_to_string` and
`task_to_string` convert in one direction only.

### `shoggnet.nerve`

A `Nerve` is a dataclass that links a parent layer to a child layer. Any
object that matches the `LayerLike` protocol can serve as a layer: it needs
an `id` string and a `count` of neurons.

There are two kinds of nerve:

- `ALL_TO_ALL` holds `parent.count * child.count` weights.
- `ONE_TO_ONE` holds `max(parent.count, child.count)` weights.

```python
import random
from dataclasses import dataclass

from shoggnet.consts import BindType, NerveType
from shoggnet.nerve import Nerve

@dataclass
class Layer:
    id: str
    count: int

nerve = Nerve(Layer("in", 3), Layer("out", 2), NerveType.ALL_TO_ALL, BindType.ADD)
nerve.allocate()                      # True: 6 weights allocated
nerve.fill(random.Random(1), -1.0, 1.0)

nerve.weights_range_by_child_index(0)     # range(0, 3)
nerve.parents_weights(0)                  # the three weights feeding "out"[0]
data = nerve.to_bytes()                   # native doubles
nerve.read_from_bytes(data)

nerve.save_weights("weights")             # writes weights/in_ADD_out.bin
nerve.load_weights("weights")
nerve.calc_id()                           # "in-(ADD,ALL_TO_ALL)-out"
```

`allocate(on_allocate)` resizes the `weights` and `delta_weights` lists
only when the layer sizes have changed. When it does resize, it calls the
optional callback with the nerve. `fill` sets every weight to a uniform
random value. If no generator is passed, every weight gets `min_weight`.
If `min_weight > max_weight`, which is true of the defaults, the nerve's own
`min_weight`/`max_weight` fields are used instead.

The following methods map between weight indexes and neuron indexes:
`parent_by_weight_index`, `child_by_weight_index`,
`weights_range_by_child_index`, `weights_range_by_parent_index` and
`index_by_neurons_index`. The last one returns -1 when no weight links the
two neurons. To read the weights of one neuron, call `parents_weights` or
`child_weights`.

Failures raise `NerveError`. Its `code` attribute names the failure, for
example `BufferSizeNotMatchWeightsCount`, `WeightFileNotExists`,
`WeightFileSizeChanged` or `SaveOpenStorageError`, and its `details`
attribute holds the file names and sizes involved. `StorageNeuron` is a
small dataclass holding a neuron's `value` and `error`.

### `shoggnet.nerve_list`

`NerveList` is an ordered collection of nerves. It supports `len`,
iteration and indexing, and it can:

- add nerves with `add` and `extend`, and locate one by identity with
  `index`;
- look nerves up with `find` (by layer ids and bind type), `get_by_nerve`
  (by structure) and `select_by_layers`;
- walk the layer graph with `parents_of` and `children_of`;
- drop every nerve attached to a layer with `remove_by_layer`, which
  returns the removed nerves;
- check whether another list has the same structure with `compare`;
- copy the structure of another list onto a new set of layers, matched by
  id, with `copy_structure_from`;
- allocate the weights of every nerve with `allocate_weights`;
- write its contents to the log with `dump`.

Diagnostic output from `dump`, `dump_to_log` and the other methods goes to
the standard `logging` module at debug level.

## What this package does not do

The package has no layer implementation. You supply the layer objects.
It also does not compute neuron values or errors, does not train, and has
no protocol server or command-line tool. The `Command`, `Action` and
`NetMode` enumerations give names only; nothing in the package acts on them.