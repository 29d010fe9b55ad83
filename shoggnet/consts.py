"""Enumerations used across the network and their string conversions."""

from __future__ import annotations

from enum import IntEnum

__all__ = [
    "NerveType",
    "Action",
    "Direction",
    "Data",
    "Dataview",
    "Task",
    "CalcStage",
    "NetMode",
    "Command",
    "ErrorCalc",
    "ValueCalc",
    "WeightCalc",
    "BindType",
    "action_to_string",
    "task_to_string",
    "command_to_string",
    "command_from_string",
    "calc_stage_to_string",
    "calc_stage_from_string",
    "nerve_type_from_string",
    "nerve_type_to_string",
    "bind_type_from_string",
    "bind_type_to_string",
    "error_calc_from_string",
    "error_calc_to_string",
    "weight_calc_from_string",
    "weight_calc_to_string",
    "data_from_string",
    "data_to_string",
    "direction_from_string",
    "direction_to_string",
    "dataview_from_string",
    "dataview_to_string",
    "net_mode_from_string",
    "net_mode_to_string",
]


class NerveType(IntEnum):
    """How the neurons of two layers are bound."""

    ALL_TO_ALL = 0
    ONE_TO_ONE = 1


class Action(IntEnum):
    """Actions resolved from events and active modules."""

    ACTION_UNKNOWN = 10
    READ_VALUES = 11
    WRITE_VALUES = 12
    READ_ERRORS = 13
    WRITE_ERRORS = 14
    SYNC_RESET = 17
    READ_STAT_VALUE = 18
    READ_STAT_ERROR = 19
    READ_STAT_ERRORS_BEFORE_CHANGE = 20
    READ_STAT_TICK = 21


class Direction(IntEnum):
    """Direction relative to a layer, used for monitoring."""

    UNKNOWN = 0
    NONE = 1
    PARENT = 2
    CHILD = 3


class Data(IntEnum):
    """Kind of data array, used for monitoring."""

    UNKNOWN = 0
    WEIGHTS = 1
    VALUES = 2
    ERRORS = 3


class Dataview(IntEnum):
    """How data is presented."""

    UNKNOWN = 0
    DIGITS = 1
    GRAPH = 2


class Task(IntEnum):
    """Task of a participant."""

    UNKNOWN = 0
    UI = 1
    PROC = 2
    TEACHER = 3
    EVOLUTION = 4


class CalcStage(IntEnum):
    """Stage of a layer calculation."""

    UNKNOWN = 0
    ALL = 1
    START = 2
    AFTER_FRONT = 3
    AFTER_BACK = 4
    AFTER_LEARNING = 5


class NetMode(IntEnum):
    """Operating mode of a net."""

    UNKNOWN = 0
    LEARN = 1
    TEST = 2
    WORK = 3


class Command(IntEnum):
    """Protocol commands."""

    UNKNOWN = 0
    READ_NET = 1
    READ_NET_INFO = 2
    COMMIT_NET = 3
    CLONE_NET = 4
    SWITCH_NET = 5
    WRITE_LAYERS = 6
    READ_LAYERS = 7
    REQUEST_WEIGHTS = 8
    DROP_LAYER_TICK = 9
    READ_LAYER_STAT = 10
    WRITE_WEIGHTS = 11
    READ_WEIGHTS = 12
    GET_NET_MODE = 13
    SET_NET_MODE = 14


class ErrorCalc(IntEnum):
    """How a layer's error is calculated."""

    NONE = 0
    LEARNING = 1
    VALUE = 2


class ValueCalc(IntEnum):
    """Whether a layer's value is calculated."""

    NONE = 0
    CALC = 1


class WeightCalc(IntEnum):
    """Whether weights are recalculated."""

    NONE = 0
    CALC = 1


class BindType(IntEnum):
    """Kind of bind between layers."""

    ALL = 0
    ADD = 1
    MUL = 2


_COMMAND_NAMES = {
    Command.UNKNOWN: "UNKNOWN",
    Command.COMMIT_NET: "COMMIT_NET",
    Command.READ_NET: "READ_NET",
    Command.READ_NET_INFO: "READ_NET_INFO",
    Command.CLONE_NET: "CLONE_NET",
    Command.SWITCH_NET: "SWITCH_NET",
    Command.WRITE_LAYERS: "WRITE_LAYERS",
    Command.READ_LAYERS: "READ_LAYERS",
    Command.REQUEST_WEIGHTS: "REQUEST_WEIGHTS",
    Command.WRITE_WEIGHTS: "WRITE_WEIGHTS",
    Command.READ_WEIGHTS: "READ_WEIGHTS",
    Command.DROP_LAYER_TICK: "DROP_LAYER_TICK",
    Command.READ_LAYER_STAT: "READ_LAYER_STAT",
    Command.GET_NET_MODE: "GET_NET_MODE",
    Command.SET_NET_MODE: "SET_NET_MODE",
}
_COMMANDS_BY_NAME = {
    name: cmd for cmd, name in _COMMAND_NAMES.items() if cmd is not Command.UNKNOWN
}

_CALC_STAGE_NAMES = {
    CalcStage.UNKNOWN: "UNKNOWN",
    CalcStage.ALL: "ALL",
    CalcStage.START: "START",
    CalcStage.AFTER_FRONT: "AFTER_FRONT",
    CalcStage.AFTER_BACK: "AFTER_BACK",
    CalcStage.AFTER_LEARNING: "AFTER_LEARNING",
}
_CALC_STAGES_BY_NAME = {
    name: stage
    for stage, name in _CALC_STAGE_NAMES.items()
    if stage is not CalcStage.UNKNOWN
}

_NERVE_TYPE_NAMES = {
    NerveType.ALL_TO_ALL: "ALL_TO_ALL",
    NerveType.ONE_TO_ONE: "ONE_TO_ONE",
}
_NERVE_TYPES_BY_NAME = {name: t for t, name in _NERVE_TYPE_NAMES.items()}

_BIND_TYPE_NAMES = {
    BindType.ADD: "ADD",
    BindType.MUL: "MUL",
}
_BIND_TYPES_BY_NAME = {name: t for t, name in _BIND_TYPE_NAMES.items()}

_ERROR_CALC_NAMES = {
    ErrorCalc.NONE: "NONE",
    ErrorCalc.LEARNING: "LEARNING",
    ErrorCalc.VALUE: "VALUE",
}
_ERROR_CALCS_BY_NAME = {name: e for e, name in _ERROR_CALC_NAMES.items()}

_WEIGHT_CALC_NAMES = {
    WeightCalc.NONE: "NONE",
    WeightCalc.CALC: "CALC",
}
_WEIGHT_CALCS_BY_NAME = {name: w for w, name in _WEIGHT_CALC_NAMES.items()}

_DATA_NAMES = {
    Data.UNKNOWN: "UNKNOWN",
    Data.VALUES: "VALUES",
    Data.ERRORS: "ERRORS",
    Data.WEIGHTS: "WEIGHTS",
}
_DATA_BY_NAME = {
    name: d for d, name in _DATA_NAMES.items() if d is not Data.UNKNOWN
}

_DIRECTION_NAMES = {
    Direction.UNKNOWN: "UNKNOWN",
    Direction.NONE: "NONE",
    Direction.PARENT: "PARENT",
    Direction.CHILD: "CHILD",
}
_DIRECTIONS_BY_NAME = {
    name: d for d, name in _DIRECTION_NAMES.items() if d is not Direction.UNKNOWN
}

_DATAVIEW_NAMES = {
    Dataview.UNKNOWN: "UNKNOWN",
    Dataview.GRAPH: "GRAPH",
    Dataview.DIGITS: "DIGITS",
}
_DATAVIEWS_BY_NAME = {name: d for d, name in _DATAVIEW_NAMES.items()}

_NET_MODE_NAMES = {
    NetMode.UNKNOWN: "MODE_UNKNOWN",
    NetMode.LEARN: "MODE_LEARN",
    NetMode.TEST: "MODE_TEST",
    NetMode.WORK: "MODE_WORK",
}
_NET_MODES_BY_NAME = {name: m for m, name in _NET_MODE_NAMES.items()}

_TASK_NAMES = {
    Task.UNKNOWN: "UNKNOWN",
    Task.UI: "UI",
    Task.PROC: "PROC",
    Task.TEACHER: "TEACHER",
    Task.EVOLUTION: "EVOLUTION",
}


def action_to_string(a: Action) -> str:
    """Return the name of an action; unrecognised values give ACTION_UNKNOWN."""
    try:
        return Action(a).name
    except ValueError:
        return Action.ACTION_UNKNOWN.name


def task_to_string(a: Task) -> str:
    """Return the name of a participant task."""
    return _TASK_NAMES.get(a, "UNKNOWN")


def command_to_string(a: Command) -> str:
    """Return the protocol name of a command."""
    return _COMMAND_NAMES.get(a, "UNKNOWN")


def command_from_string(a: str) -> Command:
    """Return the command named by ``a``, or Command.UNKNOWN."""
    return _COMMANDS_BY_NAME.get(a, Command.UNKNOWN)


def calc_stage_to_string(a: CalcStage) -> str:
    """Return the name of a calculation stage."""
    return _CALC_STAGE_NAMES.get(a, "UNKNOWN")


def calc_stage_from_string(a: str) -> CalcStage:
    """Return the calculation stage named by ``a``, or CalcStage.UNKNOWN."""
    return _CALC_STAGES_BY_NAME.get(a, CalcStage.UNKNOWN)


def nerve_type_from_string(a: str) -> NerveType:
    """Return the nerve type named by ``a``, defaulting to ALL_TO_ALL."""
    return _NERVE_TYPES_BY_NAME.get(a, NerveType.ALL_TO_ALL)


def nerve_type_to_string(a: NerveType) -> str:
    """Return the name of a nerve type."""
    return _NERVE_TYPE_NAMES.get(a, "ALL_TO_ALL")


def bind_type_from_string(a: str) -> BindType:
    """Return the bind type named by ``a``, defaulting to ADD."""
    return _BIND_TYPES_BY_NAME.get(a, BindType.ADD)


def bind_type_to_string(a: BindType) -> str:
    """Return the name of a bind type; anything but MUL reads as ADD."""
    return _BIND_TYPE_NAMES.get(a, "ADD")


def error_calc_from_string(a: str) -> ErrorCalc:
    """Return the error calculation named by ``a``, defaulting to NONE."""
    return _ERROR_CALCS_BY_NAME.get(a, ErrorCalc.NONE)


def error_calc_to_string(a: ErrorCalc) -> str:
    """Return the name of an error calculation."""
    return _ERROR_CALC_NAMES.get(a, "NONE")


def weight_calc_from_string(a: str) -> WeightCalc:
    """Return the weight calculation named by ``a``, defaulting to NONE."""
    return _WEIGHT_CALCS_BY_NAME.get(a, WeightCalc.NONE)


def weight_calc_to_string(a: WeightCalc) -> str:
    """Return the name of a weight calculation."""
    return _WEIGHT_CALC_NAMES.get(a, "NONE")


def data_from_string(a: str) -> Data:
    """Return the data kind named by ``a``, or Data.UNKNOWN."""
    return _DATA_BY_NAME.get(a, Data.UNKNOWN)


def data_to_string(a: Data) -> str:
    """Return the name of a data kind."""
    return _DATA_NAMES.get(a, "UNKNOWN")


def direction_from_string(a: str) -> Direction:
    """Return the direction named by ``a``, or Direction.UNKNOWN."""
    return _DIRECTIONS_BY_NAME.get(a, Direction.UNKNOWN)


def direction_to_string(a: Direction) -> str:
    """Return the name of a direction."""
    return _DIRECTION_NAMES.get(a, "UNKNOWN")


def dataview_from_string(value: str, default: Dataview = Dataview.UNKNOWN) -> Dataview:
    """Return the data view named by ``value``, or ``default``."""
    return _DATAVIEWS_BY_NAME.get(value, default)


def dataview_to_string(a: Dataview) -> str:
    """Return the name of a data view."""
    return _DATAVIEW_NAMES.get(a, "UNKNOWN")


def net_mode_from_string(value: str, default: NetMode = NetMode.UNKNOWN) -> NetMode:
    """Return the net mode named by ``value``, or ``default``."""
    return _NET_MODES_BY_NAME.get(value, default)


def net_mode_to_string(a: NetMode) -> str:
    """Return the name of a net mode."""
    return _NET_MODE_NAMES.get(a, "MODE_UNKNOWN")