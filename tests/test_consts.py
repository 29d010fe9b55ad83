import pytest

from shoggnet.consts import (
    Action,
    BindType,
    CalcStage,
    Command,
    Data,
    Dataview,
    Direction,
    ErrorCalc,
    NerveType,
    NetMode,
    Task,
    WeightCalc,
    action_to_string,
    bind_type_from_string,
    bind_type_to_string,
    calc_stage_from_string,
    calc_stage_to_string,
    command_from_string,
    command_to_string,
    data_from_string,
    data_to_string,
    dataview_from_string,
    dataview_to_string,
    direction_from_string,
    direction_to_string,
    error_calc_from_string,
    error_calc_to_string,
    net_mode_from_string,
    net_mode_to_string,
    nerve_type_from_string,
    nerve_type_to_string,
    task_to_string,
    weight_calc_from_string,
    weight_calc_to_string,
)


def test_action_values_fixed_by_source():
    assert action_to_string(10) == "ACTION_UNKNOWN"
    assert action_to_string(17) == "SYNC_RESET"
    assert action_to_string(21) == "READ_STAT_TICK"


@pytest.mark.parametrize("action", list(Action))
def test_action_to_string_is_name(action):
    assert action_to_string(action) == action.name


def test_action_to_string_unknown_value():
    assert action_to_string(99) == "ACTION_UNKNOWN"


def test_task_to_string():
    assert task_to_string(Task.TEACHER) == "TEACHER"
    assert task_to_string(Task.UNKNOWN) == "UNKNOWN"
    assert task_to_string(42) == "UNKNOWN"


@pytest.mark.parametrize("cmd", [c for c in Command if c is not Command.UNKNOWN])
def test_command_round_trip(cmd):
    assert command_from_string(command_to_string(cmd)) is cmd


def test_command_strings():
    assert command_to_string(Command.REQUEST_WEIGHTS) == "REQUEST_WEIGHTS"
    assert command_from_string("SET_NET_MODE") is Command.SET_NET_MODE
    assert command_from_string("UNKNOWN") is Command.UNKNOWN
    assert command_from_string("bogus") is Command.UNKNOWN


@pytest.mark.parametrize("stage", list(CalcStage))
def test_calc_stage_round_trip(stage):
    assert calc_stage_from_string(calc_stage_to_string(stage)) is stage


def test_calc_stage_unknown_input():
    assert calc_stage_from_string("after_front") is CalcStage.UNKNOWN
    assert calc_stage_to_string(CalcStage.AFTER_LEARNING) == "AFTER_LEARNING"


@pytest.mark.parametrize("nt", list(NerveType))
def test_nerve_type_round_trip(nt):
    assert nerve_type_from_string(nerve_type_to_string(nt)) is nt


def test_nerve_type_default():
    assert nerve_type_from_string("") is NerveType.ALL_TO_ALL
    assert nerve_type_to_string(NerveType.ONE_TO_ONE) == "ONE_TO_ONE"


def test_bind_type_conversions():
    assert bind_type_to_string(BindType.MUL) == "MUL"
    assert bind_type_to_string(BindType.ADD) == "ADD"
    assert bind_type_to_string(BindType.ALL) == "ADD"
    assert bind_type_from_string("MUL") is BindType.MUL
    assert bind_type_from_string("ALL") is BindType.ADD
    assert bind_type_from_string("x") is BindType.ADD


@pytest.mark.parametrize("ec", list(ErrorCalc))
def test_error_calc_round_trip(ec):
    assert error_calc_from_string(error_calc_to_string(ec)) is ec


def test_error_calc_default():
    assert error_calc_from_string("other") is ErrorCalc.NONE


@pytest.mark.parametrize("wc", list(WeightCalc))
def test_weight_calc_round_trip(wc):
    assert weight_calc_from_string(weight_calc_to_string(wc)) is wc


def test_weight_calc_default():
    assert weight_calc_from_string("calc") is WeightCalc.NONE


@pytest.mark.parametrize("d", list(Data))
def test_data_round_trip(d):
    assert data_from_string(data_to_string(d)) is d


def test_data_unknown():
    assert data_from_string("nothing") is Data.UNKNOWN
    assert data_to_string(Data.WEIGHTS) == "WEIGHTS"


@pytest.mark.parametrize("d", list(Direction))
def test_direction_round_trip(d):
    assert direction_from_string(direction_to_string(d)) is d


def test_direction_unknown():
    assert direction_from_string("UP") is Direction.UNKNOWN


@pytest.mark.parametrize("dv", list(Dataview))
def test_dataview_round_trip(dv):
    assert dataview_from_string(dataview_to_string(dv)) is dv


def test_dataview_default_argument():
    assert dataview_from_string("bad") is Dataview.UNKNOWN
    assert dataview_from_string("bad", Dataview.GRAPH) is Dataview.GRAPH
    assert dataview_from_string("DIGITS", Dataview.GRAPH) is Dataview.DIGITS


@pytest.mark.parametrize("mode", list(NetMode))
def test_net_mode_round_trip(mode):
    assert net_mode_from_string(net_mode_to_string(mode)) is mode


def test_net_mode_strings_and_default():
    assert net_mode_to_string(NetMode.LEARN) == "MODE_LEARN"
    assert net_mode_from_string("LEARN") is NetMode.UNKNOWN
    assert net_mode_from_string("LEARN", NetMode.WORK) is NetMode.WORK
    assert net_mode_from_string("MODE_TEST", NetMode.WORK) is NetMode.TEST