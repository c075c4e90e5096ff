import pytest
from procflow.core.constants import POSSIBLE_ERROR
from procflow.core.enums import DeviceKind, PortKind
from procflow.core.exceptions import PortIndexError, PortLimitExceededError
from procflow.devices import Reactor


def test_single_reactor_capacities():
    reactor = Reactor(is_double=False)
    assert reactor.kind == DeviceKind.REACTOR
    assert reactor.input_capacity == 1
    assert reactor.output_capacity == 1

def test_double_reactor_capacities():
    reactor = Reactor(is_double=True)
    assert reactor.output_capacity == 2
    assert reactor.get_state()["is_double"] is True

@pytest.mark.parametrize("flag", ["false", "no", 0, None])
def test_is_double_must_be_bool(flag):
    with pytest.raises(ValueError, match="is_double"):
        Reactor(is_double=flag)

def test_double_reactor_splits_evenly(make_stream):
    reactor = Reactor(is_double=True)
    feed = make_stream(10.0)
    out1, out2 = make_stream(), make_stream()
    reactor.add_input(feed)
    reactor.add_output(out1)
    reactor.add_output(out2)

    reactor.update_outputs()

    assert reactor.get_output(0).mass_flow == pytest.approx(5.0, abs=POSSIBLE_ERROR)
    assert reactor.get_output(1).mass_flow == pytest.approx(5.0, abs=POSSIBLE_ERROR)
    total = out1.mass_flow + out2.mass_flow
    assert total == pytest.approx(reactor.get_input(0).mass_flow, abs=POSSIBLE_ERROR)

def test_single_reactor_passes_flow_through(make_stream):
    reactor = Reactor()
    feed, out = make_stream(42.0), make_stream()
    reactor.add_input(feed)
    reactor.add_output(out)

    reactor.update_outputs()
    assert out.mass_flow == pytest.approx(42.0)

def test_single_reactor_rejects_second_output(make_stream):
    reactor = Reactor(is_double=False)
    reactor.add_input(make_stream(10.0))
    first = make_stream()
    reactor.add_output(first)

    with pytest.raises(PortLimitExceededError) as exc_info:
        reactor.add_output(make_stream())
    assert exc_info.value.kind == PortKind.OUTPUT
    assert reactor.outputs == [first]

def test_reactor_rejects_second_input(make_stream):
    reactor = Reactor(is_double=False)
    reactor.add_input(make_stream(10.0))

    with pytest.raises(PortLimitExceededError) as exc_info:
        reactor.add_input(make_stream(5.0))
    assert exc_info.value.kind == PortKind.INPUT
    assert reactor.input_count() == 1

def test_update_without_input_raises(make_stream):
    reactor = Reactor()
    out = make_stream(3.0)
    reactor.add_output(out)

    with pytest.raises(PortIndexError) as exc_info:
        reactor.update_outputs()
    assert exc_info.value.kind == PortKind.INPUT
    assert out.mass_flow == 3.0

def test_underwired_double_reactor_writes_nothing(make_stream):
    """Test that a missing second output fails before any output is written."""
    reactor = Reactor(is_double=True)
    reactor.add_input(make_stream(10.0))
    out1 = make_stream(1.0)
    reactor.add_output(out1)

    with pytest.raises(PortIndexError) as exc_info:
        reactor.update_outputs()
    assert exc_info.value.kind == PortKind.OUTPUT
    assert exc_info.value.index == 1
    assert out1.mass_flow == 1.0

def test_update_is_idempotent(make_stream):
    reactor = Reactor(is_double=True)
    reactor.add_input(make_stream(7.0))
    outs = [make_stream(), make_stream()]
    for out in outs:
        reactor.add_output(out)

    reactor.update_outputs()
    first = [o.mass_flow for o in outs]
    reactor.update_outputs()
    assert [o.mass_flow for o in outs] == first == pytest.approx([3.5, 3.5])
