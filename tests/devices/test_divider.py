"""Tests for the Divider (Splitter) device."""

import pytest
from procflow.core.constants import POSSIBLE_ERROR
from procflow.core.enums import DeviceKind, PortKind
from procflow.core.exceptions import PortLimitExceededError, PrecursorMissingError
from procflow.devices import Divider, Splitter


def _wire(make_stream, n_outputs, input_flow):
    divider = Divider(output_capacity=n_outputs)
    feed = make_stream(input_flow)
    divider.add_input(feed)
    outs = [make_stream() for _ in range(n_outputs)]
    for out in outs:
        divider.add_output(out)
    return divider, feed, outs


def test_splitter_is_divider():
    assert Splitter is Divider
    divider = Divider(output_capacity=3)
    assert divider.kind == DeviceKind.DIVIDER
    assert divider.input_capacity == 1
    assert divider.output_capacity == 3

def test_divides_flow_equally(make_stream):
    divider, _, outs = _wire(make_stream, 3, 12.0)
    divider.update_outputs()
    for out in outs:
        assert out.mass_flow == pytest.approx(4.0, abs=POSSIBLE_ERROR)

def test_outputs_sum_to_input(make_stream):
    divider, _, outs = _wire(make_stream, 2, 10.0)
    divider.update_outputs()
    assert sum(o.mass_flow for o in outs) == pytest.approx(10.0, abs=POSSIBLE_ERROR)

def test_single_output_passes_flow_through(make_stream):
    divider, _, (out,) = _wire(make_stream, 1, 8.0)
    divider.update_outputs()
    assert out.mass_flow == pytest.approx(8.0, abs=POSSIBLE_ERROR)

@pytest.mark.parametrize("n_outputs", [1, 2, 3, 7])
@pytest.mark.parametrize("input_flow", [0.3, 10.0, 1234.5])
def test_mass_conservation_and_equal_split(make_stream, n_outputs, input_flow):
    divider, _, outs = _wire(make_stream, n_outputs, input_flow)
    divider.update_outputs()
    assert sum(o.mass_flow for o in outs) == pytest.approx(input_flow, abs=POSSIBLE_ERROR)
    for out in outs:
        assert out.mass_flow == pytest.approx(input_flow / n_outputs, abs=POSSIBLE_ERROR)

def test_split_uses_attached_count_not_capacity(make_stream):
    """Test that a partially wired divider still conserves mass."""
    divider = Divider(output_capacity=4)
    divider.add_input(make_stream(9.0))
    outs = [make_stream() for _ in range(3)]
    for out in outs:
        divider.add_output(out)

    divider.update_outputs()
    assert [o.mass_flow for o in outs] == pytest.approx([3.0, 3.0, 3.0])

def test_raises_when_no_input(make_stream):
    divider = Divider(output_capacity=2)
    out = make_stream(1.5)
    divider.add_output(out)

    with pytest.raises(PrecursorMissingError):
        divider.update_outputs()
    assert out.mass_flow == 1.5

def test_raises_when_no_outputs(make_stream):
    divider = Divider(output_capacity=2)
    feed = make_stream(10.0)
    divider.add_input(feed)

    with pytest.raises(PrecursorMissingError):
        divider.update_outputs()
    assert feed.mass_flow == 10.0

def test_second_input_rejected(make_stream):
    divider = Divider(output_capacity=2)
    first = make_stream()
    divider.add_input(first)

    with pytest.raises(PortLimitExceededError) as exc_info:
        divider.add_input(make_stream())
    assert exc_info.value.kind == PortKind.INPUT
    assert divider.inputs == [first]

def test_extra_output_rejected(make_stream):
    divider, _, outs = _wire(make_stream, 2, 10.0)
    with pytest.raises(PortLimitExceededError):
        divider.add_output(make_stream())
    assert divider.outputs == outs

def test_update_is_idempotent(make_stream):
    divider, feed, outs = _wire(make_stream, 3, 12.0)
    divider.update_outputs()
    first = [o.mass_flow for o in outs]
    divider.update_outputs()
    assert [o.mass_flow for o in outs] == first
    assert feed.mass_flow == 12.0
