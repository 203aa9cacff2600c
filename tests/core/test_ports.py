import pytest
from mixsim.core.enums import PortKind
from mixsim.core.exceptions import CapacityExceededError, DeviceError, MixSimError
from mixsim.core.ports import StreamPort
from mixsim.core.stream import Stream


def test_attach_preserves_order():
    port = StreamPort(PortKind.INPUT, 3, owner='m1')
    streams = [Stream.from_index(i) for i in range(1, 4)]
    for s in streams:
        port.attach(s)

    assert port.streams == tuple(streams)
    assert list(port) == streams
    assert len(port) == 3
    assert port.is_full


def test_attach_beyond_capacity_leaves_port_unchanged():
    port = StreamPort(PortKind.OUTPUT, 1, owner='m1')
    first = Stream('s1')
    port.attach(first)

    with pytest.raises(CapacityExceededError) as exc_info:
        port.attach(Stream('s2'))

    assert exc_info.value.kind == PortKind.OUTPUT
    assert exc_info.value.capacity == 1
    assert exc_info.value.device == 'm1'
    assert port.streams == (first,)


def test_zero_capacity_port_rejects_everything():
    port = StreamPort(PortKind.INPUT, 0)
    assert port.is_empty
    assert port.is_full
    with pytest.raises(CapacityExceededError):
        port.attach(Stream('s1'))


def test_negative_capacity_rejected():
    with pytest.raises(ValueError, match="non-negative"):
        StreamPort(PortKind.INPUT, -1)


def test_streams_view_is_read_only():
    port = StreamPort(PortKind.INPUT, 2)
    view = port.streams
    assert isinstance(view, tuple)
    assert len(port) == 0
    assert view == ()


def test_same_stream_can_sit_on_two_ports():
    """Shared ownership: one stream object held by two ports."""
    shared = Stream('s1', 4.0)
    outlet = StreamPort(PortKind.OUTPUT, 1, owner='upstream')
    inlet = StreamPort(PortKind.INPUT, 1, owner='downstream')
    outlet.attach(shared)
    inlet.attach(shared)

    shared.set_mass_flow(9.0)
    assert inlet.streams[0].mass_flow == 9.0
    assert outlet.streams[0] is inlet.streams[0]


def test_capacity_error_hierarchy_and_message():
    error = CapacityExceededError(PortKind.INPUT, 2, device='mixer')
    assert isinstance(error, DeviceError)
    assert isinstance(error, MixSimError)
    assert 'input stream limit' in str(error)
    assert 'mixer' in str(error)


def test_port_kind_values():
    assert PortKind.INPUT == 0
    assert PortKind.OUTPUT == 1
    assert PortKind.OUTPUT.label == 'output'


@pytest.mark.parametrize("capacity", [2.7, 2.0, "2", True])
def test_non_integer_capacity_rejected(capacity):
    with pytest.raises(TypeError, match="integer"):
        StreamPort(PortKind.INPUT, capacity)
