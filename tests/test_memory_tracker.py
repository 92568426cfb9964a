import pytest

from nayukicore.memory_tracker import MemoryTracker, TrackingAllocator


@pytest.fixture
def allocator():
    return TrackingAllocator(MemoryTracker())


def test_init_and_shutdown(allocator):
    allocator.init()
    assert allocator.is_initted() is True
    assert allocator.tracker.total_allocated_count == 0
    allocator.shutdown()
    assert allocator.is_initted() is False


def test_count_allocation_and_free(allocator):
    allocator.init()
    tracker = allocator.tracker
    assert tracker.total_allocated_count == 0
    assert tracker.current_allocated_count == 0

    block = allocator.malloc(4)
    assert tracker.total_allocated_count == 1
    assert tracker.current_allocated_count == 1

    allocator.free(block)
    assert tracker.total_allocated_count == 1
    assert tracker.current_allocated_count == 0
    allocator.shutdown()


def test_double_init_raises(allocator):
    allocator.init()
    with pytest.raises(RuntimeError):
        allocator.init()


def test_shutdown_without_init_raises(allocator):
    with pytest.raises(RuntimeError):
        allocator.shutdown()


def test_untracked_when_not_initted(allocator):
    block = allocator.malloc(10)
    assert len(block) == 10
    allocator.free(block)
    assert allocator.tracker.total_allocated_count == 0
    assert allocator.tracker.total_free_count == 0


def test_zero_size_tracked_gets_one_byte(allocator):
    allocator.init()
    block = allocator.malloc(0)
    assert len(block) == 1
    assert allocator.tracker.current_size == 1


def test_aligned_alloc_untracked_rounds_up(allocator):
    assert len(allocator.aligned_alloc(10, 8)) == 16


def test_aligned_alloc_rejects_bad_alignment(allocator):
    allocator.init()
    with pytest.raises(ValueError):
        allocator.aligned_alloc(10, 3)


def test_aligned_alloc_tracked_size(allocator):
    allocator.init()
    block = allocator.aligned_alloc(10, 16)
    assert len(block) == 10
    assert allocator.tracker.size_counts == {10: 1}


def test_calloc(allocator):
    allocator.init()
    assert allocator.calloc(0, 8) is None
    block = allocator.calloc(3, 4)
    assert block == bytearray(12)
    assert allocator.tracker.current_size == 12


def test_realloc_keeps_contents_and_tracking(allocator):
    allocator.init()
    block = allocator.malloc(4)
    block[:] = b"abcd"
    grown = allocator.realloc(block, 8)
    assert grown[:4] == b"abcd"
    assert len(grown) == 8
    tracker = allocator.tracker
    assert tracker.total_allocated_count == 2
    assert tracker.total_free_count == 1
    assert tracker.current_size == 8


def test_tracker_counts_sizes():
    tracker = MemoryTracker()
    tracker.malloc(16)
    tracker.malloc(16)
    tracker.malloc(32)
    tracker.free(16)
    assert tracker.size_counts == {16: 1, 32: 1}
    assert tracker.total_size == 64
    assert tracker.total_free_size == 16
    assert tracker.current_size == 48


def test_tracker_free_unknown_size_raises():
    tracker = MemoryTracker()
    with pytest.raises(ValueError):
        tracker.free(8)


def test_tracker_reset():
    tracker = MemoryTracker()
    tracker.malloc(8)
    tracker.reset()
    assert tracker.total_allocated_count == 0
    assert tracker.size_counts == {}


def test_tracker_str():
    tracker = MemoryTracker()
    tracker.malloc(8)
    assert str(tracker) == (
        "MemoryTracker: TotalAllocatedMemoryCount: 1, TotalFreeMemoryCount: 0, "
        "CurrentAllocatedMemoryCount: 1, TotalMemorySize: 8, TotalFreeMemorySize: 0, "
        "CurrentMemorySize: 8 MemorySizeCountMap: 1"
    )