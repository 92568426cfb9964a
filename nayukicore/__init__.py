"""Building blocks for game loops: heaps, sparse arrays, delegates, timers, state machines, logging and allocation tracking."""

__version__ = "0.1.0"

__all__ = [
    "heap",
    "sparse_array",
    "delegate",
    "game_timer",
    "timer_manager",
    "math_helper",
    "logger",
    "fsm",
    "memory_tracker",
    "platform_memory",
]