"""
Containers that hand items back in a fixed order.

MinHeap → smallest first, Queue → first in first out, Stack → last in
first out (bounded, oldest evicted).
"""

from .min_heap import MinHeap
from .queue import Queue, QueueNode
from .stack import Stack

__all__ = ["MinHeap", "Queue", "QueueNode", "Stack"]
