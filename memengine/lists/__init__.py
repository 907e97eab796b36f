from .double_linked_list import DoubleLinkedList, ListNode
from .xor_linked_list import XORLinkedList, XORNode

__all__ = ["DoubleLinkedList", "ListNode", "XORLinkedList", "XORNode"]
