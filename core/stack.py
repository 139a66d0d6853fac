"""core/stack.py - 后进先出栈"""


class Stack:
    """
    LIFO栈，列表末尾即栈顶
    空栈上的pop/peek返回None而不是抛异常，调用方据此容忍不合法的表达式
    """

    def __init__(self, items=None):
        self._items = list(items) if items is not None else []

    def push(self, item):
        self._items.append(item)

    def pop(self):
        if not self._items:
            return None
        return self._items.pop()

    def peek(self):
        if not self._items:
            return None
        return self._items[-1]

    def is_empty(self):
        return len(self._items) == 0

    def size(self):
        return len(self._items)

    def snapshot(self):
        """当前内容的独立副本（栈底到栈顶），之后的push/pop不影响它"""
        return tuple(self._items)

    def __len__(self):
        return len(self._items)

    def __iter__(self):
        # 栈底 -> 栈顶
        return iter(self.snapshot())

    def __repr__(self):
        return f"Stack({list(self._items)!r})"
