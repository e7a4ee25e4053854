import logging
import operator
from typing import List, Tuple

from keyed_priority_queue import PriorityQueue

logging.basicConfig(level=logging.DEBUG)

Key = int
Value = str

values: List[Tuple[Key, Value]] = [(0, 'a'), (1, 'z'), (2, 'f'), (10, 'axx'), (-2, 'exh')]


def check_identical(a: PriorityQueue[Key, Value], b: PriorityQueue[Key, Value]) -> bool:
    if a.size() != b.size():
        return False

    while not a.empty():
        if a.pop() != b.pop():
            return False

    return True


def check_order(queue: PriorityQueue[Key, Value]) -> bool:
    size = queue.size()
    result = []
    while not queue.empty():
        result.append(queue.pop())

    if len(result) != size:
        return False

    return all(not queue.compare(cur, prev) for (_, prev), (_, cur) in zip(result, result[1:]))


def check_move(queue: PriorityQueue[Key, Value]) -> bool:
    size = queue.size()
    moved = queue.move()

    return not queue.valid and moved.size() == size


def main() -> None:
    for strategy in ('lazy', 'eager'):
        queue = PriorityQueue[Key, Value](values, compare=operator.gt, strategy=strategy)

        assert check_identical(queue.copy(), queue.copy())
        assert check_order(queue.copy())
        assert check_move(queue.copy())

        queue.insert_or_update(2, 'zz')
        print(f"{strategy}: peek(2) = {queue.peek(2)!r}, size = {queue.size()}")

        while queue:
            key, value = queue.pop()
            print(f"{key}: {value}")

    min_queue = PriorityQueue[Key, Value](
        [(0, 'c'), (1, 'b'), (5, 'A'), (4, 'a'), (2, 'z'), (3, 'X')],
        compare=operator.lt,
        strategy='eager',
    )
    print("eager min-queue:")
    while min_queue:
        key, value = min_queue.pop()
        print(f"{key}: {value}")


if __name__ == '__main__':
    main()
