import threading

import pytest

from pjtools.message_queue import Empty, Full, MessageQueue


def test_fifo_order():
    queue = MessageQueue(3)
    for item in ("a", "b", "c"):
        queue.send(item)
    assert [queue.receive(0) for _ in range(3)] == ["a", "b", "c"]


def test_counts():
    queue = MessageQueue(4)
    queue.send(1)
    assert queue.messages_waiting() == 1
    assert queue.spaces_available() == 3


def test_send_full_raises():
    queue = MessageQueue(1)
    queue.send(1)
    with pytest.raises(Full):
        queue.send(2)
    with pytest.raises(Full):
        queue.send(2, timeout=0.01)


def test_receive_empty_raises():
    queue = MessageQueue(2)
    with pytest.raises(Empty):
        queue.receive(0)
    with pytest.raises(Empty):
        queue.receive(0.01)


def test_invalid_length():
    with pytest.raises(ValueError):
        MessageQueue(0)


def test_overwrite_replaces():
    queue = MessageQueue(1)
    queue.overwrite("old")
    queue.overwrite("new")
    assert queue.messages_waiting() == 1
    assert queue.receive(0) == "new"


def test_overwrite_requires_single_slot():
    with pytest.raises(ValueError):
        MessageQueue(2).overwrite("x")


def test_reset_empties():
    queue = MessageQueue(3)
    queue.send(1)
    queue.send(2)
    queue.reset()
    assert queue.messages_waiting() == 0
    assert queue.spaces_available() == 3


def test_blocking_receive_gets_item_from_other_thread():
    queue = MessageQueue(1)
    sender = threading.Timer(0.05, queue.send, args=("late",))
    sender.start()
    try:
        assert queue.receive(timeout=2) == "late"
    finally:
        sender.join()


def test_blocking_send_waits_for_space():
    queue = MessageQueue(1)
    queue.send("first")
    taker = threading.Timer(0.05, queue.receive, args=(0,))
    taker.start()
    try:
        queue.send("second", timeout=2)
    finally:
        taker.join()
    assert queue.receive(0) == "second"