import socket, threading

import pytest


@pytest.fixture
def spawn():
    """Run a blocking callable in a daemon thread; threads are joined at teardown."""
    threads = []

    def _spawn(target, *args):
        t = threading.Thread(target=target, args=args, daemon=True)
        t.start()
        threads.append(t)
        return t

    yield _spawn
    for t in threads:
        t.join(5)


@pytest.fixture
def free_port():
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        s.bind(("127.0.0.1", 0))
        return s.getsockname()[1]


@pytest.fixture
def feed():
    """Build a stand-in for input() that replays lines, then raises EOFError."""
    def _feed(lines, prompts=None):
        it = iter(lines)

        def read_line(prompt):
            if prompts is not None:
                prompts.append(prompt)
            try:
                return next(it)
            except StopIteration:
                raise EOFError
        return read_line
    return _feed
