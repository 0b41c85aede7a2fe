# pollkit

Building blocks for readiness-based, non-blocking I/O event loops.

- `pollkit.interest.Interest`: the readiness a source should be watched
  for: `READABLE`, `WRITABLE`, `AIO`, `LIO` and `PRIORITY`.
- `pollkit.event.Event` and `pollkit.event.Events`: a readiness event
  paired with a token, and a bounded collection of such events.
- `pollkit.io_source.Source` and `pollkit.io_source.IoSource`: the abstract
  base for anything that can be registered with a registry, and an adapter
  that makes any object with a `fileno()` method registrable.

The package has no dependencies outside the standard library.

## Interests

An `Interest` is a non-empty set of readiness kinds. Sets combine with `|`
or `add`. `remove` returns what is left, or `None` when nothing would be.

```python
from pollkit.interest import Interest

rw = Interest.READABLE | Interest.WRITABLE
assert rw.is_readable() and rw.is_writable()

w = rw.remove(Interest.READABLE)
assert not w.is_readable()
assert w.remove(Interest.WRITABLE) is None

print(repr(rw))  # READABLE | WRITABLE
```

Interests are immutable, hashable and ordered. An empty set cannot be
built: `Interest(0)` raises `ValueError`.

## Events

An `Event` holds a token and flags for readable, writable, error,
read-closed, write-closed, priority, AIO and LIO readiness, each read
through a method such as `is_readable()` or `is_read_closed()`.

`Events` is a collection with a fixed capacity. A poller fills it with
`push`, which raises `OverflowError` once the capacity is reached; the
application iterates over it.

```python
from pollkit.event import Event, Events

events = Events.with_capacity(128)
assert events.capacity() == 128
assert events.is_empty()

events.push(Event(token=0, readable=True))
for event in events:
    if event.is_readable():
        print("ready:", event.token)

assert len(events) == 1
events.clear()
assert events.is_empty()
```

## I/O sources

`Source` is an abstract base class with `register`, `reregister` and
`deregister` methods. Implement it to make your own type registrable,
usually by delegating to a lower-level source.

`IoSource` wraps any object with a `fileno()` method. It registers the file
descriptor with a registry that provides:

- `selector_id`: an integer identifying the underlying selector, starting
  at 1; registries that share a selector share the id;
- `register_fd(fd, token, interests)`, `reregister_fd(fd, token, interests)`
  and `deregister_fd(fd)`.

This shape is described by the `SelectorRegistry` protocol in
`pollkit.io_source`.

An `IoSource` belongs to at most one selector at a time:

- registering it while it is already registered raises `FileExistsError`;
- reregistering it when it is not registered raises `FileNotFoundError`,
  and with a registry of a different selector raises `FileExistsError`;
- deregistering it from a registry it is not registered with raises
  `FileNotFoundError`.

I/O should go through `do_io`, which calls the given function with the
wrapped object and returns its result. Other attribute access is forwarded
to the wrapped object, and `into_inner` returns it.

```python
import socket

from pollkit.interest import Interest
from pollkit.io_source import IoSource


class Registry:
    selector_id = 1

    def __init__(self):
        self.fds = {}

    def register_fd(self, fd, token, interests):
        self.fds[fd] = (token, interests)

    def reregister_fd(self, fd, token, interests):
        self.fds[fd] = (token, interests)

    def deregister_fd(self, fd):
        del self.fds[fd]


left, right = socket.socketpair()
registry = Registry()
source = IoSource(left)

source.register(registry, 0, Interest.READABLE)
right.sendall(b"hello")
data = source.do_io(lambda s: s.recv(4096))
source.deregister(registry)
```

## What this package does not do

pollkit provides no poller and no registry of its own: nothing here waits
on the operating system for readiness or produces events. It gives an
event loop its interest sets, its event collection and its registration
bookkeeping; the selector that fills `Events` and implements the registry
methods above has to be supplied by the application. There are no network
types and no command-line tools.

## Running the tests

```
pip install -e ".[test]"
pytest
```