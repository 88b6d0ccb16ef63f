# readyset

Building blocks for event-driven, non-blocking I/O. The package has readiness
interests, readiness events, a bounded container of events, an abstract event
source, and an adapter that makes any object with a file descriptor
registrable with a registry.

## Installation

```
pip install readyset
```

## Interests

`readyset.interest.Interest` is a non-empty set of readiness kinds. The kinds
are `Interest.READABLE`, `Interest.WRITABLE`, `Interest.AIO` and
`Interest.LIO`. You combine interests with `|` or `add`. You take them apart
with `remove`, which returns `None` when nothing would be left. An empty set
raises `ValueError`, and so do unknown bits.

```python
from readyset.interest import Interest

both = Interest.READABLE | Interest.WRITABLE
assert both.is_readable() and both.is_writable()
assert repr(both) == "READABLE | WRITABLE"

only_write = both.remove(Interest.READABLE)
assert repr(only_write) == "WRITABLE"
assert only_write.remove(Interest.WRITABLE) is None
```

## Events

`readyset.event.Event` is a frozen record. It pairs a `token` with boolean
readiness flags: `readable`, `writable`, `error`, `read_closed`,
`write_closed`, `priority`, `aio` and `lio`. `Event.from_interest(token,
interest)` builds an event whose flags match an interest.
`describe(alternate=True)` renders the event over several lines, with a
summary of the flags that are set.

`readyset.events.Events(capacity)` holds at most `capacity` events:

- `fill` replaces its contents and returns how many events it kept.
- `clear` empties it.
- `is_empty` and `len()` report how many events it holds.
- Iterating over it yields the events.

```python
from readyset.event import Event
from readyset.events import Events
from readyset.interest import Interest

events = Events(16)
assert events.capacity == 16
assert events.is_empty()

events.fill([Event.from_interest(10, Interest.READABLE)])
for event in events:
    print(event.token, event.readable)

events.clear()
assert len(events) == 0
```

## Sources

`readyset.source.Source` is an abstract base class with three methods:
`register(registry, token, interests)`, `reregister(registry, token,
interests)` and `deregister(registry)`.

`readyset.io_source.IoSource` wraps an object and implements `Source` for it.
The object must have a `fileno()` method or be an integer descriptor.

The registry you pass must have a `selector` attribute. That selector needs:

- an integer `id`;
- `register(fd, token, interests)`;
- `reregister(fd, token, interests)`;
- `deregister(fd)`.

An `IoSource` tracks which selector it is registered with:

- Registering it a second time raises `FileExistsError`, whether with the same registry or a different one.
- Reregistering with a different registry also raises `FileExistsError`.
- Reregistering or deregistering when it is not registered raises `FileNotFoundError`.

`do_io(f)` calls `f` with the wrapped object and returns the result.
`into_inner()` returns the wrapped object. Any other attribute access falls
through to the wrapped object.

## What this package does not do

The package has no poller, registry or selector of its own, and no network
socket types. It never waits on the operating system for readiness. To
register an `IoSource` you supply a registry object that has the `selector`
described above. You fill `Events` yourself with `fill`.

## Running the tests

```
pip install -e ".[test]"
pytest
```