# arakit

Building blocks for automotive service-oriented middleware, written in plain
Python with no third-party dependencies.

## Modules

- **`arakit.payload`**: `inject_short` and `inject_int` append a 16- or
  32-bit unsigned value to a list of bytes in big-endian order (raising
  `ValueError` if it does not fit); `extract_short` and `extract_int` read one
  at an offset and return `(value, next_offset)` (raising `IndexError` if the
  data is too short).
- **`arakit.ipv4_address`**: `Ipv4Address(octet0, octet1, octet2, octet3)`,
  a frozen value with `octets`, `inject(buffer)`, the class method
  `extract(data, offset)` returning `(address, next_offset)`, and a dotted
  `str()` form.
- **`arakit.state_machine`**: `MachineState` (abstract `activate` and
  `deactivate`, plus `transit` and `register`) and `FiniteStateMachine`
  (`initialize(states, entrypoint)`, `transit`, and the `state` and
  `machine_state` properties). Only the current state can hand over to
  another. The `SdServerState`, `SdClientState` and `PubSubState`
  enumerations are provided for service discovery and publish-subscribe
  machines.
- **`arakit.network_layer`**: `NetworkLayer`, an abstract transport built
  with a deserializer function. Subclasses implement `send`; receivers are
  registered per owner object with `set_receiver` / `reset_receiver`, and
  `fire_receiver_callbacks(payload)` deserializes the payload afresh for each
  receiver and calls it.
- **`arakit.ttl_timer`**: `TtlTimer` with `set(ttl)`, `cancel()`,
  `dispose()`, `wait_for_signal()` and `wait()`. `wait()` blocks up to the TTL
  in seconds and returns `True` if woken, `False` on expiry or once disposed.
- **`arakit.entry`**, **`arakit.service_entry`**,
  **`arakit.eventgroup_entry`**: service discovery entries.
  `ServiceEntry.create_find_service_entry`, `create_offer_service_entry`,
  `create_stop_offer_entry`; `EventgroupEntry.create_subscribe_event_entry`,
  `create_unsubscribe_event_entry`, `create_acknowledge_entry`,
  `create_negative_acknowledge_entry`. Entries accept options through
  `add_first_option` / `add_second_option`, which check them with
  `validate_option` and raise `ValueError` when not allowed. `payload(option_index)`
  returns `(bytes_as_list, next_option_index)`.
- **`arakit.entry_deserializer`**: `deserialize_entry(payload, offset)` reads
  any entry and returns a `DeserializedEntry` with the `entry`, the next
  `offset`, and the numbers of first and second options.
- **`arakit.sm`**: `StateCell`, a shared mutable state; `Trigger.write`
  stores a new value and calls its handler only when the value changes;
  `Notifier` has `read`, `subscribe` and `notify`. `TriggerIn`, `TriggerOut`
  and `TriggerInOut` expose `trigger` and/or `notifier` over one cell. Also the
  `FunctionGroupStates`, `PowerModeMsg` and `PowerModeRespMsg` enumerations.
- **`arakit.communication_group`**: `CommunicationGroupClient.message(msg)`
  passes a request to the client's handler;
  `CommunicationGroupServer.response(client_id, msg)` passes a client's
  response to the server's handler.
- **`arakit.diag_types`**: diagnostic enumerations (sessions, security
  levels, DTC formats, debouncing states, reset types, monitor actions,
  indicators and more) and the validated `CounterBased`, `TimeBased` and
  `DataIdentifierReentrancyType` records.
- **`arakit.diag_errors`**: `DiagErrc`, `DiagOfferErrc`, `DiagReportingErrc`
  and `DiagUdsNrcErrc` codes, and the `DiagException` and
  `DiagUdsNrcException` exceptions, which carry the code in `.code`.

## Options

The package has no option classes of its own. Anything with a `type`
attribute holding an `arakit.entry.OptionType` can be added to an entry.

## Installation

```
pip install arakit
```

## Examples

```python
from arakit.service_entry import ServiceEntry
from arakit.entry_deserializer import deserialize_entry

offer = ServiceEntry.create_offer_service_entry(0x1234, 0x0001, 1, 0)
data, next_index = offer.payload(0)

result = deserialize_entry(data, 0)
assert result.entry.service_id == 0x1234
assert result.offset == len(data)
```

```python
from arakit.sm import StateCell, TriggerInOut, FunctionGroupStates

cell = StateCell(FunctionGroupStates.OFF)
io = TriggerInOut(cell, lambda: print("state changed"))
io.notifier.subscribe(print)
io.trigger.write(FunctionGroupStates.RUNNING)   # prints "state changed"
io.notifier.notify()                            # prints the new state
```

## What it does not do

- There is no real network transport: `NetworkLayer` is abstract and
  `send` must be supplied by a subclass.
- Communication groups only dispatch incoming messages to handlers; there is
  no broadcasting, sending to clients or listing of clients.
- The diagnostic modules hold types and error codes only; there are no
  diagnostic services, event memory or UDS request handling.
- No service discovery options (endpoints, multicast, configuration) are
  implemented, and no complete service discovery messages are built.

## Running the tests

```
pip install -e .[test]
pytest
```