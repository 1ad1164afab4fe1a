# gogo

A small toolbox of functional helpers for Python, with no dependencies
outside the standard library.

## Contents

### `gogo.lang`

- `equality.equal(x, y)` – deep equality that also requires the same type;
  `None` equals only `None`, and self-referencing lists, tuples and dicts
  are handled.
- `zero.is_zero(value)` – true for `None` and for empty or zero built-in
  values (numbers, strings, bytes, tuples, lists, dicts, sets).
- `boolean.to_bool(text)` – `y`, `t`, `1`, `on`, `yes`, `true` in any ASCII
  case are true; anything else is false.
- `cast.cast`, `cast.cast_quietly`, `cast.cast_or_zero`, `cast.zero` –
  isinstance-checked casts; `cast` raises `TypeError` on a mismatch.
- `errors.MultiError`, `errors.default_error`, `errors.default_error_msg` –
  collecting several errors and supplying a default error.
- `numbers.min_of`, `numbers.max_of`.
- `panic.PanicError`, `panic.Panicked`, `panic.error_of_panic`,
  `panic.raise_if_error` – recording exceptions raised in worker threads.
- `slices.remove_element_by_value`, `slices.append_element_unique` – list
  helpers based on `equal`.

### `gogo.fn`

- `Runnable`, `Supplier`, `Consumer`, `Function`, `BiFunction`,
  `BiConsumer` – frozen dataclasses wrapping a callable. Each has a plain
  call (`run`, `get`, `accept`, `apply`) and a checked one (`checked_run`,
  `checked_get`, ...). With `checked=True` the plain call swallows
  exceptions (returning `default` where a value is expected); the checked
  call always lets them through.
- `runnable.empty()`, `supplier.constant(value)`, `supplier.zero(type_)`,
  `consumer.ignore()`, `consumer.consumer_queue(queue)`,
  `consumer.join_consumers(*consumers)` (fed concurrently, in threads),
  `function.identity()`, `function.compose_function(before, after)`,
  `function.y_combinator(f)`, `BiFunction.curry()` and `BiFunction.partial(t)`.
- `condition` – `check_zero_accept`, `not_zero_then_accept`,
  `is_zero_then_run`, `check_zero_apply`, `not_zero_then_apply`,
  `is_zero_then_get`.
- `must` – `must_run`, `must_get`, `must_accept`, `must_apply` run the
  wrapped callable in a worker thread; an exception from an unchecked
  callable is raised as a `PanicError` whose `origin` is the exception.

### `gogo.ext`

- `condition` – `check_zero_run`, `zero_then`, `check_empty`,
  `empty_then` and the rest, on plain callables.
- `consumers.SyncConsumers` – a lock-protected set of consumers that can be
  appended and removed while values are fed.
- `dump.dump_request_body`, `dump.dump_response_body` – read the `body`
  attribute of an object, return its bytes and put a fresh `BytesIO` copy
  back.
- `mapping.map_with_default`, `map_with_value_func`,
  `map_with_key_value_func`; `sequence.slice_with_item_func`,
  `map_with_item_key_func`, `map_with_item_key_value_func`.
- `ordered.OrderedList`, `ordered.join_ordered` – sort items by their
  `order()` key.
- `pubsub.PubSub`, `sub_fn`, `sub_queue`, `sub_consumer`,
  `join_subscribers`, and `subscribe`/`unsubscribe`/`publish` on a
  process-wide hub. Delivery happens in daemon threads; subscribers created
  with a type only receive messages of that type.
- `registry.SimpleRegistry`, `registry.DefaultRegistry`,
  `registry.RegistryError`.

## Installation

```
pip install .
```

## Examples

```python
from gogo.lang.boolean import to_bool
from gogo.fn.function import Function, compose_function, y_combinator
from gogo.ext.registry import DefaultRegistry

to_bool("Yes")   # True
to_bool("off")   # False

length = Function(len)
stars = Function(lambda n: "*" * n)
compose_function(length, stars).apply("abc")   # "***"

factorial = y_combinator(lambda g: lambda n: 1 if n == 0 else n * g(n - 1))
factorial.apply(5)   # 120

registry = DefaultRegistry("", "fallback")
registry.register("a", "A")
registry.get("a")        # "A"
registry.get("missing")  # "fallback"
```

Publish and subscribe:

```python
import queue
from gogo.ext.pubsub import sub_queue, subscribe, publish

inbox = queue.Queue()
subscribe("events", sub_queue(inbox, str))
publish("events", "hello")
inbox.get(timeout=1)   # "hello"
```

## Running the tests

```
pip install .[test]
pytest
```