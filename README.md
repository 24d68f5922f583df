# hanawire

Building blocks for a service that speaks the MongoDB wire protocol: a BSON
codec, the operation modes of a client connection, a connected-clients gauge
and a helper for building a TLS server context. It has no dependencies
outside the standard library.

## Modules

- `hanawire.tag` – `Tag`, an `IntEnum` of the BSON element type bytes
  (`Tag.DOUBLE` is `0x01`, `Tag.INT64` is `0x12`, ...). `str(tag)` gives its
  name as used in error messages, such as `"ObjectID"`.
- `hanawire.values` – the value types the codec uses besides Python's own:
  `ObjectID` (exactly 12 bytes; `bytes(oid)` gives them back, `str(oid)` the
  hex form), `Regex` (`pattern` and `options`) and `Int64`, an `int` that is
  always written as a 64-bit value. `BSONError` (a `ValueError`) is raised for
  any data that cannot be read or written. `bson_tag(value)` returns the tag a
  value is written with: `None`, `bool`, `int` (32-bit when it fits, 64-bit
  otherwise, or always 64-bit for `Int64`), `float`, `str`, `ObjectID`,
  `Regex`, `datetime`, mappings and lists or tuples.
- `hanawire.primitives` – `read_exact(stream, size)`, and `read_*` /
  `encode_*` pairs for booleans, C strings, length-prefixed strings and
  doubles.
- `hanawire.scalars` – `read_*` / `encode_*` pairs for 32- and 64-bit
  integers, date-times, object IDs and regular expressions. Date-times are
  stored as milliseconds since the Unix epoch: they are read back as UTC-aware
  `datetime` objects, naive ones are taken to be UTC when written, and
  sub-millisecond parts are dropped.
- `hanawire.document` – `read_document`, `encode_document`, `read_array`,
  `encode_array` and `decode_document`. Documents are `dict`s whose key order
  is the element order on the wire; arrays are `list`s. Document lengths must
  lie between `MIN_DOCUMENT_LENGTH` (5) and `MAX_DOCUMENT_LENGTH`
  (16 MiB). Binary, undefined, timestamp, decimal and the other element types
  not listed above are rejected with `BSONError`, as are duplicate keys, keys
  holding a NUL byte and arrays whose keys are not `"0"`, `"1"`, ... in order.
- `hanawire.modes` – `Mode` (`normal`, `proxy`, `diff-normal`,
  `diff-proxy`), with the properties `handles_locally`, `uses_proxy`, `diffs`
  and `replies_from_proxy`; `ALL_MODES`, `DEFAULT_MODE` (`normal`) and
  `parse_mode(value)`, which raises `ValueError` for an unknown name.
- `hanawire.metrics` – `Gauge`, a thread-safe value with `inc()`, `dec()`,
  `set(value)`, a `value` property and `exposition()`, which renders it in the
  Prometheus text format; `ListenerMetrics`, whose `connected_clients` gauge is
  named `SAP_HANA_compatibility_layer_for_MongoDB_Wire_Protocol_client_connected`,
  and whose `collect()` returns its gauges.
- `hanawire.tls` – `create_server_context(cert_file, key_file)` returns a
  server-side `ssl.SSLContext`; a missing path or a pair that cannot be loaded
  raises `TLSConfigError`.

## Installing

```
pip install .
```

For the test suite:

```
pip install .[test]
pytest
```

## Example

```python
from hanawire.document import decode_document, encode_document
from hanawire.values import Int64, ObjectID

doc = {
    "_id": ObjectID(bytes(12)),
    "name": "nodejs",
    "count": Int64(42),
    "tags": ["none"],
    "ok": 1.0,
}

data = encode_document(doc)
assert decode_document(data) == doc
```

The readers take any binary stream, such as `io.BytesIO`, and consume exactly
the bytes of one value; `decode_document` also rejects trailing bytes.
Malformed or truncated input raises `BSONError`.

## What it does not do

This package has no network server: it does not listen for connections, read
or write wire-protocol messages, forward requests to a proxy or run commands.
It also has no storage backend and no command-line program. It provides the
codec and helpers such a server would be built from.