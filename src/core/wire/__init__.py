"""XML wire codec for `MaltegoMessage` envelopes.

The output is byte-compatible with the reference transform servers: compact,
no XML declaration, empty elements written as start/end pairs.

Modules:
- `escape`: text escaping shared by the models and the encoder.
- `encoder`: envelope -> wire text (`render`, `render_as_exception`).
- `decoder`: wire bytes -> envelope (`decode`).
"""
