"""
seeded record generator for the test suites.

a schema is a dict of field name -> spec, where a spec is one of
  - a faker provider name, e.g. 'word' or 'first_name'
  - a (provider, kwargs) tuple, e.g. ('pyint', {'min_value': 1, 'max_value': 9})
  - {'_qen_provider': 'choice', 'from': [...]}   pick one option
  - {'_qen_provider': 'ref', 'key': 'field'}     copy an earlier field
anything else is used as a literal value.
"""

import numpy as np
from faker import Faker
from filterable import from_contiguous, Filterable
from typing import Any, Dict, Optional


class Generator:
    """builds one record per call from a flat schema."""

    def __init__(self, seed: Optional[int] = None):
        self._fake = Faker()
        if seed is not None:
            self._fake.seed_instance(seed)
        self._rng = np.random.default_rng(seed)

    def _fake_value(self, provider: str, kwargs: Optional[Dict] = None) -> Any:
        try:
            method = getattr(self._fake, provider)
        except AttributeError:
            raise ValueError(f"faker has no provider '{provider}'")
        return method(**(kwargs or {}))

    def _directive(self, spec: Dict, record: Dict) -> Any:
        kind = spec["_qen_provider"]
        if kind == "choice":
            # index into the options so native python values come back, not numpy scalars
            options = spec["from"]
            return options[int(self._rng.integers(len(options)))]
        if kind == "ref":
            if spec["key"] not in record:
                raise ValueError(f"field '{spec['key']}' must be generated before it is referenced")
            return record[spec["key"]]
        raise ValueError(f"unknown _qen_provider: '{kind}'")

    def _field(self, spec: Any, record: Dict) -> Any:
        if isinstance(spec, dict) and "_qen_provider" in spec:
            return self._directive(spec, record)
        if isinstance(spec, tuple) and len(spec) == 2 and isinstance(spec[1], dict):
            return self._fake_value(*spec)
        if isinstance(spec, str) and hasattr(self._fake, spec):
            return self._fake_value(spec)
        return spec

    def record(self, schema: Dict[str, Any]) -> Dict[str, Any]:
        generated: Dict[str, Any] = {}
        for name, spec in schema.items():
            generated[name] = self._field(spec, generated)
        return generated


class _SchemaProvider:
    def __init__(self, schema: Dict[str, Any], seed: Optional[int] = None):
        self._schema = schema
        self._generator = Generator(seed)

    def take(self, count: int) -> Filterable:
        return from_contiguous([self._generator.record(self._schema) for _ in range(count)])


def from_schema(schema: Dict[str, Any], seed: Optional[int] = None) -> _SchemaProvider:
    return _SchemaProvider(schema, seed)
