'''
.------..------..------..------.
|d.--. ||g.--. ||e.--. ||n.--. |
| :/\: || :/\: || (\/) || :(): |
| (__) || :\/: || :\/: || ()() |
| '--'d|| '--'g|| '--'e|| '--'n|
`------'`------'`------'`------'
stream data for tests: schema-driven elements, fed lazily through a producer.
'''

import numpy as np
from faker import Faker
from leftover import from_iterable, Producer
from typing import Any, Dict, Iterator, Optional, Tuple


class Generator:
    """schema interpreter."""

    def __init__(self, seed: Optional[int] = None):
        self._fake = Faker()
        if seed is not None:
            self._fake.seed_instance(seed)
            self._rng = np.random.default_rng(seed)
        else:
            self._rng = np.random.default_rng()

    def _resolve_faker_method(self, method_name: str, kwargs: Optional[Dict] = None) -> Any:
        try:
            method = getattr(self._fake, method_name)
        except AttributeError:
            raise ValueError(f"faker has no provider '{method_name}'")
        return method(**(kwargs or {}))

    def _resolve_provider(self, config: Dict, context: Dict) -> Any:
        provider = config["_qen_provider"]
        if provider == "ref":
            key = config["key"]
            if key not in context:
                raise ValueError(f"reference to '{key}' not found in current context.")
            return context[key]

        elif provider == "choice":
            # convert numpy's choice result to a native python type
            choice_result = self._rng.choice(config["from"])
            return choice_result.item() if hasattr(choice_result, 'item') else choice_result

        elif provider == "literal":
            if "value" not in config:
                raise ValueError("_qen_provider 'literal' requires a 'value' key.")
            return config["value"]

        else:
            raise ValueError(f"unknown _qen_provider: '{provider}'")

    def create(self, schema: Any, context: Optional[Dict] = None) -> Any:
        current_context = context or {}

        if isinstance(schema, dict):
            if "_qen_provider" in schema:
                return self._resolve_provider(schema, current_context)

            # fields may refer to the ones generated before them
            generated_obj = {}
            for k, v in schema.items():
                merged_context = {**current_context, **generated_obj}
                generated_obj[k] = self.create(v, merged_context)
            return generated_obj

        if isinstance(schema, str):
            if hasattr(self._fake, schema):
                return self._resolve_faker_method(schema)
            return schema  # otherwise, it's a literal string.

        if isinstance(schema, tuple) and len(schema) == 2 and isinstance(schema[1], dict):
            return self._resolve_faker_method(schema[0], schema[1])

        return schema

    def run_length(self, length: Tuple[int, int]) -> int:
        low, high = length
        return int(self._rng.integers(low, high, endpoint=True))


class _SchemaProvider:
    def __init__(self, schema: Any, seed: Optional[int] = None):
        self._schema = schema
        self._generator = Generator(seed)

    def take(self, count: int) -> Producer:
        """`count` generated elements, created only as the producer is stepped"""
        def elements() -> Iterator[Any]:
            for _ in range(count):
                yield self._generator.create(self._schema)
        return from_iterable(elements())

    def runs(self, count: int, length: Tuple[int, int] = (1, 4)) -> Producer:
        """
        `count` runs of generated elements, each element repeated a random number of
        times within `length`. consecutive runs may happen to share a value.
        """
        def elements() -> Iterator[Any]:
            for _ in range(count):
                value = self._generator.create(self._schema)
                for _ in range(self._generator.run_length(length)):
                    yield value
        return from_iterable(elements())

    def forever(self) -> Producer:
        """an infinite producer of generated elements"""
        def elements() -> Iterator[Any]:
            while True:
                yield self._generator.create(self._schema)
        return from_iterable(elements())


def from_schema(schema: Any, seed: Optional[int] = None) -> _SchemaProvider:
    return _SchemaProvider(schema, seed)
