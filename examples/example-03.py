"""
This example illustrates how to inject several beans into a sequence field, in
a given order, using dataclass field metadata instead of typing.Annotated.

Type identifiers are made of the module name and the qualified name of a class.
"""

from dataclasses import dataclass, field
from typing import List

from beanwire import Engine, type_identifier


class Middleware:
    def __call__(self, value: str) -> str:
        return value


class Strip(Middleware):
    def __call__(self, value: str) -> str:
        return value.strip()


class Upper(Middleware):
    def __call__(self, value: str) -> str:
        return value.upper()


@dataclass
class Pipeline:
    middlewares: List[Middleware] = field(
        default_factory=list,
        metadata={"inject": [Strip, Upper]},
    )

    def run(self, value: str) -> str:
        for middleware in self.middlewares:
            value = middleware(value)
        return value


pipeline = Pipeline()

engine = Engine()
engine.register(Upper(), Strip(), pipeline)
engine.inject()

assert [type(item) for item in pipeline.middlewares] == [Strip, Upper]
assert pipeline.run("  hello ") == "HELLO"
assert type_identifier(Pipeline).endswith(".Pipeline")
