"""
This example illustrates how to inject an implementation into a field declared
with an abstract type, and how two beans can refer to each other.

Since the declared type of the field is abstract, the concrete type to use is
named with Inject, inside typing.Annotated.
"""

from abc import ABC, abstractmethod
from typing import Annotated, Optional

from beanwire import Engine, Inject


class ICatsRepository(ABC):
    @abstractmethod
    def get_by_id(self, _id) -> str:
        pass


class InMemoryCatsRepository(ICatsRepository):
    def __init__(self):
        self._cats = {1: "Celine"}

    def get_by_id(self, _id) -> str:
        return self._cats[_id]


class CatsController:
    repository: Annotated[Optional[ICatsRepository], Inject(InMemoryCatsRepository)]
    router: Optional["Router"] = None


class Router:
    controller: Optional[CatsController] = None


repository = InMemoryCatsRepository()
controller = CatsController()
router = Router()

engine = Engine()
engine.register(repository, controller, router)
engine.inject()

assert controller.repository is repository
assert controller.repository.get_by_id(1) == "Celine"

# cyclic references are supported, since beans are assigned by reference
assert controller.router is router
assert router.controller is controller
