from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Annotated, ClassVar, List, Optional, Sequence, Tuple

from beanwire import Inject


class B:
    _names: List[str]
    b: Optional["B"] = None

    def __init__(self, names=None):
        self._names = names or []


class A:
    _num: int
    _s: str
    b: Optional[B] = None

    def __init__(self, num: int = 0, s: str = ""):
        self._num = num
        self._s = s


# abstract interface
class Incrementor(ABC):
    @abstractmethod
    def inc(self, value: int) -> int:
        pass


class MyImplementation(Incrementor):
    def inc(self, value: int) -> int:
        return value + 1


class OtherImplementation(Incrementor):
    def inc(self, value: int) -> int:
        return value + 100


class MyStruct:
    my_incrementor: Annotated[
        Optional[Incrementor], Inject("tests.examples.MyImplementation")
    ] = None


class MyStructByClass:
    my_incrementor: Annotated[Optional[Incrementor], Inject(MyImplementation)] = None


class Foo:
    bar: Annotated[Optional["Bar"], Inject("tests.examples.Bar")] = None


class Bar:
    foo: Annotated[Optional[Foo], Inject("tests.examples.Foo")] = None


class Handler(ABC):
    @abstractmethod
    def handle(self) -> str:
        pass


class ImplA(Handler):
    def handle(self) -> str:
        return "A"


class ImplB(Handler):
    def handle(self) -> str:
        return "B"


class Dispatcher:
    handlers: Annotated[
        List[Handler], Inject("tests.examples.ImplA,tests.examples.ImplB")
    ] = []


class ReversedDispatcher:
    handlers: Annotated[Sequence[Handler], Inject(ImplB, ImplA)] = ()


class TupleDispatcher:
    handlers: Annotated[
        Tuple[Handler, ...], Inject("tests.examples.ImplA, tests.examples.ImplB")
    ] = ()


class UntaggedDispatcher:
    handlers: List[Handler] = []


class PartialDispatcher:
    handlers: Annotated[
        List[Handler],
        Inject("tests.examples.Missing,tests.examples.ImplB,tests.examples.ImplA"),
    ] = []


class PrecedenceOfTypeOverTag:
    implementation: Annotated[
        Optional[MyImplementation], Inject(OtherImplementation)
    ] = None


class Node:
    parent: Optional["Node"] = None
    name: str = "node"


class Unresolvable:
    repository: Optional["Repository"] = None
    incrementor: Annotated[Optional[Incrementor], Inject("tests.examples.Nope")] = None


class Repository:
    pass


class Settings:
    pass


class ServiceWithHiddenFields:
    _repository: Optional[Repository] = None
    shared_repository: ClassVar[Optional[Repository]] = None
    settings: Optional[Settings] = None
    repository: Optional[Repository]

    @property  # type: ignore
    def repository(self) -> Optional[Repository]:
        return self._repository


@dataclass
class DataService:
    repository: Optional[Repository] = None
    incrementor: Optional[Incrementor] = field(
        default=None, metadata={"inject": "tests.examples.MyImplementation"}
    )
    handlers: List[Handler] = field(
        default_factory=list,
        metadata={"inject": "tests.examples.ImplB,tests.examples.ImplA"},
    )


@dataclass
class CustomTagService:
    incrementor: Optional[Incrementor] = field(
        default=None, metadata={"wire": MyImplementation}
    )


@dataclass(frozen=True)
class FrozenService:
    repository: Optional[Repository] = None


class SlottedService:
    __slots__ = ()

    repository: Optional[Repository]


class Base:
    repository: Optional[Repository] = None


class Derived(Base):
    settings: Optional[Settings] = None


class PipeOptionalService:
    repository: "Repository | None" = None


@dataclass
class MalformedTagService:
    repository: Optional[Repository] = field(default=None, metadata={"inject": None})
    settings: Optional[Settings] = field(default=None, metadata={"inject": 42})
    incrementor: Optional[Incrementor] = field(
        default=None, metadata={"inject": [MyImplementation, 3]}
    )
