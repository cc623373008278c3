import dataclasses
import inspect
import logging
from collections.abc import MutableSequence, Sequence
from typing import Any, Callable, ClassVar, List, Optional, get_origin, get_type_hints

from beanwire.common import (
    is_record,
    strip_annotated,
    strip_optional,
    type_identifier,
    unwrap_bean,
)
from beanwire.errors import NotAStructError, UnreadableFieldError

logger = logging.getLogger(__name__)

DEFAULT_TAG_KEY = "inject"

_sequence_origins = {list: list, tuple: tuple, Sequence: list, MutableSequence: list}


class Inject:
    """
    Override annotation for a field, used inside typing.Annotated to name the
    bean(s) to inject when matching by the declared type is not enough:

        class Service:
            incrementor: Annotated[Incrementor, Inject(MyImplementation)]
            handlers: Annotated[List[Handler], Inject("app.ImplA,app.ImplB")]

    Targets can be classes or type identifiers; several targets are kept in the
    given order, joined by commas.
    """

    __slots__ = ("value",)

    def __init__(self, *targets):
        if not targets:
            raise TypeError("Inject requires at least one target type.")
        self.value = override_value(targets)

    def __repr__(self):
        return f"Inject({self.value!r})"


def override_value(targets) -> str:
    if isinstance(targets, str):
        return targets
    if isinstance(targets, type):
        return type_identifier(targets) or ""
    return ",".join(override_value(target) for target in targets)


def bean(globalsns=None, localns=None) -> Callable[..., Any]:
    """
    Marks a class as a bean type. This decorator is only necessary if the class
    annotations refer to locally defined types (for example, classes declared
    inside a function), to bind the caller's locals to the class.
    """
    if localns is None or globalsns is None:
        frame = inspect.currentframe()
        try:
            if localns is None:
                localns = frame.f_back.f_locals  # type: ignore
            if globalsns is None:
                globalsns = frame.f_back.f_globals  # type: ignore
        finally:
            del frame

    def decorator(cls):
        cls._locals = localns
        cls._globals = globalsns
        return cls

    return decorator


class FieldDescriptor:
    __slots__ = (
        "name",
        "annotation",
        "type_id",
        "override",
        "writable",
        "is_sequence",
        "sequence_type",
    )

    def __init__(
        self,
        name: str,
        annotation: Any,
        type_id: Optional[str],
        override: Optional[str],
        writable: bool,
        sequence_type: Optional[type] = None,
    ):
        self.name = name
        self.annotation = annotation
        self.type_id = type_id
        self.override = override
        self.writable = writable
        self.is_sequence = sequence_type is not None
        self.sequence_type = sequence_type

    def __repr__(self):
        return (
            f"<FieldDescriptor {self.name}: {self.annotation!r} "
            f"type_id={self.type_id!r} override={self.override!r} "
            f"writable={self.writable}>"
        )


def _get_type_hints(bean_type) -> dict:
    try:
        return get_type_hints(
            bean_type,
            globalns=getattr(bean_type, "_globals", None),
            localns=getattr(bean_type, "_locals", None),
            include_extras=True,
        )
    except (NameError, TypeError) as error:
        raise UnreadableFieldError(bean_type, error) from error


def _get_sequence_type(annotation) -> Optional[type]:
    if annotation in (list, tuple):
        return annotation
    return _sequence_origins.get(get_origin(annotation))


def _is_valid_tag(value) -> bool:
    if isinstance(value, (str, type)):
        return True
    return isinstance(value, (list, tuple)) and all(
        isinstance(item, (str, type)) for item in value
    )


def _get_tag_overrides(bean_type, tag_key: str) -> dict:
    if not dataclasses.is_dataclass(bean_type):
        return {}

    overrides = {}
    for field in dataclasses.fields(bean_type):
        if tag_key not in field.metadata:
            continue
        value = field.metadata[tag_key]
        if not _is_valid_tag(value):
            logger.debug(
                "Ignoring invalid %r tag of field %s: %r", tag_key, field.name, value
            )
            continue
        overrides[field.name] = override_value(value)
    return overrides


def _is_frozen(bean_type) -> bool:
    params = getattr(bean_type, "__dataclass_params__", None)
    return bool(getattr(params, "frozen", False))


def _is_read_only_property(bean_type, name: str) -> bool:
    attr = inspect.getattr_static(bean_type, name, None)
    return isinstance(attr, property) and attr.fset is None


def get_fields(bean: Any, tag_key: str = DEFAULT_TAG_KEY) -> List[FieldDescriptor]:
    """
    Returns the descriptors of all fields declared by the class of the given bean,
    including inherited ones, in declaration order; regardless of whether they can
    be written.
    """
    bean = unwrap_bean(bean)
    if not is_record(bean):
        raise NotAStructError(bean)

    bean_type = type(bean)
    tag_overrides = _get_tag_overrides(bean_type, tag_key)
    frozen = _is_frozen(bean_type)
    fields = []

    for name, hint in _get_type_hints(bean_type).items():
        annotation, metadata = strip_annotated(hint)
        annotation = strip_optional(annotation)

        # Optional[Annotated[T, ...]]
        annotation, inner_metadata = strip_annotated(annotation)
        metadata = metadata + inner_metadata

        override = next(
            (item.value for item in metadata if isinstance(item, Inject)),
            tag_overrides.get(name),
        )
        writable = not (
            name.startswith("_")
            or get_origin(annotation) is ClassVar
            or frozen
            or _is_read_only_property(bean_type, name)
        )

        fields.append(
            FieldDescriptor(
                name,
                annotation,
                type_identifier(annotation),
                override,
                writable,
                _get_sequence_type(annotation),
            )
        )
    return fields
