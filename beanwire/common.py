import types
import weakref
from collections.abc import Mapping, Sequence, Set
from numbers import Number
from typing import Annotated, Any, Optional, Union, get_args, get_origin

NoneType = type(None)

# X | Y, since Python 3.10
UnionType = getattr(types, "UnionType", Union)

_not_records = (Number, str, bytes, bytearray, Mapping, Sequence, Set)


def class_name(input_type):
    generic_alias = "<class 'types.GenericAlias'>"
    if input_type in {list, set} and str(type(input_type)) == generic_alias:
        # for Python 3.9 list[T], set[T]
        return str(input_type)
    try:
        return input_type.__name__
    except AttributeError:
        # for example, this is the case for List[str], Tuple[str, ...], etc.
        return str(input_type)


def strip_annotated(annotation):
    """
    Returns the base type of an Annotated[T, ...] hint, together with its metadata.
    """
    if get_origin(annotation) is Annotated:
        base_type, *metadata = get_args(annotation)
        return base_type, metadata
    return annotation, []


def strip_optional(annotation):
    """
    Reduces Optional[T], Union[T, None] and T | None to T. Unions of more than
    one type are returned untouched.
    """
    if get_origin(annotation) in (Union, UnionType):
        args = [arg for arg in get_args(annotation) if arg is not NoneType]
        if len(args) == 1:
            return args[0]
    return annotation


def unwrap_bean(obj: Any) -> Any:
    """
    Follows at most one level of reference indirection (a weakref.ref).
    """
    if isinstance(obj, weakref.ReferenceType):
        return obj()
    return obj


def is_record(obj: Any) -> bool:
    """
    Returns a value indicating whether the given object is an instance of a
    user-defined class, which is the only kind of object that can be a bean.
    """
    if obj is None or isinstance(obj, (type,) + _not_records):
        return False
    return type(obj).__module__ != "builtins"


def type_identifier(obj_type: Any) -> Optional[str]:
    """
    Returns the identifier of a type, in the form "module.QualifiedName", after
    stripping Annotated and Optional wrappers; None if the type is not a class.
    """
    obj_type, _ = strip_annotated(obj_type)
    obj_type = strip_optional(obj_type)

    if not isinstance(obj_type, type) or get_origin(obj_type) is not None:
        return None
    return f"{obj_type.__module__}.{obj_type.__qualname__}"


def bean_type_identifier(bean: Any) -> str:
    return type_identifier(type(bean))  # type: ignore
