import logging
from typing import Any, Dict, Iterator, List, Optional, Tuple

from beanwire.common import bean_type_identifier, is_record, type_identifier, unwrap_bean
from beanwire.errors import DuplicateRegistrationError, NotAStructError

logger = logging.getLogger(__name__)


class BeanRegistry:
    """
    Ordered collection of already constructed beans, keyed by the identifier of
    their type. At most one bean can be registered for each type.

    The registry holds references to the beans, it does not copy them nor manage
    their lifetime. It is not safe for concurrent writers: all registrations must
    complete before injecting.
    """

    __slots__ = ("_beans", "_map")

    def __init__(self):
        self._beans: List[Any] = []
        self._map: Dict[str, Any] = {}

    def __iter__(self) -> Iterator[Tuple[str, Any]]:
        for bean in self._beans:
            yield bean_type_identifier(bean), bean

    def __len__(self) -> int:
        return len(self._beans)

    def __contains__(self, key) -> bool:
        if not isinstance(key, str):
            key = type_identifier(key)
        return key in self._map

    @property
    def beans(self) -> Tuple[Any, ...]:
        return tuple(self._beans)

    def get(self, type_id: Optional[str], default: Any = None) -> Any:
        """
        Returns the bean registered for the given type identifier, or the default.
        """
        if type_id is None:
            return default
        return self._map.get(type_id, default)

    def register(self, *beans: Any) -> "BeanRegistry":
        """
        Registers the given beans, in order. Beans registered before a failing one
        remain registered.

        :raises NotAStructError: if a value is not an instance of a user-defined class
        :raises DuplicateRegistrationError: if a bean of the same type is registered
        :return: self
        """
        for value in beans:
            bean = unwrap_bean(value)
            if not is_record(bean):
                raise NotAStructError(value)

            type_id = bean_type_identifier(bean)
            logger.debug("Registering bean of type %s", type_id)

            if type_id in self._map:
                raise DuplicateRegistrationError(type_id)

            self._beans.append(bean)
            self._map[type_id] = bean
        return self
