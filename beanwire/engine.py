import logging
from typing import Any, List, Optional

from beanwire.common import bean_type_identifier
from beanwire.errors import FieldAssignmentError
from beanwire.fields import DEFAULT_TAG_KEY, FieldDescriptor, get_fields
from beanwire.registry import BeanRegistry

logger = logging.getLogger(__name__)


class Engine:
    """
    Wires cross references between registered beans, by assigning their fields
    with other registered beans: by declared type, or by explicit override
    annotations when the declared type is abstract or the field is a sequence.

    Matching is best effort: fields that cannot be resolved are left untouched.
    """

    __slots__ = ("registry", "tag_key")

    def __init__(
        self,
        registry: Optional[BeanRegistry] = None,
        *,
        tag_key: str = DEFAULT_TAG_KEY,
    ):
        self.registry = registry if registry is not None else BeanRegistry()
        self.tag_key = tag_key

    def __contains__(self, key) -> bool:
        return key in self.registry

    def register(self, *beans: Any) -> "Engine":
        """
        Registers already constructed beans in the underlying registry.
        """
        self.registry.register(*beans)
        return self

    def get_fields(self, bean: Any) -> List[FieldDescriptor]:
        return get_fields(bean, self.tag_key)

    def inject(self) -> None:
        """
        Wires the fields of every registered bean, in registration order.
        Calling this method again repeats the same assignments.
        """
        for bean in self.registry.beans:
            self._inject_bean(bean)

    def _inject_bean(self, bean: Any) -> None:
        bean_type_id = bean_type_identifier(bean)

        for field in self.get_fields(bean):
            logger.debug("%s.%s: %r", bean_type_id, field.name, field.annotation)

            if not field.writable:
                logger.debug("Skipping field %s, it is not writable", field.name)
                continue

            if field.type_id == bean_type_id:
                logger.debug("Self injection is not supported, skipping %s", field.name)
                continue

            if field.is_sequence:
                value = self._resolve_sequence(field)
            else:
                value = self._resolve_single(field)

            if value is None:
                logger.debug("No bean found for %s.%s", bean_type_id, field.name)
                continue

            try:
                setattr(bean, field.name, value)
            except AttributeError as error:
                raise FieldAssignmentError(type(bean), field.name, error) from error

            logger.debug("Injected %s.%s", bean_type_id, field.name)

    def _resolve_single(self, field: FieldDescriptor) -> Any:
        child = self.registry.get(field.type_id)
        if child is None and field.override:
            # the override is a fallback: a match by declared type wins
            child = self.registry.get(field.override)
        return child

    def _resolve_sequence(self, field: FieldDescriptor) -> Any:
        if not field.override:
            return None

        children = []
        for type_id in field.override.split(","):
            child = self.registry.get(type_id.strip())
            if child is None:
                logger.debug("No bean registered for %s", type_id)
                continue
            children.append(child)

        if not children:
            return None
        return field.sequence_type(children)  # type: ignore
