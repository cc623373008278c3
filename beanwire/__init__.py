from beanwire.abc import InjectorProtocol as InjectorProtocol
from beanwire.common import class_name as class_name
from beanwire.common import type_identifier as type_identifier
from beanwire.engine import Engine as Engine
from beanwire.errors import *  # type: ignore
from beanwire.fields import FieldDescriptor as FieldDescriptor
from beanwire.fields import Inject as Inject
from beanwire.fields import bean as bean
from beanwire.fields import get_fields as get_fields
from beanwire.registry import BeanRegistry as BeanRegistry
