"""
This example illustrates a basic usage of the Engine class to wire two beans
together, by the type hints of their fields.

Beans are constructed by the caller, then registered; the Engine assigns the
registered instances to the fields whose declared type matches their type.
"""

from typing import Optional

from beanwire import Engine


class A:
    pass


class B:
    friend: Optional[A] = None


a = A()
b = B()

engine = Engine()
engine.register(a, b)
engine.inject()

assert b.friend is a
